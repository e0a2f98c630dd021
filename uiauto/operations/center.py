"""
Center Operation - Resize the active window to 75% and center it.

Screen size is queried on every trigger (displays can change between
presses), then the rectangle is handed to wmctrl.
"""

from typing import Optional

from loguru import logger

from uiauto.hotkeys.router import WindowOperation
from uiauto.services import wmctrl
from uiauto.services.geometry import CENTER_SCALE, GeometryError, compute_centered_rect
from uiauto.services.screen import DisplayProvider, XrandrDisplayProvider


class CenterOperation(WindowOperation):
    """Center the active window at a fixed fraction of the screen."""

    name = "center"

    def __init__(self, display: Optional[DisplayProvider] = None, scale: float = CENTER_SCALE):
        self.display = display or XrandrDisplayProvider()
        self.scale = scale

    def run(self) -> None:
        try:
            screen = self.display.primary_geometry()
            rect = compute_centered_rect(screen, self.scale)
        except GeometryError as e:
            logger.error(f"Error centering window: {e}")
            return

        logger.debug(f"Centering active window at {rect}")
        wmctrl.move_active_window(rect)
