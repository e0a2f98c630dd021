"""
Display discovery - Primary screen dimensions.

Consumers depend only on DisplayProvider.primary_geometry(), so the
xrandr text scraping below can be replaced by another source without
touching the geometry code.

Only the first connected output is considered. On multi-monitor setups
it may not be the display holding the active window.
"""

import re
from abc import ABC, abstractmethod

from loguru import logger

from uiauto.services.geometry import GeometryError, ScreenGeometry
from uiauto.utils.helpers import ToolError, run_tool

# "1920x1080" optionally followed by a "+X+Y" position offset
_RESOLUTION_RE = re.compile(r"(\d+)x(\d+)(?:[+-]\d+[+-]\d+)?")


class DisplayProvider(ABC):
    """Capability: report the primary display size."""

    @abstractmethod
    def primary_geometry(self) -> ScreenGeometry:
        """
        Return the current primary display size.

        Raises:
            GeometryError: If no usable display could be found
        """
        ...


class XrandrDisplayProvider(DisplayProvider):
    """Reads the first connected output from `xrandr`."""

    command = ["xrandr"]

    def primary_geometry(self) -> ScreenGeometry:
        try:
            result = run_tool(self.command)
        except ToolError as e:
            raise GeometryError(str(e)) from e

        if result.returncode != 0:
            raise GeometryError(
                f"xrandr exited with {result.returncode}: {result.stderr.strip()}"
            )

        geometry = parse_xrandr_output(result.stdout)
        logger.debug(f"Primary display is {geometry.width}x{geometry.height}")
        return geometry


def parse_xrandr_output(output: str) -> ScreenGeometry:
    """
    Extract the size of the first connected output.

    Args:
        output: Text printed by `xrandr`, e.g.
            "eDP-1 connected primary 1920x1080+0+0 (normal left ...) ..."

    Returns:
        ScreenGeometry of the first line whose status is "connected"

    Raises:
        GeometryError: If no connected line exists, or the first one
            carries no resolution or a zero dimension
    """
    for line in output.splitlines():
        fields = line.split()
        # "disconnected" never matches: the status must be the exact word
        if len(fields) < 2 or fields[1] != "connected":
            continue

        for token in fields[2:]:
            match = _RESOLUTION_RE.fullmatch(token)
            if match:
                width, height = int(match.group(1)), int(match.group(2))
                if width == 0 or height == 0:
                    raise GeometryError(f"Zero screen dimension parsed from: {line.strip()}")
                return ScreenGeometry(width=width, height=height)

        raise GeometryError(f"No resolution on connected output: {line.strip()}")

    raise GeometryError("No connected display found in xrandr output")
