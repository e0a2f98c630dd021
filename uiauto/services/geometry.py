"""
Geometry Calculator - Centered window rectangles.

A centered window occupies a fixed fraction of the screen on each axis:
  width  = floor(screen.width * scale)
  height = floor(screen.height * scale)
  x      = floor((screen.width - width) / 2)
  y      = floor((screen.height - height) / 2)

With scale in (0, 1] the result always lies inside the screen.
"""

import math
from dataclasses import dataclass

CENTER_SCALE = 0.75


class GeometryError(Exception):
    """Screen dimensions are unknown or unusable."""


@dataclass(frozen=True)
class ScreenGeometry:
    """Primary display size in pixels. Queried fresh for every request."""
    width: int
    height: int


@dataclass(frozen=True)
class TargetRect:
    """Rectangle a window should occupy, in screen pixels."""
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height


def compute_centered_rect(screen: ScreenGeometry, scale: float = CENTER_SCALE) -> TargetRect:
    """
    Compute a rectangle centered on the screen at the given scale.

    Args:
        screen: Display dimensions, both must be positive
        scale: Fraction of each dimension to occupy (0 < scale <= 1)

    Returns:
        TargetRect fully contained in the screen

    Raises:
        GeometryError: For non-positive dimensions or an out-of-range scale

    Example:
        >>> compute_centered_rect(ScreenGeometry(1920, 1080))
        TargetRect(x=240, y=135, width=1440, height=810)
    """
    if screen.width <= 0 or screen.height <= 0:
        raise GeometryError(f"Invalid screen dimensions {screen.width}x{screen.height}")
    if not 0 < scale <= 1:
        raise GeometryError(f"Scale must be within (0, 1], got {scale}")

    width = math.floor(screen.width * scale)
    height = math.floor(screen.height * scale)

    return TargetRect(
        x=(screen.width - width) // 2,
        y=(screen.height - height) // 2,
        width=width,
        height=height,
    )
