# uiauto Services Package
"""
Backend services for uiauto.

Services hold the decision logic (launch vs. focus, window geometry)
and wrap the external X11 tools they depend on.
"""

from .geometry import ScreenGeometry, TargetRect, compute_centered_rect
from .resolver import ActionResolver
from .screen import DisplayProvider, XrandrDisplayProvider

__all__ = [
    "ActionResolver",
    "DisplayProvider",
    "ScreenGeometry",
    "TargetRect",
    "XrandrDisplayProvider",
    "compute_centered_rect",
]
