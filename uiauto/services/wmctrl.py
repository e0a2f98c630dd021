"""
Window control primitives backed by `wmctrl`.

Both calls are fire-and-forget from the caller's point of view: they
return False on failure after logging, and are never retried.
"""

from loguru import logger

from uiauto.services.geometry import TargetRect
from uiauto.utils.helpers import ToolError, run_tool


def focus_window(window_class: str) -> bool:
    """
    Raise and focus the first window whose WM_CLASS matches.

    Args:
        window_class: Class name, e.g. "Firefox"

    Returns:
        True if wmctrl reported success
    """
    try:
        result = run_tool(["wmctrl", "-x", "-a", window_class])
    except ToolError as e:
        logger.error(f"Error focusing {window_class}: {e}")
        return False

    if result.returncode != 0:
        logger.error(f"Error focusing {window_class}: wmctrl exited with {result.returncode}")
        return False
    return True


def move_active_window(rect: TargetRect) -> bool:
    """
    Move and resize the active window.

    Args:
        rect: Target position and size in screen pixels

    Returns:
        True if wmctrl reported success
    """
    # gravity 0 = window's own gravity
    geometry = f"0,{rect.x},{rect.y},{rect.width},{rect.height}"
    try:
        result = run_tool(["wmctrl", "-r", ":ACTIVE:", "-e", geometry])
    except ToolError as e:
        logger.error(f"Error moving active window: {e}")
        return False

    if result.returncode != 0:
        logger.error(f"Error moving active window: wmctrl exited with {result.returncode}")
        return False
    return True
