"""
Hotkeys package - Combo parsing and the routing table.

Maps configured key combos to launch-or-focus and window actions and
dispatches key presses to them.
"""

from .combo import ComboError, join_combo, to_hotkey
from .router import (
    HotkeyRegistry,
    LaunchOrFocus,
    Route,
    WindowOp,
    WindowOperation,
    build_registry,
)

__all__ = [
    "ComboError",
    "HotkeyRegistry",
    "LaunchOrFocus",
    "Route",
    "WindowOp",
    "WindowOperation",
    "build_registry",
    "join_combo",
    "to_hotkey",
]
