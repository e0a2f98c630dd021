"""
Window operations - Named actions on the active window.

Each operation subclasses WindowOperation and is referenced by name from
the [window_manage] table.
"""

from .center import CenterOperation


def default_operations() -> tuple:
    """Instantiate every built-in window operation."""
    return (CenterOperation(),)


__all__ = ["CenterOperation", "default_operations"]
