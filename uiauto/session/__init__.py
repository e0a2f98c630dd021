"""
Session package - X11 session glue.

Owns the global hotkey listener, the GLib main loop the routing table is
dispatched on, and the status icon.
"""

from .bridge import SessionBridge

__all__ = ["SessionBridge"]
