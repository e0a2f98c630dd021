# uiauto Package
"""
Hotkey-driven desktop automation daemon for X11 sessions.

Bindings:
  - App select: launch an application, or focus it if already running
  - Window manage: geometry operations on the active window (center)
"""

__version__ = "0.1.0"
