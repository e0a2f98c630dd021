"""
Session Bridge - Connects the routing table to the X session.

pynput's GlobalHotKeys listener runs on its own thread. Each trigger is
posted to the GLib main loop with GLib.idle_add, so every action runs
on the loop thread, one at a time, in press order.
"""

import signal
from functools import partial

from gi.repository import GLib
from loguru import logger
from pynput import keyboard

from uiauto.hotkeys.router import HotkeyRegistry


class SessionBridge:
    """
    Owns the hotkey listener, main loop and status icon.

    Args:
        registry: Frozen HotkeyRegistry to dispatch into
        tray: Show the status icon
    """

    def __init__(self, registry: HotkeyRegistry, tray: bool = True):
        self.registry = registry
        self.tray = tray
        self._loop = GLib.MainLoop()
        self._listener = None
        self._indicator = None

    def hotkey_map(self) -> dict:
        """
        Build the pynput hotkey -> callback mapping from the routes.

        Two combos spelled differently can name the same chord; the one
        registered last wins.
        """
        hotkeys = {}
        for route in self.registry.routes.values():
            if route.hotkey in hotkeys:
                logger.warning(f"{route.combo} overrides an earlier binding of {route.hotkey}")
            hotkeys[route.hotkey] = partial(self._on_hotkey, route.combo)
        return hotkeys

    def _on_hotkey(self, combo: str) -> None:
        """Listener thread: hand the trigger to the main loop."""
        GLib.idle_add(self._dispatch, combo)

    def _dispatch(self, combo: str) -> bool:
        """Main loop: run the bound action."""
        logger.debug(f"Hotkey {combo} pressed")
        self.registry.dispatch(combo)
        return GLib.SOURCE_REMOVE

    def run(self) -> None:
        """Start listening and block until quit() is called."""
        try:
            self._listener = keyboard.GlobalHotKeys(self.hotkey_map())
        except ValueError as e:
            # pynput rejected a hotkey that passed combo validation
            logger.error(f"Could not install hotkeys: {e}")
            return

        self._listener.daemon = True
        self._listener.start()
        logger.info(f"Listening for {len(self.registry.routes)} hotkeys")

        if self.tray:
            self._indicator = self._start_tray()

        for signum in (signal.SIGINT, signal.SIGTERM):
            GLib.unix_signal_add(GLib.PRIORITY_DEFAULT, signum, self._on_signal)

        self._loop.run()
        logger.info("uiauto stopped")

    def _start_tray(self):
        """Show the status icon, or run iconless if GTK 3 is unavailable."""
        try:
            from uiauto.session.tray import create_tray
        except (ImportError, ValueError) as e:
            logger.warning(f"GTK 3 not available, running without tray icon: {e}")
            return None
        return create_tray(on_quit=self.quit)

    def _on_signal(self) -> bool:
        self.quit()
        return GLib.SOURCE_REMOVE

    def quit(self) -> None:
        """Stop the listener and leave the main loop."""
        if self._listener is not None:
            self._listener.stop()
            self._listener = None
        if self._loop.is_running():
            self._loop.quit()
