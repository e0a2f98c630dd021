"""
Status icon with a Quit item.

Uses AppIndicator3, or AyatanaAppIndicator3 on distributions that ship
that fork instead. Without either the daemon simply runs iconless.
"""

import importlib

import gi

gi.require_version("Gtk", "3.0")
from gi.repository import Gtk
from loguru import logger

ICON_NAME = "input-keyboard-symbolic"


def _load_indicator_module():
    """Return the first available AppIndicator binding, or None."""
    for namespace in ("AppIndicator3", "AyatanaAppIndicator3"):
        try:
            gi.require_version(namespace, "0.1")
        except ValueError:
            continue
        return importlib.import_module(f"gi.repository.{namespace}")
    return None


def create_tray(on_quit):
    """
    Show the uiauto status icon.

    Args:
        on_quit: Called without arguments when "Quit" is chosen

    Returns:
        The indicator object (keep a reference), or None if unavailable
    """
    indicator_module = _load_indicator_module()
    if indicator_module is None:
        logger.warning("No AppIndicator library found, running without tray icon")
        return None

    indicator = indicator_module.Indicator.new(
        "uiauto",
        ICON_NAME,
        indicator_module.IndicatorCategory.APPLICATION_STATUS,
    )
    indicator.set_status(indicator_module.IndicatorStatus.ACTIVE)
    indicator.set_title("UI Automation Tool")

    menu = Gtk.Menu()
    quit_item = Gtk.MenuItem(label="Quit")
    quit_item.connect("activate", lambda _item: on_quit())
    menu.append(quit_item)
    menu.show_all()
    indicator.set_menu(menu)

    return indicator
