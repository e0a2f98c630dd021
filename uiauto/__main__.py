"""
uiauto - Entry point.

Loads the configuration (creating the default file on first run),
builds the hotkey routing table and hands it to the session.

Usage:
  uiauto [--config PATH] [--debug] [--no-tray] [--list]
"""

import argparse
import os
import sys
from pathlib import Path

from loguru import logger

from uiauto import __version__
from uiauto.hotkeys.router import LaunchOrFocus, build_registry
from uiauto.operations import default_operations
from uiauto.services.resolver import ActionResolver
from uiauto.utils.helpers import ConfigError, load_or_create_config, missing_tools


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="uiauto",
        description="Global hotkeys to launch, focus and center applications.",
    )
    parser.add_argument("--config", type=Path, help="config file (default: ~/.config/uiauto/uiauto.conf)")
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    parser.add_argument("--no-tray", action="store_true", help="do not show the status icon")
    parser.add_argument("--list", action="store_true", help="print the bindings and exit")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def setup_logging(debug: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if debug else "INFO")


def format_routes(routes) -> list[str]:
    """Render the routing table, one binding per line."""
    lines = []
    for combo, route in sorted(routes.items()):
        action = route.action
        if isinstance(action, LaunchOrFocus):
            label = f"launch-or-focus {action.binding.command}"
        else:
            label = f"window {action.name}"
        lines.append(f"{combo:<24} {route.hotkey:<24} {label}")
    return lines


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.debug or os.environ.get("UIAUTO_DEBUG", "") in ("1", "true"))

    try:
        config = load_or_create_config(args.config)
    except ConfigError as e:
        logger.error(f"Error loading or creating config: {e}")
        return 1

    for tool in missing_tools():
        logger.warning(f"{tool} not found on PATH, related actions will fail")

    registry = build_registry(config, ActionResolver(), default_operations())

    if args.list:
        for line in format_routes(registry.routes):
            print(line)
        return 0

    from uiauto.session import SessionBridge
    SessionBridge(registry, tray=not args.no_tray).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
