"""
Helper utilities for uiauto.

Provides the pieces every other module leans on:
- Configuration model and TOML loading (with first-run default file)
- Running external X11 tools (wmctrl, xrandr)
"""

import shutil
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

import toml
from loguru import logger


DEFAULT_CONFIG = """[general]
app_select_prefix = "Control-Mod1"
window_manage_prefix = "Mod4-Mod1"

[app_select]
b = { command = "firefox", process_name = "firefox", window_class = "Firefox" }
t = { command = "kitty", process_name = "kitty", window_class = "kitty" }
f = { command = "dolphin", process_name = "dolphin", window_class = "dolphin" }
# Add more applications here, e.g.:
# c = { command = "chromium", process_name = "chromium", window_class = "Chromium" }

[window_manage]
m = "center"
"""

DEFAULT_GENERAL = {
    "app_select_prefix": "Control-Mod1",
    "window_manage_prefix": "Mod4-Mod1",
}

REQUIRED_TOOLS = ("wmctrl", "xrandr")


class ConfigError(Exception):
    """Configuration could not be located, created, read or validated."""


class ToolError(Exception):
    """An external command could not be executed at all."""


@dataclass(frozen=True)
class AppBinding:
    """Application descriptor bound to an app-select trigger key."""
    command: str
    process_name: str = ""
    window_class: str = ""


@dataclass(frozen=True)
class WindowAction:
    """Named window operation bound to a window-manage trigger key."""
    name: str


@dataclass(frozen=True)
class Configuration:
    """
    Immutable startup configuration.

    Attributes:
        app_select_prefix: Modifier combo shared by all app bindings
        window_manage_prefix: Modifier combo shared by all window actions
        app_select: Trigger key -> AppBinding
        window_manage: Trigger key -> WindowAction
    """
    app_select_prefix: str
    window_manage_prefix: str
    app_select: Mapping[str, AppBinding] = field(default_factory=dict)
    window_manage: Mapping[str, WindowAction] = field(default_factory=dict)


def default_config_path() -> Path:
    """
    Resolve ~/.config/uiauto/uiauto.conf.

    Raises:
        ConfigError: If the home directory cannot be determined
    """
    try:
        home = Path.home()
    except RuntimeError as e:
        raise ConfigError(f"Could not determine home directory: {e}") from e
    return home / ".config" / "uiauto" / "uiauto.conf"


def load_or_create_config(config_path: Optional[Path] = None) -> Configuration:
    """
    Load the configuration, writing the default document on first run.

    Args:
        config_path: Explicit file location, defaults to default_config_path()

    Returns:
        Parsed, validated Configuration

    Raises:
        ConfigError: On any failure; the caller must not install bindings
    """
    if config_path is None:
        config_path = default_config_path()

    try:
        exists = config_path.exists()
    except OSError as e:
        raise ConfigError(f"Could not access config file {config_path}: {e}") from e

    if not exists:
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            config_path.write_text(DEFAULT_CONFIG)
        except OSError as e:
            raise ConfigError(f"Failed to create default config file {config_path}: {e}") from e
        logger.info(f"Created default config file at {config_path}")

    try:
        data = toml.load(config_path)
    except (toml.TomlDecodeError, UnicodeDecodeError) as e:
        raise ConfigError(f"Malformed config file {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Could not read config file {config_path}: {e}") from e

    return parse_config(data)


def parse_config(data: Dict[str, Any]) -> Configuration:
    """
    Validate a decoded TOML document and build a Configuration.

    Missing [general] keys fall back to DEFAULT_GENERAL. The [app_select]
    and [window_manage] tables are taken as-is from the document.

    Raises:
        ConfigError: If any group or entry has the wrong shape
    """
    general = _deep_merge(DEFAULT_GENERAL, _table(data, "general"))
    for key in ("app_select_prefix", "window_manage_prefix"):
        if not isinstance(general[key], str):
            raise ConfigError(f"[general] {key} must be a string")

    apps = {}
    for key, entry in _table(data, "app_select").items():
        apps[str(key)] = _parse_app_binding(key, entry)

    actions = {}
    for key, name in _table(data, "window_manage").items():
        if not isinstance(name, str):
            raise ConfigError(f"[window_manage] {key} must be an operation name string")
        actions[str(key)] = WindowAction(name=name)

    return Configuration(
        app_select_prefix=general["app_select_prefix"],
        window_manage_prefix=general["window_manage_prefix"],
        app_select=MappingProxyType(apps),
        window_manage=MappingProxyType(actions),
    )


def _table(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    """Return a top-level table, or an empty one if absent."""
    value = data.get(name, {})
    if not isinstance(value, dict):
        raise ConfigError(f"[{name}] must be a table")
    return value


def _parse_app_binding(key: str, entry: Any) -> AppBinding:
    if not isinstance(entry, dict):
        raise ConfigError(f"[app_select] {key} must be a table with a 'command' field")

    command = entry.get("command", "")
    if not isinstance(command, str) or not command.strip():
        raise ConfigError(f"[app_select] {key} has an empty 'command'")

    process_name = entry.get("process_name", "")
    window_class = entry.get("window_class", "")
    if not isinstance(process_name, str) or not isinstance(window_class, str):
        raise ConfigError(f"[app_select] {key}: process_name and window_class must be strings")

    return AppBinding(command=command, process_name=process_name, window_class=window_class)


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary with defaults
        override: Dictionary with overrides

    Returns:
        Merged dictionary (override takes precedence)
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def run_tool(args: list[str]) -> subprocess.CompletedProcess:
    """
    Run an external tool synchronously and capture its text output.

    No timeout is applied: a hung tool blocks the caller until it exits.

    Args:
        args: Executable and arguments, e.g. ["xrandr"]

    Returns:
        CompletedProcess; the return code is left for the caller to judge

    Raises:
        ToolError: If the executable could not be started
    """
    try:
        return subprocess.run(args, capture_output=True, text=True)
    except OSError as e:
        raise ToolError(f"Could not run {args[0]}: {e}") from e


def missing_tools(tools=REQUIRED_TOOLS) -> list[str]:
    """Return the external tools that are not on PATH."""
    return [tool for tool in tools if shutil.which(tool) is None]
