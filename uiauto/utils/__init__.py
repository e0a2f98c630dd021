# uiauto Utilities Package
"""
Configuration loading and small helpers shared across uiauto.
"""

from .helpers import (
    AppBinding,
    ConfigError,
    Configuration,
    ToolError,
    WindowAction,
    load_or_create_config,
    run_tool,
)

__all__ = [
    "AppBinding",
    "ConfigError",
    "Configuration",
    "ToolError",
    "WindowAction",
    "load_or_create_config",
    "run_tool",
]
