"""
Shared test fixtures for the uiauto test suite.

Config fixtures write real TOML files to tmp_path (no mocking of the
filesystem). External tools are never run: tests patch run_tool and
subprocess.Popen where the code under test would reach them.
"""

import subprocess

import pytest
import toml


@pytest.fixture
def tmp_config(tmp_path):
    """Create a real uiauto.conf with app and window bindings."""
    config_path = tmp_path / "uiauto.conf"
    data = {
        "general": {
            "app_select_prefix": "Control-Mod1",
            "window_manage_prefix": "Mod4-Mod1",
        },
        "app_select": {
            "b": {"command": "firefox", "process_name": "firefox", "window_class": "Firefox"},
            "t": {"command": "kitty --hold", "process_name": "kitty", "window_class": "kitty"},
        },
        "window_manage": {"m": "center"},
    }
    config_path.write_text(toml.dumps(data))
    return config_path


@pytest.fixture
def completed():
    """Factory for CompletedProcess results returned by patched tools."""
    def _make(returncode=0, stdout="", stderr=""):
        return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)
    return _make
