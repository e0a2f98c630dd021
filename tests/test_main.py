"""
Tests for the command-line entry point.

Only --list is exercised end to end; it never connects to the session.
"""

from unittest.mock import patch

from uiauto.__main__ import main


class TestMain:

    def test_list_prints_bindings(self, tmp_config, capsys):
        assert main(["--config", str(tmp_config), "--list"]) == 0

        out = capsys.readouterr().out
        assert "Control-Mod1-b" in out
        assert "launch-or-focus kitty --hold" in out
        assert "window center" in out

    def test_first_run_writes_default_config(self, tmp_path, capsys):
        config_path = tmp_path / "uiauto" / "uiauto.conf"
        assert main(["--config", str(config_path), "--list"]) == 0
        assert config_path.exists()
        assert "<ctrl>+<alt>+b" in capsys.readouterr().out

    def test_config_error_exits_without_bindings(self, tmp_path):
        config_path = tmp_path / "uiauto.conf"
        config_path.write_text("[app_select]\nb = 3\n")
        with patch("uiauto.__main__.build_registry") as build:
            assert main(["--config", str(config_path)]) == 1
        build.assert_not_called()
