"""
Tests for the command line options of the demo entry point.
"""

import json

from core.config import DEFAULT_CONFIG
from gui.main import apply_config_options, parse_args


class TestParseArgs:
    """Test option parsing."""

    def test_defaults(self) -> None:
        args = parse_args([])
        assert args.config is None
        assert args.reset_config is False

    def test_ignores_qt_options(self, tmp_path) -> None:
        args = parse_args(["-platform", "offscreen", "--config", str(tmp_path / "a.json")])
        assert args.config == tmp_path / "a.json"


class TestApplyConfigOptions:
    """Test importing and resetting settings at startup."""

    def test_imports_config_file(self, config_manager, tmp_path) -> None:
        path = tmp_path / "validator.json"
        path.write_text(json.dumps({"error_tooltip_prefix": "! "}), encoding="utf-8")

        assert apply_config_options(config_manager, parse_args(["--config", str(path)])) is True
        assert config_manager.get("error_tooltip_prefix") == "! "

    def test_rejected_file_keeps_settings(self, config_manager, tmp_path, capsys) -> None:
        config_manager.set("log_level", "DEBUG")
        path = tmp_path / "validator.json"
        path.write_text(json.dumps({"log_level": "LOUD"}), encoding="utf-8")

        assert apply_config_options(config_manager, parse_args(["--config", str(path)])) is False
        assert config_manager.get("log_level") == "DEBUG"
        assert "Configuration is invalid" in capsys.readouterr().err

    def test_reset_then_import(self, config_manager, tmp_path) -> None:
        config_manager.set("emoji_replacement", "?")
        path = tmp_path / "validator.json"
        path.write_text(json.dumps({"log_level": "WARNING"}), encoding="utf-8")

        apply_config_options(config_manager, parse_args(["--reset-config", "--config", str(path)]))

        assert config_manager.load_all() == {**DEFAULT_CONFIG, "log_level": "WARNING"}
