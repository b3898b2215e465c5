"""
Main entry point for the input validator demo.
"""

import argparse
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

from core.config_manager import ConfigManager
from core.error_handler import get_error_handler, init_logging
from core.errors import ConfigError
from gui.main_window import MainWindow


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse the demo's own options, leaving Qt options alone."""
    parser = argparse.ArgumentParser(prog="qt-input-validator")
    parser.add_argument("--config", type=Path, help="JSON file with settings to import")
    parser.add_argument("--reset-config", action="store_true", help="Restore default settings before starting")
    args, _qt_args = parser.parse_known_args(argv)
    return args


def apply_config_options(config_manager: ConfigManager, args: argparse.Namespace) -> bool:
    """
    Apply --reset-config and --config to the stored settings.

    Returns:
        False if the config file was rejected; stored settings are left as they were
    """
    if args.reset_config:
        config_manager.reset_to_defaults()

    if args.config is not None:
        try:
            config_manager.import_config_file(args.config)
        except ConfigError as e:
            handler = get_error_handler()
            handler.handle(e, {"path": str(args.config)})
            print(handler.to_user_message(e), file=sys.stderr)
            return False

    return True


def main() -> int:
    """Main application entry point."""
    app = QApplication(sys.argv)

    config_manager = ConfigManager()
    apply_config_options(config_manager, parse_args(app.arguments()[1:]))
    init_logging(config_manager.get("log_level"))

    window = MainWindow(config_manager)
    window.show()

    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
