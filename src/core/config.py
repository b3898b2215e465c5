"""
Configuration defaults for the input validator.

This module defines the application identifiers used by QSettings and the
default values for every supported configuration key.
"""

from pathlib import Path
from typing import Any

from PySide6.QtCore import QCoreApplication, QStandardPaths

# Application identifiers for QSettings
APP_ORGANIZATION = "InputValidator"
APP_NAME = "QtInputValidator"

# Default configuration with all supported keys and their expected types
DEFAULT_CONFIG: dict[str, Any] = {
    # Logging
    "log_level": "INFO",  # Options: "DEBUG", "INFO", "WARNING", "ERROR"
    "log_rule_failures": True,
    # Error display
    "error_tooltip_prefix": "Error: ",
    # Rule builder defaults
    "replace_ignore_case": True,
    "emoji_replacement": "",
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# JSON Schema for imported configuration (draft-07)
CONFIG_JSON_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Input validator configuration",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "log_level": {"type": "string", "enum": list(LOG_LEVELS)},
        "log_rule_failures": {"type": "boolean"},
        "error_tooltip_prefix": {"type": "string", "maxLength": 40},
        "replace_ignore_case": {"type": "boolean"},
        "emoji_replacement": {"type": "string"},
    },
}


def get_app_data_dir() -> Path:
    """
    Get the writable application data directory using QStandardPaths.

    Falls back to the config location when no app data location exists.
    """
    app_data_location = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.AppDataLocation)
    if app_data_location:
        return Path(app_data_location)

    config_location = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.ConfigLocation)
    return Path(config_location) / APP_ORGANIZATION / APP_NAME


def get_logs_dir() -> Path:
    """Get the directory where rotating log files are written."""
    return get_app_data_dir() / "logs"


def setup_qsettings() -> None:
    """
    Configure QSettings with application identifiers.

    This should be called early in application startup to ensure
    QSettings uses the correct organization and application names.
    """
    QCoreApplication.setOrganizationName(APP_ORGANIZATION)
    QCoreApplication.setApplicationName(APP_NAME)
