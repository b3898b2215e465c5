"""
Shared fixtures for the input validator tests.
"""

import os

# Set offscreen platform to prevent display errors on headless systems
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest  # noqa: E402
from PySide6.QtCore import QSettings, QStandardPaths  # noqa: E402
from PySide6.QtWidgets import QLineEdit  # noqa: E402

from core.config_manager import ConfigManager  # noqa: E402
from core.rules import Rule  # noqa: E402
from gui.widgets.validated_field import ValidatedField  # noqa: E402

# Keep logs and settings out of the real user directories
QStandardPaths.setTestModeEnabled(True)


@pytest.fixture(autouse=True)
def _qt_app(qapp):
    """Make sure a QApplication exists for every test."""
    yield qapp


class RecordingRule(Rule):
    """Rule with a fixed outcome that records every text it sees."""

    def __init__(self, result=True, error_message="Recorded rule failed", suffix=""):
        super().__init__(error_message)
        self.result = result
        self.suffix = suffix
        self.seen = []

    def transform(self, text):
        self.seen.append(text)
        return text + self.suffix

    def is_satisfied(self):
        return self.result


@pytest.fixture
def settings(tmp_path):
    """QSettings backed by a throwaway ini file."""
    return QSettings(str(tmp_path / "settings.ini"), QSettings.Format.IniFormat)


@pytest.fixture
def config_manager(settings):
    """ConfigManager over isolated settings."""
    return ConfigManager(settings)


@pytest.fixture
def line_edit(qtbot):
    """Bare QLineEdit managed by qtbot."""
    widget = QLineEdit()
    widget.setObjectName("username")
    qtbot.addWidget(widget)
    return widget


@pytest.fixture
def field(qtbot):
    """ValidatedField managed by qtbot."""
    widget = ValidatedField("Email")
    widget.setObjectName("email")
    qtbot.addWidget(widget)
    return widget
