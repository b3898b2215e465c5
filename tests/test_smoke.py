"""
Smoke tests for the input validator package.
These tests verify basic imports and environment setup.
"""

import sys


def test_pyside6_imports() -> None:
    """Test that PySide6 can be imported successfully."""
    import PySide6  # noqa: F401
    from PySide6.QtWidgets import QApplication  # noqa: F401


def test_public_api_imports() -> None:
    """Test that the public validation API is importable."""
    from gui.validation import InputValidator, Validator, not_blank_validator

    assert callable(not_blank_validator)
    assert InputValidator is not None
    assert Validator is not None


def test_main_module_components() -> None:
    """Test the entry point module."""
    from PySide6.QtWidgets import QApplication

    from gui import main

    app = QApplication.instance() or QApplication(sys.argv)  # noqa: F841

    assert hasattr(main, "main")
    assert callable(main.main)
