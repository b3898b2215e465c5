"""
Shared styling for validated input widgets.

Colors follow WCAG AA contrast requirements against the default
light background.
"""

from typing import Any, Protocol


class StyleableWidget(Protocol):
    """Protocol for widgets that can be styled."""

    def setStyleSheet(self, styleSheet: str) -> None: ...
    def style(self) -> Any: ...


class AccessiblePalette:
    """Colors used for validation feedback."""

    BORDER_DEFAULT = "#dee2e6"  # Light border
    BORDER_ERROR = "#dc3545"  # Error state border

    BACKGROUND_DEFAULT = "#ffffff"
    TEXT_PRIMARY = "#212529"
    TEXT_ERROR = "#b02a37"  # Darker red so small label text keeps 4.5:1


class StyleSheets:
    """Reusable stylesheet definitions using the accessible palette."""

    @staticmethod
    def get_input_validation_style(is_valid: bool) -> str:
        """Get the line edit stylesheet for a valid or invalid state."""
        if is_valid:
            return ""
        return f"""
            QLineEdit {{
                border: 2px solid {AccessiblePalette.BORDER_ERROR};
                background-color: {AccessiblePalette.BACKGROUND_DEFAULT};
                color: {AccessiblePalette.TEXT_PRIMARY};
            }}
        """

    @staticmethod
    def get_error_label_style() -> str:
        """Get the stylesheet for an inline error label."""
        return f"QLabel {{ color: {AccessiblePalette.TEXT_ERROR}; font-size: 11px; }}"


def apply_validation_style(widget: StyleableWidget, is_valid: bool) -> None:
    """
    Apply validation-based styling to an input widget.

    Args:
        widget: The input widget to style
        is_valid: Whether the input is valid
    """
    widget.setStyleSheet(StyleSheets.get_input_validation_style(is_valid))

    # Force style refresh
    widget.style().unpolish(widget)
    widget.style().polish(widget)
