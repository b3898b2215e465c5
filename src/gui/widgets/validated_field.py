"""
Decorated text input: a line edit with an inline error label beneath it.
"""

from PySide6.QtWidgets import QLabel, QLineEdit, QVBoxLayout, QWidget

from gui.utils.styling import StyleSheets, apply_validation_style


class ValidatedField(QWidget):
    """
    Container around a QLineEdit that can display an error message.

    The error label stays hidden while there is no error.
    """

    def __init__(self, placeholder: str = "", parent: QWidget | None = None) -> None:
        """
        Initialize the field.

        Args:
            placeholder: Placeholder text for the inner line edit
            parent: Parent widget
        """
        super().__init__(parent)
        self._error: str | None = None
        self._setup_ui(placeholder)

    def _setup_ui(self, placeholder: str) -> None:
        """Set up the user interface."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(2)

        self._line_edit = QLineEdit()
        self._line_edit.setPlaceholderText(placeholder)
        self._line_edit.setAccessibleName(placeholder or "Text input")
        layout.addWidget(self._line_edit)

        self._error_label = QLabel()
        self._error_label.setObjectName("fieldError")
        self._error_label.setWordWrap(True)
        self._error_label.setStyleSheet(StyleSheets.get_error_label_style())
        self._error_label.setAccessibleName("Field error")
        self._error_label.hide()
        layout.addWidget(self._error_label)

    def line_edit(self) -> QLineEdit:
        """Get the inner line edit."""
        return self._line_edit

    def text(self) -> str:
        """Get the current text of the inner line edit."""
        return self._line_edit.text()

    def set_text(self, text: str) -> None:
        """Set the text of the inner line edit."""
        self._line_edit.setText(text)

    def error(self) -> str | None:
        """Get the displayed error, or None when the field is clean."""
        return self._error

    def error_label(self) -> QLabel:
        """Get the label used to show errors."""
        return self._error_label

    def set_error(self, message: str | None) -> None:
        """
        Show an error under the line edit, or clear it.

        Args:
            message: Error text; None or an empty string clears the error
        """
        self._error = message or None

        self._line_edit.setProperty("hasError", self._error is not None)
        apply_validation_style(self._line_edit, self._error is None)

        if self._error is None:
            self._error_label.clear()
            self._error_label.hide()
            self._line_edit.setAccessibleDescription("")
        else:
            self._error_label.setText(self._error)
            self._error_label.show()
            self._line_edit.setAccessibleDescription(f"Error: {self._error}")
