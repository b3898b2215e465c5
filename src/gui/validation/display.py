"""
Error display sinks for input validators.

A sink is the only place a validator touches a widget. On the GUI thread it
reads the widget directly; a validator running on a worker thread reads a
cached copy of the text instead. Error updates go through a signal, so Qt
queues them to the thread that owns the widget.
"""

from __future__ import annotations

import logging

from PySide6.QtCore import QObject, QThread, Signal, Slot
from PySide6.QtWidgets import QLineEdit

from gui.utils.styling import apply_validation_style
from gui.widgets.validated_field import ValidatedField

logger = logging.getLogger(__name__)


class ErrorDisplay(QObject):
    """
    Base sink bound to one line edit.

    Subclasses implement ``_render`` to draw or clear the error.
    """

    # Signals
    errorChanged = Signal(str)  # message, "" when cleared
    errorRequested = Signal(object)  # str | None

    def __init__(self, line_edit: QLineEdit, parent: QObject | None = None) -> None:
        super().__init__(parent if parent is not None else line_edit)
        self._line_edit = line_edit
        self._text = line_edit.text()
        self._error: str | None = None

        line_edit.textChanged.connect(self._on_text_changed)
        self.errorRequested.connect(self._apply_error)

    def current_text(self) -> str:
        """
        Text of the bound input.

        Read from the widget on its own thread. Other threads get the text
        cached by the last ``textChanged`` or ``refresh_text`` call.
        """
        if QThread.currentThread() is self.thread():
            self._text = self._line_edit.text()
        return self._text

    def refresh_text(self) -> None:
        """Re-read the widget text into the cache. Call on the GUI thread."""
        self._text = self._line_edit.text()

    def error(self) -> str | None:
        """Currently displayed error, or None."""
        return self._error

    def show_error(self, message: str | None) -> None:
        """
        Display ``message``, or clear the error when it is None or empty.

        Safe to call from any thread.
        """
        self.errorRequested.emit(message)

    @Slot(str)
    def _on_text_changed(self, text: str) -> None:
        self._text = text

    @Slot(object)
    def _apply_error(self, message: str | None) -> None:
        message = message or None
        self._error = message
        self._render(message)
        self.errorChanged.emit(message or "")

    def _render(self, message: str | None) -> None:
        """
        Draw ``message`` on the widget, or clear it when None.

        Override point for subclasses; always called on the GUI thread.
        """
        raise NotImplementedError


class LineEditErrorDisplay(ErrorDisplay):
    """Shows errors on a bare QLineEdit through its tooltip and border."""

    def __init__(self, line_edit: QLineEdit, tooltip_prefix: str = "Error: ") -> None:
        super().__init__(line_edit)
        self._tooltip_prefix = tooltip_prefix
        self._original_tooltip = line_edit.toolTip()

    def _render(self, message: str | None) -> None:
        widget = self._line_edit

        # Block signals to prevent recursion
        widget.blockSignals(True)
        try:
            widget.setProperty("hasError", message is not None)
            if message is None:
                widget.setToolTip(self._original_tooltip)
            else:
                widget.setToolTip(f"{self._tooltip_prefix}{message}")
            apply_validation_style(widget, message is None)
        finally:
            widget.blockSignals(False)


class ContainerErrorDisplay(ErrorDisplay):
    """Shows errors in the inline label of a ValidatedField."""

    def __init__(self, field: ValidatedField) -> None:
        super().__init__(field.line_edit(), parent=field)
        self._field = field

    def _render(self, message: str | None) -> None:
        self._field.set_error(message)
