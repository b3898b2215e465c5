"""
Background validation for forms.

Runs a Validator in a QThread so large forms do not block the UI. Error
display stays on the GUI thread because display sinks queue their updates
to the thread owning the widget.
"""

from __future__ import annotations

import logging
from enum import Enum

from PySide6.QtCore import QObject, Qt, QThread, Signal, Slot

from core.error_handler import get_error_handler
from core.errors import BaseAppError

from .validator import Validator

logger = logging.getLogger(__name__)


class ValidationMode(Enum):
    """Which aggregate check the worker runs."""

    ALL = "all"  # Validator.is_valid
    ANY = "any"  # Validator.is_any_valid


class ValidationWorker(QThread):
    """
    QThread-based worker that runs one aggregate validation.

    Exactly one terminal signal is emitted per run.

    Signals:
        validationCompleted(bool): The aggregate result
        validationError(str, str): Error type name and user-facing message when the
            validator is misconfigured or a callback raised
    """

    validationCompleted = Signal(bool)
    validationError = Signal(str, str)  # error_type, message

    def __init__(
        self,
        validator: Validator,
        mode: ValidationMode = ValidationMode.ALL,
        *,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self.validator = validator
        self.mode = mode
        self.setObjectName("ValidationWorker")

    def run(self) -> None:
        """Run the validation in the worker thread."""
        try:
            if self.mode is ValidationMode.ANY:
                result = self.validator.is_any_valid()
            else:
                result = self.validator.is_valid()
        except BaseAppError as e:
            self._report(e)
        except Exception as e:
            # Success callbacks are user code
            logger.exception("Unexpected error during validation")
            self._report(e)
        else:
            logger.debug(f"Validation ({self.mode.value}) finished: {result}")
            self.validationCompleted.emit(result)

    def _report(self, exception: Exception) -> None:
        """Log through the ErrorHandler and emit validationError."""
        handler = get_error_handler()
        app_error = handler.handle(exception, {"mode": self.mode.value})
        self.validationError.emit(type(exception).__name__, handler.to_user_message(app_error))


class ValidationController(QObject):
    """
    Manages the lifecycle of ValidationWorker threads.

    Only one validation runs at a time; starting another while one is
    active is ignored with a warning.
    """

    validationStarted = Signal()
    validationFinished = Signal()  # Emitted after cleanup
    validationCompleted = Signal(bool)
    validationError = Signal(str, str)

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.current_worker: ValidationWorker | None = None
        self.setObjectName("ValidationController")

    def is_running(self) -> bool:
        """Check if a validation is currently running."""
        return self.current_worker is not None and self.current_worker.isRunning()

    def start_validation(self, validator: Validator, mode: ValidationMode = ValidationMode.ALL) -> bool:
        """
        Start a validation in a worker thread.

        Returns:
            False if another validation is still running
        """
        if self.current_worker is not None:
            logger.warning("Cannot start validation: another validation is already running")
            return False

        validator.refresh_text()
        self.current_worker = ValidationWorker(validator, mode, parent=self)

        self.current_worker.validationCompleted.connect(self.validationCompleted, Qt.ConnectionType.QueuedConnection)
        self.current_worker.validationError.connect(self.validationError, Qt.ConnectionType.QueuedConnection)
        self.current_worker.finished.connect(self._cleanup_worker, Qt.ConnectionType.QueuedConnection)

        self.validationStarted.emit()
        self.current_worker.start()
        return True

    @Slot()
    def _cleanup_worker(self) -> None:
        """Release the finished worker. Connected to the worker's finished signal."""
        worker = self.current_worker
        self.current_worker = None

        if worker is not None:
            worker.validationCompleted.disconnect(self.validationCompleted)
            worker.validationError.disconnect(self.validationError)
            worker.finished.disconnect(self._cleanup_worker)

            if worker.isRunning():
                worker.wait(1000)
            worker.deleteLater()

        self.validationFinished.emit()

    def wait_for_completion(self, timeout_ms: int = 0) -> bool:
        """Wait for the current worker to finish. Meant for shutdown and tests."""
        if self.current_worker:
            if timeout_ms:
                return self.current_worker.wait(timeout_ms)
            return self.current_worker.wait()
        return True
