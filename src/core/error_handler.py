"""
Centralized error handling and logging for the input validator.

This module provides a singleton ErrorHandler that captures, logs, and
translates errors into user-friendly messages while keeping the diagnostic
details in a rotating log file.
"""

from __future__ import annotations

import logging
import logging.handlers
import traceback
from typing import Any, ClassVar

from PySide6.QtCore import QObject, Signal

from .config import LOG_LEVELS, get_logs_dir
from .errors import BaseAppError, ErrorSeverity, from_exception


class ErrorHandler(QObject):
    """
    Centralized error handler with logging and user message translation.

    This singleton class provides:
    - Exception capture and normalization
    - Structured logging with rotation
    - User-friendly message generation
    - Qt signal emission for UI integration
    """

    # Signal emitted when an error is handled (thread-safe)
    errorOccurred = Signal(object)  # BaseAppError

    _instance: ClassVar[ErrorHandler | None] = None
    _logger: ClassVar[logging.Logger | None] = None

    def __new__(cls) -> ErrorHandler:
        """Ensure singleton pattern."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        """Initialize the error handler (called only once due to singleton)."""
        if hasattr(self, "_initialized"):
            return

        super().__init__()
        self._initialized = True

        self._setup_logging()

    def capture(self, exception: Exception, context: dict[str, Any] | None = None) -> BaseAppError:
        """
        Capture and normalize an exception into a BaseAppError.

        Args:
            exception: The exception to capture
            context: Optional context information

        Returns:
            BaseAppError with normalized metadata
        """
        safe_context = self._sanitize_context(context or {})

        app_error = from_exception(exception, safe_context)
        if safe_context:
            app_error.context.update(safe_context)

        if not app_error.technical_message:
            app_error.technical_message = f"{type(exception).__name__}: {exception}"

        if "traceback" not in app_error.context:
            tb_str = traceback.format_exc()
            if tb_str == "NoneType: None\n":
                # Not raised, so there is no live traceback
                tb_str = f"{type(exception).__name__}: {exception}\n"
            app_error.context["traceback"] = tb_str

        return app_error

    def handle(self, exception: Exception, context: dict[str, Any] | None = None) -> BaseAppError:
        """
        Handle an exception by capturing, logging, and emitting signals.

        Args:
            exception: The exception to handle
            context: Optional context information

        Returns:
            BaseAppError for further processing
        """
        app_error = self.capture(exception, context)

        if self._logger:
            # Rejected input is routine; only real faults are errors
            level = logging.INFO if app_error.severity == ErrorSeverity.LOW else logging.ERROR
            self._logger.log(
                level,
                f"[{app_error.code.value}] {app_error.user_message}",
                extra={
                    "app_code": app_error.code.value,
                    "error_type": app_error.type.value,
                    "severity": app_error.severity.value,
                    "retriable": app_error.retriable,
                },
            )

        self.errorOccurred.emit(app_error)

        return app_error

    def to_user_message(self, app_error: BaseAppError) -> str:
        """
        Generate a concise, user-friendly message from a BaseAppError.

        Args:
            app_error: The error to convert

        Returns:
            User-friendly message string
        """
        message = app_error.user_message

        if app_error.retriable:
            message += " You can try again."

        return message

    def _setup_logging(self) -> None:
        """Set up rotating file logging in the app data directory."""
        try:
            logs_dir = get_logs_dir()
            logs_dir.mkdir(parents=True, exist_ok=True)

            ErrorHandler._logger = logging.getLogger("input_validator.errors")
            ErrorHandler._logger.setLevel(logging.DEBUG)
            ErrorHandler._logger.propagate = False

            # Avoid duplicate handlers
            if not ErrorHandler._logger.handlers:
                file_handler = logging.handlers.RotatingFileHandler(
                    logs_dir / "app.log",
                    maxBytes=5_242_880,  # 5MB
                    backupCount=5,
                    encoding="utf-8",
                )

                formatter = logging.Formatter(
                    "%(asctime)s | %(levelname)s | %(name)s | code=%(app_code)s | %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
                file_handler.setFormatter(formatter)
                ErrorHandler._logger.addHandler(file_handler)

                if __debug__:
                    console_handler = logging.StreamHandler()
                    console_handler.setFormatter(formatter)
                    console_handler.setLevel(logging.WARNING)
                    ErrorHandler._logger.addHandler(console_handler)

        except OSError as e:
            # Fallback to basic logging if the log directory is unusable
            logging.basicConfig(level=logging.ERROR)
            logging.error(f"Failed to setup error logging: {e}")

    def _sanitize_context(self, context: dict[str, Any]) -> dict[str, Any]:
        """
        Sanitize context to prevent sensitive data leakage.

        Args:
            context: Raw context dictionary

        Returns:
            Sanitized context dictionary
        """
        safe_context: dict[str, Any] = {}
        max_items = 20

        for item_count, (key, value) in enumerate(context.items()):
            if item_count >= max_items:
                safe_context["..."] = f"({len(context) - max_items} more items truncated)"
                break

            if any(sensitive in key.lower() for sensitive in ["password", "token", "secret"]):
                safe_context[key] = "[REDACTED]"
            elif isinstance(value, str) and len(value) > 200:
                safe_context[key] = value[:200] + "..."
            elif isinstance(value, str):
                safe_context[key] = value
            else:
                safe_context[key] = repr(value)[:200]

        return safe_context


def get_error_handler() -> ErrorHandler:
    """
    Get the global ErrorHandler instance.

    Returns:
        The singleton ErrorHandler instance
    """
    return ErrorHandler()


def init_logging(log_level: str = "INFO") -> None:
    """
    Initialize logging configuration.

    Sets up the error handler's file log and basic console logging for
    the remaining modules. Unknown levels fall back to INFO.
    """
    get_error_handler()

    level = log_level.upper() if log_level.upper() in LOG_LEVELS else "INFO"
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
