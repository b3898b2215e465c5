"""
Error taxonomy for the input validator.

Configuration errors (a validator wired without a display target, rules or
members) are raised immediately. Input failures never raise: they travel as
ValidationError instances to the error handler for logging only.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class ErrorType(Enum):
    """Error type categories for consistent error handling."""

    VALIDATION = "validation"
    CONFIG = "config"
    SYSTEM = "system"


class ErrorCode(Enum):
    """Specific error codes for common scenarios."""

    # Input failures reported by rules
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_FORMAT = "INVALID_FORMAT"
    VALUE_OUT_OF_RANGE = "VALUE_OUT_OF_RANGE"
    REQUIRED_FIELD_MISSING = "REQUIRED_FIELD_MISSING"

    # Wiring errors
    MISSING_TARGET = "MISSING_TARGET"
    AMBIGUOUS_TARGET = "AMBIGUOUS_TARGET"
    NO_RULES_CONFIGURED = "NO_RULES_CONFIGURED"
    NO_VALIDATORS_CONFIGURED = "NO_VALIDATORS_CONFIGURED"
    CONFIG_INVALID = "CONFIG_INVALID"
    CONFIG_PARSE_ERROR = "CONFIG_PARSE_ERROR"

    # Generic
    UNKNOWN = "UNKNOWN"


class ErrorSeverity(Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class BaseAppError(Exception):
    """
    Base application error with structured metadata.

    Root of all custom errors, carrying what the error handler needs to log
    and what the UI needs to show.
    """

    type: ErrorType
    code: ErrorCode
    user_message: str
    technical_message: str | None = None
    severity: ErrorSeverity = ErrorSeverity.MEDIUM
    retriable: bool = False
    context: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        """Return user-friendly error message."""
        return self.user_message

    def __repr__(self) -> str:
        """Return detailed error representation for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"type={self.type.value}, "
            f"code={self.code.value}, "
            f"message='{self.user_message}'"
            f")"
        )


class ValidationError(BaseAppError):
    """A field's text was rejected by one of its rules."""

    def __init__(
        self,
        code: ErrorCode,
        user_message: str,
        field: str | None = None,
        technical_message: str | None = None,
        severity: ErrorSeverity = ErrorSeverity.LOW,
        context: dict[str, Any] | None = None,
    ):
        context = context or {}
        if field:
            context["field"] = field

        super().__init__(
            type=ErrorType.VALIDATION,
            code=code,
            user_message=user_message,
            technical_message=technical_message,
            severity=severity,
            retriable=False,
            context=context,
        )

    @property
    def field(self) -> str | None:
        """Get the field that caused the validation error."""
        return self.context.get("field")


class ConfigError(BaseAppError):
    """A validator was wired incorrectly. Never caused by user input."""

    def __init__(
        self,
        code: ErrorCode,
        user_message: str,
        technical_message: str | None = None,
        severity: ErrorSeverity = ErrorSeverity.HIGH,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(
            type=ErrorType.CONFIG,
            code=code,
            user_message=user_message,
            technical_message=technical_message,
            severity=severity,
            retriable=False,
            context=context or {},
        )


class MissingTargetError(ConfigError):
    """Raised when an InputValidator is built without a widget to report to."""

    def __init__(self, message: str = "There's no input to validate"):
        super().__init__(code=ErrorCode.MISSING_TARGET, user_message=message)


class AmbiguousTargetError(ConfigError):
    """Raised when an InputValidator is given both a line edit and a container."""

    def __init__(self, message: str = "Bind either a line edit or a container, not both"):
        super().__init__(code=ErrorCode.AMBIGUOUS_TARGET, user_message=message)


class NoRulesConfiguredError(ConfigError):
    """Raised when an InputValidator runs with an empty rule list."""

    def __init__(self, message: str = "There's no rule added"):
        super().__init__(code=ErrorCode.NO_RULES_CONFIGURED, user_message=message)


class NoValidatorsConfiguredError(ConfigError):
    """Raised when a Validator runs with no InputValidator added."""

    def __init__(self, message: str = "There's no InputValidator added"):
        super().__init__(code=ErrorCode.NO_VALIDATORS_CONFIGURED, user_message=message)


def create_validation_error(field: str, message: str, value: Any = None) -> ValidationError:
    """
    Create a ValidationError for logging purposes.

    Args:
        field: Field name that failed validation
        message: The failing rule's error message
        value: The rejected text

    Returns:
        ValidationError instance
    """
    # Determine error code based on message content
    code = ErrorCode.INVALID_INPUT
    lowered = message.lower()

    if "required" in lowered or "blank" in lowered or "empty" in lowered:
        code = ErrorCode.REQUIRED_FIELD_MISSING
    elif "format" in lowered or "pattern" in lowered:
        code = ErrorCode.INVALID_FORMAT
    elif "length" in lowered or "characters" in lowered or "range" in lowered:
        code = ErrorCode.VALUE_OUT_OF_RANGE

    return ValidationError(
        code=code,
        user_message=message,
        field=field,
        technical_message=f"Validation failed for field '{field}': {message}",
        context={"value": value} if value is not None else {},
    )


def from_exception(exc: Exception, context: dict[str, Any] | None = None) -> BaseAppError:
    """
    Convert any exception to a BaseAppError.

    Args:
        exc: The exception to convert
        context: Optional context information

    Returns:
        BaseAppError instance
    """
    if isinstance(exc, BaseAppError):
        return exc

    logger.warning(f"Unknown exception type: {type(exc).__name__}: {exc}")
    return BaseAppError(
        type=ErrorType.SYSTEM,
        code=ErrorCode.UNKNOWN,
        user_message=str(exc) or "An unexpected error occurred",
        technical_message=f"{type(exc).__name__}: {exc}",
        severity=ErrorSeverity.HIGH,
        context=context or {},
    )
