"""
Rule-based input validation for Qt forms.

InputValidator runs an ordered rule chain against one input and reports the
first failure on the widget; Validator aggregates inputs for a whole form.
"""

from .display import ContainerErrorDisplay, ErrorDisplay, LineEditErrorDisplay
from .input_validator import InputValidator, not_blank_validator, validator_for, validator_with_rules
from .validator import Validator
from .worker import ValidationController, ValidationMode, ValidationWorker

__all__ = [
    "ContainerErrorDisplay",
    "ErrorDisplay",
    "InputValidator",
    "LineEditErrorDisplay",
    "ValidationController",
    "ValidationMode",
    "ValidationWorker",
    "Validator",
    "not_blank_validator",
    "validator_for",
    "validator_with_rules",
]
