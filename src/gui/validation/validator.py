"""
Form-level aggregation of input validators.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from core.errors import NoValidatorsConfiguredError

from .input_validator import InputValidator

logger = logging.getLogger(__name__)


class Validator:
    """
    Aggregates InputValidators for a whole form.

    ``is_valid`` requires every input to pass; ``is_any_valid`` requires at
    least one input of the group to pass. Every member is always evaluated,
    so every bound widget gets its error updated.
    """

    def __init__(self, *validators: InputValidator) -> None:
        self._validators: list[InputValidator] = list(validators)

    def add(self, *validators: InputValidator | Iterable[InputValidator]) -> Validator:
        """
        Add input validators, given individually or as iterables.

        Returns:
            self, for chaining
        """
        for item in validators:
            if isinstance(item, InputValidator):
                self._validators.append(item)
            else:
                self._validators.extend(item)
        return self

    @property
    def validators(self) -> list[InputValidator]:
        return list(self._validators)

    def __len__(self) -> int:
        return len(self._validators)

    def refresh_text(self) -> None:
        """Cache every input's current text. Call on the GUI thread before a background run."""
        for input_validator in self._validators:
            input_validator.display.refresh_text()

    def _verify_list(self) -> None:
        if not self._validators:
            raise NoValidatorsConfiguredError()

    def is_valid(self) -> bool:
        """
        Validate every input and show each one's first failure.

        Returns:
            True if all inputs passed

        Raises:
            NoValidatorsConfiguredError: If no InputValidator was added
        """
        self._verify_list()

        results = [input_validator.validate() for input_validator in self._validators]
        valid = all(results)

        logger.debug(f"is_valid: {results.count(True)}/{len(results)} inputs passed")
        return valid

    def is_any_valid(self) -> bool:
        """
        Validate the inputs as a group where one passing input is enough.

        When every input fails, all of them show their remembered error at
        once; otherwise no error is shown.

        Returns:
            True if at least one input passed

        Raises:
            NoValidatorsConfiguredError: If no InputValidator was added
        """
        self._verify_list()

        results = [input_validator.validate_together() for input_validator in self._validators]
        valid = any(results)

        if not valid:
            logger.debug(f"is_any_valid: all {len(results)} inputs failed, showing group errors")
            for input_validator in self._validators:
                input_validator.show_validate_together_error_message()

        return valid
