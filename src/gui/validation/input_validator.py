"""
Rule-chain validation for a single text input.

An InputValidator binds one widget, an ordered list of rules and a success
callback. Each rule receives the text produced by the previous rule, so
replacement rules can clean the text before later rules judge it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from PySide6.QtWidgets import QLineEdit

from core.config import DEFAULT_CONFIG
from core.config_manager import ConfigManager
from core.error_handler import get_error_handler
from core.errors import AmbiguousTargetError, MissingTargetError, NoRulesConfiguredError, create_validation_error
from core.rules import NotBlank, Rule
from gui.widgets.validated_field import ValidatedField

from .display import ContainerErrorDisplay, ErrorDisplay, LineEditErrorDisplay

logger = logging.getLogger(__name__)

TextCallback = Callable[[str], None]


class InputValidator:
    """
    Runs a rule chain against the text of one input and reports the result.

    Exactly one of ``line_edit`` and ``container`` must be given.

    Args:
        rules: Rules applied in order
        on_text_valid: Called with the final, transformed text when every
            rule passes and that text is not blank
        line_edit: Bare line edit to validate; errors go to its tooltip
        container: ValidatedField to validate; errors go to its label
        name: Field name used in logs, defaults to the widget's objectName
        config: Configuration source for the tooltip prefix and failure logging

    Raises:
        MissingTargetError: If neither target is given
        AmbiguousTargetError: If both targets are given
    """

    def __init__(
        self,
        rules: Sequence[Rule],
        on_text_valid: TextCallback,
        *,
        line_edit: QLineEdit | None = None,
        container: ValidatedField | None = None,
        name: str | None = None,
        config: ConfigManager | None = None,
    ) -> None:
        if line_edit is None and container is None:
            raise MissingTargetError()
        if line_edit is not None and container is not None:
            raise AmbiguousTargetError()

        settings = config.load_all() if config is not None else DEFAULT_CONFIG

        self._display: ErrorDisplay
        if line_edit is not None:
            self._display = LineEditErrorDisplay(line_edit, settings["error_tooltip_prefix"])
            widget_name = line_edit.objectName()
        else:
            self._display = ContainerErrorDisplay(container)
            widget_name = container.objectName()

        self._rules = list(rules)
        self._on_text_valid = on_text_valid
        self._name = name or widget_name or "input"
        self._log_failures = bool(settings["log_rule_failures"])
        self._error_handler = get_error_handler()

        self._validated_text = ""
        self._together_error_message: str | None = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def rules(self) -> list[Rule]:
        return list(self._rules)

    @property
    def display(self) -> ErrorDisplay:
        return self._display

    @property
    def validated_text(self) -> str:
        """Working text after the last pass."""
        return self._validated_text

    @property
    def error_message(self) -> str | None:
        """Error currently shown on the bound widget."""
        return self._display.error()

    def validate(self) -> bool:
        """
        Run the rules and show the first failure on the bound widget.

        Returns:
            True if every rule passed

        Raises:
            NoRulesConfiguredError: If the validator has no rules
        """
        failed = self._run_rules()
        if failed is not None:
            self._display.show_error(failed.error_message)
            return False
        return True

    def validate_together(self) -> bool:
        """
        Run the rules, remembering a failure instead of showing it.

        Used for group validation, where the message is shown later through
        ``show_validate_together_error_message`` only if the whole group
        failed. The remembered message is kept until another failure
        replaces it.

        Returns:
            True if every rule passed

        Raises:
            NoRulesConfiguredError: If the validator has no rules
        """
        failed = self._run_rules()
        if failed is not None:
            self._together_error_message = failed.error_message
            return False
        return True

    def show_validate_together_error_message(self) -> None:
        """Show the message remembered by ``validate_together``, or clear the error."""
        self._display.show_error(self._together_error_message)

    def _run_rules(self) -> Rule | None:
        """Walk the rule chain; return the first failing rule, or None."""
        if not self._rules:
            raise NoRulesConfiguredError()

        self._validated_text = self._display.current_text()
        self._display.show_error(None)

        for rule in self._rules:
            if not rule.validate(self._validated_text):
                logger.debug(f"Field '{self._name}' failed {type(rule).__name__}: {rule.error_message}")
                self._log_failure(rule)
                return rule
            self._validated_text = rule.text_to_validate

        if self._validated_text.strip():
            self._on_text_valid(self._validated_text)

        return None

    def _log_failure(self, rule: Rule) -> None:
        if not self._log_failures:
            return
        validation_error = create_validation_error(self._name, rule.error_message, self._validated_text)
        self._error_handler.handle(validation_error)


def _target_kwargs(target: QLineEdit | ValidatedField | None) -> dict[str, QLineEdit | ValidatedField]:
    if target is None:
        raise MissingTargetError()
    if isinstance(target, ValidatedField):
        return {"container": target}
    if isinstance(target, QLineEdit):
        return {"line_edit": target}
    raise TypeError(f"Cannot validate a {type(target).__name__}; expected QLineEdit or ValidatedField")


def validator_for(
    target: QLineEdit | ValidatedField | None,
    rules: Sequence[Rule],
    on_text_valid: TextCallback,
) -> InputValidator:
    """Create an InputValidator for a line edit or a ValidatedField."""
    return InputValidator(rules, on_text_valid, **_target_kwargs(target))  # type: ignore[arg-type]


def validator_with_rules(
    target: QLineEdit | ValidatedField | None,
    on_text_valid: TextCallback,
    *rules: Rule,
) -> InputValidator:
    """Create an InputValidator from rules given as positional arguments."""
    return validator_for(target, rules, on_text_valid)


def not_blank_validator(
    target: QLineEdit | ValidatedField | None,
    error_message: str,
    on_text_valid: TextCallback,
) -> InputValidator:
    """Create an InputValidator whose only rule is NotBlank."""
    return validator_for(target, [NotBlank(error_message)], on_text_valid)
