"""
Fluent builder for rule lists.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .rules import (
    CompiledPattern,
    MatchRegex,
    MaxLength,
    MinLength,
    NotBlank,
    ReplaceRegex,
    ReplaceString,
    Rule,
    remove_emoji_rule,
)

if TYPE_CHECKING:
    from .config_manager import ConfigManager


class RuleBuilder:
    """
    Collects rules in call order.

    Example:
        rules = RuleBuilder().remove_emoji().not_blank("Required").max_length(20, "Too long").build()

    Args:
        config: Optional ConfigManager supplying the ``replace_ignore_case``
            and ``emoji_replacement`` defaults
    """

    def __init__(self, config: ConfigManager | None = None) -> None:
        self._rules: list[Rule] = []
        self._ignore_case_default = True
        self._emoji_replacement_default = ""

        if config is not None:
            self._ignore_case_default = config.get("replace_ignore_case")
            self._emoji_replacement_default = config.get("emoji_replacement")

    def build(self) -> list[Rule]:
        """Return the collected rules as a new list."""
        return list(self._rules)

    def add(self, rule: Rule) -> RuleBuilder:
        """Append a custom rule."""
        self._rules.append(rule)
        return self

    def not_blank(self, error_message: str) -> RuleBuilder:
        return self.add(NotBlank(error_message))

    def min_length(self, min_length: int, error_message: str) -> RuleBuilder:
        return self.add(MinLength(min_length, error_message))

    def max_length(self, max_length: int, error_message: str) -> RuleBuilder:
        return self.add(MaxLength(max_length, error_message))

    def match_regex(self, pattern: str | CompiledPattern, error_message: str) -> RuleBuilder:
        return self.add(MatchRegex(pattern, error_message))

    def replace(
        self,
        replace: str | CompiledPattern,
        replacement: str = "",
        error_message: str = "",
        ignore_case: bool | None = None,
    ) -> RuleBuilder:
        """
        Add a replacement step.

        A plain string is replaced literally (case-insensitive unless told
        otherwise); a compiled pattern is replaced as a regular expression
        and ``ignore_case`` is ignored.
        """
        if isinstance(replace, str):
            if ignore_case is None:
                ignore_case = self._ignore_case_default
            return self.add(ReplaceString(replace, replacement, ignore_case, error_message))
        return self.add(ReplaceRegex(replace, replacement, error_message))

    def remove_emoji(self, replacement: str | None = None) -> RuleBuilder:
        """Strip emoji and other symbol characters."""
        if replacement is None:
            replacement = self._emoji_replacement_default
        return self.add(remove_emoji_rule(replacement))
