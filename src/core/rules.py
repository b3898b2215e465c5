"""
Validation rules for text input.

A rule optionally rewrites the text it receives (masking, replacement) and
then judges the rewritten text. InputValidator threads the rewritten text of
each rule into the next one, so replacement rules act as pipeline stages and
predicate rules act as gates.

String patterns are compiled with the ``regex`` module, which understands
Unicode property classes such as ``\\p{L}``. Precompiled ``re`` patterns
are accepted as well.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from typing import Any, Protocol

import regex

logger = logging.getLogger(__name__)

# Anything outside letters, marks, numbers, punctuation, separators,
# format characters, surrogates and whitespace. Pictographs are category So.
EMOJI_PATTERN = regex.compile(r"[^\p{L}\p{M}\p{N}\p{P}\p{Z}\p{Cf}\p{Cs}\s]")


class CompiledPattern(Protocol):
    """Protocol shared by ``re`` and ``regex`` compiled patterns."""

    pattern: Any

    def fullmatch(self, string: str) -> Any: ...
    def sub(self, repl: Any, string: str) -> str: ...


def compile_pattern(pattern: str | CompiledPattern) -> CompiledPattern:
    """Compile string patterns; pass compiled ones through untouched."""
    if isinstance(pattern, str):
        return regex.compile(pattern)
    return pattern


class Rule(ABC):
    """
    Base class for every rule accepted by InputValidator.

    Subclasses implement ``is_satisfied`` against ``text_to_validate`` and
    may override ``transform`` when the text needs rewriting first.

    Attributes:
        text_to_validate: Working text of the last pass, after ``transform``
    """

    def __init__(self, error_message: str) -> None:
        self._error_message = error_message
        self.text_to_validate = ""

    @property
    def error_message(self) -> str:
        """Message shown on the bound widget when this rule fails."""
        return self._error_message

    def transform(self, text: str) -> str:
        """Rewrite the incoming text before it is judged. Identity by default."""
        return text

    @abstractmethod
    def is_satisfied(self) -> bool:
        """Judge ``text_to_validate``."""

    def validate(self, text: str | None) -> bool:
        """
        Store the transformed text and judge it.

        Args:
            text: Text handed over by InputValidator; None counts as empty

        Returns:
            True if the rule accepts the transformed text
        """
        self.text_to_validate = self.transform(text or "")
        logger.debug(f"{type(self).__name__} working text: {self.text_to_validate!r}")
        return self.is_satisfied()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(error_message={self._error_message!r})"


class NotBlank(Rule):
    """Passes when the text holds at least one non-whitespace character."""

    def is_satisfied(self) -> bool:
        return bool(self.text_to_validate.strip())


class MatchRegex(Rule):
    """Passes when the whole text matches ``pattern``."""

    def __init__(self, pattern: str | CompiledPattern, error_message: str) -> None:
        super().__init__(error_message)
        self.pattern = compile_pattern(pattern)

    def is_satisfied(self) -> bool:
        return self.pattern.fullmatch(self.text_to_validate) is not None


class MinLength(Rule):
    """Passes when the text is at least ``min_length`` characters long."""

    def __init__(self, min_length: int, error_message: str) -> None:
        super().__init__(error_message)
        self.min_length = min_length

    def is_satisfied(self) -> bool:
        return len(self.text_to_validate) >= self.min_length


class MaxLength(Rule):
    """Passes when the text is at most ``max_length`` characters long."""

    def __init__(self, max_length: int, error_message: str) -> None:
        super().__init__(error_message)
        self.max_length = max_length

    def is_satisfied(self) -> bool:
        return len(self.text_to_validate) <= self.max_length


class ReplaceString(Rule):
    """
    Replace every occurrence of a literal substring. Always passes.

    Matching ignores case unless ``ignore_case`` is False. The replacement
    is inserted literally, backslashes included.
    """

    def __init__(
        self,
        replace: str,
        replacement: str = "",
        ignore_case: bool = True,
        error_message: str = "",
    ) -> None:
        super().__init__(error_message)
        self.replace = replace
        self.replacement = replacement
        self.ignore_case = ignore_case

    def transform(self, text: str) -> str:
        if not self.ignore_case:
            return text.replace(self.replace, self.replacement)
        return re.sub(re.escape(self.replace), lambda _match: self.replacement, text, flags=re.IGNORECASE)

    def is_satisfied(self) -> bool:
        return True


class ReplaceRegex(Rule):
    """
    Replace every match of ``pattern`` with ``replacement``. Always passes.

    ``replacement`` uses Python template syntax (``\\1``, ``\\g<name>``).
    """

    def __init__(self, pattern: str | CompiledPattern, replacement: str = "", error_message: str = "") -> None:
        super().__init__(error_message)
        self.pattern = compile_pattern(pattern)
        self.replacement = replacement

    def transform(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)

    def is_satisfied(self) -> bool:
        return True


def remove_emoji_rule(replacement: str = "") -> ReplaceRegex:
    """Build the ReplaceRegex rule that strips emoji and other symbols."""
    return ReplaceRegex(EMOJI_PATTERN, replacement)
