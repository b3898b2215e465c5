"""
Tests for RuleBuilder.
"""

import re

import regex

from core.rule_builder import RuleBuilder
from core.rules import EMOJI_PATTERN, MatchRegex, MaxLength, MinLength, NotBlank, ReplaceRegex, ReplaceString


class TestRuleBuilder:
    """Test the fluent rule builder."""

    def test_empty_builder_builds_empty_list(self) -> None:
        assert RuleBuilder().build() == []

    def test_rules_keep_call_order(self) -> None:
        rules = (
            RuleBuilder()
            .remove_emoji()
            .not_blank("Required")
            .min_length(2, "Too short")
            .max_length(10, "Too long")
            .match_regex(r"\w+", "Word characters only")
            .build()
        )

        assert [type(rule) for rule in rules] == [ReplaceRegex, NotBlank, MinLength, MaxLength, MatchRegex]
        assert [rule.error_message for rule in rules] == [
            "",
            "Required",
            "Too short",
            "Too long",
            "Word characters only",
        ]

    def test_build_returns_independent_list(self) -> None:
        builder = RuleBuilder().not_blank("Required")
        first = builder.build()
        first.clear()
        assert len(builder.build()) == 1

    def test_replace_string_form(self) -> None:
        (rule,) = RuleBuilder().replace("-", "", "unused", ignore_case=False).build()
        assert isinstance(rule, ReplaceString)
        assert rule.ignore_case is False
        assert rule.error_message == "unused"

    def test_replace_string_ignores_case_by_default(self) -> None:
        (rule,) = RuleBuilder().replace("x").build()
        assert rule.ignore_case is True

    def test_replace_pattern_form(self) -> None:
        (rule,) = RuleBuilder().replace(re.compile(r"\s+"), " ").build()
        assert isinstance(rule, ReplaceRegex)
        rule.validate("a   b")
        assert rule.text_to_validate == "a b"

    def test_replace_regex_module_pattern(self) -> None:
        (rule,) = RuleBuilder().replace(regex.compile(r"\p{N}"), "#").build()
        assert isinstance(rule, ReplaceRegex)
        rule.validate("a1b2")
        assert rule.text_to_validate == "a#b#"

    def test_remove_emoji(self) -> None:
        (rule,) = RuleBuilder().remove_emoji("_").build()
        assert rule.pattern is EMOJI_PATTERN
        assert rule.replacement == "_"

    def test_add_custom_rule(self) -> None:
        custom = NotBlank("Custom")
        assert RuleBuilder().add(custom).build() == [custom]


class TestRuleBuilderConfig:
    """Test defaults taken from configuration."""

    def test_defaults_from_config(self, config_manager) -> None:
        config_manager.set("replace_ignore_case", False)
        config_manager.set("emoji_replacement", "*")

        rules = RuleBuilder(config_manager).replace("a").remove_emoji().build()

        assert rules[0].ignore_case is False
        assert rules[1].replacement == "*"

    def test_explicit_arguments_win_over_config(self, config_manager) -> None:
        config_manager.set("replace_ignore_case", False)
        config_manager.set("emoji_replacement", "*")

        rules = RuleBuilder(config_manager).replace("a", ignore_case=True).remove_emoji("").build()

        assert rules[0].ignore_case is True
        assert rules[1].replacement == ""
