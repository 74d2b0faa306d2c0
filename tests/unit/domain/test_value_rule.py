"""Unit tests for ValueRule normalization.

Each supported rule object is reduced to one of three explicit outcomes,
or raises NoMatchingPatternError when it cannot classify a value.
"""

from __future__ import annotations

import re
from typing import Annotated, Any, Literal, Optional

import pytest
from pydantic import BaseModel

from result_contract.domain.errors import NoMatchingPatternError
from result_contract.domain.models import RuleOutcome, ValueRule, to_outcome


class Point(BaseModel):
    x: int
    y: int


class TestToOutcome:
    """Tests for normalizing callable results."""

    @pytest.mark.parametrize(
        "result,expected",
        [
            (RuleOutcome.REJECT, RuleOutcome.REJECT),
            (RuleOutcome.INCONCLUSIVE, RuleOutcome.INCONCLUSIVE),
            (None, RuleOutcome.INCONCLUSIVE),
            (True, RuleOutcome.ACCEPT),
            (False, RuleOutcome.REJECT),
            (re.match("a", "a"), RuleOutcome.ACCEPT),
            ("", RuleOutcome.REJECT),
            (0, RuleOutcome.REJECT),
            ([], RuleOutcome.REJECT),
        ],
    )
    def test_normalization(self, result: Any, expected: RuleOutcome) -> None:
        assert to_outcome(result) is expected


class TestCallableRules:
    """Tests for predicate and match-style rules."""

    def test_predicate(self) -> None:
        rule = ValueRule.of(lambda value: value > 0)

        assert rule.apply(1) is RuleOutcome.ACCEPT
        assert rule.apply(-1) is RuleOutcome.REJECT

    def test_match_branch_without_result_is_inconclusive(self) -> None:
        """A match branch that returns nothing expresses no opinion."""

        def rule_spec(value: Any) -> None:
            match value:
                case int() | float():
                    return None
                case _:
                    raise NoMatchingPatternError(value)

        rule = ValueRule.of(rule_spec)

        assert rule.apply(1) is RuleOutcome.INCONCLUSIVE

    def test_no_matching_pattern_propagates(self) -> None:
        """Unclassifiable values surface as NoMatchingPatternError."""

        def rule_spec(value: Any) -> bool:
            match value:
                case int():
                    return True
                case _:
                    raise NoMatchingPatternError(value)

        with pytest.raises(NoMatchingPatternError):
            ValueRule.of(rule_spec).apply("x")

    def test_other_exceptions_propagate_unchanged(self) -> None:
        """Bugs inside a rule are not turned into outcomes."""
        rule = ValueRule.of(lambda value: value["missing"])

        with pytest.raises(KeyError):
            rule.apply({})

    def test_explicit_outcome_is_kept(self) -> None:
        rule = ValueRule.of(lambda value: RuleOutcome.INCONCLUSIVE)

        assert rule(1) is RuleOutcome.INCONCLUSIVE


class TestClassRules:
    """Tests for class and tuple-of-class rules."""

    def test_class(self) -> None:
        rule = ValueRule.of(int)

        assert rule.apply(3) is RuleOutcome.ACCEPT
        assert rule.apply("3") is RuleOutcome.REJECT

    def test_tuple_of_classes(self) -> None:
        rule = ValueRule.of((int, float))

        assert rule.apply(1.5) is RuleOutcome.ACCEPT
        assert rule.apply(None) is RuleOutcome.REJECT

    def test_tuple_with_non_class_is_literal(self) -> None:
        """A tuple holding plain values is compared by equality."""
        rule = ValueRule.of((1, "a"))

        assert rule.apply((1, "a")) is RuleOutcome.ACCEPT
        assert rule.apply(1) is RuleOutcome.REJECT


class TestTypeExpressionRules:
    """Tests for union and parameterized generic rules."""

    @pytest.mark.parametrize("spec", [int | None, Optional[int]])
    def test_optional(self, spec: Any) -> None:
        rule = ValueRule.of(spec)

        assert rule.apply(1) is RuleOutcome.ACCEPT
        assert rule.apply(None) is RuleOutcome.ACCEPT
        assert rule.apply("1") is RuleOutcome.REJECT

    def test_union_of_classes(self) -> None:
        rule = ValueRule.of(int | str)

        assert rule.apply("x") is RuleOutcome.ACCEPT
        assert rule.apply(1.5) is RuleOutcome.REJECT

    def test_generic_checks_origin_only(self) -> None:
        rule = ValueRule.of(list[int])

        assert rule.apply([1]) is RuleOutcome.ACCEPT
        assert rule.apply(["not", "checked"]) is RuleOutcome.ACCEPT
        assert rule.apply("ab") is RuleOutcome.REJECT
        assert rule.apply((1,)) is RuleOutcome.REJECT

    def test_generic_mapping(self) -> None:
        rule = ValueRule.of(dict[str, int])

        assert rule.apply({"a": 1}) is RuleOutcome.ACCEPT
        assert rule.apply([("a", 1)]) is RuleOutcome.REJECT

    def test_union_with_generic_member(self) -> None:
        rule = ValueRule.of(list[int] | None)

        assert rule.apply(None) is RuleOutcome.ACCEPT
        assert rule.apply([1]) is RuleOutcome.ACCEPT
        assert rule.apply(1) is RuleOutcome.REJECT

    def test_annotated_checks_underlying_type(self) -> None:
        rule = ValueRule.of(Annotated[int, "meta"])

        assert rule.apply(1) is RuleOutcome.ACCEPT
        assert rule.apply("1") is RuleOutcome.REJECT

    @pytest.mark.parametrize(
        "spec",
        [Literal["a"], int | Literal["a"], Annotated[Literal["a"], "meta"]],
    )
    def test_unsupported_type_expression_fails_at_construction(
        self, spec: Any
    ) -> None:
        with pytest.raises(TypeError) as exc_info:
            ValueRule.of(spec)

        assert "cannot be checked at runtime" in str(exc_info.value)


class TestPydanticRules:
    """Tests for pydantic model rules."""

    def test_instance_is_accepted(self) -> None:
        assert ValueRule.of(Point).apply(Point(x=1, y=2)) is RuleOutcome.ACCEPT

    def test_valid_mapping_is_accepted(self) -> None:
        assert ValueRule.of(Point).apply({"x": 1, "y": 2}) is RuleOutcome.ACCEPT

    def test_invalid_mapping_is_rejected(self) -> None:
        assert ValueRule.of(Point).apply({"x": "one"}) is RuleOutcome.REJECT


class TestPatternRules:
    """Tests for compiled regex rules."""

    def test_full_match_required(self) -> None:
        rule = ValueRule.of(re.compile(r"[a-z]+"))

        assert rule.apply("abc") is RuleOutcome.ACCEPT
        assert rule.apply("abc1") is RuleOutcome.REJECT

    def test_partial_match_is_rejected(self) -> None:
        """Patterns are anchored at both ends, not searched."""
        rule = ValueRule.of(re.compile(r"\d+"))

        assert rule.apply("12") is RuleOutcome.ACCEPT
        assert rule.apply("a1") is RuleOutcome.REJECT
        assert rule.apply("1a") is RuleOutcome.REJECT

    def test_non_string_is_rejected(self) -> None:
        assert ValueRule.of(re.compile(r"\d+")).apply(12) is RuleOutcome.REJECT


class TestMembershipRules:
    """Tests for range and set rules."""

    def test_range(self) -> None:
        rule = ValueRule.of(range(1, 10))

        assert rule.apply(5) is RuleOutcome.ACCEPT
        assert rule.apply(10) is RuleOutcome.REJECT

    def test_set(self) -> None:
        rule = ValueRule.of({"red", "green"})

        assert rule.apply("red") is RuleOutcome.ACCEPT
        assert rule.apply("blue") is RuleOutcome.REJECT

    def test_unhashable_value_is_rejected(self) -> None:
        assert ValueRule.of(frozenset({1})).apply([1]) is RuleOutcome.REJECT


class TestLiteralRules:
    """Tests for equality rules."""

    def test_equality(self) -> None:
        rule = ValueRule.of("done")

        assert rule.apply("done") is RuleOutcome.ACCEPT
        assert rule.apply("pending") is RuleOutcome.REJECT


class TestValueRuleWrapping:
    """Tests for ValueRule.of."""

    def test_existing_rule_is_not_rewrapped(self) -> None:
        rule = ValueRule.of(int)

        assert ValueRule.of(rule) is rule

    def test_rule_is_immutable(self) -> None:
        rule = ValueRule.of(int)

        with pytest.raises(AttributeError):
            rule.spec = str  # type: ignore[misc]
