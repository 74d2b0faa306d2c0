"""Value rule normalization.

A contract declaration maps each type tag to an arbitrary rule object.
ValueRule turns that object into a total function from value to
RuleOutcome, so the contract's decision table only ever sees one of three
explicit outcomes (or a NoMatchingPatternError raised by the rule).

Supported rule objects, checked in this order:

- pydantic model class: instance of the model, or validates via
  `model_validate`
- type expressions: a class, a tuple of classes, a union (`int | None`,
  `Optional[int]`) or a parameterized generic (`list[int]`), all checked
  with `isinstance`. Generics are checked against their origin only:
  `list[int]` accepts any list, the item type is not inspected.
- compiled regex: the value is a str and fully matches
- range / set / frozenset: membership
- callable: called with the value; the result is normalized
- anything else: equality

`Annotated[T, ...]` is checked as `T`. Type expressions that cannot be
checked at runtime (`Literal[...]`, or a union member of that kind) are
refused with a TypeError when the rule is built.

Callable results are normalized as: RuleOutcome as-is, None as
INCONCLUSIVE, anything else by Python truthiness (ACCEPT or REJECT). A rule
returning 0, "" or [] therefore rejects; only None means "no opinion".

Regex rules require a full match (`re.fullmatch`), not a search anywhere in
the string. Anchor-free patterns such as `r"\\d+"` reject "a1"; write
`r".*\\d+.*"` or a callable using `re.search` for substring checks.

Usage:
    rule = ValueRule.of(lambda value: value > 0)
    rule.apply(1)     # RuleOutcome.ACCEPT
    rule.apply(-1)    # RuleOutcome.REJECT
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from types import UnionType
from typing import Annotated, Any, Union, get_args, get_origin

from pydantic import BaseModel, ValidationError

from result_contract.domain.models.rule_outcome import RuleOutcome


def to_outcome(result: Any) -> RuleOutcome:
    """Normalize the return value of a callable rule.

    Args:
        result: Whatever the rule returned.

    Returns:
        The corresponding RuleOutcome.
    """
    if isinstance(result, RuleOutcome):
        return result
    if result is None:
        return RuleOutcome.INCONCLUSIVE
    return RuleOutcome.ACCEPT if result else RuleOutcome.REJECT


def _is_union(spec: Any) -> bool:
    return isinstance(spec, UnionType) or get_origin(spec) is Union


def runtime_classes(spec: Any) -> tuple[type, ...] | None:
    """Resolve a type expression into the classes `isinstance` needs.

    Args:
        spec: A rule object.

    Returns:
        The classes to check against, or None if `spec` is not a type
        expression (a tuple holding non-classes is a literal, not a type).

    Raises:
        TypeError: If `spec` is a type expression with no runtime check.
    """
    if isinstance(spec, tuple):
        if not spec:
            return None
        try:
            members = [runtime_classes(item) for item in spec]
        except TypeError:
            return None
        if any(member is None for member in members):
            return None
        return tuple(cls for member in members for cls in member)  # type: ignore[union-attr]

    if _is_union(spec):
        classes: list[type] = []
        for arg in get_args(spec):
            member = runtime_classes(arg)
            if member is None:
                raise TypeError(f"{arg!r} in {spec!r} cannot be checked at runtime")
            classes.extend(member)
        return tuple(classes)

    origin = get_origin(spec)
    if origin is Annotated:
        return runtime_classes(get_args(spec)[0])
    if origin is not None:
        if isinstance(origin, type):
            return (origin,)
        raise TypeError(f"{spec!r} cannot be checked at runtime")

    if isinstance(spec, type):
        return (spec,)
    return None


@dataclass(frozen=True)
class ValueRule:
    """A normalized, immutable value rule.

    Attributes:
        spec: The rule object as declared.
    """

    spec: Any

    def __post_init__(self) -> None:
        """Refuse type expressions that have no runtime check."""
        runtime_classes(self.spec)

    @classmethod
    def of(cls, spec: Any) -> ValueRule:
        """Wrap a rule object, leaving existing ValueRules untouched."""
        return spec if isinstance(spec, ValueRule) else cls(spec)

    def apply(self, value: Any) -> RuleOutcome:
        """Classify a value.

        Args:
            value: Candidate value.

        Returns:
            ACCEPT, REJECT or INCONCLUSIVE.

        Raises:
            NoMatchingPatternError: If a callable rule cannot classify the value.
        """
        return self._checker()(value)

    __call__ = apply

    def _checker(self) -> Callable[[Any], RuleOutcome]:
        spec = self.spec
        classes = runtime_classes(spec)

        if classes == (spec,) and issubclass(spec, BaseModel):
            return self._check_model
        if classes is not None:
            return lambda value: to_outcome(isinstance(value, classes))
        if isinstance(spec, re.Pattern):
            return lambda value: to_outcome(
                isinstance(value, str) and spec.fullmatch(value) is not None
            )
        if isinstance(spec, (range, set, frozenset)):
            return self._check_membership
        if callable(spec):
            return lambda value: to_outcome(spec(value))
        return lambda value: to_outcome(value == spec)

    def _check_model(self, value: Any) -> RuleOutcome:
        if isinstance(value, self.spec):
            return RuleOutcome.ACCEPT
        try:
            self.spec.model_validate(value)
        except ValidationError:
            return RuleOutcome.REJECT
        return RuleOutcome.ACCEPT

    def _check_membership(self, value: Any) -> RuleOutcome:
        try:
            return to_outcome(value in self.spec)
        except TypeError:
            # unhashable values can't be members of a set
            return RuleOutcome.REJECT
