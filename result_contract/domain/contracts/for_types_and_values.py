"""Type-and-value contract.

Each declared type tag owns exactly one value rule. Checking a tagged value
resolves the tag first (UnknownTypeError propagates unwrapped and the rule
never runs), then applies the rule and maps its outcome:

    | rule outcome            | leniency | result                        |
    |-------------------------|----------|-------------------------------|
    | ACCEPT                  | any      | value returned unchanged      |
    | INCONCLUSIVE            | enabled  | value returned unchanged      |
    | INCONCLUSIVE            | disabled | ContractViolationError        |
    | REJECT                  | any      | ContractViolationError        |
    | NoMatchingPatternError  | any      | ContractViolationError(cause) |

Only the last row carries a cause; an inconclusive rejection does not.

Usage:
    contract = ForTypesAndValuesContract({
        "ok": int,
        "not_found": lambda value: isinstance(value, str) and bool(value),
    })
    contract.check(TaggedValue("ok", 1))  # 1
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

import structlog

from result_contract.domain.contracts.for_types import ForTypesContract
from result_contract.domain.errors.contract import (
    ContractViolationError,
    InvalidTypeTagError,
)
from result_contract.domain.errors.rule import NoMatchingPatternError
from result_contract.domain.models.rule_outcome import RuleOutcome
from result_contract.domain.models.tagged_value import TaggedData
from result_contract.domain.models.type_tag import TypeTag, normalize_type_tag
from result_contract.domain.models.value_rule import ValueRule
from result_contract.domain.primitives import leniency

log = structlog.get_logger()


class ForTypesAndValuesContract:
    """Contract mapping each declared type tag to a value rule.

    The rule map is built once and never mutated, so `check` needs no
    locking. The only shared state read during a check is the leniency flag.

    Attributes:
        _rules: Read-only mapping of canonical tag to ValueRule.
        _types_contract: Type-only contract over the same tags.
    """

    def __init__(self, types_and_values: Mapping[Any, Any]) -> None:
        """Declare the allowed types and their value rules.

        Rules are wrapped but not invoked.

        Args:
            types_and_values: Mapping of raw type key to rule object.

        Raises:
            InvalidTypeTagError: If a key is invalid or two keys share a tag.
        """
        rules: dict[TypeTag, ValueRule] = {}
        for key, spec in types_and_values.items():
            tag = normalize_type_tag(key)
            if tag in rules:
                raise InvalidTypeTagError(key, f"duplicates type tag {tag!r}")
            rules[tag] = ValueRule.of(spec)

        self._rules: Mapping[TypeTag, ValueRule] = MappingProxyType(rules)
        self._types_contract = ForTypesContract(rules.keys())

    @property
    def allowed_types(self) -> frozenset[TypeTag]:
        """Declared type tags."""
        return self._types_contract.allowed_types

    @property
    def rules(self) -> Mapping[TypeTag, ValueRule]:
        """Read-only view of the tag to rule mapping."""
        return self._rules

    def is_type(self, type: Any) -> bool:
        """Return True if `type` normalizes to a declared tag."""
        return self._types_contract.is_type(type)

    def ensure_type(self, type: Any) -> TypeTag:
        """Return the canonical tag or raise UnknownTypeError."""
        return self._types_contract.ensure_type(type)

    def check(self, data: TaggedData) -> Any:
        """Validate a tagged value against the rule of its type.

        Args:
            data: Object exposing `.type` and `.value`.

        Returns:
            `data.value`, unchanged.

        Raises:
            UnknownTypeError: If `data.type` was never declared.
            ContractViolationError: If the value fails its rule.
        """
        tag = self.ensure_type(data.type)
        value = data.value
        rule = self._rules[tag]

        try:
            outcome = rule.apply(value)
        except NoMatchingPatternError as e:
            log.debug(
                "contract_value_unclassified",
                type=tag,
                value_type=type(value).__name__,
                error=str(e),
            )
            raise ContractViolationError(tag, value, cause=e) from e

        if outcome is RuleOutcome.ACCEPT:
            return value

        if outcome is RuleOutcome.INCONCLUSIVE and leniency.is_enabled():
            log.debug(
                "contract_value_accepted_leniently",
                type=tag,
                value_type=type(value).__name__,
            )
            return value

        log.debug(
            "contract_value_rejected",
            type=tag,
            value_type=type(value).__name__,
            outcome=str(outcome),
        )
        raise ContractViolationError(tag, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({sorted(self._rules)!r})"
