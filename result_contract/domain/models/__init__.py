"""Domain models for result-contract."""

from result_contract.domain.models.rule_outcome import RuleOutcome
from result_contract.domain.models.tagged_value import TaggedData, TaggedValue
from result_contract.domain.models.type_tag import (
    TypeTag,
    normalize_type_tag,
    normalize_type_tags,
)
from result_contract.domain.models.value_rule import ValueRule, to_outcome

__all__: list[str] = [
    "RuleOutcome",
    "TaggedData",
    "TaggedValue",
    "TypeTag",
    "ValueRule",
    "normalize_type_tag",
    "normalize_type_tags",
    "to_outcome",
]
