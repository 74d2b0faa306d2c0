"""
result-contract - Runtime contracts for tagged outcome values

Validates `(type, value)` pairs produced by Result/Either-style outcome
objects against a declared set of types and, per type, a value rule.

Public surface:
- ForTypesContract: type-only contract (membership + normalization)
- ForTypesAndValuesContract: type contract plus one value rule per type
- DisabledContract: accepts every type and every value
- new_contract / evaluate: build a contract from a declaration and check data
- leniency: process-wide switch for inconclusive rule outcomes
"""

from result_contract.application.services.contract_factory import (
    evaluate,
    new_contract,
)
from result_contract.domain.contracts import (
    DISABLED_CONTRACT,
    DisabledContract,
    ForTypesAndValuesContract,
    ForTypesContract,
)
from result_contract.domain.errors import (
    ContractViolationError,
    InvalidTypeTagError,
    NoMatchingPatternError,
    UnknownTypeError,
)
from result_contract.domain.exceptions import ContractError
from result_contract.domain.models import RuleOutcome, TaggedValue, ValueRule
from result_contract.domain.primitives import leniency

__version__ = "0.1.0"
__all__ = [
    "__version__",
    "ContractError",
    "ContractViolationError",
    "DISABLED_CONTRACT",
    "DisabledContract",
    "ForTypesAndValuesContract",
    "ForTypesContract",
    "InvalidTypeTagError",
    "NoMatchingPatternError",
    "RuleOutcome",
    "TaggedValue",
    "UnknownTypeError",
    "ValueRule",
    "evaluate",
    "leniency",
    "new_contract",
]
