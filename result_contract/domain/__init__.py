"""
Domain layer - pure contract logic for result-contract.

This layer contains:
- Contracts (type-only, type-and-value, disabled)
- Models (type tags, tagged values, value rules, rule outcomes)
- Primitives (process-wide leniency flag)
- Domain exceptions

This layer must NOT import from application, config or infrastructure.
"""

from result_contract.domain.errors import (
    ContractViolationError,
    InvalidTypeTagError,
    NoMatchingPatternError,
    UnknownTypeError,
)
from result_contract.domain.exceptions import ContractError

__all__: list[str] = [
    "ContractError",
    "ContractViolationError",
    "InvalidTypeTagError",
    "NoMatchingPatternError",
    "UnknownTypeError",
]
