"""Domain errors for result-contract.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from ContractError.
"""

from result_contract.domain.errors.contract import (
    ContractViolationError,
    InvalidTypeTagError,
    UnknownTypeError,
)
from result_contract.domain.errors.rule import NoMatchingPatternError

__all__: list[str] = [
    "ContractViolationError",
    "InvalidTypeTagError",
    "NoMatchingPatternError",
    "UnknownTypeError",
]
