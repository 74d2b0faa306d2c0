"""Contracts for tagged values.

- ForTypesContract: declared type tags only
- ForTypesAndValuesContract: declared type tags, one value rule per tag
- DisabledContract: accepts everything
"""

from result_contract.domain.contracts.disabled import (
    DISABLED_CONTRACT,
    DisabledContract,
)
from result_contract.domain.contracts.for_types import ForTypesContract
from result_contract.domain.contracts.for_types_and_values import (
    ForTypesAndValuesContract,
)

__all__: list[str] = [
    "DISABLED_CONTRACT",
    "DisabledContract",
    "ForTypesAndValuesContract",
    "ForTypesContract",
]
