"""Contract construction and evaluation service.

Builds the right contract for a declaration and checks tagged data
against an optional contract.

Declaration kinds:
- None: the disabled contract
- Mapping of type -> rule: ForTypesAndValuesContract
- str / Enum member: ForTypesContract with that single type
- any other iterable of types: ForTypesContract

Usage:
    from result_contract.application.services.contract_factory import (
        evaluate,
        new_contract,
    )

    contract = new_contract({"ok": int, "error": str})
    evaluate(TaggedValue("ok", 1), contract)
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any, TypeVar

import structlog

from result_contract.application.ports.contract import ContractProtocol
from result_contract.config.contract_config import (
    ContractConfig,
    get_active_config,
)
from result_contract.domain.contracts import (
    DISABLED_CONTRACT,
    ForTypesAndValuesContract,
    ForTypesContract,
)
from result_contract.domain.models.tagged_value import TaggedData

log = structlog.get_logger()

T = TypeVar("T", bound=TaggedData)


def new_contract(
    declaration: Mapping[Any, Any] | Iterable[Any] | str | Enum | None,
    *,
    config: ContractConfig | None = None,
) -> ContractProtocol:
    """Build a contract from a declaration.

    Args:
        declaration: Types, or types mapped to value rules, or None.
        config: Settings; the process-wide active config when omitted
            (see `apply_config`, seeded from the environment).

    Returns:
        A contract satisfying ContractProtocol.

    Raises:
        InvalidTypeTagError: If a declared type cannot be normalized.
        TypeError: If the declaration is of an unsupported kind.
    """
    config = config or get_active_config()

    if declaration is None or not config.contracts_enabled:
        log.debug("contract_disabled", declared=declaration is not None)
        return DISABLED_CONTRACT

    if isinstance(declaration, Mapping):
        return ForTypesAndValuesContract(declaration)

    if isinstance(declaration, (str, Enum)):
        return ForTypesContract([declaration])

    if isinstance(declaration, Iterable):
        return ForTypesContract(declaration)

    raise TypeError(
        f"contract declaration must be a mapping, an iterable of types or None, "
        f"got {type(declaration).__name__}"
    )


def evaluate(data: T, contract: ContractProtocol | None = None) -> T:
    """Check tagged data against a contract and return the data.

    Args:
        data: Object exposing `.type` and `.value`.
        contract: Contract to enforce; the disabled contract when None.

    Returns:
        `data`, unchanged.

    Raises:
        UnknownTypeError: If the type is not declared.
        ContractViolationError: If the value fails its rule.
    """
    (contract or DISABLED_CONTRACT).check(data)
    return data
