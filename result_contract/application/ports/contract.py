"""Contract protocol.

The interface every contract exposes to an outcome constructor. Domain
contracts satisfy it structurally; outcome libraries should type against
this protocol rather than a concrete contract class.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from result_contract.domain.models.tagged_value import TaggedData


@runtime_checkable
class ContractProtocol(Protocol):
    """Protocol for checking tagged values.

    Implementations must:
    1. Report their declared types via `allowed_types`
    2. Answer membership with `is_type` without raising
    3. Raise UnknownTypeError from `ensure_type` for undeclared types
    4. Return the value from `check`, or raise a ContractError
    """

    @property
    def allowed_types(self) -> frozenset[str]:
        """Declared type tags."""
        ...

    def is_type(self, type: Any) -> bool:
        """Return True if the type is allowed."""
        ...

    def ensure_type(self, type: Any) -> Any:
        """Return the canonical type or raise UnknownTypeError."""
        ...

    def check(self, data: TaggedData) -> Any:
        """Return `data.value` if it satisfies the contract."""
        ...
