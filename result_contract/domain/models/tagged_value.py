"""Tagged value model.

A tagged value is the `(type, value)` pair an outcome object hands to its
contract. Contracts accept anything exposing `.type` and `.value`, so
existing Result objects can be checked without conversion; TaggedValue is
the library's own immutable carrier.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TaggedData(Protocol):
    """Anything with a type tag and a value."""

    @property
    def type(self) -> Any: ...

    @property
    def value(self) -> Any: ...


@dataclass(frozen=True, eq=True)
class TaggedValue:
    """Immutable (type, value) pair.

    Attributes:
        type: Raw type tag (str or Enum member); normalized by the contract.
        value: Opaque domain value.
    """

    type: Any
    value: Any = None
