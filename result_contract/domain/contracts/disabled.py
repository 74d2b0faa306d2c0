"""Null contract used when contract checking is switched off."""

from __future__ import annotations

from typing import Any

from result_contract.domain.models.tagged_value import TaggedData


class DisabledContract:
    """Accepts every type and every value.

    Declares no types, reports every type as allowed, and returns
    types and values untouched.
    """

    @property
    def allowed_types(self) -> frozenset[str]:
        return frozenset()

    def is_type(self, type: Any) -> bool:
        return True

    def ensure_type(self, type: Any) -> Any:
        return type

    def check(self, data: TaggedData) -> Any:
        return data.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


DISABLED_CONTRACT = DisabledContract()
