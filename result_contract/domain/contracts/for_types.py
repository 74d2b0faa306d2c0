"""Type-only contract.

Holds the declared set of type tags and answers membership queries. Value
contracts delegate to it so that an undeclared tag always fails with
UnknownTypeError before any value rule runs.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import structlog

from result_contract.domain.errors.contract import (
    InvalidTypeTagError,
    UnknownTypeError,
)
from result_contract.domain.models.tagged_value import TaggedData
from result_contract.domain.models.type_tag import (
    TypeTag,
    normalize_type_tag,
    normalize_type_tags,
)

log = structlog.get_logger()


class ForTypesContract:
    """Contract over a fixed set of type tags.

    Attributes:
        _allowed_types: Canonical declared tags (immutable).
    """

    def __init__(self, types: Iterable[Any]) -> None:
        """Declare the allowed types.

        Args:
            types: Raw type keys (str or Enum members).

        Raises:
            InvalidTypeTagError: If a key is invalid or duplicated.
        """
        self._allowed_types: frozenset[TypeTag] = normalize_type_tags(types)

    @property
    def allowed_types(self) -> frozenset[TypeTag]:
        """Declared type tags."""
        return self._allowed_types

    def is_type(self, type: Any) -> bool:
        """Return True if `type` normalizes to a declared tag."""
        try:
            return normalize_type_tag(type) in self._allowed_types
        except InvalidTypeTagError:
            return False

    def ensure_type(self, type: Any) -> TypeTag:
        """Return the canonical tag for a declared type.

        Args:
            type: Raw type tag.

        Returns:
            The canonical tag.

        Raises:
            UnknownTypeError: If the type was never declared.
        """
        if self.is_type(type):
            return normalize_type_tag(type)

        log.debug(
            "contract_type_unknown",
            type=repr(type),
            allowed_types=sorted(self._allowed_types),
        )
        raise UnknownTypeError(type, self._allowed_types)

    def check(self, data: TaggedData) -> Any:
        """Check the type of tagged data and return its value."""
        self.ensure_type(data.type)
        return data.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({sorted(self._allowed_types)!r})"
