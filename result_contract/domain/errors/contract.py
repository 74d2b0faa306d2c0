"""Contract-checking domain exceptions.

Two failure kinds are never conflated:

- UnknownTypeError: the tag was never declared by the contract. This is a
  programming/configuration error and is propagated unchanged by
  value checking.
- ContractViolationError: the tag is declared but the value failed its
  rule (explicit rejection, an inconclusive outcome while leniency is
  disabled, or a rule that could not classify the value at all).
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from result_contract.domain.exceptions import ContractError


def _format_types(types: Iterable[str]) -> str:
    return ", ".join(repr(t) for t in sorted(types))


class UnknownTypeError(ContractError):
    """Raised when a type tag is not part of the contract's declared set.

    Attributes:
        type: The offending type as supplied by the caller.
        allowed_types: The declared types of the contract.
    """

    def __init__(self, type: Any, allowed_types: Iterable[str] = ()) -> None:
        """Initialize with the unknown type and the declared types.

        Args:
            type: The type that was not declared.
            allowed_types: Types the contract recognizes.
        """
        self.type = type
        self.allowed_types = frozenset(allowed_types)
        super().__init__(
            f"type {type!r} is not allowed. "
            f"Allowed types: {_format_types(self.allowed_types)}"
        )


class ContractViolationError(ContractError):
    """Raised when a value does not satisfy the rule of its declared type.

    `cause` is only set when the rule itself failed to classify the value
    (a NoMatchingPatternError). Rejections and strict inconclusive outcomes
    carry no cause.

    Attributes:
        type: The canonical type tag the value was checked against.
        value: The offending value.
        cause: The internal rule failure, if any.
    """

    def __init__(
        self, type: str, value: Any, cause: BaseException | None = None
    ) -> None:
        """Initialize with the type, the rejected value and an optional cause.

        Args:
            type: Canonical type tag.
            value: Value that failed its rule.
            cause: Exception raised by the rule, when it could not classify.
        """
        message = f"value {value!r} is not allowed for {type!r} type"
        if cause is not None:
            message = f"{message} (cause: {cause})"
        super().__init__(message)
        self.type = type
        self.value = value
        self.cause = cause


class InvalidTypeTagError(ContractError, ValueError):
    """Raised when a contract key cannot be normalized into a type tag.

    This covers keys of an unsupported kind, keys that are blank once
    normalized, and distinct keys that collapse onto the same tag.
    """

    def __init__(self, key: Any, reason: str = "cannot be used as a type tag") -> None:
        """Initialize with the offending key.

        Args:
            key: The raw key supplied in the declaration.
            reason: Why the key was refused.
        """
        super().__init__(f"{key!r} {reason}")
        self.key = key
        self.reason = reason
