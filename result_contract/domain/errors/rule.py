"""Value rule failure signal.

Rules written as `match` statements have no built-in "no branch matched"
error in Python: an unmatched `match` silently evaluates to None, which a
contract reads as inconclusive. Rules that must distinguish "I cannot
classify this value" raise NoMatchingPatternError from a catch-all case:

    def ok_rule(value):
        match value:
            case int() | float():
                return None
            case _:
                raise NoMatchingPatternError(value)

The contract wraps it as the cause of a ContractViolationError.
"""

from typing import Any

from result_contract.domain.exceptions import ContractError


class NoMatchingPatternError(ContractError):
    """Raised by a value rule that has no branch for the given value."""

    def __init__(self, value: Any, message: str = "") -> None:
        """Initialize with the unclassifiable value.

        Args:
            value: The value no branch matched.
            message: Optional override for the default message.
        """
        super().__init__(message or repr(value))
        self.value = value
