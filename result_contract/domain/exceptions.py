"""Base exception classes for the result-contract domain layer."""


class ContractError(Exception):
    """Base exception for all contract errors.

    All contract-specific exceptions MUST inherit from this class so that
    callers can catch every contract failure with a single handler.

    Subclasses:
    - UnknownTypeError
    - ContractViolationError
    - InvalidTypeTagError
    - NoMatchingPatternError
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
