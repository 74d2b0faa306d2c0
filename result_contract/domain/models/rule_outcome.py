"""Outcome of applying a value rule."""

from enum import StrEnum


class RuleOutcome(StrEnum):
    """Three-valued result of a value rule.

    ACCEPT: the value is valid for its type.
    REJECT: the value is invalid for its type.
    INCONCLUSIVE: the rule expressed no opinion; the leniency flag decides.
    """

    ACCEPT = "accept"
    REJECT = "reject"
    INCONCLUSIVE = "inconclusive"
