"""Process-wide leniency for inconclusive value checks.

When a value rule returns no opinion (RuleOutcome.INCONCLUSIVE), contracts
consult this flag at decision time:

- enabled: the value is accepted
- disabled (default): the value is rejected

The flag is global, not per contract or per thread. Toggling it affects
every contract in the process, including ones built before the toggle.
Writes are serialized; reads are not, so a toggle on one thread can change
the outcome of a check already in progress on another. Code that needs a
temporary effect should use `scoped()`, which restores the previous value
on every exit path.

Usage:
    from result_contract.domain.primitives import leniency

    with leniency.scoped():
        contract.check(TaggedValue("ok", 1))
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager

import structlog

log = structlog.get_logger()

_lock = threading.Lock()
_default: bool = False
_enabled: bool = False


def is_enabled() -> bool:
    """Return whether inconclusive outcomes are currently accepted."""
    return _enabled


def enable(enabled: bool = True) -> bool:
    """Set the process-wide leniency flag.

    Args:
        enabled: New flag value.

    Returns:
        The value now in effect.
    """
    global _enabled
    with _lock:
        previous, _enabled = _enabled, bool(enabled)
    if previous != _enabled:
        log.info("leniency_flag_changed", enabled=_enabled, previous=previous)
    return _enabled


def disable() -> bool:
    """Turn leniency off. Equivalent to `enable(False)`."""
    return enable(False)


def set_default(enabled: bool) -> None:
    """Record the value `reset()` returns to (see ContractConfig)."""
    global _default
    with _lock:
        _default = bool(enabled)


def reset() -> bool:
    """Restore the configured default (for tests and shutdown hooks)."""
    return enable(_default)


@contextmanager
def scoped(enabled: bool = True) -> Iterator[bool]:
    """Set the flag for the duration of a block, then restore it.

    Args:
        enabled: Flag value inside the block.

    Yields:
        The value in effect inside the block.
    """
    previous = is_enabled()
    try:
        yield enable(enabled)
    finally:
        enable(previous)
