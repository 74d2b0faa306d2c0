"""Contract checking configuration.

This module defines process-level settings for contract checking with
environment variable overrides.

Environment Variables:
- RESULT_CONTRACT_ENABLED: Build enforcing contracts (default: true).
  When false, `new_contract` returns the disabled contract.
- RESULT_CONTRACT_LENIENT_VALUE_CHECKING: Accept inconclusive value checks
  by default (default: false)

Boolean variables accept 1/0, true/false, yes/no, on/off (any case).
Anything else falls back to the default.
"""

from __future__ import annotations

import os
import threading
from dataclasses import dataclass

import structlog

from result_contract.domain.primitives import leniency

log = structlog.get_logger()

CONTRACTS_ENABLED_ENV = "RESULT_CONTRACT_ENABLED"
LENIENT_VALUE_CHECKING_ENV = "RESULT_CONTRACT_LENIENT_VALUE_CHECKING"

DEFAULT_CONTRACTS_ENABLED = True
DEFAULT_LENIENT_VALUE_CHECKING = False

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed boolean value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    log.warning("invalid_boolean_env", key=key, value=value, default=default)
    return default


@dataclass(frozen=True)
class ContractConfig:
    """Settings for contract construction and value checking.

    Attributes:
        contracts_enabled: Whether declarations produce enforcing contracts.
        lenient_value_checking: Default of the process-wide leniency flag.
    """

    contracts_enabled: bool = DEFAULT_CONTRACTS_ENABLED
    lenient_value_checking: bool = DEFAULT_LENIENT_VALUE_CHECKING

    @classmethod
    def from_environment(cls) -> ContractConfig:
        """Create config from environment variables with defaults.

        Returns:
            ContractConfig with values from environment or defaults.
        """
        return cls(
            contracts_enabled=_get_bool_env(
                CONTRACTS_ENABLED_ENV, DEFAULT_CONTRACTS_ENABLED
            ),
            lenient_value_checking=_get_bool_env(
                LENIENT_VALUE_CHECKING_ENV, DEFAULT_LENIENT_VALUE_CHECKING
            ),
        )


# Active config, seeded from the environment on first use
_active_config: ContractConfig | None = None
_config_lock = threading.Lock()


def get_active_config() -> ContractConfig:
    """Get the process-wide active config (thread-safe).

    Uses double-checked locking to seed the config from the environment
    the first time it is needed.

    Returns:
        The config installed by `apply_config`, or one read from the
        environment if none has been applied.
    """
    global _active_config
    if _active_config is None:
        with _config_lock:
            if _active_config is None:
                _active_config = ContractConfig.from_environment()
    return _active_config


def reset_active_config() -> None:
    """Forget the active config so the next read re-seeds it (for testing only)."""
    global _active_config
    with _config_lock:
        _active_config = None


def apply_config(config: ContractConfig) -> None:
    """Install a config as the process-wide active config.

    `new_contract` builds contracts from it when called without an explicit
    config. Its leniency setting becomes the current flag value and the
    value `leniency.reset()` returns to.

    Args:
        config: Settings to apply.
    """
    global _active_config
    with _config_lock:
        _active_config = config
    leniency.set_default(config.lenient_value_checking)
    leniency.enable(config.lenient_value_checking)
    log.info(
        "contract_config_applied",
        contracts_enabled=config.contracts_enabled,
        lenient_value_checking=config.lenient_value_checking,
    )


# Default config: enforcing contracts, strict inconclusive handling
DEFAULT_CONTRACT_CONFIG = ContractConfig()

# Contracts switched off entirely
DISABLED_CONTRACT_CONFIG = ContractConfig(contracts_enabled=False)

# Enforcing contracts that accept inconclusive value checks
LENIENT_CONTRACT_CONFIG = ContractConfig(lenient_value_checking=True)
