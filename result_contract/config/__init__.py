"""Configuration module for result-contract.

Available Configurations:
- ContractConfig: contract enforcement and leniency defaults
- get_active_config / apply_config: the process-wide active config
"""

from result_contract.config.contract_config import (
    DEFAULT_CONTRACT_CONFIG,
    DISABLED_CONTRACT_CONFIG,
    LENIENT_CONTRACT_CONFIG,
    ContractConfig,
    apply_config,
    get_active_config,
    reset_active_config,
)

__all__ = [
    "ContractConfig",
    "DEFAULT_CONTRACT_CONFIG",
    "DISABLED_CONTRACT_CONFIG",
    "LENIENT_CONTRACT_CONFIG",
    "apply_config",
    "get_active_config",
    "reset_active_config",
]
