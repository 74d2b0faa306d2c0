"""Application ports (interfaces) for result-contract.

Available Ports:
- ContractProtocol: what an outcome constructor needs from a contract
"""

from result_contract.application.ports.contract import ContractProtocol

__all__: list[str] = ["ContractProtocol"]
