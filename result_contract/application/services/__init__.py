"""Application services for result-contract.

- contract_factory: build contracts from declarations, evaluate tagged data
"""

from result_contract.application.services.contract_factory import (
    evaluate,
    new_contract,
)

__all__: list[str] = ["evaluate", "new_contract"]
