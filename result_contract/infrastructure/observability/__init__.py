"""Observability infrastructure: structured logging with structlog.

Usage:
    from result_contract.infrastructure.observability import configure_structlog

    configure_structlog(environment="development")
"""

from result_contract.infrastructure.observability.logging import (
    configure_structlog,
    library_processor,
)

__all__: list[str] = ["configure_structlog", "library_processor"]
