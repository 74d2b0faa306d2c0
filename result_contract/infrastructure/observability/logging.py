"""Structured logging configuration with structlog.

The library itself only calls `structlog.get_logger()` and never
configures logging on import. Applications (and the test suite) call
`configure_structlog` once at startup to choose the output format.

Log Entry Format (production):
    {
        "timestamp": "2024-01-01T00:00:00.000000Z",
        "level": "debug",
        "event": "contract_value_rejected",
        "library": "result-contract",
        "type": "ok",
        ...additional context
    }

Usage:
    from result_contract.infrastructure.observability import configure_structlog

    configure_structlog(environment="production")  # JSON output
    configure_structlog(environment="development")  # Console output
"""

import logging
import os
from typing import Any

import structlog
from structlog.typing import Processor

# Environment variable for log level (default: WARNING)
LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

LIBRARY_NAME = "result-contract"


def _get_log_level() -> int:
    """Get the configured log level from environment.

    Returns:
        The logging level integer (e.g., logging.WARNING).
    """
    level_name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    return getattr(logging, level_name, logging.WARNING)


def library_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor tagging every entry with the library name.

    Args:
        logger: The logger instance (unused, required by structlog).
        method_name: The logging method name (unused, required by structlog).
        event_dict: The event dictionary to modify.

    Returns:
        The event dictionary with `library` added.
    """
    event_dict.setdefault("library", LIBRARY_NAME)
    return event_dict


def configure_structlog(environment: str = "production") -> None:
    """Configure structlog for an application using result-contract.

    Args:
        environment: 'production' for JSON output, 'development' for console.
                    Defaults to 'production'.
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        library_processor,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if environment == "production":
        final_processor: Processor = structlog.processors.JSONRenderer()
    else:
        final_processor = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=shared_processors + [final_processor],
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
