"""
Pytest configuration and shared fixtures for result-contract tests.

Testing Standards:
- Unit tests go in tests/unit/, mirroring the package layers
- The leniency flag and the active config are process-wide: every test
  starts strict, with the active config re-read from the environment
- Log assertions use structlog.testing.capture_logs
"""

from collections.abc import Iterator

import pytest
import structlog

from result_contract.config import reset_active_config
from result_contract.domain.primitives import leniency


@pytest.fixture(autouse=True)
def strict_leniency() -> Iterator[None]:
    """Start every test with leniency disabled and restore it afterwards."""
    leniency.set_default(False)
    leniency.disable()
    yield
    leniency.set_default(False)
    leniency.disable()


@pytest.fixture(autouse=True)
def fresh_active_config() -> Iterator[None]:
    """Drop any config installed by a test so the next read re-seeds it."""
    reset_active_config()
    yield
    reset_active_config()


@pytest.fixture
def reset_structlog() -> Iterator[None]:
    """Restore structlog defaults after a test reconfigures it."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from result_contract import __version__

    return __version__
