"""Session fixtures for live contract tests.

One ``ContractClient`` is opened for the whole session and closed after the
last case, whatever the outcome.
"""

import pytest
import pytest_asyncio
import structlog

from contract_harness.common.config import HarnessConfig
from contract_harness.common.logging import configure_logging
from contract_harness.common.metrics import MetricsCollector
from contract_harness.contracts.client import ContractClient

SUITE_NAME = "dog-api-contracts"

logger = structlog.get_logger("contract_session")


@pytest.fixture(scope="session")
def live_config() -> HarnessConfig:
    """Settings read from the environment."""
    return HarnessConfig()


@pytest.fixture(scope="session")
def contract_metrics() -> MetricsCollector:
    return MetricsCollector(SUITE_NAME)


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def contract_client(live_config, contract_metrics):
    """Shared client for every case in the session."""
    configure_logging(SUITE_NAME, live_config.contract_log_level, live_config.contract_log_format)
    async with ContractClient(live_config, metrics=contract_metrics) as client:
        yield client
    logger.debug("Contract session metrics", metrics=contract_metrics.get_metrics())
