"""Shared fixtures for offline unit tests."""

import pytest

from contract_harness.common.config import HarnessConfig

from .fake_dog_api import BASE_URL, build_transport


@pytest.fixture
def fake_config() -> HarnessConfig:
    """Defaults pinned so environment overrides cannot leak into unit tests."""
    return HarnessConfig(contract_base_url=BASE_URL, contract_timeout_seconds=5.0)


@pytest.fixture
def dog_api_transport():
    """Factory for the fake dog API transport."""
    return build_transport
