"""
Pytest fixtures for the RWA SDK tests.
"""
import pytest

from rwa_sdk._rate_limited_log import reset_rate_limited_log
from rwa_sdk.config import NetworkConfig

from tests.test_helpers import (
    TEST_COMPLIANCE, TEST_IDENTITY, TEST_SENDER, TEST_TOKEN,
    MockChain, create_test_client, create_test_key
)


@pytest.fixture(autouse=True)
def _reset_module_state(monkeypatch):
    """Isolate tests from cached network presets, logged warnings and the environment."""
    NetworkConfig._networks_cache = None
    reset_rate_limited_log()
    monkeypatch.delenv("RWA_RPC_TIMEOUT", raising=False)
    monkeypatch.delenv("RWA_NETWORKS_FILE", raising=False)
    monkeypatch.delenv("RWA_RPC_URL", raising=False)
    monkeypatch.delenv("LOCALNET_RPC_URL", raising=False)
    yield
    NetworkConfig._networks_cache = None
    reset_rate_limited_log()


@pytest.fixture
def signing_key():
    return create_test_key()


@pytest.fixture
def chain(requests_mock):
    """Mocked node with a funded sender and empty contracts."""
    mock_chain = MockChain().install(requests_mock)
    mock_chain.add_account(TEST_SENDER, account_number=7, sequence=42)
    for address in (TEST_TOKEN, TEST_IDENTITY, TEST_COMPLIANCE):
        mock_chain.add_contract(address, lambda message: {})
    return mock_chain


@pytest.fixture
def client(chain):
    rwa_client = create_test_client()
    yield rwa_client
    rwa_client.close()
