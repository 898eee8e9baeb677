"""
Utility functions for creating test clients with consistent defaults.
"""
from typing import Optional

from rwa_sdk import RwaClient, SigningKey

# Test constants used throughout tests
TEST_RPC_URL = "http://localhost:26657"
TEST_CHAIN_ID = "rwa-test-1"
TEST_DENOM = "uxyz"
TEST_GAS_PRICE = 10
TEST_PRIV_KEY = "0x0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcdef"
TEST_OTHER_PRIV_KEY = "0x" + "ab" * 32
TEST_SENDER = "cosmos1sender0000000000000000000000000000"
TEST_RECIPIENT = "cosmos1recipient00000000000000000000000000"
TEST_TOKEN = "cosmos1token000000000000000000000000000000"
TEST_IDENTITY = "cosmos1identity0000000000000000000000000000"
TEST_COMPLIANCE = "cosmos1compliance00000000000000000000000000"


def create_test_key(priv_key: str = TEST_PRIV_KEY) -> SigningKey:
    return SigningKey.from_hex(priv_key)


def create_test_client(
    rpc_url: str = TEST_RPC_URL,
    chain_id: str = TEST_CHAIN_ID,
    token_address: str = TEST_TOKEN,
    identity_address: str = TEST_IDENTITY,
    compliance_address: str = TEST_COMPLIANCE,
    denom: str = TEST_DENOM,
    gas_price=TEST_GAS_PRICE,
    timeout: Optional[float] = 5,
    **kwargs
) -> RwaClient:
    """
    Create a client instance for testing with consistent defaults.

    Args:
        rpc_url: RPC URL of the mocked node
        chain_id: Chain ID transactions are signed for
        token_address: Token contract address
        identity_address: Identity registry contract address
        compliance_address: Compliance contract address
        denom: Fee denomination
        gas_price: Gas price
        timeout: Timeout in seconds
        **kwargs: Additional parameters

    Returns:
        Configured RwaClient instance
    """
    return RwaClient(
        rpc_url=rpc_url,
        chain_id=chain_id,
        token_address=token_address,
        identity_address=identity_address,
        compliance_address=compliance_address,
        denom=denom,
        gas_price=gas_price,
        timeout=timeout,
        **kwargs
    )
