from .client_creator import (
    TEST_CHAIN_ID, TEST_COMPLIANCE, TEST_DENOM, TEST_GAS_PRICE, TEST_IDENTITY,
    TEST_OTHER_PRIV_KEY, TEST_PRIV_KEY, TEST_RECIPIENT, TEST_RPC_URL, TEST_SENDER,
    TEST_TOKEN, create_test_client, create_test_key
)
from .mock_chain import DecodedTx, MockChain, decode_tx
