"""
Protocol buffer types used on the wire by the RWA SDK.

This module provides the Cosmos SDK transaction and auth messages and the
CosmWasm execute/query messages needed to build, sign and decode requests.
"""
from .cosmos import (
    Any,
    AuthInfo,
    BaseAccount,
    BaseAccountWrapper,
    Coin,
    Fee,
    ModeInfo,
    MsgExecuteContract,
    PubKey,
    QueryAccountRequest,
    QueryAccountResponse,
    QuerySmartContractStateRequest,
    QuerySmartContractStateResponse,
    SignDoc,
    SignerInfo,
    TxBody,
    TxRaw,
    VestingAccountWrapper,
    pack_any,
)

# cosmos.tx.signing.v1beta1.SignMode
SIGN_MODE_DIRECT = 1

MSG_EXECUTE_CONTRACT_TYPE_URL = "/cosmwasm.wasm.v1.MsgExecuteContract"
SECP256K1_PUBKEY_TYPE_URL = "/cosmos.crypto.secp256k1.PubKey"
BASE_ACCOUNT_TYPE_URL = "/cosmos.auth.v1beta1.BaseAccount"

# ABCI query paths served by the chain's gRPC router
ACCOUNT_QUERY_PATH = "/cosmos.auth.v1beta1.Query/Account"
SMART_CONTRACT_STATE_QUERY_PATH = "/cosmwasm.wasm.v1.Query/SmartContractState"

__all__ = [
    'Any',
    'AuthInfo',
    'BaseAccount',
    'BaseAccountWrapper',
    'Coin',
    'Fee',
    'ModeInfo',
    'MsgExecuteContract',
    'PubKey',
    'QueryAccountRequest',
    'QueryAccountResponse',
    'QuerySmartContractStateRequest',
    'QuerySmartContractStateResponse',
    'SignDoc',
    'SignerInfo',
    'TxBody',
    'TxRaw',
    'VestingAccountWrapper',
    'pack_any',
    'SIGN_MODE_DIRECT',
    'MSG_EXECUTE_CONTRACT_TYPE_URL',
    'SECP256K1_PUBKEY_TYPE_URL',
    'BASE_ACCOUNT_TYPE_URL',
    'ACCOUNT_QUERY_PATH',
    'SMART_CONTRACT_STATE_QUERY_PATH',
]
