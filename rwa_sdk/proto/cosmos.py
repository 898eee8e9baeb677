"""
Cosmos SDK and CosmWasm message definitions.

Only the handful of messages the SDK puts on the wire are described here.
They are registered in a private descriptor pool so they never clash with
generated stubs another package may have loaded into the default pool.
Field numbers follow the upstream .proto files.
"""
from typing import Iterable, Optional

from google.protobuf import any_pb2, descriptor_pb2, descriptor_pool, message_factory

_F = descriptor_pb2.FieldDescriptorProto

STRING = _F.TYPE_STRING
BYTES = _F.TYPE_BYTES
UINT64 = _F.TYPE_UINT64
INT32 = _F.TYPE_INT32
MESSAGE = _F.TYPE_MESSAGE

_ANY = ".google.protobuf.Any"
_ANY_FILE = "google/protobuf/any.proto"


def _field(
    name: str,
    number: int,
    field_type: int,
    type_name: Optional[str] = None,
    repeated: bool = False,
) -> descriptor_pb2.FieldDescriptorProto:
    field = _F(
        name=name,
        number=number,
        type=field_type,
        label=_F.LABEL_REPEATED if repeated else _F.LABEL_OPTIONAL,
    )
    if type_name:
        field.type_name = type_name
    return field


def _message(
    name: str,
    fields: Iterable[descriptor_pb2.FieldDescriptorProto],
    nested: Iterable[descriptor_pb2.DescriptorProto] = (),
) -> descriptor_pb2.DescriptorProto:
    message = descriptor_pb2.DescriptorProto(name=name)
    message.field.extend(fields)
    message.nested_type.extend(nested)
    return message


def _file(
    name: str,
    package: str,
    messages: Iterable[descriptor_pb2.DescriptorProto],
    dependencies: Iterable[str] = (),
) -> descriptor_pb2.FileDescriptorProto:
    proto_file = descriptor_pb2.FileDescriptorProto(name=name, package=package, syntax="proto3")
    proto_file.dependency.extend(dependencies)
    proto_file.message_type.extend(messages)
    return proto_file


_FILES = [
    _file("cosmos/base/v1beta1/coin.proto", "cosmos.base.v1beta1", [
        _message("Coin", [
            _field("denom", 1, STRING),
            _field("amount", 2, STRING),
        ]),
    ]),
    _file("cosmos/crypto/secp256k1/keys.proto", "cosmos.crypto.secp256k1", [
        _message("PubKey", [
            _field("key", 1, BYTES),
        ]),
    ]),
    _file("cosmos/auth/v1beta1/auth.proto", "cosmos.auth.v1beta1", [
        _message("BaseAccount", [
            _field("address", 1, STRING),
            _field("pub_key", 2, MESSAGE, _ANY),
            _field("account_number", 3, UINT64),
            _field("sequence", 4, UINT64),
        ]),
        # Any account type whose first field is an embedded BaseAccount
        # (ModuleAccount, ethermint EthAccount, ...)
        _message("BaseAccountWrapper", [
            _field("base_account", 1, MESSAGE, ".cosmos.auth.v1beta1.BaseAccount"),
        ]),
        # Vesting accounts nest BaseAccount one level deeper
        _message("VestingAccountWrapper", [
            _field("base_vesting_account", 1, MESSAGE, ".cosmos.auth.v1beta1.BaseAccountWrapper"),
        ]),
    ], dependencies=[_ANY_FILE]),
    _file("cosmos/auth/v1beta1/query.proto", "cosmos.auth.v1beta1", [
        _message("QueryAccountRequest", [
            _field("address", 1, STRING),
        ]),
        _message("QueryAccountResponse", [
            _field("account", 1, MESSAGE, _ANY),
        ]),
    ], dependencies=[_ANY_FILE]),
    _file("cosmos/tx/v1beta1/tx.proto", "cosmos.tx.v1beta1", [
        _message("TxBody", [
            _field("messages", 1, MESSAGE, _ANY, repeated=True),
            _field("memo", 2, STRING),
            _field("timeout_height", 3, UINT64),
        ]),
        _message("ModeInfo", [
            _field("single", 1, MESSAGE, ".cosmos.tx.v1beta1.ModeInfo.Single"),
        ], nested=[
            _message("Single", [
                _field("mode", 1, INT32),
            ]),
        ]),
        _message("SignerInfo", [
            _field("public_key", 1, MESSAGE, _ANY),
            _field("mode_info", 2, MESSAGE, ".cosmos.tx.v1beta1.ModeInfo"),
            _field("sequence", 3, UINT64),
        ]),
        _message("Fee", [
            _field("amount", 1, MESSAGE, ".cosmos.base.v1beta1.Coin", repeated=True),
            _field("gas_limit", 2, UINT64),
            _field("payer", 3, STRING),
            _field("granter", 4, STRING),
        ]),
        _message("AuthInfo", [
            _field("signer_infos", 1, MESSAGE, ".cosmos.tx.v1beta1.SignerInfo", repeated=True),
            _field("fee", 2, MESSAGE, ".cosmos.tx.v1beta1.Fee"),
        ]),
        _message("SignDoc", [
            _field("body_bytes", 1, BYTES),
            _field("auth_info_bytes", 2, BYTES),
            _field("chain_id", 3, STRING),
            _field("account_number", 4, UINT64),
        ]),
        _message("TxRaw", [
            _field("body_bytes", 1, BYTES),
            _field("auth_info_bytes", 2, BYTES),
            _field("signatures", 3, BYTES, repeated=True),
        ]),
    ], dependencies=[_ANY_FILE, "cosmos/base/v1beta1/coin.proto"]),
    _file("cosmwasm/wasm/v1/tx.proto", "cosmwasm.wasm.v1", [
        _message("MsgExecuteContract", [
            _field("sender", 1, STRING),
            _field("contract", 2, STRING),
            _field("msg", 3, BYTES),
            _field("funds", 5, MESSAGE, ".cosmos.base.v1beta1.Coin", repeated=True),
        ]),
    ], dependencies=["cosmos/base/v1beta1/coin.proto"]),
    _file("cosmwasm/wasm/v1/query.proto", "cosmwasm.wasm.v1", [
        _message("QuerySmartContractStateRequest", [
            _field("address", 1, STRING),
            _field("query_data", 2, BYTES),
        ]),
        _message("QuerySmartContractStateResponse", [
            _field("data", 1, BYTES),
        ]),
    ]),
]

pool = descriptor_pool.DescriptorPool()
pool.AddSerializedFile(any_pb2.DESCRIPTOR.serialized_pb)
for _proto_file in _FILES:
    pool.AddSerializedFile(_proto_file.SerializeToString())


def message_class(full_name: str):
    """Return the message class registered under ``full_name``."""
    return message_factory.GetMessageClass(pool.FindMessageTypeByName(full_name))


Any = message_class("google.protobuf.Any")
Coin = message_class("cosmos.base.v1beta1.Coin")
PubKey = message_class("cosmos.crypto.secp256k1.PubKey")
BaseAccount = message_class("cosmos.auth.v1beta1.BaseAccount")
BaseAccountWrapper = message_class("cosmos.auth.v1beta1.BaseAccountWrapper")
VestingAccountWrapper = message_class("cosmos.auth.v1beta1.VestingAccountWrapper")
QueryAccountRequest = message_class("cosmos.auth.v1beta1.QueryAccountRequest")
QueryAccountResponse = message_class("cosmos.auth.v1beta1.QueryAccountResponse")
TxBody = message_class("cosmos.tx.v1beta1.TxBody")
ModeInfo = message_class("cosmos.tx.v1beta1.ModeInfo")
SignerInfo = message_class("cosmos.tx.v1beta1.SignerInfo")
Fee = message_class("cosmos.tx.v1beta1.Fee")
AuthInfo = message_class("cosmos.tx.v1beta1.AuthInfo")
SignDoc = message_class("cosmos.tx.v1beta1.SignDoc")
TxRaw = message_class("cosmos.tx.v1beta1.TxRaw")
MsgExecuteContract = message_class("cosmwasm.wasm.v1.MsgExecuteContract")
QuerySmartContractStateRequest = message_class("cosmwasm.wasm.v1.QuerySmartContractStateRequest")
QuerySmartContractStateResponse = message_class("cosmwasm.wasm.v1.QuerySmartContractStateResponse")


def pack_any(message, type_url: Optional[str] = None):
    """Wrap ``message`` in an Any using the Cosmos "/<full name>" type URL."""
    return Any(
        type_url=type_url or f"/{message.DESCRIPTOR.full_name}",
        value=message.SerializeToString(),
    )
