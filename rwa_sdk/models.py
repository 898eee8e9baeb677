"""
Data models for the RWA SDK.
"""
import base64
import binascii
from typing import Annotated, Any, ClassVar, Dict, List, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer

UINT64_MAX = 2**64 - 1
UINT128_MAX = 2**128 - 1


def _decode_binary(value: Any) -> Any:
    # CosmWasm Binary travels as base64 in JSON
    if isinstance(value, str):
        try:
            return base64.b64decode(value, validate=True)
        except binascii.Error as e:
            raise ValueError(f"Invalid base64 data: {e}")
    return value


def _encode_binary(value: bytes) -> str:
    return base64.b64encode(value).decode("ascii")


# Unsigned 128-bit integer, serialized as a decimal string like cosmwasm_std::Uint128
Uint128 = Annotated[
    int,
    Field(ge=0, le=UINT128_MAX),
    PlainSerializer(str, return_type=str, when_used="json"),
]

# Raw bytes, serialized as base64 like cosmwasm_std::Binary
Binary = Annotated[
    bytes,
    BeforeValidator(_decode_binary),
    PlainSerializer(_encode_binary, return_type=str, when_used="json"),
]


class Coin(BaseModel):
    """Amount of a single denomination"""
    model_config = ConfigDict(frozen=True)

    denom: str
    amount: Uint128

    def __str__(self) -> str:
        return f"{self.amount}{self.denom}"


class Fee(BaseModel):
    """Transaction fee: coins paid and the gas limit they cover"""
    model_config = ConfigDict(frozen=True)

    amount: List[Coin]
    gas_limit: int = Field(..., ge=0, le=UINT64_MAX)


class AccountInfo(BaseModel):
    """Account number and current sequence of an on-chain account"""
    model_config = ConfigDict(frozen=True)

    account_number: int = Field(..., ge=0)
    sequence: int = Field(..., ge=0)


class EventAttribute(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    value: Optional[str] = None
    index: bool = False


class Event(BaseModel):
    """Event emitted while executing a transaction"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: str = Field(..., alias="type")
    attributes: List[EventAttribute] = Field(default_factory=list)

    def attribute(self, key: str) -> Optional[str]:
        """Return the value of the first attribute named ``key``, if any."""
        for attr in self.attributes:
            if attr.key == key:
                return attr.value
        return None


class ExecutionResult(BaseModel):
    """Result of a committed contract execution"""
    model_config = ConfigDict(frozen=True)

    tx_hash: str
    data: Binary = b""
    gas_used: int = 0
    gas_wanted: int = 0
    events: List[Event] = Field(default_factory=list)
    height: int = 0

    def events_of(self, kind: str) -> List[Event]:
        """Return the events of the given type, in emission order."""
        return [event for event in self.events if event.kind == kind]


class ContractMsg(BaseModel):
    """
    Base class for contract messages.

    Messages are externally tagged: ``{"<tag>": {<fields>}}``, the JSON shape
    CosmWasm contracts expect for their ExecuteMsg/QueryMsg enums.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    tag: ClassVar[str] = ""

    def to_json_dict(self) -> Dict[str, Any]:
        return {self.tag: self.model_dump(mode="json", by_alias=True, exclude_none=True)}


# Gas limit used when a write request does not specify one
DEFAULT_GAS_LIMIT = 500_000


class SignedRequest(BaseModel):
    """
    Common fields of every state-changing request.

    ``from_`` (``from`` on the wire and as a keyword alias) is the sender; the
    signer must hold the key of that address. Authorization is enforced by
    the chain, not checked locally.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True, populate_by_name=True)

    from_: str = Field(..., alias="from")
    signer: Any = Field(..., repr=False)
    gas_limit: int = Field(DEFAULT_GAS_LIMIT, ge=0, le=UINT64_MAX)
