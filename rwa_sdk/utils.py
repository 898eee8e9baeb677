"""
Utility functions for the RWA SDK.
"""
import hashlib
import json
from typing import Any

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError

from .exceptions import EncodingError
from .models import ContractMsg


def sha256_hex(data: bytes) -> str:
    """Return the hex SHA-256 digest of ``data``."""
    return hashlib.sha256(data).hexdigest()


def tx_hash(tx_bytes: bytes) -> str:
    """Return the CometBFT hash of a raw transaction (upper-case hex SHA-256)."""
    return sha256_hex(tx_bytes).upper()


def to_json_value(message: Any) -> Any:
    """Convert a message into plain JSON-compatible data."""
    if isinstance(message, ContractMsg):
        return message.to_json_dict()
    if isinstance(message, BaseModel):
        return message.model_dump(mode="json", by_alias=True, exclude_none=True)
    return message


def encode_json(message: Any) -> bytes:
    """
    Serialize a contract message to compact UTF-8 JSON.

    Args:
        message: A ContractMsg, any pydantic model, or plain JSON data

    Returns:
        The encoded bytes

    Raises:
        EncodingError: If the message is not JSON serializable
    """
    try:
        value = to_json_value(message)
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError, PydanticSerializationError) as e:
        raise EncodingError(f"Message is not JSON serializable: {e}") from e
