"""
Tendermint/CometBFT JSON-RPC transport.

Requests are JSON-RPC 2.0 calls POSTed to the node's RPC endpoint. Nothing is
retried here: a broadcast that is replayed after a timeout may already be in
the mempool, so retry policy is left to the caller.
"""
import base64
import binascii
import itertools
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .exceptions import DecodeError, NetworkError

logger = logging.getLogger(__name__)


@dataclass
class AbciQueryResponse:
    """
    Response to an ``abci_query`` call.

    ``value`` holds the raw protobuf bytes returned by the queried handler.
    """
    code: int = 0
    log: str = ""
    codespace: str = ""
    value: bytes = b""
    height: int = 0

    @property
    def ok(self) -> bool:
        return self.code == 0


def decode_base64(value: Optional[str], field: str) -> bytes:
    """Decode a base64 field of an RPC response (``None`` is treated as empty)."""
    if not value:
        return b""
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, TypeError) as e:
        raise DecodeError(f"Field '{field}' is not valid base64: {e}") from e


def to_int(value: Any, field: str) -> int:
    """Convert a numeric RPC field (often a JSON string) to int."""
    if value is None or value == "":
        return 0
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise DecodeError(f"Field '{field}' is not an integer: {value!r}") from e


class TendermintRpc:
    """
    Minimal client for the Tendermint RPC methods used by the SDK.
    """

    def __init__(
        self,
        rpc_url: str,
        timeout: float = 30,
        session: Optional[requests.Session] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the RPC client

        Args:
            rpc_url: Node RPC endpoint (e.g., "http://localhost:26657")
            timeout: Timeout for HTTP requests in seconds
            session: Optional pre-configured requests session
            logger: Optional logger instance to use for debug logging
        """
        self.rpc_url = rpc_url
        self.timeout = timeout
        self.logger = logger or logging.getLogger(__name__)
        self._ids = itertools.count(1)

        self._owns_session = session is None
        if session is None:
            session = requests.Session()
            # Never replay a request: a repeated broadcast could double-spend
            no_retries = Retry(total=0, connect=0, read=0, redirect=0, status=0, raise_on_status=False)
            session.mount("http://", HTTPAdapter(max_retries=no_retries))
            session.mount("https://", HTTPAdapter(max_retries=no_retries))
        self.session = session

    def call(self, method: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """
        Make a JSON-RPC call and return its ``result`` object.

        Raises:
            NetworkError: If the request fails, times out, or the node returns an error object
            DecodeError: If the response is not a JSON-RPC envelope
        """
        payload = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
            "params": params,
        }
        self.logger.debug(f"RPC call {method} to {self.rpc_url}")

        try:
            response = self.session.post(self.rpc_url, json=payload, timeout=self.timeout)
        except requests.Timeout as e:
            self.logger.error(f"RPC call {method} timed out: {e}")
            raise NetworkError(f"RPC call {method} timed out: {e}") from e
        except requests.RequestException as e:
            self.logger.error(f"RPC call {method} failed: {e}")
            raise NetworkError(f"RPC call {method} failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            if response.status_code >= 400:
                raise NetworkError(
                    f"RPC call {method} failed with HTTP {response.status_code}: {response.text[:200]}"
                ) from e
            raise DecodeError(f"Invalid JSON in RPC response to {method}: {e}") from e

        if not isinstance(data, dict):
            raise DecodeError(f"Unexpected RPC response to {method}: {data!r}")

        error = data.get("error")
        if error:
            if isinstance(error, dict):
                message = error.get("message", "")
                detail = error.get("data")
                raise NetworkError(
                    f"RPC error for {method}: {message}" + (f" ({detail})" if detail else ""),
                    code=error.get("code"),
                    data=detail,
                )
            raise NetworkError(f"RPC error for {method}: {error}")

        if response.status_code >= 400:
            raise NetworkError(f"RPC call {method} failed with HTTP {response.status_code}")

        result = data.get("result")
        if not isinstance(result, dict):
            raise DecodeError(f"Missing result in RPC response to {method}: {data!r}")
        return result

    def abci_query(self, path: str, data: bytes, height: int = 0, prove: bool = False) -> AbciQueryResponse:
        """
        Run a read-only ABCI query.

        Args:
            path: Query route (e.g., "/cosmwasm.wasm.v1.Query/SmartContractState")
            data: Protobuf-encoded request
            height: Block height to query at (0 for latest)
            prove: Whether to request a Merkle proof
        """
        result = self.call("abci_query", {
            "path": path,
            "data": data.hex(),
            "height": str(height),
            "prove": prove,
        })
        raw = result.get("response")
        if not isinstance(raw, dict):
            raise DecodeError(f"Missing response in abci_query result: {result!r}")

        return AbciQueryResponse(
            code=to_int(raw.get("code"), "code"),
            log=raw.get("log") or "",
            codespace=raw.get("codespace") or "",
            value=decode_base64(raw.get("value"), "value"),
            height=to_int(raw.get("height"), "height"),
        )

    def broadcast_tx_commit(self, tx_bytes: bytes) -> Dict[str, Any]:
        """
        Submit a signed transaction and wait until it is committed in a block.

        Returns:
            The raw ``broadcast_tx_commit`` result
        """
        return self.call("broadcast_tx_commit", {"tx": base64.b64encode(tx_bytes).decode("ascii")})

    def status(self) -> Dict[str, Any]:
        """Return the node status (node_info, sync_info, validator_info)."""
        return self.call("status", {})

    def close(self) -> None:
        """Close the HTTP session if this transport created it."""
        if self._owns_session:
            self.session.close()
