"""
Exceptions for the RWA SDK.
"""
from typing import Optional


class RwaError(Exception):
    """Base exception for all RWA SDK errors."""
    pass


class NetworkError(RwaError):
    """Raised when the RPC endpoint is unreachable, times out or returns a transport-level error."""

    def __init__(self, message: str, code: Optional[int] = None, data: Optional[str] = None):
        self.code = code
        self.data = data
        super().__init__(message)


class EncodingError(RwaError):
    """Raised when a message cannot be serialized for the chain."""
    pass


class DecodeError(RwaError):
    """Raised when a chain response cannot be parsed into the expected shape."""
    pass


class SigningError(RwaError):
    """Raised when key material is invalid or a signature cannot be produced."""
    pass


class NotFound(RwaError):
    """Raised when the queried account or contract state does not exist on-chain."""
    pass


class QueryError(RwaError):
    """Raised when a read-only query is rejected by the chain or the contract."""

    def __init__(self, message: str, code: int = 0, codespace: str = "", log: str = ""):
        self.code = code
        self.codespace = codespace
        self.log = log
        super().__init__(message)


class ExecutionError(RwaError):
    """
    Raised when the chain rejects a transaction or commits it with a failing result.

    Attributes:
        code: ABCI result code reported by the chain
        codespace: Module that produced the code
        log: Raw log returned with the result
        tx_hash: Hash of the rejected transaction
        height: Block height (0 when rejected before inclusion)
        stage: "check_tx" or "tx_result"
        data: Raw result data, if any
    """

    def __init__(
        self,
        message: str,
        code: int,
        codespace: str = "",
        log: str = "",
        tx_hash: str = "",
        height: int = 0,
        stage: str = "tx_result",
        data: bytes = b"",
    ):
        self.code = code
        self.codespace = codespace
        self.log = log
        self.tx_hash = tx_hash
        self.height = height
        self.stage = stage
        self.data = data
        super().__init__(message)
