"""
Read-only smart contract queries.
"""
import json
import logging
from typing import Any, Optional, Type, TypeVar

from google.protobuf.message import DecodeError as ProtobufDecodeError
from pydantic import TypeAdapter, ValidationError

from . import proto
from .account import is_not_found
from .exceptions import DecodeError, NotFound, QueryError
from .rpc import TendermintRpc
from .utils import encode_json

T = TypeVar('T')

logger = logging.getLogger(__name__)


class QueryExecutor:
    """
    Runs smart contract state queries: no signature, no fee, no sequence.

    Results are never cached since contract state may change between calls.
    """

    def __init__(self, rpc: TendermintRpc, logger: Optional[logging.Logger] = None):
        self.rpc = rpc
        self.logger = logger or logging.getLogger(__name__)

    def query_raw(self, contract_address: str, message: Any) -> bytes:
        """
        Query a contract and return the undecoded JSON bytes of its answer.

        Raises:
            EncodingError: If the message is not serializable
            NotFound: If the contract or the requested state does not exist
            QueryError: If the contract rejects the query
            DecodeError: If the query envelope cannot be decoded
            NetworkError: On transport failure
        """
        request = proto.QuerySmartContractStateRequest(
            address=contract_address,
            query_data=encode_json(message),
        )
        response = self.rpc.abci_query(proto.SMART_CONTRACT_STATE_QUERY_PATH, request.SerializeToString())

        if not response.ok:
            if is_not_found(response):
                raise NotFound(f"Query on {contract_address} found no state: {response.log}")
            raise QueryError(
                f"Query on {contract_address} failed with code {response.code}: {response.log}",
                code=response.code,
                codespace=response.codespace,
                log=response.log,
            )

        try:
            envelope = proto.QuerySmartContractStateResponse.FromString(response.value)
        except ProtobufDecodeError as e:
            raise DecodeError(f"Failed to decode query response from {contract_address}: {e}") from e

        self.logger.debug(f"Query on {contract_address} returned {len(envelope.data)} bytes")
        return envelope.data

    def query(self, contract_address: str, message: Any, result_type: Optional[Type[T]] = None) -> T:
        """
        Query a contract and decode the JSON answer.

        Args:
            contract_address: Contract to query
            message: Query message (ContractMsg, pydantic model or JSON data)
            result_type: Type to decode into; the raw JSON value is returned when omitted

        Returns:
            The decoded result

        Raises:
            DecodeError: If the envelope or the payload cannot be decoded
            NotFound: If the contract or the requested state does not exist
            QueryError: If the contract rejects the query
            NetworkError: On transport failure
        """
        data = self.query_raw(contract_address, message)

        try:
            if result_type is None:
                return json.loads(data)
            return TypeAdapter(result_type).validate_json(data)
        except (ValueError, ValidationError) as e:
            raise DecodeError(f"Failed to decode query result from {contract_address}: {e}") from e
