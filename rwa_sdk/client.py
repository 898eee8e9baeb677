"""
RwaClient - Main client for tokenized real-world-asset contracts.
"""
import logging
import os
import urllib.parse
from decimal import Decimal
from typing import Any, Optional, Sequence, Type, TypeVar, Union

import requests

from ._rate_limited_log import rate_limited_log
from .account import AccountResolver
from .compliance import ComplianceOperations
from .config import NetworkConfig
from .identity import IdentityOperations
from .models import AccountInfo, Coin, ExecutionResult, SignedRequest
from .query import QueryExecutor
from .rpc import TendermintRpc
from .signer import Signer
from .token import TokenOperations
from .tx import GasPrice, TransactionExecutor

T = TypeVar('T')

DEFAULT_TIMEOUT = 30

_LOCAL_HOSTS = ("localhost", "127.0.0.1", "::1")


class RwaClient(IdentityOperations, ComplianceOperations, TokenOperations):
    """
    Client for the identity registry, compliance and token contracts of an RWA deployment.

    The client is an immutable context (endpoint, chain ID, contract
    addresses, fee denomination and gas price) shared by every operation.
    It can be used from several threads at once. Transactions from the same
    signer must still be sent one at a time, since each one consumes the
    account's next sequence number.
    """

    def __init__(
        self,
        rpc_url: str,
        chain_id: str,
        token_address: str,
        identity_address: str,
        compliance_address: str,
        denom: str,
        gas_price: GasPrice,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the RwaClient

        Args:
            rpc_url: Tendermint RPC endpoint URL (e.g., "http://localhost:26657")
            chain_id: Chain identifier the transactions are signed for
            token_address: Address of the token contract
            identity_address: Address of the identity registry contract
            compliance_address: Address of the compliance contract
            denom: Denomination fees are paid in
            gas_price: Amount of ``denom`` paid per unit of gas
            timeout: Timeout for RPC requests in seconds (default: RWA_RPC_TIMEOUT or 30)
            session: Optional requests session to send RPC calls through
            logger: Optional logger instance to use for debug/info logging

        Raises:
            ValueError: If the URL cannot be parsed or a parameter is invalid
        """
        self.logger = logger or logging.getLogger(__name__)
        self._validate_rpc_url(rpc_url)

        if not chain_id:
            raise ValueError("chain_id must not be empty")
        if not denom:
            raise ValueError("denom must not be empty")
        if isinstance(gas_price, bool) or not isinstance(gas_price, (int, Decimal)):
            raise ValueError(f"gas_price must be an int or Decimal, got {type(gas_price).__name__}")
        if isinstance(gas_price, Decimal) and not gas_price.is_finite():
            raise ValueError(f"gas_price must be finite, got {gas_price}")
        if gas_price < 0:
            raise ValueError(f"gas_price must be non-negative, got {gas_price}")

        self._rpc_url = rpc_url
        self._chain_id = chain_id
        self._token_address = token_address
        self._identity_address = identity_address
        self._compliance_address = compliance_address
        self._denom = denom
        self._gas_price = gas_price

        if timeout is None:
            timeout = float(os.environ.get("RWA_RPC_TIMEOUT", str(DEFAULT_TIMEOUT)))

        self.rpc = TendermintRpc(rpc_url, timeout=timeout, session=session, logger=self.logger)
        self.accounts = AccountResolver(self.rpc, logger=self.logger)
        self.executor = TransactionExecutor(
            self.rpc, self.accounts, chain_id, denom, gas_price, logger=self.logger
        )
        self.queries = QueryExecutor(self.rpc, logger=self.logger)

        self.logger.debug(f"Initialized RwaClient for chain {chain_id} at {rpc_url}")

    def _validate_rpc_url(self, url: str) -> None:
        """
        Validate the RPC URL.

        Raises:
            ValueError: If the URL has no http(s) scheme or host, or a malformed port
        """
        try:
            parsed = urllib.parse.urlparse(url)
            host = parsed.hostname or ""
            parsed.port  # raises ValueError on a malformed port
        except (ValueError, AttributeError) as e:
            raise ValueError(f"Invalid rpc_url '{url}': {e}") from e

        if parsed.scheme not in ("http", "https"):
            raise ValueError(f"rpc_url must use http:// or https:// (got: {parsed.scheme or 'no scheme'})")
        if not host:
            raise ValueError(f"rpc_url has no host: '{url}'")

        if parsed.scheme != "https" and host not in _LOCAL_HOSTS:
            rate_limited_log(
                f"RPC endpoint {url} is not using https; transactions are sent in plaintext",
                logger_instance=self.logger,
            )

    @classmethod
    def from_network(
        cls,
        network: str,
        rpc_url: Optional[str] = None,
        **kwargs: Any
    ) -> "RwaClient":
        """
        Create a client from a named network preset.

        Args:
            network: Network name in the networks configuration (e.g., "localnet")
            rpc_url: Optional RPC URL overriding the preset
            **kwargs: Overrides for any constructor argument (contract addresses,
                denom, gas_price, timeout, session, logger)

        Raises:
            ValueError: If the network is unknown or a contract address is missing
        """
        params = {
            "chain_id": NetworkConfig.get_chain_id(network),
            "denom": NetworkConfig.get_denom(network),
            "gas_price": NetworkConfig.get_gas_price(network),
        }
        params.update(NetworkConfig.get_contract_addresses(network))
        params.update({key: value for key, value in kwargs.items() if value is not None})

        missing = [
            name for name in ("token_address", "identity_address", "compliance_address")
            if not params.get(name)
        ]
        if missing:
            raise ValueError(f"Network '{network}' has no {', '.join(missing)}; pass them explicitly")

        return cls(rpc_url=NetworkConfig.get_rpc_url(network, override=rpc_url), **params)

    @property
    def rpc_url(self) -> str:
        return self._rpc_url

    @property
    def chain_id(self) -> str:
        return self._chain_id

    @property
    def token_address(self) -> str:
        return self._token_address

    @property
    def identity_address(self) -> str:
        return self._identity_address

    @property
    def compliance_address(self) -> str:
        return self._compliance_address

    @property
    def denom(self) -> str:
        return self._denom

    @property
    def gas_price(self) -> Union[int, Decimal]:
        return self._gas_price

    def assert_chain_id(self) -> None:
        """
        Check that the node serves the configured chain.

        Raises:
            ValueError: If the node reports a different chain ID
            NetworkError: On transport failure
        """
        status = self.rpc.status()
        network = (status.get("node_info") or {}).get("network")
        if network != self._chain_id:
            raise ValueError(f"Chain ID mismatch: expected {self._chain_id}, node reports {network}")

    def resolve_account(self, address: str) -> AccountInfo:
        """Fetch the current account number and sequence of ``address``."""
        return self.accounts.resolve_account(address)

    def execute(
        self,
        sender: str,
        message: Any,
        contract_address: str,
        funds: Sequence[Coin],
        signer: Signer,
        gas_limit: int
    ) -> ExecutionResult:
        """
        Execute an arbitrary message on a contract.

        Args:
            sender: Address of the signer
            message: Contract message (ContractMsg, pydantic model or JSON data)
            contract_address: Contract to execute
            funds: Coins attached to the call
            signer: Key for ``sender``
            gas_limit: Gas limit; the fee is gas_limit x gas_price

        Returns:
            ExecutionResult of the committed transaction
        """
        return self.executor.execute(sender, message, contract_address, funds, signer, gas_limit)

    def build_transaction(
        self,
        sender: str,
        message: Any,
        contract_address: str,
        funds: Sequence[Coin],
        signer: Signer,
        gas_limit: int,
        account: Optional[AccountInfo] = None
    ) -> bytes:
        """Build and sign a contract execution without broadcasting it."""
        return self.executor.build_transaction(
            sender, message, contract_address, funds, signer, gas_limit, account=account
        )

    def query(self, contract_address: str, message: Any, result_type: Optional[Type[T]] = None) -> T:
        """
        Query an arbitrary contract.

        Returns:
            The answer decoded as ``result_type`` (raw JSON when omitted)
        """
        return self.queries.query(contract_address, message, result_type)

    def _execute(
        self,
        request: SignedRequest,
        message: Any,
        contract_address: str,
        funds: Sequence[Coin] = ()
    ) -> ExecutionResult:
        return self.executor.execute(
            request.from_, message, contract_address, funds, request.signer, request.gas_limit
        )

    def _query(self, contract_address: str, message: Any, result_type: Type[T]) -> T:
        return self.queries.query(contract_address, message, result_type)

    def close(self) -> None:
        """Close the RPC session."""
        self.rpc.close()

    def __enter__(self) -> "RwaClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"RwaClient(rpc_url={self._rpc_url!r}, chain_id={self._chain_id!r})"
