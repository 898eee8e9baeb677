"""
Account number and sequence lookup.
"""
import logging
from typing import Optional

from google.protobuf.message import DecodeError as ProtobufDecodeError

from . import proto
from .exceptions import DecodeError, NotFound, QueryError
from .models import AccountInfo
from .rpc import AbciQueryResponse, TendermintRpc

logger = logging.getLogger(__name__)

# Account types that embed BaseAccount as their first field
_WRAPPED_ACCOUNT_TYPES = frozenset([
    "/cosmos.auth.v1beta1.ModuleAccount",
    "/ethermint.types.v1.EthAccount",
    "/injective.types.v1beta1.EthAccount",
])

# Vesting accounts embed BaseVestingAccount, which embeds BaseAccount
_VESTING_ACCOUNT_TYPES = frozenset([
    "/cosmos.vesting.v1beta1.ContinuousVestingAccount",
    "/cosmos.vesting.v1beta1.DelayedVestingAccount",
    "/cosmos.vesting.v1beta1.PeriodicVestingAccount",
    "/cosmos.vesting.v1beta1.PermanentLockedAccount",
])


def is_not_found(response: AbciQueryResponse) -> bool:
    """Whether a failed ABCI query reports missing state."""
    return "not found" in response.log.lower()


def decode_account(account_any) -> AccountInfo:
    """
    Extract account number and sequence from an ``Any``-wrapped account.

    Raises:
        DecodeError: If the account type is unknown or the bytes are malformed
    """
    type_url = account_any.type_url
    try:
        if type_url == proto.BASE_ACCOUNT_TYPE_URL:
            account = proto.BaseAccount.FromString(account_any.value)
        elif type_url in _WRAPPED_ACCOUNT_TYPES:
            account = proto.BaseAccountWrapper.FromString(account_any.value).base_account
        elif type_url in _VESTING_ACCOUNT_TYPES:
            wrapper = proto.VestingAccountWrapper.FromString(account_any.value)
            account = wrapper.base_vesting_account.base_account
        else:
            raise DecodeError(f"Unsupported account type: {type_url or '<empty>'}")
    except ProtobufDecodeError as e:
        raise DecodeError(f"Failed to decode {type_url}: {e}") from e

    return AccountInfo(account_number=account.account_number, sequence=account.sequence)


class AccountResolver:
    """
    Fetches the current account number and sequence for a signer.

    Results are never cached: a stale sequence makes the chain reject the
    signature, so every transaction resolves its account right before signing.
    """

    def __init__(self, rpc: TendermintRpc, logger: Optional[logging.Logger] = None):
        self.rpc = rpc
        self.logger = logger or logging.getLogger(__name__)

    def resolve_account(self, address: str) -> AccountInfo:
        """
        Look up ``address`` in the auth module.

        Args:
            address: Bech32 account address

        Returns:
            AccountInfo with the current account number and sequence

        Raises:
            NotFound: If the address has no on-chain account
            DecodeError: If the response cannot be parsed as an account
            QueryError: If the chain rejects the query for another reason
            NetworkError: On transport failure
        """
        request = proto.QueryAccountRequest(address=address)
        response = self.rpc.abci_query(proto.ACCOUNT_QUERY_PATH, request.SerializeToString())

        if not response.ok:
            if is_not_found(response):
                raise NotFound(f"Account {address} not found")
            raise QueryError(
                f"Account query for {address} failed with code {response.code}: {response.log}",
                code=response.code,
                codespace=response.codespace,
                log=response.log,
            )
        if not response.value:
            raise NotFound(f"Account {address} not found")

        try:
            query_response = proto.QueryAccountResponse.FromString(response.value)
        except ProtobufDecodeError as e:
            raise DecodeError(f"Failed to decode account response for {address}: {e}") from e

        if not query_response.HasField("account"):
            raise NotFound(f"Account {address} not found")

        info = decode_account(query_response.account)
        self.logger.debug(
            f"Resolved account {address}: number={info.account_number} sequence={info.sequence}"
        )
        return info
