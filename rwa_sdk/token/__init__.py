"""
Token module for the RWA SDK.

This module handles CW20 token transfers and balance and metadata queries
against the token contract.
"""
from ..models import ExecutionResult
from .messages import Balance, TokenInfo, Transfer, TransferFrom
from .request import TokenInfoRequest, TransferMessageRequest
from .types import BalanceResponse, TokenInfoResponse

__all__ = [
    'TokenOperations',
    'TransferMessageRequest',
    'TokenInfoRequest',
    'BalanceResponse',
    'TokenInfoResponse',
]


class TokenOperations:
    """
    Token contract operations, mixed into :class:`rwa_sdk.RwaClient`.

    Amounts are passed through unchanged; a zero amount is left for the
    contract to accept or reject.
    """

    def transfer(self, request: TransferMessageRequest) -> ExecutionResult:
        """
        Transfer tokens from the sender to ``request.to``.

        Returns:
            ExecutionResult of the committed transaction
        """
        msg = Transfer(recipient=request.to, amount=request.amount)
        return self._execute(request, msg, self.token_address)

    def transfer_from(self, request: TransferMessageRequest) -> ExecutionResult:
        """
        Transfer tokens out of ``request.owner`` (or the sender) using an allowance.
        """
        msg = TransferFrom(
            owner=request.owner or request.from_,
            recipient=request.to,
            amount=request.amount,
        )
        return self._execute(request, msg, self.token_address)

    def balance(self, request: TokenInfoRequest) -> BalanceResponse:
        return self._query(self.token_address, Balance(address=request.address), BalanceResponse)

    def token_info(self) -> TokenInfoResponse:
        """Fetch name, symbol, decimals and total supply of the token."""
        return self._query(self.token_address, TokenInfo(), TokenInfoResponse)

    def coin_info(self) -> TokenInfoResponse:
        """Alias of :meth:`token_info`."""
        return self.token_info()
