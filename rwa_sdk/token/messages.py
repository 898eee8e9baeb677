"""
CW20 token contract messages.
"""
from typing import ClassVar

from ..models import ContractMsg, Uint128


class Transfer(ContractMsg):
    tag: ClassVar[str] = "transfer"

    recipient: str
    amount: Uint128


class TransferFrom(ContractMsg):
    tag: ClassVar[str] = "transfer_from"

    owner: str
    recipient: str
    amount: Uint128


class Balance(ContractMsg):
    tag: ClassVar[str] = "balance"

    address: str


class TokenInfo(ContractMsg):
    tag: ClassVar[str] = "token_info"
