"""
Request structures for token operations.
"""
from typing import Optional

from pydantic import BaseModel

from ..models import SignedRequest, Uint128


class TransferMessageRequest(SignedRequest):
    """
    Move ``amount`` tokens to ``to``.

    For ``transfer_from``, ``owner`` names the account whose allowance is
    spent; it defaults to the sender.
    """
    to: str
    amount: Uint128
    owner: Optional[str] = None


class TokenInfoRequest(BaseModel):
    address: str
