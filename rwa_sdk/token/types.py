"""
CW20 query responses.
"""
from pydantic import BaseModel

from ..models import Uint128


class BalanceResponse(BaseModel):
    balance: Uint128


class TokenInfoResponse(BaseModel):
    """Token metadata"""
    name: str
    symbol: str
    decimals: int
    total_supply: Uint128
