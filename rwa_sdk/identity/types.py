"""
Data types for the identity module.
"""
from pydantic import BaseModel, ConfigDict

from ..models import Binary, Uint128


class Claim(BaseModel):
    """
    A signed assertion about an identity.

    Attributes:
        topic: Numeric claim type (e.g. 1 for KYC)
        issuer: Address of the trusted issuer
        data: Opaque claim payload
        uri: Reference to off-chain evidence
    """
    model_config = ConfigDict(frozen=True)

    topic: Uint128
    issuer: str
    data: Binary = b""
    uri: str = ""


class ComplianceResponse(BaseModel):
    """Answer to a token compliance check"""
    compliant: bool
