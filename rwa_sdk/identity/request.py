"""
Request structures for identity operations.
"""
from pydantic import BaseModel, ConfigDict, Field

from ..models import SignedRequest, Uint128
from .types import Claim


class AddIdentityRequest(SignedRequest):
    """Register an identity for the sender"""
    country: str


class UpdateIdentityRequest(SignedRequest):
    """Change the country of an existing identity"""
    new_country: str
    identity_owner: str


class RemoveIdentityRequest(SignedRequest):
    identity_owner: str


class AddClaimRequest(SignedRequest):
    """Attach a claim to a user's identity"""
    claim: Claim
    identity_owner: str


class RemoveClaimRequest(SignedRequest):
    claim_topic: Uint128
    identity_owner: str


class GetValidatedClaimsRequest(BaseModel):
    identity_owner: str


class CheckUserForTokenComplianceRequest(BaseModel):
    """Check whether a user may hold or transfer a given token"""
    model_config = ConfigDict(populate_by_name=True)

    token_address: str
    from_: str = Field(..., alias="from")
