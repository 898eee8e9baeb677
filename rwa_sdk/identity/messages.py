"""
Identity registry and compliance contract messages.
"""
from typing import ClassVar

from pydantic import Field

from ..models import ContractMsg, Uint128
from .types import Claim


class AddIdentity(ContractMsg):
    tag: ClassVar[str] = "add_identity"

    country: str


class UpdateIdentity(ContractMsg):
    tag: ClassVar[str] = "update_identity"

    identity_owner: str
    new_country: str


class RemoveIdentity(ContractMsg):
    tag: ClassVar[str] = "remove_identity"

    identity_owner: str


class AddClaim(ContractMsg):
    tag: ClassVar[str] = "add_claim"

    identity_owner: str
    claim: Claim


class RemoveClaim(ContractMsg):
    tag: ClassVar[str] = "remove_claim"

    identity_owner: str
    claim_topic: Uint128


class GetValidatedClaims(ContractMsg):
    tag: ClassVar[str] = "get_validated_claims"

    identity_owner: str


class CheckTokenCompliance(ContractMsg):
    tag: ClassVar[str] = "check_token_compliance"

    token_address: str
    from_: str = Field(..., alias="from")
