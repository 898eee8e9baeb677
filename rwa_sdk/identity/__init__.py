"""
Identity module for the RWA SDK.

This module handles registering, updating and removing identities in the
identity registry contract, managing the claims attached to them, and checking
whether a user satisfies a token's compliance rules.
"""
import logging
from typing import List

from ..models import ExecutionResult
from .messages import (
    AddClaim, AddIdentity, CheckTokenCompliance, GetValidatedClaims,
    RemoveClaim, RemoveIdentity, UpdateIdentity
)
from .request import (
    AddClaimRequest, AddIdentityRequest, CheckUserForTokenComplianceRequest,
    GetValidatedClaimsRequest, RemoveClaimRequest, RemoveIdentityRequest,
    UpdateIdentityRequest
)
from .types import Claim, ComplianceResponse

__all__ = [
    'IdentityOperations',
    'Claim',
    'ComplianceResponse',
    'AddIdentityRequest',
    'UpdateIdentityRequest',
    'RemoveIdentityRequest',
    'AddClaimRequest',
    'RemoveClaimRequest',
    'GetValidatedClaimsRequest',
    'CheckUserForTokenComplianceRequest',
]

logger = logging.getLogger(__name__)


class IdentityOperations:
    """
    Identity registry operations, mixed into :class:`rwa_sdk.RwaClient`.

    Relies on the client's ``identity_address``, ``compliance_address``,
    ``_execute`` and ``_query``.
    """

    def add_identity(self, request: AddIdentityRequest) -> ExecutionResult:
        """
        Register an identity for ``request.from_``.

        Args:
            request: Sender, country, signer and gas limit

        Returns:
            ExecutionResult of the committed transaction
        """
        msg = AddIdentity(country=request.country)
        return self._execute(request, msg, self.identity_address)

    def update_identity(self, request: UpdateIdentityRequest) -> ExecutionResult:
        """Change the country recorded for ``request.identity_owner``."""
        msg = UpdateIdentity(identity_owner=request.identity_owner, new_country=request.new_country)
        return self._execute(request, msg, self.identity_address)

    def remove_identity(self, request: RemoveIdentityRequest) -> ExecutionResult:
        msg = RemoveIdentity(identity_owner=request.identity_owner)
        return self._execute(request, msg, self.identity_address)

    def add_claim(self, request: AddClaimRequest) -> ExecutionResult:
        """
        Attach ``request.claim`` to the identity of ``request.identity_owner``.

        The sender must be a trusted issuer for the claim topic; this is
        enforced by the contract.
        """
        msg = AddClaim(identity_owner=request.identity_owner, claim=request.claim)
        return self._execute(request, msg, self.identity_address)

    def remove_claim(self, request: RemoveClaimRequest) -> ExecutionResult:
        msg = RemoveClaim(identity_owner=request.identity_owner, claim_topic=request.claim_topic)
        return self._execute(request, msg, self.identity_address)

    def get_validated_claims(self, request: GetValidatedClaimsRequest) -> List[Claim]:
        """
        Fetch the validated claims of an identity.

        Returns:
            Claims in the order reported by the contract
        """
        msg = GetValidatedClaims(identity_owner=request.identity_owner)
        return self._query(self.identity_address, msg, List[Claim])

    def check_token_compliance(self, request: CheckUserForTokenComplianceRequest) -> bool:
        """
        Ask the compliance contract whether ``request.from_`` is compliant for a token.

        Returns:
            True if compliant; a non-compliant user yields False, not an error
        """
        msg = CheckTokenCompliance(token_address=request.token_address, from_=request.from_)
        response = self._query(self.compliance_address, msg, ComplianceResponse)
        return response.compliant
