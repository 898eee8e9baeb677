#!/usr/bin/env python3
"""
Example of managing identities and claims with the RWA SDK.
"""
import os

from rwa_sdk import (
    AddClaimRequest, AddIdentityRequest, CheckUserForTokenComplianceRequest, Claim,
    GetValidatedClaimsRequest, RwaClient, RwaError, SigningKey
)


def main():
    """
    Demonstrate identity registry operations.

    This example shows how to:
    1. Register an identity for the sender
    2. Attach a KYC claim issued by a trusted issuer
    3. Read back the validated claims
    4. Check whether the user may hold the token
    """
    NETWORK = os.environ.get("RWA_NETWORK", "localnet")
    PRIVATE_KEY = os.environ.get("PRIVATE_KEY")
    SENDER = os.environ.get("SENDER_ADDRESS")
    ISSUER_KEY = os.environ.get("ISSUER_PRIVATE_KEY")
    ISSUER = os.environ.get("ISSUER_ADDRESS")

    if not all([PRIVATE_KEY, SENDER, ISSUER_KEY, ISSUER]):
        print("ERROR: PRIVATE_KEY, SENDER_ADDRESS, ISSUER_PRIVATE_KEY and ISSUER_ADDRESS are required")
        return

    user_key = SigningKey.from_hex(PRIVATE_KEY)
    issuer_key = SigningKey.from_hex(ISSUER_KEY)

    with RwaClient.from_network(
        NETWORK,
        token_address=os.environ.get("TOKEN_ADDRESS"),
        identity_address=os.environ.get("IDENTITY_ADDRESS"),
        compliance_address=os.environ.get("COMPLIANCE_ADDRESS"),
    ) as client:
        try:
            result = client.add_identity(AddIdentityRequest(
                **{"from": SENDER}, country="US", signer=user_key
            ))
            print(f"Identity registered in tx {result.tx_hash} at height {result.height}")

            claim = Claim(topic=1, issuer=ISSUER, data=b"kyc-level-2", uri="https://kyc.example.com/claims/1")
            result = client.add_claim(AddClaimRequest(
                **{"from": ISSUER}, claim=claim, identity_owner=SENDER, signer=issuer_key
            ))
            print(f"Claim added in tx {result.tx_hash}")

            claims = client.get_validated_claims(GetValidatedClaimsRequest(identity_owner=SENDER))
            for c in claims:
                print(f"Claim topic {c.topic} issued by {c.issuer}")

            compliant = client.check_token_compliance(CheckUserForTokenComplianceRequest(
                token_address=client.token_address, **{"from": SENDER}
            ))
            print(f"Compliant for token: {compliant}")

        except RwaError as e:
            print(f"Error: {e}")


if __name__ == "__main__":
    main()
