#!/usr/bin/env python3
"""
End-to-end example of tokenizing a real-world asset with the RWA SDK.

The flow covers issuer identity and ownership claims, compliance module
setup, investor onboarding and the first token distribution.
"""
import logging
import os

from rwa_sdk import (
    AddClaimRequest, AddIdentityRequest, CheckUserForTokenComplianceRequest, Claim,
    ComplianceModuleRequest, RwaClient, RwaError, SigningKey, TokenInfoRequest,
    TransferMessageRequest
)

logger = logging.getLogger("asset_tokenization")

# Claim topics used by the identity registry
KYC_CLAIM_TOPIC = 1
ASSET_OWNERSHIP_CLAIM_TOPIC = 3


class AssetTokenization:
    """Drives the lifecycle of a tokenized asset for one issuer."""

    def __init__(self, client: RwaClient, issuer_address: str, issuer_key: SigningKey):
        self.client = client
        self.issuer_address = issuer_address
        self.issuer_key = issuer_key

    def _signed(self):
        return {"from": self.issuer_address, "signer": self.issuer_key, "gas_limit": 400000}

    def setup_issuer_identity(self) -> str:
        """Register the issuer and attach proof of asset ownership."""
        result = self.client.add_identity(AddIdentityRequest(country="US", **self._signed()))

        self.client.add_claim(AddClaimRequest(
            claim=Claim(
                topic=ASSET_OWNERSHIP_CLAIM_TOPIC,
                issuer=self.issuer_address,
                uri="ipfs://asset-documents-hash",
            ),
            identity_owner=self.issuer_address,
            **self._signed()
        ))
        return result.tx_hash

    def setup_compliance(self, country_module: str, max_balance_module: str) -> None:
        """Register the geographic and balance restriction modules."""
        for name, module in (("Country Restriction", country_module), ("Max Balance", max_balance_module)):
            request = ComplianceModuleRequest(module_addr=module, **self._signed())
            result = self.client.add_compliance_module(name, request)
            logger.info(f"Added compliance module {name} in {result.tx_hash}")

    def onboard_investor(self, investor_address: str) -> bool:
        """Issue a KYC claim to an investor and check they may hold the token."""
        self.client.add_claim(AddClaimRequest(
            claim=Claim(topic=KYC_CLAIM_TOPIC, issuer=self.issuer_address, data=b"accredited"),
            identity_owner=investor_address,
            **self._signed()
        ))
        return self.client.check_token_compliance(CheckUserForTokenComplianceRequest(
            token_address=self.client.token_address, **{"from": investor_address}
        ))

    def distribute(self, investor_address: str, amount: int) -> str:
        result = self.client.transfer(TransferMessageRequest(to=investor_address, amount=amount, **self._signed()))
        return result.tx_hash

    def investor_balance(self, investor_address: str) -> int:
        return self.client.balance(TokenInfoRequest(address=investor_address)).balance


def main():
    logging.basicConfig(level=logging.INFO)

    issuer = os.environ.get("ISSUER_ADDRESS")
    issuer_key = os.environ.get("ISSUER_PRIVATE_KEY")
    investor = os.environ.get("INVESTOR_ADDRESS")
    if not all([issuer, issuer_key, investor]):
        print("ERROR: ISSUER_ADDRESS, ISSUER_PRIVATE_KEY and INVESTOR_ADDRESS environment variables are required")
        return

    with RwaClient.from_network(
        os.environ.get("RWA_NETWORK", "localnet"),
        token_address=os.environ.get("TOKEN_ADDRESS"),
        identity_address=os.environ.get("IDENTITY_ADDRESS"),
        compliance_address=os.environ.get("COMPLIANCE_ADDRESS"),
    ) as client:
        tokenization = AssetTokenization(client, issuer, SigningKey.from_hex(issuer_key))
        try:
            print(f"Issuer identity registered: {tokenization.setup_issuer_identity()}")
            tokenization.setup_compliance(
                os.environ.get("COUNTRY_MODULE_ADDRESS", ""),
                os.environ.get("MAX_BALANCE_MODULE_ADDRESS", ""),
            )
            if not tokenization.onboard_investor(investor):
                print(f"Investor {investor} is not compliant; skipping distribution")
                return
            print(f"Distributed tokens: {tokenization.distribute(investor, 1000)}")
            print(f"Investor balance: {tokenization.investor_balance(investor)}")
        except RwaError as e:
            print(f"Tokenization failed: {e}")


if __name__ == "__main__":
    main()
