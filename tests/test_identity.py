"""
Tests for identity registry operations.
"""
import pytest
from pydantic import ValidationError

from rwa_sdk.exceptions import ExecutionError, NotFound
from rwa_sdk.identity import (
    AddClaimRequest, AddIdentityRequest, CheckUserForTokenComplianceRequest,
    Claim, GetValidatedClaimsRequest, RemoveClaimRequest, RemoveIdentityRequest,
    UpdateIdentityRequest
)
from tests.test_helpers import TEST_COMPLIANCE, TEST_IDENTITY, TEST_SENDER, TEST_TOKEN

USER = "cosmos1user0000000000000000000000000000000"
ISSUER = "cosmos1issuer00000000000000000000000000000"


def sender(signer):
    return {"from": TEST_SENDER, "signer": signer, "gas_limit": 200000}


def test_add_identity(client, chain, signing_key):
    result = client.add_identity(AddIdentityRequest(country="US", **sender(signing_key)))

    assert chain.last_tx.contract == TEST_IDENTITY
    assert chain.last_tx.sender == TEST_SENDER
    assert chain.last_tx.msg == {"add_identity": {"country": "US"}}
    assert result.tx_hash == chain.last_tx.tx_hash


def test_update_identity(client, chain, signing_key):
    client.update_identity(UpdateIdentityRequest(
        identity_owner=USER, new_country="DE", **sender(signing_key)
    ))

    assert chain.last_tx.msg == {"update_identity": {"identity_owner": USER, "new_country": "DE"}}


def test_remove_identity(client, chain, signing_key):
    client.remove_identity(RemoveIdentityRequest(identity_owner=USER, **sender(signing_key)))

    assert chain.last_tx.contract == TEST_IDENTITY
    assert chain.last_tx.msg == {"remove_identity": {"identity_owner": USER}}


def test_add_claim(client, chain, signing_key):
    claim = Claim(topic=1, issuer=ISSUER, data=b"\x01\x02", uri="https://kyc.example.com/1")

    client.add_claim(AddClaimRequest(claim=claim, identity_owner=USER, **sender(signing_key)))

    assert chain.last_tx.msg == {"add_claim": {
        "identity_owner": USER,
        "claim": {"topic": "1", "issuer": ISSUER, "data": "AQI=", "uri": "https://kyc.example.com/1"},
    }}


def test_remove_claim(client, chain, signing_key):
    client.remove_claim(RemoveClaimRequest(claim_topic=3, identity_owner=USER, **sender(signing_key)))

    assert chain.last_tx.msg == {"remove_claim": {"identity_owner": USER, "claim_topic": "3"}}


def test_gas_limit_from_request(client, chain, signing_key):
    client.add_identity(AddIdentityRequest(country="US", **sender(signing_key)))

    assert chain.last_tx.gas_limit == 200000
    assert chain.last_tx.fee == ("2000000", "uxyz")


def test_default_gas_limit(client, chain, signing_key):
    client.add_identity(AddIdentityRequest(**{"from": TEST_SENDER}, country="US", signer=signing_key))

    assert chain.last_tx.gas_limit == 500000


def test_contract_rejection(client, chain, signing_key):
    chain.tx_result_code = 5
    chain.tx_log = "Identity already exists"

    with pytest.raises(ExecutionError, match="Identity already exists"):
        client.add_identity(AddIdentityRequest(country="US", **sender(signing_key)))


def test_get_validated_claims(client, chain):
    chain.add_contract(TEST_IDENTITY, lambda message: [
        {"topic": "1", "issuer": ISSUER, "data": "AQI=", "uri": ""},
        {"topic": "2", "issuer": ISSUER, "data": "", "uri": "ipfs://claim"},
    ])

    claims = client.get_validated_claims(GetValidatedClaimsRequest(identity_owner=USER))

    assert chain.queries[-1] == (TEST_IDENTITY, {"get_validated_claims": {"identity_owner": USER}})
    assert claims == [
        Claim(topic=1, issuer=ISSUER, data=b"\x01\x02"),
        Claim(topic=2, issuer=ISSUER, uri="ipfs://claim"),
    ]


def test_get_validated_claims_empty(client, chain):
    chain.add_contract(TEST_IDENTITY, lambda message: [])

    assert client.get_validated_claims(GetValidatedClaimsRequest(identity_owner=USER)) == []


def test_get_validated_claims_unknown_identity(client, chain):
    chain.contracts.pop(TEST_IDENTITY)

    with pytest.raises(NotFound):
        client.get_validated_claims(GetValidatedClaimsRequest(identity_owner=USER))


@pytest.mark.parametrize("compliant", [True, False])
def test_check_token_compliance(client, chain, compliant):
    """A non-compliant user is reported as False, not as an error"""
    chain.add_contract(TEST_COMPLIANCE, lambda message: {"compliant": compliant})

    request = CheckUserForTokenComplianceRequest(token_address=TEST_TOKEN, **{"from": USER})
    assert client.check_token_compliance(request) is compliant
    assert chain.queries[-1] == (
        TEST_COMPLIANCE,
        {"check_token_compliance": {"token_address": TEST_TOKEN, "from": USER}},
    )


def test_compliance_request_accepts_field_name():
    request = CheckUserForTokenComplianceRequest(token_address=TEST_TOKEN, from_=USER)
    assert request.from_ == USER


def test_claim_topic_must_be_unsigned():
    with pytest.raises(ValidationError):
        Claim(topic=-1, issuer=ISSUER)


def test_request_requires_signer():
    with pytest.raises(ValidationError):
        AddIdentityRequest(country="US", **{"from": TEST_SENDER})
