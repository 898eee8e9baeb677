#!/usr/bin/env python3
"""
Example of managing compliance modules with the RWA SDK.
"""
import os

from rwa_sdk import ComplianceModuleRequest, ExecutionError, RwaClient, SigningKey


def main():
    """
    Register a compliance module, then deactivate it.
    """
    RPC_URL = os.environ.get("RPC_URL", "http://localhost:26657")
    PRIVATE_KEY = os.environ.get("PRIVATE_KEY")
    ADMIN = os.environ.get("ADMIN_ADDRESS")
    MODULE = os.environ.get("MODULE_ADDRESS")

    if not all([PRIVATE_KEY, ADMIN, MODULE]):
        print("ERROR: PRIVATE_KEY, ADMIN_ADDRESS and MODULE_ADDRESS environment variables are required")
        return

    client = RwaClient(
        rpc_url=RPC_URL,
        chain_id=os.environ.get("CHAIN_ID", "rwa-test"),
        token_address=os.environ.get("TOKEN_ADDRESS", ""),
        identity_address=os.environ.get("IDENTITY_ADDRESS", ""),
        compliance_address=os.environ["COMPLIANCE_ADDRESS"],
        denom=os.environ.get("DENOM", "urwa"),
        gas_price=int(os.environ.get("GAS_PRICE", "1")),
    )
    client.assert_chain_id()

    request = ComplianceModuleRequest(
        **{"from": ADMIN}, module_addr=MODULE, signer=SigningKey.from_hex(PRIVATE_KEY), gas_limit=300000
    )

    try:
        result = client.add_compliance_module("Country Restriction", request)
        print(f"Module added: {result.tx_hash}")

        result = client.update_compliance_module(request, active=False)
        print(f"Module deactivated: {result.tx_hash}")
    except ExecutionError as e:
        print(f"Transaction {e.tx_hash} failed ({e.stage}, code {e.code}): {e.log}")
    finally:
        client.close()


if __name__ == "__main__":
    main()
