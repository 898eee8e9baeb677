#!/usr/bin/env python3
"""
Example of transferring RWA tokens and reading balances.
"""
import logging
import os
import sys

from rwa_sdk import RwaClient, RwaError, SigningKey, TokenInfoRequest, TransferMessageRequest

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")


def main():
    PRIVATE_KEY = os.environ.get("PRIVATE_KEY")
    SENDER = os.environ.get("SENDER_ADDRESS")
    RECIPIENT = os.environ.get("RECIPIENT_ADDRESS")
    AMOUNT = int(os.environ.get("AMOUNT", "1000"))

    if not all([PRIVATE_KEY, SENDER, RECIPIENT]):
        print("ERROR: PRIVATE_KEY, SENDER_ADDRESS and RECIPIENT_ADDRESS environment variables are required")
        sys.exit(1)

    client = RwaClient.from_network(
        os.environ.get("RWA_NETWORK", "localnet"),
        token_address=os.environ.get("TOKEN_ADDRESS"),
        identity_address=os.environ.get("IDENTITY_ADDRESS"),
        compliance_address=os.environ.get("COMPLIANCE_ADDRESS"),
    )
    signer = SigningKey.from_hex(PRIVATE_KEY)

    try:
        info = client.token_info()
        print(f"Token: {info.name} ({info.symbol}), supply {info.total_supply}, {info.decimals} decimals")

        before = client.balance(TokenInfoRequest(address=RECIPIENT)).balance
        result = client.transfer(TransferMessageRequest(
            **{"from": SENDER}, to=RECIPIENT, amount=AMOUNT, signer=signer
        ))
        after = client.balance(TokenInfoRequest(address=RECIPIENT)).balance

        print(f"Transferred {AMOUNT} {info.symbol} in {result.tx_hash} (gas used {result.gas_used})")
        print(f"Recipient balance: {before} -> {after}")
    except RwaError as e:
        print(f"Transfer failed: {e}")
        sys.exit(1)
    finally:
        client.close()


if __name__ == "__main__":
    main()
