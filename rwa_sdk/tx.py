"""
Transaction construction, signing and broadcasting.

A contract execution goes through the same pipeline every time:

1. Wrap the JSON message in a ``MsgExecuteContract`` inside a ``TxBody``
2. Resolve the sender's account number and sequence
3. Compute the fee as gas_limit x gas_price
4. Build ``AuthInfo`` and the ``SignDoc``
5. Sign it and assemble the ``TxRaw``
6. Broadcast with commit semantics
7. Turn the commit response into an ``ExecutionResult``
"""
import logging
from decimal import ROUND_CEILING, Decimal
from typing import Any, Dict, List, Optional, Sequence, Union

from pydantic import ValidationError

from . import proto
from .account import AccountResolver
from .exceptions import DecodeError, EncodingError, ExecutionError, SigningError
from .models import UINT64_MAX, UINT128_MAX, AccountInfo, Coin, Event, ExecutionResult, Fee
from .rpc import TendermintRpc, decode_base64, to_int
from .signer import Signer
from .signer.local import COMPRESSED_PUBKEY_LENGTH, SIGNATURE_LENGTH, verify_signature
from .utils import encode_json, tx_hash

logger = logging.getLogger(__name__)

GasPrice = Union[int, Decimal]


def compute_fee(gas_limit: int, gas_price: GasPrice, denom: str) -> Fee:
    """
    Compute the fee for a transaction.

    The amount is exactly ``gas_limit * gas_price`` for integer prices;
    fractional prices are rounded up to the next whole unit.

    Args:
        gas_limit: Gas units the transaction may consume
        gas_price: Price per gas unit, in ``denom``
        denom: Fee denomination

    Returns:
        Fee paying a single coin of ``denom``

    Raises:
        ValueError: If ``gas_limit`` is negative
        EncodingError: If ``gas_limit`` exceeds uint64 or the amount exceeds Uint128
    """
    if gas_limit < 0:
        raise ValueError(f"gas_limit must be non-negative, got {gas_limit}")
    if gas_limit > UINT64_MAX:
        raise EncodingError(f"gas_limit {gas_limit} does not fit in uint64")
    if isinstance(gas_price, int):
        amount = gas_limit * gas_price
    else:
        exact = Decimal(gas_limit) * Decimal(str(gas_price))
        amount = int(exact.to_integral_value(rounding=ROUND_CEILING))
    if amount > UINT128_MAX:
        raise EncodingError(f"Fee of {amount}{denom} does not fit in Uint128")
    return Fee(amount=[Coin(denom=denom, amount=amount)], gas_limit=gas_limit)


def build_execute_body(sender: str, contract: str, message: Any, funds: Sequence[Coin] = ()):
    """
    Build a ``TxBody`` carrying a single ``MsgExecuteContract``.

    Raises:
        EncodingError: If ``message`` is not JSON serializable
    """
    execute_msg = proto.MsgExecuteContract(
        sender=sender,
        contract=contract,
        msg=encode_json(message),
        funds=[proto.Coin(denom=coin.denom, amount=str(coin.amount)) for coin in funds],
    )
    body = proto.TxBody()
    body.messages.append(proto.pack_any(execute_msg, proto.MSG_EXECUTE_CONTRACT_TYPE_URL))
    return body


def build_auth_info(public_key: bytes, sequence: int, fee: Fee):
    """Build single-signer ``AuthInfo`` using SIGN_MODE_DIRECT."""
    signer_info = proto.SignerInfo(
        public_key=proto.pack_any(proto.PubKey(key=public_key), proto.SECP256K1_PUBKEY_TYPE_URL),
        sequence=sequence,
    )
    signer_info.mode_info.single.mode = proto.SIGN_MODE_DIRECT

    proto_fee = proto.Fee(
        amount=[proto.Coin(denom=coin.denom, amount=str(coin.amount)) for coin in fee.amount],
        gas_limit=fee.gas_limit,
    )
    return proto.AuthInfo(signer_infos=[signer_info], fee=proto_fee)


def sign_transaction(body_bytes: bytes, auth_info_bytes: bytes, chain_id: str,
                     account_number: int, signer: Signer, public_key: bytes) -> bytes:
    """
    Sign a transaction and return the serialized ``TxRaw``.

    The signature is checked against ``public_key`` so a signer holding the
    wrong key fails here instead of on-chain.

    Raises:
        SigningError: If the signer fails or returns a signature that does not verify
    """
    sign_doc = proto.SignDoc(
        body_bytes=body_bytes,
        auth_info_bytes=auth_info_bytes,
        chain_id=chain_id,
        account_number=account_number,
    )
    sign_bytes = sign_doc.SerializeToString()

    try:
        signature = bytes(signer.sign(sign_bytes))
    except SigningError:
        raise
    except Exception as e:
        logger.error(f"Signer failed: {e}")
        raise SigningError(f"Failed to sign transaction: {e}") from e

    if len(signature) != SIGNATURE_LENGTH:
        raise SigningError(f"Signature must be {SIGNATURE_LENGTH} bytes, got {len(signature)}")
    if not verify_signature(public_key, sign_bytes, signature):
        logger.error("Signature does not match the signer public key")
        raise SigningError("Signature does not verify against the signer public key")

    tx_raw = proto.TxRaw(
        body_bytes=body_bytes,
        auth_info_bytes=auth_info_bytes,
        signatures=[signature],
    )
    return tx_raw.SerializeToString()


def _signer_public_key(signer: Signer) -> bytes:
    try:
        public_key = bytes(signer.public_key)
    except Exception as e:
        raise SigningError(f"Could not read signer public key: {e}") from e
    if len(public_key) != COMPRESSED_PUBKEY_LENGTH:
        raise SigningError(
            f"Signer public key must be {COMPRESSED_PUBKEY_LENGTH} bytes compressed, got {len(public_key)}"
        )
    return public_key


def _parse_events(raw_events: Any) -> List[Event]:
    try:
        return [Event.model_validate(event) for event in raw_events or []]
    except ValidationError as e:
        raise DecodeError(f"Malformed events in commit response: {e}") from e


def _decoded_key(key: Any) -> Optional[str]:
    # Tendermint 0.34 attribute keys are base64 of a printable ASCII name
    if not isinstance(key, str) or not key:
        return None
    try:
        name = decode_base64(key, "events.attributes.key").decode("ascii")
    except (DecodeError, UnicodeDecodeError):
        return None
    return name if name and name.isprintable() else None


def _decode_legacy_events(raw_events: Any) -> Any:
    """
    Decode base64 event attributes from a Tendermint 0.34 ``deliver_tx``.

    CometBFT 0.37 also reports ``deliver_tx`` but with plain attributes, so
    the events are only decoded when every attribute key is base64 encoded.
    """
    if not isinstance(raw_events, list):
        return raw_events
    attributes = [
        attribute
        for event in raw_events if isinstance(event, dict)
        for attribute in event.get("attributes") or [] if isinstance(attribute, dict)
    ]
    keys = [_decoded_key(attribute.get("key")) for attribute in attributes]
    if not keys or None in keys:
        return raw_events

    decoded = []
    for event in raw_events:
        if not isinstance(event, dict):
            decoded.append(event)
            continue
        attributes = []
        for attribute in event.get("attributes") or []:
            if not isinstance(attribute, dict):
                attributes.append(attribute)
                continue
            value = attribute.get("value")
            try:
                value = decode_base64(value, "events.attributes.value").decode("utf-8") if value else value
            except UnicodeDecodeError as e:
                raise DecodeError(f"Event attribute value is not UTF-8: {e}") from e
            attributes.append({**attribute, "key": _decoded_key(attribute["key"]), "value": value})
        decoded.append({**event, "attributes": attributes})
    return decoded


def parse_commit_response(result: Dict[str, Any]) -> ExecutionResult:
    """
    Convert a ``broadcast_tx_commit`` result into an ExecutionResult.

    Raises:
        ExecutionError: If the transaction failed in CheckTx or during execution
        DecodeError: If the response is malformed
    """
    tx_hash = result.get("hash") or ""
    height = to_int(result.get("height"), "height")
    check_tx = result.get("check_tx") or {}
    # CometBFT >= 0.38 reports "tx_result", older nodes "deliver_tx"
    tx_result = result.get("tx_result") or result.get("deliver_tx") or {}
    raw_events = tx_result.get("events")
    if "tx_result" not in result:
        raw_events = _decode_legacy_events(raw_events)

    for stage, stage_result in (("check_tx", check_tx), ("tx_result", tx_result)):
        code = to_int(stage_result.get("code"), f"{stage}.code")
        if code != 0:
            log = stage_result.get("log") or ""
            codespace = stage_result.get("codespace") or ""
            logger.error(f"Transaction {tx_hash} failed in {stage} with code {code} ({codespace}): {log}")
            raise ExecutionError(
                f"Transaction {tx_hash} failed in {stage} with code {code}: {log}",
                code=code,
                codespace=codespace,
                log=log,
                tx_hash=tx_hash,
                height=height,
                stage=stage,
                data=decode_base64(stage_result.get("data"), f"{stage}.data"),
            )

    return ExecutionResult(
        tx_hash=tx_hash,
        data=decode_base64(tx_result.get("data"), "tx_result.data"),
        gas_used=to_int(tx_result.get("gas_used"), "tx_result.gas_used"),
        gas_wanted=to_int(tx_result.get("gas_wanted"), "tx_result.gas_wanted"),
        events=_parse_events(raw_events),
        height=height,
    )


class TransactionExecutor:
    """
    Executes contract messages as signed transactions.

    The executor does not serialize transactions per signer. Two transactions
    from the same key in flight at once race for the same sequence and the
    chain rejects the loser, which surfaces as an ExecutionError.
    """

    def __init__(
        self,
        rpc: TendermintRpc,
        resolver: AccountResolver,
        chain_id: str,
        denom: str,
        gas_price: GasPrice,
        logger: Optional[logging.Logger] = None,
    ):
        self.rpc = rpc
        self.resolver = resolver
        self.chain_id = chain_id
        self.denom = denom
        self.gas_price = gas_price
        self.logger = logger or logging.getLogger(__name__)

    def build_transaction(
        self,
        sender: str,
        message: Any,
        contract_address: str,
        funds: Sequence[Coin],
        signer: Signer,
        gas_limit: int,
        account: Optional[AccountInfo] = None,
    ) -> bytes:
        """
        Build and sign a contract execution without broadcasting it.

        Args:
            sender: Address of the signer
            message: Contract message (ContractMsg, pydantic model or JSON data)
            contract_address: Contract to execute
            funds: Coins attached to the execution
            signer: Key matching ``sender``
            gas_limit: Gas limit, also the basis of the fee
            account: Account number and sequence to sign with (resolved when omitted)

        Returns:
            Serialized ``TxRaw`` bytes ready for broadcast
        """
        body = build_execute_body(sender, contract_address, message, funds)
        public_key = _signer_public_key(signer)

        if account is None:
            account = self.resolver.resolve_account(sender)

        fee = compute_fee(gas_limit, self.gas_price, self.denom)
        auth_info = build_auth_info(public_key, account.sequence, fee)
        self.logger.debug(
            f"Signing execution of {contract_address} from {sender} "
            f"(sequence={account.sequence}, fee={fee.amount[0]}, gas_limit={gas_limit})"
        )

        return sign_transaction(
            body.SerializeToString(),
            auth_info.SerializeToString(),
            self.chain_id,
            account.account_number,
            signer,
            public_key,
        )

    def execute(
        self,
        sender: str,
        message: Any,
        contract_address: str,
        funds: Sequence[Coin],
        signer: Signer,
        gas_limit: int,
    ) -> ExecutionResult:
        """
        Execute a contract message and wait for it to be committed.

        Returns:
            ExecutionResult describing the committed transaction

        Raises:
            EncodingError: If the message is not serializable
            SigningError: If signing fails
            NotFound: If the sender has no on-chain account
            ExecutionError: If the chain rejects or fails the transaction
            NetworkError: On transport failure
        """
        tx_bytes = self.build_transaction(sender, message, contract_address, funds, signer, gas_limit)
        self.logger.debug(f"Broadcasting transaction {tx_hash(tx_bytes)} from {sender}")
        result = parse_commit_response(self.rpc.broadcast_tx_commit(tx_bytes))
        self.logger.info(
            f"Transaction committed: {result.tx_hash} at height {result.height} "
            f"(gas {result.gas_used}/{result.gas_wanted})"
        )
        return result
