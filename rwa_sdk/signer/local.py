"""
In-process secp256k1 signing key.
"""
import logging
from typing import Union

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import (
    decode_dss_signature, encode_dss_signature
)
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from ..exceptions import SigningError

logger = logging.getLogger(__name__)

# Order of the SECP256K1 curve
SECP256K1_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
SECP256K1_HALF_N = SECP256K1_N // 2

SIGNATURE_LENGTH = 64
COMPRESSED_PUBKEY_LENGTH = 33


class SigningKey:
    """
    A secp256k1 private key that signs Cosmos transactions.

    Signatures are ECDSA over the SHA-256 digest of the message, encoded as
    the 64-byte concatenation of ``r`` and ``s`` with ``s`` normalized to the
    lower half of the curve order, which is what the Cosmos SDK verifies.
    """

    def __init__(self, private_key: ec.EllipticCurvePrivateKey):
        if not isinstance(private_key.curve, ec.SECP256K1):
            raise SigningError(f"Expected a secp256k1 key, got curve {private_key.curve.name}")
        self._private_key = private_key
        self._public_key = private_key.public_key().public_bytes(
            Encoding.X962, PublicFormat.CompressedPoint
        )

    @classmethod
    def generate(cls) -> "SigningKey":
        """Create a new random key."""
        return cls(ec.generate_private_key(ec.SECP256K1()))

    @classmethod
    def from_bytes(cls, secret: bytes) -> "SigningKey":
        """
        Load a key from its 32-byte big-endian secret.

        Raises:
            SigningError: If the secret has the wrong length or is out of range
        """
        if len(secret) != 32:
            raise SigningError(f"Private key must be 32 bytes, got {len(secret)}")
        value = int.from_bytes(secret, byteorder="big")
        if not 1 <= value < SECP256K1_N:
            raise SigningError("Private key is outside the secp256k1 range")
        try:
            return cls(ec.derive_private_key(value, ec.SECP256K1()))
        except (ValueError, UnsupportedAlgorithm) as e:
            raise SigningError(f"Invalid private key: {e}") from e

    @classmethod
    def from_hex(cls, secret: str) -> "SigningKey":
        """Load a key from a hex string, with or without a 0x prefix."""
        if secret.startswith("0x"):
            secret = secret[2:]
        try:
            raw = bytes.fromhex(secret)
        except ValueError as e:
            raise SigningError(f"Private key is not valid hex: {e}") from e
        return cls.from_bytes(raw)

    @property
    def public_key(self) -> bytes:
        """33-byte compressed public key"""
        return self._public_key

    def to_bytes(self) -> bytes:
        """Return the 32-byte secret."""
        return self._private_key.private_numbers().private_value.to_bytes(32, byteorder="big")

    def sign(self, message: bytes) -> bytes:
        """
        Sign ``message`` and return a 64-byte low-S signature.

        Raises:
            SigningError: If the signature cannot be produced
        """
        try:
            der = self._private_key.sign(message, ec.ECDSA(hashes.SHA256()))
        except Exception as e:
            raise SigningError(f"Failed to sign message: {e}") from e

        r, s = decode_dss_signature(der)
        if s > SECP256K1_HALF_N:
            s = SECP256K1_N - s
        return r.to_bytes(32, byteorder="big") + s.to_bytes(32, byteorder="big")

    def verify(self, message: bytes, signature: bytes) -> bool:
        return verify_signature(self._public_key, message, signature)

    def __repr__(self) -> str:
        return f"SigningKey(public_key={self._public_key.hex()})"


def verify_signature(public_key: Union[bytes, bytearray], message: bytes, signature: bytes) -> bool:
    """
    Check a 64-byte r||s signature against a compressed secp256k1 public key.

    High-S signatures are rejected, matching the chain's verification rules.
    """
    if len(signature) != SIGNATURE_LENGTH:
        return False
    r = int.from_bytes(signature[:32], byteorder="big")
    s = int.from_bytes(signature[32:], byteorder="big")
    if s > SECP256K1_HALF_N:
        return False
    try:
        key = ec.EllipticCurvePublicKey.from_encoded_point(ec.SECP256K1(), bytes(public_key))
        key.verify(encode_dss_signature(r, s), message, ec.ECDSA(hashes.SHA256()))
        return True
    except (InvalidSignature, ValueError):
        return False
