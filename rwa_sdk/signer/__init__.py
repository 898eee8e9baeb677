"""
Signers for the RWA SDK.

A signer owns a secp256k1 key and signs Cosmos ``SignDoc`` bytes. Any object
implementing the :class:`Signer` protocol can be passed to write operations,
so keys may live in an HSM or a remote service instead of process memory.
"""
from typing import Protocol, runtime_checkable

from .local import SigningKey


@runtime_checkable
class Signer(Protocol):
    """Protocol for custom signers"""

    @property
    def public_key(self) -> bytes:
        """33-byte compressed secp256k1 public key"""
        ...

    def sign(self, message: bytes) -> bytes:
        """Sign ``message`` (SHA-256 digest) and return the 64-byte r||s signature"""
        ...


__all__ = ['Signer', 'SigningKey']
