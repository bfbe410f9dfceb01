"""
Key Generation and Secret Parsing
Ed25519 signing keypairs for ledger accounts.

This module provides:
- SigningKeypair: 32-byte seed plus its derived verifying key
- generate_keypair() drawing the seed from the OS CSPRNG
- keypair_from_bytes() / keypair_from_secret() for caller-supplied secrets

Secret Handling Notes:
- A 64-byte secret is seed || verifying key; the trailing half must match
  the key re-derived from the seed
- Decoded secret buffers are zeroed as soon as the keypair is built
- The repr of a keypair never includes secret material
"""
from __future__ import annotations

from dataclasses import dataclass, field

from nacl.exceptions import CryptoError
from nacl.signing import SigningKey

from core.codec.address import Address, decode_base58, encode_address, encode_base58
from core.schemas.errors import InternalError, InvalidInput


SEED_LENGTH = 32
SECRET_LENGTH = 64


@dataclass(frozen=True)
class SigningKeypair:
    """
    An ed25519 keypair.

    Build through keypair_from_seed / generate_keypair / keypair_from_bytes
    so that verifying_key is always derived from seed.
    """

    seed: bytes = field(repr=False)
    verifying_key: Address

    def to_bytes(self) -> bytes:
        """64-byte seed || verifying key, the transport form of the secret."""
        return self.seed + bytes(self.verifying_key)

    @property
    def pubkey(self) -> str:
        return encode_address(self.verifying_key)

    @property
    def secret(self) -> str:
        return encode_base58(self.to_bytes())

    def signing_key(self) -> SigningKey:
        return SigningKey(self.seed)


def _derive(seed: bytes) -> bytes:
    return bytes(SigningKey(seed).verify_key)


def keypair_from_seed(seed: bytes) -> SigningKeypair:
    """Build a keypair from a 32-byte seed."""
    if len(seed) != SEED_LENGTH:
        raise InvalidInput(
            f"Seed must be {SEED_LENGTH} bytes, got {len(seed)}", field="secret"
        )
    seed = bytes(seed)
    return SigningKeypair(seed=seed, verifying_key=Address.from_bytes(_derive(seed)))


def keypair_from_bytes(secret: bytes | bytearray) -> SigningKeypair:
    """
    Build a keypair from raw secret bytes.

    Args:
        secret: 32-byte seed, or 64-byte seed || verifying key

    Returns:
        SigningKeypair

    Raises:
        InvalidInput: If the length is not 32 or 64, or the embedded
                      verifying key does not match the seed
    """
    if len(secret) == SEED_LENGTH:
        return keypair_from_seed(bytes(secret))

    if len(secret) != SECRET_LENGTH:
        raise InvalidInput(
            f"invalid secret: expected {SEED_LENGTH} or {SECRET_LENGTH} bytes, "
            f"got {len(secret)}",
            field="secret",
        )

    keypair = keypair_from_seed(bytes(secret[:SEED_LENGTH]))
    if bytes(keypair.verifying_key) != bytes(secret[SEED_LENGTH:]):
        raise InvalidInput(
            "invalid secret: embedded public key does not match secret key",
            field="secret",
        )
    return keypair


def keypair_from_secret(secret_text: str) -> SigningKeypair:
    """
    Decode a base-58 secret and build the keypair.

    Raises:
        InvalidInput: "invalid secret" for empty or undecodable text, or any
                      error from keypair_from_bytes
    """
    if not isinstance(secret_text, str) or not secret_text:
        raise InvalidInput("invalid secret", field="secret")

    try:
        raw = bytearray(decode_base58(secret_text, field="secret"))
    except InvalidInput as e:
        raise InvalidInput("invalid secret", field="secret") from e

    try:
        return keypair_from_bytes(raw)
    finally:
        raw[:] = bytes(len(raw))


def generate_keypair() -> SigningKeypair:
    """
    Generate a fresh keypair from the OS CSPRNG.

    Raises:
        InternalError: If the random source fails
    """
    try:
        signing_key = SigningKey.generate()
    except (CryptoError, OSError) as e:
        raise InternalError("Failed to generate keypair") from e

    return SigningKeypair(
        seed=bytes(signing_key),
        verifying_key=Address.from_bytes(bytes(signing_key.verify_key)),
    )


__all__ = [
    "SEED_LENGTH",
    "SECRET_LENGTH",
    "SigningKeypair",
    "generate_keypair",
    "keypair_from_seed",
    "keypair_from_bytes",
    "keypair_from_secret",
]
