"""
Core cryptographic utilities.

Ed25519 key generation, secret parsing, signing and verification.
"""
from .keys import (
    SigningKeypair,
    generate_keypair,
    keypair_from_bytes,
    keypair_from_secret,
    keypair_from_seed,
)
from .signatures import (
    SignedMessage,
    decode_signature,
    encode_message,
    encode_signature,
    derive_verifying_key,
    sign_message,
    sign_text,
    verify_signature,
)

__all__ = [
    "SigningKeypair",
    "generate_keypair",
    "keypair_from_bytes",
    "keypair_from_secret",
    "keypair_from_seed",
    "SignedMessage",
    "decode_signature",
    "encode_message",
    "encode_signature",
    "derive_verifying_key",
    "sign_message",
    "sign_text",
    "verify_signature",
]
