"""
Message Signatures
Ed25519 signing and verification over exact message bytes.

This module provides:
- SignedMessage: message, 64-byte signature and the verifying key
- sign_message() / sign_text() for raw bytes and UTF-8 text
- verify_signature() returning a bool, never raising on malformed input
- encode_signature() / decode_signature() for the base-64 transport form

Text Handling Notes:
- Messages are signed as their UTF-8 bytes; text that has no UTF-8 form
  (lone surrogates) is rejected as invalid input
"""
from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass

from nacl.exceptions import BadSignatureError
from nacl.signing import VerifyKey

from core.codec.address import Address
from core.crypto.keys import SigningKeypair, keypair_from_bytes, keypair_from_secret
from core.schemas.errors import InvalidInput


SIGNATURE_LENGTH = 64


@dataclass(frozen=True)
class SignedMessage:
    message: bytes
    signature: bytes
    verifying_key: Address


def derive_verifying_key(secret: bytes | bytearray) -> Address:
    """Verifying key for a 32-byte seed or a checked 64-byte secret."""
    return keypair_from_bytes(secret).verifying_key


def sign_message(message: bytes, keypair: SigningKeypair) -> SignedMessage:
    """Ed25519-sign the exact message bytes. Deterministic per (message, key)."""
    if not message:
        raise InvalidInput("missing message", field="message")

    signed = keypair.signing_key().sign(bytes(message))
    return SignedMessage(
        message=bytes(message),
        signature=signed.signature,
        verifying_key=keypair.verifying_key,
    )


def encode_message(message: str) -> bytes:
    """UTF-8 bytes of a non-empty text message."""
    if not isinstance(message, str) or not message:
        raise InvalidInput("missing message", field="message")
    try:
        return message.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidInput("invalid message: not valid UTF-8", field="message") from e


def sign_text(message: str, secret: str) -> SignedMessage:
    """Sign a UTF-8 message with a base-58 secret; inputs are checked before signing."""
    payload = encode_message(message)
    if not isinstance(secret, str) or not secret:
        raise InvalidInput("invalid secret", field="secret")

    keypair = keypair_from_secret(secret)
    return sign_message(payload, keypair)


def decode_signature(text: str) -> bytes:
    """Decode a standard base-64 signature string."""
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidInput("Invalid signature: not base-64", field="signature") from e


def encode_signature(signature: bytes) -> str:
    return base64.b64encode(signature).decode("ascii")


def verify_signature(message: bytes, signature: bytes, verifying_key: Address) -> bool:
    """Check an ed25519 signature. Malformed signatures or keys verify as False."""
    if len(signature) != SIGNATURE_LENGTH:
        return False
    try:
        VerifyKey(bytes(verifying_key)).verify(bytes(message), bytes(signature))
    except (BadSignatureError, ValueError, TypeError):
        return False
    return True


__all__ = [
    "SIGNATURE_LENGTH",
    "SignedMessage",
    "decode_signature",
    "derive_verifying_key",
    "encode_message",
    "encode_signature",
    "sign_message",
    "sign_text",
    "verify_signature",
]
