"""
Address Codec
Parse and format the base-58 textual form of 32-byte ledger addresses.

This module provides:
- Address: the solders Pubkey type used for every account key and program id
- decode_address / encode_address for the textual form
- decode_base58 for other base-58 fields (secrets, signatures)

Validation Notes:
- Only the Bitcoin base-58 alphabet is accepted (no 0, O, I, l)
- Whitespace is never stripped; it is an invalid character
- A decoded length other than 32 is rejected, never padded or truncated
"""
from __future__ import annotations

from typing import Any

import base58
from solders.pubkey import Pubkey

from core.schemas.errors import InvalidInput


ADDRESS_LENGTH = 32

BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_BASE58_CHARS = frozenset(BASE58_ALPHABET)

# Addresses are solders Pubkeys: immutable, hashable, str() is base-58.
Address = Pubkey


def address_from_bytes(raw: Any, *, field: str = "address") -> Address:
    """Wrap exactly 32 raw bytes as an Address."""
    if not isinstance(raw, bytes):
        raise InvalidInput(
            f"Invalid {field}: expected bytes, got {type(raw).__name__}", field=field
        )
    if len(raw) != ADDRESS_LENGTH:
        raise InvalidInput(
            f"Invalid {field}: decoded to {len(raw)} bytes, expected {ADDRESS_LENGTH}",
            field=field,
        )
    return Pubkey.from_bytes(raw)


def is_default_address(address: Address) -> bool:
    """True for the all-zero address (the system program id)."""
    return address == Pubkey.default()


def decode_base58(text: str, *, field: str = "value") -> bytes:
    """
    Decode base-58 text to raw bytes.

    Args:
        text: Base-58 encoded string
        field: Field name used in error messages

    Returns:
        Decoded bytes (any length)

    Raises:
        InvalidInput: If text is not a string, is empty, or contains
                      characters outside the base-58 alphabet
    """
    if not isinstance(text, str):
        raise InvalidInput(f"Invalid {field}: expected a string", field=field)
    if not text:
        raise InvalidInput(f"Invalid {field}: empty value", field=field)

    bad = sorted({ch for ch in text if ch not in _BASE58_CHARS})
    if bad:
        raise InvalidInput(
            f"Invalid {field}: contains non base-58 characters {''.join(bad)!r}",
            field=field,
        )

    try:
        return base58.b58decode(text)
    except ValueError as e:
        raise InvalidInput(f"Invalid {field}: {e}", field=field) from e


def decode_address(text: str, *, field: str = "address") -> Address:
    """
    Decode a base-58 address into an Address.

    Args:
        text: Base-58 encoded 32-byte address
        field: Field name used in error messages

    Returns:
        Address

    Raises:
        InvalidInput: If text is empty, not base-58, or does not decode
                      to exactly 32 bytes

    Example:
        >>> is_default_address(decode_address("11111111111111111111111111111111"))
        True
    """
    raw = decode_base58(text, field=field)
    return address_from_bytes(raw, field=field)


def encode_address(address: Address) -> str:
    """Encode an Address as canonical base-58 text."""
    return str(address)


def encode_base58(data: bytes) -> str:
    """Encode raw bytes as base-58 text."""
    return base58.b58encode(data).decode("ascii")


__all__ = [
    "ADDRESS_LENGTH",
    "BASE58_ALPHABET",
    "Address",
    "address_from_bytes",
    "decode_address",
    "decode_base58",
    "encode_address",
    "encode_base58",
    "is_default_address",
]
