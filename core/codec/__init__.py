"""
Core codec utilities.

Base-58 address parsing and formatting.
"""
from .address import (
    ADDRESS_LENGTH,
    BASE58_ALPHABET,
    Address,
    address_from_bytes,
    decode_address,
    decode_base58,
    encode_address,
    encode_base58,
    is_default_address,
)

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
