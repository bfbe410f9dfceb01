"""
Common test fixtures shared by all modules.

Provides factory functions for core data structures:
- Address
- SigningKeypair

RFC 8032 test vector 1 is exposed for known-answer checks.
"""

from core.codec.address import Address, encode_address
from core.crypto.keys import SigningKeypair, keypair_from_seed


# RFC 8032, section 7.1, TEST 1
RFC8032_SEED = bytes.fromhex(
    "9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60"
)
RFC8032_PUBLIC = bytes.fromhex(
    "d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a"
)


def make_address(fill: int = 1) -> Address:
    """Create an Address made of one repeated byte (fill must be 0-255)."""
    return Address.from_bytes(bytes([fill]) * 32)


def make_address_text(fill: int = 1) -> str:
    """Base-58 text of make_address(fill)."""
    return encode_address(make_address(fill))


def make_keypair(seed: bytes = RFC8032_SEED) -> SigningKeypair:
    """Create a deterministic keypair from a 32-byte seed."""
    return keypair_from_seed(seed)
