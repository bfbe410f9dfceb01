"""
Test fixtures package for instruction forge tests.

This package provides factory functions for creating test objects.

Usage:
    from fixtures import make_address, make_keypair

    def test_something():
        ix = build_transfer_native(make_address(1), make_address(2), 1000)
"""

from .common import (
    RFC8032_PUBLIC,
    RFC8032_SEED,
    make_address,
    make_address_text,
    make_keypair,
)

__all__ = [
    "RFC8032_PUBLIC",
    "RFC8032_SEED",
    "make_address",
    "make_address_text",
    "make_keypair",
]
