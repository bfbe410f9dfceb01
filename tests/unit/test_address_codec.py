"""
Address Codec Unit Tests
Tests for core/codec/address.py

Tests:
- decode/encode round trips
- rejection of empty, non base-58 and wrong-length input
- Address value type invariants
"""
import os

import pytest
from solders.pubkey import Pubkey

from core.codec.address import (
    Address,
    address_from_bytes,
    decode_address,
    decode_base58,
    encode_address,
    encode_base58,
    is_default_address,
)
from core.schemas.errors import ErrorCodes, InvalidInput


TOKEN_PROGRAM = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"


class TestDecodeAddress:
    """Tests for decode_address()."""

    def test_all_ones_is_default_address(self):
        """32 '1' characters decode to 32 zero bytes."""
        address = decode_address("1" * 32)

        assert bytes(address) == bytes(32)
        assert is_default_address(address)

    def test_known_program_id(self):
        address = decode_address(TOKEN_PROGRAM)

        assert len(bytes(address)) == 32
        assert encode_address(address) == TOKEN_PROGRAM

    def test_empty_rejected(self):
        with pytest.raises(InvalidInput) as exc_info:
            decode_address("")

        assert exc_info.value.code == ErrorCodes.INVALID_INPUT

    @pytest.mark.parametrize("bad_char", ["0", "O", "I", "l", "+", "/", " ", "é"])
    def test_non_alphabet_character_rejected(self, bad_char):
        text = TOKEN_PROGRAM[:-1] + bad_char

        with pytest.raises(InvalidInput, match="non base-58"):
            decode_address(text)

    def test_surrounding_whitespace_rejected(self):
        """Whitespace is never stripped."""
        with pytest.raises(InvalidInput):
            decode_address(f" {TOKEN_PROGRAM}")
        with pytest.raises(InvalidInput):
            decode_address(f"{TOKEN_PROGRAM}\n")

    def test_short_value_rejected(self):
        """A valid base-58 string of 31 bytes is not padded."""
        text = encode_base58(b"\x07" * 31)

        with pytest.raises(InvalidInput, match="31 bytes"):
            decode_address(text)

    def test_long_value_rejected(self):
        """A valid base-58 string of 33 bytes is not truncated."""
        text = encode_base58(b"\x07" * 33)

        with pytest.raises(InvalidInput, match="33 bytes"):
            decode_address(text)

    def test_non_string_rejected(self):
        with pytest.raises(InvalidInput):
            decode_address(12345)  # type: ignore[arg-type]

    def test_field_name_in_error(self):
        with pytest.raises(InvalidInput) as exc_info:
            decode_address("0", field="mint")

        assert "mint" in exc_info.value.message
        assert exc_info.value.details["field"] == "mint"


class TestRoundTrip:
    """decode(encode(x)) == x and encode(decode(t)) == t."""

    @pytest.mark.parametrize("raw", [
        bytes(32),
        b"\xff" * 32,
        b"\x00" * 5 + b"\x01" * 27,
        bytes(range(32)),
    ])
    def test_bytes_round_trip(self, raw):
        address = address_from_bytes(raw)

        assert decode_address(encode_address(address)) == address

    def test_random_round_trip(self):
        for _ in range(200):
            address = address_from_bytes(os.urandom(32))
            text = encode_address(address)

            assert decode_address(text) == address
            assert encode_address(decode_address(text)) == text

    def test_leading_zero_bytes_become_ones(self):
        address = address_from_bytes(b"\x00\x00" + b"\x01" * 30)

        assert encode_address(address).startswith("11")


class TestAddressType:
    """Tests for the Address value type."""

    def test_is_solders_pubkey(self):
        assert isinstance(decode_address(TOKEN_PROGRAM), Pubkey)

    def test_wrong_length_rejected(self):
        with pytest.raises(InvalidInput, match="31 bytes"):
            address_from_bytes(b"\x01" * 31)

    def test_non_bytes_rejected(self):
        with pytest.raises(InvalidInput):
            address_from_bytes(bytearray(32))  # type: ignore[arg-type]

    def test_default_is_all_zero(self):
        assert bytes(Address.default()) == bytes(32)
        assert is_default_address(address_from_bytes(bytes(32)))
        assert not is_default_address(decode_address(TOKEN_PROGRAM))

    def test_str_is_base58(self):
        assert str(decode_address(TOKEN_PROGRAM)) == TOKEN_PROGRAM

    def test_equality_and_hash(self):
        a = decode_address(TOKEN_PROGRAM)
        b = decode_address(TOKEN_PROGRAM)

        assert a == b
        assert len({a, b}) == 1


class TestDecodeBase58:
    """Tests for the generic decode_base58() helper."""

    def test_any_length_allowed(self):
        assert decode_base58(encode_base58(b"\x05" * 64)) == b"\x05" * 64

    def test_invalid_character(self):
        with pytest.raises(InvalidInput):
            decode_base58("abc0", field="secret")
