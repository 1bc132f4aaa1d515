"""
Base-58 timestamp codec tests.
"""

from __future__ import annotations

import pytest

from tokensword import base58
from tokensword.exceptions import CodecError, DecodeError, EncodeError


class TestAlphabet:
    def test_alphabet_has_58_unique_symbols(self) -> None:
        assert len(base58.ALPHABET) == 58
        assert len(set(base58.ALPHABET)) == 58

    def test_alphabet_skips_ambiguous_symbols_and_separator(self) -> None:
        for symbol in b"0OIl.":
            assert symbol not in base58.ALPHABET


class TestEncodedLength:
    @pytest.mark.parametrize(
        "value,length",
        [(0, 1), (1, 1), (57, 1), (58, 2), (58 * 58 - 1, 2), (58 * 58, 3), (base58.INT64_MAX, 11)],
    )
    def test_digit_counts(self, value: int, length: int) -> None:
        assert base58.encoded_length(value) == length

    def test_matches_encoding_length(self) -> None:
        value = 0
        for _ in range(40):
            assert base58.encoded_length(value) == len(base58.encode(value))
            value += 1 + value * 2


class TestEncode:
    @pytest.mark.parametrize(
        "value,expected",
        [(0, b"1"), (9, b"a"), (57, b"Z"), (58, b"21"), (3363, b"ZZ"), (3364, b"211")],
    )
    def test_known_values(self, value: int, expected: bytes) -> None:
        assert base58.encode(value) == expected

    def test_encode_into_writes_tail_only(self) -> None:
        buffer = bytearray(b"xxxxx")
        base58.encode_into(58, buffer)
        assert buffer == bytearray(b"xxx21")

    def test_encode_into_memoryview_slice(self) -> None:
        buffer = bytearray(b"ab.....")
        view = memoryview(buffer)
        base58.encode_into(3364, view[2:])
        assert buffer == bytearray(b"ab..211")

    def test_short_buffer_raises(self) -> None:
        with pytest.raises(EncodeError, match="buffer holds 1 bytes, 2 required"):
            base58.encode_into(58, bytearray(1))

    @pytest.mark.parametrize("value", [-1, base58.INT64_MAX + 1, 1.5, "12", True])
    def test_out_of_range_values_raise(self, value) -> None:
        with pytest.raises(EncodeError):
            base58.encoded_length(value)

    def test_encode_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            base58.encode(-5)


class TestDecode:
    def test_empty_decodes_to_zero(self) -> None:
        assert base58.decode(b"") == 0

    def test_accepts_str(self) -> None:
        assert base58.decode("21") == 58

    def test_leading_zero_symbols_are_ignored(self) -> None:
        assert base58.decode(b"1121") == 58

    @pytest.mark.parametrize("data", [b"0", b"O", b"I", b"l", b"a.b", b"\xff", "é"])
    def test_symbols_outside_alphabet_raise(self, data) -> None:
        with pytest.raises(DecodeError) as exc_info:
            base58.decode(data)
        assert exc_info.value.code == "DECODE_ERROR"

    def test_overflow_raises(self) -> None:
        too_big = base58.encode(base58.INT64_MAX) + b"1"
        with pytest.raises(CodecError, match="64-bit"):
            base58.decode(too_big)


class TestRoundTrip:
    def test_growing_series(self) -> None:
        value = 0
        for _ in range(40):
            assert base58.decode(base58.encode(value)) == value
            value += 1 + value * 2

    @pytest.mark.parametrize("value", [0, 57, 58, 59, 1_700_000_000, base58.INT64_MAX - 1_293_840_000, base58.INT64_MAX])
    def test_boundaries(self, value: int) -> None:
        assert base58.decode(base58.encode(value)) == value
