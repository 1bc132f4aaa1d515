"""
Secret key normalization tests.
"""

from __future__ import annotations

from blake3 import blake3

from tokensword.keys import KEY_SIZE, normalize_key, pad_secret, to_bytes


class TestPadSecret:
    def test_short_key_is_space_padded(self) -> None:
        assert pad_secret(b"AVerySecretString") == b"AVerySecretString" + b" " * 15

    def test_none_and_empty_pad_to_spaces(self) -> None:
        assert pad_secret(None) == b" " * KEY_SIZE
        assert pad_secret(b"") == b" " * KEY_SIZE

    def test_long_key_passes_through(self) -> None:
        key = b"x" * 70
        assert pad_secret(key) == key

    def test_str_is_utf8_encoded(self) -> None:
        assert pad_secret("ключ") == "ключ".encode("utf-8") + b" " * 24


class TestNormalizeKey:
    def test_modes(self) -> None:
        assert normalize_key(b"short")[1] == "padded"
        assert normalize_key(b"k" * 32) == (b"k" * 32, "exact")
        assert normalize_key(b"k" * 33)[1] == "condensed"

    def test_condensed_key_is_blake3_digest(self) -> None:
        key = b"B1nzyRateLid;flkjasdl;fjasd;lkfjkl;ljasd;fkljsda;fkljasd;klfj;asdjts"
        normalized, _ = normalize_key(key)
        assert normalized == blake3(key).digest()
        assert len(normalized) == KEY_SIZE

    def test_long_key_is_not_truncated(self) -> None:
        key = b"k" * KEY_SIZE + b"extra"
        assert normalize_key(key)[0] != key[:KEY_SIZE]

    def test_always_key_size(self) -> None:
        for length in (0, 1, 31, 32, 33, 64, 65, 500):
            assert len(normalize_key(b"a" * length)[0]) == KEY_SIZE


class TestToBytes:
    def test_accepted_input_types(self) -> None:
        assert to_bytes(None) == b""
        assert to_bytes("é") == b"\xc3\xa9"
        assert to_bytes(bytearray(b"ab")) == b"ab"
        assert to_bytes(memoryview(b"cd")) == b"cd"

    def test_signer_and_keys_share_conversion(self) -> None:
        from tokensword import signer

        assert signer.to_bytes is to_bytes
