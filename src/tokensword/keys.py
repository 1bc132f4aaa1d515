"""
Secret key normalization.

BLAKE3 keyed mode takes exactly KEY_SIZE bytes. Short keys are padded with
ASCII spaces; longer keys are condensed with an unkeyed BLAKE3 digest.
"""

from __future__ import annotations

from typing import Literal, Optional, Tuple, Union

from blake3 import blake3

KEY_SIZE = 32
PAD_BYTE = b" "

Data = Union[bytes, bytearray, memoryview, str]
KeyMode = Literal["padded", "exact", "condensed"]


def to_bytes(data: Optional[Data]) -> bytes:
    """Return ``data`` as bytes; ``str`` is UTF-8 encoded and ``None`` is empty."""
    if data is None:
        return b""
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def pad_secret(key: Optional[Data]) -> bytes:
    """Right-pad ``key`` with spaces to KEY_SIZE bytes; longer keys pass through."""
    raw = to_bytes(key)
    if len(raw) < KEY_SIZE:
        raw = raw + PAD_BYTE * (KEY_SIZE - len(raw))
    return raw


def normalize_key(key: Optional[Data]) -> Tuple[bytes, KeyMode]:
    """Return the KEY_SIZE-byte hash key for ``key`` and how it was derived.

    Keys longer than KEY_SIZE bytes are replaced by ``blake3(key).digest()``
    so every key byte counts. Other BLAKE3 signers that keep only the first
    KEY_SIZE bytes of a long key produce different signatures: tokens made
    with such keys are not interchangeable with them. Keys of KEY_SIZE bytes
    or fewer are.
    """
    raw = to_bytes(key)
    if len(raw) < KEY_SIZE:
        return pad_secret(raw), "padded"
    if len(raw) == KEY_SIZE:
        return raw, "exact"
    return blake3(raw).digest(length=KEY_SIZE), "condensed"


__all__ = ["KEY_SIZE", "Data", "KeyMode", "normalize_key", "pad_secret", "to_bytes"]
