"""
Compact base-58 codec for token timestamps.

Encodes non-negative 64-bit integers into a dense, variable-length text form.
The alphabet leaves out the visually ambiguous `0`, `O`, `I` and `l`, and
never contains `.`, so an encoded value can sit between token separators.
"""

from __future__ import annotations

from typing import Union

from .exceptions import DecodeError, EncodeError

ALPHABET = b"123456789abcdefghijkmnopqrstuvwxyzABCDEFGHJKLMNPQRSTUVWXYZ"
BASE = len(ALPHABET)

INT64_MAX = 2**63 - 1

# byte value -> digit value, -1 for bytes outside the alphabet
_DECODE_MAP = [-1] * 256
for _value, _symbol in enumerate(ALPHABET):
    _DECODE_MAP[_symbol] = _value
del _value, _symbol

Writable = Union[bytearray, memoryview]


def _check_value(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise EncodeError(value=n, reason="value must be an int")
    if n < 0:
        raise EncodeError(value=n, reason="value must be non-negative")
    if n > INT64_MAX:
        raise EncodeError(value=n, reason="value exceeds the signed 64-bit range")


def encoded_length(n: int) -> int:
    """Return the number of symbols needed to encode ``n`` (1 for zero)."""
    _check_value(n)
    length = 1
    while n >= BASE:
        length += 1
        n //= BASE
    return length


def encode_into(n: int, buffer: Writable) -> None:
    """Write the encoding of ``n`` into the tail of ``buffer``.

    The most significant symbol comes first; bytes in front of the encoding
    are left untouched.

    Raises:
        EncodeError: ``n`` is out of range or ``buffer`` is too short.
    """
    needed = encoded_length(n)
    if len(buffer) < needed:
        raise EncodeError(
            value=n,
            reason=f"buffer holds {len(buffer)} bytes, {needed} required",
        )

    pos = len(buffer) - 1
    while n >= BASE:
        buffer[pos] = ALPHABET[n % BASE]
        pos -= 1
        n //= BASE
    buffer[pos] = ALPHABET[n]


def encode(n: int) -> bytes:
    buffer = bytearray(encoded_length(n))
    encode_into(n, buffer)
    return bytes(buffer)


def decode(data: Union[bytes, bytearray, memoryview, str]) -> int:
    """Decode base-58 symbols, most significant first.

    An empty input decodes to 0.

    Raises:
        DecodeError: a byte is outside the alphabet, or the value does not
            fit in a signed 64-bit integer.
    """
    raw = data.encode("ascii", errors="replace") if isinstance(data, str) else bytes(data)

    value = 0
    for index, symbol in enumerate(raw):
        digit = _DECODE_MAP[symbol]
        if digit < 0:
            raise DecodeError(data=data, reason=f"invalid symbol at offset {index}")
        value = value * BASE + digit

    if value > INT64_MAX:
        raise DecodeError(data=data, reason="value exceeds the signed 64-bit range")
    return value


__all__ = [
    "ALPHABET",
    "BASE",
    "INT64_MAX",
    "decode",
    "encode",
    "encode_into",
    "encoded_length",
]
