"""
Caller-side helpers for the timestamp segment of a verified payload.

Signer.unsign never looks at token age. Callers that want expiry split the
timestamp off the returned payload and compare it against a freshness window.
"""

from __future__ import annotations

import time
from typing import Optional, Tuple, Union

from . import base58
from .exceptions import TimestampMissing, TokenExpired


def split_timestamp(payload: Union[bytes, bytearray, memoryview], epoch: int = 0) -> Tuple[bytes, int]:
    """Split ``data.timestamp`` into ``data`` and the issue time in Unix seconds.

    Raises:
        TimestampMissing: the payload has no ``.`` separator.
        DecodeError: the suffix is not a valid base-58 timestamp.
    """
    raw = bytes(payload)
    data, sep, stamp = raw.rpartition(b".")
    if not sep:
        raise TimestampMissing(reason="no separator in payload")
    if not stamp:
        raise TimestampMissing(reason="empty timestamp segment")
    return data, base58.decode(stamp) + epoch


def check_age(issued_at: int, max_age: int, now: Optional[int] = None) -> int:
    """Return the token age in seconds, raising TokenExpired past ``max_age``.

    Issue times in the future (clock skew) count as age 0.
    """
    if now is None:
        now = int(time.time())
    age = max(0, now - issued_at)
    if age > max_age:
        raise TokenExpired(age=age, max_age=max_age)
    return age


__all__ = ["check_age", "split_timestamp"]
