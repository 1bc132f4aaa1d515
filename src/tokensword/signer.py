"""
Token signing and verification.

A Signer owns a BLAKE3 keyed-hash context and reuses it across calls,
resetting it before every use after the first. Tokens have the form::

    payload "." [timestamp "."] signature

where ``signature`` is the unpadded URL-safe base64 of the 32-byte keyed
digest over everything before the final ``.``.
"""

from __future__ import annotations

import base64
import hmac
import threading
import time
from typing import TYPE_CHECKING, Optional, Tuple, Union

from blake3 import blake3
from pydantic import BaseModel, ConfigDict, Field

from . import base58
from .exceptions import InvalidSignature, ShortToken, TimestampMissing
from .keys import Data, normalize_key, to_bytes
from .logging import get_logger
from .timestamps import check_age, split_timestamp

if TYPE_CHECKING:
    from .config.signer import SignerSettings

logger = get_logger("tokensword.signer")

DIGEST_SIZE = 32
SEPARATOR = b"."


def _b64_encoded_length(n: int) -> int:
    return (n * 8 + 5) // 6


SIGNATURE_LENGTH = _b64_encoded_length(DIGEST_SIZE)


class SignerOptions(BaseModel):
    """Token format options. Defaults: no timestamp, epoch 0."""

    model_config = ConfigDict(frozen=True)

    timestamp: bool = False
    epoch: int = Field(default=0, ge=0, le=base58.INT64_MAX)


class Signer:
    """Signs payloads into tokens and verifies them with one secret key.

    Safe to share between threads: every use of the hash context happens
    under ``self._lock``.
    """

    def __init__(self, key: Optional[Data], options: Optional[SignerOptions] = None) -> None:
        options = options or SignerOptions()
        normalized, mode = normalize_key(key)

        self._lock = threading.Lock()
        self._hash = blake3(key=normalized)
        self._dirty = False
        self._timestamp = options.timestamp
        self._epoch = options.epoch

        logger.debug(
            "signer initialised",
            key_mode=mode,
            timestamp=self._timestamp,
            epoch=self._epoch,
        )

    @classmethod
    def from_settings(cls, settings: SignerSettings) -> "Signer":
        return cls(
            settings.secret_key.get_secret_value(),
            SignerOptions(timestamp=settings.timestamp, epoch=settings.epoch),
        )

    @property
    def timestamp(self) -> bool:
        return self._timestamp

    @property
    def epoch(self) -> int:
        return self._epoch

    @property
    def dirty(self) -> bool:
        return self._dirty

    @property
    def signature_length(self) -> int:
        return SIGNATURE_LENGTH

    def _sign(self, message: Union[bytes, bytearray, memoryview]) -> bytes:
        """Return the encoded signature of ``message``."""
        with self._lock:
            if self._dirty:
                self._hash.reset()
            self._dirty = True
            self._hash.update(message)
            digest = self._hash.digest()

        return base64.urlsafe_b64encode(digest).rstrip(b"=")

    def sign(self, payload: Data) -> bytes:
        """Return ``payload.signature``, or ``payload.timestamp.signature``.

        Raises:
            EncodeError: timestamping is on and the clock is behind the epoch.
        """
        token = bytearray(to_bytes(payload))

        if self._timestamp:
            ts = int(time.time()) - self._epoch
            stamp = bytearray(base58.encoded_length(ts))
            base58.encode_into(ts, stamp)
            token += SEPARATOR
            token += stamp

        signature = self._sign(token)
        token += SEPARATOR
        token += signature
        return bytes(token)

    def unsign(self, token: Data) -> bytes:
        """Verify ``token`` and return everything before its signature.

        A timestamp segment, if present, is returned as part of the payload;
        its age is not checked.

        Raises:
            ShortToken: token cannot hold a signature and a payload.
            InvalidSignature: signature does not match.
        """
        raw = to_bytes(token)
        length = len(raw)

        if length < SIGNATURE_LENGTH + 2:
            logger.debug("token rejected", reason="short_token", length=length)
            raise ShortToken(length=length, minimum=SIGNATURE_LENGTH + 2)

        payload = raw[: length - SIGNATURE_LENGTH - 1]
        expected = self._sign(payload)

        if not hmac.compare_digest(raw[length - SIGNATURE_LENGTH :], expected):
            logger.debug("token rejected", reason="invalid_signature", length=length)
            raise InvalidSignature()

        return payload

    def unsign_timestamped(self, token: Data, max_age: Optional[int] = None) -> Tuple[bytes, int]:
        """Verify ``token`` and split off its timestamp.

        Returns the payload without the timestamp segment and the issue time
        in Unix seconds. With ``max_age`` set, older tokens raise TokenExpired.

        Raises:
            TimestampMissing: this Signer does not embed timestamps.
        """
        if not self._timestamp:
            raise TimestampMissing(reason="signer is not configured with timestamps")

        data, issued_at = split_timestamp(self.unsign(token), epoch=self._epoch)
        if max_age is not None:
            check_age(issued_at, max_age)
        return data, issued_at


def new(key: Optional[Data], *, timestamp: bool = False, epoch: int = 0) -> Signer:
    """Build a Signer for ``key``."""
    return Signer(key, SignerOptions(timestamp=timestamp, epoch=epoch))


__all__ = ["SIGNATURE_LENGTH", "Signer", "SignerOptions", "new"]
