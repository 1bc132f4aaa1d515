"""
Tokensword exception hierarchy.

Errors are split along two axes:

- TokenError: a presented token failed verification. Recoverable, surfaced
  directly to the caller, never retried.
- CodecError: a caller broke a precondition of the base-58 timestamp codec.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class TokenswordError(Exception):
    """Root of all tokensword errors."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


# ================================
# Token verification errors
# ================================


class TokenError(TokenswordError):
    """Base class for tokens that fail verification."""

    pass


class ShortToken(TokenError):
    """Token is too short to contain a signature region."""

    def __init__(self, *, length: int, minimum: int) -> None:
        super().__init__(
            "token is too small to be valid",
            code="SHORT_TOKEN",
            details={"length": length, "minimum": minimum},
        )


class InvalidSignature(TokenError):
    """Signature present but does not match the signed region."""

    def __init__(self) -> None:
        super().__init__("invalid signature", code="INVALID_SIGNATURE")


class TimestampMissing(TokenError):
    """A timestamp segment was expected but the payload carries none."""

    def __init__(self, *, reason: str) -> None:
        super().__init__(
            f"token has no timestamp: {reason}",
            code="TIMESTAMP_MISSING",
            details={"reason": reason},
        )


class TokenExpired(TokenError):
    """Token is older than the caller's freshness window."""

    def __init__(self, *, age: int, max_age: int) -> None:
        super().__init__(
            f"token age {age}s exceeds max_age {max_age}s",
            code="TOKEN_EXPIRED",
            details={"age": age, "max_age": max_age},
        )


# ================================
# Codec errors
# ================================


class CodecError(TokenswordError, ValueError):
    """Base class for base-58 codec precondition failures."""

    pass


class EncodeError(CodecError):
    def __init__(self, *, value: Any, reason: str) -> None:
        super().__init__(
            f"cannot encode {value!r}: {reason}",
            code="ENCODE_ERROR",
            details={"value": str(value), "reason": reason},
        )


class DecodeError(CodecError):
    def __init__(self, *, data: Any, reason: str) -> None:
        preview = data[:32] if isinstance(data, (bytes, bytearray, str)) else data
        super().__init__(
            f"cannot decode {preview!r}: {reason}",
            code="DECODE_ERROR",
            details={"reason": reason},
        )
