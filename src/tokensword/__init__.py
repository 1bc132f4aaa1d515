"""
Tokensword: compact signed tokens.

    from tokensword import new

    signer = new(b"secret key", timestamp=True)
    token = signer.sign(b"user-42")
    payload = signer.unsign(token)
"""

from .exceptions import (
    CodecError,
    DecodeError,
    EncodeError,
    InvalidSignature,
    ShortToken,
    TimestampMissing,
    TokenError,
    TokenExpired,
    TokenswordError,
)
from .signer import SIGNATURE_LENGTH, Signer, SignerOptions, new

__all__ = [
    "SIGNATURE_LENGTH",
    "CodecError",
    "DecodeError",
    "EncodeError",
    "InvalidSignature",
    "ShortToken",
    "Signer",
    "SignerOptions",
    "TimestampMissing",
    "TokenError",
    "TokenExpired",
    "TokenswordError",
    "new",
]
