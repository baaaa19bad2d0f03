"""HMAC signing utilities for token passports."""

from __future__ import annotations

import base64
import hmac
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tokenpassport.passport.algorithms import HashAlgorithm


def sign(key: str, message: str, algorithm: HashAlgorithm) -> str:
    """Create a base64-encoded HMAC signature over a UTF-8 message."""
    digest = hmac.new(
        key.encode("utf-8"),
        message.encode("utf-8"),
        algorithm.digestmod,
    ).digest()
    return base64.b64encode(digest).decode("ascii")


def verify(key: str, message: str, signature: str, algorithm: HashAlgorithm) -> bool:
    """Verify a base64 HMAC signature in constant time."""
    expected = sign(key, message, algorithm)
    return hmac.compare_digest(expected.encode("ascii"), signature.encode("utf-8"))
