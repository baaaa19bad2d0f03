"""Shared error types and codes."""

from __future__ import annotations

from typing import Any


class ErrorCode:
    UNSUPPORTED_ALGORITHM = "unsupported_algorithm"
    MISSING_BASE_STRING = "missing_base_string"
    MISSING_KEY = "missing_key"
    INVALID_CONFIG = "invalid_config"


class TokenPassportError(Exception):
    """Base error for token passport construction."""

    code = ErrorCode.INVALID_CONFIG
    default_message = "Token passport error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class UnsupportedAlgorithmError(TokenPassportError):
    """Signature algorithm is missing or not recognized."""

    code = ErrorCode.UNSUPPORTED_ALGORITHM
    default_message = (
        "Hashing algorithm is not supported. Supported algorithms include SHA1 and SHA256"
    )


class MissingBaseStringError(TokenPassportError):
    """No base string was supplied for signing."""

    code = ErrorCode.MISSING_BASE_STRING
    default_message = "A base string is required."


class MissingKeyError(TokenPassportError):
    """No signing key was supplied."""

    code = ErrorCode.MISSING_KEY
    default_message = (
        "A hashing key is required. Generate a key with "
        "TokenPassportSignature.derive_key(consumer_secret, token_secret)"
    )


def error_payload(
    code: str,
    message: str,
    details: dict[str, Any] | None = None,
) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "error": {
            "code": code,
            "message": message,
        }
    }
    if details:
        payload["error"]["details"] = details
    return payload
