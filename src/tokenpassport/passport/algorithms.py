"""Supported signature digests and their accepted aliases."""

from __future__ import annotations

import hashlib
from enum import Enum
from typing import Any, Callable

from tokenpassport.common.errors import UnsupportedAlgorithmError


class HashAlgorithm(str, Enum):
    """Digest primitives accepted by the remote verifier."""

    SHA1 = "sha1"
    SHA256 = "sha256"

    @property
    def digestmod(self) -> Callable[..., Any]:
        """hashlib constructor for this digest."""
        if self is HashAlgorithm.SHA256:
            return hashlib.sha256
        return hashlib.sha1


ALGORITHM_ALIASES: dict[str, HashAlgorithm] = {
    "HMAC-SHA256": HashAlgorithm.SHA256,
    "HMACSHA256": HashAlgorithm.SHA256,
    "SHA256": HashAlgorithm.SHA256,
    "HMAC-SHA1": HashAlgorithm.SHA1,
    "HMACSHA1": HashAlgorithm.SHA1,
    "SHA1": HashAlgorithm.SHA1,
}

SUPPORTED_ALGORITHMS: tuple[str, ...] = tuple(ALGORITHM_ALIASES)


def is_supported_algorithm(name: str | None) -> bool:
    """Check an algorithm label against the alias table (case-insensitive)."""
    if not name:
        return False
    return name.upper() in ALGORITHM_ALIASES


def resolve_algorithm(name: str | None) -> HashAlgorithm:
    """
    Map an algorithm label to its digest primitive.

    Args:
        name: Caller-supplied label such as ``HMAC-SHA256`` or ``sha1``

    Returns:
        The matching HashAlgorithm

    Raises:
        UnsupportedAlgorithmError: If the label is empty or not an accepted alias
    """
    if not name:
        raise UnsupportedAlgorithmError()
    try:
        return ALGORITHM_ALIASES[name.upper()]
    except KeyError:
        raise UnsupportedAlgorithmError() from None
