"""Nonce generation for token passports."""

from __future__ import annotations

from tokenpassport.common.random import RandomSource, default_random_source

NONCE_MIN_LENGTH = 6
NONCE_MAX_LENGTH = 64
NONCE_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"


def generate_nonce(rng: RandomSource | None = None) -> str:
    """
    Generate an alphanumeric nonce between 6 and 64 characters long.

    Args:
        rng: Random source; defaults to the shared general-purpose generator

    Returns:
        Nonce string drawn from NONCE_ALPHABET
    """
    source = rng if rng is not None else default_random_source()
    length = source.randint(NONCE_MIN_LENGTH, NONCE_MAX_LENGTH)
    last = len(NONCE_ALPHABET) - 1
    return "".join(NONCE_ALPHABET[source.randint(0, last)] for _ in range(length))
