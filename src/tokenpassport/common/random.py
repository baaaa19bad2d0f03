"""Random source capability used for nonce generation."""

from __future__ import annotations

import random
from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Anything that yields uniform integers in a closed range."""

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        ...


_default_source = random.Random()


def default_random_source() -> RandomSource:
    """Get the shared general-purpose random source."""
    return _default_source
