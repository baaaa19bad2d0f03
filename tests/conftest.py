"""Pytest configuration and fixtures."""

import logging
from collections.abc import Iterable, Iterator

import pytest
import structlog

from tokenpassport.common.settings import get_settings
from tokenpassport.passport.passport import TokenPassport


class SequenceRandom:
    """Deterministic random source that replays a fixed sequence."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values: Iterator[int] = iter(values)
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        value = next(self._values)
        assert a <= value <= b
        return value


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Restore default structlog and root logger configuration between tests."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
    get_settings.cache_clear()


@pytest.fixture
def sequence_random() -> type[SequenceRandom]:
    """Factory for deterministic random sources."""
    return SequenceRandom


@pytest.fixture
def fixed_passport() -> TokenPassport:
    """Passport with a fixed nonce and timestamp."""
    return TokenPassport(
        account="123",
        consumer_key="ck",
        token="tk",
        nonce="abc123",
        timestamp=1000000000,
    )


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> pytest.MonkeyPatch:
    """Environment without TOKENPASSPORT_* variables or a local .env file."""
    for name in (
        "ACCOUNT",
        "CONSUMER_KEY",
        "CONSUMER_SECRET",
        "TOKEN",
        "TOKEN_SECRET",
        "SIGNATURE_ALGORITHM",
        "LOG_LEVEL",
        "LOG_JSON",
    ):
        monkeypatch.delenv(f"TOKENPASSPORT_{name}", raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch
