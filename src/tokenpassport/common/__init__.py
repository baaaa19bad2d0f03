"""Common utilities for tokenpassport."""

from tokenpassport.common.encoding import encode_uri
from tokenpassport.common.errors import (
    ErrorCode,
    MissingBaseStringError,
    MissingKeyError,
    TokenPassportError,
    UnsupportedAlgorithmError,
)
from tokenpassport.common.random import RandomSource, default_random_source
from tokenpassport.common.settings import Settings, get_settings

__all__ = [
    "ErrorCode",
    "MissingBaseStringError",
    "MissingKeyError",
    "RandomSource",
    "Settings",
    "TokenPassportError",
    "UnsupportedAlgorithmError",
    "default_random_source",
    "encode_uri",
    "get_settings",
]
