"""Token passport construction and signing."""

from tokenpassport.passport.algorithms import (
    SUPPORTED_ALGORITHMS,
    HashAlgorithm,
    is_supported_algorithm,
    resolve_algorithm,
)
from tokenpassport.passport.nonce import generate_nonce
from tokenpassport.passport.passport import SignedTokenPassport, TokenPassport
from tokenpassport.passport.signature import TokenPassportSignature

__all__ = [
    "SUPPORTED_ALGORITHMS",
    "HashAlgorithm",
    "SignedTokenPassport",
    "TokenPassport",
    "TokenPassportSignature",
    "generate_nonce",
    "is_supported_algorithm",
    "resolve_algorithm",
]
