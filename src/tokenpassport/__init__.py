"""
tokenpassport: Signed token passports for token-based authentication (TBA).

Builds the nonce, timestamp, base string and HMAC signature of a
``<ns:tokenPassport>`` credential block for a single outbound request.
"""

from tokenpassport.passport import (
    HashAlgorithm,
    SignedTokenPassport,
    TokenPassport,
    TokenPassportSignature,
)

__version__ = "1.0.0"

__all__ = [
    "HashAlgorithm",
    "SignedTokenPassport",
    "TokenPassport",
    "TokenPassportSignature",
]
