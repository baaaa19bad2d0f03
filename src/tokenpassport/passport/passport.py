"""TokenPassport - Signed credential block for token-based authentication."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from typing import Callable

from tokenpassport.common.encoding import encode_uri
from tokenpassport.common.logging import get_logger
from tokenpassport.common.random import RandomSource
from tokenpassport.passport.nonce import generate_nonce
from tokenpassport.passport.signature import TokenPassportSignature

logger = get_logger(__name__)


def _render_header(
    account: str,
    consumer_key: str,
    token: str,
    nonce: str,
    timestamp: int,
    algorithm: str,
    signature: str,
) -> str:
    return "".join(
        [
            '<ns:tokenPassport xsi:type="core:TokenPassport">',
            f"<core:account>{account}</core:account>",
            f"<core:consumerKey>{consumer_key}</core:consumerKey>",
            f"<core:token>{token}</core:token>",
            f"<core:nonce>{nonce}</core:nonce>",
            f"<core:timestamp>{timestamp}</core:timestamp>",
            f'<core:signature algorithm="HMAC_{algorithm}">{signature}</core:signature>',
            "</ns:tokenPassport>",
        ]
    )


@dataclass(frozen=True)
class SignedTokenPassport:
    """A token passport whose signature has been computed."""

    account: str
    consumer_key: str
    token: str
    nonce: str
    timestamp: int
    algorithm: str
    signature_value: str

    def serialize_header(self) -> str:
        """Render the ``<ns:tokenPassport>`` block."""
        return _render_header(
            self.account,
            self.consumer_key,
            self.token,
            self.nonce,
            self.timestamp,
            self.algorithm,
            self.signature_value,
        )


class TokenPassport:
    """
    Credential fields for one outbound request.

    The nonce and timestamp are fixed when the passport is created. Create a
    new passport for every request; signing the same passport twice reuses
    its nonce.
    """

    def __init__(
        self,
        account: str = "",
        consumer_key: str = "",
        token: str = "",
        *,
        nonce: str | None = None,
        timestamp: int | None = None,
        rng: RandomSource | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        """
        Initialize a passport.

        Args:
            account: Account ID of the target tenant
            consumer_key: Consumer key of the integration record
            token: Token ID for the user/integration pairing
            nonce: Fixed nonce (generated when omitted)
            timestamp: Fixed Unix timestamp in seconds (current time when omitted)
            rng: Random source used to generate the nonce
            clock: Time source returning epoch seconds
        """
        self.account = account
        self.consumer_key = consumer_key
        self.token = token
        self.signature = TokenPassportSignature()
        self._nonce = nonce if nonce is not None else generate_nonce(rng)
        now = clock if clock is not None else time.time
        self._timestamp = timestamp if timestamp is not None else math.floor(now())

    @property
    def nonce(self) -> str:
        """Nonce generated at construction."""
        return self._nonce

    @property
    def timestamp(self) -> int:
        """Unix epoch seconds at construction."""
        return self._timestamp

    @property
    def is_signed(self) -> bool:
        """Whether a signature value has been computed."""
        return bool(self.signature.value)

    def base_string(self) -> str:
        """
        Build the signing input.

        Returns:
            ``account&consumer_key&token&nonce&timestamp``, encoded with encode_uri
        """
        return encode_uri(
            f"{self.account}&{self.consumer_key}&{self.token}&{self.nonce}&{self.timestamp}"
        )

    def serialize_header(self) -> str:
        """
        Render the ``<ns:tokenPassport>`` block.

        Values are interpolated as-is. Compute the signature first; an
        unsigned passport renders an empty algorithm and signature.
        """
        if not self.is_signed:
            logger.debug("Serializing unsigned token passport", account=self.account)
        return _render_header(
            self.account,
            self.consumer_key,
            self.token,
            self.nonce,
            self.timestamp,
            self.signature.algorithm,
            self.signature.value,
        )

    def sign(self, consumer_secret: str, token_secret: str, algorithm: str) -> SignedTokenPassport:
        """
        Derive the key, compute the signature and return the signed passport.

        Args:
            consumer_secret: Secret of the integration record
            token_secret: Secret of the token
            algorithm: Signature algorithm label

        Returns:
            SignedTokenPassport snapshot of this passport

        Raises:
            UnsupportedAlgorithmError: If algorithm is unset or unknown
        """
        signature = TokenPassportSignature(algorithm=algorithm)
        key = TokenPassportSignature.derive_key(consumer_secret, token_secret)
        signature.compute(self.base_string(), key)
        self.signature = signature

        logger.info(
            "Signed token passport",
            account=self.account,
            algorithm=algorithm,
            timestamp=self.timestamp,
        )
        return SignedTokenPassport(
            account=self.account,
            consumer_key=self.consumer_key,
            token=self.token,
            nonce=self.nonce,
            timestamp=self.timestamp,
            algorithm=self.signature.algorithm,
            signature_value=self.signature.value,
        )
