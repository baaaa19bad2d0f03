"""TokenPassportSignature - HMAC signature over a passport base string."""

from __future__ import annotations

from dataclasses import dataclass

from tokenpassport.common import hmac
from tokenpassport.common.encoding import encode_uri
from tokenpassport.common.errors import (
    MissingBaseStringError,
    MissingKeyError,
    TokenPassportError,
)
from tokenpassport.common.logging import get_logger
from tokenpassport.passport.algorithms import HashAlgorithm, resolve_algorithm

logger = get_logger(__name__)


@dataclass
class TokenPassportSignature:
    """Signature slot of a token passport."""

    value: str = ""
    algorithm: str = ""

    @staticmethod
    def derive_key(consumer_secret: str, token_secret: str) -> str:
        """
        Create the signing key from the consumer and token secrets.

        Args:
            consumer_secret: Secret of the integration record
            token_secret: Secret of the token

        Returns:
            ``encode_uri("consumer_secret&token_secret")``
        """
        return encode_uri(f"{consumer_secret}&{token_secret}")

    def _check(self, base_string: str | None, key: str | None) -> HashAlgorithm:
        try:
            digest = resolve_algorithm(self.algorithm)
            if not base_string:
                raise MissingBaseStringError()
            if not key:
                raise MissingKeyError()
        except TokenPassportError as exc:
            logger.warning("Cannot sign token passport", code=exc.code, algorithm=self.algorithm)
            raise
        return digest

    def compute(self, base_string: str | None, key: str | None) -> None:
        """
        Compute the HMAC of the base string and store it in ``value``.

        The digest is chosen from ``algorithm``; the label itself is kept as
        given. ``value`` is only written when signing succeeds.

        Args:
            base_string: Output of TokenPassport.base_string()
            key: Output of TokenPassportSignature.derive_key()

        Raises:
            UnsupportedAlgorithmError: If algorithm is unset or unknown
            MissingBaseStringError: If base_string is empty
            MissingKeyError: If key is empty
        """
        digest = self._check(base_string, key)
        assert base_string is not None
        assert key is not None

        self.value = hmac.sign(key, base_string, digest)
        logger.debug("Computed token passport signature", algorithm=self.algorithm, digest=digest.value)

    def verify(self, base_string: str | None, key: str | None, expected: str | None = None) -> bool:
        """
        Recompute the signature and compare it in constant time.

        Args:
            base_string: Base string the signature should cover
            key: Signing key
            expected: Signature to check; defaults to the stored value

        Returns:
            True if the signature matches
        """
        digest = self._check(base_string, key)
        assert base_string is not None
        assert key is not None

        candidate = self.value if expected is None else expected
        if not candidate:
            return False
        return hmac.verify(key, base_string, candidate, digest)
