"""Tests for the signature algorithm alias table."""

import hashlib

import pytest

from tokenpassport.common.errors import ErrorCode, UnsupportedAlgorithmError
from tokenpassport.passport.algorithms import (
    SUPPORTED_ALGORITHMS,
    HashAlgorithm,
    is_supported_algorithm,
    resolve_algorithm,
)


class TestResolveAlgorithm:
    """Test alias resolution to digest primitives."""

    @pytest.mark.parametrize(
        "name",
        ["HMAC-SHA256", "HMACSHA256", "SHA256", "hmac-sha256", "HmacSha256", "sha256"],
    )
    def test_sha256_aliases(self, name):
        """Test that every SHA-256 alias resolves to SHA256."""
        assert resolve_algorithm(name) is HashAlgorithm.SHA256

    @pytest.mark.parametrize(
        "name",
        ["HMAC-SHA1", "HMACSHA1", "SHA1", "hmac-sha1", "hmacSHA1", "sha1"],
    )
    def test_sha1_aliases(self, name):
        """Test that every SHA-1 alias resolves to SHA1."""
        assert resolve_algorithm(name) is HashAlgorithm.SHA1

    @pytest.mark.parametrize(
        "name",
        [None, "", "MD5", "HMAC-MD5", "SHA-1", "SHA-256", "HMAC_SHA256", " SHA1", "SHA512", "HMAC-SHA256X"],
    )
    def test_rejects_unknown(self, name):
        """Test that anything outside the table is rejected."""
        with pytest.raises(UnsupportedAlgorithmError) as exc_info:
            resolve_algorithm(name)

        assert exc_info.value.code == ErrorCode.UNSUPPORTED_ALGORITHM
        assert "SHA1 and SHA256" in str(exc_info.value)

    def test_is_supported(self):
        """Test the boolean check."""
        assert is_supported_algorithm("hmac-sha1") is True
        assert is_supported_algorithm("md5") is False
        assert is_supported_algorithm(None) is False


class TestHashAlgorithm:
    """Test the digest enum."""

    def test_digestmod(self):
        """Test hashlib constructors."""
        assert HashAlgorithm.SHA1.digestmod is hashlib.sha1
        assert HashAlgorithm.SHA256.digestmod is hashlib.sha256

    def test_supported_list(self):
        """Test the six canonical aliases."""
        assert set(SUPPORTED_ALGORITHMS) == {
            "HMAC-SHA256",
            "HMACSHA256",
            "SHA256",
            "HMAC-SHA1",
            "HMACSHA1",
            "SHA1",
        }
