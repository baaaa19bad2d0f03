"""Tests for nonce generation."""

import random
import string

from tokenpassport.passport.nonce import (
    NONCE_ALPHABET,
    NONCE_MAX_LENGTH,
    NONCE_MIN_LENGTH,
    generate_nonce,
)


class TestNonceAlphabet:
    """Test the nonce alphabet layout."""

    def test_alphabet_order(self):
        """Test digits, then lowercase, then uppercase."""
        assert NONCE_ALPHABET == string.digits + string.ascii_lowercase + string.ascii_uppercase
        assert len(NONCE_ALPHABET) == 62


class TestGenerateNonce:
    """Test nonce generation with injected random sources."""

    def test_length_drawn_first(self, sequence_random):
        """Test that the first draw picks the length in [6, 64]."""
        rng = sequence_random([6, 0, 1, 2, 3, 4, 5])

        nonce = generate_nonce(rng)

        assert nonce == "012345"
        assert rng.calls[0] == (NONCE_MIN_LENGTH, NONCE_MAX_LENGTH)
        assert all(call == (0, 61) for call in rng.calls[1:])

    def test_characters_indexed_from_alphabet(self, sequence_random):
        """Test mapping of indices to characters."""
        rng = sequence_random([6, 10, 35, 36, 61, 9, 0])

        assert generate_nonce(rng) == "azAZ90"

    def test_maximum_length(self, sequence_random):
        """Test generating the longest nonce."""
        rng = sequence_random([64] + [61] * 64)

        nonce = generate_nonce(rng)

        assert nonce == "Z" * 64

    def test_seeded_random_is_reproducible(self):
        """Test that equal seeds give equal nonces."""
        assert generate_nonce(random.Random(7)) == generate_nonce(random.Random(7))

    def test_default_source_bounds(self):
        """Test length and characters with the default source."""
        allowed = set(NONCE_ALPHABET)
        for _ in range(200):
            nonce = generate_nonce()
            assert NONCE_MIN_LENGTH <= len(nonce) <= NONCE_MAX_LENGTH
            assert set(nonce) <= allowed

    def test_nonces_differ(self):
        """Test that consecutive nonces are not repeated."""
        nonces = {generate_nonce() for _ in range(50)}
        assert len(nonces) > 45
