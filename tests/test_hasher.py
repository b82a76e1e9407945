"""Tests for the hasher module."""

import hashlib
import string

import pytest

from pamphlet_tiler.hasher import SHORT_HASH_LENGTH, calculate_hash, short_hash


class TestCalculateHash:
    """Test cases for calculate_hash."""

    @pytest.mark.parametrize("data", [b"test data", b"\x00" * 1024, bytes(range(256))])
    def test_hash_is_64_lowercase_hex(self, data):
        """Digest is 64 lowercase hex characters."""
        digest = calculate_hash(data)
        assert len(digest) == 64
        assert set(digest) <= set(string.hexdigits.lower())

    def test_hash_is_deterministic(self):
        """Same data gives the same digest."""
        assert calculate_hash(b"test data") == calculate_hash(b"test data")

    def test_hash_matches_sha256(self):
        """Digest is plain SHA-256."""
        assert calculate_hash(b"test data") == hashlib.sha256(b"test data").hexdigest()

    def test_different_data_different_hash(self):
        """Distinct inputs give distinct digests."""
        assert calculate_hash(b"data1") != calculate_hash(b"data2")

    def test_empty_input(self):
        """Empty buffer hashes without error."""
        assert calculate_hash(b"") == (
            "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
        )

    def test_accepts_memoryview(self):
        """Bytes-like objects are accepted."""
        assert calculate_hash(memoryview(b"abc")) == calculate_hash(b"abc")


class TestShortHash:
    """Test cases for short_hash."""

    def test_short_hash_length(self):
        """Short hash is 16 characters."""
        assert SHORT_HASH_LENGTH == 16
        assert len(short_hash(b"test data")) == 16

    @pytest.mark.parametrize("data", [b"", b"a", b"test data", b"\xff" * 77])
    def test_short_hash_is_prefix(self, data):
        """Short hash is a prefix of the full digest."""
        assert calculate_hash(data).startswith(short_hash(data))
        assert short_hash(data) == calculate_hash(data)[:16]
