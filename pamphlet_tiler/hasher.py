"""Content hashing for encoded tiles."""

import hashlib

SHORT_HASH_LENGTH = 16


def calculate_hash(data: bytes) -> str:
    """
    Compute the SHA-256 of a byte buffer.

    Args:
        data: Bytes to hash (any bytes-like object, may be empty).

    Returns:
        64-character lowercase hex digest.
    """
    return hashlib.sha256(data).hexdigest()


def short_hash(data: bytes) -> str:
    """Return the first 16 hex characters of calculate_hash(data)."""
    return calculate_hash(data)[:SHORT_HASH_LENGTH]
