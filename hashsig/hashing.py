"""SHA-256 hashing helpers used throughout the package."""

from __future__ import annotations

import hashlib

DIGEST_SIZE = 32


def digest(data: bytes) -> bytes:
    """Return the 32-byte SHA-256 digest of ``data``."""
    return hashlib.sha256(data).digest()


def digest_hex(data: bytes) -> str:
    """Return the SHA-256 digest of ``data`` as lower-case hex."""
    return hashlib.sha256(data).hexdigest()