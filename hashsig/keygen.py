"""Key material drawn from the operating system's random source."""

from __future__ import annotations

import base64
import secrets


def generate_key(size: int) -> bytes:
    """Return ``size`` bytes from the operating system CSPRNG."""
    if size < 0:
        raise ValueError("key size must not be negative")
    return secrets.token_bytes(size)


def generate_encoded_key(size: int) -> str:
    """Return a fresh ``size``-byte key encoded as standard padded base64."""
    return base64.b64encode(generate_key(size)).decode("ascii")