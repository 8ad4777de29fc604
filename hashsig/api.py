"""Top-level convenience functions."""

from __future__ import annotations

from .xmss import Xmss


def add(left: int, right: int) -> int:
    """Return the sum of two integers."""
    return left + right


def create_xmss(signatures: int) -> Xmss:
    """Create a key pair able to produce ``signatures`` signatures."""
    return Xmss(signatures)