"""Winternitz-style one-time signatures over SHA-256 hash chains."""

from __future__ import annotations

from collections.abc import Sequence

from .hashing import DIGEST_SIZE, digest


def _chain(start: bytes, steps: int) -> bytes:
    result = bytes(start)
    for _ in range(steps):
        result = digest(result)
    if len(result) != DIGEST_SIZE:
        raise ValueError(f"chain values must be {DIGEST_SIZE} bytes long")
    return result


class Wots:
    """One-time key pair of ``w`` hash chains, each ``2**w`` steps long."""

    def __init__(self, seed: bytes, w: int) -> None:
        if w < 0:
            raise ValueError("w must not be negative")
        seed = bytes(seed)
        self.w = w
        self.private_key: tuple[bytes, ...] = tuple(
            digest(seed + bytes([i & 0xFF])) for i in range(w)
        )
        chain_length = 1 << w
        self.public_key: tuple[bytes, ...] = tuple(
            _chain(part, chain_length) for part in self.private_key
        )

    def sign(self, message: bytes) -> list[bytes]:
        """Sign a ``w``-byte message; each byte is the number of chain steps."""
        message = bytes(message)
        if len(message) != self.w:
            raise ValueError("Invalid message length")
        return [_chain(part, m) for part, m in zip(self.private_key, message)]

    def verify(self, message: bytes, signature: Sequence[bytes]) -> bool:
        """Return whether ``signature`` completes every chain to the public key."""
        message = bytes(message)
        if len(message) != self.w or len(signature) != self.w:
            raise ValueError("Invalid signature or message length")
        chain_length = 1 << self.w
        for part, m, expected in zip(signature, message, self.public_key):
            if m > chain_length:
                raise ValueError("message byte exceeds the chain length")
            if _chain(part, chain_length - m) != expected:
                return False
        return True