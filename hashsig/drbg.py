"""Deterministic random bit generator built on HMAC-SHA-256."""

from __future__ import annotations

import hashlib
import hmac

_OUTLEN = 32
MAX_BITS_PER_REQUEST = 7500


def _mac(key: bytes, *parts: bytes) -> bytes:
    h = hmac.new(key, digestmod=hashlib.sha256)
    for part in parts:
        h.update(part)
    return h.digest()


class HmacDrbg:
    """HMAC-SHA-256 based DRBG with a key ``K`` and chaining value ``V``."""

    def __init__(self, entropy: bytes, personalization: bytes | None = None) -> None:
        k = bytes(_OUTLEN)
        v = b"\x01" * _OUTLEN
        parts = [v, bytes(entropy)]
        if personalization is not None:
            parts.append(bytes(personalization))
        self._k = _mac(k, *parts)
        self._v = _mac(self._k, v)
        self._reseed_counter = 1

    @property
    def reseed_counter(self) -> int:
        """Number of requests served since the last (re)seed, plus one."""
        return self._reseed_counter

    def generate(self, num_bytes: int) -> bytes:
        """Return ``num_bytes`` pseudo-random bytes (at most 7500 bits per call)."""
        if num_bytes < 0:
            raise ValueError("num_bytes must not be negative")
        if num_bytes * 8 > MAX_BITS_PER_REQUEST:
            raise ValueError(
                "Generate cannot generate more than 7500 bits in a single call"
            )
        output = bytearray()
        while len(output) < num_bytes:
            self._v = _mac(self._k, self._v)
            output += self._v
        self._update()
        self._reseed_counter += 1
        return bytes(output[:num_bytes])

    def reseed(self, entropy: bytes) -> None:
        """Mix fresh entropy into the state and reset the reseed counter."""
        self._update(bytes(entropy))
        self._reseed_counter = 1

    def _update(self, seed_material: bytes | None = None) -> None:
        extra = (seed_material,) if seed_material is not None else ()
        self._k = _mac(self._k, self._v, b"\x00", *extra)
        self._v = _mac(self._k, self._v)
        if seed_material is not None:
            self._k = _mac(self._k, self._v, b"\x01", seed_material)
            self._v = _mac(self._k, self._v)