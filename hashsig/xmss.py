"""Stateful many-time signatures built from one-time keys and a Merkle tree."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .drbg import HmacDrbg
from .hashing import digest
from .keygen import generate_key
from .merkle import MerkleTree
from .wots import Wots

_SEED_SIZE = 48
_WOTS_W = 16


@dataclass(frozen=True)
class XmssSignature:
    """A signature: the key index used, the one-time signature and its auth path."""

    index: int
    signature: list[bytes]
    auth_path: list[bytes]


class Xmss:
    """Key pair able to produce a fixed number of signatures."""

    def __init__(self, signatures: int) -> None:
        if signatures < 0:
            raise ValueError("number of signatures must not be negative")
        seed = generate_key(_SEED_SIZE)
        self.private_seed = HmacDrbg(seed).generate(_SEED_SIZE)
        self.public_seed = HmacDrbg(seed, seed).generate(_SEED_SIZE)
        # Every one-time key derives from the same seed, so they are identical.
        wots = Wots(self.private_seed, _WOTS_W) if signatures else None
        self.wots_keys: list[Wots] = [wots] * signatures
        self.merkle_tree = MerkleTree(
            part for key in self.wots_keys for part in key.public_key
        )
        self.index = 0
        self.remaining = signatures

    def sign(self, message: bytes) -> XmssSignature:
        """Sign ``message`` with the next unused one-time key."""
        if self.index >= len(self.wots_keys):
            raise RuntimeError("No more signatures available")
        signature = self.wots_keys[self.index].sign(message)
        auth_path = self.merkle_tree.auth_path(self.index)
        self.index += 1
        self.remaining -= 1
        return XmssSignature(self.index - 1, signature, auth_path)

    def verify(
        self,
        message: bytes,
        index: int,
        signature: Sequence[bytes],
        auth_path: Sequence[bytes],
    ) -> bool:
        """Check the one-time signature and climb the auth path to the root."""
        if not 0 <= index < len(self.wots_keys):
            return False
        if not self.wots_keys[index].verify(message, signature):
            return False
        node = digest(b"".join(signature))
        idx = index
        for sibling in auth_path:
            node = digest(node + sibling) if idx % 2 == 0 else digest(sibling + node)
            idx //= 2
        return node == self.merkle_tree.root