"""Binary Merkle tree over 32-byte SHA-256 nodes."""

from __future__ import annotations

from collections.abc import Iterable

from .hashing import DIGEST_SIZE, digest


def _next_layer(layer: list[bytes]) -> list[bytes]:
    # Pairs are hashed together; a trailing odd node is hashed on its own.
    return [digest(b"".join(layer[i : i + 2])) for i in range(0, len(layer), 2)]


class MerkleTree:
    """Merkle tree keeping every layer, from the leaves up to the root."""

    def __init__(self, leaves: Iterable[bytes]) -> None:
        self.leaves: list[bytes] = [self._check_leaf(leaf) for leaf in leaves]
        self.layers: list[list[bytes]] = []
        self.root: bytes | None = None
        self._rebuild()

    @staticmethod
    def _check_leaf(leaf: bytes) -> bytes:
        leaf = bytes(leaf)
        if len(leaf) != DIGEST_SIZE:
            raise ValueError(f"leaves must be {DIGEST_SIZE} bytes long")
        return leaf

    def _rebuild(self) -> None:
        current = list(self.leaves)
        self.layers = [current]
        while len(current) > 1:
            current = _next_layer(current)
            self.layers.append(current)
        self.root = current[0] if current else None

    def auth_path(self, index: int) -> list[bytes]:
        """Return the sibling nodes needed to climb from leaf ``index`` to the root."""
        if not 0 <= index < len(self.leaves):
            raise IndexError("leaf index out of range")
        path = []
        idx = index
        for layer in self.layers:
            sibling = idx ^ 1
            if sibling < len(layer):
                path.append(layer[sibling])
            idx //= 2
        return path

    def update_leaf(self, index: int, new_leaf: bytes) -> None:
        """Replace leaf ``index`` and recompute every layer above it."""
        self.leaves[index] = self._check_leaf(new_leaf)
        self._rebuild()