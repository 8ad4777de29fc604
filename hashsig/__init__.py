"""Hash-based signature primitives on SHA-256: hashing, HMAC-DRBG, OS key generation, WOTS, Merkle trees and XMSS-style keys."""

__version__ = "0.1.0"
__all__ = ["api", "drbg", "hashing", "keygen", "merkle", "wots", "xmss"]