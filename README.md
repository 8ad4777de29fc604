# hashsig

Building blocks for hash-based signatures, all built on SHA-256 from the
standard library. The package has no third-party dependencies.

## Modules

- `hashsig.hashing`
  - `digest(data)` returns the 32-byte SHA-256 digest.
  - `digest_hex(data)` returns the same digest as lower-case hex.
- `hashsig.drbg`
  - `HmacDrbg(entropy, personalization=None)` is a deterministic random bit
    generator on HMAC-SHA-256.
  - `generate(num_bytes)` returns that many bytes. It raises `ValueError` for a
    negative count or for more than 7500 bits (937 bytes) in one call.
  - `reseed(entropy)` mixes in fresh entropy.
  - The read-only `reseed_counter` property counts the requests made since the
    last seed.
- `hashsig.keygen`
  - `generate_key(size)` returns `size` bytes from the operating system's
    random source through `secrets`.
  - `generate_encoded_key(size)` returns such a key as padded base64 text.
- `hashsig.merkle`
  - `MerkleTree(leaves)` takes 32-byte leaves and keeps every layer in
    `layers`, with the top node in `root`. A pair of nodes is hashed together.
    An odd node at the end of a layer is hashed on its own.
  - `auth_path(index)` returns the sibling nodes from the leaf up to the root.
    It raises `IndexError` for an index out of range.
  - `update_leaf(index, new_leaf)` replaces a leaf and rebuilds the tree.
- `hashsig.wots`
  - `Wots(seed, w)` is a Winternitz-style one-time key pair. It has `w` hash
    chains, each `2**w` steps long, held in `private_key` and `public_key`.
  - `sign(message)` takes a message of exactly `w` bytes. Each byte is the
    number of chain steps to take. A wrong length raises `ValueError`.
  - `verify(message, signature)` completes each chain and compares the result
    with the public key. It returns `True` or `False`. A wrong length raises
    `ValueError`.
- `hashsig.xmss`
  - `Xmss(signatures)` is a stateful key that can make a fixed number of
    signatures. It draws a 48-byte seed from the OS and derives
    `private_seed` and `public_seed` from it with `HmacDrbg`.
  - It holds `signatures` one-time keys with `w = 16` in `wots_keys`.
  - The public key parts of those keys are the leaves of `merkle_tree`.
  - `sign(message)` uses the next unused one-time key. It returns an
    `XmssSignature(index, signature, auth_path)`.
  - `index` and `remaining` track how many keys have been used and how many
    are left. Once they are all used, `sign` raises `RuntimeError`.
  - `verify(message, index, signature, auth_path)` first checks the one-time
    signature. It then hashes the joined signature and climbs the auth path,
    and compares the result with the tree's root. It returns `False` for an
    index out of range.
- `hashsig.api`
  - `create_xmss(signatures)` is a shortcut for `Xmss(signatures)`.
  - `add(left, right)` returns the sum of two integers.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from hashsig.api import create_xmss

key = create_xmss(4)

# One byte per WOTS chain; the key uses 16 chains.
message = bytes(range(16))
sig = key.sign(message)
print(sig.index, len(sig.signature), len(sig.auth_path))
print(key.remaining)  # 3
```

Making a key pair takes some time. Each of its 16 chains is 65,536 SHA-256
steps long.

## Deterministic randomness

```python
from hashsig.drbg import HmacDrbg

drbg = HmacDrbg(b"some entropy", None)
first = drbg.generate(32)
drbg.reseed(b"more entropy")
second = drbg.generate(32)
```

The same entropy and personalization always give the same output.

## What it does not do

- There is no command-line tool.
- Keys and signatures are not serialized or stored. An `Xmss` key and its
  state of used one-time keys live only in memory.
- There is no separate public-key object. Verification is a method of the key
  pair that made the signature.