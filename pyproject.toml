[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hashsig"
version = "0.1.0"
description = "Hash-based signature building blocks on SHA-256: HMAC-DRBG, Winternitz one-time signatures, Merkle trees and XMSS-style many-time keys"
requires-python = ">=3.10"
dependencies = []
keywords = ["cryptography", "xmss", "wots", "merkle", "hmac-drbg", "hash-based signatures", "sha256"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hashsig"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
