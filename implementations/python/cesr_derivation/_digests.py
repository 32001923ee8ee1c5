"""Digest functions behind the self-addressing catalog.

Each function takes raw bytes (plus a key for the keyed BLAKE2 forms) and
returns a fixed-length digest.  A fresh hash object is built per call.

BLAKE2b-256 and BLAKE2s-256 use the native 32-byte output mode
(digest_size is part of the BLAKE2 parameter block), not a truncated
64-byte digest.  An empty key is the same as no key.
"""

from __future__ import annotations

import hashlib

import blake3


def blake3_256_digest(data: bytes) -> bytes:
    return blake3.blake3(data).digest()


def blake3_512_digest(data: bytes) -> bytes:
    # BLAKE3 is an XOF; the first 32 bytes match blake3_256_digest.
    return blake3.blake3(data).digest(length=64)


def blake2b_256_digest(data: bytes, key: bytes = b"") -> bytes:
    return hashlib.blake2b(data, digest_size=32, key=key).digest()


def blake2s_256_digest(data: bytes, key: bytes = b"") -> bytes:
    return hashlib.blake2s(data, digest_size=32, key=key).digest()


def blake2b_512_digest(data: bytes) -> bytes:
    return hashlib.blake2b(data).digest()


def sha3_256_digest(data: bytes) -> bytes:
    return hashlib.sha3_256(data).digest()


def sha3_512_digest(data: bytes) -> bytes:
    return hashlib.sha3_512(data).digest()


def sha2_256_digest(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def sha2_512_digest(data: bytes) -> bytes:
    return hashlib.sha512(data).digest()
