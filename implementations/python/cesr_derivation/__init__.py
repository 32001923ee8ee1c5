"""cesr_derivation — CESR derivation codes for digests and signatures.

A derivation code is the short prefix that says which primitive produced
the base64 text after it, and how long that text is.

Quick start:
    >>> from cesr_derivation import BLAKE3_256
    >>> BLAKE3_256.derive(b"abcdefghijklmnopqrstuvwxyz0123456789").to_str()
    'EsLkveIFUPvt38xhtgYYJRCCpAGO7WjjHVR37Pawv67E'

Going the other way, the code tells how much of a string belongs to it:
    >>> from cesr_derivation import SelfAddressing
    >>> code = SelfAddressing.from_str("EsLkveIFUPvt38xhtgYYJRCCpAGO7WjjHVR37Pawv67E")
    >>> code.code_len(), code.derivative_b64_len()
    (1, 43)
"""

from __future__ import annotations

from typing import Union

from ._code import DerivationCode
from ._errors import (
    ERR_DESERIALIZE,
    ERR_KEY,
    MSG_EMPTY,
    DerivationError,
    DeserializeError,
)
from ._prefix import (
    SelfAddressingPrefix,
    SelfSigningPrefix,
    b64_decode,
    b64_encode,
)
from ._self_addressing import (
    BLAKE2B_256,
    BLAKE2B_512,
    BLAKE2S_256,
    BLAKE3_256,
    BLAKE3_512,
    SHA2_256,
    SHA2_512,
    SHA3_256,
    SHA3_512,
    SelfAddressing,
)
from ._self_signing import (
    ECDSA_SECP256K1_SHA256,
    ED448,
    ED25519_SHA512,
    SelfSigning,
)

__version__ = "0.1.0"

__all__ = [
    # Code types
    "DerivationCode",
    "SelfAddressing",
    "SelfSigning",
    # Prefix values
    "SelfAddressingPrefix",
    "SelfSigningPrefix",
    # Self-addressing variants
    "BLAKE3_256",
    "BLAKE2B_256",
    "BLAKE2S_256",
    "SHA3_256",
    "SHA2_256",
    "BLAKE3_512",
    "SHA3_512",
    "BLAKE2B_512",
    "SHA2_512",
    # Self-signing variants
    "ED25519_SHA512",
    "ECDSA_SECP256K1_SHA256",
    "ED448",
    # Functions
    "parse_code",
    "parse_prefix",
    "b64_encode",
    "b64_decode",
    # Exceptions
    "DerivationError",
    "DeserializeError",
    # Error codes
    "ERR_DESERIALIZE",
    "ERR_KEY",
]


_DIGEST_CODES = frozenset(v.to_str() for v in SelfAddressing.variants())


def parse_code(text: str) -> Union[SelfAddressing, SelfSigning]:
    """Recognise a code from either catalog at the start of `text`.

    The catalogs share the "0" selector, so the second character decides:
    "0B"/"0C" are signatures, "0D".."0G" digests.  Anything that is not a
    digest code is handed to the signature catalog, whose error names the
    unrecognised master code.
    """
    if not text:
        raise DeserializeError(MSG_EMPTY)
    if text[:1] in _DIGEST_CODES or text[:2] in _DIGEST_CODES:
        return SelfAddressing.from_str(text)
    return SelfSigning.from_str(text)


def parse_prefix(text: str) -> Union[SelfAddressingPrefix, SelfSigningPrefix]:
    """Parse a complete prefix string from either catalog."""
    code = parse_code(text)
    if isinstance(code, SelfAddressing):
        return SelfAddressingPrefix.from_str(text)
    return SelfSigningPrefix.from_str(text)

