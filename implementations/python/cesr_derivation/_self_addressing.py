"""Self-addressing derivation codes — the digest catalog.

A self-addressing derivation is a digest of some data, used to build
content-addressed identifiers.  The catalog is a fixed table: algorithm
name → (code, sizes, digest function).  Two variants, BLAKE2b-256 and
BLAKE2s-256, are keyed and carry their key as part of their identity.

Parsing a keyed code cannot recover the key, since the key is never
written into the code.  `SelfAddressing.from_str("F")` returns BLAKE2b-256
with an empty key; a caller that used a real key must put it back with
`with_key()` before recomputing anything.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, NamedTuple, Optional, Tuple

from ._code import DerivationCode
from ._constants import (
    BLAKE2B_MAX_KEY,
    BLAKE2S_MAX_KEY,
    CODE_BLAKE2B_256,
    CODE_BLAKE2B_512,
    CODE_BLAKE2S_256,
    CODE_BLAKE3_256,
    CODE_BLAKE3_512,
    CODE_SHA2_256,
    CODE_SHA2_512,
    CODE_SHA3_256,
    CODE_SHA3_512,
    SELECTOR_TWO_CHAR,
    SIZE_256,
    SIZE_512,
)
from ._digests import (
    blake2b_256_digest,
    blake2b_512_digest,
    blake2s_256_digest,
    blake3_256_digest,
    blake3_512_digest,
    sha2_256_digest,
    sha2_512_digest,
    sha3_256_digest,
    sha3_512_digest,
)
from ._errors import (
    ERR_KEY,
    MSG_EMPTY,
    MSG_TRUNCATED,
    MSG_UNKNOWN_HASH,
    DerivationError,
    DeserializeError,
)

# ── Algorithm names ──────────────────────────────────────────

BLAKE3_256_NAME: str = "Blake3_256"
BLAKE2B_256_NAME: str = "Blake2B256"
BLAKE2S_256_NAME: str = "Blake2S256"
SHA3_256_NAME: str = "SHA3_256"
SHA2_256_NAME: str = "SHA2_256"
BLAKE3_512_NAME: str = "Blake3_512"
SHA3_512_NAME: str = "SHA3_512"
BLAKE2B_512_NAME: str = "Blake2B512"
SHA2_512_NAME: str = "SHA2_512"


class _Row(NamedTuple):
    code: str
    size: Tuple[int, int, int]   # (code_len, derivative_b64_len, raw bytes)
    digest: Callable[..., bytes]
    max_key: Optional[int]       # None for unkeyed algorithms


# Table order is master-code-table order.
_TABLE: Dict[str, _Row] = {
    BLAKE3_256_NAME: _Row(CODE_BLAKE3_256, SIZE_256, blake3_256_digest, None),
    BLAKE2B_256_NAME: _Row(CODE_BLAKE2B_256, SIZE_256, blake2b_256_digest, BLAKE2B_MAX_KEY),
    BLAKE2S_256_NAME: _Row(CODE_BLAKE2S_256, SIZE_256, blake2s_256_digest, BLAKE2S_MAX_KEY),
    SHA3_256_NAME: _Row(CODE_SHA3_256, SIZE_256, sha3_256_digest, None),
    SHA2_256_NAME: _Row(CODE_SHA2_256, SIZE_256, sha2_256_digest, None),
    BLAKE3_512_NAME: _Row(CODE_BLAKE3_512, SIZE_512, blake3_512_digest, None),
    SHA3_512_NAME: _Row(CODE_SHA3_512, SIZE_512, sha3_512_digest, None),
    BLAKE2B_512_NAME: _Row(CODE_BLAKE2B_512, SIZE_512, blake2b_512_digest, None),
    SHA2_512_NAME: _Row(CODE_SHA2_512, SIZE_512, sha2_512_digest, None),
}

_BY_CODE: Dict[str, str] = {row.code: name for name, row in _TABLE.items()}


@dataclass(frozen=True)
class SelfAddressing(DerivationCode):
    """One digest algorithm from the self-addressing catalog.

    `algorithm` is one of the *_NAME constants.  `key` is only allowed on
    the keyed BLAKE2 variants; for those it defaults to b"" (unkeyed
    BLAKE2 output).  The key is left out of repr().
    """

    algorithm: str
    key: Optional[bytes] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        row = _TABLE.get(self.algorithm)
        if row is None:
            raise ValueError("unknown self-addressing algorithm: {!r}".format(self.algorithm))

        if row.max_key is None:
            if self.key is not None:
                raise DerivationError(
                    ERR_KEY, "{} does not take a key".format(self.algorithm))
            return

        # Keyed: own a bytes copy of whatever was passed in.
        key = b"" if self.key is None else bytes(self.key)
        if len(key) > row.max_key:
            raise DerivationError(
                ERR_KEY,
                "{} key is {} bytes, limit is {}".format(self.algorithm, len(key), row.max_key))
        object.__setattr__(self, "key", key)

    # ── DerivationCode ───────────────────────────────────────

    def code_len(self) -> int:
        return _TABLE[self.algorithm].size[0]

    def derivative_b64_len(self) -> int:
        return _TABLE[self.algorithm].size[1]

    def to_str(self) -> str:
        return _TABLE[self.algorithm].code

    # ── Digesting ────────────────────────────────────────────

    @property
    def is_keyed(self) -> bool:
        return _TABLE[self.algorithm].max_key is not None

    @property
    def digest_len(self) -> int:
        """Raw digest size in bytes (32 or 64)."""
        return _TABLE[self.algorithm].size[2]

    def digest(self, data: bytes) -> bytes:
        row = _TABLE[self.algorithm]
        if row.max_key is not None:
            return row.digest(data, self.key)
        return row.digest(data)

    def derive(self, data: bytes) -> "SelfAddressingPrefix":
        """Digest `data` and pair the result with this code."""
        from ._prefix import SelfAddressingPrefix
        return SelfAddressingPrefix(self, self.digest(data))

    def with_key(self, key: bytes) -> "SelfAddressing":
        """Same keyed algorithm, different key."""
        return SelfAddressing(self.algorithm, key)

    # ── Parsing ──────────────────────────────────────────────

    @classmethod
    def from_str(cls, text: str) -> "SelfAddressing":
        """Recognise the digest code at the start of `text`.

        Only the leading code characters are read; anything after them is
        ignored, so a whole prefix string can be passed in.  Keyed codes
        come back with an empty key.
        """
        if not text:
            raise DeserializeError(MSG_EMPTY)

        if text[0] == SELECTOR_TWO_CHAR:
            if len(text) < 2:
                raise DeserializeError("{}: {!r}".format(MSG_TRUNCATED, text))
            code = text[:2]
        else:
            code = text[0]

        name = _BY_CODE.get(code)
        if name is None:
            raise DeserializeError("{}: {!r}".format(MSG_UNKNOWN_HASH, code))
        return cls(name)

    @classmethod
    def variants(cls) -> Tuple["SelfAddressing", ...]:
        """Every catalog entry, keyed ones with an empty key."""
        return tuple(cls(name) for name in _TABLE)


# ── Ready-made variants ──────────────────────────────────────

BLAKE3_256 = SelfAddressing(BLAKE3_256_NAME)
BLAKE2B_256 = SelfAddressing(BLAKE2B_256_NAME)
BLAKE2S_256 = SelfAddressing(BLAKE2S_256_NAME)
SHA3_256 = SelfAddressing(SHA3_256_NAME)
SHA2_256 = SelfAddressing(SHA2_256_NAME)
BLAKE3_512 = SelfAddressing(BLAKE3_512_NAME)
SHA3_512 = SelfAddressing(SHA3_512_NAME)
BLAKE2B_512 = SelfAddressing(BLAKE2B_512_NAME)
SHA2_512 = SelfAddressing(SHA2_512_NAME)
