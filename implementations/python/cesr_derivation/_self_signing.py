"""Self-signing derivation codes — the signature catalog.

A self-signing derivation's derivative is a signature.  This layer does
not sign or verify anything; it tags signature bytes produced elsewhere
with the code of the scheme that produced them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, NamedTuple, Tuple

from ._code import DerivationCode
from ._constants import (
    CODE_ECDSA_SECP256K1_SHA256,
    CODE_ED25519_SHA512,
    CODE_ED448,
    SELECTOR_FOUR_CHAR,
    SELECTOR_TWO_CHAR,
    SIZE_SIG_64,
    SIZE_SIG_114,
)
from ._errors import (
    MSG_EMPTY,
    MSG_TRUNCATED,
    MSG_UNKNOWN_MASTER,
    MSG_UNKNOWN_SIGNATURE,
    DeserializeError,
)

ED25519_SHA512_NAME: str = "Ed25519Sha512"
ECDSA_SECP256K1_SHA256_NAME: str = "ECDSAsecp256k1Sha256"
ED448_NAME: str = "Ed448"


class _Row(NamedTuple):
    code: str
    size: Tuple[int, int, int]   # (code_len, derivative_b64_len, raw bytes)


_TABLE: Dict[str, _Row] = {
    ED25519_SHA512_NAME: _Row(CODE_ED25519_SHA512, SIZE_SIG_64),
    ECDSA_SECP256K1_SHA256_NAME: _Row(CODE_ECDSA_SECP256K1_SHA256, SIZE_SIG_64),
    ED448_NAME: _Row(CODE_ED448, SIZE_SIG_114),
}

_BY_CODE: Dict[str, str] = {row.code: name for name, row in _TABLE.items()}

# Code length implied by each selector character.
_SELECTOR_LEN: Dict[str, int] = {
    SELECTOR_TWO_CHAR: 2,
    SELECTOR_FOUR_CHAR: 4,
}


@dataclass(frozen=True)
class SelfSigning(DerivationCode):
    """One signature scheme from the self-signing catalog."""

    algorithm: str

    def __post_init__(self) -> None:
        if self.algorithm not in _TABLE:
            raise ValueError("unknown self-signing algorithm: {!r}".format(self.algorithm))

    def code_len(self) -> int:
        return _TABLE[self.algorithm].size[0]

    def derivative_b64_len(self) -> int:
        return _TABLE[self.algorithm].size[1]

    def to_str(self) -> str:
        return _TABLE[self.algorithm].code

    @property
    def signature_len(self) -> int:
        """Raw signature size in bytes (64 or 114)."""
        return _TABLE[self.algorithm].size[2]

    def derive(self, signature: bytes) -> "SelfSigningPrefix":
        """Pair `signature` with this code.

        The length is not checked here.  Supplying bytes that match
        `signature_len` is up to the caller.
        """
        from ._prefix import SelfSigningPrefix
        return SelfSigningPrefix(self, bytes(signature))

    @classmethod
    def from_str(cls, text: str) -> "SelfSigning":
        """Recognise the signature code at the start of `text`."""
        if not text:
            raise DeserializeError(MSG_EMPTY)

        want = _SELECTOR_LEN.get(text[0])
        if want is None:
            raise DeserializeError("{}: {!r}".format(MSG_UNKNOWN_MASTER, text))
        if len(text) < want:
            raise DeserializeError("{}: {!r}".format(MSG_TRUNCATED, text))

        name = _BY_CODE.get(text[:want])
        if name is None:
            raise DeserializeError("{}: {!r}".format(MSG_UNKNOWN_SIGNATURE, text[:want]))
        return cls(name)

    @classmethod
    def variants(cls) -> Tuple["SelfSigning", ...]:
        return tuple(cls(name) for name in _TABLE)


ED25519_SHA512 = SelfSigning(ED25519_SHA512_NAME)
ECDSA_SECP256K1_SHA256 = SelfSigning(ECDSA_SECP256K1_SHA256_NAME)
ED448 = SelfSigning(ED448_NAME)
