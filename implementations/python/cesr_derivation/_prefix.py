"""Prefix values — a derivation code joined with its derived bytes.

Text form is the code string followed by the URL-safe base64 of the
derivative with padding stripped.  For a 32-byte digest that is 43
characters, for 64 bytes 86, for 114 bytes 152, which is exactly the
`derivative_b64_len` of the matching codes.
"""

from __future__ import annotations

import base64
import hmac
from dataclasses import dataclass
from typing import Union

from ._constants import B64URL_ALPHABET
from ._errors import DeserializeError
from ._self_addressing import SelfAddressing
from ._self_signing import SelfSigning

_B64URL_CHARS = frozenset(B64URL_ALPHABET)


def b64_encode(raw: bytes) -> str:
    """URL-safe base64 without padding."""
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def b64_decode(text: str) -> bytes:
    """Inverse of b64_encode.  Rejects padding and non-canonical tails."""
    bad = set(text) - _B64URL_CHARS
    if bad:
        raise DeserializeError(
            "invalid base64url character(s): {}".format("".join(sorted(bad))))
    if len(text) % 4 == 1:
        raise DeserializeError("invalid base64url length {}".format(len(text)))

    raw = base64.urlsafe_b64decode(text + "=" * (-len(text) % 4))
    # Leftover bits in the last character must be zero, otherwise two
    # different strings would decode to the same bytes.
    if b64_encode(raw) != text:
        raise DeserializeError("non-canonical base64url encoding")
    return raw


def _split(text: str, code: Union[SelfAddressing, SelfSigning]) -> str:
    """Return the derivative part of `text`, checking its length."""
    want = code.prefix_b64_len()
    if len(text) != want:
        raise DeserializeError(
            "{} prefix must be {} chars, got {}".format(code.to_str(), want, len(text)))
    return text[code.code_len():]


@dataclass(frozen=True)
class SelfAddressingPrefix:
    derivation: SelfAddressing
    digest: bytes

    def to_str(self) -> str:
        return self.derivation.to_str() + b64_encode(self.digest)

    def __str__(self) -> str:
        return self.to_str()

    def verify_binding(self, data: bytes) -> bool:
        """True if `data` digests to this prefix.

        A prefix parsed from text carries an empty key for keyed codes; put
        the real key back with `with_derivation` before checking.
        """
        return hmac.compare_digest(self.derivation.digest(data), self.digest)

    def with_derivation(self, derivation: SelfAddressing) -> "SelfAddressingPrefix":
        return SelfAddressingPrefix(derivation, self.digest)

    @classmethod
    def from_str(cls, text: str) -> "SelfAddressingPrefix":
        code = SelfAddressing.from_str(text)
        return cls(code, b64_decode(_split(text, code)))


@dataclass(frozen=True)
class SelfSigningPrefix:
    derivation: SelfSigning
    signature: bytes

    def to_str(self) -> str:
        return self.derivation.to_str() + b64_encode(self.signature)

    def __str__(self) -> str:
        return self.to_str()

    @classmethod
    def from_str(cls, text: str) -> "SelfSigningPrefix":
        code = SelfSigning.from_str(text)
        return cls(code, b64_decode(_split(text, code)))
