"""The derivation code contract shared by every catalog.

A derivation code is the type tag of a CESR primitive.  Each code is one
entry in the master code table and knows, from its identity alone, how
many characters the code occupies and how many base64 characters the
derived data occupies after it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class DerivationCode(ABC):
    """Length and rendering contract for a code catalog variant.

    Subclasses must supply `code_len`, `derivative_b64_len` and `to_str`;
    one that leaves any of them out cannot be instantiated.
    `prefix_b64_len` is always their sum and is not meant to be
    overridden.
    """

    __slots__ = ()

    @abstractmethod
    def code_len(self) -> int:
        """Characters taken by the code itself."""

    @abstractmethod
    def derivative_b64_len(self) -> int:
        """Base64 characters taken by the derived data."""

    def prefix_b64_len(self) -> int:
        return self.code_len() + self.derivative_b64_len()

    @abstractmethod
    def to_str(self) -> str:
        """Canonical code string."""

    def __str__(self) -> str:
        return self.to_str()
