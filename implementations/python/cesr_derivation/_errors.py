"""Error codes and exception classes for derivation code handling.

There is one failure kind on the parse side, the deserialize error.  It
is raised synchronously and carries a message that says which case hit:
empty input, an unknown code, or a code cut short.  Digesting and
signature tagging have no error path.
"""

from __future__ import annotations

# ── Error codes ──────────────────────────────────────────────
# Grep-friendly names, compared by the conformance suite.

ERR_DESERIALIZE: str = "ERR_DESERIALIZE"  # text could not be mapped to a code or prefix
ERR_KEY: str = "ERR_KEY"                  # bad key for a keyed digest variant

# Message stems.  Tests and callers match on these to tell the cases apart.
MSG_EMPTY: str = "empty prefix"
MSG_UNKNOWN_HASH: str = "unknown hash code"
MSG_UNKNOWN_SIGNATURE: str = "unknown signature type code"
MSG_UNKNOWN_MASTER: str = "unknown master code"
MSG_TRUNCATED: str = "truncated code"


class DerivationError(Exception):
    """Base exception for the package.

    The `.code` attribute is one of the ERR_* strings above and is what
    conformance tests compare against.
    """

    def __init__(self, code: str, msg: str = "") -> None:
        super().__init__(msg or code)
        self.code = code


class DeserializeError(DerivationError):
    """Text could not be turned into a derivation code or prefix."""

    def __init__(self, msg: str) -> None:
        super().__init__(ERR_DESERIALIZE, msg)
