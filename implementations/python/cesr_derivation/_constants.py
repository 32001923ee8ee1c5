"""CESR derivation code constants — code strings and length parameters.

Source: the CESR master code table.  Every number here is fixed by the
table and must never be computed from a digest's output size.
"""

from __future__ import annotations

from typing import Tuple

__table_revision__ = "ietf-cesr draft-ssmith-cesr"

# ── Self-addressing (digest) codes ───────────────────────────
# One-character codes are the 256-bit class, "0"-prefixed two-character
# codes the 512-bit class.
CODE_BLAKE3_256: str = "E"
CODE_BLAKE2B_256: str = "F"
CODE_BLAKE2S_256: str = "G"
CODE_SHA3_256: str = "H"
CODE_SHA2_256: str = "I"
CODE_BLAKE3_512: str = "0D"
CODE_SHA3_512: str = "0E"
CODE_BLAKE2B_512: str = "0F"
CODE_SHA2_512: str = "0G"

# ── Self-signing (signature) codes ───────────────────────────
CODE_ED25519_SHA512: str = "0B"
CODE_ECDSA_SECP256K1_SHA256: str = "0C"
CODE_ED448: str = "1AAE"

# ── Selector characters ──────────────────────────────────────
# The first character of a code tells how long the code is.
SELECTOR_TWO_CHAR: str = "0"
SELECTOR_FOUR_CHAR: str = "1"

# ── Size classes: (code_len, derivative_b64_len, raw byte length) ──
SIZE_256: Tuple[int, int, int] = (1, 43, 32)
SIZE_512: Tuple[int, int, int] = (2, 86, 64)
SIZE_SIG_64: Tuple[int, int, int] = (2, 86, 64)
SIZE_SIG_114: Tuple[int, int, int] = (4, 152, 114)

# ── BLAKE2 key limits ────────────────────────────────────────
# hashlib enforces these too, but we check at construction so a bad key
# never makes it into a variant.
BLAKE2B_MAX_KEY: int = 64
BLAKE2S_MAX_KEY: int = 32

# Base64url alphabet, used for validating derivative characters.
B64URL_ALPHABET: str = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
)
