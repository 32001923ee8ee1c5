#!/usr/bin/env python3
# tools/invariants_runner.py
#
# Derivation code invariants (property tests over random inputs).
#
# This runner:
# - draws random byte strings and random keys
# - checks the length invariants of every code against real digests
# - checks code and prefix round trips through parsing
# - checks that random junk never parses to a code it does not start with
#
# Exit code:
#   0 -> all checks passed
#   1 -> invariant violation

import os, sys, random
from typing import Any, Dict

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, os.path.join(ROOT, "implementations", "python"))

from cesr_derivation import (
    BLAKE2B_256,
    DeserializeError,
    SelfAddressing,
    SelfAddressingPrefix,
    SelfSigning,
    SelfSigningPrefix,
    b64_encode,
    parse_code,
)
from cesr_derivation._constants import B64URL_ALPHABET, BLAKE2B_MAX_KEY, BLAKE2S_MAX_KEY

SEED = int(os.environ.get("CESR_SEED", "1337"))
TRIALS = int(os.environ.get("CESR_TRIALS", "2000"))
MAX_DATA = int(os.environ.get("CESR_GEN_MAX_DATA", "256"))
MAX_JUNK = int(os.environ.get("CESR_GEN_MAX_JUNK", "6"))

random.seed(SEED)

DIGESTS = SelfAddressing.variants()
SIGNATURES = SelfSigning.variants()

def rand_bytes(n: int) -> bytes:
    return bytes(random.getrandbits(8) for _ in range(n))

def rand_data() -> bytes:
    return rand_bytes(random.randint(0, MAX_DATA))

def rand_junk() -> str:
    return "".join(random.choice(B64URL_ALPHABET) for _ in range(random.randint(0, MAX_JUNK)))

def rand_digest_code() -> SelfAddressing:
    code = random.choice(DIGESTS)
    if code.is_keyed and random.random() < 0.5:
        limit = BLAKE2B_MAX_KEY if code.to_str() == BLAKE2B_256.to_str() else BLAKE2S_MAX_KEY
        code = code.with_key(rand_bytes(random.randint(1, limit)))
    return code

def fail(label: str, context: Dict[str, Any]) -> None:
    print("INVARIANT FAIL:", label)
    print("CTX:", repr(context)[:2000])
    raise SystemExit(1)

def main() -> int:
    for t in range(TRIALS):
        data = rand_data()

        # (1) Digest length agrees with the table
        code = rand_digest_code()
        digest = code.digest(data)
        if len(digest) != code.digest_len:
            fail("digest byte length", {"trial": t, "code": code})
        if len(b64_encode(digest)) != code.derivative_b64_len():
            fail("digest b64 length", {"trial": t, "code": code})

        # (2) Digest stability
        if code.digest(data) != digest:
            fail("digest stability", {"trial": t, "code": code})

        # (3) Prefix round trip; keyed codes come back with an empty key
        prefix = code.derive(data)
        text = prefix.to_str()
        if len(text) != code.prefix_b64_len():
            fail("prefix length", {"trial": t, "code": code, "text": text})
        parsed = SelfAddressingPrefix.from_str(text)
        if parsed.digest != digest or parsed.derivation.algorithm != code.algorithm:
            fail("prefix round trip", {"trial": t, "text": text})
        if code.is_keyed and parsed.derivation.key != b"":
            fail("keyed parse leaked a key", {"trial": t, "text": text})
        if not parsed.with_derivation(code).verify_binding(data):
            fail("verify binding", {"trial": t, "text": text})

        # (4) Signature tagging round trip
        sig_code = random.choice(SIGNATURES)
        sig = rand_bytes(sig_code.signature_len)
        sig_text = sig_code.derive(sig).to_str()
        if len(sig_text) != sig_code.prefix_b64_len():
            fail("signature prefix length", {"trial": t, "code": sig_code})
        if SelfSigningPrefix.from_str(sig_text).signature != sig:
            fail("signature round trip", {"trial": t, "text": sig_text})

        # (5) Junk either fails or parses to a code it starts with
        junk = rand_junk()
        try:
            got = parse_code(junk)
        except DeserializeError:
            continue
        if not junk.startswith(got.to_str()):
            fail("junk parsed to foreign code", {"trial": t, "junk": junk, "got": got})

    print(f"OK: invariants passed for TRIALS={TRIALS} seed={SEED}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
