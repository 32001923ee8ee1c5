#!/usr/bin/env python3
"""
verify_bundle.py — verifier for the derivation code conformance bundle.

Checks:
1) manifest.sha256 integrity (sha256(file-bytes) for each listed artifact)
2) bundle_anchor_sha256 = sha256(manifest.sha256 bytes)
3) vectors and expected values pair up one-to-one and share a table revision
4) Optional: re-run the Python implementation against the vectors

Exit code 0 on success; non-zero on failure.
"""
from __future__ import annotations
import argparse, hashlib, json, os, subprocess, sys
from pathlib import Path

def sha256_file(p: Path) -> str:
    return hashlib.sha256(p.read_bytes()).hexdigest()

def die(msg: str) -> None:
    print("FAIL:", msg, file=sys.stderr)
    sys.exit(2)

def parse_manifest(manifest_path: Path):
    lines = manifest_path.read_text(encoding="utf-8").splitlines()
    entries = []
    for ln in lines:
        ln = ln.strip()
        if not ln or ln.startswith("#"):
            continue
        parts = ln.split()
        if len(parts) != 2:
            die(f"bad manifest line: {ln!r}")
        h, rel = parts
        if len(h) != 64:
            die(f"bad sha256 in manifest line: {ln!r}")
        entries.append((h.lower(), rel))
    return entries

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--dir", default=os.path.dirname(os.path.abspath(__file__)),
                    help="bundle directory")
    ap.add_argument("--rerun", action="store_true", help="re-run the Python conformance suite")
    args = ap.parse_args()

    root = Path(args.dir).resolve()
    manifest = root / "manifest.sha256"
    if not manifest.exists():
        die("manifest.sha256 missing")

    entries = parse_manifest(manifest)

    # 1) manifest integrity
    for expected_hash, rel in entries:
        p = root / rel
        if not p.exists():
            die(f"manifest references missing file: {rel}")
        got = sha256_file(p)
        if got != expected_hash:
            die(f"hash mismatch for {rel}: got {got} expected {expected_hash}")

    # 2) anchor hash (manifest does not list itself)
    anchor = hashlib.sha256(manifest.read_bytes()).hexdigest()
    print("bundle_anchor_sha256 =", anchor)

    # 3) vectors <-> expected pairing
    vec_doc = json.loads((root / "derivation_vectors.json").read_text(encoding="utf-8"))
    exp_doc = json.loads((root / "derivation_expected.json").read_text(encoding="utf-8"))
    if vec_doc.get("table_revision") != exp_doc.get("table_revision"):
        die("table_revision differs between vectors and expected")

    ids = [v["test_id"] for v in vec_doc["vectors"]]
    if len(ids) != len(set(ids)):
        die("duplicate test_id in vectors")
    missing = set(ids) - set(exp_doc["expected"])
    extra = set(exp_doc["expected"]) - set(ids)
    if missing:
        die(f"vectors without expected values: {sorted(missing)}")
    if extra:
        die(f"expected values without vectors: {sorted(extra)}")
    print(f"vectors = {len(ids)}")

    # 4) Optional rerun
    if args.rerun:
        runner = root.parent / "implementations" / "python" / "tests" / "test_conformance.py"
        cmd = [sys.executable, str(runner), "--vectors-dir", str(root)]
        subprocess.check_call(cmd)

    print("OK")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
