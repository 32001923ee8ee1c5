"""cesr-derivation command-line interface.

Usage:
    echo -n 'data' | cesr-derivation digest --code E
    cesr-derivation digest --code F --key-hex 00112233 --input file.bin
    cesr-derivation parse EsLkveIFUPvt38xhtgYYJRCCpAGO7WjjHVR37Pawv67E
    cesr-derivation codes
    cesr-derivation version
"""

from __future__ import annotations

import argparse
import binascii
import sys
from typing import List, Optional

from . import (
    DerivationError,
    DeserializeError,
    SelfAddressing,
    SelfSigning,
    __version__,
    parse_code,
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cesr-derivation",
        description="CESR derivation codes for digests and signatures",
    )
    sub = parser.add_subparsers(dest="command")

    # ── digest ──
    dig_p = sub.add_parser("digest", help="Print the self-addressing prefix of some bytes")
    dig_p.add_argument("--code", "-c", required=True, metavar="CODE",
                       help="Digest code, e.g. E (BLAKE3-256) or 0G (SHA2-512)")
    dig_p.add_argument("--key-hex", metavar="HEX",
                       help="Key for the keyed BLAKE2 codes F and G")
    dig_p.add_argument("--input", "-i", metavar="FILE",
                       help="Read bytes from FILE instead of stdin")

    # ── parse ──
    parse_p = sub.add_parser("parse", help="Describe the code at the start of TEXT")
    parse_p.add_argument("text", metavar="TEXT")

    # ── codes ──
    sub.add_parser("codes", help="Print the supported code table")

    # ── version ──
    sub.add_parser("version", help="Print version and exit")

    return parser


def _read_input(filepath: Optional[str]) -> bytes:
    """Read raw bytes from a file or stdin."""
    if filepath:
        with open(filepath, "rb") as f:
            return f.read()
    if sys.stdin.isatty():
        print("cesr-derivation: reading from stdin (Ctrl-D to end)...", file=sys.stderr)
    return sys.stdin.buffer.read()


def _cmd_digest(args: argparse.Namespace) -> None:
    code = SelfAddressing.from_str(args.code)
    if code.to_str() != args.code:
        raise DeserializeError(
            "trailing characters after code {}: {!r}".format(code.to_str(), args.code))
    if args.key_hex is not None:
        code = code.with_key(binascii.unhexlify(args.key_hex))
    print(code.derive(_read_input(args.input)).to_str())


def _cmd_parse(args: argparse.Namespace) -> None:
    code = parse_code(args.text)
    print("algorithm:          {}".format(code.algorithm))
    print("code:               {}".format(code.to_str()))
    print("code_len:           {}".format(code.code_len()))
    print("derivative_b64_len: {}".format(code.derivative_b64_len()))
    print("prefix_b64_len:     {}".format(code.prefix_b64_len()))


def _cmd_codes() -> None:
    print("{:<6}{:<22}{:>6}{:>8}".format("CODE", "ALGORITHM", "LEN", "B64"))
    for code in SelfAddressing.variants() + SelfSigning.variants():
        print("{:<6}{:<22}{:>6}{:>8}".format(
            code.to_str(), code.algorithm, code.code_len(), code.derivative_b64_len()))


def main(argv: Optional[List[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "version":
        print(f"cesr-derivation {__version__}")
        return

    try:
        if args.command == "digest":
            _cmd_digest(args)
        elif args.command == "parse":
            _cmd_parse(args)
        elif args.command == "codes":
            _cmd_codes()
    except DerivationError as e:
        print(f"cesr-derivation: error [{e.code}]: {e}", file=sys.stderr)
        sys.exit(2)
    except binascii.Error as e:
        print(f"cesr-derivation: bad --key-hex: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
