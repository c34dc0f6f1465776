"""Command-line front end for the SHA-256 digest.

Usage:
    python sha256_cli.py -m "message"
    python sha256_cli.py -f path/to/file
    python sha256_cli.py -m "abc" --trace

With `-m`, the UTF-8 encoding of the message is hashed. With `-f`, the raw
bytes of the file are hashed. The hex digest is printed to stdout. `--trace`
prints a YAML document with the hash state after every block instead.
"""

from __future__ import annotations

import argparse
import sys
from typing import Dict, List, Optional

import yaml

from padding import MessageTooLargeError, block_count
from sha256 import digest, digest_with_trace


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compute the SHA-256 digest of a message or file"
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "-m",
        "--message",
        type=str,
        help="Message to hash (hashed as its UTF-8 bytes)",
    )
    source.add_argument(
        "-f",
        "--file",
        type=str,
        help="Path to a file whose raw bytes are hashed",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Print the hash state after every block as YAML",
    )
    return parser


def trace_document(data: bytes) -> Dict:
    """Build the YAML-ready record of a traced digest computation."""
    digest_hex, states = digest_with_trace(data)
    blocks: List[Dict] = [
        {
            "block_index": block_idx,
            "state": [f"{word:08x}" for word in state],
        }
        for block_idx, state in enumerate(states)
    ]
    return {
        "message_length_bytes": len(data),
        "block_count": block_count(len(data)),
        "digest_hex": digest_hex,
        "blocks": blocks,
    }


def _read_input(args: argparse.Namespace) -> bytes:
    if args.file is not None:
        with open(args.file, "rb") as f:
            return f.read()
    # Undecodable argv bytes arrive as lone surrogates; hash them as the raw bytes.
    return args.message.encode("utf-8", "surrogateescape")


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)

    try:
        data = _read_input(args)
    except OSError as e:
        sys.stderr.write(f"ERROR: cannot read file '{args.file}': {e}\n")
        return 1

    try:
        if args.trace:
            sys.stdout.write(
                yaml.safe_dump(trace_document(data), default_flow_style=False, sort_keys=False)
            )
        else:
            print(digest(data))
    except MessageTooLargeError as e:
        sys.stderr.write(f"ERROR: {e}\n")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
