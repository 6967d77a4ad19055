"""Command-line front end for the SHA-256 digest engine in `engine.py`.

Usage:
    python sha256_cli.py                   # interactive menu
    python sha256_cli.py "message"         # hash the UTF-8 encoding of "message"
    python sha256_cli.py -f path/to/file   # hash the normalized file contents

File contents are normalized before hashing so that a file holding a line of
text hashes the same as typing that line: every carriage return is dropped
and one trailing newline is removed. `--raw` hashes the file bytes as-is.
"""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional

from engine import digest
from trace_dump import write_trace


MENU = "Choose an option:\n1. Hash a string\n2. Hash a file\n3. Exit"


def normalize_text(data: bytes) -> bytes:
    """Drop every ``\\r`` byte, then a single trailing ``\\n`` if present."""
    normalized = bytes(data).replace(b"\r", b"")
    if normalized.endswith(b"\n"):
        normalized = normalized[:-1]
    return normalized


def truncate_at_nul(data: bytes) -> bytes:
    """Return everything before the first NUL byte (C-string semantics)."""
    data = bytes(data)
    end = data.find(b"\x00")
    return data if end < 0 else data[:end]


def read_file_for_hashing(path: str, raw: bool = False) -> bytes:
    """Read `path` fully and apply line-ending normalization unless `raw`.

    Raises OSError if the file cannot be read.
    """
    with open(path, "rb") as f:
        data = f.read()
    return data if raw else normalize_text(data)


def hash_line(data: bytes, nul_compat: bool = False) -> str:
    """Format the result line printed for a hashed input."""
    if nul_compat:
        data = truncate_at_nul(data)
    return f"Hash: {digest(data)}"


def run_menu(
    read_line: Optional[Callable[[str], str]] = None,
    nul_compat: bool = False,
) -> int:
    """Interactive loop: hash strings or files until the user picks Exit.

    `read_line` is called with a prompt and returns one line of input; it
    may raise EOFError, which ends the loop like choosing Exit.
    """
    if read_line is None:
        read_line = input

    while True:
        print(MENU)
        try:
            option = read_line("").strip()
        except EOFError:
            return 0

        if option == "1":
            try:
                text = read_line("Enter string to hash: ")
            except EOFError:
                return 0
            print(hash_line(text.encode("utf-8"), nul_compat))
        elif option == "2":
            try:
                path = read_line("Enter file path: ").strip()
            except EOFError:
                return 0
            try:
                data = read_file_for_hashing(path)
            except OSError:
                print(f"Error: Cannot open file {path}")
                continue
            print(hash_line(data, nul_compat))
        elif option == "3":
            print("Exiting...")
            return 0
        else:
            print("Invalid option. Please try again.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compute the SHA-256 digest of a string or a file"
    )
    parser.add_argument(
        "message",
        nargs="?",
        help="Message to hash (UTF-8 encoded). Omit for the interactive menu.",
    )
    parser.add_argument(
        "-f",
        "--file",
        help="Hash the contents of this file",
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Hash file bytes without line-ending normalization",
    )
    parser.add_argument(
        "--nul-compat",
        action="store_true",
        help="Stop at the first NUL byte, like C-string based tools do",
    )
    parser.add_argument(
        "--trace",
        metavar="PATH",
        help="Also write a per-block YAML trace of the computation to PATH",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    if args.message is not None and args.file is not None:
        sys.stderr.write("Error: give either a message or -f FILE, not both\n")
        return 1

    if args.raw and args.file is None:
        sys.stderr.write("Error: --raw only applies to -f FILE\n")
        return 1

    if args.message is None and args.file is None:
        if args.trace:
            sys.stderr.write("Error: --trace needs a message or -f FILE\n")
            return 1
        return run_menu(nul_compat=args.nul_compat)

    if args.file is not None:
        try:
            data = read_file_for_hashing(args.file, raw=args.raw)
        except OSError as e:
            sys.stderr.write(f"Error reading file '{args.file}': {e}\n")
            return 1
    else:
        data = args.message.encode("utf-8")

    if args.nul_compat:
        data = truncate_at_nul(data)

    if args.trace:
        try:
            write_trace(args.trace, data)
        except OSError as e:
            sys.stderr.write(f"Error writing trace '{args.trace}': {e}\n")
            return 1

    print(hash_line(data))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
