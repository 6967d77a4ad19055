"""Dump the per-block intermediate values of a SHA-256 computation to YAML.

For every 512-bit block this records:
1. The 16 block words
2. The 64-word message schedule
3. The hash state before and after the block's compression

Usage:
    python trace_dump.py "message"
    python trace_dump.py -f path/to/file
    python trace_dump.py "abc" --output-dir data/traces

Output layout (one YAML document):
    message_hex, message_length_bytes, block_count, digest_hex,
    blocks: [{block_index, words, schedule, state_in, state_out}, ...]
"""

from __future__ import annotations

import argparse
import os
import sys
from typing import Dict, List, Sequence

import yaml

from engine import trace_digest


def _hex_words(words: Sequence[int]) -> List[str]:
    return [f"{w:08x}" for w in words]


def trace_to_dict(data: bytes) -> Dict:
    """Compute the digest of `data` and return the trace as plain YAML-ready data."""
    data = bytes(data)
    digest_hex, traces = trace_digest(data)

    result: Dict = {
        "message_hex": data.hex(),
        "message_length_bytes": len(data),
        "block_count": len(traces),
        "digest_hex": digest_hex,
        "blocks": [],
    }

    for trace in traces:
        result["blocks"].append(
            {
                "block_index": trace.block_index,
                "words": _hex_words(trace.words),
                "schedule": _hex_words(trace.schedule),
                "state_in": _hex_words(trace.state_in),
                "state_out": _hex_words(trace.state_out),
            }
        )

    return result


def write_trace(path: str, data: bytes) -> Dict:
    """Write the trace of `data` to `path` as YAML and return what was written."""
    result = trace_to_dict(data)
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(path, "w") as f:
        yaml.dump(result, f, default_flow_style=False, sort_keys=False)

    return result


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Dump the per-block SHA-256 intermediate values to YAML"
    )
    parser.add_argument(
        "message",
        nargs="?",
        help="Message to hash (UTF-8 encoded)",
    )
    parser.add_argument(
        "-f",
        "--file",
        help="Hash the raw bytes of this file instead of a message argument",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default="data/traces",
        help="Output directory (default: data/traces)",
    )
    parser.add_argument(
        "--name",
        type=str,
        default="trace",
        help="Output file name without extension (default: trace)",
    )
    args = parser.parse_args(argv)

    if (args.message is None) == (args.file is None):
        sys.stderr.write("ERROR: give exactly one of a message or -f FILE\n")
        return 1

    if args.file is not None:
        try:
            with open(args.file, "rb") as f:
                data = f.read()
        except OSError as e:
            sys.stderr.write(f"Error reading file '{args.file}': {e}\n")
            return 1
    else:
        data = args.message.encode("utf-8")

    output_path = os.path.join(args.output_dir, f"{args.name}.yaml")
    try:
        result = write_trace(output_path, data)
    except OSError as e:
        sys.stderr.write(f"Error writing trace '{output_path}': {e}\n")
        return 1

    print(f"Message length: {result['message_length_bytes']} bytes")
    print(f"Blocks: {result['block_count']}")
    print(f"Digest: {result['digest_hex']}")
    print(f"Trace written to {output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
