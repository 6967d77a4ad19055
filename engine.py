"""SHA-256 digest engine.

This module ties the stages together:

- `digest(data) -> str`: lowercase hex digest of `data` (the main entry point).
- `sha256(data) -> bytes`: the raw 32-byte digest.
- `trace_digest(data)`: the hex digest plus every block's intermediate values.

High-level flow, one block at a time and strictly in order:

    state = H0
    for block in frame(data):
        state = compress(state, schedule(block))
    return format_digest(state)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from compress import HashState, compress
from message import Block, frame, schedule


# Initial hash values (first 32 bits of the fractional parts of the
# square roots of the first 8 primes 2..19), as per FIPS 180-4.
H0: HashState = (
    0x6A09E667,
    0xBB67AE85,
    0x3C6EF372,
    0xA54FF53A,
    0x510E527F,
    0x9B05688C,
    0x1F83D9AB,
    0x5BE0CD19,
)


@dataclass(frozen=True)
class BlockTrace:
    """Intermediate values recorded while compressing one block."""

    block_index: int
    words: Block
    schedule: Tuple[int, ...]
    state_in: HashState
    state_out: HashState


def format_digest(state: Sequence[int]) -> str:
    """Render an 8-word hash state as 64 lowercase hex characters."""
    if len(state) != 8:
        raise ValueError(f"Hash state must have 8 words, got {len(state)}")
    return "".join(f"{word:08x}" for word in state)


def digest_bytes(state: Sequence[int]) -> bytes:
    """Convert the final hash state into the 32-byte big-endian digest."""
    return b"".join(word.to_bytes(4, byteorder="big") for word in state)


def _run(data) -> HashState:
    state = H0
    for block in frame(data):
        state = compress(state, schedule(block))
    return state


def digest(data) -> str:
    """Compute the SHA-256 digest of `data` as a lowercase hex string."""
    return format_digest(_run(data))


def sha256(data) -> bytes:
    """Compute the raw 32-byte SHA-256 digest of `data`."""
    return digest_bytes(_run(data))


def trace_digest(data) -> Tuple[str, List[BlockTrace]]:
    """Compute the digest while recording each block's words, schedule and states.

    Returns:
        (digest_hex, traces) where traces[i] describes block i.
    """
    state = H0
    traces: List[BlockTrace] = []

    for block_index, block in enumerate(frame(data)):
        ws = schedule(block)
        state_out = compress(state, ws)
        traces.append(BlockTrace(block_index, block, tuple(ws), state, state_out))
        state = state_out

    return format_digest(state), traces
