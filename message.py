"""Message preparation for SHA-256: padding, framing and the message schedule.

- `pad_message(data) -> bytes`: the padded byte stream (multiple of 64 bytes).
- `frame(data) -> list of blocks`: the padded stream as 16-word blocks.
- `schedule(block) -> list of 64 words`: the per-block message schedule.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from compress import MASK32, _rotr


BLOCK_BYTES = 64
BLOCK_WORDS = 16
SCHEDULE_WORDS = 64

Block = Tuple[int, ...]


def _small_sigma0(x: int) -> int:
    """SHA-256 function σ0 used in the message schedule."""
    return _rotr(x, 7) ^ _rotr(x, 18) ^ (x >> 3)


def _small_sigma1(x: int) -> int:
    """SHA-256 function σ1 used in the message schedule."""
    return _rotr(x, 17) ^ _rotr(x, 19) ^ (x >> 10)


def _chunks(data: bytes, size: int) -> Iterable[bytes]:
    """Yield successive `size`-byte chunks from `data`."""
    for i in range(0, len(data), size):
        yield data[i : i + size]


def block_count(length_bytes: int) -> int:
    """Number of 512-bit blocks a message of `length_bytes` bytes pads to.

    Equal to ceil((bitlen + 1 + 64) / 512): the message, the '1' bit and
    the 64-bit length field must all fit.
    """
    if length_bytes < 0:
        raise ValueError(f"Message length must be non-negative, got {length_bytes}")
    return (length_bytes * 8 + 1 + 64 + 511) // 512


def pad_message(data) -> bytes:
    """Pad `data` according to the SHA-256 padding rule.

    Accepts ``bytes``, ``bytearray``, ``memoryview`` or an iterable of byte
    values (0-255). The result length is a multiple of 64 bytes (512 bits).
    """
    message = bytes(data)
    ml_bits = len(message) * 8

    # Append the '1' bit (0x80), then zero bytes so that length ≡ 56 mod 64.
    padded = bytearray(message)
    padded.append(0x80)
    padded.extend(b"\x00" * ((56 - len(padded)) % 64))

    # 64-bit big-endian length in bits; the high word stays zero below 2**32 bits.
    padded.extend(ml_bits.to_bytes(8, byteorder="big"))
    return bytes(padded)


def bytes_to_words(chunk: bytes) -> Block:
    """Convert a 64-byte chunk into 16 big-endian 32-bit words."""
    if len(chunk) != BLOCK_BYTES:
        raise ValueError(f"Expected {BLOCK_BYTES}-byte block, got {len(chunk)}")
    return tuple(
        int.from_bytes(chunk[4 * i : 4 * (i + 1)], byteorder="big")
        for i in range(BLOCK_WORDS)
    )


def frame(data) -> List[Block]:
    """Turn a raw message into its list of padded 512-bit blocks.

    Every block is a tuple of 16 words. The final two words of the last
    block carry the message length in bits (high word, low word). A message
    with no room left for the '1' bit and the length field spills into one
    extra block of pure padding.
    """
    return [bytes_to_words(chunk) for chunk in _chunks(pad_message(data), BLOCK_BYTES)]


def schedule(block: Block) -> List[int]:
    """Given a 16-word block, build the 64-word message schedule w[0..63]."""
    if len(block) != BLOCK_WORDS:
        raise ValueError(f"Expected {BLOCK_WORDS}-word block, got {len(block)}")

    w: List[int] = list(block) + [0] * (SCHEDULE_WORDS - BLOCK_WORDS)

    # Extend to 64 words using the SHA-256 recurrence.
    for i in range(BLOCK_WORDS, SCHEDULE_WORDS):
        s0 = _small_sigma0(w[i - 15])
        s1 = _small_sigma1(w[i - 2])
        w[i] = (w[i - 16] + s0 + w[i - 7] + s1) & MASK32

    return w
