"""SHA-256 compression function.

Three layers, each built on the previous one:

- `compression`: a single round over the working registers `(a, ..., h)`.
- `compress64`: the 64-round loop for one block's message schedule.
- `compress`: `compress64` followed by the fold of the working registers
  back into the running hash state.

One round computes, with all additions modulo 2**32:

    S1    = (e >>> 6) ^ (e >>> 11) ^ (e >>> 25)
    ch    = (e & f) ^ (~e & g)
    temp1 = h + S1 + ch + k + w

    S0    = (a >>> 2) ^ (a >>> 13) ^ (a >>> 22)
    maj   = (a & b) ^ (a & c) ^ (b & c)
    temp2 = S0 + maj

    a' = temp1 + temp2
    e' = d + temp1
    b' = a, c' = b, d' = c, f' = e, g' = f, h' = g
"""

from __future__ import annotations

from typing import Sequence, Tuple


MASK32 = 0xFFFFFFFF

HashState = Tuple[int, int, int, int, int, int, int, int]

# First 32 bits of the fractional parts of the cube roots of the first
# 64 primes (FIPS 180-4, section 4.2.2).
K_VALUES: Tuple[int, ...] = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5,
    0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3,
    0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC,
    0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7,
    0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13,
    0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3,
    0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5,
    0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208,
    0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)


def _rotr(x: int, n: int) -> int:
    """Right-rotate a 32-bit word `x` by `n` bits."""
    x &= MASK32
    return ((x >> n) | (x << (32 - n))) & MASK32


def _ch(x: int, y: int, z: int) -> int:
    return (x & y) ^ (~x & z & MASK32)


def _maj(x: int, y: int, z: int) -> int:
    return (x & y) ^ (x & z) ^ (y & z)


def _big_sigma0(x: int) -> int:
    """SHA-256 function Σ0, applied to register `a` each round."""
    return _rotr(x, 2) ^ _rotr(x, 13) ^ _rotr(x, 22)


def _big_sigma1(x: int) -> int:
    """SHA-256 function Σ1, applied to register `e` each round."""
    return _rotr(x, 6) ^ _rotr(x, 11) ^ _rotr(x, 25)


def compression(
    a: int,
    b: int,
    c: int,
    d: int,
    e: int,
    f: int,
    g: int,
    h: int,
    w: int,
    k: int,
) -> HashState:
    """Perform one SHA-256 compression round.

    Parameters
    ----------
    a, b, c, d, e, f, g, h : int
        32-bit words representing the current working registers.
    w : int
        Message schedule word `w[j]` for this round.
    k : int
        Round constant `K_VALUES[j]` for this round.

    Returns
    -------
    (a, b, c, d, e, f, g, h) : tuple[int, ...]
        Working registers after the round, all reduced modulo 2**32.
    """
    temp1 = (h + _big_sigma1(e) + _ch(e, f, g) + k + w) & MASK32
    temp2 = (_big_sigma0(a) + _maj(a, b, c)) & MASK32

    return (
        (temp1 + temp2) & MASK32,
        a,
        b,
        c,
        (d + temp1) & MASK32,
        e,
        f,
        g,
    )


def compress64(
    a: int,
    b: int,
    c: int,
    d: int,
    e: int,
    f: int,
    g: int,
    h: int,
    ws: Sequence[int],
) -> HashState:
    """Run the full 64-round SHA-256 compression loop for one block.

    The registers start from the caller's hash state; the result is the
    post-round working state, *not* yet added back into the hash state
    (see `fold_state`).
    """
    if len(ws) != 64:
        raise ValueError(f"compress64 expects 64 message schedule words, got {len(ws)}")

    registers = (a, b, c, d, e, f, g, h)
    for w, k in zip(ws, K_VALUES):
        registers = compression(*registers, w, k)

    return registers


def fold_state(state: Sequence[int], registers: Sequence[int]) -> HashState:
    """Add the post-round working registers into the hash state, word by word."""
    if len(state) != 8 or len(registers) != 8:
        raise ValueError(
            f"Expected 8-word state and registers, got {len(state)} and {len(registers)}"
        )
    return tuple((s + r) & MASK32 for s, r in zip(state, registers))


def compress(state: Sequence[int], schedule: Sequence[int]) -> HashState:
    """Compress one block's message schedule into the running hash state.

    Returns the updated 8-word state; `state` itself is left untouched.
    """
    if len(state) != 8:
        raise ValueError(f"Hash state must have 8 words, got {len(state)}")
    registers = compress64(*state, schedule)
    return fold_state(state, registers)
