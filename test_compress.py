import pytest

from compress import (
    K_VALUES,
    MASK32,
    _rotr,
    compress,
    compress64,
    compression,
    fold_state,
)
from engine import H0, format_digest
from message import frame, schedule


def test_round_constant_table():
    assert len(K_VALUES) == 64
    assert K_VALUES[0] == 0x428A2F98
    assert K_VALUES[63] == 0xC67178F2
    assert all(0 <= k <= MASK32 for k in K_VALUES)


@pytest.mark.parametrize(
    "x,n,expected",
    [
        (0x00000001, 1, 0x80000000),
        (0x80000000, 31, 0x00000001),
        (0x12345678, 8, 0x78123456),
        (0xFFFFFFFF, 13, 0xFFFFFFFF),
    ],
)
def test_rotr(x, n, expected):
    assert _rotr(x, n) == expected


def test_compression_all_zero_state_is_fixed_point():
    assert compression(0, 0, 0, 0, 0, 0, 0, 0, 0, 0) == (0,) * 8


def test_compression_shifts_registers():
    """With k=1 and an all-zero state, temp1 = temp2 + 1 = 1 feeds a and e."""
    assert compression(0, 0, 0, 0, 0, 0, 0, 0, 0, 1) == (1, 0, 0, 0, 1, 0, 0, 0)

    a, b, c, d, e, f, g, h = 1, 2, 3, 4, 5, 6, 7, 8
    out = compression(a, b, c, d, e, f, g, h, 0x67452301, K_VALUES[0])
    assert out[1:4] == (a, b, c)
    assert out[5:8] == (e, f, g)


def test_compression_wraps_modulo_2_32():
    out = compression(*([MASK32] * 8), MASK32, MASK32)
    assert all(0 <= word <= MASK32 for word in out)


def test_compress64_rejects_short_schedule():
    with pytest.raises(ValueError):
        compress64(*H0, [0] * 63)


def test_fold_state_wraps():
    assert fold_state((MASK32,) * 8, (1,) * 8) == (0,) * 8
    with pytest.raises(ValueError):
        fold_state((0,) * 7, (0,) * 8)


def test_compress_single_block_abc():
    (block,) = frame(b"abc")
    state = compress(H0, schedule(block))
    assert format_digest(state) == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


def test_compress_leaves_input_state_untouched():
    state = list(H0)
    (block,) = frame(b"")
    result = compress(state, schedule(block))
    assert state == list(H0)
    assert isinstance(result, tuple)
    assert len(result) == 8


def test_compress_rejects_wrong_state_width():
    with pytest.raises(ValueError):
        compress(H0[:7], [0] * 64)
