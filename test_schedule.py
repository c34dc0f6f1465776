import pytest

from compress import MASK32
from padding import pad
from schedule import expand, phi0, phi1


def test_phi_functions():
    assert phi0(0) == 0
    assert phi1(0) == 0
    # rotr(0x18, 17) ^ rotr(0x18, 19) ^ (0x18 >> 10)
    assert phi1(0x18) == 0x000F0000


def test_expand_abc_block():
    w = expand(pad(b"abc"))

    assert len(w) == 64
    assert w[0] == 0x61626380
    assert w[1:15] == [0] * 14
    assert w[15] == 0x00000018
    assert w[16] == 0x61626380
    assert w[17] == 0x000F0000
    assert all(0 <= word <= MASK32 for word in w)


def test_expand_recurrence():
    block = bytes(range(64))
    w = expand(block)
    for t in range(16, 64):
        assert w[t] == (phi1(w[t - 2]) + w[t - 7] + phi0(w[t - 15]) + w[t - 16]) & MASK32


def test_expand_is_fresh_per_block():
    block = b"\xff" * 64
    first = expand(block)
    first[0] = 0
    assert expand(block)[0] == 0xFFFFFFFF


@pytest.mark.parametrize("size", [0, 63, 65])
def test_expand_rejects_wrong_block_size(size):
    with pytest.raises(ValueError):
        expand(b"\x00" * size)
