"""SHA-256 round function and the 64-round compression loop.

Each round takes the working state `(a, b, c, d, e, f, g, h)`, the round
constant `k` and the schedule word `w`, and computes:

    T1 = h + Sigma1(e) + Ch(e, f, g) + k + w
    T2 = Sigma0(a) + Maj(a, b, c)

    a' = T1 + T2      e' = d + T1
    b' = a            f' = e
    c' = b            g' = f
    d' = c            h' = g

All additions are performed modulo 2**32.
"""

from __future__ import annotations

from typing import Sequence, Tuple


MASK32 = 0xFFFFFFFF

State = Tuple[int, int, int, int, int, int, int, int]

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


def rotr(x: int, n: int) -> int:
    """Right-rotate a 32-bit word `x` by `n` bits."""
    x &= MASK32
    return ((x >> n) | (x << (32 - n))) & MASK32


def shr(x: int, n: int) -> int:
    """Logical right shift of a 32-bit word `x` by `n` bits."""
    return (x & MASK32) >> n


def sigma0(x: int) -> int:
    return rotr(x, 2) ^ rotr(x, 13) ^ rotr(x, 22)


def sigma1(x: int) -> int:
    return rotr(x, 6) ^ rotr(x, 11) ^ rotr(x, 25)


def choice(x: int, y: int, z: int) -> int:
    """Bitwise select: take bits of `y` where `x` is set, else bits of `z`."""
    return ((x & y) ^ (~x & z)) & MASK32


def majority(x: int, y: int, z: int) -> int:
    """Bitwise majority vote of `x`, `y` and `z`."""
    return (x & y) ^ (x & z) ^ (y & z)


def compression_round(state: Sequence[int], k: int, w: int) -> State:
    """Perform one SHA-256 compression round.

    Parameters
    ----------
    state : Sequence[int]
        The eight 32-bit working words `(a, b, c, d, e, f, g, h)`.
    k : int
        Round constant `K[t]`.
    w : int
        Message schedule word `w[t]`.

    Returns
    -------
    tuple[int, ...]
        Working state after the round, every word reduced modulo 2**32.
    """
    a, b, c, d, e, f, g, h = state

    temp1 = (h + sigma1(e) + choice(e, f, g) + k + w) & MASK32
    temp2 = (sigma0(a) + majority(a, b, c)) & MASK32

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


def compress64(state: Sequence[int], schedule: Sequence[int]) -> State:
    """Run the full 64-round compression loop for one block.

    `state` is the working state copied from the current hash registers and
    `schedule` is the block's 64-word message schedule. The returned working
    state still has to be added into the hash registers by the caller.
    """
    if len(schedule) != 64:
        raise ValueError(
            f"compress64 expects 64 message schedule words, got {len(schedule)}"
        )
    if len(state) != 8:
        raise ValueError(f"compress64 expects 8 state words, got {len(state)}")

    working: State = tuple(word & MASK32 for word in state)
    for k, w in zip(K_VALUES, schedule):
        working = compression_round(working, k, w)
    return working
