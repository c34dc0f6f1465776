"""SHA-256 message schedule expansion."""

from __future__ import annotations

from typing import List

from compress import MASK32, rotr, shr
from padding import BLOCK_SIZE


def phi0(x: int) -> int:
    """SHA-256 function σ0 used in the message schedule."""
    return rotr(x, 7) ^ rotr(x, 18) ^ shr(x, 3)


def phi1(x: int) -> int:
    """SHA-256 function σ1 used in the message schedule."""
    return rotr(x, 17) ^ rotr(x, 19) ^ shr(x, 10)


def expand(block: bytes) -> List[int]:
    """Given a 512-bit block, build the 64-word message schedule w[0..63]."""
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"Expected {BLOCK_SIZE}-byte block, got {len(block)}")

    # First 16 words come directly from the block (big-endian).
    w = [int.from_bytes(block[i : i + 4], byteorder="big") for i in range(0, BLOCK_SIZE, 4)]

    for t in range(16, 64):
        w.append((phi1(w[t - 2]) + w[t - 7] + phi0(w[t - 15]) + w[t - 16]) & MASK32)

    return w
