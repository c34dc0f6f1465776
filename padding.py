"""Message padding and block splitting for SHA-256.

The padded message is the original bytes, a single 0x80 byte, enough zero
bytes to reach 56 (mod 64), and the original length in bits as a 64-bit
big-endian integer. Its length is therefore always a multiple of 64 bytes.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Union


BLOCK_SIZE = 64
LENGTH_FIELD_SIZE = 8

# The bit length has to fit in the 64-bit length field.
MAX_MESSAGE_BYTES = (1 << 61) - 1

BytesLike = Union[bytes, bytearray, memoryview, Iterable[int]]


class MessageTooLargeError(ValueError):
    """Raised when a message's bit length does not fit in 64 bits."""


def message_bit_length(byte_length: int) -> int:
    """Return the length in bits of a message of `byte_length` bytes."""
    if byte_length > MAX_MESSAGE_BYTES:
        raise MessageTooLargeError(
            f"Message of {byte_length} bytes exceeds the SHA-256 limit of "
            f"{MAX_MESSAGE_BYTES} bytes"
        )
    return byte_length * 8


def block_count(byte_length: int) -> int:
    """Number of 64-byte blocks a message of `byte_length` bytes pads to.

    One bit for the 0x80 marker plus 64 bits of length field, rounded up
    to whole 512-bit blocks.
    """
    return (message_bit_length(byte_length) + 65 + 511) // 512


def pad(message: BytesLike) -> bytes:
    """Pad `message` to a multiple of 64 bytes (512 bits).

    The input is copied, never modified. A message that already ends at 56
    (mod 64) bytes still gets a whole extra block, since the 0x80 marker
    and the length field never fit in the remaining space.
    """
    if isinstance(message, int):
        raise TypeError(f"Expected a bytes-like message, got {type(message).__name__}")
    padded = bytearray(message)
    bit_length = message_bit_length(len(padded))

    padded.append(0x80)
    padded.extend(b"\x00" * ((BLOCK_SIZE - LENGTH_FIELD_SIZE - len(padded)) % BLOCK_SIZE))
    padded.extend(bit_length.to_bytes(LENGTH_FIELD_SIZE, byteorder="big"))
    return bytes(padded)


def split_into_blocks(padded: bytes) -> Iterator[bytes]:
    """Yield successive 64-byte blocks of an already padded message."""
    if len(padded) % BLOCK_SIZE != 0:
        raise ValueError(
            f"Padded message length must be a multiple of {BLOCK_SIZE} bytes, "
            f"got {len(padded)}"
        )
    for i in range(0, len(padded), BLOCK_SIZE):
        yield padded[i : i + BLOCK_SIZE]
