"""SHA-256 digest built from `pad`, `expand` and `compress64`.

High-level flow for one message:

1. Pad the message to whole 64-byte blocks (`padding.pad`).
2. For each block, in order, expand its 64-word schedule
   (`schedule.expand`), run the 64 compression rounds (`compress.compress64`)
   on a copy of the hash registers, and add the result back in.
3. Render the eight registers as 64 lowercase hex characters.

Every call owns its own `HashState`; nothing mutable lives at module level,
so independent digests can run in parallel threads.
"""

from __future__ import annotations

from typing import List, Tuple

from compress import MASK32, State, compress64
from padding import BytesLike, pad, split_into_blocks
from schedule import expand


# Initial hash values (first 32 bits of the fractional parts of the
# square roots of the first 8 primes 2..19), as per FIPS 180-4.
INITIAL_HASH: State = (
    0x6A09E667,
    0xBB67AE85,
    0x3C6EF372,
    0xA54FF53A,
    0x510E527F,
    0x9B05688C,
    0x1F83D9AB,
    0x5BE0CD19,
)


class HashState:
    """The eight chaining registers h0..h7 of a single digest computation."""

    def __init__(self) -> None:
        self._registers: State = INITIAL_HASH
        self.blocks_processed = 0

    @property
    def words(self) -> State:
        return self._registers

    def absorb(self, block: bytes) -> None:
        """Fold one 64-byte block into the registers."""
        schedule = expand(block)
        working = compress64(self._registers, schedule)
        self._registers = tuple(
            (h + x) & MASK32 for h, x in zip(self._registers, working)
        )
        self.blocks_processed += 1

    def digest(self) -> bytes:
        """Convert the registers into the 32-byte SHA-256 digest."""
        return b"".join(word.to_bytes(4, byteorder="big") for word in self._registers)

    def hexdigest(self) -> str:
        return "".join(f"{word:08x}" for word in self._registers)


def _run(message: BytesLike) -> HashState:
    state = HashState()
    for block in split_into_blocks(pad(message)):
        state.absorb(block)
    return state


def digest(message: BytesLike) -> str:
    """Return the SHA-256 digest of `message` as 64 lowercase hex characters."""
    return _run(message).hexdigest()


def digest_bytes(message: BytesLike) -> bytes:
    """Return the raw 32-byte SHA-256 digest of `message`."""
    return _run(message).digest()


def digest_with_trace(message: BytesLike) -> Tuple[str, List[State]]:
    """Compute the digest while recording the chaining value after each block.

    Returns:
        (digest_hex, states)
        where states[i] is the 8-word hash state after absorbing block i
    """
    state = HashState()
    states: List[State] = []
    for block in split_into_blocks(pad(message)):
        state.absorb(block)
        states.append(state.words)
    return state.hexdigest(), states
