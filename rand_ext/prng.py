
# 48-bit linear congruential generator (the erand48 family) backing the samplers.
# State is three 16-bit words, low-order word first.
import os
from dataclasses import dataclass
from typing import Callable, Tuple

from ._logging import get_logger
from .errors import SeedingFailed

logger = get_logger(__name__)

MASK48 = (1 << 48) - 1
MULTIPLIER = 0x5DEECE66D
ADDEND = 0xB
ENTROPY_BYTES = 8


@dataclass
class Erand48:
    state: int

    def __post_init__(self) -> None:
        self.seed(self.state)

    @property
    def words(self) -> Tuple[int, int, int]:
        return (
            self.state & 0xFFFF,
            (self.state >> 16) & 0xFFFF,
            (self.state >> 32) & 0xFFFF,
        )

    def seed(self, entropy: int) -> None:
        # only the low 48 bits of the entropy survive
        state = entropy & MASK48
        if state == 0:
            raise SeedingFailed("all-zero seed words would produce a degenerate sequence")
        self.state = state

    def next_u48(self) -> int:
        self.state = (self.state * MULTIPLIER + ADDEND) & MASK48
        return self.state

    def next(self) -> float:
        # [0, 1)
        return self.next_u48() / 2**48


def seed_state(entropy_source: Callable[[int], bytes] = os.urandom) -> Erand48:
    """Return a fresh generator seeded from the OS entropy pool.

    ``entropy_source`` takes a byte count and returns that many bytes, with
    the same contract as ``os.urandom``. There is no fallback seed: if the
    source fails or comes back short, ``SeedingFailed`` is raised.
    """

    try:
        raw = entropy_source(ENTROPY_BYTES)
    except (OSError, NotImplementedError) as exc:
        logger.error("entropy_unavailable", error=str(exc))
        raise SeedingFailed("could not generate random seed") from exc

    if len(raw) < ENTROPY_BYTES:
        logger.error("entropy_short_read", received=len(raw), expected=ENTROPY_BYTES)
        raise SeedingFailed(
            f"could not generate random seed: expected {ENTROPY_BYTES} bytes, got {len(raw)}"
        )

    return Erand48(int.from_bytes(raw[:ENTROPY_BYTES], "little"))
