"""
Seeded random stream used by every generation algorithm.

A ``RandomStream`` owns a private ``random.Random`` (Mersenne Twister)
instance, so two streams built from the same seed yield the same sequence on
every platform and no module-level RNG state is shared between calls.

All higher-level draws (``choice``, ``shuffle``, ``sample``) are expressed
through ``next_int`` so that the sequence of underlying draws is fully
determined by the algorithm's control flow.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, TypeVar

import numpy as np

from gridmaze.utils.exceptions import validate_parameter_value

if TYPE_CHECKING:
    from collections.abc import MutableSequence, Sequence

T = TypeVar("T")

SEED_MASK = 0xFFFFFFFF


class RandomStream:
    """
    Deterministic pseudo-random stream.

    Seeds are reduced to 32 bits, so host-provided int32 seeds (negative ones
    included) map to distinct, reproducible streams. Seeds that differ by a
    multiple of 2**32 select the same stream.

    Args:
        seed: Integer seed. ``None`` seeds from system entropy; the drawn seed
            is still recorded in ``initial_seed`` so the stream can be replayed.
    """

    def __init__(self, seed: int | None = None):
        if seed is None:
            seed = random.SystemRandom().getrandbits(32)
        self._random = random.Random()
        self.initial_seed = 0
        self.seed(seed)

    def seed(self, value: int) -> None:
        """Re-seed the stream and make ``value`` the new initial seed."""
        validate_parameter_value(value, "seed", expected_type=(int, np.integer), component="RandomStream")
        self.initial_seed = int(value) & SEED_MASK
        self._random.seed(self.initial_seed)

    def reset(self) -> None:
        """Restart the sequence from the initial seed."""
        self._random.seed(self.initial_seed)

    def next_int(self, low: int, high: int) -> int:
        """Return a random integer in ``[low, high]`` (both inclusive)."""
        if high < low:
            raise ValueError(f"Empty range [{low}, {high}]")
        return self._random.randint(low, high)

    def next_bool(self) -> bool:
        return bool(self._random.getrandbits(1))

    def choice(self, seq: Sequence[T]) -> T:
        """Pick one element of a non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[self.next_int(0, len(seq) - 1)]

    def shuffle(self, items: MutableSequence[T]) -> None:
        """Shuffle ``items`` in place (Fisher-Yates, from the back)."""
        for i in range(len(items) - 1, 0, -1):
            j = self.next_int(0, i)
            items[i], items[j] = items[j], items[i]

    def sample(self, seq: Sequence[T], k: int) -> list[T]:
        """Return ``k`` distinct elements of ``seq`` in random order."""
        if not 0 <= k <= len(seq):
            raise ValueError(f"Sample size {k} outside [0, {len(seq)}]")
        pool = list(seq)
        self.shuffle(pool)
        return pool[:k]

    def __repr__(self) -> str:
        return f"RandomStream(initial_seed={self.initial_seed})"


def as_random_stream(rng: RandomStream | int | None) -> RandomStream:
    """Accept a stream, an integer seed or ``None`` and return a stream."""
    if isinstance(rng, RandomStream):
        return rng
    return RandomStream(rng)
