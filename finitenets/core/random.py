"""Process-wide pseudorandom source used for parameter initialisation."""

from __future__ import annotations

from typing import Iterator

import numpy as np

MAX_U64 = np.iinfo(np.uint64).max


class RandomSource:
    """Unbounded stream of unsigned 64-bit integers."""

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def next_u64(self) -> int:
        return int(self._rng.integers(0, MAX_U64, dtype=np.uint64, endpoint=True))

    def unit(self) -> float:
        """Return a draw remapped into ``[0, 1]``."""

        return self.next_u64() / float(MAX_U64)

    def uniform(self, low: float, high: float) -> float:
        """Return ``low + (value / MAX_U64) * (high - low)`` for one draw."""

        return low + self.unit() * (high - low)

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        return self.next_u64()


_SOURCE: RandomSource | None = None


def get_random_source() -> RandomSource:
    """Return the global source, creating an unseeded one on first use."""

    global _SOURCE
    if _SOURCE is None:
        _SOURCE = RandomSource()
    return _SOURCE


def seed(value: int | None) -> RandomSource:
    """Replace the global source with one seeded from ``value``."""

    global _SOURCE
    _SOURCE = RandomSource(value)
    return _SOURCE


__all__ = ["MAX_U64", "RandomSource", "get_random_source", "seed"]
