from __future__ import annotations

from typing import Sequence, TypeVar

import numpy as np

T = TypeVar("T")

_SEED_BOUND = 2**31 - 1


class Randomizer:
    """Seeded random source used for node seeds and reproducible ordering.

    Every node draws its seed from a class-level stream rooted at
    ``Randomizer.initial_seed``; re-seeding that stream makes a whole tree
    reproducible.
    """

    _initial_seed: int = int(np.random.SeedSequence().entropy % _SEED_BOUND)
    _seed_stream: np.random.Generator = np.random.default_rng(_initial_seed)

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed if seed is not None else Randomizer.random_seed()
        self._rng = np.random.default_rng(self.seed)

    @classmethod
    def get_initial_seed(cls) -> int:
        return cls._initial_seed

    @classmethod
    def set_initial_seed(cls, seed: int) -> None:
        """Restart the node seed stream from *seed*."""
        cls._initial_seed = seed
        cls._seed_stream = np.random.default_rng(seed)

    @classmethod
    def random_seed(cls) -> int:
        return int(cls._seed_stream.integers(0, _SEED_BOUND))

    def next_int(self, low: int = 0, high: int = _SEED_BOUND) -> int:
        """Return an int in ``[low, high)``."""
        return int(self._rng.integers(low, high))

    def next_float(self) -> float:
        return float(self._rng.random())

    def shuffle(self, items: Sequence[T]) -> list[T]:
        order = self._rng.permutation(len(items))
        return [items[i] for i in order]
