import math
import threading
from typing import Sequence

import numpy as np


class RandomSource:
    """@brief Thread-safe wrapper around a numpy random generator.

    @details All draws go through a single `numpy.random.Generator` guarded
    by a lock, so one source may be shared by generators used from several
    threads. Pass `seed` for reproducible sequences.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._rng = np.random.default_rng(seed)
        self._lock = threading.Lock()

    def draw(self, low: int, high: int) -> int:
        """@brief Draw one uniformly distributed integer in `[low, high]`.

        @param low Inclusive lower bound.
        @param high Inclusive upper bound.
        @return Drawn integer.
        """
        with self._lock:
            return int(self._rng.integers(low, high, endpoint=True))

    def draw_many(self, low: int, high: int, size: int) -> list[int]:
        """@brief Draw `size` independent integers in `[low, high]`."""
        if size == 0:
            return []
        with self._lock:
            drawn = self._rng.integers(low, high, size=size, endpoint=True)
        return [int(value) for value in drawn]

    def normal(self, mean: float, variance: float) -> float:
        """@brief Draw one sample from `N(mean, variance)`.

        @param mean Distribution mean.
        @param variance Distribution variance, non-negative.
        @return Drawn sample.
        """
        with self._lock:
            return float(self._rng.normal(mean, math.sqrt(variance)))

    def choice(self, probabilities: Sequence[float]) -> int:
        """@brief Draw an index with the given probabilities.

        @param probabilities Non-negative weights summing to one.
        @return Selected index.
        """
        with self._lock:
            return int(self._rng.choice(len(probabilities), p=probabilities))
