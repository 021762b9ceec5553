"""
Sources of randomness for shuffling.

The deck only needs one capability from a random source: a uniform integer
in ``[0, n)``. Wrapping it behind a small interface lets tests inject a
seeded or fully scripted source and get reproducible shuffles.
"""

import random
from abc import ABC, abstractmethod
from typing import Optional


class RandomSource(ABC):
    """
    Abstract source of uniform random integers.
    """

    @abstractmethod
    def randbelow(self, n: int) -> int:
        """
        Return a uniformly distributed integer in ``[0, n)``.

        Args:
            n: Exclusive upper bound, must be positive

        Raises:
            ValueError: If ``n`` is not positive
        """
        pass


class DefaultRandomSource(RandomSource):
    """
    Random source backed by a private ``random.Random`` instance.

    >>> DefaultRandomSource(seed=7).randbelow(10) == DefaultRandomSource(seed=7).randbelow(10)
    True
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._random = random.Random(seed)

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"Upper bound must be positive, got {n}")
        return self._random.randrange(n)

    def __repr__(self) -> str:
        return f"DefaultRandomSource(seed={self.seed!r})"


class SystemRandomSource(RandomSource):
    """Random source drawing from the operating system's entropy pool."""

    def __init__(self):
        self._random = random.SystemRandom()

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"Upper bound must be positive, got {n}")
        return self._random.randrange(n)


_default_source: Optional[RandomSource] = None


def default_random_source() -> RandomSource:
    """Return the process-wide unseeded random source."""
    global _default_source
    if _default_source is None:
        _default_source = DefaultRandomSource()
    return _default_source
