"""
Seedable, cloneable pseudo-random source.

A Random owns one Mersenne Twister instance. clone() copies the generator
state so a snapshot can be replayed later regardless of how far the
original has advanced since.
"""

import os
import random as _random

from .ids import seed_to_int


class Random:
    """
    Pseudo-random source with bounded-interval draws.

    Usage:
        rand = Random("1")
        snapshot = rand.clone()
        rand.interval(0, 10) == snapshot.interval(0, 10)  # True

    Fields:
        seed: Seed string actually used (generated when none is given)
    """

    def __init__(self, seed: str = "") -> None:
        if seed == "":
            seed = os.urandom(8).hex()
        self.seed = seed
        self._rng = _random.Random(seed_to_int(seed))

    def interval(self, lo: int, hi: int) -> int:
        """
        Draw an integer uniformly from [lo, hi] (both inclusive).

        Raises:
            ValueError: If lo > hi
        """
        if lo > hi:
            raise ValueError(f"invalid interval: [{lo}, {hi}]")
        return self._rng.randint(lo, hi)

    def next_float(self) -> float:
        """Draw a float uniformly from [0.0, 1.0)."""
        return self._rng.random()

    def clone(self) -> "Random":
        """
        Copy this source.

        The clone and the original produce the same future draws but
        advance independently.
        """
        other = Random.__new__(Random)
        other.seed = self.seed
        other._rng = _random.Random()
        other._rng.setstate(self._rng.getstate())
        return other

    def __repr__(self) -> str:
        return f"Random(seed={self.seed!r})"

