"""
Integer generators.
"""

from ..core.generator import Generator
from ..core.random import Random
from ..core.shrinkable import Shrinkable
from ..shrinker.integer import shrink_integer


def _target(lo: int, hi: int) -> int:
    # Value closest to zero inside [lo, hi]
    if lo > 0:
        return lo
    if hi < 0:
        return hi
    return 0


def interval(lo: int, hi: int) -> Generator[int]:
    """
    Integers drawn uniformly from [lo, hi], shrinking toward zero.

    Raises:
        ValueError: If lo > hi
    """
    if lo > hi:
        raise ValueError(f"invalid interval: [{lo}, {hi}]")
    target = _target(lo, hi)

    def gen(rand: Random) -> Shrinkable[int]:
        return shrink_integer(rand.interval(lo, hi), target)

    return Generator(gen)


def integers(lo: int, hi: int) -> Generator[int]:
    """Alias of interval()."""
    return interval(lo, hi)
