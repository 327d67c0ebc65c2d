"""
List generator backed by the array shrink strategy.
"""

from typing import List, TypeVar

from ..core.generator import Generator
from ..core.random import Random
from ..core.shrinkable import Shrinkable
from ..shrinker.array import shrinkable_array

T = TypeVar("T")


def array_gen(elem_gen: Generator[T], min_len: int, max_len: int) -> Generator[List[T]]:
    """
    Lists with length drawn from [min_len, max_len].

    Raises:
        ValueError: If min_len < 0 or min_len > max_len
    """
    if min_len < 0 or min_len > max_len:
        raise ValueError(f"invalid length bounds: {min_len}, {max_len}")

    def gen(rand: Random) -> Shrinkable[List[T]]:
        size = rand.interval(min_len, max_len)
        nodes = [elem_gen.generate(rand) for _ in range(size)]
        return shrinkable_array(nodes, min_len)

    return Generator(gen)
