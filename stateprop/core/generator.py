"""
Generator: produces shrink tree roots from a random source.
"""

from typing import Callable, Generic, TypeVar

from .errors import GenerationError
from .random import Random
from .shrinkable import Shrinkable

T = TypeVar("T")
U = TypeVar("U")

# Attempts before filter() gives up on a generator
MAX_FILTER_TRIES = 100


class Generator(Generic[T]):
    """
    Wraps a function Random -> Shrinkable[T].

    Usage:
        evens = interval(0, 100).map(lambda n: n * 2)
        node = evens.generate(Random("1"))
        node.value  # an even number in [0, 200]
    """

    def __init__(self, gen_fn: Callable[[Random], Shrinkable[T]]) -> None:
        self._gen_fn = gen_fn

    def generate(self, rand: Random) -> Shrinkable[T]:
        """Draw one shrink tree root, advancing rand."""
        return self._gen_fn(rand)

    def map(self, fn: Callable[[T], U]) -> "Generator[U]":
        return Generator(lambda rand: self.generate(rand).map(fn))

    def filter(self, pred: Callable[[T], bool]) -> "Generator[T]":
        """
        Keep only values satisfying pred (shrinks are filtered too).

        Raises:
            GenerationError: If MAX_FILTER_TRIES draws all fail pred
        """
        def gen(rand: Random) -> Shrinkable[T]:
            for _ in range(MAX_FILTER_TRIES):
                shr = self.generate(rand)
                if pred(shr.value):
                    return shr.filter(pred)
            raise GenerationError(f"filter rejected {MAX_FILTER_TRIES} consecutive values")

        return Generator(gen)

    def flat_map(self, fn: Callable[[T], "Generator[U]"]) -> "Generator[U]":
        """
        Generate a value, then generate from the generator it selects.

        Only the second stage is shrunk.
        """
        return Generator(lambda rand: fn(self.generate(rand).value).generate(rand))
