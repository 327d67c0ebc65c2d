"""
Generator combinators: constants and weighted choice.
"""

from dataclasses import dataclass
from typing import Any, List, TypeVar, Union

from ..core.generator import Generator
from ..core.random import Random
from ..core.shrinkable import Shrinkable

T = TypeVar("T")


def just(value: T) -> Generator[T]:
    """Always produce value (no shrinks)."""
    return Generator(lambda rand: Shrinkable(value))


@dataclass(frozen=True)
class Weighted:
    """
    Generator with a declared selection probability for one_of().

    Fields:
        gen: Wrapped generator
        weight: Probability in (0, 1]
    """
    gen: Generator[Any]
    weight: float


def weighted_gen(gen: Generator[T], weight: float) -> Weighted:
    """
    Declare the selection probability of gen inside one_of().

    Raises:
        ValueError: If weight is not in (0, 1]
    """
    if not 0.0 < weight <= 1.0:
        raise ValueError(f"weight must be in (0, 1]: {weight}")
    return Weighted(gen, weight)


def one_of(*gens: Union[Generator[Any], Weighted]) -> Generator[Any]:
    """
    Pick one generator per draw, then generate from it.

    Unweighted members share the probability mass left over by weighted
    ones equally. Shrinks stay within the chosen generator.

    Raises:
        ValueError: If no generators are given or the weights do not fit
    """
    if not gens:
        raise ValueError("one_of requires at least one generator")

    declared = sum(g.weight for g in gens if isinstance(g, Weighted))
    unweighted = sum(1 for g in gens if not isinstance(g, Weighted))
    if unweighted > 0 and declared >= 1.0:
        raise ValueError(f"total weight must be < 1 with unweighted members: {declared}")
    if unweighted == 0 and declared > 1.0 + 1e-9:
        raise ValueError(f"total weight exceeds 1: {declared}")

    rest = (1.0 - declared) / unweighted if unweighted else 0.0
    members: List[Weighted] = [
        g if isinstance(g, Weighted) else Weighted(g, rest) for g in gens
    ]
    total = sum(m.weight for m in members)

    def gen(rand: Random) -> Shrinkable[Any]:
        pick = rand.next_float() * total
        for member in members:
            if pick < member.weight:
                return member.gen.generate(rand)
            pick -= member.weight
        # Float rounding can leave pick marginally above the last boundary
        return members[-1].gen.generate(rand)

    return Generator(gen)
