"""
Integer shrink tree.

Candidates move toward a target value. Every candidate is strictly closer
to the target than its parent, so any descent terminates.
"""

from typing import List

from ..core.shrinkable import Shrinkable


def integer_candidates(value: int, target: int = 0) -> List[int]:
    """
    Shrink candidates for value, least aggressive first.

    Distances from target kept: d//2**k and d - d//2**k for k >= 1, plus 0,
    where d = |value - target|. Ordered from closest-to-value to target.

    Example:
        integer_candidates(100) -> [99, 97, 94, 88, 75, 50, 25, 12, 6, 3, 1, 0]
    """
    d = abs(value - target)
    if d == 0:
        return []
    sign = 1 if value > target else -1

    distances = {0}
    half = d // 2
    while half > 0:
        distances.add(half)
        distances.add(d - half)
        half //= 2

    return [target + sign * r for r in sorted(distances, reverse=True)]


def shrink_integer(value: int, target: int = 0) -> Shrinkable[int]:
    """Build the lazy shrink tree rooted at value."""
    return Shrinkable(
        value,
        lambda: (shrink_integer(c, target) for c in integer_candidates(value, target)),
    )
