"""
Array shrink strategy.

Builds a lazy shrink tree over a list of element nodes. Candidates per
level, least aggressive first:
1. Element-wise shrinks (one element replaced by one of its children)
2. Removal of contiguous windows of width 1, 2, 4, ...
3. The prefix of length min_len

Candidates never drop below min_len. Each is strictly smaller than its
parent in (length, element tree depth), so descent terminates.
"""

from typing import List, Sequence, TypeVar

from ..core.shrinkable import Shrinkable

T = TypeVar("T")


def shrinkable_array(nodes: Sequence[Shrinkable[T]], min_len: int = 0) -> Shrinkable[List[T]]:
    """
    Shrink tree over a sequence of element nodes.

    Args:
        nodes: Element shrink nodes in order
        min_len: Minimum length of every candidate

    Returns:
        Shrinkable whose value is the list of element values
    """
    nodes = list(nodes)

    def shrinks():
        for i, node in enumerate(nodes):
            for child in node.shrinks():
                yield shrinkable_array(nodes[:i] + [child] + nodes[i + 1:], min_len)

        n = len(nodes)
        width = 1
        while width <= n - min_len:
            for start in range(0, n, width):
                end = min(start + width, n)
                if n - (end - start) < min_len:
                    continue
                yield shrinkable_array(nodes[:start] + nodes[end:], min_len)
            width *= 2

        if n > min_len:
            yield shrinkable_array(nodes[:min_len], min_len)

    return Shrinkable([node.value for node in nodes], shrinks)
