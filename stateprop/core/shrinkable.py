"""
Shrinkable: lazy shrink tree node.

A node holds a current value and a function producing its children
(smaller/simpler candidates). Children are only built when shrinks() is
iterated, so large trees never materialize.
"""

from typing import Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")

ShrinksFn = Callable[[], Iterable["Shrinkable[T]"]]


class Shrinkable(Generic[T]):
    """
    Node in a lazy shrink tree.

    Usage:
        node = Shrinkable(4, lambda: [Shrinkable(0), Shrinkable(2)])
        [s.value for s in node.shrinks()]  # [0, 2]
    """

    __slots__ = ("_value", "_shrinks_fn")

    def __init__(self, value: T, shrinks_fn: Optional[ShrinksFn] = None) -> None:
        self._value = value
        self._shrinks_fn = shrinks_fn

    @property
    def value(self) -> T:
        return self._value

    def shrinks(self) -> Iterator["Shrinkable[T]"]:
        """Fresh iterator over this node's children (may be empty)."""
        if self._shrinks_fn is None:
            return iter(())
        return iter(self._shrinks_fn())

    def map(self, fn: Callable[[T], U]) -> "Shrinkable[U]":
        """Transform the value of this node and every descendant."""
        return Shrinkable(fn(self._value), lambda: (child.map(fn) for child in self.shrinks()))

    def filter(self, pred: Callable[[T], bool]) -> "Shrinkable[T]":
        """
        Drop descendants whose value fails pred.

        The root itself is assumed to satisfy pred.
        """
        def shrinks():
            for child in self.shrinks():
                if pred(child.value):
                    yield child.filter(pred)

        return Shrinkable(self._value, shrinks)

    def __repr__(self) -> str:
        return f"Shrinkable({self._value!r})"
