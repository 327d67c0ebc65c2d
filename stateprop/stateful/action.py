"""
Actions: single state-transition steps.

An Action mutates a (subject, model) pair and may raise on an invariant
violation. A SimpleAction mutates only the subject; Action.from_simple()
adapts it to the full form so the engine keeps one execution path.
"""

from types import MappingProxyType
from typing import Any, Callable, Generic, Mapping, Optional, TypeVar

ObjectType = TypeVar("ObjectType")
ModelType = TypeVar("ModelType")

# Shared model of simple properties. Read-only, so it stays empty.
EMPTY_MODEL: Mapping[str, Any] = MappingProxyType({})


def _default_name(func: Callable[..., Any]) -> str:
    return getattr(func, "__name__", None) or type(func).__name__


class Action(Generic[ObjectType, ModelType]):
    """
    Step over (subject, model).

    Usage:
        push = Action(lambda obj, model: obj.append(1), name="push(1)")
        push.call(subject, model)
    """

    __slots__ = ("func", "name")

    def __init__(self, func: Callable[[ObjectType, ModelType], None], name: Optional[str] = None) -> None:
        self.func = func
        self.name = name or _default_name(func)

    def call(self, obj: ObjectType, model: ModelType) -> None:
        self.func(obj, model)

    @staticmethod
    def from_simple(simple: "SimpleAction[ObjectType]") -> "Action[ObjectType, Any]":
        """Adapt a subject-only step into the full form (model ignored)."""
        return Action(lambda obj, _model: simple.call(obj), name=simple.name)

    def __repr__(self) -> str:
        return self.name


class SimpleAction(Generic[ObjectType]):
    """Step over the subject only."""

    __slots__ = ("func", "name")

    def __init__(self, func: Callable[[ObjectType], None], name: Optional[str] = None) -> None:
        self.func = func
        self.name = name or _default_name(func)

    def call(self, obj: ObjectType) -> None:
        self.func(obj)

    def __repr__(self) -> str:
        return self.name
