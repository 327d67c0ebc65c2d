"""
Tests for the action abstraction.
"""

import pytest

from stateprop.stateful.action import EMPTY_MODEL, Action, SimpleAction


def test_action_mutates_subject_and_model():
    def push(obj, model):
        obj.append(1)
        model["count"] += 1

    obj, model = [], {"count": 0}
    Action(push).call(obj, model)

    assert obj == [1]
    assert model == {"count": 1}


def test_action_name_defaults_to_function_name():
    def pop(obj, model):
        pass

    assert repr(Action(pop)) == "pop"
    assert repr(Action(pop, name="pop()")) == "pop()"


def test_simple_action_adapter_ignores_model():
    """from_simple passes the subject through and never touches the model."""
    simple = SimpleAction(lambda obj: obj.append("x"), name="append")
    action = Action.from_simple(simple)

    obj = []
    action.call(obj, EMPTY_MODEL)
    action.call(obj, object())

    assert obj == ["x", "x"]
    assert repr(action) == "append"


def test_action_errors_propagate():
    def boom(obj, model):
        raise KeyError("missing")

    with pytest.raises(KeyError):
        Action(boom).call([], {})


def test_empty_model_is_read_only():
    assert len(EMPTY_MODEL) == 0
    with pytest.raises(TypeError):
        EMPTY_MODEL["x"] = 1  # type: ignore[index]
