"""
Tests for the shrink search.

Critical: shrinking must only ever return reproducing sequences, never
longer than the recorded one nor shorter than min_size, and must leave an
irreducible sequence unchanged.
"""

import logging

from stateprop.core.random import Random
from stateprop.core.shrinkable import Shrinkable
from stateprop.shrinker import shrink_integer
from stateprop.generators import array_gen, integers
from stateprop.stateful import Action, stateful_property
from stateprop.tests.scenarios import count_model, make_limited_push


def _pop(obj, model):
    if obj:
        obj.pop()


def _push_node(value):
    return shrink_integer(value).map(make_limited_push)


def _pop_node():
    return Shrinkable(Action(_pop, name="pop"))


def _prop(min_size=1):
    # Actions are replayed directly; the action generator is never consulted
    prop = stateful_property(array_gen(integers(0, 10), 0, 0), count_model, lambda obj, model: None)
    return prop.set_size_range(min_size, 100)


def _recorded():
    # [] -> [5] -> [] -> [7] -> [7, 1] -> [7, 1, 2] -> 4 elements: fails
    return [_push_node(5), _pop_node(), _push_node(7), _push_node(1), _push_node(2), _push_node(3)]


def test_shrink_reduces_to_four_pushes():
    result = _prop().shrink(Random("1"), _recorded())

    assert result.successful
    assert [repr(a) for a in result.actions] == ["push(0)"] * 4
    assert isinstance(result.cause, ValueError)
    assert result.initial == []


def test_shrink_respects_min_size():
    """Never below min_size, never above the recorded length."""
    recorded = _recorded()

    result = _prop(min_size=5).shrink(Random("1"), recorded)

    assert result.successful
    assert 5 <= len(result.actions) <= len(recorded)


def test_shrink_irreducible_sequence_unchanged():
    """Feeding a local minimum back in yields an unsuccessful result."""
    recorded = [_push_node(0) for _ in range(4)]

    result = _prop().shrink(Random("1"), recorded)

    assert not result.successful
    assert result.cause is None
    assert result.actions == [node.value for node in recorded]


def test_shrink_result_reproduces_failure():
    """The minimized sequence fails again from the reported initial subject."""
    result = _prop().shrink(Random("1"), _recorded())

    obj = list(result.initial)
    model = count_model(obj)
    failed = False
    try:
        for action in result.actions:
            action.call(obj, model)
    except ValueError:
        failed = True

    assert failed


def test_shrink_does_not_advance_snapshot():
    snapshot = Random("1")
    expected = snapshot.clone().interval(0, 10**9)

    _prop().shrink(snapshot, _recorded())

    assert snapshot.interval(0, 10**9) == expected


def test_shrink_logs_summary(caplog):
    caplog.set_level(logging.INFO, logger="stateprop")

    _prop().shrink(Random("1"), _recorded())

    assert "Shrinking finished: 6 -> 4 actions" in caplog.text
