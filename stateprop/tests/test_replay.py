"""
Tests for replay isolation.

Critical: replay must rebuild state from the snapshot on every call, report
failures as values and never advance the caller's snapshot.
"""

from stateprop.core.random import Random
from stateprop.replay import ReplayResult, replay
from stateprop.stateful import Action, stateful_property
from stateprop.tests.scenarios import count_model, initial_lists, list_actions


def _append(obj, model):
    obj.append(0)
    model["count"] += 1


def _fail(obj, model):
    raise RuntimeError("boom")


def _prop(events=None):
    events = events if events is not None else []
    seen = []

    prop = stateful_property(initial_lists(), count_model, list_actions())
    prop.set_on_startup(lambda: events.append("startup"))
    prop.set_on_cleanup(lambda: events.append("cleanup"))
    prop.set_post_check(lambda obj, model: seen.append((list(obj), dict(model))))
    return prop, seen


def test_replay_success_runs_all_hooks():
    events = []
    prop, seen = _prop(events)

    result = replay(prop, Random("1"), [Action(_append), Action(_append)])

    assert result == ReplayResult.success()
    assert events == ["startup", "cleanup"]
    obj, model = seen[0]
    assert model["count"] == len(obj)


def test_replay_failure_returned_not_raised():
    events = []
    prop, _ = _prop(events)

    result = replay(prop, Random("1"), [Action(_append), Action(_fail)])

    assert not result.ok
    assert isinstance(result.cause, RuntimeError)
    assert events == ["startup"]  # no cleanup on failure


def test_replay_post_check_failure_reported():
    prop, _ = _prop()

    def post_check(obj):
        raise AssertionError("post")

    prop.set_post_check_without_model(post_check)

    result = replay(prop, Random("1"), [])

    assert not result.ok
    assert isinstance(result.cause, AssertionError)


def test_replay_does_not_advance_snapshot():
    """The snapshot still yields the same draws after any number of replays."""
    prop, _ = _prop()
    snapshot = Random("snap")
    expected = snapshot.clone().interval(0, 10**9)

    for _ in range(5):
        replay(prop, snapshot, [Action(_append)])

    assert snapshot.interval(0, 10**9) == expected


def test_replay_fresh_state_per_call():
    """Each replay starts from the same regenerated subject."""
    prop, seen = _prop()
    snapshot = Random("fresh")

    for _ in range(3):
        replay(prop, snapshot, [Action(_append)])

    assert seen[0] == seen[1] == seen[2]


def test_replay_generation_error_is_failure():
    prop, _ = _prop()

    def broken(obj):
        raise ValueError("cannot model")

    prop.model_factory = broken

    result = replay(prop, Random("1"), [])

    assert not result.ok
    assert isinstance(result.cause, ValueError)
