"""
Replay runner: re-execute a candidate action sequence from a snapshot.

Replay is isolated: every call builds a fresh subject and model from its
own clone of the random source. Failures are returned, never raised.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional, Sequence

from ..core.random import Random
from ..stateful.action import Action

if TYPE_CHECKING:
    from ..stateful.property import StatefulProperty


@dataclass(frozen=True)
class ReplayResult:
    """
    Result of replay operation.

    Fields:
        ok: True when every step (and the post-check) completed
        cause: Exception raised by the failing step, None on success
    """
    ok: bool
    cause: Optional[Exception] = None

    @staticmethod
    def success() -> "ReplayResult":
        return ReplayResult(ok=True)

    @staticmethod
    def failure(cause: Exception) -> "ReplayResult":
        return ReplayResult(ok=False, cause=cause)


def replay(prop: "StatefulProperty[Any, Any]", rand: Random, actions: Sequence[Action[Any, Any]]) -> ReplayResult:
    """
    Replay actions against a subject regenerated from rand.

    Runs the startup hook, regenerates the initial subject and model,
    executes each action in order, runs the post-check and finally the
    cleanup hook. rand is cloned before use, so the caller's snapshot is
    never advanced.

    Args:
        prop: StatefulProperty supplying generators and hooks
        rand: Snapshot of the random source taken at trial start
        actions: Action values to execute in order

    Returns:
        ReplayResult.success() or ReplayResult.failure(cause)
    """
    try:
        if prop.on_startup is not None:
            prop.on_startup()

        obj = prop.initial_gen.generate(rand.clone()).value
        model = prop.model_factory(obj)
        for action in actions:
            action.call(obj, model)

        if prop.post_check is not None:
            prop.post_check(obj, model)
        if prop.on_cleanup is not None:
            prop.on_cleanup()
        return ReplayResult.success()
    except Exception as e:
        return ReplayResult.failure(e)
