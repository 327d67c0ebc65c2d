"""
Shrink search over recorded action sequences.

Greedy, level-by-level search: every candidate at the current level is
replayed from the trial's random source snapshot; each reproducing
candidate becomes the best so far and the frontier moves to the shrinks of
the last one found. The search stops at the first level with no
reproducing candidate (local minimum).
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, List, Optional, Sequence

from ..core.random import Random
from ..core.shrinkable import Shrinkable
from ..replay.runner import replay
from ..shrinker.array import shrinkable_array
from .action import Action

if TYPE_CHECKING:
    from .property import StatefulProperty

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShrinkResult:
    """
    Outcome of a shrink search.

    Fields:
        initial: Initial subject regenerated from the snapshot
        actions: Minimized action values (original sequence if not improved)
        cause: Exception of the minimized replay, None if not improved
        replays: Number of candidate replays performed
    """
    initial: Any
    actions: List[Any] = field(default_factory=list)
    cause: Optional[Exception] = None
    replays: int = 0

    @property
    def successful(self) -> bool:
        """True when the search improved on the original failure."""
        return self.cause is not None


def shrink_actions(
    prop: "StatefulProperty[Any, Any]",
    rand: Random,
    action_shrs: Sequence[Shrinkable[Action[Any, Any]]],
) -> ShrinkResult:
    """
    Search for a smaller failing action sequence.

    Args:
        prop: StatefulProperty supplying generators, hooks and min_size
        rand: Snapshot taken at the start of the failing trial (not mutated)
        action_shrs: Recorded action nodes, failing action included

    Returns:
        ShrinkResult with the best reproduction found
    """
    best_actions = [shr.value for shr in action_shrs]
    best_cause: Optional[Exception] = None
    replays = 0

    frontier = shrinkable_array(list(action_shrs), prop.config.min_size)
    while True:
        improved = False
        next_frontier = frontier
        for candidate in frontier.shrinks():
            result = replay(prop, rand, candidate.value)
            replays += 1
            if not result.ok:
                best_actions = candidate.value
                best_cause = result.cause
                next_frontier = candidate
                improved = True
        if not improved:
            break
        frontier = next_frontier

    initial = prop.initial_gen.generate(rand.clone()).value
    logger.info(
        "Shrinking finished: %d -> %d actions after %d replays (%s)",
        len(action_shrs),
        len(best_actions),
        replays,
        "improved" if best_cause is not None else "not improved",
    )
    return ShrinkResult(initial=initial, actions=list(best_actions), cause=best_cause, replays=replays)
