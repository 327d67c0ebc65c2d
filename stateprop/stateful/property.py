"""
Stateful property engine.

Runs independent trials against a subject and a parallel model. Each trial
generates an initial subject, derives the model, then repeatedly asks the
action generator factory for the next action given the current state and
executes it. A raising action triggers the shrink search and the run fails
with a composed report.
"""

import logging
from typing import Any, Callable, Generic, List, Optional, TypeVar, Union

from pydantic import ValidationError

from ..config import RunConfig
from ..core.errors import ConfigurationError
from ..core.generator import Generator
from ..core.random import Random
from ..core.shrinkable import Shrinkable
from .action import EMPTY_MODEL, Action, SimpleAction
from .report import compose_failure
from .shrink import ShrinkResult, shrink_actions

logger = logging.getLogger(__name__)

ObjectType = TypeVar("ObjectType")
ModelType = TypeVar("ModelType")

# (subject, model) -> generator of the next action
ActionGenFactory = Callable[[ObjectType, ModelType], Generator[Action[ObjectType, ModelType]]]
# subject -> generator of the next simple action
SimpleActionGenFactory = Callable[[ObjectType], Generator[SimpleAction[ObjectType]]]


class StatefulProperty(Generic[ObjectType, ModelType]):
    """
    Model-based property over a subject and its model.

    Usage:
        prop = StatefulProperty(array_gen(interval(0, 10), 0, 5), model_factory, action_gen_factory)
        prop.set_seed("1").set_num_runs(10).set_size_range(1, 20).run()
    """

    def __init__(
        self,
        initial_gen: Generator[ObjectType],
        model_factory: Callable[[ObjectType], ModelType],
        action_gen_factory: ActionGenFactory,
    ) -> None:
        self.initial_gen = initial_gen
        self.model_factory = model_factory
        self.action_gen_factory = action_gen_factory
        self.config = RunConfig.from_env()
        self.on_startup: Optional[Callable[[], None]] = None
        self.on_cleanup: Optional[Callable[[], None]] = None
        self.post_check: Optional[Callable[[ObjectType, ModelType], None]] = None

    def _update(self, **changes: Any) -> "StatefulProperty[ObjectType, ModelType]":
        self.config = self.config.model_copy(update=changes)
        return self

    def set_seed(self, seed: str) -> "StatefulProperty[ObjectType, ModelType]":
        return self._update(seed=seed)

    def set_num_runs(self, num_runs: int) -> "StatefulProperty[ObjectType, ModelType]":
        return self._update(num_runs=num_runs)

    def set_min_size(self, min_size: int) -> "StatefulProperty[ObjectType, ModelType]":
        return self._update(min_size=min_size)

    def set_max_size(self, max_size: int) -> "StatefulProperty[ObjectType, ModelType]":
        return self._update(max_size=max_size)

    def set_size_range(self, min_size: int, max_size: int) -> "StatefulProperty[ObjectType, ModelType]":
        return self._update(min_size=min_size, max_size=max_size)

    def set_on_startup(self, on_startup: Callable[[], None]) -> "StatefulProperty[ObjectType, ModelType]":
        self.on_startup = on_startup
        return self

    def set_on_cleanup(self, on_cleanup: Callable[[], None]) -> "StatefulProperty[ObjectType, ModelType]":
        self.on_cleanup = on_cleanup
        return self

    def set_post_check(
        self, post_check: Callable[[ObjectType, ModelType], None]
    ) -> "StatefulProperty[ObjectType, ModelType]":
        self.post_check = post_check
        return self

    def set_post_check_without_model(
        self, post_check: Callable[[ObjectType], None]
    ) -> "StatefulProperty[ObjectType, ModelType]":
        self.post_check = lambda obj, _model: post_check(obj)
        return self

    def validate(self) -> RunConfig:
        """
        Validate the current configuration.

        Raises:
            ConfigurationError: If num_runs < 0 or not 1 <= min_size <= max_size
        """
        try:
            return RunConfig.model_validate(self.config.model_dump())
        except ValidationError as e:
            raise ConfigurationError("; ".join(err["msg"] for err in e.errors())) from e

    def run(self) -> None:
        """
        Execute num_runs trials.

        Raises:
            ConfigurationError: Before any trial, on invalid configuration
            PropertyFailedError: When an action raises (after shrinking)
            Exception: Post-check and hook errors, propagated unchanged
        """
        config = self.validate()
        rand = Random(config.seed)
        logger.debug("Running %d trials (seed=%s)", config.num_runs, rand.seed)

        for trial in range(config.num_runs):
            saved_rand = rand.clone()
            if self.on_startup is not None:
                self.on_startup()

            obj = self.initial_gen.generate(rand).value
            model = self.model_factory(obj)
            action_shrs: List[Shrinkable[Action[ObjectType, ModelType]]] = []
            num_actions = rand.interval(config.min_size, config.max_size)
            logger.debug("Trial %d: %d actions", trial, num_actions)

            for _ in range(num_actions):
                action_shr = self.action_gen_factory(obj, model).generate(rand)
                action_shrs.append(action_shr)
                try:
                    action_shr.value.call(obj, model)
                except Exception as e:
                    logger.info("Trial %d failed after %d actions: %s", trial, len(action_shrs), e)
                    shrink_result = self.shrink(saved_rand, action_shrs)
                    failure = compose_failure(e, shrink_result, seed=rand.seed, trial=trial)
                    raise failure from failure.cause

            if self.post_check is not None:
                self.post_check(obj, model)
            if self.on_cleanup is not None:
                self.on_cleanup()

    def shrink(
        self,
        rand: Random,
        action_shrs: List[Shrinkable[Action[ObjectType, ModelType]]],
    ) -> ShrinkResult:
        """Search for a smaller failing sequence (see shrink_actions)."""
        return shrink_actions(self, rand, action_shrs)


def _as_factory(
    action_gen: Union[Generator[Any], Callable[..., Generator[Any]]],
    arity: int,
) -> Callable[..., Generator[Any]]:
    # A bare generator ignores the current state
    if isinstance(action_gen, Generator):
        if arity == 1:
            return lambda obj: action_gen
        return lambda obj, model: action_gen
    return action_gen


def stateful_property(
    initial_gen: Generator[ObjectType],
    model_factory: Callable[[ObjectType], ModelType],
    action_gen_factory: Union[ActionGenFactory, Generator[Action[ObjectType, ModelType]]],
) -> StatefulProperty[ObjectType, ModelType]:
    """
    Build a property with a model.

    action_gen_factory may be a plain Generator when the next action does
    not depend on the current state.
    """
    return StatefulProperty(initial_gen, model_factory, _as_factory(action_gen_factory, 2))


def simple_stateful_property(
    initial_gen: Generator[ObjectType],
    simple_action_gen_factory: Union[SimpleActionGenFactory, Generator[SimpleAction[ObjectType]]],
) -> StatefulProperty[ObjectType, Any]:
    """
    Build a property without a model.

    Simple actions are adapted to full actions over the shared EMPTY_MODEL.
    """
    factory = _as_factory(simple_action_gen_factory, 1)

    def action_gen_factory(obj: ObjectType, _model: Any) -> Generator[Action[ObjectType, Any]]:
        return factory(obj).map(Action.from_simple)

    return StatefulProperty(initial_gen, lambda _obj: EMPTY_MODEL, action_gen_factory)
