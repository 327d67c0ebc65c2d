"""
Run configuration for stateful properties.

Environment Variables:
    STATEPROP_SEED: Default seed string - default: "" (non-deterministic)
    STATEPROP_NUM_RUNS: Default number of trials - default: 100

Setters on StatefulProperty record values without validating; run()
validates the whole configuration once, before any trial.
"""

import os

from pydantic import BaseModel, model_validator

DEFAULT_NUM_RUNS = 100
DEFAULT_MIN_SIZE = 1
DEFAULT_MAX_SIZE = 100


class RunConfig(BaseModel):
    """
    Validated run settings.

    Fields:
        seed: Seed string (empty = non-deterministic)
        num_runs: Number of independent trials
        min_size: Minimum action sequence length (>= 1)
        max_size: Maximum action sequence length (>= min_size)
    """
    seed: str = ""
    num_runs: int = DEFAULT_NUM_RUNS
    min_size: int = DEFAULT_MIN_SIZE
    max_size: int = DEFAULT_MAX_SIZE

    @model_validator(mode="after")
    def check_bounds(self) -> "RunConfig":
        if self.num_runs < 0:
            raise ValueError(f"invalid numRuns: {self.num_runs}")
        if self.min_size <= 0 or self.min_size > self.max_size:
            raise ValueError(f"invalid minSize or maxSize: {self.min_size}, {self.max_size}")
        return self

    @staticmethod
    def from_env() -> "RunConfig":
        """
        Defaults taken from the environment.

        Not validated here. An unparseable STATEPROP_NUM_RUNS falls back to
        the default; a negative one is rejected by run().
        """
        try:
            num_runs = int(os.getenv("STATEPROP_NUM_RUNS", ""))
        except ValueError:
            num_runs = DEFAULT_NUM_RUNS
        return RunConfig.model_construct(
            seed=os.getenv("STATEPROP_SEED", ""),
            num_runs=num_runs,
            min_size=DEFAULT_MIN_SIZE,
            max_size=DEFAULT_MAX_SIZE,
        )
