"""
Failure composition: turn a shrink result into a diagnosable error.
"""

from ..core.canonical import serialize
from ..core.errors import PropertyFailedError
from .shrink import ShrinkResult

SHRUNK_LABEL = "stateful property failed (simplest args found by shrinking)"
ORIGINAL_LABEL = "stateful property failed (args found)"


def compose_failure(
    error: Exception,
    shrink_result: ShrinkResult,
    seed: str = "",
    trial: int = 0,
) -> PropertyFailedError:
    """
    Build the error raised for a mid-sequence action failure.

    The attached cause is the minimized replay's exception when shrinking
    improved, otherwise the original exception. The caller raises the
    result with `raise ... from result.cause`.

    Args:
        error: Exception raised by the original failing action
        shrink_result: Outcome of the shrink search
        seed: Seed string of the run
        trial: Index of the failing trial

    Returns:
        PropertyFailedError carrying the reproduction
    """
    shrunk = shrink_result.successful
    cause = shrink_result.cause if shrunk else error
    label = SHRUNK_LABEL if shrunk else ORIGINAL_LABEL

    lines = [
        f"{label}: {serialize(shrink_result.initial)}, {serialize(shrink_result.actions)}",
        f"  {type(cause).__name__}: {cause}",
        f"  seed: {seed}",
    ]
    return PropertyFailedError(
        "\n".join(lines),
        initial=shrink_result.initial,
        actions=shrink_result.actions,
        shrunk=shrunk,
        cause=cause,
        original=error,
        seed=seed,
        trial=trial,
    )
