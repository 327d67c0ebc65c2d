"""
Exception types for the stateful property engine.
"""

from typing import Any, List, Optional


class StatePropError(Exception):
    """Base class for all engine errors."""
    pass


class ConfigurationError(StatePropError, ValueError):
    """Raised when run configuration is invalid (checked before any trial)."""
    pass


class GenerationError(StatePropError):
    """Raised when a generator cannot produce a value."""
    pass


class PropertyFailedError(StatePropError, AssertionError):
    """
    Composed failure report for a mid-sequence action failure.

    Fields:
        initial: Initial subject of the (possibly shrunk) reproduction
        actions: Action values of the (possibly shrunk) reproduction
        shrunk: True when shrinking found a smaller reproduction
        cause: Exception attached for diagnostics (shrunk failure or original)
        original: Exception raised by the original failing action
        seed: Seed string of the run
        trial: 0-based index of the failing trial
    """

    def __init__(
        self,
        message: str,
        initial: Any = None,
        actions: Optional[List[Any]] = None,
        shrunk: bool = False,
        cause: Optional[BaseException] = None,
        original: Optional[BaseException] = None,
        seed: str = "",
        trial: int = 0,
    ) -> None:
        super().__init__(message)
        self.initial = initial
        self.actions = list(actions or [])
        self.shrunk = shrunk
        self.cause = cause
        self.original = original
        self.seed = seed
        self.trial = trial
