"""
Stateful Property Testing Engine

Model-based property testing: drives random action sequences against a real
subject and a parallel model, and shrinks failing sequences to a minimal,
replayable reproduction.
"""

__version__ = "0.1.0"

from .core import Random, Shrinkable, Generator
from .core.errors import (
    StatePropError,
    ConfigurationError,
    GenerationError,
    PropertyFailedError,
)
from .stateful import (
    Action,
    SimpleAction,
    EMPTY_MODEL,
    StatefulProperty,
    ShrinkResult,
    stateful_property,
    simple_stateful_property,
)

__all__ = [
    "Random",
    "Shrinkable",
    "Generator",
    "StatePropError",
    "ConfigurationError",
    "GenerationError",
    "PropertyFailedError",
    "Action",
    "SimpleAction",
    "EMPTY_MODEL",
    "StatefulProperty",
    "ShrinkResult",
    "stateful_property",
    "simple_stateful_property",
]
