"""
Core primitives for reproducible generation.

This module provides the building blocks the stateful engine consumes:
- Random: Seedable, cloneable pseudo-random source
- Shrinkable: Lazy shrink tree node
- Generator: Random -> Shrinkable producer
- Canonical: Never-failing diagnostic serialization
- IDs: Stable seed derivation
"""

from .random import Random
from .shrinkable import Shrinkable
from .generator import Generator
from .canonical import canonicalize, canonical_json_str, serialize
from .ids import stable_id, seed_to_int
from .errors import StatePropError, ConfigurationError, GenerationError, PropertyFailedError

__all__ = [
    "Random",
    "Shrinkable",
    "Generator",
    "canonicalize",
    "canonical_json_str",
    "serialize",
    "stable_id",
    "seed_to_int",
    "StatePropError",
    "ConfigurationError",
    "GenerationError",
    "PropertyFailedError",
]
