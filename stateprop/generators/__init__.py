"""
Value generators and combinators.

Minimal set used to build subjects and action generators:
- interval/integers: Bounded integers shrinking toward zero
- just: Constant value
- one_of/weighted_gen: Choice among generators
- array_gen: Lists shrinking through the array strategy
"""

from .integer import interval, integers
from .combinator import just, one_of, weighted_gen, Weighted
from .array import array_gen

__all__ = [
    "interval",
    "integers",
    "just",
    "one_of",
    "weighted_gen",
    "Weighted",
    "array_gen",
]
