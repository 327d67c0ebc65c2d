"""
Shrink strategies.

- shrink_integer: Integer shrink tree toward a target value
- shrinkable_array: Array shrink tree over element nodes with a length floor
"""

from .integer import shrink_integer, integer_candidates
from .array import shrinkable_array

__all__ = [
    "shrink_integer",
    "integer_candidates",
    "shrinkable_array",
]
