"""
Replay system for shrink candidate evaluation.

Replay regenerates the initial subject from a random source snapshot and
re-executes a candidate action sequence. Must be 100% reproducible: same
snapshot and actions -> same outcome.
"""

from .runner import ReplayResult, replay

__all__ = [
    "ReplayResult",
    "replay",
]
