"""
Stateful (model-based) property testing.

- Action/SimpleAction: Steps over (subject, model) or subject only
- StatefulProperty: Trial loop, shrinking and failure reporting
- ShrinkResult: Outcome of a shrink search
"""

from .action import Action, SimpleAction, EMPTY_MODEL
from .shrink import ShrinkResult, shrink_actions
from .report import compose_failure
from .property import StatefulProperty, stateful_property, simple_stateful_property

__all__ = [
    "Action",
    "SimpleAction",
    "EMPTY_MODEL",
    "ShrinkResult",
    "shrink_actions",
    "compose_failure",
    "StatefulProperty",
    "stateful_property",
    "simple_stateful_property",
]
