"""Preference dependency reconciliation.

Decides when a dependent toggle must be forced off because its
dependency is unmet, and remembers the user's last choice so the toggle
can be restored once the dependency is met again.
"""

from deviceparts.dependency.binding import (
    DependencyEvaluator,
    DependentPreferenceBinder,
    SwitchState,
    ToggleView,
    update_dependent_preference,
)
from deviceparts.dependency.policy import reconcile
from deviceparts.dependency.records import DependencyState, Reconciliation
from deviceparts.dependency.tracker import DependencyTracker

__all__ = [
    "DependencyEvaluator",
    "DependencyState",
    "DependencyTracker",
    "DependentPreferenceBinder",
    "Reconciliation",
    "SwitchState",
    "ToggleView",
    "reconcile",
    "update_dependent_preference",
]
