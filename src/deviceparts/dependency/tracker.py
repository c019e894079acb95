"""Per-session memory of dependent toggles."""

from __future__ import annotations

import logging

from deviceparts.dependency.policy import reconcile
from deviceparts.dependency.records import DependencyState, Reconciliation

_logger = logging.getLogger(__name__)


class DependencyTracker:
    """Holds the :class:`DependencyState` of every key seen in a session.

    Create one tracker per settings screen session and pass it to the code
    that refreshes the screen's toggles. The tracker is not thread-safe;
    callers serialize access.
    """

    def __init__(self) -> None:
        self._states: dict[str, DependencyState] = {}

    def get(self, key: str) -> DependencyState | None:
        return self._states.get(key)

    def is_forced_off(self, key: str) -> bool:
        state = self._states.get(key)
        return state is not None and state.was_forced_off

    def snapshot(self) -> dict[str, DependencyState]:
        return dict(self._states)

    def plan(
        self,
        key: str,
        *,
        dependency_met: bool,
        stored_value: bool,
        toggle_enabled: bool,
    ) -> Reconciliation:
        """Compute the reconciliation for *key* without recording it."""
        return reconcile(
            self._states.get(key),
            dependency_met=dependency_met,
            stored_value=stored_value,
            toggle_enabled=toggle_enabled,
        )

    def commit(self, key: str, result: Reconciliation) -> None:
        """Record the state carried by *result* for *key*."""
        if result.state is None:
            return
        previous = self._states.get(key)
        self._states[key] = result.state
        if previous is None or previous.was_forced_off != result.state.was_forced_off:
            _logger.debug(
                "%s: %s", key, "forced off" if result.state.was_forced_off else "available"
            )

    def reconcile(
        self,
        key: str,
        *,
        dependency_met: bool,
        stored_value: bool,
        toggle_enabled: bool,
    ) -> Reconciliation:
        """Plan and immediately commit the reconciliation for *key*."""
        result = self.plan(
            key,
            dependency_met=dependency_met,
            stored_value=stored_value,
            toggle_enabled=toggle_enabled,
        )
        self.commit(key, result)
        return result
