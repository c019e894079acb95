"""Apply reconciliation results to toggles and the preference store."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Protocol

from deviceparts.dependency.records import Reconciliation
from deviceparts.dependency.tracker import DependencyTracker
from deviceparts.exceptions import PreferenceWriteError
from deviceparts.preferences import PreferenceStore

_logger = logging.getLogger(__name__)


class ToggleView(Protocol):
    """The switch widget showing a boolean preference."""

    def is_enabled(self) -> bool: ...

    def set_enabled(self, enabled: bool) -> None: ...

    def set_checked(self, checked: bool) -> None: ...


class DependencyEvaluator(Protocol):
    def is_met(self, key: str) -> bool: ...


class SwitchState:
    """Plain in-memory toggle."""

    def __init__(self, *, checked: bool = False, enabled: bool = True) -> None:
        self.checked = checked
        self.enabled = enabled

    def is_enabled(self) -> bool:
        return self.enabled

    def set_enabled(self, enabled: bool) -> None:
        self.enabled = enabled

    def set_checked(self, checked: bool) -> None:
        self.checked = checked

    def __repr__(self) -> str:
        return f"SwitchState(checked={self.checked}, enabled={self.enabled})"


def _write_with_retry(store: PreferenceStore, key: str, value: bool, attempts: int) -> None:
    for attempt in range(1, attempts + 1):
        try:
            store.put_bool(key, value)
            return
        except PreferenceWriteError as exc:
            if attempt == attempts:
                _logger.error("Giving up persisting %s=%s after %d attempts: %s", key, value, attempts, exc)
                raise
            _logger.warning("Persisting %s=%s failed (attempt %d/%d): %s", key, value, attempt, attempts, exc)


def update_dependent_preference(
    tracker: DependencyTracker,
    store: PreferenceStore,
    view: ToggleView,
    key: str,
    dependency_met: bool,
    *,
    write_attempts: int = 1,
) -> Reconciliation:
    """Reconcile one dependent toggle.

    The projection is always applied to *view*. A requested store write
    is attempted up to *write_attempts* times. A restore is only committed
    once its write succeeded. A forced-off record is committed even when
    the write fails, so the remembered value survives a later retry.

    Raises
    ------
    PreferenceWriteError
        If the store write kept failing. The view has already been updated.
    """
    result = tracker.plan(
        key,
        dependency_met=dependency_met,
        stored_value=store.get_bool(key, False),
        toggle_enabled=view.is_enabled(),
    )

    view.set_enabled(result.display_enabled)
    view.set_checked(result.display_checked)

    if result.store_update is not None:
        try:
            _write_with_retry(store, key, result.store_update, write_attempts)
        except PreferenceWriteError:
            if result.state is not None and result.state.was_forced_off:
                tracker.commit(key, result)
            raise

    tracker.commit(key, result)
    return result


class DependentPreferenceBinder:
    """Keeps a screen's dependent toggles in line with their dependencies."""

    def __init__(
        self,
        store: PreferenceStore,
        evaluator: DependencyEvaluator,
        *,
        tracker: DependencyTracker | None = None,
        write_attempts: int = 1,
    ) -> None:
        self._store = store
        self._evaluator = evaluator
        self._tracker = tracker if tracker is not None else DependencyTracker()
        self._write_attempts = write_attempts
        self._views: dict[str, ToggleView] = {}

    @property
    def tracker(self) -> DependencyTracker:
        return self._tracker

    def bind(self, key: str, view: ToggleView) -> None:
        self._views[key] = view

    def unbind(self, key: str) -> None:
        self._views.pop(key, None)

    def refresh(self, key: str) -> Reconciliation:
        """Re-evaluate the dependency of *key* and update its toggle."""
        view = self._views[key]
        return update_dependent_preference(
            self._tracker,
            self._store,
            view,
            key,
            self._evaluator.is_met(key),
            write_attempts=self._write_attempts,
        )

    def refresh_all(self, keys: Iterable[str] | None = None) -> dict[str, Reconciliation]:
        """Refresh every bound toggle (or just *keys*).

        A failed store write for one key is logged and does not stop the
        remaining keys from being refreshed; the failures are re-raised
        together once all keys were processed.
        """
        results: dict[str, Reconciliation] = {}
        failures: list[PreferenceWriteError] = []
        for key in list(keys if keys is not None else self._views):
            try:
                results[key] = self.refresh(key)
            except PreferenceWriteError as exc:
                failures.append(exc)
        if failures:
            failed = ", ".join(exc.key for exc in failures)
            raise PreferenceWriteError(
                f"Could not persist dependent preferences: {failed}",
                key=failures[0].key,
            ) from failures[0]
        return results
