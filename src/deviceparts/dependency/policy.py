"""Deterministic reconciliation policy.

This module is pure: it holds no state and performs no I/O. Given the
previous record for a key and the current inputs, it returns what the
toggle should display and what to remember.
"""

from __future__ import annotations

from deviceparts.dependency.records import DependencyState, Reconciliation


def reconcile(
    previous: DependencyState | None,
    *,
    dependency_met: bool,
    stored_value: bool,
    toggle_enabled: bool,
) -> Reconciliation:
    """Compute the toggle projection for one dependency check.

    Policy:
    - Dependency met and the toggle was forced off: restore it checked and
      clear the forced-off flag. If the store lost the remembered value
      meanwhile, persist it again.
    - Dependency met otherwise: show the stored value, nothing to remember.
    - Dependency unmet: always show disabled and unchecked. An enabled,
      checked toggle is remembered as forced off first. A checked value
      is cleared in the store, as a switch forced unchecked would do.
    """
    if dependency_met:
        if previous is not None and previous.was_forced_off:
            store_update = previous.last_known_value if previous.last_known_value != stored_value else None
            return Reconciliation(
                display_checked=True,
                display_enabled=True,
                store_update=store_update,
                state=DependencyState(last_known_value=stored_value, was_forced_off=False),
            )
        return Reconciliation(display_checked=stored_value, display_enabled=True)

    state: DependencyState | None = None
    if toggle_enabled and stored_value:
        state = DependencyState(last_known_value=True, was_forced_off=True)
    return Reconciliation(
        display_checked=False,
        display_enabled=False,
        store_update=False if stored_value else None,
        state=state,
    )
