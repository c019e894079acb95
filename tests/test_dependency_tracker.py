from __future__ import annotations

from deviceparts._constants import GESTURE_PICK_UP_KEY
from deviceparts.dependency.records import DependencyState
from deviceparts.dependency.tracker import DependencyTracker


def test_pick_up_gesture_forced_off_then_restored() -> None:
    tracker = DependencyTracker()

    forced = tracker.reconcile(GESTURE_PICK_UP_KEY, dependency_met=False, stored_value=True, toggle_enabled=True)
    assert (forced.display_checked, forced.display_enabled) == (False, False)
    assert tracker.get(GESTURE_PICK_UP_KEY) == DependencyState(last_known_value=True, was_forced_off=True)
    assert tracker.is_forced_off(GESTURE_PICK_UP_KEY)

    restored = tracker.reconcile(GESTURE_PICK_UP_KEY, dependency_met=True, stored_value=True, toggle_enabled=False)
    assert (restored.display_checked, restored.display_enabled) == (True, True)
    assert tracker.get(GESTURE_PICK_UP_KEY) == DependencyState(last_known_value=True, was_forced_off=False)
    assert not tracker.is_forced_off(GESTURE_PICK_UP_KEY)


def test_repeated_unmet_checks_are_idempotent() -> None:
    tracker = DependencyTracker()

    first = tracker.reconcile("gesture_pocket", dependency_met=False, stored_value=True, toggle_enabled=True)
    record = tracker.get("gesture_pocket")
    second = tracker.reconcile("gesture_pocket", dependency_met=False, stored_value=True, toggle_enabled=True)

    assert first == second
    assert tracker.get("gesture_pocket") == record


def test_plan_does_not_record_state() -> None:
    tracker = DependencyTracker()

    result = tracker.plan("gesture_hand_wave", dependency_met=False, stored_value=True, toggle_enabled=True)

    assert result.state is not None
    assert tracker.get("gesture_hand_wave") is None
    tracker.commit("gesture_hand_wave", result)
    assert tracker.is_forced_off("gesture_hand_wave")


def test_trackers_do_not_share_state() -> None:
    first = DependencyTracker()
    second = DependencyTracker()

    first.reconcile("gesture_pocket", dependency_met=False, stored_value=True, toggle_enabled=True)

    assert second.get("gesture_pocket") is None
    assert second.snapshot() == {}
    assert set(first.snapshot()) == {"gesture_pocket"}
