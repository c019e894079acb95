from __future__ import annotations

import json
from pathlib import Path

import pytest

from deviceparts._constants import BUTTON_BACKLIGHT_KEY, GESTURE_PICK_UP_KEY
from deviceparts.exceptions import PreferenceStoreError, PreferenceWriteError
from deviceparts.preferences import (
    JsonPreferenceStore,
    MemoryPreferenceStore,
    get_preference_string,
    is_preference_enabled,
    open_store,
)


def test_is_preference_enabled_falls_back_to_node_default() -> None:
    store = MemoryPreferenceStore()

    assert is_preference_enabled(store, BUTTON_BACKLIGHT_KEY) is True
    assert is_preference_enabled(store, GESTURE_PICK_UP_KEY) is False
    assert is_preference_enabled(store, "unknown_key") is False


def test_stored_value_wins_over_default() -> None:
    store = MemoryPreferenceStore({BUTTON_BACKLIGHT_KEY: False})

    assert is_preference_enabled(store, BUTTON_BACKLIGHT_KEY) is False


def test_get_preference_string() -> None:
    store = MemoryPreferenceStore({"vibrator_strength": "2000"})

    assert get_preference_string(store, "vibrator_strength") == "2000"
    assert get_preference_string(store, "missing") is None


def test_json_store_persists_values(tmp_path: Path) -> None:
    path = tmp_path / "prefs.json"
    store = JsonPreferenceStore(str(path))

    store.put_bool(GESTURE_PICK_UP_KEY, True)
    store.put_string("mode", "auto")

    reopened = JsonPreferenceStore(str(path))
    assert reopened.get_bool(GESTURE_PICK_UP_KEY, False) is True
    assert reopened.get_string("mode", None) == "auto"
    assert json.loads(path.read_text()) == {GESTURE_PICK_UP_KEY: True, "mode": "auto"}


def test_json_store_missing_file_is_empty(tmp_path: Path) -> None:
    store = JsonPreferenceStore(str(tmp_path / "absent.json"))

    assert store.as_dict() == {}
    assert not store.contains(GESTURE_PICK_UP_KEY)


def test_json_store_rejects_corrupt_file(tmp_path: Path) -> None:
    path = tmp_path / "prefs.json"
    path.write_text("{not json")

    with pytest.raises(PreferenceStoreError):
        JsonPreferenceStore(str(path)).get_bool(GESTURE_PICK_UP_KEY, False)


def test_json_store_rejects_nested_values(tmp_path: Path) -> None:
    path = tmp_path / "prefs.json"
    path.write_text(json.dumps({"a": {"b": 1}}))

    with pytest.raises(PreferenceStoreError):
        JsonPreferenceStore(str(path)).as_dict()


def test_json_store_failed_write_rolls_back(tmp_path: Path) -> None:
    store = JsonPreferenceStore(str(tmp_path / "missing_dir" / "prefs.json"))

    with pytest.raises(PreferenceWriteError) as exc_info:
        store.put_bool(GESTURE_PICK_UP_KEY, True)

    assert exc_info.value.key == GESTURE_PICK_UP_KEY
    assert not store.contains(GESTURE_PICK_UP_KEY)


def test_open_store(tmp_path: Path) -> None:
    assert isinstance(open_store(None), MemoryPreferenceStore)
    assert isinstance(open_store(str(tmp_path / "p.json")), JsonPreferenceStore)
