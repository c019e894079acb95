"""Persisted user preferences.

The platform owns the actual settings storage. This module defines the
:class:`PreferenceStore` contract the rest of the package talks to, two
concrete stores, and the default-value lookups backed by
:data:`deviceparts._constants.NODE_DEFAULTS`.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from collections.abc import Mapping
from typing import Any, Protocol

from pydantic import TypeAdapter, ValidationError

from deviceparts._constants import NODE_DEFAULTS
from deviceparts.exceptions import PreferenceStoreError, PreferenceWriteError

_logger = logging.getLogger(__name__)

PreferenceValue = bool | int | str
_VALUES_ADAPTER: TypeAdapter[dict[str, PreferenceValue]] = TypeAdapter(dict[str, PreferenceValue])


class PreferenceStore(Protocol):
    """Structural interface of a key/value preference backend."""

    def contains(self, key: str) -> bool: ...

    def get_bool(self, key: str, default: bool) -> bool: ...

    def put_bool(self, key: str, value: bool) -> None: ...

    def get_string(self, key: str, default: str | None) -> str | None: ...

    def put_string(self, key: str, value: str) -> None: ...


class MemoryPreferenceStore:
    """Dict-backed store, used for tests and sessions without persistence."""

    def __init__(self, values: Mapping[str, PreferenceValue] | None = None) -> None:
        self._values: dict[str, PreferenceValue] = dict(values or {})

    def contains(self, key: str) -> bool:
        return key in self._values

    def get_bool(self, key: str, default: bool) -> bool:
        value = self._values.get(key)
        if isinstance(value, bool):
            return value
        return default

    def put_bool(self, key: str, value: bool) -> None:
        self._values[key] = bool(value)

    def get_string(self, key: str, default: str | None) -> str | None:
        value = self._values.get(key)
        if isinstance(value, str):
            return value
        return default

    def put_string(self, key: str, value: str) -> None:
        self._values[key] = value

    def as_dict(self) -> dict[str, PreferenceValue]:
        return dict(self._values)


class JsonPreferenceStore(MemoryPreferenceStore):
    """Store persisted as a flat JSON object.

    The file is read on first access and rewritten atomically after
    every put. A missing file is treated as an empty store.
    """

    def __init__(self, path: str) -> None:
        super().__init__()
        self._path = path
        self._loaded = False

    @property
    def path(self) -> str:
        return self._path

    def _ensure_loaded(self) -> None:
        if self._loaded:
            return
        try:
            with open(self._path, encoding="utf-8") as fh:
                raw = json.load(fh)
        except FileNotFoundError:
            raw = {}
        except (OSError, json.JSONDecodeError) as exc:
            raise PreferenceStoreError(f"Could not load preferences from {self._path}: {exc}") from exc
        try:
            self._values = _VALUES_ADAPTER.validate_python(raw, strict=True)
        except ValidationError as exc:
            raise PreferenceStoreError(f"Malformed preferences file {self._path}") from exc
        self._loaded = True

    def _flush(self, key: str) -> None:
        directory = os.path.dirname(os.path.abspath(self._path))
        try:
            fd, tmp_path = tempfile.mkstemp(prefix=".prefs-", suffix=".json", dir=directory)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    json.dump(self._values, fh, indent=2, sort_keys=True)
                os.replace(tmp_path, self._path)
            except BaseException:
                os.unlink(tmp_path)
                raise
        except OSError as exc:
            raise PreferenceWriteError(f"Could not persist {key!r} to {self._path}: {exc}", key=key) from exc

    def _put(self, key: str, value: PreferenceValue) -> None:
        self._ensure_loaded()
        previous = self._values.get(key)
        had_key = key in self._values
        self._values[key] = value
        try:
            self._flush(key)
        except PreferenceWriteError:
            # Keep memory in line with what is on disk.
            if had_key:
                self._values[key] = previous  # type: ignore[assignment]
            else:
                del self._values[key]
            raise

    def contains(self, key: str) -> bool:
        self._ensure_loaded()
        return super().contains(key)

    def get_bool(self, key: str, default: bool) -> bool:
        self._ensure_loaded()
        return super().get_bool(key, default)

    def put_bool(self, key: str, value: bool) -> None:
        self._put(key, bool(value))

    def get_string(self, key: str, default: str | None) -> str | None:
        self._ensure_loaded()
        return super().get_string(key, default)

    def put_string(self, key: str, value: str) -> None:
        self._put(key, value)

    def as_dict(self) -> dict[str, PreferenceValue]:
        self._ensure_loaded()
        return super().as_dict()


def default_for(key: str) -> Any:
    """Return the shipped default for *key*, or ``None`` if unknown."""
    return NODE_DEFAULTS.get(key)


def is_preference_enabled(store: PreferenceStore, key: str) -> bool:
    """Stored boolean for *key*, falling back to the node default."""
    default = default_for(key)
    return store.get_bool(key, bool(default) if isinstance(default, bool) else False)


def get_preference_string(store: PreferenceStore, key: str) -> str | None:
    """Stored string for *key*, falling back to the node default."""
    default = default_for(key)
    return store.get_string(key, default if isinstance(default, str) else None)


def open_store(path: str | None) -> PreferenceStore:
    """Return a JSON store for *path*, or an in-memory store when ``None``."""
    if path is None:
        _logger.debug("No preferences path configured; using in-memory store")
        return MemoryPreferenceStore()
    return JsonPreferenceStore(path)
