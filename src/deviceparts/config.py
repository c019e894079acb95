"""Runtime configuration for deviceparts."""

from __future__ import annotations

import dataclasses
import logging
import os
from typing import Any

from deviceparts.exceptions import PartsConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class PartsConfig:
    """Settings core configuration.

    Parameters
    ----------
    preferences_path : str or None
        Path of the JSON file backing :class:`JsonPreferenceStore`.
        ``None`` keeps preferences in memory only.
    store_write_attempts : int
        How many times a preference write requested by dependency
        reconciliation is attempted before giving up.
    debug : bool
        Log transitions and service changes at DEBUG level.
    """

    preferences_path: str | None = None
    store_write_attempts: int = 2
    debug: bool = False

    def __post_init__(self) -> None:
        if self.store_write_attempts < 1:
            raise PartsConfigError("store_write_attempts must be at least 1")

    @classmethod
    def from_env(cls, **overrides: Any) -> PartsConfig:
        """Create configuration from ``DEVICEPARTS_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        path_env = env.get("DEVICEPARTS_PREFERENCES_PATH")
        if path_env:
            config_kwargs["preferences_path"] = path_env

        attempts_env = env.get("DEVICEPARTS_STORE_WRITE_ATTEMPTS")
        if attempts_env is not None and "store_write_attempts" not in overrides:
            try:
                config_kwargs["store_write_attempts"] = int(attempts_env)
            except ValueError as exc:
                raise PartsConfigError(f"DEVICEPARTS_STORE_WRITE_ATTEMPTS is not an integer: {attempts_env!r}") from exc

        if "debug" not in overrides:
            config_kwargs["debug"] = _env_bool(env.get("DEVICEPARTS_DEBUG"), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)


def configure_logging(config: PartsConfig) -> None:
    """Set the package logger level from *config*."""
    logging.getLogger("deviceparts").setLevel(logging.DEBUG if config.debug else logging.INFO)
