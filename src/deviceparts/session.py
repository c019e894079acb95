"""Settings screen session wiring."""

from __future__ import annotations

import logging

from deviceparts._constants import GESTURE_KEYS
from deviceparts.config import PartsConfig, configure_logging
from deviceparts.dependency.binding import DependentPreferenceBinder, ToggleView
from deviceparts.dependency.records import Reconciliation
from deviceparts.doze import DozeController, SecureSettings, ServiceController
from deviceparts.intents import Broadcaster
from deviceparts.preferences import PreferenceStore, open_store

_logger = logging.getLogger(__name__)


class PartsSession:
    """One settings screen session.

    Owns the preference store, the doze controller and a fresh dependency
    binder, so remembered toggle values never leak between screens.
    """

    def __init__(
        self,
        config: PartsConfig,
        store: PreferenceStore,
        settings: SecureSettings,
        services: ServiceController,
        broadcaster: Broadcaster,
    ) -> None:
        self.config = config
        self.store = store
        self.doze = DozeController(store, settings, services, broadcaster)
        self.binder = DependentPreferenceBinder(
            store,
            self.doze,
            write_attempts=config.store_write_attempts,
        )

    @classmethod
    def open(
        cls,
        config: PartsConfig,
        settings: SecureSettings,
        services: ServiceController,
        broadcaster: Broadcaster,
    ) -> PartsSession:
        """Open a session backed by the store configured in *config*."""
        configure_logging(config)
        return cls(config, open_store(config.preferences_path), settings, services, broadcaster)

    def bind_gestures(self, views: dict[str, ToggleView]) -> None:
        """Bind the gesture toggles shown on the doze screen."""
        for key, view in views.items():
            if key not in GESTURE_KEYS:
                raise KeyError(f"{key!r} is not a gesture preference")
            self.binder.bind(key, view)

    def on_doze_changed(self, enabled: bool) -> dict[str, Reconciliation]:
        """Apply a change of the ambient display master switch.

        The doze service is resynced even when a dependent toggle could not
        be persisted; the write failure is re-raised afterwards.
        """
        self.doze.enable_doze(enabled)
        try:
            return self.binder.refresh_all()
        finally:
            self.doze.check_doze_service()

    def on_gesture_changed(self, key: str, enabled: bool) -> bool:
        """Persist a gesture toggle and resync the doze service.

        Returns ``True`` if the doze service is running afterwards.
        """
        _logger.debug("%s set to %s", key, enabled)
        self.store.put_bool(key, enabled)
        return self.doze.check_doze_service()
