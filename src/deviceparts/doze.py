"""Gesture flags and the always-on doze service.

The doze service listens to the proximity/tilt sensors and pulses the
ambient display. It only needs to run while ambient display is enabled
and at least one gesture (pick-up, hand-wave, pocket) is turned on.
"""

from __future__ import annotations

import logging
from typing import Protocol

from deviceparts._constants import (
    DOZE_ENABLED_SETTING,
    DOZE_SERVICE,
    GESTURE_HAND_WAVE_KEY,
    GESTURE_KEYS,
    GESTURE_PICK_UP_KEY,
    GESTURE_POCKET_KEY,
    PROX_CHECK_BEFORE_PULSE_RES,
    SYSTEMUI_PACKAGE,
)
from deviceparts.intents import Broadcaster, doze_pulse_intent
from deviceparts.preferences import PreferenceStore

_logger = logging.getLogger(__name__)


class SecureSettings(Protocol):
    """Integer-valued secure system settings."""

    def get_int(self, name: str, default: int) -> int: ...

    def put_int(self, name: str, value: int) -> bool: ...


class ServiceController(Protocol):
    def start_service(self, name: str) -> None: ...

    def stop_service(self, name: str) -> None: ...


class ResourceLookup(Protocol):
    def get_bool(self, package: str, name: str) -> bool:
        """Return a boolean resource, raising ``LookupError`` when absent."""
        ...


def prox_check_before_pulse(resources: ResourceLookup) -> bool:
    """Whether systemui checks the proximity sensor before pulsing."""
    try:
        return resources.get_bool(SYSTEMUI_PACKAGE, PROX_CHECK_BEFORE_PULSE_RES)
    except LookupError:
        return False


class DozeController:
    """Ties gesture preferences to the doze setting and service."""

    def __init__(
        self,
        preferences: PreferenceStore,
        settings: SecureSettings,
        services: ServiceController,
        broadcaster: Broadcaster,
    ) -> None:
        self._preferences = preferences
        self._settings = settings
        self._services = services
        self._broadcaster = broadcaster

    def pick_up_enabled(self) -> bool:
        return self._preferences.get_bool(GESTURE_PICK_UP_KEY, False)

    def hand_wave_enabled(self) -> bool:
        return self._preferences.get_bool(GESTURE_HAND_WAVE_KEY, False)

    def pocket_enabled(self) -> bool:
        return self._preferences.get_bool(GESTURE_POCKET_KEY, False)

    def sensors_enabled(self) -> bool:
        """True when any gesture is enabled."""
        return self.pick_up_enabled() or self.hand_wave_enabled() or self.pocket_enabled()

    def is_doze_enabled(self) -> bool:
        return self._settings.get_int(DOZE_ENABLED_SETTING, 1) != 0

    def enable_doze(self, enable: bool) -> bool:
        return self._settings.put_int(DOZE_ENABLED_SETTING, 1 if enable else 0)

    def start_service(self) -> None:
        _logger.debug("Starting %s", DOZE_SERVICE)
        self._services.start_service(DOZE_SERVICE)

    def stop_service(self) -> None:
        _logger.debug("Stopping %s", DOZE_SERVICE)
        self._services.stop_service(DOZE_SERVICE)

    def check_doze_service(self) -> bool:
        """Start or stop the doze service to match current settings.

        Returns ``True`` if the service was started.
        """
        if self.is_doze_enabled() and self.sensors_enabled():
            self.start_service()
            return True
        self.stop_service()
        return False

    def launch_doze_pulse(self) -> None:
        _logger.debug("Launching doze pulse")
        self._broadcaster.send_broadcast(doze_pulse_intent())

    def is_met(self, key: str) -> bool:
        """Dependency condition for toggles gated by ambient display.

        Gesture toggles are only user-controllable while doze is on.
        """
        if key in GESTURE_KEYS:
            return self.is_doze_enabled()
        return True
