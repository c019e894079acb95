"""Preference keys, intent actions and node defaults."""

from __future__ import annotations

from typing import Any

# Gesture toggles on the doze screen.
GESTURE_PICK_UP_KEY = "gesture_pick_up"
GESTURE_HAND_WAVE_KEY = "gesture_hand_wave"
GESTURE_POCKET_KEY = "gesture_pocket"

GESTURE_KEYS: tuple[str, ...] = (
    GESTURE_PICK_UP_KEY,
    GESTURE_HAND_WAVE_KEY,
    GESTURE_POCKET_KEY,
)

# Button customization screen.
BUTTON_SWAP_KEY = "button_swap"
BUTTON_BACKLIGHT_KEY = "button_backlight"

DOZE_ENABLED_SETTING = "doze_enabled"
DOZE_SERVICE = "org.omnirom.device.DozeService"
SYSTEMUI_PACKAGE = "com.android.systemui"
PROX_CHECK_BEFORE_PULSE_RES = "doze_proximity_check_before_pulse"

DOZE_PULSE_ACTION = "com.android.systemui.doze.pulse"
CUST_INTENT_ACTION = "org.omnirom.device.CUST_UPDATE"
CUST_INTENT_EXTRA = "enabled"

#: Default value for every known preference key, used when the store
#: holds no value yet.
NODE_DEFAULTS: dict[str, Any] = {
    GESTURE_PICK_UP_KEY: False,
    GESTURE_HAND_WAVE_KEY: False,
    GESTURE_POCKET_KEY: False,
    BUTTON_SWAP_KEY: False,
    BUTTON_BACKLIGHT_KEY: True,
}
