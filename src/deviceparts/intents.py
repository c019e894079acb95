"""Broadcast intents sent by the parts app."""

from __future__ import annotations

from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict, Field, field_validator

from deviceparts._constants import CUST_INTENT_ACTION, CUST_INTENT_EXTRA, DOZE_PULSE_ACTION


class Intent(BaseModel):
    """An action plus optional extras delivered to the current user."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    action: str
    extras: dict[str, Any] = Field(default_factory=dict)

    @field_validator("action")
    @classmethod
    def _normalize_action(cls, value: str) -> str:
        action = value.strip()
        if not action:
            raise ValueError("action must be non-empty")
        return action


class Broadcaster(Protocol):
    def send_broadcast(self, intent: Intent) -> None: ...


def doze_pulse_intent() -> Intent:
    return Intent(action=DOZE_PULSE_ACTION)


def cust_intent(value: bool) -> Intent:
    return Intent(action=CUST_INTENT_ACTION, extras={CUST_INTENT_EXTRA: value})


def broadcast_cust_intent(broadcaster: Broadcaster, value: bool) -> None:
    """Notify listeners that a customization toggle changed to *value*."""
    broadcaster.send_broadcast(cust_intent(value))
