"""Records exchanged between the reconciliation policy and its callers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class DependencyState(BaseModel):
    """What the tracker remembers about one dependent toggle."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    last_known_value: bool = Field(..., description="Value to restore once the dependency is met")
    was_forced_off: bool = Field(..., description="Toggle is currently forced off")


class Reconciliation(BaseModel):
    """Outcome of one dependency check.

    ``display_checked``/``display_enabled`` are what the toggle should
    show. ``store_update`` is the value to persist, if any. ``state`` is
    the record to keep for the key afterwards; ``None`` means the record
    is left as it was.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    display_checked: bool
    display_enabled: bool
    store_update: bool | None = None
    state: DependencyState | None = None

    @property
    def forced_off(self) -> bool:
        return not self.display_enabled
