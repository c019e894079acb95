"""deviceparts - Settings core for a phone's vendor parts app."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("deviceparts")
except PackageNotFoundError:
    __version__ = "0+local"
from deviceparts.config import PartsConfig
from deviceparts.dependency import (
    DependencyState,
    DependencyTracker,
    DependentPreferenceBinder,
    Reconciliation,
    SwitchState,
    reconcile,
    update_dependent_preference,
)
from deviceparts.doze import DozeController
from deviceparts.exceptions import (
    NodeIOError,
    NodeWriteError,
    PartsConfigError,
    PartsError,
    PreferenceStoreError,
    PreferenceWriteError,
)
from deviceparts.intents import Intent
from deviceparts.preferences import JsonPreferenceStore, MemoryPreferenceStore
from deviceparts.session import PartsSession

__all__ = [
    "__version__",
    "DependencyState",
    "DependencyTracker",
    "DependentPreferenceBinder",
    "DozeController",
    "Intent",
    "JsonPreferenceStore",
    "MemoryPreferenceStore",
    "NodeIOError",
    "NodeWriteError",
    "PartsConfig",
    "PartsConfigError",
    "PartsError",
    "PartsSession",
    "PreferenceStoreError",
    "PreferenceWriteError",
    "Reconciliation",
    "SwitchState",
    "reconcile",
    "update_dependent_preference",
]
