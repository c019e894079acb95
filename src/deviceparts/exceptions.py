"""Custom exception hierarchy for deviceparts."""

from __future__ import annotations


class PartsError(Exception):
    """Base exception for all deviceparts errors."""


class PartsConfigError(PartsError):
    """Invalid or missing configuration."""


class NodeIOError(PartsError):
    """Sysfs node could not be accessed."""

    def __init__(self, message: str, *, path: str = "") -> None:
        self.path = path
        super().__init__(message)


class NodeWriteError(NodeIOError):
    """Writing a value to a sysfs node failed."""


class PreferenceStoreError(PartsError):
    """Preference backend could not be read."""


class PreferenceWriteError(PreferenceStoreError):
    """Persisting a preference value failed.

    Raised after the configured number of write attempts is exhausted.
    A failed restore leaves the dependency tracker's record for *key*
    unchanged; a failed force-off still records the remembered value.
    """

    def __init__(self, message: str, *, key: str = "") -> None:
        self.key = key
        super().__init__(message)
