"""Single-line sysfs node access.

Kernel drivers expose device switches (button swap, backlight, gesture
enablement) as files holding one line of text. These helpers read the
first line of such a file and write a raw value back.
"""

from __future__ import annotations

import logging
import os

from deviceparts.exceptions import NodeWriteError

_logger = logging.getLogger(__name__)


def read_line(path: str | None) -> str | None:
    """Return the first line of *path* without its line terminator.

    Returns ``None`` when *path* is ``None`` or the file cannot be read.
    """
    if path is None:
        return None
    try:
        with open(path, encoding="utf-8") as fh:
            line = fh.readline()
    except OSError as exc:
        _logger.debug("Could not read node %s: %s", path, exc)
        return None
    return line.rstrip("\r\n")


def get_file_value(path: str | None, default: str) -> str:
    """Read the node value, falling back to *default*."""
    value = read_line(path)
    if value is not None:
        return value
    return default


def write_value(path: str, value: str) -> None:
    """Write *value* to the node at *path*.

    Raises
    ------
    NodeWriteError
        If the node is missing or not writable.
    """
    try:
        with open(path, "w", encoding="utf-8") as fh:
            fh.write(value)
            fh.flush()
    except OSError as exc:
        raise NodeWriteError(f"Failed to write {value!r} to {path}: {exc}", path=path) from exc
    _logger.debug("Wrote %r to %s", value, path)


def file_exists(path: str) -> bool:
    return os.path.exists(path)


def file_writable(path: str) -> bool:
    return file_exists(path) and os.access(path, os.W_OK)
