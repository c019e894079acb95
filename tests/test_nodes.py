from __future__ import annotations

import os
from pathlib import Path

import pytest

from deviceparts.exceptions import NodeWriteError
from deviceparts.nodes import file_exists, file_writable, get_file_value, read_line, write_value


def test_read_line_returns_first_line(tmp_path: Path) -> None:
    node = tmp_path / "enable"
    node.write_text("1\nignored\n")

    assert read_line(str(node)) == "1"


def test_read_line_missing_file_or_none(tmp_path: Path) -> None:
    assert read_line(None) is None
    assert read_line(str(tmp_path / "missing")) is None


def test_get_file_value_falls_back_to_default(tmp_path: Path) -> None:
    node = tmp_path / "mode"
    node.write_text("2\n")

    assert get_file_value(str(node), "0") == "2"
    assert get_file_value(str(tmp_path / "missing"), "0") == "0"


def test_write_value_replaces_content(tmp_path: Path) -> None:
    node = tmp_path / "swap"
    node.write_text("0\n")

    write_value(str(node), "1")

    assert node.read_text() == "1"


def test_write_value_to_missing_directory_raises(tmp_path: Path) -> None:
    path = str(tmp_path / "missing" / "node")

    with pytest.raises(NodeWriteError) as exc_info:
        write_value(path, "1")

    assert exc_info.value.path == path


def test_file_exists_and_writable(tmp_path: Path) -> None:
    node = tmp_path / "node"
    node.write_text("0")

    assert file_exists(str(node))
    assert file_writable(str(node))
    assert not file_exists(str(tmp_path / "missing"))
    assert not file_writable(str(tmp_path / "missing"))


@pytest.mark.skipif(hasattr(os, "geteuid") and os.geteuid() == 0, reason="root can write read-only files")
def test_read_only_node_is_not_writable(tmp_path: Path) -> None:
    node = tmp_path / "node"
    node.write_text("0")
    node.chmod(0o444)

    assert not file_writable(str(node))
