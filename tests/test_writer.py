"""Tests for writing generated files to disk."""

from __future__ import annotations

import typing as typ

from asset_spider.generator import write_to_file

if typ.TYPE_CHECKING:
    from pathlib import Path


def test_write_creates_package_directories(tmp_path: Path) -> None:
    """Missing ``lib/<package>`` directories are created on demand."""
    target = write_to_file(
        name="test.txt", path="resources", content="testing...", root=tmp_path
    )
    assert target == tmp_path / "lib" / "resources" / "test.txt"
    assert target.read_text(encoding="utf-8") == "testing..."


def test_write_overwrites_existing_file(tmp_path: Path) -> None:
    """Existing files are replaced rather than appended to."""
    write_to_file(name="a.dart", path="resources", content="old", root=tmp_path)
    target = write_to_file(
        name="a.dart", path="resources", content="new", root=tmp_path
    )
    assert target.read_text(encoding="utf-8") == "new"


def test_write_preserves_bytes(tmp_path: Path) -> None:
    """Content is written as UTF-8 without newline translation."""
    content = "// café\r\nclass A {}\n"
    target = write_to_file(name="a.dart", path="", content=content, root=tmp_path)
    assert target.read_bytes() == content.encode("utf-8")


def test_write_to_test_directory(tmp_path: Path) -> None:
    """The ``base`` argument selects a different top-level directory."""
    target = write_to_file(
        name="resources_test.dart", path="", content="", root=tmp_path, base="test"
    )
    assert target == tmp_path / "test" / "resources_test.dart"
    assert target.exists()
