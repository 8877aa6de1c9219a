"""Persist rendered files under the project's package directories."""

from __future__ import annotations

from pathlib import Path

from asset_spider._constants import LIB_DIR


def write_to_file(
    *,
    name: str,
    path: str,
    content: str,
    root: Path | None = None,
    base: str = LIB_DIR,
) -> Path:
    """Write ``content`` to ``<root>/<base>/<path>/<name>`` and return the path.

    Intermediate directories are created as needed and any existing file is
    overwritten. The text is written byte for byte (UTF-8, no newline
    translation); filesystem errors propagate to the caller.

    Examples
    --------
    >>> write_to_file(name="a.dart", path="resources", content="")  # doctest: +SKIP
    PosixPath('lib/resources/a.dart')
    """
    directory = (root or Path()) / base / path
    directory.mkdir(parents=True, exist_ok=True)
    target = directory / name
    target.write_bytes(content.encode("utf-8"))
    return target


__all__ = ["write_to_file"]
