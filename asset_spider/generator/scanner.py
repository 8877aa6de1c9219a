"""Enumerate asset files declared by validated groups."""

from __future__ import annotations

import posixpath
import typing as typ
from pathlib import Path

from asset_spider.config.helpers import format_extension

from .models import DiscoveredAsset

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from asset_spider.config import SubGroup


def scan_directory(sub_group: SubGroup, *, root: Path) -> list[DiscoveredAsset]:
    """Return matching files directly inside ``sub_group.path``.

    Entries are sorted by name so output does not depend on the filesystem's
    listing order. Directories and dot-files are skipped, and extensions are
    compared case-insensitively against the sub-group's types.
    """
    directory = root / sub_group.path
    types = set(sub_group.types)
    declared = posixpath.normpath(Path(sub_group.path).as_posix())
    assets: list[DiscoveredAsset] = []
    for entry in sorted(directory.iterdir(), key=lambda item: item.name):
        if entry.name.startswith(".") or not entry.is_file():
            continue
        if format_extension(entry.suffix) not in types:
            continue
        assets.append(
            DiscoveredAsset(
                path=entry.resolve(),
                name=entry.stem,
                file_name=entry.name,
                relative_path=posixpath.join(declared, entry.name),
                prefix=sub_group.prefix,
            )
        )
    return assets


def scan_assets(
    sub_groups: cabc.Iterable[SubGroup], *, root: Path
) -> list[DiscoveredAsset]:
    """Scan every sub-group in declaration order and concatenate the results."""
    assets: list[DiscoveredAsset] = []
    for sub_group in sub_groups:
        assets.extend(scan_directory(sub_group, root=root))
    return assets


__all__ = ["scan_assets", "scan_directory"]
