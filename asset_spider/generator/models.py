"""Shared dataclasses used by the asset generation pipeline."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path  # noqa: TC003 - used for runtime type metadata


@dc.dataclass(frozen=True, slots=True)
class DiscoveredAsset:
    """A file found by the scanner.

    Attributes
    ----------
    path : Path
        Absolute filesystem path of the asset.
    name : str
        File name without its extension.
    file_name : str
        File name including its extension.
    relative_path : str
        POSIX path as declared in the config joined with ``file_name``; this
        is the value written into generated references.
    prefix : str or None
        Identifier prefix declared on the owning sub-group.
    """

    path: Path
    name: str
    file_name: str
    relative_path: str
    prefix: str | None = None


@dc.dataclass(frozen=True, slots=True)
class AssetReference:
    """An identifier bound to an asset path inside one generated class."""

    identifier: str
    relative_path: str


@dc.dataclass(frozen=True, slots=True)
class GeneratedFile:
    """Rendered file content waiting to be written.

    ``base`` is the top-level project directory (``lib`` or ``test``) and
    ``package_path`` the directory below it.
    """

    name: str
    package_path: str
    content: str
    base: str = "lib"


__all__ = ["AssetReference", "DiscoveredAsset", "GeneratedFile"]
