"""Read project metadata from the Dart ``pubspec.yaml`` manifest."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from asset_spider._constants import PUBSPEC_FILE_NAME


def read_pubspec(root: Path) -> dict[str, typ.Any]:
    """Return the parsed ``pubspec.yaml`` under ``root`` or an empty mapping.

    A missing or unparsable manifest yields ``{}``; project metadata is
    optional for generation.
    """
    path = root / PUBSPEC_FILE_NAME
    if not path.is_file():
        return {}
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        with path.open("r", encoding="utf-8") as handle:
            loaded = loader.load(handle)
    except (UnicodeDecodeError, YAMLError):
        return {}
    return dict(loaded) if isinstance(loaded, dict) else {}


def read_project_name(root: Path) -> str:
    """Return the pubspec ``name`` or fall back to the project directory name."""
    name = read_pubspec(root).get("name")
    if isinstance(name, str) and name.strip():
        return name.strip()
    return root.resolve().name


def read_font_families(root: Path) -> list[str]:
    """Return font family names declared under ``flutter.fonts`` in order."""
    flutter = read_pubspec(root).get("flutter")
    if not isinstance(flutter, dict):
        return []
    fonts = flutter.get("fonts")
    if not isinstance(fonts, list):
        return []
    families: list[str] = []
    for entry in fonts:
        match entry:
            case {"family": str() as family} if family.strip():
                if family not in families:
                    families.append(family)
            case _:
                continue
    return families


__all__ = ["read_font_families", "read_project_name", "read_pubspec"]
