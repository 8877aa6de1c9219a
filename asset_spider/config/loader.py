"""Locate and load spider configuration files into validated configurations."""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from asset_spider._constants import (
    CONFIG_FILE_NAMES,
    DEFAULT_EXPORT_FILE,
    DEFAULT_IMAGE_TYPES,
    DEFAULT_PACKAGE,
)

from .models import ErrorKind, Result, SpiderConfiguration, Success, fail
from .validation import parse_config


def find_config_file(root: Path) -> Path | None:
    """Return the first spider config file present under ``root``."""
    for name in CONFIG_FILE_NAMES:
        candidate = root / name
        if candidate.is_file():
            return candidate
    return None


def load_raw_config(path: Path) -> Result[dict[str, typ.Any]]:
    """Parse ``path`` as YAML or JSON into a raw configuration mapping.

    Parameters
    ----------
    path : Path
        A ``spider.yaml``, ``spider.yml`` or ``spider.json`` file.

    Returns
    -------
    Result[dict[str, Any]]
        The top-level mapping, ``PARSE_ERROR`` when the document is empty or
        cannot be parsed, or ``INVALID_CONFIG_FILE`` when it parses to
        something other than a non-empty mapping.
    """
    try:
        text = path.read_text(encoding="utf-8")
        if path.suffix == ".json":
            loaded = json.loads(text)
        else:
            loader = YAML(typ="safe")
            loader.version = (1, 2)
            loaded = loader.load(text)
    except (UnicodeDecodeError, json.JSONDecodeError, YAMLError):
        return fail(ErrorKind.PARSE_ERROR)
    if loaded is None:
        return fail(ErrorKind.PARSE_ERROR)
    if not isinstance(loaded, dict) or not loaded:
        return fail(ErrorKind.INVALID_CONFIG_FILE)
    return Success(dict(loaded))


def retrieve_config(
    root: Path | None = None, *, allow_empty: bool = False, fonts_only: bool = False
) -> Result[SpiderConfiguration]:
    """Find, load and validate the spider configuration for a project.

    Parameters
    ----------
    root : Path, optional
        Project directory holding the config file and ``pubspec.yaml``.
        Defaults to the current working directory.
    allow_empty : bool, optional
        Accept configurations that declare nothing to generate.
    fonts_only : bool, optional
        Validate only the ``fonts`` entry and skip group declarations.

    Returns
    -------
    Result[SpiderConfiguration]
        The parsed configuration or the first classified error.

    Examples
    --------
    >>> from pathlib import Path
    >>> result = retrieve_config(Path("example"))  # doctest: +SKIP
    >>> result.data.globals.package  # doctest: +SKIP
    'resources'
    """
    base = root or Path.cwd()
    path = find_config_file(base)
    if path is None:
        return fail(ErrorKind.CONFIG_NOT_FOUND)
    raw = load_raw_config(path)
    if raw.is_error:
        return raw
    return parse_config(
        raw.data, allow_empty=allow_empty, fonts_only=fonts_only, root=base
    )


def default_config() -> dict[str, typ.Any]:
    """Return the starter configuration written by ``spider create``."""
    return {
        "generate_tests": False,
        "no_comments": False,
        "export": True,
        "use_part_of": False,
        "use_references_list": False,
        "package": DEFAULT_PACKAGE,
        "export_file": DEFAULT_EXPORT_FILE,
        "groups": [
            {
                "path": "assets/images",
                "class_name": "Images",
                "types": [ext.lstrip(".") for ext in DEFAULT_IMAGE_TYPES],
            }
        ],
    }


def write_default_config(root: Path, *, as_json: bool = False) -> Path:
    """Write the starter configuration into ``root`` and return its path.

    Raises
    ------
    FileExistsError
        If a spider config file already exists under ``root``.
    """
    existing = find_config_file(root)
    if existing is not None:
        msg = f"Config file '{existing}' already exists."
        raise FileExistsError(msg)
    root.mkdir(parents=True, exist_ok=True)
    payload = default_config()
    if as_json:
        path = root / "spider.json"
        path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
        return path
    path = root / "spider.yaml"
    dumper = YAML()
    dumper.indent(mapping=2, sequence=4, offset=2)
    with path.open("w", encoding="utf-8") as handle:
        dumper.dump(payload, handle)
    return path


__all__ = [
    "default_config",
    "find_config_file",
    "load_raw_config",
    "retrieve_config",
    "write_default_config",
]
