"""Validate raw spider configuration trees and build typed configurations.

Validation walks the raw mapping produced by the YAML/JSON loader through an
ordered list of checks. The first check that fails decides the outcome, so a
malformed config always reports exactly one :class:`ConfigError`; users fix it
and run again. Structural presence is always checked before filesystem
existence, and class-name presence before class-name content.

Examples
--------
>>> from asset_spider.config.validation import validate_config
>>> result = validate_config({"groups": True})
>>> result.error.kind.name
'INVALID_GROUPS_TYPE'
>>> validate_config({}, allow_empty=True).data
True
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ
from pathlib import Path

from asset_spider._constants import (
    DEFAULT_EXPORT_FILE,
    DEFAULT_FONTS_CLASS_NAME,
    DEFAULT_FONTS_FILE_NAME,
    DEFAULT_IMAGE_TYPES,
    DEFAULT_PACKAGE,
)

from .helpers import (
    default_file_name,
    ensure_source_extension,
    fonts_enabled,
    normalize_types,
)
from .models import (
    ConfigError,
    Error,
    ErrorKind,
    FontsConfig,
    Globals,
    Group,
    PathGroup,
    Result,
    SpiderConfiguration,
    SubGroup,
    SubGroupGroup,
    Success,
)
from .pubspec import read_project_name

GROUP_KEYS = frozenset(
    {"class_name", "path", "sub_groups", "types", "prefix", "file_name"}
)
SUB_GROUP_KEYS = frozenset({"path", "types", "prefix"})
GLOBAL_FLAGS = (
    "generate_tests",
    "no_comments",
    "export",
    "use_part_of",
    "use_references_list",
    "use_underscores",
)
GLOBAL_STRINGS = ("package", "export_file")
FONTS_KEYS: dict[str, type] = {
    "class_name": str,
    "file_name": str,
    "prefix": str,
    "use_underscores": bool,
}
WILDCARD = "*"


@dc.dataclass(slots=True)
class _Context:
    """Inputs shared by every check of a single validation run."""

    raw: cabc.Mapping[str, typ.Any]
    root: Path
    allow_empty: bool
    fonts_only: bool


_Check = cabc.Callable[[_Context], ConfigError | None]
_GroupCheck = cabc.Callable[[typ.Any, _Context], ConfigError | None]


def validate_config(
    raw: cabc.Mapping[str, typ.Any],
    *,
    allow_empty: bool = False,
    fonts_only: bool = False,
    root: Path | None = None,
) -> Result[bool]:
    """Check ``raw`` against the spider config rules without building a model.

    Parameters
    ----------
    raw : Mapping
        Raw key-value tree as loaded from ``spider.yaml`` or ``spider.json``.
    allow_empty : bool, optional
        Accept configs that declare neither groups nor fonts.
    fonts_only : bool, optional
        Only validate the ``fonts`` entry; group declarations are ignored.
    root : Path, optional
        Directory that relative group paths resolve against. Defaults to the
        current working directory.

    Returns
    -------
    Result[bool]
        ``Success(True)`` when every check passes, otherwise an ``Error``
        carrying the first failure found.
    """
    ctx = _Context(
        raw=raw,
        root=root or Path.cwd(),
        allow_empty=allow_empty,
        fonts_only=fonts_only,
    )
    for check in _LEADING_CHECKS:
        if (error := check(ctx)) is not None:
            return _error(error)
    if fonts_only:
        return Success(True)
    for check in _GROUPS_CHECKS:
        if (error := check(ctx)) is not None:
            return _error(error)
    for group in _raw_groups(raw):
        for group_check in _GROUP_CHECKS:
            if (error := group_check(group, ctx)) is not None:
                return _error(error)
    for check in _TRAILING_CHECKS:
        if (error := check(ctx)) is not None:
            return _error(error)
    return Success(True)


def parse_config(
    raw: cabc.Mapping[str, typ.Any],
    *,
    allow_empty: bool = False,
    fonts_only: bool = False,
    root: Path | None = None,
    project_name: str | None = None,
) -> Result[SpiderConfiguration]:
    """Validate ``raw`` and build a :class:`SpiderConfiguration` from it.

    ``project_name`` defaults to the ``name`` declared in the project's
    ``pubspec.yaml`` (or the project directory name when absent). In
    ``fonts_only`` mode group declarations are neither validated nor built.
    """
    base = root or Path.cwd()
    outcome = validate_config(
        raw, allow_empty=allow_empty, fonts_only=fonts_only, root=base
    )
    if outcome.is_error:
        return outcome
    if fonts_only:
        # Globals still shape the fonts output, so check them here too.
        ctx = _Context(raw=raw, root=base, allow_empty=allow_empty, fonts_only=True)
        if (error := _check_globals(ctx)) is not None:
            return _error(error)
    name = project_name if project_name is not None else read_project_name(base)
    groups: tuple[Group, ...] = ()
    if not fonts_only:
        groups = tuple(_build_group(group) for group in _raw_groups(raw))
    return Success(
        SpiderConfiguration(groups=groups, globals=_build_globals(raw, name))
    )


def _error(error: ConfigError) -> Error:
    return Error(error)


def _raw_groups(raw: cabc.Mapping[str, typ.Any]) -> list[typ.Any]:
    groups = raw.get("groups")
    return groups if isinstance(groups, list) else []


def _is_empty(value: object) -> bool:
    if value is None:
        return True
    return isinstance(value, list | dict | str) and not value


def _unknown_keys(entry: cabc.Mapping[str, typ.Any], allowed: frozenset[str]) -> bool:
    return any(key not in allowed for key in entry)


# -- top-level checks -------------------------------------------------------


def _check_nothing_to_generate(ctx: _Context) -> ConfigError | None:
    if ctx.allow_empty:
        return None
    fonts = fonts_enabled(ctx.raw.get("fonts"))
    if ctx.fonts_only:
        return None if fonts else ConfigError(ErrorKind.NOTHING_TO_GENERATE)
    if fonts or not _is_empty(ctx.raw.get("groups")):
        return None
    return ConfigError(ErrorKind.NOTHING_TO_GENERATE)


def _check_fonts(ctx: _Context) -> ConfigError | None:
    fonts = ctx.raw.get("fonts")
    match fonts:
        case None | bool():
            return None
        case cabc.Mapping():
            for key, value in fonts.items():
                expected = FONTS_KEYS.get(key)
                if expected is None or not isinstance(value, expected):
                    return ConfigError(ErrorKind.INVALID_FONTS_CONFIG)
            for key in ("file_name", "prefix"):
                if key in fonts and not _non_blank_str(fonts[key]):
                    return ConfigError(ErrorKind.INVALID_FONTS_CONFIG)
            if "class_name" in fonts:
                return _class_name_error(fonts["class_name"])
            return None
        case _:
            return ConfigError(ErrorKind.INVALID_FONTS_CONFIG)


def _check_groups_type(ctx: _Context) -> ConfigError | None:
    groups = ctx.raw.get("groups")
    if groups is None or isinstance(groups, list):
        return None
    return ConfigError(ErrorKind.INVALID_GROUPS_TYPE)


def _check_globals(ctx: _Context) -> ConfigError | None:
    for key in GLOBAL_FLAGS:
        if key in ctx.raw and not isinstance(ctx.raw[key], bool):
            return ConfigError(ErrorKind.CONFIG_VALIDATION_FAILED)
    for key in GLOBAL_STRINGS:
        if key not in ctx.raw:
            continue
        value = ctx.raw[key]
        if not isinstance(value, str) or not value.strip():
            return ConfigError(ErrorKind.CONFIG_VALIDATION_FAILED)
    return None


def _check_output_names(ctx: _Context) -> ConfigError | None:
    """Reject configs where two generated files share a name.

    Every file lands in the same ``lib/<package>`` directory, so a later file
    would silently replace an earlier one.
    """
    names = [_group_file_name(group) for group in _raw_groups(ctx.raw)]
    fonts = ctx.raw.get("fonts")
    if fonts_enabled(fonts):
        fonts_file = DEFAULT_FONTS_FILE_NAME
        if isinstance(fonts, cabc.Mapping):
            fonts_file = fonts.get("file_name", DEFAULT_FONTS_FILE_NAME)
        names.append(ensure_source_extension(fonts_file))
    if ctx.raw.get("export", Globals().export):
        names.append(
            ensure_source_extension(ctx.raw.get("export_file", DEFAULT_EXPORT_FILE))
        )
    if len(set(names)) != len(names):
        return ConfigError(ErrorKind.CONFIG_VALIDATION_FAILED)
    return None


# -- per-group checks -------------------------------------------------------


def _check_group_mapping(group: typ.Any, ctx: _Context) -> ConfigError | None:
    if isinstance(group, cabc.Mapping):
        return None
    return ConfigError(ErrorKind.CONFIG_VALIDATION_FAILED)


def _check_null_values(group: typ.Any, ctx: _Context) -> ConfigError | None:
    for key, value in group.items():
        if value is None:
            return ConfigError(ErrorKind.NULL_VALUE, str(key))
    sub_groups = group.get("sub_groups")
    if not isinstance(sub_groups, list):
        return None
    for sub_group in sub_groups:
        if not isinstance(sub_group, cabc.Mapping):
            continue
        for key, value in sub_group.items():
            if value is None:
                return ConfigError(ErrorKind.NULL_VALUE, str(key))
    return None


def _check_group_shape(group: typ.Any, ctx: _Context) -> ConfigError | None:
    has_path = "path" in group
    has_sub_groups = "sub_groups" in group
    if has_path and has_sub_groups:
        return ConfigError(ErrorKind.CONFIG_VALIDATION_FAILED)
    if has_path:
        return _check_path_value(group["path"])
    if not has_sub_groups:
        return _missing_path(group, GROUP_KEYS)
    sub_groups = group["sub_groups"]
    if not isinstance(sub_groups, list):
        return ConfigError(ErrorKind.CONFIG_VALIDATION_FAILED)
    if not sub_groups:
        return _missing_path(group, GROUP_KEYS)
    for sub_group in sub_groups:
        if not isinstance(sub_group, cabc.Mapping):
            return ConfigError(ErrorKind.CONFIG_VALIDATION_FAILED)
        if "path" not in sub_group:
            return _missing_path(sub_group, SUB_GROUP_KEYS)
        if (error := _check_path_value(sub_group["path"])) is not None:
            return error
    return None


def _missing_path(
    entry: cabc.Mapping[str, typ.Any], allowed: frozenset[str]
) -> ConfigError:
    # A misspelled key such as ``paths`` is a schema mismatch, not a missing path.
    if _unknown_keys(entry, allowed):
        return ConfigError(ErrorKind.CONFIG_VALIDATION_FAILED)
    return ConfigError(ErrorKind.NO_PATH_IN_GROUP)


def _check_path_value(path: object) -> ConfigError | None:
    if isinstance(path, str) and path.strip():
        return None
    return ConfigError(ErrorKind.CONFIG_VALIDATION_FAILED)


def _declared_paths(group: cabc.Mapping[str, typ.Any]) -> list[str]:
    if "path" in group:
        return [group["path"]]
    return [sub_group["path"] for sub_group in group["sub_groups"]]


def _check_wildcards(group: typ.Any, ctx: _Context) -> ConfigError | None:
    for path in _declared_paths(group):
        if WILDCARD in path:
            return ConfigError(ErrorKind.NO_WILDCARD_IN_PATH, path)
    return None


def _check_paths_exist(group: typ.Any, ctx: _Context) -> ConfigError | None:
    for path in _declared_paths(group):
        if not (ctx.root / path).is_dir():
            return ConfigError(ErrorKind.PATH_NOT_EXISTS, path)
    return None


def _check_class_name(group: typ.Any, ctx: _Context) -> ConfigError | None:
    if "class_name" not in group:
        return ConfigError(ErrorKind.NO_CLASS_NAME)
    return _class_name_error(group["class_name"])


def _class_name_error(class_name: object) -> ConfigError | None:
    if not isinstance(class_name, str):
        return ConfigError(ErrorKind.CONFIG_VALIDATION_FAILED)
    if not class_name.strip():
        return ConfigError(ErrorKind.EMPTY_CLASS_NAME)
    if any(char.isspace() for char in class_name):
        return ConfigError(ErrorKind.CLASS_NAME_CONTAINS_SPACES)
    return None


def _check_group_schema(group: typ.Any, ctx: _Context) -> ConfigError | None:
    invalid = ConfigError(ErrorKind.CONFIG_VALIDATION_FAILED)
    if _unknown_keys(group, GROUP_KEYS) or not _valid_options(group):
        return invalid
    if "file_name" in group and not _non_blank_str(group["file_name"]):
        return invalid
    for sub_group in group.get("sub_groups", ()):
        if _unknown_keys(sub_group, SUB_GROUP_KEYS) or not _valid_options(sub_group):
            return invalid
    return None


def _valid_options(entry: cabc.Mapping[str, typ.Any]) -> bool:
    types = entry.get("types", [])
    if not isinstance(types, list) or not all(isinstance(t, str) for t in types):
        return False
    return "prefix" not in entry or _non_blank_str(entry["prefix"])


def _non_blank_str(value: object) -> bool:
    return isinstance(value, str) and bool(value.strip())


_LEADING_CHECKS: tuple[_Check, ...] = (_check_nothing_to_generate, _check_fonts)
_GROUPS_CHECKS: tuple[_Check, ...] = (_check_groups_type,)
_GROUP_CHECKS: tuple[_GroupCheck, ...] = (
    _check_group_mapping,
    _check_null_values,
    _check_group_shape,
    _check_wildcards,
    _check_paths_exist,
    _check_class_name,
    _check_group_schema,
)
_TRAILING_CHECKS: tuple[_Check, ...] = (_check_globals, _check_output_names)


# -- model building ---------------------------------------------------------


def _build_types(
    entry: cabc.Mapping[str, typ.Any], fallback: tuple[str, ...]
) -> tuple[str, ...]:
    return normalize_types(entry.get("types", ())) or fallback


def _group_file_name(raw: cabc.Mapping[str, typ.Any]) -> str:
    return ensure_source_extension(
        raw.get("file_name") or default_file_name(raw["class_name"].strip())
    )


def _build_group(raw: cabc.Mapping[str, typ.Any]) -> Group:
    class_name = raw["class_name"].strip()
    file_name = _group_file_name(raw)
    group_types = _build_types(raw, DEFAULT_IMAGE_TYPES)
    if "path" in raw:
        return PathGroup(
            class_name=class_name,
            path=raw["path"],
            types=group_types,
            file_name=file_name,
            prefix=raw.get("prefix"),
        )
    sub_groups = tuple(
        SubGroup(
            path=sub_group["path"],
            types=_build_types(sub_group, group_types),
            prefix=sub_group.get("prefix"),
        )
        for sub_group in raw["sub_groups"]
    )
    return SubGroupGroup(
        class_name=class_name,
        sub_groups=sub_groups,
        file_name=file_name,
        prefix=raw.get("prefix"),
    )


def _build_fonts(value: object) -> FontsConfig | None:
    match value:
        case cabc.Mapping():
            return FontsConfig(
                class_name=value.get("class_name", DEFAULT_FONTS_CLASS_NAME),
                file_name=ensure_source_extension(
                    value.get("file_name", DEFAULT_FONTS_FILE_NAME)
                ),
                prefix=value.get("prefix"),
                use_underscores=value.get("use_underscores", False),
            )
        case True:
            return FontsConfig()
        case _:
            return None


def _build_globals(raw: cabc.Mapping[str, typ.Any], project_name: str) -> Globals:
    base = Globals()
    return Globals(
        generate_tests=raw.get("generate_tests", base.generate_tests),
        no_comments=raw.get("no_comments", base.no_comments),
        export=raw.get("export", base.export),
        use_part_of=raw.get("use_part_of", base.use_part_of),
        use_references_list=raw.get("use_references_list", base.use_references_list),
        use_underscores=raw.get("use_underscores", base.use_underscores),
        package=raw.get("package", DEFAULT_PACKAGE),
        export_file=ensure_source_extension(
            raw.get("export_file", DEFAULT_EXPORT_FILE)
        ),
        project_name=project_name,
        fonts=_build_fonts(raw.get("fonts")),
    )


__all__ = ["parse_config", "validate_config"]
