"""Utility helpers shared by the spider configuration validator and loader."""

from __future__ import annotations

import re
import typing as typ

from asset_spider._constants import SOURCE_EXTENSION

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def format_extension(token: str) -> str:
    """Return ``token`` lower-cased with exactly one leading dot.

    Examples
    --------
    >>> format_extension("PNG")
    '.png'
    >>> format_extension(".jpg")
    '.jpg'
    """
    text = token.strip().lower()
    if not text:
        return ""
    return "." + text.lstrip(".")


def normalize_types(types: typ.Iterable[str]) -> tuple[str, ...]:
    """Normalize extension tokens, dropping blanks and duplicates in order."""
    seen: dict[str, None] = {}
    for token in types:
        ext = format_extension(token)
        if ext:
            seen.setdefault(ext, None)
    return tuple(seen)


def snake_case(name: str) -> str:
    """Convert a class name such as ``AppImages`` into ``app_images``."""
    return _CAMEL_BOUNDARY.sub("_", name).replace("-", "_").lower()


def default_file_name(class_name: str) -> str:
    """Return the generated source file name for ``class_name``."""
    return f"{snake_case(class_name)}{SOURCE_EXTENSION}"


def ensure_source_extension(file_name: str) -> str:
    """Append the source extension when ``file_name`` lacks one."""
    if file_name.endswith(SOURCE_EXTENSION):
        return file_name
    return f"{file_name}{SOURCE_EXTENSION}"


def fonts_enabled(value: object) -> bool:
    """Return whether a raw ``fonts`` value asks for font generation.

    Only ``None`` and ``False`` disable it; an empty mapping still enables
    generation with default options.
    """
    return value is not None and value is not False


__all__ = [
    "default_file_name",
    "ensure_source_extension",
    "fonts_enabled",
    "format_extension",
    "normalize_types",
    "snake_case",
]
