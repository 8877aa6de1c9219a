"""Typed dataclasses describing spider configuration structures and outcomes."""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ

from asset_spider._constants import (
    DEFAULT_EXPORT_FILE,
    DEFAULT_FONTS_CLASS_NAME,
    DEFAULT_FONTS_FILE_NAME,
    DEFAULT_PACKAGE,
)

T = typ.TypeVar("T")


class SpiderConfigError(ValueError):
    """Raised when a failed validation result is unwrapped."""

    def __init__(self, error: ConfigError) -> None:
        super().__init__(error.message)
        self.error = error


class ErrorKind(enum.Enum):
    """Closed set of user-facing configuration failures.

    Each member's value is the display template; members that take context
    contain a single ``{}`` placeholder filled by :attr:`ConfigError.message`.
    """

    CONFIG_NOT_FOUND = (
        "Config file not found. Create one with the `spider create` command."
    )
    PARSE_ERROR = "Unable to parse the config file."
    INVALID_CONFIG_FILE = "Invalid config file. Please check your config."
    NOTHING_TO_GENERATE = (
        "Nothing to generate. Declare at least one group or enable fonts."
    )
    INVALID_FONTS_CONFIG = (
        "Invalid fonts config. 'fonts' must be a boolean or a mapping."
    )
    INVALID_GROUPS_TYPE = "'groups' must be a list of group configurations."
    NULL_VALUE = "'{}' must not be null."
    NO_PATH_IN_GROUP = (
        "Either 'path' or 'sub_groups' with a 'path' must be specified "
        "for every group."
    )
    NO_WILDCARD_IN_PATH = "Path '{}' must not contain a wildcard."
    PATH_NOT_EXISTS = "Path '{}' does not exist or is not a directory."
    NO_CLASS_NAME = "Class name not specified for one of the groups."
    EMPTY_CLASS_NAME = "Class name must not be empty."
    CLASS_NAME_CONTAINS_SPACES = "Class name must not contain spaces."
    CONFIG_VALIDATION_FAILED = (
        "Config validation failed. Please check the structure of your config."
    )


@dc.dataclass(frozen=True, slots=True)
class ConfigError:
    """A classified validation failure with optional interpolated context."""

    kind: ErrorKind
    param: str | None = None

    @property
    def message(self) -> str:
        """Return the display text for this error."""
        if self.param is None:
            return self.kind.value
        return self.kind.value.format(self.param)

    def __str__(self) -> str:
        return self.message


@dc.dataclass(frozen=True, slots=True)
class Success(typ.Generic[T]):
    """Successful outcome wrapping ``data``."""

    data: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_error(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Return the wrapped data."""
        return self.data


@dc.dataclass(frozen=True, slots=True)
class Error:
    """Failed outcome carrying the first :class:`ConfigError` encountered."""

    error: ConfigError

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_error(self) -> bool:
        return True

    def unwrap(self) -> typ.NoReturn:
        """Raise :class:`SpiderConfigError` for the carried error."""
        raise SpiderConfigError(self.error)


Result = Success[T] | Error


def fail(kind: ErrorKind, param: str | None = None) -> Error:
    """Build an :class:`Error` result for ``kind``."""
    return Error(ConfigError(kind, param))


@dc.dataclass(frozen=True, slots=True)
class SubGroup:
    """A single directory scanned for one generated class."""

    path: str
    types: tuple[str, ...]
    prefix: str | None = None


@dc.dataclass(frozen=True, slots=True)
class PathGroup:
    """A group reading assets from a single ``path``."""

    class_name: str
    path: str
    types: tuple[str, ...]
    file_name: str
    prefix: str | None = None

    def paths(self) -> tuple[SubGroup, ...]:
        """Return the group as a single implicit sub-group."""
        return (SubGroup(path=self.path, types=self.types, prefix=None),)


@dc.dataclass(frozen=True, slots=True)
class SubGroupGroup:
    """A group spanning several ``sub_groups`` directories."""

    class_name: str
    sub_groups: tuple[SubGroup, ...]
    file_name: str
    prefix: str | None = None

    def paths(self) -> tuple[SubGroup, ...]:
        """Return the declared sub-groups in declaration order."""
        return self.sub_groups


Group = PathGroup | SubGroupGroup


@dc.dataclass(frozen=True, slots=True)
class FontsConfig:
    """Options for the generated font family references."""

    class_name: str = DEFAULT_FONTS_CLASS_NAME
    file_name: str = DEFAULT_FONTS_FILE_NAME
    prefix: str | None = None
    use_underscores: bool = False


@dc.dataclass(frozen=True, slots=True)
class Globals:
    """Run-wide options shared by every group."""

    generate_tests: bool = False
    no_comments: bool = False
    export: bool = True
    use_part_of: bool = False
    use_references_list: bool = False
    use_underscores: bool = False
    package: str = DEFAULT_PACKAGE
    export_file: str = DEFAULT_EXPORT_FILE
    project_name: str = ""
    fonts: FontsConfig | None = None


@dc.dataclass(frozen=True, slots=True)
class SpiderConfiguration:
    """Validated configuration consumed by the generators."""

    groups: tuple[Group, ...]
    globals: Globals


__all__ = [
    "ConfigError",
    "Error",
    "ErrorKind",
    "FontsConfig",
    "Globals",
    "Group",
    "PathGroup",
    "Result",
    "SpiderConfigError",
    "SpiderConfiguration",
    "SubGroup",
    "SubGroupGroup",
    "Success",
    "fail",
]
