"""Load and validate spider configuration for asset reference generation.

This subpackage finds the project's ``spider.yaml``/``spider.yml``/
``spider.json`` file, runs the raw tree through the ordered validation checks,
and produces typed dataclasses (:class:`SpiderConfiguration`, :class:`Globals`,
:class:`PathGroup`, :class:`SubGroupGroup`) that the generators consume. Every
entry point returns a :class:`Success` or an :class:`Error` carrying a
classified :class:`ConfigError`; malformed input never raises.

Examples
--------
>>> from pathlib import Path
>>> from asset_spider.config import retrieve_config
>>> result = retrieve_config(Path("example"))  # doctest: +SKIP
>>> result.data.groups[0].class_name  # doctest: +SKIP
'Images'
"""

from .helpers import format_extension
from .loader import (
    default_config,
    find_config_file,
    load_raw_config,
    retrieve_config,
    write_default_config,
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
    SpiderConfigError,
    SpiderConfiguration,
    SubGroup,
    SubGroupGroup,
    Success,
)
from .validation import parse_config, validate_config

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
    "default_config",
    "find_config_file",
    "format_extension",
    "load_raw_config",
    "parse_config",
    "retrieve_config",
    "validate_config",
    "write_default_config",
]
