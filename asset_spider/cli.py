"""Cyclopts CLI entrypoint for generating Dart asset reference classes.

The ``spider`` console script defined here validates a project's
``spider.yaml`` (or ``spider.yml``/``spider.json``), renders one reference
class per asset group and writes them under ``lib/<package>``. Typical usage
involves running ``spider create`` once to write a starter config and
``spider build`` whenever assets change.

Examples
--------
Generate references for the project in the current directory:

>>> from asset_spider.cli import main
>>> main()  # doctest: +SKIP

Regenerate only the fonts class of another project:

>>> from asset_spider.cli import app
>>> app(["build", "--root", "example", "--fonts-only"])  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import retrieve_config, write_default_config
from .generator import AssetGenerator

if typ.TYPE_CHECKING:
    from .config import Error

DEFAULT_ROOT = Path()

app = App(
    name="spider",
    config=cyclopts.config.Env("SPIDER_", command=False),  # type: ignore[unknown-argument]
)


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _exit_with(message: str) -> typ.NoReturn:
    """Report ``message`` on stderr and stop with a non-zero status."""
    print(message, file=sys.stderr)
    raise SystemExit(1)


def _exit_with_error(result: Error) -> typ.NoReturn:
    _exit_with(result.error.message)


@app.command(help="Generate asset reference classes from the spider config.")
def build(
    *,
    root: typ.Annotated[
        Path, Parameter(help="Project root directory", env_var="SPIDER_ROOT")
    ] = DEFAULT_ROOT,
    fonts_only: typ.Annotated[
        bool,
        Parameter(help="Only regenerate the fonts class", env_var="SPIDER_FONTS_ONLY"),
    ] = False,
) -> None:
    """Validate the spider config and write the generated sources.

    Parameters
    ----------
    root : Path, optional
        Project directory holding ``spider.yaml`` and ``pubspec.yaml``;
        defaults to the current directory.
    fonts_only : bool, optional
        Validate only the ``fonts`` entry and regenerate only the fonts
        class.

    Returns
    -------
    None
        Writes generated files and prints their paths.

    Raises
    ------
    SystemExit
        With status 1 when the configuration is missing or invalid. Nothing
        is written in that case.
    """
    result = retrieve_config(root, fonts_only=fonts_only)
    if result.is_error:
        _exit_with_error(result)
    generator = AssetGenerator(result.data, root=root)
    written = generator.run_fonts() if fonts_only else generator.run()
    for path in written:
        print(f"wrote {_format_path(path)}")


@app.command(help="Write a starter spider config into the project.")
def create(
    *,
    root: typ.Annotated[
        Path, Parameter(help="Project root directory", env_var="SPIDER_ROOT")
    ] = DEFAULT_ROOT,
    as_json: typ.Annotated[
        bool, Parameter(name="--json", help="Write spider.json instead of YAML")
    ] = False,
) -> None:
    """Create ``spider.yaml`` (or ``spider.json``) with default settings."""
    try:
        path = write_default_config(root, as_json=as_json)
    except FileExistsError as exc:
        _exit_with(str(exc))
    print(f"wrote {_format_path(path)}")


@app.command(help="Validate the spider config without generating anything.")
def check(
    *,
    root: typ.Annotated[
        Path, Parameter(help="Project root directory", env_var="SPIDER_ROOT")
    ] = DEFAULT_ROOT,
) -> None:
    """Validate the config in allow-empty mode and summarize its groups."""
    result = retrieve_config(root, allow_empty=True)
    if result.is_error:
        _exit_with_error(result)
    config = result.data
    for group in config.groups:
        paths = ", ".join(sub_group.path for sub_group in group.paths())
        print(f"{group.class_name}: {paths} -> {group.file_name}")
    fonts = config.globals.fonts
    if fonts is not None:
        print(f"{fonts.class_name}: fonts -> {fonts.file_name}")
    print("config is valid")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``spider`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
