"""High-level orchestration for asset reference generation.

This module turns a validated :class:`~asset_spider.config.SpiderConfiguration`
into Dart source files. :class:`AssetGenerator` scans every group's
directories, names each discovered asset, renders one reference class per
group, and optionally an export/part aggregation file, a fonts class, and an
existence-check test file. Everything is rendered in memory first, so a
failure while scanning or rendering leaves the project untouched.

Example
-------
>>> from pathlib import Path
>>> from asset_spider.config import retrieve_config
>>> from asset_spider.generator import AssetGenerator
>>> config = retrieve_config(Path("example")).unwrap()  # doctest: +SKIP
>>> AssetGenerator(config, root=Path("example")).run()  # doctest: +SKIP
[PosixPath('example/lib/resources/images.dart'), ...]
"""

from __future__ import annotations

import datetime as dt
import posixpath
import typing as typ
from pathlib import Path

from asset_spider._constants import (
    DEFAULT_PROPERTIES,
    REFERENCES_LIST_NAME,
    SOURCE_EXTENSION,
    TEST_DIR,
)

from .fonts import FontsGenerator
from .models import AssetReference, GeneratedFile
from .naming import IdentifierSynthesizer
from .renderer import DartSourceRenderer
from .scanner import scan_assets
from .writer import write_to_file

if typ.TYPE_CHECKING:
    from asset_spider.config import Group, SpiderConfiguration


class AssetGenerator:
    """Render and write the reference classes described by a configuration."""

    def __init__(
        self,
        config: SpiderConfiguration,
        *,
        root: Path | None = None,
        renderer: DartSourceRenderer | None = None,
        generated_at: dt.datetime | None = None,
    ) -> None:
        """Initialize the generator.

        Parameters
        ----------
        config : SpiderConfiguration
            Validated configuration; it is not re-validated here.
        root : Path, optional
            Project root that group paths and output directories resolve
            against. Defaults to the current working directory.
        renderer : DartSourceRenderer, optional
            Renderer to use; defaults to one over the packaged templates.
        generated_at : datetime, optional
            Timestamp for generated-by headers; defaults to the current time.
        """
        self.config = config
        self.root = root or Path.cwd()
        self.renderer = renderer or DartSourceRenderer()
        self.generated_at = generated_at or dt.datetime.now(dt.UTC)

    @property
    def _part_of(self) -> str | None:
        globals_ = self.config.globals
        if globals_.export and globals_.use_part_of:
            return globals_.export_file
        return None

    def collect_references(self, group: Group) -> list[AssetReference]:
        """Scan ``group`` and name each discovered asset."""
        globals_ = self.config.globals
        reserved = (REFERENCES_LIST_NAME,) if globals_.use_references_list else ()
        synthesizer = IdentifierSynthesizer(
            use_underscores=globals_.use_underscores,
            prefix=group.prefix,
            reserved=reserved,
        )
        return [
            AssetReference(
                identifier=synthesizer.synthesize(asset.file_name, prefix=asset.prefix),
                relative_path=asset.relative_path,
            )
            for asset in scan_assets(group.paths(), root=self.root)
        ]

    def render_group(
        self, group: Group, references: list[AssetReference]
    ) -> GeneratedFile:
        """Render the reference class file for ``group``."""
        globals_ = self.config.globals
        lines = [
            self.renderer.render_reference(
                properties=DEFAULT_PROPERTIES,
                asset_name=reference.identifier,
                asset_path=reference.relative_path,
            )
            for reference in references
        ]
        list_line = None
        if globals_.use_references_list:
            list_line = self.renderer.render_references_list(
                properties=DEFAULT_PROPERTIES,
                names=[reference.identifier for reference in references],
            )
        body = self.renderer.render_class(
            class_name=group.class_name, references=lines, list_line=list_line
        )
        content = self.renderer.render_source_file(
            body,
            no_comments=globals_.no_comments,
            part_of=self._part_of,
            generated_at=self.generated_at,
        )
        return GeneratedFile(
            name=group.file_name, package_path=globals_.package, content=content
        )

    def render_fonts(self) -> GeneratedFile | None:
        """Render the fonts class when fonts generation is enabled."""
        globals_ = self.config.globals
        if globals_.fonts is None:
            return None
        generator = FontsGenerator(
            globals_.fonts, globals_, root=self.root, renderer=self.renderer
        )
        return generator.render(generated_at=self.generated_at, part_of=self._part_of)

    def render_export(self, file_names: list[str]) -> GeneratedFile:
        """Render the export/part aggregation file for ``file_names``."""
        globals_ = self.config.globals
        content = self.renderer.render_export_or_part(
            file_names=file_names,
            no_comments=globals_.no_comments,
            use_part_of=globals_.use_part_of,
            generated_at=self.generated_at,
        )
        return GeneratedFile(
            name=globals_.export_file,
            package_path=globals_.package,
            content=f"{content}\n",
        )

    def render_tests(
        self, groups: list[tuple[Group, list[AssetReference]]]
    ) -> GeneratedFile:
        """Render a test file asserting every referenced asset exists."""
        globals_ = self.config.globals
        if self._part_of:
            file_names = [globals_.export_file]
        else:
            file_names = [group.file_name for group, _ in groups]
        imports = [
            f"package:{globals_.project_name}/"
            + posixpath.join(globals_.package, file_name)
            for file_name in file_names
        ]
        suites = [
            (
                group.class_name,
                [
                    self.renderer.render_test_case(group.class_name, ref.identifier)
                    for ref in references
                ],
            )
            for group, references in groups
        ]
        content = self.renderer.render_test_file(
            imports=imports,
            suites=suites,
            no_comments=globals_.no_comments,
            generated_at=self.generated_at,
        )
        stem = globals_.export_file.removesuffix(SOURCE_EXTENSION)
        return GeneratedFile(
            name=f"{stem}_test{SOURCE_EXTENSION}",
            package_path="",
            content=content,
            base=TEST_DIR,
        )

    def render(self) -> list[GeneratedFile]:
        """Render every output file without touching the filesystem."""
        globals_ = self.config.globals
        scanned = [
            (group, self.collect_references(group)) for group in self.config.groups
        ]
        files = [self.render_group(group, references) for group, references in scanned]
        fonts_file = self.render_fonts()
        if fonts_file is not None:
            files.append(fonts_file)
        if globals_.export and files:
            files.append(self.render_export([generated.name for generated in files]))
        if globals_.generate_tests and scanned:
            files.append(self.render_tests(scanned))
        return files

    def run(self) -> list[Path]:
        """Render all files, then write them and return their paths."""
        return self._write(self.render())

    def run_fonts(self) -> list[Path]:
        """Render and write only the fonts class."""
        fonts_file = self.render_fonts()
        return self._write([] if fonts_file is None else [fonts_file])

    def _write(self, files: list[GeneratedFile]) -> list[Path]:
        return [
            write_to_file(
                name=generated.name,
                path=generated.package_path,
                content=generated.content,
                root=self.root,
                base=generated.base,
            )
            for generated in files
        ]


__all__ = ["AssetGenerator"]
