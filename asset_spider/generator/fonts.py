"""Generate a class of font family name constants from ``pubspec.yaml``."""

from __future__ import annotations

import datetime as dt
import typing as typ

from asset_spider._constants import DEFAULT_PROPERTIES
from asset_spider.config.pubspec import read_font_families

from .models import GeneratedFile
from .naming import IdentifierSynthesizer

if typ.TYPE_CHECKING:
    from pathlib import Path

    from asset_spider.config import FontsConfig, Globals

    from .renderer import DartSourceRenderer


class FontsGenerator:
    """Render the fonts reference class for one project."""

    def __init__(
        self,
        fonts: FontsConfig,
        globals_: Globals,
        *,
        root: Path,
        renderer: DartSourceRenderer,
    ) -> None:
        self.fonts = fonts
        self.globals = globals_
        self.root = root
        self.renderer = renderer

    def families(self) -> list[str]:
        """Return the font families declared by the project."""
        return read_font_families(self.root)

    def render(
        self, *, generated_at: dt.datetime, part_of: str | None = None
    ) -> GeneratedFile:
        """Render the fonts class into a :class:`GeneratedFile`."""
        synthesizer = IdentifierSynthesizer(
            use_underscores=self.fonts.use_underscores, prefix=self.fonts.prefix
        )
        references = [
            self.renderer.render_reference(
                properties=DEFAULT_PROPERTIES,
                asset_name=synthesizer.synthesize_name(family),
                asset_path=family,
            )
            for family in self.families()
        ]
        body = self.renderer.render_class(
            class_name=self.fonts.class_name, references=references
        )
        content = self.renderer.render_source_file(
            body,
            no_comments=self.globals.no_comments,
            part_of=part_of,
            generated_at=generated_at,
        )
        return GeneratedFile(
            name=self.fonts.file_name,
            package_path=self.globals.package,
            content=content,
        )


__all__ = ["FontsGenerator"]
