"""Render Dart source snippets from the packaged Jinja templates."""

from __future__ import annotations

import collections.abc as cabc
import datetime as dt
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from asset_spider._constants import GENERATOR_NAME, REFERENCES_LIST_NAME

_DART_ESCAPES = str.maketrans({"\\": "\\\\", "'": "\\'", "$": "\\$"})


def dart_string(value: object) -> str:
    """Escape ``value`` for use inside a single-quoted Dart string literal."""
    return str(value).translate(_DART_ESCAPES)


class DartSourceRenderer:
    """Fill the reference, class, export, and test templates."""

    def __init__(self, *, templates_dir: Path | None = None) -> None:
        """Initialize the renderer and its Jinja environment.

        Parameters
        ----------
        templates_dir : Path, optional
            Directory containing the ``*.jinja`` templates. Defaults to
            ``asset_spider/templates``.

        Notes
        -----
        Autoescaping is disabled because the output is Dart source, not
        markup; string values are escaped with the ``dart_string`` filter
        where they land inside literals.
        """
        default_templates = Path(__file__).resolve().parents[1] / "templates"
        self.templates_dir = templates_dir or default_templates
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,  # noqa: S701 - renders Dart source, not HTML
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self.env.filters["dart_string"] = dart_string

    def _render(self, name: str, **context: typ.Any) -> str:
        return self.env.get_template(name).render(**context)

    def render_header(self, generated_at: dt.datetime | None = None) -> str:
        """Return the generated-by comment followed by a blank line."""
        timestamp = (generated_at or dt.datetime.now(dt.UTC)).isoformat(
            timespec="seconds"
        )
        line = self._render(
            "header.jinja", generator=GENERATOR_NAME, generated_at=timestamp
        )
        return f"{line}\n\n"

    def render_reference(
        self, *, properties: str, asset_name: str, asset_path: str
    ) -> str:
        """Return a single ``String`` constant declaration.

        Examples
        --------
        >>> DartSourceRenderer().render_reference(
        ...     properties="static const",
        ...     asset_name="avatar",
        ...     asset_path="assets/images/avatar.png",
        ... )
        "static const String avatar = 'assets/images/avatar.png';"
        """
        return self._render(
            "reference.jinja",
            properties=properties,
            asset_name=asset_name,
            asset_path=asset_path,
        )

    def render_references_list(
        self, *, properties: str, names: cabc.Sequence[str]
    ) -> str:
        """Return the ``values`` list declaration naming every reference."""
        return self._render(
            "references_list.jinja",
            properties=properties,
            list_name=REFERENCES_LIST_NAME,
            names=list(names),
        )

    def render_class(
        self,
        *,
        class_name: str,
        references: cabc.Sequence[str],
        list_line: str | None = None,
    ) -> str:
        """Wrap reference declarations in a class with a private constructor."""
        return self._render(
            "class.jinja",
            class_name=class_name,
            references=list(references),
            list_line=list_line,
        )

    def render_export_or_part(
        self,
        *,
        file_names: cabc.Sequence[str],
        no_comments: bool,
        use_part_of: bool = False,
        generated_at: dt.datetime | None = None,
    ) -> str:
        """Return one ``export`` (or ``part``) statement per file name.

        Examples
        --------
        >>> renderer = DartSourceRenderer()
        >>> renderer.render_export_or_part(file_names=["test.dart"], no_comments=True)
        "export 'test.dart';"
        """
        header = "" if no_comments else self.render_header(generated_at)
        body = self._render(
            "export.jinja",
            file_names=list(file_names),
            keyword="part" if use_part_of else "export",
        )
        return header + body

    def render_test_case(self, class_name: str, asset_name: str) -> str:
        """Return an assertion that the referenced asset exists on disk."""
        return self._render(
            "test_case.jinja", class_name=class_name, asset_name=asset_name
        )

    def render_source_file(
        self,
        body: str,
        *,
        no_comments: bool,
        part_of: str | None = None,
        generated_at: dt.datetime | None = None,
    ) -> str:
        """Return a complete source file around ``body``, newline-terminated."""
        header = "" if no_comments else self.render_header(generated_at)
        content = self._render(
            "source_file.jinja", header=header, part_of=part_of, body=body
        )
        return f"{content}\n"

    def render_test_file(
        self,
        *,
        imports: cabc.Sequence[str],
        suites: cabc.Sequence[tuple[str, cabc.Sequence[str]]],
        no_comments: bool,
        generated_at: dt.datetime | None = None,
    ) -> str:
        """Return a Dart test file grouping existence checks per class.

        ``suites`` pairs each class name with its rendered test cases.
        """
        header = "" if no_comments else self.render_header(generated_at)
        content = self._render(
            "test_file.jinja",
            header=header,
            imports=list(imports),
            suites=[
                {"title": title, "cases": list(cases)} for title, cases in suites
            ],
        )
        return f"{content}\n"


__all__ = ["DartSourceRenderer", "dart_string"]
