"""Tests for the ``spider`` command functions."""

from __future__ import annotations

import json
import typing as typ

import pytest

from asset_spider import cli
from asset_spider.config import ErrorKind

if typ.TYPE_CHECKING:
    from pathlib import Path


def _write_config(root: Path, raw: dict[str, typ.Any]) -> None:
    (root / "spider.json").write_text(json.dumps(raw), encoding="utf-8")


def test_build_writes_sources(
    project_root: Path,
    base_config: dict[str, typ.Any],
    capsys: pytest.CaptureFixture[str],
) -> None:
    """``build`` writes every generated file and reports each path."""
    _write_config(project_root, base_config)

    cli.build(root=project_root)

    out = capsys.readouterr().out
    assert "assets.dart" in out
    assert "resources.dart" in out
    assert (project_root / "lib" / "resources" / "assets.dart").exists()


def test_build_reports_config_errors(
    project_root: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """A missing config stops the build with a non-zero exit status."""
    with pytest.raises(SystemExit) as excinfo:
        cli.build(root=project_root)

    assert excinfo.value.code == 1
    assert ErrorKind.CONFIG_NOT_FOUND.value in capsys.readouterr().err
    assert not (project_root / "lib").exists()


def test_build_invalid_group_writes_nothing(
    project_root: Path,
    base_config: dict[str, typ.Any],
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Validation failures are reported before any file is written."""
    base_config["groups"][0]["path"] = "assets/missing"
    _write_config(project_root, base_config)

    with pytest.raises(SystemExit):
        cli.build(root=project_root)

    assert "assets/missing" in capsys.readouterr().err
    assert not (project_root / "lib").exists()


def test_build_fonts_only(
    project_root: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """``--fonts-only`` regenerates only the fonts class."""
    _write_config(project_root, {"fonts": True, "no_comments": True})

    cli.build(root=project_root, fonts_only=True)

    written = sorted(path.name for path in (project_root / "lib").rglob("*.dart"))
    assert written == ["fonts.dart"]
    assert "fonts.dart" in capsys.readouterr().out


def test_create_writes_starter_config(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """``create`` writes a YAML starter config once."""
    cli.create(root=tmp_path)
    assert (tmp_path / "spider.yaml").exists()
    assert "spider.yaml" in capsys.readouterr().out

    with pytest.raises(SystemExit):
        cli.create(root=tmp_path, as_json=True)
    assert "already exists" in capsys.readouterr().err
    assert not (tmp_path / "spider.json").exists()


def test_check_summarizes_groups(
    project_root: Path,
    base_config: dict[str, typ.Any],
    capsys: pytest.CaptureFixture[str],
) -> None:
    """``check`` validates the config and lists each group."""
    base_config["fonts"] = {"class_name": "AppFonts"}
    _write_config(project_root, base_config)

    cli.check(root=project_root)

    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Assets: assets/images -> assets.dart",
        "AppFonts: fonts -> fonts.dart",
        "config is valid",
    ]


def test_check_allows_empty_config(
    project_root: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """``check`` accepts configs that declare nothing to generate."""
    _write_config(project_root, {"export": False})

    cli.check(root=project_root)

    assert capsys.readouterr().out.strip() == "config is valid"
