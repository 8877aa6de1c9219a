"""Tests for the end-to-end asset generation pipeline."""

from __future__ import annotations

import datetime as dt
import typing as typ

import pytest

from asset_spider.config import parse_config
from asset_spider.generator import AssetGenerator

if typ.TYPE_CHECKING:
    from pathlib import Path

    from pytest_mock import MockerFixture

GENERATED_AT = dt.datetime(2024, 5, 1, 8, 0, tzinfo=dt.UTC)


def _generator(raw: dict[str, typ.Any], root: Path) -> AssetGenerator:
    config = parse_config(raw, root=root).unwrap()
    return AssetGenerator(config, root=root, generated_at=GENERATED_AT)


@pytest.fixture
def avatar_root(tmp_path: Path) -> Path:
    """Create a project holding a single avatar image."""
    images = tmp_path / "assets" / "images"
    images.mkdir(parents=True)
    (images / "avatar.png").write_bytes(b"")
    (tmp_path / "pubspec.yaml").write_text("name: demo\n", encoding="utf-8")
    return tmp_path


def test_single_group_without_export(avatar_root: Path) -> None:
    """A plain group produces exactly one class file."""
    raw = {
        "no_comments": True,
        "export": False,
        "groups": [
            {"path": "assets/images", "class_name": "Assets", "types": ["png"]}
        ],
    }
    written = _generator(raw, avatar_root).run()

    target = avatar_root / "lib" / "resources" / "assets.dart"
    assert written == [target]
    assert target.read_text(encoding="utf-8") == (
        "class Assets {\n"
        "  const Assets._();\n"
        "\n"
        "  static const String avatar = 'assets/images/avatar.png';\n"
        "}\n"
    )


def test_part_of_export_and_references_list(
    project_root: Path, base_config: dict[str, typ.Any]
) -> None:
    """Part files point at the export file, which lists them with ``part``."""
    _generator(base_config, project_root).run()

    package_dir = project_root / "lib" / "resources"
    assert (package_dir / "assets.dart").read_text(encoding="utf-8") == (
        "part of 'resources.dart';\n"
        "\n"
        "class Assets {\n"
        "  const Assets._();\n"
        "\n"
        "  static const String test1 = 'assets/images/test1.png';\n"
        "  static const String test2 = 'assets/images/test2.jpg';\n"
        "\n"
        "  static const List<String> values = [test1, test2];\n"
        "}\n"
    )
    assert (package_dir / "resources.dart").read_text(encoding="utf-8") == (
        "part 'assets.dart';\n"
    )


def test_export_without_part_of(
    project_root: Path, base_config: dict[str, typ.Any]
) -> None:
    """Without ``use_part_of`` the export file re-exports each class file."""
    base_config["use_part_of"] = False
    base_config["export_file"] = "r"
    _generator(base_config, project_root).run()

    package_dir = project_root / "lib" / "resources"
    assert (package_dir / "r.dart").read_text(encoding="utf-8") == (
        "export 'assets.dart';\n"
    )
    assets = (package_dir / "assets.dart").read_text(encoding="utf-8")
    assert not assets.startswith("part of")


def test_headers_when_comments_enabled(
    project_root: Path, base_config: dict[str, typ.Any]
) -> None:
    """Every generated file starts with the generated-by marker."""
    base_config["no_comments"] = False
    written = _generator(base_config, project_root).run()
    for path in written:
        text = path.read_text(encoding="utf-8")
        assert text.startswith(
            "// Generated by spider on 2024-05-01T08:00:00+00:00\n\n"
        ), f"{path.name} lacks the generated-by header"


def test_group_with_sub_groups(tmp_path: Path) -> None:
    """Sub-groups share one class and apply their own prefixes."""
    for directory, name in (("icons/light", "home.png"), ("icons/dark", "home.png")):
        (tmp_path / directory).mkdir(parents=True)
        (tmp_path / directory / name).write_bytes(b"")
    raw = {
        "no_comments": True,
        "export": False,
        "use_underscores": True,
        "groups": [
            {
                "class_name": "Icons",
                "types": ["png"],
                "sub_groups": [
                    {"path": "icons/light", "prefix": "light"},
                    {"path": "icons/dark", "prefix": "dark"},
                ],
            }
        ],
    }
    files = _generator(raw, tmp_path).render()

    assert [generated.name for generated in files] == ["icons.dart"]
    content = files[0].content
    assert "static const String light_home = 'icons/light/home.png';" in content
    assert "static const String dark_home = 'icons/dark/home.png';" in content


def test_duplicate_names_are_suffixed(tmp_path: Path) -> None:
    """Assets that map to the same identifier stay distinct."""
    images = tmp_path / "images"
    images.mkdir()
    for name in ("logo.png", "logo.svg"):
        (images / name).write_bytes(b"")
    raw = {
        "no_comments": True,
        "export": False,
        "groups": [
            {"path": "images", "class_name": "Images", "types": ["png", "svg"]}
        ],
    }
    references = _generator(raw, tmp_path).collect_references(
        parse_config(raw, root=tmp_path).unwrap().groups[0]
    )
    assert [ref.identifier for ref in references] == ["logo", "logo_2"]


def test_fonts_class_is_generated(
    project_root: Path, base_config: dict[str, typ.Any]
) -> None:
    """Enabled fonts add a class built from the pubspec font families."""
    base_config["fonts"] = True
    _generator(base_config, project_root).run()

    package_dir = project_root / "lib" / "resources"
    fonts = (package_dir / "fonts.dart").read_text(encoding="utf-8")
    assert "class Fonts {" in fonts
    assert "static const String roboto = 'Roboto';" in fonts
    assert "static const String openSans = 'Open Sans';" in fonts
    assert (package_dir / "resources.dart").read_text(encoding="utf-8") == (
        "part 'assets.dart';\npart 'fonts.dart';\n"
    )


def test_fonts_only_run(project_root: Path) -> None:
    """``run_fonts`` writes only the fonts class."""
    raw = {"no_comments": True, "fonts": {"class_name": "AppFonts", "prefix": "font"}}
    config = parse_config(raw, fonts_only=True, root=project_root).unwrap()
    written = AssetGenerator(config, root=project_root).run_fonts()

    target = project_root / "lib" / "resources" / "fonts.dart"
    assert written == [target]
    text = target.read_text(encoding="utf-8")
    assert "class AppFonts {" in text
    assert "static const String fontRoboto = 'Roboto';" in text


def test_generated_tests_file(
    project_root: Path, base_config: dict[str, typ.Any]
) -> None:
    """``generate_tests`` writes an existence check per reference."""
    base_config["generate_tests"] = True
    _generator(base_config, project_root).run()

    test_file = project_root / "test" / "resources_test.dart"
    text = test_file.read_text(encoding="utf-8")
    assert "import 'package:spider/resources/resources.dart';" in text
    assert "test('Assets assets test', () {" in text
    assert "expect(File(Assets.test1).existsSync(), isTrue);" in text
    assert "expect(File(Assets.test2).existsSync(), isTrue);" in text


def test_generated_tests_import_each_file_without_part_of(
    project_root: Path, base_config: dict[str, typ.Any]
) -> None:
    """Without part files the test imports every class file directly."""
    base_config["generate_tests"] = True
    base_config["use_part_of"] = False
    files = _generator(base_config, project_root).render()
    test_file = files[-1]
    assert test_file.base == "test"
    assert "import 'package:spider/resources/assets.dart';" in test_file.content


def test_nothing_written_when_rendering_fails(
    project_root: Path, base_config: dict[str, typ.Any], mocker: MockerFixture
) -> None:
    """A rendering failure leaves the project untouched."""
    base_config["fonts"] = True
    generator = _generator(base_config, project_root)
    mocker.patch.object(generator, "render_fonts", side_effect=RuntimeError("boom"))

    with pytest.raises(RuntimeError, match="boom"):
        generator.run()
    assert not (project_root / "lib").exists()


def test_fonts_with_malformed_pubspec_fonts(
    project_root: Path, base_config: dict[str, typ.Any]
) -> None:
    """A non-list ``flutter.fonts`` entry yields an empty fonts class."""
    (project_root / "pubspec.yaml").write_text(
        "name: spider\nflutter:\n  fonts: 3\n", encoding="utf-8"
    )
    base_config["fonts"] = True
    rendered = _generator(base_config, project_root).render()
    files = {generated.name: generated for generated in rendered}
    assert files["fonts.dart"].content == (
        "part of 'resources.dart';\n\nclass Fonts {\n  const Fonts._();\n}\n"
    )
