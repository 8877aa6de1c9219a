"""Shared fixtures for the asset_spider test suite.

``project_root`` builds a throwaway Flutter-style project containing a
``pubspec.yaml`` and a handful of image assets; ``base_config`` returns the
raw configuration mapping most tests start from before tweaking one field.
"""

from __future__ import annotations

import copy
import typing as typ
from textwrap import dedent

import pytest

if typ.TYPE_CHECKING:
    from pathlib import Path

IMAGE_TYPES = ["jpg", "jpeg", "png", "webp", "gif", "bmp", "wbmp"]

BASE_CONFIG: dict[str, typ.Any] = {
    "generate_tests": False,
    "no_comments": True,
    "export": True,
    "use_part_of": True,
    "use_references_list": True,
    "package": "resources",
    "groups": [
        {
            "path": "assets/images",
            "class_name": "Assets",
            "types": IMAGE_TYPES,
        }
    ],
}


@pytest.fixture
def base_config() -> dict[str, typ.Any]:
    """Return a fresh copy of the baseline raw configuration."""
    return copy.deepcopy(BASE_CONFIG)


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Create a minimal project with a pubspec and two image assets."""
    (tmp_path / "pubspec.yaml").write_text(
        dedent(
            """
            name: spider
            flutter:
              fonts:
                - family: Roboto
                  fonts:
                    - asset: assets/fonts/Roboto-Regular.ttf
                - family: Open Sans
                  fonts:
                    - asset: assets/fonts/OpenSans-Regular.ttf
            """
        ).lstrip(),
        encoding="utf-8",
    )
    images = tmp_path / "assets" / "images"
    images.mkdir(parents=True)
    (images / "test1.png").write_bytes(b"")
    (images / "test2.jpg").write_bytes(b"")
    return tmp_path
