"""Common literal values used across asset_spider.

These constants keep file names, defaults, and template names centralized so
the loader, generators, and tests can import the same values without
drifting. Intended for internal use within the asset_spider package.

Examples
--------
>>> from asset_spider import _constants
>>> _constants.CONFIG_FILE_NAMES[0]
'spider.yaml'
>>> _constants.DEFAULT_PROPERTIES
'static const'
"""

CONFIG_FILE_NAMES = ("spider.yaml", "spider.yml", "spider.json")
PUBSPEC_FILE_NAME = "pubspec.yaml"

DEFAULT_PACKAGE = "resources"
DEFAULT_EXPORT_FILE = "resources.dart"
DEFAULT_FONTS_CLASS_NAME = "Fonts"
DEFAULT_FONTS_FILE_NAME = "fonts.dart"
DEFAULT_IMAGE_TYPES = (
    ".jpg",
    ".jpeg",
    ".png",
    ".webp",
    ".gif",
    ".bmp",
    ".wbmp",
    ".svg",
)

DEFAULT_PROPERTIES = "static const"
REFERENCES_LIST_NAME = "values"
SOURCE_EXTENSION = ".dart"
LIB_DIR = "lib"
TEST_DIR = "test"
GENERATOR_NAME = "spider"
