"""Scan asset directories and render Dart reference sources."""

from .asset_generator import AssetGenerator
from .fonts import FontsGenerator
from .models import AssetReference, DiscoveredAsset, GeneratedFile
from .naming import IdentifierSynthesizer
from .renderer import DartSourceRenderer
from .scanner import scan_assets, scan_directory
from .writer import write_to_file

__all__ = [
    "AssetGenerator",
    "AssetReference",
    "DartSourceRenderer",
    "DiscoveredAsset",
    "FontsGenerator",
    "GeneratedFile",
    "IdentifierSynthesizer",
    "scan_assets",
    "scan_directory",
    "write_to_file",
]
