"""Emote Catalog.

This package ingests a tree of emote package manifests into a
deduplicated SQLite store keyed by danmaku name, and derives CSV/JSON
exports and key-named image files from it.
"""

# Core library interface
from .pipeline import IngestionPipeline, IngestionReport
from .registry import SourceRegistry
from .sources.base import PackageFolder, Source
from .store import EmoteStore

# Downstream artifacts
from .exporters import export_csv, export_json
from .relocator import RelocationReport, relocate_assets
from .repair import RepairReport, derive_candidate_name, repair_missing_names

# Core utilities
from .config import WorkspaceConfig
from .core import EmoteRecord, ManifestDocument, StoredEmote
from .core import validate_manifest, validate_manifest_with_error_details
from .transformers import EmoteNormalizer

from .cli import main

__version__ = "0.1.0"

# Auto-discover and register all platforms
SourceRegistry.discover_platforms()

__all__ = [
    # Primary library interface
    "IngestionPipeline",
    "IngestionReport",
    "SourceRegistry",
    "Source",
    "PackageFolder",
    "EmoteStore",
    "EmoteNormalizer",
    # Downstream artifacts
    "export_csv",
    "export_json",
    "relocate_assets",
    "RelocationReport",
    "repair_missing_names",
    "derive_candidate_name",
    "RepairReport",
    # Core utilities
    "WorkspaceConfig",
    "EmoteRecord",
    "ManifestDocument",
    "StoredEmote",
    "validate_manifest",
    "validate_manifest_with_error_details",
    "main",
]
