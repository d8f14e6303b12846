"""Core definitions shared across the emote catalog.

This package contains the record and manifest type definitions,
the error taxonomy, and manifest schema validation.
"""

from .errors import (
    EmoteCatalogError,
    EmptyStoreError,
    ManifestError,
    MissingAssetError,
    StoreNotInitializedError,
)
from .types import (
    DUPLICATE_DANMAKU_NAME,
    MISSING_DANMAKU_NAME,
    MISSING_EMOTE_NAME,
    REJECTION_REASONS,
    STORE_COLUMNS,
    EmoteRecord,
    ManifestDocument,
    RejectionBuckets,
    StoredEmote,
    empty_buckets,
)
from .validator import validate_manifest, validate_manifest_with_error_details

__all__ = [
    "DUPLICATE_DANMAKU_NAME",
    "MISSING_DANMAKU_NAME",
    "MISSING_EMOTE_NAME",
    "REJECTION_REASONS",
    "STORE_COLUMNS",
    "EmoteCatalogError",
    "EmoteRecord",
    "EmptyStoreError",
    "ManifestDocument",
    "ManifestError",
    "MissingAssetError",
    "RejectionBuckets",
    "StoreNotInitializedError",
    "StoredEmote",
    "empty_buckets",
    "validate_manifest",
    "validate_manifest_with_error_details",
]
