"""Exceptions raised by the emote catalog.

Validation failures on individual emote entries are not exceptions; they are
collected in rejection buckets. Everything here aborts the current operation.
"""

from pathlib import Path


class EmoteCatalogError(Exception):
    """Base class for all emote catalog errors."""


class ManifestError(EmoteCatalogError, ValueError):
    """Raised when a present manifest file cannot be parsed or validated."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Malformed manifest {path}: {reason}")


class StoreNotInitializedError(EmoteCatalogError):
    """Raised when the emotes table does not exist yet."""


class EmptyStoreError(EmoteCatalogError):
    """Raised when an export or relocation is requested against an empty store."""


class MissingAssetError(EmoteCatalogError, FileNotFoundError):
    """Raised when a stored emote has no source image to relocate."""

    def __init__(self, path: Path, danmaku_name: str) -> None:
        self.path = path
        self.danmaku_name = danmaku_name
        super().__init__(f"Source image does not exist: {path} (for {danmaku_name})")
