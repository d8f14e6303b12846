"""Filesystem source adapter.

This module provides a Source implementation that reads package
folders from a local directory, one manifest per folder.
"""

import json
from pathlib import Path

from ...core.errors import ManifestError
from ...core.types import ManifestDocument
from ...core.validator import validate_manifest_with_error_details
from ...sources.base import PackageFolder, Source
from ...transformers.base import Transformer
from ...transformers.normalizer import EmoteNormalizer


def validate_path_safety(path: Path, base_dir: Path) -> None:
    """Validate that a path stays within the base directory.

    This prevents path traversal through folder or emote names.

    Args:
        path: Path to validate
        base_dir: Base directory that path must be within

    Raises:
        ValueError: If path escapes the base directory
    """
    resolved_path = path.resolve()
    resolved_base = base_dir.resolve()

    if not resolved_path.is_relative_to(resolved_base):
        raise ValueError(f"Path {path} escapes base directory {base_dir}")


def load_manifest_file(path: Path) -> ManifestDocument:
    """Decode and validate a manifest file.

    Args:
        path: Manifest file to read

    Returns:
        The validated manifest document

    Raises:
        ManifestError: If the file is not valid JSON or violates the schema
    """
    try:
        with path.open("r", encoding="utf-8") as f:
            document = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ManifestError(path, f"invalid JSON ({e})") from e

    is_valid, error_msg = validate_manifest_with_error_details(document)
    if not is_valid:
        raise ManifestError(path, error_msg or "schema violation")

    return document  # type: ignore[no-any-return]


class FilesystemSource(Source):
    """Source adapter for a directory of package folders.

    Every non-hidden subdirectory is a package folder. Folders are
    listed in name order so duplicate resolution is reproducible.

    Example:
        >>> source = FilesystemSource(Path('temp/packages'))
        >>> for folder in source.list_folders():
        ...     manifest = source.read_manifest(folder)
    """

    def __init__(self, path: Path):
        """Initialize filesystem source.

        Args:
            path: Directory containing the package folders

        Raises:
            ValueError: If path doesn't exist or isn't a directory
        """
        self.path = path.resolve()

        if not self.path.exists():
            raise ValueError(f"Path does not exist: {self.path}")

        if not self.path.is_dir():
            raise ValueError(f"Path is not a directory: {self.path}")

    def list_folders(self) -> list[PackageFolder]:
        return [
            PackageFolder(name=entry.name, path=entry)
            for entry in sorted(self.path.iterdir(), key=lambda p: p.name)
            if entry.is_dir() and not entry.name.startswith(".")
        ]

    def read_manifest(self, folder: PackageFolder) -> ManifestDocument | None:
        manifest_path = folder.manifest_path
        if not manifest_path.is_file():
            return None
        return load_manifest_file(manifest_path)

    def get_transformer(self) -> Transformer:
        return EmoteNormalizer()
