"""Filesystem platform for the ingestion pipeline.

This platform reads package folders from a local directory,
allowing the pipeline to ingest a downloaded emote repository.
"""

from pathlib import Path

from .source import FilesystemSource, load_manifest_file, validate_path_safety

# Auto-register with the registry
from ...registry import SourceRegistry


def _create_filesystem_source(path: Path, **kwargs) -> FilesystemSource:
    """Factory function for creating filesystem sources.

    Args:
        path: Directory containing the package folders
        **kwargs: Additional parameters (unused for filesystem)

    Returns:
        FilesystemSource instance
    """
    return FilesystemSource(Path(path))


# Auto-register at module import
SourceRegistry.register_factory('filesystem', _create_filesystem_source)

__all__ = [
    "FilesystemSource",
    "load_manifest_file",
    "validate_path_safety",
]
