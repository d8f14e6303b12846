"""Base abstractions for manifest sources.

This module defines the interface a source of package folders must
implement to feed the ingestion pipeline.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from ..core.types import ManifestDocument

if TYPE_CHECKING:
    from ..transformers.base import Transformer


@dataclass(frozen=True)
class PackageFolder:
    """A named unit of source data.

    Attributes:
        name: Folder name, recorded as ``folder_name`` on every emote
        path: Directory holding the manifest and its images
    """

    name: str
    path: Path

    @property
    def manifest_path(self) -> Path:
        """Manifest file expected inside the folder (``<name>/<name>.json``)."""
        return self.path / f"{self.name}.json"


class Source(ABC):
    """Abstract base class for all package folder sources.

    Implementations list package folders and load their manifests,
    while the pipeline stays unaware of where the data lives.
    """

    @abstractmethod
    def list_folders(self) -> list[PackageFolder]:
        """List package folders in processing order.

        Returns:
            Folders to ingest; first-seen folders win duplicate keys
        """
        pass

    @abstractmethod
    def read_manifest(self, folder: PackageFolder) -> ManifestDocument | None:
        """Load the manifest of one package folder.

        Args:
            folder: The folder to read

        Returns:
            The parsed manifest, or None if the folder has no manifest

        Raises:
            ManifestError: If the manifest exists but is malformed
        """
        pass

    @abstractmethod
    def get_transformer(self) -> "Transformer":
        """Return the transformer that normalizes this source's entries."""
        pass
