"""Base transformer class for normalizing raw manifest entries.

A transformer turns one raw emote entry plus its package context into
exactly one outcome: dropped, rejected with a reason, or a candidate record.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..core.types import EmoteRecord, ManifestEmote


@dataclass(frozen=True)
class Dropped:
    """Entry does not reference an image; never persisted, never bucketed."""

    url: str


@dataclass(frozen=True)
class Rejected:
    """Entry failed validation and belongs in the ``reason`` bucket."""

    reason: str
    record: EmoteRecord


@dataclass(frozen=True)
class Candidate:
    """Valid entry, ready for insertion into the store."""

    record: EmoteRecord


Outcome = Dropped | Rejected | Candidate


class Transformer(ABC):
    """Abstract base class for entry transformers."""

    @abstractmethod
    def transform(
        self,
        folder_name: str,
        package_name: str,
        entry: ManifestEmote,
    ) -> Outcome:
        """Classify and normalize a raw emote entry.

        Args:
            folder_name: Name of the package folder holding the manifest
            package_name: Display name of the enclosing package
            entry: Raw emote entry from the manifest

        Returns:
            Exactly one of Dropped, Rejected or Candidate
        """
        pass
