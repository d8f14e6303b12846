"""Ingestion pipeline for the emote store.

This module drives a source, its transformer and the store across every
package folder. The pipeline is source-agnostic; folder listing and
manifest loading are delegated to the Source implementation.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path

from .core.types import (
    DUPLICATE_DANMAKU_NAME,
    MISSING_DANMAKU_NAME,
    MISSING_EMOTE_NAME,
    EmoteRecord,
    RejectionBuckets,
    empty_buckets,
)
from .sources.base import PackageFolder, Source
from .store import EmoteStore
from .transformers.base import Candidate, Dropped, Rejected


@dataclass
class IngestionReport:
    """Aggregate result of one ingestion run.

    Attributes:
        accepted: Records persisted in the store
        dropped: Entries without an image reference (counted, never bucketed)
        folders_scanned: Folders whose manifest was ingested
        folders_skipped: Folders without a manifest
        rejections: Rejected entries keyed by reason
    """

    accepted: int = 0
    dropped: int = 0
    folders_scanned: int = 0
    folders_skipped: int = 0
    rejections: RejectionBuckets = field(default_factory=empty_buckets)

    def rejected(self, reason: str) -> int:
        """Number of entries rejected for ``reason``."""
        return len(self.rejections[reason])  # type: ignore[literal-required]

    def summary(self) -> str:
        return (
            f"Imported {self.accepted} emotes from {self.folders_scanned} folders; "
            f"rejected: no emote name ({self.rejected(MISSING_EMOTE_NAME)}), "
            f"no danmaku name ({self.rejected(MISSING_DANMAKU_NAME)}), "
            f"duplicate danmaku name ({self.rejected(DUPLICATE_DANMAKU_NAME)}); "
            f"non-image entries dropped ({self.dropped})"
        )


def write_rejections(rejections: RejectionBuckets, path: Path) -> None:
    """Persist rejection buckets as one pretty-printed JSON document."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(rejections, f, indent=2, ensure_ascii=False)


class IngestionPipeline:
    """Main interface for loading a source into the emote store.

    Example:
        >>> pipeline = SourceRegistry.create_pipeline(
        ...     'filesystem', path=Path('temp/packages'), store=store
        ... )
        >>> report = pipeline.run(rejections_path=Path('temp/invalid_emotes.json'))
        >>> print(report.summary())
    """

    def __init__(self, source: Source, store: EmoteStore):
        """Initialize the pipeline.

        Args:
            source: Source providing package folders and manifests
            store: Open store receiving the accepted records
        """
        self.source = source
        self.store = store

    def run(self, rejections_path: Path | None = None) -> IngestionReport:
        """Clear the store and ingest every package folder.

        Each package is committed as one transaction, so an abort leaves
        only fully committed packages behind.

        Args:
            rejections_path: Where to write the rejection buckets, if anywhere

        Returns:
            Counts and rejection buckets for the run

        Raises:
            ManifestError: If any present manifest is malformed
            StoreNotInitializedError: If the store has no schema
        """
        self.store.clear()
        report = IngestionReport()

        for folder in self.source.list_folders():
            self.ingest_folder(folder, report)

        if rejections_path is not None:
            write_rejections(report.rejections, rejections_path)

        return report

    def ingest_folder(self, folder: PackageFolder, report: IngestionReport) -> None:
        """Ingest one package folder, updating ``report`` in place."""
        manifest = self.source.read_manifest(folder)
        if manifest is None:
            report.folders_skipped += 1
            return

        transformer = self.source.get_transformer()
        for package in manifest["data"]["packages"]:
            batch: list[EmoteRecord] = []
            for entry in package["emote"]:
                outcome = transformer.transform(folder.name, package["text"], entry)
                if isinstance(outcome, Dropped):
                    report.dropped += 1
                elif isinstance(outcome, Rejected):
                    report.rejections[outcome.reason].append(outcome.record)  # type: ignore[literal-required]
                elif isinstance(outcome, Candidate):
                    batch.append(outcome.record)

            duplicates = self.store.insert_batch(batch)
            report.rejections[DUPLICATE_DANMAKU_NAME].extend(duplicates)
            report.accepted += len(batch) - len(duplicates)

        report.folders_scanned += 1
