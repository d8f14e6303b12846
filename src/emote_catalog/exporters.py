"""Snapshot exports of the emote store.

Each export reads the full current store and can be regenerated at any
time without re-running ingestion.
"""

import csv
import json
from pathlib import Path

from .core.errors import EmptyStoreError
from .core.types import STORE_COLUMNS, StoredEmote
from .store import EmoteStore


def _snapshot(store: EmoteStore) -> list[StoredEmote]:
    records = store.all_records()
    if not records:
        raise EmptyStoreError(
            f"Nothing to export: {store.path} holds no emotes; initialize and ingest first"
        )
    return records


def export_csv(store: EmoteStore, path: Path) -> int:
    """Write one CSV row per stored emote, with a header row.

    Returns:
        Number of rows written (header excluded)

    Raises:
        EmptyStoreError: If the store holds no records
    """
    records = _snapshot(store)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=STORE_COLUMNS)
        writer.writeheader()
        writer.writerows(records)
    return len(records)


def export_json(store: EmoteStore, path: Path, minify: bool = False) -> int:
    """Write the stored emotes as a JSON array.

    Args:
        store: Source of the records
        path: Output file
        minify: Drop all insignificant whitespace instead of indenting

    Returns:
        Number of records written

    Raises:
        EmptyStoreError: If the store holds no records
    """
    records = _snapshot(store)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        if minify:
            json.dump(records, f, ensure_ascii=False, separators=(",", ":"))
        else:
            json.dump(records, f, ensure_ascii=False, indent=2)
    return len(records)
