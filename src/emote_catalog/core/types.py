"""Type definitions for emote manifests and the normalized record set.

The manifest TypedDicts mirror the JSON schema in manifest.schema.json.
The record TypedDicts mirror the columns of the ``emotes`` table.
"""

from typing import TypedDict


class EmoteMeta(TypedDict, total=False):
    """Display metadata attached to a manifest emote."""

    alias: str | None  # Human emote name


class ManifestEmote(TypedDict, total=False):
    """Raw emote entry as it appears in a package manifest."""

    text: str | None  # Chat-command token, e.g. "[tv_smile]"
    url: str  # Remote image reference
    meta: EmoteMeta


class ManifestPackage(TypedDict):
    """Named group of emotes within a manifest."""

    text: str  # Package display name
    emote: list[ManifestEmote]


class ManifestData(TypedDict):
    packages: list[ManifestPackage]


class ManifestDocument(TypedDict):
    """Complete manifest file for one package folder."""

    data: ManifestData


class EmoteRecord(TypedDict):
    """Normalized emote, ready for persistence.

    ``og_file_name`` is None only on partial records held in rejection buckets.
    """

    folder_name: str
    package_name: str
    emote_name: str
    danmaku_name: str  # Natural key, unique across the store
    og_file_name: str | None


class StoredEmote(TypedDict):
    """Row of the ``emotes`` table."""

    id: int
    folder_name: str
    og_file_name: str | None
    package_name: str
    emote_name: str
    danmaku_name: str


class RejectionBuckets(TypedDict):
    """Entries that failed validation, keyed by reason."""

    missing_emote_name: list[EmoteRecord]
    missing_danmaku_name: list[EmoteRecord]
    duplicate_danmaku_name: list[EmoteRecord]


MISSING_EMOTE_NAME = "missing_emote_name"
MISSING_DANMAKU_NAME = "missing_danmaku_name"
DUPLICATE_DANMAKU_NAME = "duplicate_danmaku_name"

REJECTION_REASONS = (MISSING_EMOTE_NAME, MISSING_DANMAKU_NAME, DUPLICATE_DANMAKU_NAME)

# Column order of the table and of every tabular export
STORE_COLUMNS = (
    "id",
    "folder_name",
    "og_file_name",
    "package_name",
    "emote_name",
    "danmaku_name",
)


def empty_buckets() -> RejectionBuckets:
    """Return a fresh set of empty rejection buckets."""
    return RejectionBuckets(
        missing_emote_name=[],
        missing_danmaku_name=[],
        duplicate_danmaku_name=[],
    )
