"""Record normalizer for raw manifest emote entries."""

from ..core.types import (
    MISSING_DANMAKU_NAME,
    MISSING_EMOTE_NAME,
    EmoteRecord,
    ManifestEmote,
)
from .base import Candidate, Dropped, Outcome, Rejected, Transformer

# Canonical image format; URLs without it are not image references
IMAGE_MARKER = ".png"


def is_image_reference(url: str) -> bool:
    """Check whether an asset URL points at a canonical-format image."""
    return IMAGE_MARKER in url


def derive_file_name(url: str) -> str:
    """Return the final path segment of a URL.

    Example:
        "https://i0.hdslb.com/bfs/emote/a1.png" -> "a1.png"
    """
    return url.rsplit("/", 1)[-1]


class EmoteNormalizer(Transformer):
    """Transformer producing canonical emote records.

    Checks run in a fixed order: image reference first (else dropped),
    then alias (else ``missing_emote_name``), then chat token
    (else ``missing_danmaku_name``). An entry missing both names lands
    only in ``missing_emote_name``.
    """

    def transform(
        self,
        folder_name: str,
        package_name: str,
        entry: ManifestEmote,
    ) -> Outcome:
        url = entry.get("url") or ""
        if not is_image_reference(url):
            return Dropped(url=url)

        alias = (entry.get("meta") or {}).get("alias") or ""
        danmaku_text = entry.get("text") or ""

        record = EmoteRecord(
            folder_name=folder_name,
            package_name=package_name,
            emote_name=alias,
            danmaku_name=danmaku_text,
            og_file_name=derive_file_name(url),
        )

        if not alias:
            return Rejected(reason=MISSING_EMOTE_NAME, record=record)
        if not danmaku_text:
            return Rejected(reason=MISSING_DANMAKU_NAME, record=record)
        return Candidate(record=record)
