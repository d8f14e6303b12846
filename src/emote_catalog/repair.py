"""Heuristic repair of manifests with missing emote names.

Works on the ``missing_emote_name`` bucket of the rejection file. For each
entry a name is recovered from the chat token, e.g. ``[tv_smile]`` becomes
``smile``; the image is renamed to ``smile.png`` and every manifest emote
whose URL mentions the original file gets ``smile`` as its alias.

Misses are reported and skipped; they need manual review.
"""

import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .core.errors import ManifestError
from .core.types import MISSING_EMOTE_NAME, ManifestDocument
from .platforms.filesystem.source import load_manifest_file, validate_path_safety

# Bucket key used by rejection files written before reasons were split
LEGACY_BUCKET_KEY = "emote_name"


@dataclass
class RepairReport:
    repaired: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


def derive_candidate_name(danmaku_name: str) -> str | None:
    """Recover an emote name from its chat token.

    Strips one "_]", one "]" and one "[" and keeps the last
    underscore-separated segment.

    Returns:
        The candidate name, or None when nothing usable remains
    """
    stripped = danmaku_name.replace("_]", "", 1).replace("]", "", 1).replace("[", "", 1)
    name = stripped.split("_")[-1]
    return name or None


def load_missing_name_entries(rejections_path: Path) -> list[dict[str, Any]]:
    with rejections_path.open("r", encoding="utf-8") as f:
        buckets = json.load(f)
    if MISSING_EMOTE_NAME in buckets:
        return buckets[MISSING_EMOTE_NAME]  # type: ignore[no-any-return]
    return buckets.get(LEGACY_BUCKET_KEY, [])  # type: ignore[no-any-return]


def patch_manifest(
    manifest_path: Path, document: ManifestDocument, og_file_name: str, name: str
) -> int:
    """Set the alias of every emote whose URL contains ``og_file_name``.

    Args:
        manifest_path: File the patched document is written to
        document: Manifest previously loaded from ``manifest_path``
        og_file_name: Original image file name to match in emote URLs
        name: Alias to assign

    Returns:
        Number of emote entries patched
    """
    patched = 0
    for package in document["data"]["packages"]:
        for emote in package["emote"]:
            if og_file_name in emote["url"]:
                emote.setdefault("meta", {})["alias"] = name
                patched += 1

    with manifest_path.open("w", encoding="utf-8") as f:
        json.dump(document, f, indent=2, ensure_ascii=False)
    return patched


def _skip(report: RepairReport, danmaku_name: str, message: str) -> None:
    print(f"Warning: {message}", file=sys.stderr)
    report.skipped.append(danmaku_name)


def repair_missing_names(rejections_path: Path, packages_dir: Path) -> RepairReport:
    """Rename images and patch manifests for entries missing an emote name.

    Every check runs before the image is renamed, so a skipped entry
    leaves both its image and its manifest untouched.

    Args:
        rejections_path: Rejection file written by the ingestion pipeline
        packages_dir: Directory holding the package folders

    Returns:
        RepairReport listing repaired and skipped chat tokens
    """
    report = RepairReport()

    for entry in load_missing_name_entries(rejections_path):
        danmaku_name = entry.get("danmaku_name") or ""
        og_file_name = entry.get("og_file_name")
        if not og_file_name:
            _skip(report, danmaku_name, f"No image file name recorded for {danmaku_name!r}")
            continue

        name = derive_candidate_name(danmaku_name)
        if name is None:
            _skip(
                report, danmaku_name, f"Cannot derive a name from {danmaku_name!r} ({og_file_name})"
            )
            continue

        folder = packages_dir / entry["folder_name"]
        source = folder / og_file_name
        target = folder / f"{name}.png"
        try:
            validate_path_safety(source, folder)
            validate_path_safety(target, folder)
        except ValueError as e:
            _skip(report, danmaku_name, str(e))
            continue

        manifest_path = folder / f"{entry['folder_name']}.json"
        if not source.is_file() or not manifest_path.is_file():
            _skip(report, danmaku_name, f"Image or manifest not found: {source}")
            continue

        if target.exists():
            _skip(report, danmaku_name, f"{target} already exists, not overwriting")
            continue

        try:
            document = load_manifest_file(manifest_path)
        except ManifestError as e:
            _skip(report, danmaku_name, str(e))
            continue

        source.rename(target)
        patch_manifest(manifest_path, document, og_file_name, name)
        report.repaired.append(danmaku_name)

    return report
