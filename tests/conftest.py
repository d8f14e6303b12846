"""Shared fixtures for emote catalog tests."""

import json
from pathlib import Path
from typing import Any

import pytest

from emote_catalog.store import EmoteStore


def emote(alias: str | None, text: str | None, url: str) -> dict[str, Any]:
    """Build a raw manifest emote entry."""
    return {"text": text, "url": url, "meta": {"alias": alias}}


def write_manifest(
    packages_dir: Path, folder: str, packages: list[tuple[str, list[dict[str, Any]]]]
) -> Path:
    """Write ``<packages_dir>/<folder>/<folder>.json`` and return its path."""
    folder_dir = packages_dir / folder
    folder_dir.mkdir(parents=True, exist_ok=True)
    document = {
        "data": {
            "packages": [{"text": name, "emote": emotes} for name, emotes in packages]
        }
    }
    path = folder_dir / f"{folder}.json"
    path.write_text(json.dumps(document, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def packages_dir(tmp_path: Path) -> Path:
    path = tmp_path / "packages"
    path.mkdir()
    return path


@pytest.fixture
def store(tmp_path: Path):
    """Open store with the emotes table created."""
    emote_store = EmoteStore(tmp_path / "emote.db")
    emote_store.initialize()
    emote_store.create_schema()
    yield emote_store
    emote_store.close()


@pytest.fixture
def sample_packages(packages_dir: Path) -> Path:
    """Two folders with valid, rejected, duplicate and dropped entries."""
    write_manifest(
        packages_dir,
        "alpha",
        [
            (
                "Alpha Pack",
                [
                    emote("smile", "[tv_smile]", "https://cdn.example.com/emote/a1.png"),
                    emote("cry", "[tv_cry]", "https://cdn.example.com/emote/a2.png"),
                    emote("", "[tv_nameless]", "https://cdn.example.com/emote/a3.png"),
                    emote("clip", "[tv_clip]", "https://cdn.example.com/emote/clip.mp4"),
                ],
            )
        ],
    )
    write_manifest(
        packages_dir,
        "beta",
        [
            (
                "Beta Pack",
                [
                    emote("smile2", "[tv_smile]", "https://cdn.example.com/emote/b2.png"),
                    emote("wave", "", "https://cdn.example.com/emote/b3.png"),
                    emote("喜欢", "[beta_喜欢]", "https://cdn.example.com/emote/b4.png"),
                ],
            )
        ],
    )
    return packages_dir
