"""Relocation of emote images to key-named files.

Source images live at ``<packages_dir>/<folder_name>/<emote_name>.png``;
each is copied or moved to ``<output_dir>/<danmaku_name>.png``.
"""

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from .core.errors import EmptyStoreError, MissingAssetError
from .platforms.filesystem.source import validate_path_safety
from .store import EmoteStore

IMAGE_SUFFIX = ".png"


@dataclass
class RelocationReport:
    relocated: int
    output_dir: Path
    moved: bool


def relocate_assets(
    store: EmoteStore,
    packages_dir: Path,
    output_dir: Path,
    move: bool = False,
    on_progress: Callable[[Path, Path], None] | None = None,
) -> RelocationReport:
    """Copy or move every stored emote's image into ``output_dir``.

    The output directory is emptied first so that it mirrors the store.
    A missing source image aborts the run; files relocated before the
    failure stay where they are.

    Args:
        store: Store whose records drive the relocation (in id order)
        packages_dir: Directory holding the package folders
        output_dir: Destination directory, removed and recreated
        move: Move source images instead of copying them
        on_progress: Optional callback receiving (source, destination)

    Returns:
        RelocationReport with the number of relocated files

    Raises:
        EmptyStoreError: If the store holds no records
        MissingAssetError: If a source image does not exist
        ValueError: If a source or destination path escapes its base directory
    """
    records = store.all_records()
    if not records:
        raise EmptyStoreError(
            f"Nothing to relocate: {store.path} holds no emotes; initialize and ingest first"
        )

    if output_dir.exists():
        shutil.rmtree(output_dir)
    output_dir.mkdir(parents=True)

    relocated = 0
    for record in records:
        source = packages_dir / record["folder_name"] / f"{record['emote_name']}{IMAGE_SUFFIX}"
        destination = output_dir / f"{record['danmaku_name']}{IMAGE_SUFFIX}"
        validate_path_safety(source, packages_dir)
        validate_path_safety(destination, output_dir)

        if not source.is_file():
            raise MissingAssetError(source, record["danmaku_name"])

        if move:
            shutil.move(source, destination)
        else:
            shutil.copyfile(source, destination)
        relocated += 1

        if on_progress is not None:
            on_progress(source, destination)

    return RelocationReport(relocated=relocated, output_dir=output_dir, moved=move)
