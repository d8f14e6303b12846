"""Workspace layout for the emote catalog.

All artifacts live under one workspace root (``./temp`` by default).
"""

from dataclasses import dataclass
from pathlib import Path

DEFAULT_WORKSPACE = Path("temp")


@dataclass
class WorkspaceConfig:
    """Paths used by one invocation.

    Attributes:
        db_path: SQLite emote store
        packages_dir: Downloaded package folders (ingestion input)
        emotes_dir: Relocated images, one per danmaku name
        rejections_path: Rejection buckets from the last ingestion
        csv_path: Tabular export
        json_path: Pretty JSON export
        json_min_path: Compact JSON export
    """

    db_path: Path
    packages_dir: Path
    emotes_dir: Path
    rejections_path: Path
    csv_path: Path
    json_path: Path
    json_min_path: Path

    @classmethod
    def from_root(cls, root: Path = DEFAULT_WORKSPACE) -> "WorkspaceConfig":
        return cls(
            db_path=root / "emote.db",
            packages_dir=root / "packages",
            emotes_dir=root / "emotes",
            rejections_path=root / "invalid_emotes.json",
            csv_path=root / "emote.csv",
            json_path=root / "emote.json",
            json_min_path=root / "emote.min.json",
        )
