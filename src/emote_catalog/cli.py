"""Command-line interface for the emote catalog.

``emote-catalog`` runs any combination of store operations in a fixed
order: initialize, ingest, export CSV, export JSON, export compact JSON,
relocate images. ``emote-repair`` runs the manifest repair tool.
"""

import argparse
import sys
import time
from pathlib import Path

from .config import DEFAULT_WORKSPACE, WorkspaceConfig
from .exporters import export_csv, export_json
from .registry import SourceRegistry
from .relocator import relocate_assets
from .repair import repair_missing_names
from .store import EmoteStore


def _stderr(message: str) -> None:
    print(message, file=sys.stderr)


def build_config(args: argparse.Namespace) -> WorkspaceConfig:
    """Resolve workspace paths from the root and any per-path overrides."""
    config = WorkspaceConfig.from_root(Path(args.workspace))
    if args.packages_dir:
        config.packages_dir = Path(args.packages_dir)
    if args.db:
        config.db_path = Path(args.db)
    if args.emotes_dir:
        config.emotes_dir = Path(args.emotes_dir)
    return config


def run(args: argparse.Namespace) -> None:
    """Execute the selected operations against one store."""
    config = build_config(args)
    store = EmoteStore(config.db_path, trace=_stderr if args.sql_verbose else None)
    store.initialize()

    try:
        if args.initdb:
            store.create_schema()
            _stderr(f"Initialized emote store: {config.db_path}")

        if args.ingest:
            pipeline = SourceRegistry.create_pipeline(
                'filesystem', path=config.packages_dir, store=store
            )
            report = pipeline.run(rejections_path=config.rejections_path)
            _stderr(report.summary())
            _stderr(f"Rejected entries written to {config.rejections_path}")

        if args.csv:
            count = export_csv(store, config.csv_path)
            _stderr(f"Wrote {count} rows to {config.csv_path}")

        if args.json:
            count = export_json(store, config.json_path)
            _stderr(f"Wrote {count} emotes to {config.json_path}")

        if args.json_min:
            count = export_json(store, config.json_min_path, minify=True)
            _stderr(f"Wrote {count} emotes to {config.json_min_path}")

        if args.img:
            # Destructive: the output directory is emptied before relocation
            _stderr(f"Resetting image directory: {config.emotes_dir}")
            on_progress = (
                (lambda src, dst: _stderr(f"Relocated: {src} => {dst}"))
                if args.verbose
                else None
            )
            result = relocate_assets(
                store,
                config.packages_dir,
                config.emotes_dir,
                move=args.move,
                on_progress=on_progress,
            )
            verb = "Moved" if result.moved else "Copied"
            _stderr(f"{verb} {result.relocated} images to {result.output_dir}")
    finally:
        store.close()


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the emote catalog."""
    parser = argparse.ArgumentParser(
        description="Build a deduplicated emote store from package manifests",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Create the store and ingest ./temp/packages
  emote-catalog --initdb --ingest

  # Re-ingest and export everything
  emote-catalog --ingest --csv --json --json-min

  # Move images into ./temp/emotes named by danmaku name
  emote-catalog --img --move
        """,
    )

    parser.add_argument("--initdb", action="store_true", help="Create the emotes table")
    parser.add_argument(
        "--ingest", action="store_true", help="Clear the store and ingest all package folders"
    )
    parser.add_argument("--csv", action="store_true", help="Export the store as CSV")
    parser.add_argument("--json", action="store_true", help="Export the store as indented JSON")
    parser.add_argument(
        "--json-min", action="store_true", help="Export the store as compact JSON"
    )
    parser.add_argument(
        "--img",
        action="store_true",
        help="Relocate images to <emotes-dir>/<danmaku_name>.png (empties the directory first)",
    )
    parser.add_argument(
        "--move", action="store_true", help="With --img, move images instead of copying"
    )

    parser.add_argument(
        "--workspace",
        default=str(DEFAULT_WORKSPACE),
        help="Root directory for the store and all artifacts (default: temp)",
    )
    parser.add_argument("--packages-dir", help="Directory of package folders to ingest")
    parser.add_argument("--db", help="SQLite database path")
    parser.add_argument("--emotes-dir", help="Output directory for relocated images")
    parser.add_argument(
        "--sql-verbose", action="store_true", help="Print every SQL statement to stderr"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Report each relocated file")

    args = parser.parse_args(argv)

    start = time.perf_counter()
    try:
        run(args)
    except Exception as e:
        _stderr(f"Error: {e}")
        sys.exit(1)

    _stderr(f"Run time: {time.perf_counter() - start:.3f}s")


def repair_main(argv: list[str] | None = None) -> None:
    """Entry point for the manifest repair tool."""
    parser = argparse.ArgumentParser(
        description="Recover missing emote names from danmaku names and patch manifests",
    )
    parser.add_argument(
        "--packages-dir", required=True, help="Directory of package folders to repair"
    )
    parser.add_argument(
        "--rejections",
        default=str(WorkspaceConfig.from_root().rejections_path),
        help="Rejection file written by --ingest (default: temp/invalid_emotes.json)",
    )

    args = parser.parse_args(argv)

    packages_dir = Path(args.packages_dir)
    if not packages_dir.is_dir():
        _stderr(f"Error: Path is not a directory: {packages_dir}")
        sys.exit(1)

    try:
        report = repair_missing_names(Path(args.rejections), packages_dir)
    except Exception as e:
        _stderr(f"Error: Repair failed: {e}")
        sys.exit(1)

    _stderr(f"Repaired {len(report.repaired)} emotes, skipped {len(report.skipped)}")


if __name__ == "__main__":
    main()
