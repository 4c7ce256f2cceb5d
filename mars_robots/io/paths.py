"""Path construction helpers for persisted run directories.

Centralises the directory/file naming conventions shared by the writer, the
reader and the CLI.
"""

from __future__ import annotations

from pathlib import Path


def resolve_within_base(path: Path, base_dir: Path) -> Path:
    """Resolve a relative or absolute *path* under *base_dir*; ValueError if it lands outside."""
    base = base_dir.resolve()
    resolved = (base / path).resolve()
    if not resolved.is_relative_to(base):
        raise ValueError(f"Path escapes base_dir: {path}")
    return resolved


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def outcomes_path(out_dir: Path) -> Path:
    """Return path to the robot outcomes Parquet file."""
    return logs_dir(out_dir) / "outcomes.parquet"


def paths_log_path(out_dir: Path) -> Path:
    """Return path to the visited-path Parquet file."""
    return logs_dir(out_dir) / "paths.parquet"


def scents_path(out_dir: Path) -> Path:
    """Return path to the scent marker Parquet file."""
    return logs_dir(out_dir) / "scents.parquet"


def run_summary_path(out_dir: Path) -> Path:
    """Return path to the run summary JSON file."""
    return logs_dir(out_dir) / "run_summary.json"
