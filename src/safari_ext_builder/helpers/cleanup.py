"""
Legacy artifact cleanup for the Safari Extension Builder.

Removes Xcode projects generated under earlier app names and the matching
DerivedData folders Xcode created for them.
"""

import os
import re
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import List

import typer

from .logger import get_logger

logger = get_logger("cleanup")

DERIVED_DATA_SEPARATOR = "-"


@dataclass
class CleanupResult:
    """Counts of removed legacy artifacts."""

    projects_removed: int = 0
    derived_data_removed: int = 0


def sanitize_project_name(name: str) -> str:
    """Map a project name to the form Xcode uses for DerivedData folder names."""
    return re.sub(r"[^A-Za-z0-9_]", "_", name)


def remove_path(path: Path) -> bool:
    """Remove a directory tree, file or symlink. Returns True if the path existed."""
    if not os.path.lexists(path):
        return False
    # Symlinks are unlinked, never followed
    if path.is_symlink() or not path.is_dir():
        path.unlink()
    else:
        shutil.rmtree(path)
    return True


def _remove_legacy_projects(config) -> int:
    removed = 0
    for name in config.legacy_names:
        legacy_project_root = config.project_location / name
        try:
            if remove_path(legacy_project_root):
                logger.info(f"Removed legacy project: {legacy_project_root}")
                removed += 1
        except OSError as e:
            logger.warning(f"Failed to remove legacy project {legacy_project_root}: {e}")
    return removed


def _remove_derived_data(config) -> int:
    derived_data_root = config.derived_data_root
    if derived_data_root is None:
        logger.debug("Home directory not set, skipping DerivedData cleanup")
        return 0

    try:
        if not derived_data_root.is_dir():
            logger.debug(f"No DerivedData directory at {derived_data_root}")
            return 0
        entries: List[Path] = sorted(derived_data_root.iterdir())
    except OSError as e:
        logger.warning(f"Could not list DerivedData at {derived_data_root}: {e}")
        return 0

    prefixes = [
        f"{sanitize_project_name(name)}{DERIVED_DATA_SEPARATOR}"
        for name in config.legacy_names
    ]

    removed = 0
    for entry in entries:
        try:
            if not entry.is_dir():
                continue
        except OSError:
            continue
        if not any(entry.name.startswith(prefix) for prefix in prefixes):
            continue

        try:
            if remove_path(entry):
                logger.info(f"Removed DerivedData folder: {entry}")
                removed += 1
        except OSError as e:
            logger.warning(f"Failed to remove DerivedData folder {entry}: {e}")
    return removed


def cleanup_legacy_artifacts(config) -> CleanupResult:
    """
    Remove projects and DerivedData left behind by earlier app names.

    Every removal is attempted independently; failures are logged and
    skipped, so this never raises.

    Args:
        config: PipelineConfig for the current run

    Returns:
        CleanupResult with the number of projects and DerivedData folders removed
    """
    result = CleanupResult()
    if config.skip_cleanup or not config.legacy_names:
        return result

    result.projects_removed = _remove_legacy_projects(config)
    result.derived_data_removed = _remove_derived_data(config)

    typer.echo(
        f"Cleaned legacy artifacts: {result.projects_removed} project(s), "
        f"{result.derived_data_removed} DerivedData folder(s)"
    )
    return result
