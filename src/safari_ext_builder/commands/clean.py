"""Clean command implementation."""

import typer

from ..helpers.cleanup import cleanup_legacy_artifacts
from ..helpers.error_handler import handle_info, handle_warning
from ._config import load_pipeline_config


def clean_command():
    """Remove legacy projects and DerivedData folders without building."""
    config = load_pipeline_config()

    if config.skip_cleanup:
        handle_info("Cleanup disabled by SAFARI_SKIP_CLEANUP=1")
        return None
    if not config.legacy_names:
        handle_info("No legacy app names to clean")
        return None
    if config.derived_data_root is None:
        handle_warning("HOME is not set, DerivedData folders will not be cleaned")

    typer.echo(f"Legacy names: {', '.join(config.legacy_names)}")
    return cleanup_legacy_artifacts(config)
