"""Build command implementation."""

from typing import Optional

from ..helpers.error_handler import handle_error
from ..pipeline import run_pipeline
from ._config import load_pipeline_config


def build_command(
    platform: Optional[str] = None,
    skip_build: Optional[bool] = None,
    skip_cleanup: Optional[bool] = None,
):
    """Convert the extension bundle into an Xcode project and optionally build it."""
    config = load_pipeline_config(platform, skip_build, skip_cleanup)
    result = run_pipeline(config)

    if not result.succeeded:
        handle_error(str(result.error))
    return result
