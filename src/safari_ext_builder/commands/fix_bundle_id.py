"""Fix bundle identifier command implementation."""

from pathlib import Path
from typing import Optional

from ..helpers.bundle_id import fix_bundle_identifiers
from ..helpers.error_handler import handle_error, handle_success
from ..helpers.errors import PipelineError
from ._config import load_pipeline_config


def fix_bundle_id_command(pbxproj: Optional[str] = None, bundle_id: Optional[str] = None):
    """Rewrite PRODUCT_BUNDLE_IDENTIFIER values in an existing project."""
    config = load_pipeline_config()
    path = Path(pbxproj) if pbxproj else config.pbxproj_path
    canonical = bundle_id or config.bundle_id

    try:
        updated = fix_bundle_identifiers(path, canonical)
    except PipelineError as e:
        handle_error(str(e))

    handle_success(f"Fixed bundle identifier: {updated} occurrence(s) in {path}")
    return updated
