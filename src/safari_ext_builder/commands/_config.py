"""Shared configuration loading for CLI commands."""

import dataclasses
import os
from typing import Optional

from ..helpers.error_handler import handle_error
from ..pipeline.config import PipelineConfig, Platform, resolve_config


def load_pipeline_config(
    platform: Optional[str] = None,
    skip_build: Optional[bool] = None,
    skip_cleanup: Optional[bool] = None,
) -> PipelineConfig:
    """Resolve configuration from the process environment plus CLI overrides."""
    config = resolve_config(os.environ)

    overrides = {}
    if platform is not None:
        if platform.lower() not in ("ios", "macos"):
            handle_error(f"Unknown platform '{platform}'. Use 'macos' or 'ios'")
        overrides["platform"] = Platform.from_value(platform.lower())
    if skip_build is not None:
        overrides["skip_build"] = skip_build
    if skip_cleanup is not None:
        overrides["skip_cleanup"] = skip_cleanup

    if overrides:
        config = dataclasses.replace(config, **overrides)
    return config
