"""
Pipeline module for the Safari Extension Builder.

Contains configuration resolution and stage orchestration.
"""

from .config import (
    HISTORICAL_APP_NAMES,
    PipelineConfig,
    Platform,
    build_legacy_names,
    parse_legacy_names,
    resolve_config,
)
from .orchestrator import (
    PipelineOrchestrator,
    PipelineResult,
    PipelineStage,
    build_converter_command,
    build_xcodebuild_command,
    run_pipeline,
)

__all__ = [
    "HISTORICAL_APP_NAMES",
    "PipelineConfig",
    "Platform",
    "build_legacy_names",
    "parse_legacy_names",
    "resolve_config",
    "PipelineOrchestrator",
    "PipelineResult",
    "PipelineStage",
    "build_converter_command",
    "build_xcodebuild_command",
    "run_pipeline",
]
