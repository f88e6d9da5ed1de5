"""
Pipeline orchestrator for the Safari Extension Builder.

Runs cleanup, bundling, conversion, bundle identifier repair and the optional
xcodebuild step in order, stopping at the first fatal error.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Sequence

import typer

from ..helpers.bundle_id import fix_bundle_identifiers
from ..helpers.cleanup import CleanupResult, cleanup_legacy_artifacts
from ..helpers.errors import PipelineError
from ..helpers.logger import get_logger
from ..helpers.process import run_command
from .config import PipelineConfig, Platform

logger = get_logger("orchestrator")

CommandRunner = Callable[[Sequence[str]], None]


class PipelineStage(Enum):
    CONFIGURING = "configuring"
    CLEANING = "cleaning"
    BUNDLING_SOURCE = "bundling_source"
    CONVERTING = "converting"
    REPAIRING_METADATA = "repairing_metadata"
    BUILDING = "building"
    DONE = "done"
    FAILED = "failed"


@dataclass
class PipelineResult:
    """Outcome of a pipeline run."""

    stage: PipelineStage = PipelineStage.CONFIGURING
    completed: List[PipelineStage] = field(default_factory=list)
    error: Optional[PipelineError] = None
    failed_stage: Optional[PipelineStage] = None
    cleanup: Optional[CleanupResult] = None
    identifiers_updated: Optional[int] = None

    @property
    def succeeded(self) -> bool:
        return self.stage is PipelineStage.DONE


def build_converter_command(config: PipelineConfig) -> List[str]:
    """Arguments for xcrun safari-web-extension-converter."""
    return [
        "xcrun",
        "safari-web-extension-converter",
        str(config.source_dir),
        "--project-location",
        str(config.project_location),
        "--app-name",
        config.app_name,
        "--bundle-identifier",
        config.bundle_id,
        config.platform.converter_flag,
        "--swift",
        "--copy-resources",
        "--no-open",
        "--no-prompt",
        "--force",
    ]


def build_xcodebuild_command(config: PipelineConfig) -> List[str]:
    """Arguments for a Debug macOS build of the generated project."""
    return [
        "xcodebuild",
        "-project",
        str(config.xcodeproj_path),
        "-scheme",
        config.app_name,
        "-configuration",
        "Debug",
        "-destination",
        "platform=macOS",
        "build",
    ]


class PipelineOrchestrator:
    """Sequences the build stages for one configuration."""

    def __init__(self, config: PipelineConfig, runner: Optional[CommandRunner] = None):
        self.config = config
        self.runner = runner or run_command
        self.result = PipelineResult()

    def should_build(self) -> bool:
        return self.config.platform is Platform.MACOS and not self.config.skip_build

    def _enter(self, stage: PipelineStage, message: str) -> None:
        self.result.stage = stage
        logger.info(f"Stage: {stage.value}")
        typer.echo(message)

    def _complete(self) -> None:
        self.result.completed.append(self.result.stage)

    def _clean(self) -> None:
        self._enter(PipelineStage.CLEANING, "🧹 Cleaning legacy artifacts...")
        self.result.cleanup = cleanup_legacy_artifacts(self.config)
        self._complete()

    def _bundle_source(self) -> None:
        self._enter(PipelineStage.BUNDLING_SOURCE, "📦 Building extension bundle...")
        self.runner(list(self.config.bundler_command))
        self._complete()

    def _convert(self) -> None:
        self._enter(PipelineStage.CONVERTING, "🔄 Converting to Safari extension...")
        self.runner(build_converter_command(self.config))
        self._complete()

    def _repair_metadata(self) -> None:
        self._enter(
            PipelineStage.REPAIRING_METADATA, "🔧 Fixing bundle identifiers..."
        )
        updated = fix_bundle_identifiers(self.config.pbxproj_path, self.config.bundle_id)
        self.result.identifiers_updated = updated
        typer.echo(f"Fixed bundle identifier: {updated} occurrence(s)")
        self._complete()

    def _build(self) -> None:
        self._enter(PipelineStage.BUILDING, "🔨 Building Xcode project...")
        self.runner(build_xcodebuild_command(self.config))
        self._complete()

    def run(self) -> PipelineResult:
        """
        Run every stage in order.

        Fatal errors are captured in the returned result rather than raised,
        so the caller decides how to exit.
        """
        config = self.config
        typer.echo("Building Safari developer extension...")
        typer.echo(f"App name: {config.app_name}")
        typer.echo(f"Bundle ID: {config.bundle_id}")
        self._complete()

        try:
            self._clean()
            self._bundle_source()
            self._convert()
            self._repair_metadata()
            if self.should_build():
                self._build()
            else:
                logger.info("Skipping xcodebuild")
        except PipelineError as e:
            logger.error(f"Pipeline failed during {self.result.stage.value}: {e}")
            self.result.error = e
            self.result.failed_stage = self.result.stage
            self.result.stage = PipelineStage.FAILED
            return self.result

        self.result.stage = PipelineStage.DONE
        typer.echo("\nSafari extension project generated")
        typer.echo(f"Xcode project: {config.xcodeproj_path}")
        return self.result


def run_pipeline(
    config: PipelineConfig, runner: Optional[CommandRunner] = None
) -> PipelineResult:
    """Run the full pipeline for a configuration."""
    return PipelineOrchestrator(config, runner).run()
