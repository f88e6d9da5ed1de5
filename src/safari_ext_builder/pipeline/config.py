"""Pipeline configuration resolved from the environment."""

import shlex
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Tuple

DEFAULT_APP_NAME = "AllAPIHub"
DEFAULT_BUNDLE_ID = "com.asm2apex.allapihub"
DEFAULT_SOURCE_DIR = ".output/chrome-mv3"
DEFAULT_PROJECT_LOCATION = ".output/safari"
DEFAULT_BUNDLER_COMMAND = "pnpm build"

# Names earlier releases generated projects under
HISTORICAL_APP_NAMES = ("AllAPIHub", "All API Hub")

DERIVED_DATA_SUBPATH = Path("Library/Developer/Xcode/DerivedData")


class Platform(Enum):
    """Target platform for the converted project."""

    MACOS = "macos"
    IOS = "ios"

    @property
    def converter_flag(self) -> str:
        return "--ios-only" if self is Platform.IOS else "--macos-only"

    @classmethod
    def from_value(cls, value: Optional[str]) -> "Platform":
        """Only an explicit ``ios`` selects iOS; anything else is macOS."""
        return cls.IOS if value == "ios" else cls.MACOS


@dataclass(frozen=True)
class PipelineConfig:
    """Immutable configuration for one pipeline run."""

    app_name: str = DEFAULT_APP_NAME
    bundle_id: str = DEFAULT_BUNDLE_ID
    source_dir: Path = Path(DEFAULT_SOURCE_DIR)
    project_location: Path = Path(DEFAULT_PROJECT_LOCATION)
    platform: Platform = Platform.MACOS
    skip_build: bool = False
    skip_cleanup: bool = False
    legacy_names: Tuple[str, ...] = field(default_factory=tuple)
    home_dir: Optional[Path] = None
    bundler_command: Tuple[str, ...] = tuple(shlex.split(DEFAULT_BUNDLER_COMMAND))

    @property
    def project_root(self) -> Path:
        return self.project_location / self.app_name

    @property
    def xcodeproj_path(self) -> Path:
        return self.project_root / f"{self.app_name}.xcodeproj"

    @property
    def pbxproj_path(self) -> Path:
        return self.xcodeproj_path / "project.pbxproj"

    @property
    def derived_data_root(self) -> Optional[Path]:
        if self.home_dir is None:
            return None
        return self.home_dir / DERIVED_DATA_SUBPATH

    def to_dict(self) -> dict:
        return {
            "appName": self.app_name,
            "bundleId": self.bundle_id,
            "sourceDir": str(self.source_dir),
            "projectLocation": str(self.project_location),
            "platform": self.platform.value,
            "skipBuild": self.skip_build,
            "skipCleanup": self.skip_cleanup,
            "legacyNames": list(self.legacy_names),
            "xcodeProject": str(self.xcodeproj_path),
            "derivedDataRoot": (
                str(self.derived_data_root) if self.derived_data_root else None
            ),
            "bundlerCommand": list(self.bundler_command),
        }


def parse_legacy_names(raw: Optional[str]) -> List[str]:
    """Split a comma-separated name list, trimming entries and dropping empty ones."""
    if not raw:
        return []
    return [name.strip() for name in raw.split(",") if name.strip()]


def build_legacy_names(app_name: str, extras: Iterable[str] = ()) -> Tuple[str, ...]:
    """
    Build the ordered set of project names to prune.

    The current app name is always excluded so a run never deletes
    the project it is about to generate.
    """
    names: List[str] = []
    for name in (*HISTORICAL_APP_NAMES, *extras):
        if name != app_name and name not in names:
            names.append(name)
    return tuple(names)


def _get(environ: Mapping[str, str], key: str, default: str) -> str:
    return environ.get(key) or default


def _split_command(raw: Optional[str]) -> Tuple[str, ...]:
    try:
        command = tuple(shlex.split(raw)) if raw else ()
    except ValueError:
        # Unbalanced quotes
        command = ()
    return command or tuple(shlex.split(DEFAULT_BUNDLER_COMMAND))


def resolve_config(environ: Mapping[str, str]) -> PipelineConfig:
    """
    Resolve pipeline configuration from an environment mapping.

    Args:
        environ: Environment variables, usually ``os.environ``

    Returns:
        PipelineConfig with defaults applied for anything unset
    """
    app_name = _get(environ, "SAFARI_APP_NAME", DEFAULT_APP_NAME)
    home = environ.get("HOME")

    return PipelineConfig(
        app_name=app_name,
        bundle_id=_get(environ, "SAFARI_BUNDLE_ID", DEFAULT_BUNDLE_ID),
        source_dir=Path(_get(environ, "SAFARI_SOURCE_DIR", DEFAULT_SOURCE_DIR)),
        project_location=Path(
            _get(environ, "SAFARI_PROJECT_LOCATION", DEFAULT_PROJECT_LOCATION)
        ),
        platform=Platform.from_value(environ.get("SAFARI_PLATFORM")),
        skip_build=environ.get("SAFARI_SKIP_XCODEBUILD") == "1",
        skip_cleanup=environ.get("SAFARI_SKIP_CLEANUP") == "1",
        legacy_names=build_legacy_names(
            app_name, parse_legacy_names(environ.get("SAFARI_CLEAN_LEGACY_NAMES"))
        ),
        home_dir=Path(home) if home else None,
        bundler_command=_split_command(environ.get("SAFARI_BUNDLER_COMMAND")),
    )
