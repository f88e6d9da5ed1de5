"""Fatal pipeline errors."""

from typing import List, Sequence


class PipelineError(Exception):
    """Base class for conditions that abort the pipeline."""


class MissingMetadataError(PipelineError):
    """The Xcode project file is missing after conversion."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Xcode project file not found: {path}")


class MetadataAccessError(PipelineError):
    """The Xcode project file could not be read, decoded or written."""

    def __init__(self, path, message: str):
        self.path = path
        super().__init__(message)


class ExternalCommandError(PipelineError):
    """An external tool exited with a non-zero status."""

    def __init__(self, command: Sequence[str], returncode: int, detail: str = ""):
        self.command: List[str] = list(command)
        self.returncode = returncode
        message = f"Command failed with exit code {returncode}: {' '.join(self.command)}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
