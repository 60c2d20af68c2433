"""Error types raised by the devguide pipeline."""

from __future__ import annotations

from pathlib import Path


class DevGuideError(RuntimeError):
    """Base class for errors surfaced to the command line."""


class InputDirectoryNotFound(DevGuideError, FileNotFoundError):
    """The directory to analyse does not exist or is not a directory."""

    def __init__(self, path: Path | str) -> None:
        super().__init__(f"Directory not found: {path}")
        self.path = Path(path)


class OutputDirectoryCreationFailed(DevGuideError):
    """The guide's parent directory could not be created."""

    def __init__(self, path: Path | str, cause: OSError) -> None:
        super().__init__(f"Failed to create output directory: {path} ({cause})")
        self.path = Path(path)
        self.cause = cause


class ProbeReadError(DevGuideError):
    """A file expected to exist could not be read for pattern matching.

    Non-fatal: the classifier degrades the affected rule to its default.
    """

    def __init__(self, path: Path | str, cause: OSError) -> None:
        super().__init__(f"Unable to read {path}: {cause}")
        self.path = Path(path)
        self.cause = cause


class WriteFailed(DevGuideError):
    """The rendered guide could not be persisted."""

    def __init__(self, path: Path | str, cause: OSError) -> None:
        super().__init__(f"Failed to write {path}: {cause}")
        self.path = Path(path)
        self.cause = cause


__all__ = [
    "DevGuideError",
    "InputDirectoryNotFound",
    "OutputDirectoryCreationFailed",
    "ProbeReadError",
    "WriteFailed",
]
