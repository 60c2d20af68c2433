"""Helper utilities for constructing temporary repositories in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Callable, Mapping, Optional

from devguide.analyzers import Classifier
from devguide.models import ProjectProfile
from devguide.probe import EvidenceProber


def no_binaries(_: str) -> Optional[str]:
    """`which` stand-in that finds nothing on PATH."""
    return None


class RepoBuilder:
    """Utility for writing files into a throwaway repository and classifying it."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "repo"
        self.root.mkdir()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries into the repository."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def prober(self) -> EvidenceProber:
        return EvidenceProber(self.root)

    def profile(self, which: Callable[[str], Optional[str]] = no_binaries) -> ProjectProfile:
        """Return a fresh profile of the repository contents."""
        return Classifier(which=which).classify(self.prober())

    def path(self) -> Path:
        """Return the repository root path."""
        return self.root


__all__ = ["RepoBuilder", "no_binaries"]
