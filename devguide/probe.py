"""Filesystem evidence queries used by the classifier."""

from __future__ import annotations

import os
import re
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterator, Optional, Sequence

from .errors import InputDirectoryNotFound, ProbeReadError
from .logging import get_logger
from .models import EvidenceRule

_EXCLUDED_DIRS = {
    ".git",
    ".hg",
    ".svn",
    ".venv",
    "venv",
    "node_modules",
    "__pycache__",
    ".pytest_cache",
    ".mypy_cache",
    ".idea",
    "target",
    "dist",
    "build",
}


class EvidenceProber:
    """Answers presence and content questions about a project directory.

    Missing files and directories are negative answers, never errors. A file
    that exists but cannot be read raises :class:`ProbeReadError`, and a
    directory listing that fails propagates the underlying ``OSError``.
    """

    def __init__(self, root: Path | str) -> None:
        root_path = Path(root).expanduser()
        if not root_path.is_dir():
            raise InputDirectoryNotFound(root)
        self.root = root_path.resolve()
        self.logger = get_logger("probe")

    def file_exists(self, relative: str) -> bool:
        return (self.root / relative).is_file()

    def dir_exists(self, relative: str) -> bool:
        return (self.root / relative).is_dir()

    def path_exists(self, relative: str) -> bool:
        return (self.root / relative).exists()

    def search(self, relative: str, pattern: str) -> Optional[str]:
        """Return the first match of ``pattern`` inside ``relative`` or None."""
        path = self.root / relative
        if not path.is_file():
            return None
        try:
            text = path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            raise ProbeReadError(path, exc) from exc
        match = re.search(pattern, text, flags=re.MULTILINE)
        return match.group(0) if match else None

    def contains(self, relative: str, pattern: str) -> bool:
        return self.search(relative, pattern) is not None

    def glob_any(self, pattern: str, *, max_depth: int = 1, relative: str = "") -> bool:
        """Return True when a file matching ``pattern`` exists within ``max_depth`` levels."""
        base = self.root / relative if relative else self.root
        if not base.is_dir():
            return False
        for path in self._iter_files(base, max_depth):
            if fnmatchcase(path.name, pattern):
                self.logger.debug("Matched %s for pattern %s", path, pattern)
                return True
        return False

    def count_files(self, relative: str, patterns: Sequence[str], *, max_depth: int = 8) -> int:
        """Count files under ``relative`` whose names match any of ``patterns``."""
        base = self.root / relative
        if not base.is_dir():
            return 0
        return sum(
            1
            for path in self._iter_files(base, max_depth)
            if any(fnmatchcase(path.name, pattern) for pattern in patterns)
        )

    def evaluate(self, rule: EvidenceRule) -> bool:
        """Evaluate a declarative evidence rule against the directory."""
        if rule.kind == "file":
            return self.file_exists(rule.target)
        if rule.kind == "directory":
            return self.dir_exists(rule.target)
        if rule.kind == "path":
            return self.path_exists(rule.target)
        if rule.kind == "glob":
            directory, _, pattern = rule.target.rpartition("/")
            return self.glob_any(pattern, max_depth=rule.max_depth, relative=directory)
        if rule.kind == "content":
            if rule.pattern is None:
                raise ValueError(f"Content rule for {rule.target} requires a pattern")
            return self.contains(rule.target, rule.pattern)
        raise ValueError(f"Unknown evidence kind: {rule.kind}")

    def _iter_files(self, base: Path, max_depth: int) -> Iterator[Path]:
        pending: list[tuple[Path, int]] = [(base, 1)]
        while pending:
            directory, depth = pending.pop(0)
            with os.scandir(directory) as entries:
                ordered = sorted(entries, key=lambda entry: entry.name)
            for entry in ordered:
                if entry.is_dir(follow_symlinks=False):
                    if depth < max_depth and entry.name not in _EXCLUDED_DIRS:
                        pending.append((Path(entry.path), depth + 1))
                    continue
                yield Path(entry.path)


__all__ = ["EvidenceProber"]
