"""Core data models shared across devguide components."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

Recommendation = str


@dataclass(frozen=True)
class EvidenceRule:
    """Single filesystem check that contributes a label to a profile bucket.

    ``kind`` is one of ``file``, ``directory``, ``path`` (file or directory),
    ``glob`` (any match within ``max_depth`` levels) or ``content``
    (``pattern`` searched inside ``target``).
    """

    kind: str
    target: str
    label: str
    bucket: str = ""
    pattern: Optional[str] = None
    max_depth: int = 1


@dataclass(frozen=True)
class TechnologyRule:
    """Technology tag emitted when every ``all_of`` and any ``any_of`` evidence matches."""

    tag: str
    family: str
    all_of: Tuple[EvidenceRule, ...] = ()
    any_of: Tuple[EvidenceRule, ...] = ()


@dataclass(frozen=True)
class BackendRule:
    """Maps a pattern inside ``pyproject.toml`` to a Python package manager."""

    manager: str
    pattern: str


@dataclass(frozen=True)
class TestSuite:
    """Test directory discovered at the repository root."""

    path: str
    file_count: int


@dataclass(frozen=True)
class ProjectProfile:
    """Immutable snapshot of what was detected for one run."""

    name: str
    technologies: Tuple[str, ...] = ()
    package_managers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    config_files: Tuple[str, ...] = ()
    doc_files: Tuple[str, ...] = ()
    platform_files: Tuple[str, ...] = ()
    test_directories: Tuple[TestSuite, ...] = ()
    assistant_files: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if len(set(self.technologies)) != len(self.technologies):
            raise ValueError(f"Duplicate technology tags: {self.technologies}")
        if not isinstance(self.package_managers, MappingProxyType):
            object.__setattr__(
                self, "package_managers", MappingProxyType(dict(self.package_managers))
            )

    def has_technology(self, tag: str) -> bool:
        return tag in self.technologies

    def has_technology_prefix(self, prefix: str) -> bool:
        return any(tag.startswith(prefix) for tag in self.technologies)

    @property
    def is_python(self) -> bool:
        return self.has_technology("Python")

    @property
    def is_node(self) -> bool:
        return self.has_technology_prefix("Node.js/")

    @property
    def has_task_runner(self) -> bool:
        return "Taskfile.yml" in self.config_files

    def package_manager(self, ecosystem: str, default: str = "") -> str:
        return self.package_managers.get(ecosystem, default)


@dataclass(frozen=True)
class GuideDocument:
    """Rendered guide: ordered section blocks plus the header numbers assigned."""

    blocks: Tuple[str, ...]
    headers: Tuple[str, ...] = ()

    def text(self) -> str:
        return "\n\n".join(block.strip("\n") for block in self.blocks) + "\n"
