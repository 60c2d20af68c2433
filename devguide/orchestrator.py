"""Pipeline orchestration for developer guide generation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List

from .analyzers import Classifier
from .assembler import GuideAssembler
from .config import DevGuideConfig, load_config
from .errors import InputDirectoryNotFound
from .logging import get_logger
from .models import GuideDocument, ProjectProfile, Recommendation
from .probe import EvidenceProber
from .recommendations import RecommendationEngine


@dataclass(frozen=True)
class GenerationResult:
    """Everything produced by a single generation run."""

    path: Path
    profile: ProjectProfile
    recommendations: tuple[Recommendation, ...]
    document: GuideDocument


class Orchestrator:
    """Runs probe, classification, recommendations, rendering and writing in order."""

    def __init__(
        self,
        classifier: Classifier | None = None,
        recommender: RecommendationEngine | None = None,
        assembler: GuideAssembler | None = None,
    ) -> None:
        self.classifier = classifier or Classifier()
        self.recommender = recommender or RecommendationEngine()
        self.assembler = assembler or GuideAssembler()
        self.logger = get_logger("orchestrator")

    def analyze(self, path: str | Path) -> tuple[ProjectProfile, List[Recommendation], DevGuideConfig]:
        """Return the profile and advisories for ``path`` without writing anything."""
        repo_path = Path(path).expanduser()
        if not repo_path.is_dir():
            raise InputDirectoryNotFound(path)
        repo_path = repo_path.resolve()

        config = load_config(repo_path)
        prober = EvidenceProber(repo_path)
        self.logger.info("Starting project analysis for %s", repo_path)
        profile = self.classifier.classify(
            prober,
            name=config.project_name,
            overrides=config.package_managers,
        )
        recommendations = self.recommender.recommend(profile)
        return profile, recommendations, config

    def render(self, path: str | Path) -> str:
        """Return the guide text for ``path`` without writing it."""
        profile, recommendations, _ = self.analyze(path)
        return self.assembler.render(self.assembler.build(profile, recommendations))

    def run(self, path: str | Path) -> GenerationResult:
        """Generate the developer guide for ``path`` and write it to disk."""
        profile, recommendations, config = self.analyze(path)
        document = self.assembler.build(profile, recommendations)
        output_path = config.output_path
        self.logger.info("Generating final guide: %s", output_path)
        self.assembler.write(document, output_path)
        return GenerationResult(
            path=output_path,
            profile=profile,
            recommendations=tuple(recommendations),
            document=document,
        )


__all__ = ["GenerationResult", "Orchestrator"]
