"""Advisory policy applied to a completed project profile."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Sequence

from .analyzers.rules import QUALITY_TOOLING_MARKERS, TASK_RUNNER_FILE
from .logging import get_logger
from .models import ProjectProfile, Recommendation


@dataclass(frozen=True)
class RecommendationRule:
    """Emits ``message`` when ``applies`` holds for the profile."""

    name: str
    applies: Callable[[ProjectProfile], bool]
    message: str


def _has_quality_tooling(profile: ProjectProfile) -> bool:
    return any(marker in profile.config_files for marker in QUALITY_TOOLING_MARKERS)


RECOMMENDATION_RULES: tuple[RecommendationRule, ...] = (
    RecommendationRule(
        name="contributing",
        applies=lambda profile: "CONTRIBUTING.md" not in profile.doc_files,
        message="⚠️ CONTRIBUTING.md missing from root. Recommended for contributors.",
    ),
    RecommendationRule(
        name="code_of_conduct",
        applies=lambda profile: "CODE_OF_CONDUCT.md" not in profile.doc_files,
        message="⚠️ CODE_OF_CONDUCT.md missing from root. Recommended for community governance.",
    ),
    RecommendationRule(
        name="task_runner",
        applies=lambda profile: TASK_RUNNER_FILE in profile.config_files,
        message=(
            f"{TASK_RUNNER_FILE} found: Prioritize 'task [command]' for all project operations."
        ),
    ),
    RecommendationRule(
        name="quality_tooling",
        applies=_has_quality_tooling,
        message=(
            "Quality tooling detected (pre-commit, linters, formatters): consolidate format "
            "and lint commands behind a single entry point so contributors run the same checks."
        ),
    ),
)


class RecommendationEngine:
    """Evaluates every rule independently and keeps declaration order."""

    def __init__(self, rules: Sequence[RecommendationRule] = RECOMMENDATION_RULES) -> None:
        self.rules = tuple(rules)
        self.logger = get_logger("recommendations")

    def recommend(self, profile: ProjectProfile) -> List[Recommendation]:
        advisories = [rule.message for rule in self.rules if rule.applies(profile)]
        self.logger.debug("Produced %d recommendations", len(advisories))
        return advisories


__all__ = ["RECOMMENDATION_RULES", "RecommendationEngine", "RecommendationRule"]
