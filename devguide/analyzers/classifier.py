"""Builds a :class:`ProjectProfile` from filesystem evidence."""

from __future__ import annotations

import shutil
from typing import Dict, List, Mapping, Optional, Sequence

from ..errors import ProbeReadError
from ..logging import get_logger
from ..models import EvidenceRule, ProjectProfile, TechnologyRule, TestSuite
from ..probe import EvidenceProber
from .package_managers import Which, detect_node_package_manager, detect_python_package_manager
from .rules import ARTIFACT_RULES, TECHNOLOGY_RULES, TEST_DIRECTORIES, TEST_FILE_PATTERNS

_BUCKETS = ("config", "docs", "platform", "assistant")


class Classifier:
    """Runs the ordered probe battery and folds the results into a profile."""

    def __init__(
        self,
        technology_rules: Sequence[TechnologyRule] = TECHNOLOGY_RULES,
        artifact_rules: Sequence[EvidenceRule] = ARTIFACT_RULES,
        *,
        which: Which = shutil.which,
    ) -> None:
        self.technology_rules = tuple(technology_rules)
        self.artifact_rules = tuple(artifact_rules)
        self.which = which
        self.logger = get_logger("analyzers.classifier")

    def classify(
        self,
        prober: EvidenceProber,
        *,
        name: Optional[str] = None,
        overrides: Optional[Mapping[str, str]] = None,
    ) -> ProjectProfile:
        technologies = self.detect_technologies(prober)
        managers = self._resolve_managers(prober, technologies, overrides or {})
        buckets = self.detect_artifacts(prober)
        test_suites = self.detect_test_suites(prober)

        profile = ProjectProfile(
            name=name or prober.root.name or "Repository",
            technologies=tuple(technologies),
            package_managers=managers,
            config_files=tuple(buckets["config"]),
            doc_files=tuple(buckets["docs"]),
            platform_files=tuple(buckets["platform"]),
            test_directories=tuple(test_suites),
            assistant_files=tuple(buckets["assistant"]),
        )
        self.logger.debug("Detected technologies: %s", ", ".join(profile.technologies) or "none")
        self.logger.debug("Resolved package managers: %s", dict(profile.package_managers))
        return profile

    def detect_technologies(self, prober: EvidenceProber) -> List[str]:
        """Return technology tags in rule order, one per family at most."""
        tags: List[str] = []
        claimed: set[str] = set()
        for rule in self.technology_rules:
            if rule.family in claimed:
                continue
            if self._matches(prober, rule):
                tags.append(rule.tag)
                claimed.add(rule.family)
        return tags

    def detect_artifacts(self, prober: EvidenceProber) -> Dict[str, List[str]]:
        buckets: Dict[str, List[str]] = {bucket: [] for bucket in _BUCKETS}
        for rule in self.artifact_rules:
            labels = buckets.setdefault(rule.bucket, [])
            if rule.label in labels:
                continue
            if self._evaluate(prober, rule):
                labels.append(rule.label)
        for bucket, labels in buckets.items():
            if labels:
                self.logger.debug("Detected %s artifacts: %s", bucket, ", ".join(labels))
        return buckets

    def detect_test_suites(self, prober: EvidenceProber) -> List[TestSuite]:
        suites: List[TestSuite] = []
        for directory in TEST_DIRECTORIES:
            if not prober.dir_exists(directory):
                continue
            count = prober.count_files(directory, TEST_FILE_PATTERNS)
            suites.append(TestSuite(path=directory, file_count=count))
        return suites

    def _resolve_managers(
        self,
        prober: EvidenceProber,
        technologies: Sequence[str],
        overrides: Mapping[str, str],
    ) -> Dict[str, str]:
        managers: Dict[str, str] = {}
        if any(tag.startswith("Node.js/") for tag in technologies):
            managers["node"] = overrides.get("node") or detect_node_package_manager(self.which)
        if "Python" in technologies:
            managers["python"] = overrides.get("python") or detect_python_package_manager(prober)
        return managers

    def _matches(self, prober: EvidenceProber, rule: TechnologyRule) -> bool:
        if not all(self._evaluate(prober, evidence) for evidence in rule.all_of):
            return False
        if rule.any_of and not any(self._evaluate(prober, evidence) for evidence in rule.any_of):
            return False
        return bool(rule.all_of or rule.any_of)

    def _evaluate(self, prober: EvidenceProber, rule: EvidenceRule) -> bool:
        try:
            return prober.evaluate(rule)
        except ProbeReadError as exc:
            self.logger.warning("%s; treating %s as absent", exc, rule.label)
            return False


__all__ = ["Classifier"]
