"""Declarative detection tables consumed by the classifier.

Order matters throughout: technology families are reported in declaration
order, and within a family the first matching rule wins.
"""

from __future__ import annotations

from ..models import BackendRule, EvidenceRule, TechnologyRule


def _file(target: str, label: str = "", bucket: str = "") -> EvidenceRule:
    return EvidenceRule(kind="file", target=target, label=label or target, bucket=bucket)


def _path(target: str, label: str = "", bucket: str = "") -> EvidenceRule:
    return EvidenceRule(kind="path", target=target, label=label or target, bucket=bucket)


def _glob(target: str, label: str = "", bucket: str = "", max_depth: int = 1) -> EvidenceRule:
    return EvidenceRule(
        kind="glob", target=target, label=label or target, bucket=bucket, max_depth=max_depth
    )


TASK_RUNNER_FILE = "Taskfile.yml"

TECHNOLOGY_RULES: tuple[TechnologyRule, ...] = (
    TechnologyRule(
        tag="Node.js/TypeScript",
        family="node",
        all_of=(_file("package.json"), _file("tsconfig.json")),
    ),
    TechnologyRule(
        tag="Node.js/JavaScript",
        family="node",
        all_of=(_file("package.json"),),
    ),
    TechnologyRule(
        tag="Python",
        family="python",
        any_of=(_file("pyproject.toml"), _file("setup.py"), _file("requirements.txt")),
    ),
    TechnologyRule(tag="Rust", family="rust", all_of=(_file("Cargo.toml"),)),
    TechnologyRule(tag="Go", family="go", all_of=(_file("go.mod"),)),
    TechnologyRule(
        tag="C++/C (CMake)",
        family="cpp",
        all_of=(_file("CMakeLists.txt"),),
    ),
    TechnologyRule(
        tag="C++/C (Generic)",
        family="cpp",
        any_of=(
            _file("Makefile"),
            _glob("*.cpp", max_depth=2),
            _glob("*.cxx", max_depth=2),
        ),
    ),
)

PYTHON_MANIFEST = "pyproject.toml"
PYTHON_DEFAULT_MANAGER = "Standard"

PYTHON_BACKEND_RULES: tuple[BackendRule, ...] = (
    BackendRule("Poetry", r"""build-backend\s*=\s*["']poetry\.core\.masonry\.api["']"""),
    BackendRule("Hatch", r"""build-backend\s*=\s*["']hatchling\.build["']"""),
    BackendRule("PDM", r"""name\s*=\s*["']pdm["']"""),
    BackendRule("PDM", r"""build-backend\s*=\s*["']pdm\.backend["']"""),
)

NODE_MANAGER_PREFERENCE: tuple[str, ...] = ("pnpm", "yarn", "bun")
NODE_DEFAULT_MANAGER = "npm"

ARTIFACT_RULES: tuple[EvidenceRule, ...] = (
    _file("CONTRIBUTING.md", bucket="docs"),
    _file("CODE_OF_CONDUCT.md", bucket="docs"),
    _file("SECURITY.md", bucket="docs"),
    _file("CHANGELOG.md", bucket="docs"),
    _file(TASK_RUNNER_FILE, bucket="config"),
    _glob(".github/workflows/*.yml", label="CI/CD Pipeline", bucket="platform"),
    _glob(".github/workflows/*.yaml", label="CI/CD Pipeline", bucket="platform"),
    _file(".gitlab-ci.yml", label="CI/CD Pipeline", bucket="platform"),
    _path(".editorconfig", bucket="config"),
    _path(".gitattributes", bucket="config"),
    _path(".pre-commit-config.yaml", bucket="config"),
    _path("cspell.config.yaml", bucket="config"),
    _path("ruff.toml", bucket="config"),
    _path(".ruff.toml", bucket="config"),
    _path("eslint.config.js", bucket="config"),
    _path(".eslintrc.json", bucket="config"),
    _path(".prettierrc", bucket="config"),
    _path("biome.json", bucket="config"),
    _file("AGENTS.md", bucket="assistant"),
    _file("CLAUDE.md", bucket="assistant"),
    _file("GEMINI.md", bucket="assistant"),
    _file(".github/copilot-instructions.md", bucket="assistant"),
    _path(".cursorrules", bucket="assistant"),
    _path(".cursor/rules", bucket="assistant"),
)

TEST_DIRECTORIES: tuple[str, ...] = ("tests", "test", "__tests__", "spec")
TEST_FILE_PATTERNS: tuple[str, ...] = (
    "test_*.py",
    "*_test.py",
    "*.test.js",
    "*.test.ts",
    "*.spec.js",
    "*.spec.ts",
    "*_test.go",
    "*.rs",
    "*_test.cpp",
)

QUALITY_TOOLING_MARKERS: tuple[str, ...] = (
    ".pre-commit-config.yaml",
    "ruff.toml",
    ".ruff.toml",
    "cspell.config.yaml",
    "eslint.config.js",
    ".eslintrc.json",
    ".prettierrc",
    "biome.json",
)


__all__ = [
    "ARTIFACT_RULES",
    "NODE_DEFAULT_MANAGER",
    "NODE_MANAGER_PREFERENCE",
    "PYTHON_BACKEND_RULES",
    "PYTHON_DEFAULT_MANAGER",
    "PYTHON_MANIFEST",
    "QUALITY_TOOLING_MARKERS",
    "TASK_RUNNER_FILE",
    "TECHNOLOGY_RULES",
    "TEST_DIRECTORIES",
    "TEST_FILE_PATTERNS",
]
