"""Tests for devguide.analyzers.classifier."""

from __future__ import annotations

from pathlib import Path

import pytest

from devguide.analyzers import Classifier
from devguide import models
from tests._fixtures.repo_builder import RepoBuilder


def test_empty_repository_has_no_technologies(repo_builder: RepoBuilder) -> None:
    profile = repo_builder.profile()

    assert profile.technologies == ()
    assert dict(profile.package_managers) == {}
    assert profile.name == "repo"


def test_typescript_suppresses_javascript(repo_builder: RepoBuilder) -> None:
    repo_builder.write({"package.json": "{}", "tsconfig.json": "{}"})

    profile = repo_builder.profile()

    assert profile.technologies == ("Node.js/TypeScript",)


def test_plain_package_json_is_javascript(repo_builder: RepoBuilder) -> None:
    repo_builder.write({"package.json": "{}"})

    assert repo_builder.profile().technologies == ("Node.js/JavaScript",)


def test_tsconfig_alone_is_not_node(repo_builder: RepoBuilder) -> None:
    repo_builder.write({"tsconfig.json": "{}"})

    assert repo_builder.profile().technologies == ()


@pytest.mark.parametrize("marker", ["pyproject.toml", "setup.py", "requirements.txt"])
def test_any_python_marker_tags_python(repo_builder: RepoBuilder, marker: str) -> None:
    repo_builder.write({marker: ""})

    assert repo_builder.profile().technologies == ("Python",)


def test_technologies_follow_rule_order(repo_builder: RepoBuilder) -> None:
    repo_builder.write(
        {
            "go.mod": "module example.com/demo\n",
            "Cargo.toml": "[package]\n",
            "requirements.txt": "pytest\n",
            "package.json": "{}",
            "CMakeLists.txt": "project(demo)\n",
        }
    )

    assert repo_builder.profile().technologies == (
        "Node.js/JavaScript",
        "Python",
        "Rust",
        "Go",
        "C++/C (CMake)",
    )


def test_cmake_takes_precedence_over_makefile(repo_builder: RepoBuilder) -> None:
    repo_builder.write({"CMakeLists.txt": "", "Makefile": "all:\n"})

    assert repo_builder.profile().technologies == ("C++/C (CMake)",)


def test_shallow_cpp_sources_mark_generic_cpp(repo_builder: RepoBuilder) -> None:
    repo_builder.write({"src/main.cpp": "int main() { return 0; }\n"})

    assert repo_builder.profile().technologies == ("C++/C (Generic)",)


def test_deep_cpp_sources_are_ignored(repo_builder: RepoBuilder) -> None:
    repo_builder.write({"a/b/c/main.cpp": "int main() { return 0; }\n"})

    assert repo_builder.profile().technologies == ()


def test_python_manager_from_backend(repo_builder: RepoBuilder) -> None:
    repo_builder.write(
        {
            "pyproject.toml": """
            [build-system]
            requires = ["hatchling"]
            build-backend = "hatchling.build"
            """
        }
    )

    profile = repo_builder.profile()

    assert profile.technologies == ("Python",)
    assert profile.package_managers["python"] == "Hatch"
    assert "node" not in profile.package_managers


def test_node_manager_uses_path_lookup(repo_builder: RepoBuilder) -> None:
    repo_builder.write({"package.json": "{}"})

    def _which(name: str) -> str | None:
        return f"/usr/bin/{name}" if name == "pnpm" else None

    assert repo_builder.profile(which=_which).package_managers["node"] == "pnpm"
    assert repo_builder.profile().package_managers["node"] == "npm"


def test_overrides_replace_detection(repo_builder: RepoBuilder) -> None:
    repo_builder.write({"package.json": "{}", "requirements.txt": ""})

    profile = Classifier(which=lambda _: None).classify(
        repo_builder.prober(),
        name="Custom",
        overrides={"node": "yarn", "python": "PDM"},
    )

    assert profile.name == "Custom"
    assert dict(profile.package_managers) == {"node": "yarn", "python": "PDM"}


def test_artifacts_are_bucketed(repo_builder: RepoBuilder) -> None:
    repo_builder.write(
        {
            "CODE_OF_CONDUCT.md": "",
            "CONTRIBUTING.md": "",
            "Taskfile.yml": "version: '3'\n",
            ".editorconfig": "root = true\n",
            ".pre-commit-config.yaml": "repos: []\n",
            ".github/workflows/ci.yml": "on: push\n",
            ".github/workflows/release.yaml": "on: push\n",
            ".gitlab-ci.yml": "stages: []\n",
            "AGENTS.md": "",
            ".github/copilot-instructions.md": "",
        }
    )

    profile = repo_builder.profile()

    assert profile.doc_files == ("CONTRIBUTING.md", "CODE_OF_CONDUCT.md")
    assert profile.config_files == ("Taskfile.yml", ".editorconfig", ".pre-commit-config.yaml")
    assert profile.platform_files == ("CI/CD Pipeline",)
    assert profile.assistant_files == ("AGENTS.md", ".github/copilot-instructions.md")
    assert profile.has_task_runner


def test_gitattributes_directory_counts_as_config(repo_builder: RepoBuilder) -> None:
    (repo_builder.path() / ".gitattributes").mkdir()

    assert repo_builder.profile().config_files == (".gitattributes",)


def test_test_suites_are_counted(repo_builder: RepoBuilder) -> None:
    repo_builder.write(
        {
            "tests/test_api.py": "",
            "tests/unit/test_models.py": "",
            "tests/conftest.py": "",
            "__tests__/app.test.js": "",
        }
    )

    profile = repo_builder.profile()

    assert profile.test_directories == (
        models.TestSuite(path="tests", file_count=2),
        models.TestSuite(path="__tests__", file_count=1),
    )


def test_unreadable_manifest_degrades_to_standard(
    repo_builder: RepoBuilder, monkeypatch: pytest.MonkeyPatch
) -> None:
    repo_builder.write({"pyproject.toml": 'build-backend = "poetry.core.masonry.api"\n'})
    original = Path.read_text

    def _deny(self: Path, *args: object, **kwargs: object) -> str:
        if self.name == "pyproject.toml":
            raise PermissionError("denied")
        return original(self, *args, **kwargs)  # type: ignore[arg-type]

    monkeypatch.setattr(Path, "read_text", _deny)

    profile = repo_builder.profile()

    assert profile.technologies == ("Python",)
    assert profile.package_managers["python"] == "Standard"


def test_profile_is_frozen(repo_builder: RepoBuilder) -> None:
    repo_builder.write({"requirements.txt": ""})
    profile = repo_builder.profile()

    with pytest.raises(AttributeError):
        profile.technologies = ("Go",)  # type: ignore[misc]
    with pytest.raises(TypeError):
        profile.package_managers["python"] = "Poetry"  # type: ignore[index]
