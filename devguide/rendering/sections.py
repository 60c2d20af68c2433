"""Section renderers for the developer guide.

Each renderer takes the profile and the current :class:`HeaderState` and
returns the rendered Markdown block together with the next state. A renderer
that has nothing to say returns an empty block and the state unchanged, so
later sections keep contiguous numbers.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Sequence, Tuple

from ..analyzers.package_managers import (
    build_node_script_command,
    node_install_command,
    python_commands,
)
from ..analyzers.rules import NODE_DEFAULT_MANAGER, PYTHON_DEFAULT_MANAGER
from ..models import ProjectProfile, Recommendation
from .constants import (
    EMPTY_TECHNOLOGIES,
    POLYGLOT_WARNING,
    SECTION_TITLES,
    SUBSECTION_TITLES,
    TECHNOLOGY_SEPARATOR,
)
from .headers import HeaderState

Rendered = Tuple[str, HeaderState]


def _fence(commands: Iterable[str]) -> List[str]:
    return ["```bash", *commands, "```"]


def _heading(level: int, number: str, title: str) -> str:
    return f"{'#' * level} {number} {title}"


def _module_name(profile: ProjectProfile) -> str:
    cleaned = re.sub(r"\W+", "_", profile.name.lower()).strip("_")
    return cleaned or "project_name"


def render_title(profile: ProjectProfile) -> str:
    """Render the document heading and introduction."""
    return "\n".join(
        [
            f"# 🚀 Developer Guide: {profile.name}",
            "",
            "This guide provides instructions for setting up the project and running "
            "common tasks (build, test, quality checks).",
            "",
            "---",
        ]
    )


def render_overview(profile: ProjectProfile, state: HeaderState) -> Rendered:
    number, state = state.next_section()
    if profile.technologies:
        joined = TECHNOLOGY_SEPARATOR.join(f"**{tag}**" for tag in profile.technologies)
    else:
        joined = EMPTY_TECHNOLOGIES
    lines = [
        _heading(2, number, SECTION_TITLES["overview"]),
        "",
        f"The primary technologies detected in this repository are: {joined}.",
    ]

    if profile.is_python and profile.is_node:
        lines.extend(["", POLYGLOT_WARNING])

    artifacts = _artifact_lines(profile)
    if artifacts:
        lines.extend(["", "Detected project artifacts:", "", *artifacts])

    return "\n".join(lines), state


def _artifact_lines(profile: ProjectProfile) -> List[str]:
    groups: Sequence[tuple[str, Sequence[str]]] = (
        ("Documentation", profile.doc_files),
        ("Configuration", profile.config_files),
        ("Platform", profile.platform_files),
        ("AI assistant instructions", profile.assistant_files),
        (
            "Test suites",
            [
                f"{suite.path}/ ({suite.file_count} test file{'s' if suite.file_count != 1 else ''})"
                for suite in profile.test_directories
            ],
        ),
    )
    return [
        f"* **{label}:** {', '.join(f'`{item}`' for item in items)}"
        for label, items in groups
        if items
    ]


def render_setup(profile: ProjectProfile, state: HeaderState) -> Rendered:
    number, state = state.next_section()
    lines = [
        _heading(2, number, SECTION_TITLES["setup"]),
        "This section outlines the steps to prepare your local environment.",
    ]

    if profile.has_task_runner:
        sub, state = state.next_subsection()
        lines.extend(
            [
                "",
                _heading(3, sub, SUBSECTION_TITLES["task_runner"]),
                "This project uses **Task** (`Taskfile.yml`) to manage all common tasks. "
                "This is the simplest method for full project setup.",
                "",
                "To set up the entire environment (including dependencies, hooks, and venv creation):",
                *_fence(["task reset"]),
            ]
        )

    if profile.is_node:
        sub, state = state.next_subsection()
        manager = profile.package_manager("node", NODE_DEFAULT_MANAGER)
        lines.extend(
            [
                "",
                _heading(3, sub, SUBSECTION_TITLES["node"]),
                f"Install Node.js dependencies using the detected package manager, **{manager}** "
                "(assumed for tooling).",
                "",
                *_fence([node_install_command(manager)]),
            ]
        )

    if profile.is_python:
        sub, state = state.next_subsection()
        commands = python_commands(profile.package_manager("python", PYTHON_DEFAULT_MANAGER))
        lines.extend(
            [
                "",
                _heading(3, sub, SUBSECTION_TITLES["python"]),
                f"This project uses **{commands.label}** for environment management.",
                "",
                *_fence(
                    [
                        f"{commands.install} # Install dependencies",
                        f"{commands.activate} # To activate the environment",
                    ]
                ),
            ]
        )

    return "\n".join(lines), state


def render_workflow(profile: ProjectProfile, state: HeaderState) -> Rendered:
    number, state = state.next_section()
    lines = [_heading(2, number, SECTION_TITLES["workflow"]), ""]
    if profile.has_task_runner:
        lines.extend(_task_runner_workflow())
    else:
        lines.extend(_native_workflow(profile))
    return "\n".join(lines), state


def _task_runner_workflow() -> List[str]:
    return [
        "All core operations are managed via **Task** to maintain consistency across languages.",
        "",
        "### Universal Commands (Using `LANG`)",
        "These commands work universally across different language components in the repository:",
        "",
        *_fence(
            [
                "task build LANG=python   # Or LANG=rust, LANG=cpp",
                "task run LANG=python     # Executes the built application",
                "task clean               # Removes all build artifacts, caches, and translations",
            ]
        ),
        "",
        "### Quality Assurance",
        "The quality commands execute all necessary linters, formatters, and tests:",
        "",
        *_fence(
            [
                "task format              # Automatically formats all code and documentation",
                "task lint                # Runs all quality checks",
                "task test                # Executes the test suite",
            ]
        ),
        "",
        "For the complete list of tasks, including documentation, translations, and maintenance, run:",
        *_fence(["task -l"]),
    ]


def _native_workflow(profile: ProjectProfile) -> List[str]:
    build: List[str] = []
    checks: List[str] = []

    if profile.is_node:
        manager = profile.package_manager("node", NODE_DEFAULT_MANAGER)
        build.extend(
            [
                f"{build_node_script_command('build', manager)} # Build the Node.js package",
                f"{build_node_script_command('start', manager)} # Start the application",
            ]
        )
        checks.append(f"{build_node_script_command('test', manager)} # Run the Node.js tests")
    if profile.is_python:
        commands = python_commands(profile.package_manager("python", PYTHON_DEFAULT_MANAGER))
        build.append(
            f"{commands.run.format(module=_module_name(profile))} # Run the Python application"
        )
        checks.append("pytest # Run the Python tests")
    if profile.has_technology("Rust"):
        build.extend(["cargo build", "cargo run"])
        checks.extend(["cargo clippy", "cargo test"])
    if profile.has_technology("Go"):
        build.append("go build ./...")
        checks.extend(["go vet ./...", "go test ./..."])
    if profile.has_technology("C++/C (CMake)"):
        build.extend(["cmake -S . -B build", "cmake --build build"])
        checks.append("ctest --test-dir build")
    elif profile.has_technology("C++/C (Generic)"):
        build.append("make")
        checks.append("make test")

    if ".pre-commit-config.yaml" in profile.config_files:
        checks.insert(0, "pre-commit run --all-files # Run all configured hooks")

    lines = ["### Build and Run"]
    if build:
        lines.extend(["Use the native tooling to build and run the project:", *_fence(build)])
    else:
        lines.append("Specific build instructions are not defined. Refer to language-specific tools.")

    lines.extend(["", "### Testing and Quality Checks", "Manually run quality checks using the native tools:"])
    if checks:
        lines.extend(_fence(checks))
    else:
        lines.extend(
            _fence(
                [
                    "# Example: Run Ruff/Pre-commit",
                    "pre-commit run --all-files",
                    "# Example: Run tests",
                    "pytest",
                ]
            )
        )
    return lines


def render_recommendations(
    profile: ProjectProfile,
    recommendations: Sequence[Recommendation],
    state: HeaderState,
) -> Rendered:
    if not recommendations:
        return "", state
    number, state = state.next_section()
    lines = [
        _heading(2, number, SECTION_TITLES["recommendations"]),
        "Based on the project analysis, here are some suggestions:",
        "",
    ]
    lines.extend(f"* {item}" for item in recommendations)
    return "\n".join(lines), state


__all__ = [
    "render_overview",
    "render_recommendations",
    "render_setup",
    "render_title",
    "render_workflow",
]
