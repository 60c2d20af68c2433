"""Shared titles and fixed text fragments for the developer guide."""

from __future__ import annotations

SECTION_ORDER: tuple[str, ...] = (
    "overview",
    "setup",
    "workflow",
    "recommendations",
)

SECTION_TITLES: dict[str, str] = {
    "overview": "Project Overview & Stack",
    "setup": "Environment Setup",
    "workflow": "Core Workflow (Build, Run, Quality)",
    "recommendations": "Recommendations",
}

SUBSECTION_TITLES: dict[str, str] = {
    "task_runner": "Task Runner Setup (Recommended)",
    "node": "Node.js Setup",
    "python": "Python Setup",
}

TECHNOLOGY_SEPARATOR = ", "
EMPTY_TECHNOLOGIES = "_none detected_"

POLYGLOT_WARNING = (
    "> ⚠️ **Polyglot Project:** This repository contains both Python and Node.js "
    "components. Ensure both environments are set up correctly."
)


__all__ = [
    "EMPTY_TECHNOLOGIES",
    "POLYGLOT_WARNING",
    "SECTION_ORDER",
    "SECTION_TITLES",
    "SUBSECTION_TITLES",
    "TECHNOLOGY_SEPARATOR",
]
