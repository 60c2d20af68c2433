"""Package manager resolution and per-manager command templates."""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from ..errors import ProbeReadError
from ..logging import get_logger
from ..models import BackendRule
from ..probe import EvidenceProber
from .rules import (
    NODE_DEFAULT_MANAGER,
    NODE_MANAGER_PREFERENCE,
    PYTHON_BACKEND_RULES,
    PYTHON_DEFAULT_MANAGER,
    PYTHON_MANIFEST,
)

Which = Callable[[str], Optional[str]]

_logger = get_logger("analyzers.package_managers")


def detect_python_package_manager(
    prober: EvidenceProber,
    rules: Sequence[BackendRule] = PYTHON_BACKEND_RULES,
) -> str:
    """Return the first manager whose backend pattern appears in pyproject.toml."""
    if not prober.file_exists(PYTHON_MANIFEST):
        return PYTHON_DEFAULT_MANAGER
    for rule in rules:
        try:
            matched = prober.contains(PYTHON_MANIFEST, rule.pattern)
        except ProbeReadError as exc:
            _logger.warning("%s; assuming %s tooling", exc, PYTHON_DEFAULT_MANAGER)
            return PYTHON_DEFAULT_MANAGER
        if matched:
            return rule.manager
    return PYTHON_DEFAULT_MANAGER


def detect_node_package_manager(
    which: Which = shutil.which,
    preference: Sequence[str] = NODE_MANAGER_PREFERENCE,
) -> str:
    """Return the first preferred Node manager found on PATH, else npm."""
    for manager in preference:
        if which(manager):
            return manager
    return NODE_DEFAULT_MANAGER


@dataclass(frozen=True)
class PythonCommands:
    """Shell commands for a Python package manager."""

    label: str
    install: str
    activate: str
    run: str


_PYTHON_COMMANDS: dict[str, PythonCommands] = {
    "Poetry": PythonCommands(
        label="Poetry",
        install="poetry install --with dev",
        activate="poetry shell",
        run="poetry run python -m {module}",
    ),
    "Hatch": PythonCommands(
        label="Hatch",
        install="hatch env create",
        activate="hatch shell",
        run="hatch run python -m {module}",
    ),
    "PDM": PythonCommands(
        label="PDM",
        install="pdm install",
        activate="eval $(pdm venv activate)",
        run="pdm run python -m {module}",
    ),
}

_STANDARD_PYTHON = PythonCommands(
    label="Standard Python environment",
    install="pip install -r requirements.txt",
    activate="source .venv/bin/activate",
    run="python -m {module}",
)


def python_commands(manager: str) -> PythonCommands:
    return _PYTHON_COMMANDS.get(manager, _STANDARD_PYTHON)


def build_node_script_command(script: str, manager: str) -> str:
    manager = manager.lower()
    if manager in {"pnpm", "yarn"}:
        return f"{manager} {script}"
    if manager == "bun":
        return f"bun run {script}"
    # npm run <script>, except start and test which npm exposes directly
    if script in {"start", "test"}:
        return f"npm {script}"
    return f"npm run {script}"


def node_install_command(manager: str) -> str:
    return f"{manager.lower()} install"


__all__ = [
    "PythonCommands",
    "build_node_script_command",
    "detect_node_package_manager",
    "detect_python_package_manager",
    "node_install_command",
    "python_commands",
]
