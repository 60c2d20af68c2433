"""Configuration loading for devguide (.devguide.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import DevGuideError

CONFIG_FILENAME = ".devguide.yml"
DEFAULT_LOCALE = "en"
DEFAULT_FILENAME = "DEVGUIDE.md"

_NODE_MANAGERS = {"npm", "pnpm", "yarn", "bun"}
_PYTHON_MANAGERS = {"Poetry", "Hatch", "PDM", "Standard"}


class ConfigError(DevGuideError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class OutputConfig:
    """Where the guide is written, relative to the analysed directory."""

    locale: str = DEFAULT_LOCALE
    directory: Optional[str] = None
    filename: str = DEFAULT_FILENAME

    def relative_path(self) -> Path:
        directory = self.directory or f"docs/{self.locale}/developer-guide"
        return Path(directory) / self.filename


@dataclass
class DevGuideConfig:
    """Represents the settings defined in .devguide.yml."""

    root: Path
    output: OutputConfig = field(default_factory=OutputConfig)
    project_name: Optional[str] = None
    package_managers: Dict[str, str] = field(default_factory=dict)

    @property
    def output_path(self) -> Path:
        return self.root / self.output.relative_path()


def load_config(config_path: Path) -> DevGuideConfig:
    """Load configuration from disk, returning defaults when the file is absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent

    if not config_file.is_file():
        return DevGuideConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    output_data = _as_dict(data.get("output"))
    output = OutputConfig(
        locale=_as_str(output_data.get("locale")) or DEFAULT_LOCALE,
        directory=_as_str(output_data.get("directory")),
        filename=_as_str(output_data.get("filename")) or DEFAULT_FILENAME,
    )
    if Path(output.filename).name != output.filename:
        raise ConfigError("output.filename must be a bare file name")

    project_data = _as_dict(data.get("project"))
    project_name = _as_str(project_data.get("name"))

    managers_data = _as_dict(data.get("package_managers"))
    package_managers: Dict[str, str] = {}
    node = _as_str(managers_data.get("node"))
    if node:
        if node.lower() not in _NODE_MANAGERS:
            raise ConfigError(f"Unsupported Node package manager: {node}")
        package_managers["node"] = node.lower()
    python = _as_str(managers_data.get("python"))
    if python:
        matched = next((name for name in _PYTHON_MANAGERS if name.lower() == python.lower()), None)
        if matched is None:
            raise ConfigError(f"Unsupported Python package manager: {python}")
        package_managers["python"] = matched

    return DevGuideConfig(
        root=root,
        output=output,
        project_name=project_name,
        package_managers=package_managers,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser().resolve()
    if config_path.is_dir():
        return config_path / CONFIG_FILENAME
    if config_path.name != CONFIG_FILENAME:
        return config_path.parent / CONFIG_FILENAME
    return config_path


def _read_config(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool) or value is None:
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DevGuideConfig",
    "OutputConfig",
    "load_config",
]
