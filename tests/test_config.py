"""Tests for devguide.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from devguide.config import ConfigError, DevGuideConfig, load_config


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, DevGuideConfig)
    assert config.root == tmp_path.resolve()
    assert config.project_name is None
    assert config.package_managers == {}
    assert config.output_path == tmp_path.resolve() / "docs" / "en" / "developer-guide" / "DEVGUIDE.md"


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".devguide.yml"
    config_file.write_text(
        """
output:
  directory: handbook
  filename: ONBOARDING.md
project:
  name: "Billing Service"
package_managers:
  node: PNPM
  python: poetry
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.project_name == "Billing Service"
    assert config.package_managers == {"node": "pnpm", "python": "Poetry"}
    assert config.output_path == tmp_path.resolve() / "handbook" / "ONBOARDING.md"


def test_locale_controls_default_directory(tmp_path: Path) -> None:
    (tmp_path / ".devguide.yml").write_text("output:\n  locale: fr\n", encoding="utf-8")

    config = load_config(tmp_path)

    assert config.output.relative_path() == Path("docs/fr/developer-guide/DEVGUIDE.md")


def test_empty_config_file_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / ".devguide.yml").write_text("\n# nothing yet\n", encoding="utf-8")

    config = load_config(tmp_path)

    assert config.output.filename == "DEVGUIDE.md"


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list\n",
        "output: [unclosed\n",
        "package_managers:\n  node: cargo\n",
        "package_managers:\n  python: conda\n",
        "output:\n  filename: ../escape.md\n",
    ],
)
def test_invalid_config_raises(tmp_path: Path, content: str) -> None:
    (tmp_path / ".devguide.yml").write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)
