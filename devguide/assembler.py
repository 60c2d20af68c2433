"""Assembles rendered sections into the final guide and persists it."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Callable, Dict, List, Sequence, Tuple

from .errors import OutputDirectoryCreationFailed, WriteFailed
from .logging import get_logger
from .models import GuideDocument, ProjectProfile, Recommendation
from .rendering import (
    HeaderState,
    render_overview,
    render_recommendations,
    render_setup,
    render_title,
    render_workflow,
)
from .rendering.constants import SECTION_ORDER, SECTION_TITLES

TextWriter = Callable[[Path, str], None]

_HEADER_NUMBER = re.compile(r"^#{2,3} (\d+\.\d*)\s", re.MULTILINE)


def write_text(path: Path, content: str) -> None:
    """Write ``content`` to ``path``, creating parent directories first."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputDirectoryCreationFailed(path.parent, exc) from exc
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise WriteFailed(path, exc) from exc


class GuideAssembler:
    """Renders the sections in ``section_order`` and joins them with blank lines."""

    def __init__(
        self,
        writer: TextWriter = write_text,
        section_order: Sequence[str] = SECTION_ORDER,
    ) -> None:
        unknown = [name for name in section_order if name not in SECTION_TITLES]
        if unknown:
            raise ValueError(f"Unknown guide sections: {', '.join(unknown)}")
        self.writer = writer
        self.section_order = tuple(section_order)
        self.logger = get_logger("assembler")

    def build(
        self,
        profile: ProjectProfile,
        recommendations: Sequence[Recommendation],
    ) -> GuideDocument:
        renderers: Dict[str, Callable[[HeaderState], Tuple[str, HeaderState]]] = {
            "overview": lambda state: render_overview(profile, state),
            "setup": lambda state: render_setup(profile, state),
            "workflow": lambda state: render_workflow(profile, state),
            "recommendations": lambda state: render_recommendations(
                profile, recommendations, state
            ),
        }

        state = HeaderState()
        blocks: List[str] = [render_title(profile)]
        for name in self.section_order:
            block, state = renderers[name](state)
            if block:
                blocks.append(block)

        headers = tuple(
            match.group(1) for block in blocks for match in _HEADER_NUMBER.finditer(block)
        )
        self.logger.debug("Rendered %d sections ending at header %d", len(blocks) - 1, state.major)
        return GuideDocument(blocks=tuple(blocks), headers=headers)

    def render(self, document: GuideDocument) -> str:
        return document.text()

    def write(self, document: GuideDocument, path: Path) -> Path:
        self.writer(path, self.render(document))
        self.logger.info("Wrote developer guide to %s", path)
        return path


__all__ = ["GuideAssembler", "TextWriter", "write_text"]
