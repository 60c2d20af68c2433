"""Markdown section renderers and header numbering."""

from __future__ import annotations

from .headers import HeaderState
from .sections import (
    render_overview,
    render_recommendations,
    render_setup,
    render_title,
    render_workflow,
)

__all__ = [
    "HeaderState",
    "render_overview",
    "render_recommendations",
    "render_setup",
    "render_title",
    "render_workflow",
]
