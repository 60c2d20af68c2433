"""Header numbering threaded through the section renderers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HeaderState:
    """Current ``(major, minor)`` header position.

    Entering a section bumps ``major`` and resets ``minor``; entering a present
    optional subsection bumps ``minor``. Numbers therefore follow the sections
    that were actually rendered.
    """

    major: int = 0
    minor: int = 0

    def next_section(self) -> tuple[str, "HeaderState"]:
        state = HeaderState(self.major + 1, 0)
        return f"{state.major}.", state

    def next_subsection(self) -> tuple[str, "HeaderState"]:
        if self.major < 1:
            raise ValueError("A subsection requires an enclosing section")
        state = HeaderState(self.major, self.minor + 1)
        return f"{state.major}.{state.minor}", state


__all__ = ["HeaderState"]
