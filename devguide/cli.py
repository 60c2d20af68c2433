"""CLI entrypoint for devguide."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import __version__
from .errors import DevGuideError
from .logging import configure_logging
from .orchestrator import Orchestrator


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="devguide",
        description=(
            "Generate or update the Dev Guide (docs/<locale>/developer-guide/DEVGUIDE.md) "
            "based on project analysis. The guide is formatted in Markdown."
        ),
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="The project directory to analyze and generate the guide in (defaults to '.').",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"devguide {__version__}",
        help="Print version information.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Show debug traces for every detection step.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only report warnings and errors.",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the guide instead of writing it to disk.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log output to this file.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for devguide."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging(
            verbose=bool(args.debug), quiet=bool(args.quiet), log_file=args.log_file
        )
    except OSError as exc:
        parser.exit(1, f"error: cannot open log file {args.log_file}: {exc}\n")

    orchestrator = Orchestrator()
    try:
        if args.stdout:
            sys.stdout.write(orchestrator.render(args.path))
            return
        result = orchestrator.run(args.path)
    except (DevGuideError, OSError) as exc:
        parser.exit(1, f"error: {exc}\n")

    if not args.quiet:
        print(f"Dev Guide written to {_relativize(result.path)}")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
