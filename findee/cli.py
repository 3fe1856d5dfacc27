"""Command-line front door for findee.

Loads text files as line segments, runs one engine rebuild for the query,
and prints each match with its file position followed by a status line.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from .corpus import StaticCorpus, TextSegment
from .runtime.config import FindSettings, load_settings
from .runtime.engine import FindEngine
from .runtime.status import describe_status
from .search.indexer import Match


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def read_text(path: Path) -> str:
    """Read text using tolerant encoding fallback order."""
    for encoding in ("utf-8", "utf-8-sig", "latin-1"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    return path.read_bytes().decode("utf-8", errors="replace")


def load_line_segments(paths: list[Path]) -> list[TextSegment]:
    """Split each file into one segment per non-empty line.

    Handles are ``(path, line_number)`` with 1-based line numbers.
    """
    segments: list[TextSegment] = []
    for path in paths:
        for line_number, line in enumerate(read_text(path).splitlines(), start=1):
            if not line.strip():
                continue
            segments.append(TextSegment(text=line, handle=(path, line_number)))
    return segments


def _preview_line(text: str, max_chars: int = 220) -> str:
    clean = text.replace("\t", "    ")
    if len(clean) <= max_chars:
        return clean
    return clean[: max(1, max_chars - 3)] + "..."


def format_match(match: Match) -> str:
    path, line_number = match.handle
    return f"{path}:{line_number}:{match.start + 1}: {_preview_line(match.segment.text)}"


def _settings_from_args(args: argparse.Namespace, base: FindSettings) -> FindSettings:
    overrides: dict[str, object] = {}
    if args.no_fold:
        overrides["fold_diacritics"] = False
    if args.no_smart_case:
        overrides["smart_case"] = False
    if args.no_whitespace_flex:
        overrides["whitespace_flexible"] = False
    if args.match_cap is not None:
        overrides["match_cap"] = args.match_cap
    if args.time_budget_ms is not None:
        overrides["time_budget_ms"] = args.time_budget_ms
    return dataclasses.replace(base, **overrides)


def main() -> None:
    """Parse CLI arguments and print matches for a query over text files."""
    parser = argparse.ArgumentParser(
        description="Find text in files with diacritic-insensitive, whitespace-flexible matching."
    )
    parser.add_argument("query", help="Text to find.")
    parser.add_argument("paths", nargs="+", help="Files to search.")
    parser.add_argument("--no-fold", action="store_true", help="Match diacritics exactly.")
    parser.add_argument("--no-smart-case", action="store_true", help="Always ignore case.")
    parser.add_argument(
        "--no-whitespace-flex",
        action="store_true",
        help="Match whitespace in the query literally.",
    )
    parser.add_argument("--match-cap", type=_positive_int, default=None, help="Stop after this many matches.")
    parser.add_argument(
        "--time-budget-ms",
        type=_positive_int,
        default=None,
        help="Stop scanning after this many milliseconds.",
    )
    parser.add_argument("--verbose", action="store_true", help="Log rebuild details to stderr.")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    paths = [Path(raw) for raw in args.paths]
    for path in paths:
        if not path.is_file():
            raise SystemExit(f"Path not found: {path}")

    settings = _settings_from_args(args, load_settings())
    engine = FindEngine(StaticCorpus(load_line_segments(paths)), settings)
    engine.ensure_fresh(engine.mode, args.query)

    out: list[str] = [format_match(match) + "\n" for match in engine.matches]
    out.append(describe_status(args.query, engine.scan, engine.navigation) + "\n")
    sys.stdout.write("".join(out))


if __name__ == "__main__":
    main()
