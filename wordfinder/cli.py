"""CLI entrypoint for the word finder."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from .core.constants import DEFAULT_GRID_SIZE, DEFAULT_TOP_K
from .core.exceptions import WordFinderError
from .engine.ranker import rank_words
from .engine.scanner import FinderConfig, WordFinder
from .io.loaders import parse_grid_file, parse_words_file
from .utils.logger import configure_logging, get_logger
from .utils.pretty import pretty_print_grid, print_results


LOGGER = get_logger(__name__)

DEMO_ROWS = ["ABCCC", "FGWOO", "CHILL", "PQNDD", "UVDXY"]
DEMO_WORDS = ["CHILL", "WIND", "COLD"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find the most frequent words of a list in a square letter grid",
    )
    grid_source = parser.add_mutually_exclusive_group()
    grid_source.add_argument(
        "--rows",
        nargs="+",
        metavar="ROW",
        help="Grid rows, top to bottom (defaults to the demo grid)",
    )
    grid_source.add_argument(
        "--grid-file",
        type=Path,
        metavar="FILE",
        help="File with one grid row per line (# comments and blank lines ignored)",
    )
    parser.add_argument("--words", nargs="+", metavar="WORD", help="Words to search for")
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one word per line (# comments and blank lines ignored)",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=DEFAULT_GRID_SIZE,
        help=f"Grid side length (default {DEFAULT_GRID_SIZE})",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=DEFAULT_TOP_K,
        help=f"Number of words to report (default {DEFAULT_TOP_K})",
    )
    parser.add_argument("--show-grid", action="store_true", help="Print the grid with matches marked")
    parser.add_argument("--show-matches", action="store_true", help="List every match position")
    parser.add_argument("--json", action="store_true", help="Emit JSON instead of plain text")
    parser.add_argument("--output", type=Path, help="Optional path for the JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    if args.top < 0:
        parser.error("--top must be non-negative")
    if args.output and not args.json:
        parser.error("--output requires --json")

    words: List[str] = []
    try:
        if args.grid_file:
            rows = parse_grid_file(args.grid_file)
        else:
            rows = args.rows or DEMO_ROWS
        if args.words:
            words.extend(args.words)
        if args.words_file:
            words.extend(parse_words_file(args.words_file))
        if not words:
            words = list(DEMO_WORDS)
        finder = WordFinder(rows, FinderConfig(grid_size=args.size, top_k=args.top))
    except (WordFinderError, ValueError) as exc:
        LOGGER.warning("Rejected input: %s", exc)
        parser.error(str(exc))

    result = finder.scan(words)
    ranked = rank_words(result.matches, result.words, args.top)

    if args.json:
        payload: Dict[str, Any] = {
            "grid": finder.grid.to_jsonable(),
            "words": result.words,
            "results": [{"word": entry.word, "hits": entry.hits} for entry in ranked],
            "matches": [match.to_jsonable() for match in result.matches],
        }
        output_text = json.dumps(payload, ensure_ascii=False, indent=2)
        if args.output:
            args.output.write_text(output_text, encoding="utf-8")
        else:
            print(output_text)
        return

    if args.show_grid:
        pretty_print_grid(finder.grid, highlight=result.matches)
        print()
    print_results(
        ranked,
        limit=args.top,
        matches=result.matches if args.show_matches else (),
        show_hits=args.show_matches,
    )


if __name__ == "__main__":  # pragma: no cover
    main()
