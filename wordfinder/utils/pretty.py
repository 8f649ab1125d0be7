"""Pretty-print helpers for grids and search results."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Iterable, Sequence, Set, Tuple

if TYPE_CHECKING:
    from ..core.models import RankedWord, WordMatch
    from ..engine.grid import LetterGrid


def format_grid(grid: LetterGrid, highlight: Iterable[WordMatch] = ()) -> str:
    marked: Set[Tuple[int, int]] = set()
    for match in highlight:
        marked.update(match.cells)

    width = grid.size
    header_cells = [f"{c:>3}" for c in range(width)]
    lines = ["    " + "".join(header_cells)]
    lines.append("    " + "-" * (3 * width))
    for r in range(width):
        row_render = "".join(
            f"[{grid.cell(r, c)}]" if (r, c) in marked else f"  {grid.cell(r, c)}"
            for c in range(width)
        )
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def pretty_print_grid(
    grid: LetterGrid,
    *,
    highlight: Iterable[WordMatch] = (),
    label: str | None = None,
    stream=None,
) -> None:
    """Print the grid in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_grid(grid, highlight), file=stream)


def print_results(
    ranked: Sequence[RankedWord],
    *,
    limit: int,
    matches: Sequence[WordMatch] = (),
    show_hits: bool = False,
    stream=None,
) -> None:
    """Print the ranked words, optionally with hit counts and match positions."""

    stream = stream or sys.stdout
    print(f"Top {limit} most found words are:", file=stream)
    for entry in ranked:
        if show_hits:
            print(f"  {entry.word:<12} {entry.hits}", file=stream)
        else:
            print(entry.word, file=stream)

    if matches:
        print(file=stream)
        print("--- Matches ---", file=stream)
        for match in matches:
            (r1, c1), (r2, c2) = match.cells[0], match.end
            print(f"  {match.word} {r1}:{c1} {r2}:{c2} {match.direction.value}", file=stream)
