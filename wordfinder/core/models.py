"""Data models produced by the word finder."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .constants import Direction


@dataclass(frozen=True)
class WordMatch:
    """A completed occurrence of a word inside the grid.

    One-character words have no real direction; they are reported as
    ``HORIZONTAL`` and cover only their start cell.
    """

    word: str
    start_row: int
    start_col: int
    direction: Direction
    _cells: Optional[Tuple[Tuple[int, int], ...]] = field(default=None, repr=False, compare=False)

    @property
    def length(self) -> int:
        return len(self.word)

    @property
    def cells(self) -> List[Tuple[int, int]]:
        if self._cells is None:
            cells = []
            row, col = self.start_row, self.start_col
            for _ in range(self.length):
                cells.append((row, col))
                row, col = self.direction.advance(row, col)
            # frozen dataclass: bypass __setattr__ to memoize
            object.__setattr__(self, "_cells", tuple(cells))
        return list(self._cells or ())

    @property
    def end(self) -> Tuple[int, int]:
        return self.cells[-1]

    def to_jsonable(self) -> dict:
        return {
            "word": self.word,
            "start": [self.start_row, self.start_col],
            "end": list(self.end),
            "direction": self.direction.value,
        }


@dataclass(frozen=True)
class RankedWord:
    """A word together with its cumulative hit count."""

    word: str
    hits: int
