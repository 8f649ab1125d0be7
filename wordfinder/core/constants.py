"""Shared constants and enumerations for the word finder."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


DEFAULT_GRID_SIZE = 5
DEFAULT_TOP_K = 10


class Direction(str, Enum):
    """Scan directions supported by the grid."""

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"

    @property
    def step(self) -> Tuple[int, int]:
        return DIRECTION_STEPS[self]

    def advance(self, row: int, col: int) -> Tuple[int, int]:
        """Return the cell that follows ``(row, col)`` in this direction."""

        dr, dc = self.step
        return row + dr, col + dc


class MatchStatus(str, Enum):
    """Lifecycle of a single match attempt."""

    POSSIBLE = "POSSIBLE"
    MATCHED = "MATCHED"
    FAILED = "FAILED"


DIRECTION_STEPS: Dict[Direction, Tuple[int, int]] = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
}
SCAN_DIRECTIONS: Tuple[Direction, ...] = (Direction.HORIZONTAL, Direction.VERTICAL)


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
