"""Immutable square letter grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from ..core.constants import DEFAULT_GRID_SIZE, Bounds
from ..core.exceptions import ShapeError
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class GridConfig:
    """Configuration values driving the grid shape."""

    size: int = DEFAULT_GRID_SIZE

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError(f"Grid size must be positive, got {self.size}")

    def bounds(self) -> Bounds:
        return Bounds(rows=self.size, cols=self.size)


class LetterGrid:
    """Square matrix of single characters, fixed at construction."""

    __slots__ = ("_config", "_bounds", "_rows")

    def __init__(self, rows: Sequence[str], config: Optional[GridConfig] = None) -> None:
        config = config or GridConfig()
        rows = tuple(rows)
        if len(rows) != config.size or any(len(row) != config.size for row in rows):
            raise ShapeError(
                "The grid needs to have {0} rows with {0} characters each".format(config.size)
            )
        self._config = config
        self._bounds = config.bounds()
        self._rows: Tuple[str, ...] = rows
        LOGGER.debug("Built %sx%s grid", config.size, config.size)

    # ------------------------------------------------------------------
    # Read-only access
    # ------------------------------------------------------------------
    @property
    def config(self) -> GridConfig:
        return self._config

    @property
    def size(self) -> int:
        return self._config.size

    @property
    def bounds(self) -> Bounds:
        return self._bounds

    @property
    def rows(self) -> Tuple[str, ...]:
        return self._rows

    def cell(self, row: int, col: int) -> str:
        if not self._bounds.contains(row, col):
            raise IndexError(f"Cell outside bounds: {(row, col)}")
        return self._rows[row][col]

    def row(self, index: int) -> str:
        return self._rows[index]

    def column(self, index: int) -> str:
        return "".join(row[index] for row in self._rows)

    def iter_cells(self) -> Iterator[Tuple[int, int, str]]:
        """Yield ``(row, col, char)`` in row-major order."""

        for r, row in enumerate(self._rows):
            for c, char in enumerate(row):
                yield r, c, char

    def to_jsonable(self) -> List[str]:
        return list(self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LetterGrid):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        return f"LetterGrid(size={self.size}, rows={list(self._rows)!r})"
