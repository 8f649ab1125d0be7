"""Match attempt state machine.

A :class:`MatchAttempt` is the hypothesis that ``word`` starts at a given cell
and continues in one :class:`~wordfinder.core.constants.Direction`. It only
reacts to the single cell it expects next; every other cell leaves it as is.
Once ``MATCHED`` or ``FAILED`` it never changes again.
"""

from __future__ import annotations

from typing import List, Tuple

from ..core.constants import Bounds, Direction, MatchStatus
from ..core.models import WordMatch


class MatchAttempt:
    """Tracks one word hypothesis while the grid is scanned."""

    __slots__ = ("word", "start", "direction", "bounds", "position", "next_row", "next_col", "status")

    def __init__(
        self,
        word: str,
        row: int,
        col: int,
        direction: Direction,
        bounds: Bounds,
        character: str,
    ) -> None:
        if not word:
            raise ValueError("Cannot build a match attempt for an empty word")
        self.word = word
        self.start: Tuple[int, int] = (row, col)
        self.direction = direction
        self.bounds = bounds
        self.position = 0
        self.next_row = row
        self.next_col = col
        self.status = MatchStatus.POSSIBLE
        self.advance(character, row, col)

    @property
    def expected_cell(self) -> Tuple[int, int]:
        return self.next_row, self.next_col

    @property
    def is_terminal(self) -> bool:
        return self.status is not MatchStatus.POSSIBLE

    @property
    def is_matched(self) -> bool:
        return self.status is MatchStatus.MATCHED

    @property
    def cells(self) -> List[Tuple[int, int]]:
        """Cells consumed by successful character matches so far."""

        cells = []
        row, col = self.start
        for _ in range(self.position):
            cells.append((row, col))
            row, col = self.direction.advance(row, col)
        return cells

    def advance(self, character: str, row: int, col: int) -> MatchStatus:
        """Feed the character found at ``(row, col)`` to the attempt."""

        if self.is_terminal or (row, col) != (self.next_row, self.next_col):
            return self.status

        if character != self.word[self.position]:
            self.status = MatchStatus.FAILED
            return self.status

        self.position += 1
        if self.position == len(self.word):
            self.status = MatchStatus.MATCHED
            return self.status

        next_row, next_col = self.direction.advance(row, col)
        if not self.bounds.contains(next_row, next_col):
            # the rest of the word would run off the grid
            self.status = MatchStatus.FAILED
            return self.status

        self.next_row, self.next_col = next_row, next_col
        return self.status

    def to_match(self) -> WordMatch:
        if not self.is_matched:
            raise ValueError(f"Attempt for '{self.word}' at {self.start} is {self.status.value}")
        return WordMatch(
            word=self.word,
            start_row=self.start[0],
            start_col=self.start[1],
            direction=self.direction,
        )

    def __repr__(self) -> str:
        return (
            f"MatchAttempt(word={self.word!r}, start={self.start}, "
            f"direction={self.direction.value}, position={self.position}, "
            f"status={self.status.value})"
        )
