"""Single-pass grid scanner and the :class:`WordFinder` entrypoint.

The scanner visits every cell once in row-major order. Live attempts are kept
in an arena and referenced by index, so an attempt can be advanced and dropped
within the same visit without aliasing the collection being iterated.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..core.constants import DEFAULT_GRID_SIZE, DEFAULT_TOP_K, SCAN_DIRECTIONS, Direction, MatchStatus
from ..core.models import RankedWord, WordMatch
from ..utils.logger import get_logger
from .attempt import MatchAttempt
from .grid import GridConfig, LetterGrid
from .ranker import rank_words


LOGGER = get_logger(__name__)


@dataclass
class FinderConfig:
    grid_size: int = DEFAULT_GRID_SIZE
    top_k: int = DEFAULT_TOP_K

    def __post_init__(self) -> None:
        if self.top_k < 0:
            raise ValueError(f"top_k must be non-negative, got {self.top_k}")

    def to_grid_config(self) -> GridConfig:
        return GridConfig(size=self.grid_size)


@dataclass
class ScanResult:
    matches: List[WordMatch]
    words: List[str]
    attempts_spawned: int = 0
    peak_live: int = 0
    ignored_words: List[str] = field(default_factory=list)

    def hits(self) -> Counter:
        return Counter(match.word for match in self.matches)


def prepare_words(words: Iterable[str]) -> Tuple[List[str], List[str]]:
    """Drop empty and repeated entries, keeping first-appearance order.

    Returns the usable words and the entries that were ignored.
    """

    prepared: List[str] = []
    ignored: List[str] = []
    seen = set()
    for word in words:
        if not word or word in seen:
            ignored.append(word)
            continue
        seen.add(word)
        prepared.append(word)
    return prepared, ignored


class Scanner:
    """Drives one pass over a :class:`LetterGrid` for a word list."""

    def __init__(self, grid: LetterGrid) -> None:
        self.grid = grid

    def scan(self, words: Iterable[str]) -> ScanResult:
        prepared, ignored = prepare_words(words)
        if ignored:
            LOGGER.debug("Ignoring %s empty or repeated word entries", len(ignored))

        by_first: Dict[str, List[str]] = defaultdict(list)
        for word in prepared:
            by_first[word[0]].append(word)

        bounds = self.grid.bounds
        arena: List[MatchAttempt] = []
        live: List[int] = []
        matched: List[int] = []
        peak_live = 0

        for row, col, char in self.grid.iter_cells():
            # advance existing attempts before spawning on this cell
            survivors: List[int] = []
            for index in live:
                status = arena[index].advance(char, row, col)
                if status is MatchStatus.POSSIBLE:
                    survivors.append(index)
                elif status is MatchStatus.MATCHED:
                    matched.append(index)
            live = survivors

            for word in by_first.get(char, ()):
                directions = SCAN_DIRECTIONS if len(word) > 1 else (Direction.HORIZONTAL,)
                for direction in directions:
                    attempt = MatchAttempt(word, row, col, direction, bounds, char)
                    arena.append(attempt)
                    index = len(arena) - 1
                    if attempt.status is MatchStatus.POSSIBLE:
                        live.append(index)
                    elif attempt.status is MatchStatus.MATCHED:
                        matched.append(index)
            peak_live = max(peak_live, len(live))

        result = ScanResult(
            matches=[arena[index].to_match() for index in matched],
            words=prepared,
            attempts_spawned=len(arena),
            peak_live=peak_live,
            ignored_words=ignored,
        )
        LOGGER.debug(
            "Scanned %sx%s grid for %s words: %s attempts, %s matches",
            self.grid.size,
            self.grid.size,
            len(prepared),
            result.attempts_spawned,
            len(result.matches),
        )
        return result


class WordFinder:
    """Finds the most frequent words of a list inside a fixed-size grid."""

    def __init__(self, rows: Sequence[str], config: Optional[FinderConfig] = None) -> None:
        self.config = config or FinderConfig()
        self.grid = LetterGrid(rows, self.config.to_grid_config())
        self.scanner = Scanner(self.grid)

    def scan(self, words: Iterable[str]) -> ScanResult:
        return self.scanner.scan(words)

    def find_ranked(self, words: Iterable[str]) -> List[RankedWord]:
        result = self.scan(words)
        return rank_words(result.matches, result.words, self.config.top_k)

    def find(self, words: Iterable[str]) -> List[str]:
        """Return up to ``top_k`` words ordered by cumulative hits."""

        return [entry.word for entry in self.find_ranked(words)]
