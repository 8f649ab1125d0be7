"""Word finder package: ranks the words of a list found in a square letter grid.

This package exposes the public API surface via:

- ``wordfinder.engine.scanner.WordFinder``: builds the grid and runs searches.
- ``wordfinder.engine.scanner.Scanner``: the single-pass incremental matcher.
- ``wordfinder.engine.ranker.rank_words``: top-K ranking by cumulative hits.

Words are matched left-to-right and top-to-bottom only.
"""

from .core.exceptions import ShapeError, WordFinderError
from .core.models import RankedWord, WordMatch
from .engine.grid import GridConfig, LetterGrid
from .engine.ranker import rank_words, top_words
from .engine.scanner import FinderConfig, Scanner, ScanResult, WordFinder

__all__ = [
    "FinderConfig",
    "GridConfig",
    "LetterGrid",
    "RankedWord",
    "ScanResult",
    "Scanner",
    "ShapeError",
    "WordFinder",
    "WordFinderError",
    "WordMatch",
    "rank_words",
    "top_words",
]

__version__ = "0.1.0"
