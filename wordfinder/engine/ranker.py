"""Top-K ranking of matched words by cumulative hits."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List, Sequence

from ..core.constants import DEFAULT_TOP_K
from ..core.models import RankedWord, WordMatch


def rank_words(
    matches: Iterable[WordMatch],
    words: Sequence[str],
    limit: int = DEFAULT_TOP_K,
) -> List[RankedWord]:
    """Group ``matches`` by word and return the ``limit`` most frequent.

    Every match counts, so a word found at two positions scores two. Equal
    counts keep the order in which the words first appear in ``words``; words
    that were never matched are left out.
    """

    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")

    hits = Counter(match.word for match in matches)
    order = {}
    for index, word in enumerate(words):
        order.setdefault(word, index)
    # matches for words missing from ``words`` rank after all listed ones
    found = sorted(hits, key=lambda word: order.get(word, len(order)))
    found.sort(key=lambda word: hits[word], reverse=True)
    return [RankedWord(word=word, hits=hits[word]) for word in found[:limit]]


def top_words(
    matches: Iterable[WordMatch],
    words: Sequence[str],
    limit: int = DEFAULT_TOP_K,
) -> List[str]:
    return [entry.word for entry in rank_words(matches, words, limit)]
