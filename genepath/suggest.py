"""
Closest-gene suggestions by edit distance.

When a query gene is missing from the dictionary, every entry is scored by
Levenshtein distance (unit cost insertion, deletion and substitution) and the
closest one is offered instead. Ties go to the entry that appears first in the
dictionary.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import numpy as np

from .errors import EmptyDictionaryError
from .types import Suggestion

logger = logging.getLogger("genepath.suggest")
logger.addHandler(logging.NullHandler())


def levenshtein(a: str, b: str) -> int:
    """
    Minimum number of single-symbol edits turning ``a`` into ``b``.

    Args:
        a: Source string
        b: Target string

    Returns:
        Edit distance with unit costs for insertion, deletion and substitution
    """
    m, n = len(a), len(b)

    # Initialize DP table
    dp = np.zeros((m + 1, n + 1), dtype=np.int64)

    # First row and column: distance from/to the empty prefix
    dp[:, 0] = np.arange(m + 1)
    dp[0, :] = np.arange(n + 1)

    # Fill DP table
    for i in range(1, m + 1):
        for j in range(1, n + 1):
            substitution = dp[i - 1, j - 1] + (0 if a[i - 1] == b[j - 1] else 1)
            deletion = dp[i - 1, j] + 1
            insertion = dp[i, j - 1] + 1
            dp[i, j] = min(substitution, deletion, insertion)

    return int(dp[m, n])


def rank(query: str, dictionary: Sequence[str], limit: Optional[int] = None) -> List[Suggestion]:
    """
    Score every dictionary entry against ``query``.

    Args:
        query: Normalized query gene
        dictionary: Candidate genes in dictionary order
        limit: Keep only the best ``limit`` suggestions

    Returns:
        Suggestions ordered by distance, then by dictionary position
    """
    if limit is not None and limit < 1:
        raise ValueError(f"limit must be positive, got {limit}")
    if not dictionary:
        raise EmptyDictionaryError(f"No dictionary entries to compare with {query!r}")

    scored = [
        (levenshtein(query, entry), position, entry)
        for position, entry in enumerate(dictionary)
    ]
    scored.sort(key=lambda item: (item[0], item[1]))
    if limit is not None:
        scored = scored[:limit]
    return [Suggestion(query=query, match=entry, distance=distance) for distance, _, entry in scored]


def suggest(query: str, dictionary: Sequence[str]) -> Suggestion:
    """Return the closest dictionary entry to ``query``."""

    best = rank(query, dictionary, limit=1)[0]
    logger.debug(
        {
            "phase": "suggest",
            "event": "suggestion",
            "query": query,
            "match": best.match,
            "distance": best.distance,
        }
    )
    return best


__all__ = ["levenshtein", "rank", "suggest"]
