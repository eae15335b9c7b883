# src/tinysearch/evaluator.py
"""
AND/OR evaluation over the inverted index.

Scores are plain occurrence counts:
- AND keeps documents present for every word and scores each by the
  smallest count among those words (`intersect_counters`).
- OR adds the scores of the AND-clauses on either side
  (`union_counters`).

AND binds tighter than OR, so `a b or c and d` reads `(a AND b) OR (c AND d)`.
Two search words next to each other are joined by an implicit AND.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from .config import AND_WORD, OR_WORD
from .counters import Counters
from .index import InvertedIndex

logger = logging.getLogger(__name__)


def union_counters(result: Counters, other: Counters) -> None:
    """Add every count of `other` into `result` (in place)."""
    for doc_id, count in other.items():
        result.set(doc_id, result.get(doc_id) + count)


def intersect_counters(acc: Counters, other: Counters) -> None:
    """Keep in `acc` only docs also in `other`, scored by the smaller count."""
    for doc_id, count in acc.items():
        low = min(count, other.get(doc_id))
        if low > 0:
            acc.set(doc_id, low)
        else:
            acc.discard(doc_id)


def _fold(and_acc: Optional[Counters], or_acc: Optional[Counters]) -> Optional[Counters]:
    """Merge a finished AND-clause into the OR result and return the OR result."""
    if and_acc is None:
        return or_acc
    if or_acc is None:
        or_acc = Counters()
    union_counters(or_acc, and_acc)
    return or_acc


def evaluate(tokens: Sequence[str], index: InvertedIndex) -> Counters:
    """
    Score every document against a validated token sequence.

    A search word missing from the index empties its whole AND-clause; the
    remaining words of that clause are not looked up. Other clauses are
    unaffected.
    """
    and_acc: Optional[Counters] = None
    or_acc: Optional[Counters] = None
    and_invalid = False

    for token in tokens:
        if token == OR_WORD:
            or_acc = _fold(and_acc, or_acc)
            and_acc = None
            and_invalid = False
            continue
        if token == AND_WORD or and_invalid:
            continue

        match = index.find(token)
        if match is None:
            logger.debug("%r not in index; clause dropped", token)
            and_invalid = True
            and_acc = None
        elif and_acc is None:
            and_acc = match.copy()
        else:
            intersect_counters(and_acc, match)

    or_acc = _fold(and_acc, or_acc)
    return or_acc if or_acc is not None else Counters()
