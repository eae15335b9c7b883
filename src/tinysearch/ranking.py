# src/tinysearch/ranking.py
"""Ranking of a query result and printing of the ranked matches."""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO, Tuple

from .counters import Counters
from .errors import PageDirectoryError


def rank(result: Counters) -> List[Tuple[int, int]]:
    """(doc_id, score) pairs with a positive score, best first.

    Equal scores are ordered by ascending doc ID.
    """
    hits = [(doc_id, score) for doc_id, score in result.items() if score > 0]
    hits.sort(key=lambda kv: (-kv[1], kv[0]))
    return hits


def resolve_url(store, doc_id: int) -> str:
    url_of = getattr(store, "url_of", None)
    if url_of is not None:
        url = url_of(doc_id)
    else:
        page = store.get(doc_id)
        url = page.url if page is not None else None
    if url is None:
        raise PageDirectoryError(f"no page for doc {doc_id} in {store!r}")
    return url


def report(result: Counters, store, out: Optional[TextIO] = None) -> int:
    """Print the ranked matches of `result`; return how many were printed."""
    out = out or sys.stdout
    ranked = rank(result)
    if not ranked:
        print("No documents match.", file=out)
        return 0

    print(f"Matches {len(ranked)} documents (ranked):", file=out)
    for doc_id, score in ranked:
        print(f"score {score} doc {doc_id}: {resolve_url(store, doc_id)}", file=out)
    return len(ranked)
