# src/tinysearch/querier.py
"""
Query loop: read one query per line, answer each before reading the next.

Output per accepted query (stdout):

    Query: cat or dog
    Matches 2 documents (ranked):
    score 4 doc 2: http://example.com/b.html
    score 2 doc 1: http://example.com/a.html
    -----------------------------------------------

A rejected line prints `Error: <reason>` on stderr and nothing on stdout,
then the loop moves on.
"""

from __future__ import annotations

import sys
from typing import Iterable, List, Optional, TextIO

from .config import PROMPT, SEPARATOR
from .errors import QueryError
from .evaluator import evaluate
from .index import InvertedIndex
from .query import parse_query
from .ranking import report


def process_query(
    line: str,
    index: InvertedIndex,
    store,
    out: Optional[TextIO] = None,
) -> List[str]:
    """Answer one query line; return its tokens, or raise QueryError."""
    out = out or sys.stdout
    tokens = parse_query(line)
    print("Query: " + " ".join(tokens), file=out)
    report(evaluate(tokens, index), store, out)
    print(SEPARATOR, file=out)
    return tokens


def run_queries(
    lines: Iterable[str],
    index: InvertedIndex,
    store,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
    interactive: bool = False,
) -> int:
    """Answer every line of `lines` in order; return how many were accepted."""
    out = out or sys.stdout
    err = err or sys.stderr
    accepted = 0
    it = iter(lines)
    while True:
        if interactive:
            print(PROMPT, end="", file=out, flush=True)
        line = next(it, None)
        if line is None:
            break
        try:
            process_query(line, index, store, out)
        except QueryError as e:
            print(f"Error: {e}", file=err)
            continue
        accepted += 1
    if interactive:
        print(file=out)
    return accepted
