# src/tinysearch/query.py
"""
Query line parsing and validation.

A query is a line of letters and whitespace. Words are lowercased; the
words `and` / `or` are operators, everything else is a search word.

Rules a query must follow:
- only ASCII letters and whitespace (anything else rejects the line)
- at least one word
- no operator first or last
- no two operators next to each other (`and or` included)
"""

from __future__ import annotations

import string
from typing import List, Optional, Sequence

from .config import OPERATORS
from .errors import QueryError
from .words import normalize_word

_LETTERS = frozenset(string.ascii_letters)


def tokenize_query(line: str) -> List[str]:
    """Split on whitespace and lowercase, keeping order."""
    return [normalize_word(w) for w in line.split()]


def bad_character(line: str) -> Optional[str]:
    """First character that is neither a letter nor whitespace, if any."""
    for ch in line:
        if ch not in _LETTERS and not ch.isspace():
            return ch
    return None


def validate_characters(line: str) -> bool:
    return bad_character(line) is None


def syntax_problem(tokens: Sequence[str]) -> Optional[str]:
    """Describe what is wrong with `tokens`, or None when they are fine."""
    if not tokens:
        return "empty query"
    if tokens[0] in OPERATORS:
        return f"'{tokens[0]}' cannot be first"
    if tokens[-1] in OPERATORS:
        return f"'{tokens[-1]}' cannot be last"
    for prev, cur in zip(tokens, tokens[1:]):
        if prev in OPERATORS and cur in OPERATORS:
            return f"'{prev}' and '{cur}' cannot be adjacent"
    return None


def validate_syntax(tokens: Sequence[str]) -> bool:
    return syntax_problem(tokens) is None


def parse_query(line: str) -> List[str]:
    """Validate a raw query line and return its normalized tokens.

    Raises QueryError naming the first problem found; a rejected line is
    never partly evaluated.
    """
    ch = bad_character(line)
    if ch is not None:
        raise QueryError(f"bad character {ch!r} in query")
    tokens = tokenize_query(line)
    problem = syntax_problem(tokens)
    if problem is not None:
        raise QueryError(problem)
    return tokens
