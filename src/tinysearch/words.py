# src/tinysearch/words.py
"""Word normalization and document tokenizing for the indexer.

- `normalize_word`: lowercase a word (index keys and query words both
  go through it).
- `tokenize_document`: split text on whitespace, drop tokens shorter than
  MIN_WORD_LENGTH, normalize the rest; encounter order is kept.
  Punctuation stays attached (`dog.`), and such tokens can never match a
  query, since queries accept letters only.
- `visible_text`: strip markup from a crawled HTML page with BeautifulSoup
  so that tags and scripts do not end up in the index.
"""
from __future__ import annotations

from typing import Iterator

from bs4 import BeautifulSoup, Comment

from .config import MIN_WORD_LENGTH


def normalize_word(word: str) -> str:
    return word.lower()


def tokenize_document(text: str, min_length: int = MIN_WORD_LENGTH) -> Iterator[str]:
    for token in text.split():
        if len(token) < min_length:
            continue
        yield normalize_word(token)


def visible_text(html: str) -> str:
    """Text a reader would see: no script/style/noscript, no comments."""
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(["script", "style", "noscript"]):
        tag.extract()
    for c in soup.find_all(string=lambda it: isinstance(it, Comment)):
        c.extract()
    return soup.get_text(separator=" ")


def raw_text(html: str) -> str:
    """Identity extractor: index the stored content as-is."""
    return html
