# src/tinysearch/indexer.py
"""
Index builder.

Walks a document store by doc ID (1, 2, 3, ...) and counts every word of
every page into an InvertedIndex. The first doc ID the store reports as
absent ends the walk; the store is expected to have no gaps.

A page file that exists but cannot be parsed is skipped with a warning and
the walk goes on with the next doc ID.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Tuple

from .errors import PageFormatError
from .index import InvertedIndex
from .words import raw_text, tokenize_document

logger = logging.getLogger(__name__)

TextExtractor = Callable[[str], str]


def index_page(index: InvertedIndex, doc_id: int, text: str) -> int:
    """Insert every word of `text` under `doc_id`; return how many were inserted."""
    inserted = 0
    for word in tokenize_document(text):
        index.insert(word, doc_id)
        inserted += 1
    return inserted


def build_index(
    store,
    index: Optional[InvertedIndex] = None,
    extract: TextExtractor = raw_text,
) -> Tuple[InvertedIndex, int]:
    """
    Build (or extend) an inverted index from `store`.

    `store` is anything with `get(doc_id) -> page or None` where a page has
    an `html` attribute, such as PageDirectory. `extract` turns the stored
    content into the text that gets tokenized.

    Returns (index, documents_seen), where documents_seen counts every doc
    ID before the first gap, skipped pages included.
    """
    if index is None:
        index = InvertedIndex()

    doc_id = 1
    while True:
        try:
            page = store.get(doc_id)
        except PageFormatError as e:
            logger.warning("skipping doc %d: %s", doc_id, e)
            doc_id += 1
            continue
        if page is None:
            break

        words = index_page(index, doc_id, extract(page.html))
        logger.debug("indexed doc %d (%d words): %s", doc_id, words, page.url)
        doc_id += 1

    documents = doc_id - 1
    logger.info("indexed %d documents, %d distinct words", documents, len(index))
    return index, documents
