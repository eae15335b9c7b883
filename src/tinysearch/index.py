# src/tinysearch/index.py
"""
Inverted index: normalized word -> Counters(doc_id -> count).

The index owns every Counters it holds; dropping the index drops them all.

File format, one line per word:

    word docID1 count1 docID2 count2 ...

Integers are separated by single spaces and the word holds no whitespace.
`save` writes words in sorted order and doc IDs ascending so two saves of
the same index give byte-identical files.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, Optional, TextIO, Tuple, Union

from .counters import Counters
from .errors import IndexFileError

logger = logging.getLogger(__name__)


class InvertedIndex:
    """word -> {doc_id -> count}"""

    def __init__(self) -> None:
        self._words: Dict[str, Counters] = {}

    # -------------------------
    # Updates
    # -------------------------

    def _counters_for(self, word: str) -> Counters:
        ctrs = self._words.get(word)
        if ctrs is None:
            ctrs = Counters()
            self._words[word] = ctrs
        return ctrs

    def insert(self, word: str, doc_id: int) -> None:
        """Count one more occurrence of `word` in `doc_id`.

        An empty word or a negative doc ID is ignored.
        """
        if not word or doc_id < 0:
            return
        self._counters_for(word).add(doc_id)

    def set(self, word: str, doc_id: int, count: int) -> None:
        """Record an explicit count; used when loading a saved index."""
        if not word or doc_id < 0 or count < 0:
            return
        self._counters_for(word).set(doc_id, count)

    # -------------------------
    # Lookups
    # -------------------------

    def find(self, word: str) -> Optional[Counters]:
        """Counters for `word`, or None when no document contains it."""
        return self._words.get(word)

    def words(self) -> Iterator[str]:
        return iter(list(self._words))

    def items(self) -> Iterator[Tuple[str, Counters]]:
        return iter(list(self._words.items()))

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InvertedIndex):
            return NotImplemented
        return self._words == other._words

    def __repr__(self) -> str:
        return f"<InvertedIndex words={len(self._words)}>"

    # -------------------------
    # Text format
    # -------------------------

    def save(self, sink: TextIO) -> None:
        """Write one `word d1 c1 d2 c2 ...` line per word."""
        for word in sorted(self._words):
            pairs = sorted(self._words[word].items())
            fields = [word]
            for doc_id, count in pairs:
                fields.append(str(doc_id))
                fields.append(str(count))
            sink.write(" ".join(fields) + "\n")

    @classmethod
    def load(cls, source: Iterable[str]) -> "InvertedIndex":
        """Read the format written by `save`.

        Loading is lenient: on each line pairs are taken until a token is
        not an integer or a doc ID has no count after it. The rest of that
        line is skipped and loading goes on with the next line.
        """
        index = cls()
        for lineno, line in enumerate(source, start=1):
            tokens = line.split()
            if not tokens:
                continue
            word, rest = tokens[0], tokens[1:]
            for i in range(0, len(rest), 2):
                if i + 1 >= len(rest):
                    logger.warning("index line %d: doc ID %r for %r has no count; "
                                   "rest of line skipped", lineno, rest[i], word)
                    break
                try:
                    doc_id = int(rest[i])
                    count = int(rest[i + 1])
                except ValueError:
                    logger.warning("index line %d: bad pair %r %r for %r; "
                                   "rest of line skipped", lineno, rest[i], rest[i + 1], word)
                    break
                index.set(word, doc_id, count)
        return index

    # aliases
    serialize = save
    deserialize = load

    # -------------------------
    # File helpers
    # -------------------------

    def save_file(self, path: Union[str, Path]) -> None:
        try:
            with open(path, "w", encoding="utf-8") as fh:
                self.save(fh)
        except OSError as e:
            raise IndexFileError(f"cannot write index file {str(path)!r}: {e.strerror or e}") from e
        logger.info("wrote %d words to %s", len(self), path)

    @classmethod
    def load_file(cls, path: Union[str, Path]) -> "InvertedIndex":
        try:
            with open(path, "r", encoding="utf-8", errors="replace") as fh:
                index = cls.load(fh)
        except OSError as e:
            raise IndexFileError(f"cannot read index file {str(path)!r}: {e.strerror or e}") from e
        logger.info("loaded %d words from %s", len(index), path)
        return index
