# src/tinysearch/counters.py
"""
Sparse frequency counter: document ID -> occurrence count.

A key that was never added reads as 0 but takes no space. One `Counters`
belongs to one owner: a word entry of the inverted index, or the running
result of a single query.
"""

from __future__ import annotations

from typing import Dict, Iterator, Mapping, Tuple, Union


class Counters:
    """doc_id -> count, with absent keys reading as 0."""

    __slots__ = ("_counts",)

    def __init__(self, counts: Union[Mapping[int, int], None] = None) -> None:
        self._counts: Dict[int, int] = {}
        if counts:
            for key, count in counts.items():
                self.set(key, count)

    def add(self, key: int) -> int:
        """Increment `key` by one (starting from 0) and return the new count.

        Negative keys are ignored and 0 is returned.
        """
        if key < 0:
            return 0
        count = self._counts.get(key, 0) + 1
        self._counts[key] = count
        return count

    def get(self, key: int) -> int:
        return self._counts.get(key, 0)

    def set(self, key: int, count: int) -> None:
        """Overwrite the count for `key`; negative keys or counts are ignored."""
        if key < 0 or count < 0:
            return
        self._counts[key] = count

    def discard(self, key: int) -> None:
        self._counts.pop(key, None)

    def items(self) -> Iterator[Tuple[int, int]]:
        """Yield (doc_id, count) pairs; order is not part of the contract."""
        return iter(list(self._counts.items()))

    def keys(self) -> Iterator[int]:
        return iter(list(self._counts))

    def copy(self) -> "Counters":
        dup = Counters()
        dup._counts = dict(self._counts)
        return dup

    def as_dict(self) -> Dict[int, int]:
        return dict(self._counts)

    def __iter__(self) -> Iterator[int]:
        return self.keys()

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, key: object) -> bool:
        return key in self._counts

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Counters):
            return self._counts == other._counts
        if isinstance(other, Mapping):
            return self._counts == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Counters({self._counts!r})"
