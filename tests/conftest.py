# Shared fixtures: a small crawler-style page directory and a matching index.
import pytest

from tinysearch.index import InvertedIndex
from tinysearch.pagedir import PageDirectory, WebPage


PAGES = [
    ("http://example.com/a.html", 0, "cat cat dog on the mat"),
    ("http://example.com/b.html", 1, "dog dog dog cat bird"),
    ("http://example.com/c.html", 1, "Bird watching with a CAT"),
]


@pytest.fixture
def pagedir(tmp_path):
    pages = PageDirectory(tmp_path)
    pages.init()
    for doc_id, (url, depth, html) in enumerate(PAGES, start=1):
        pages.save(WebPage(url=url, depth=depth, html=html), doc_id)
    return pages


@pytest.fixture
def small_index():
    # "cat" -> {1:2, 2:1}, "dog" -> {2:3}
    index = InvertedIndex()
    for _ in range(2):
        index.insert("cat", 1)
    index.insert("cat", 2)
    for _ in range(3):
        index.insert("dog", 2)
    return index
