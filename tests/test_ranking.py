import io

import pytest

from tinysearch.counters import Counters
from tinysearch.errors import PageDirectoryError
from tinysearch.ranking import rank, report


def test_rank_orders_by_score_then_doc_id():
    result = Counters({5: 2, 1: 4, 3: 2, 9: 7})
    assert rank(result) == [(9, 7), (1, 4), (3, 2), (5, 2)]


def test_rank_drops_zero_scores():
    assert rank(Counters({1: 0, 2: 3})) == [(2, 3)]


def test_report_no_matches(pagedir):
    out = io.StringIO()
    assert report(Counters(), pagedir, out) == 0
    assert out.getvalue() == "No documents match.\n"


def test_report_lists_urls(pagedir):
    out = io.StringIO()
    assert report(Counters({1: 2, 2: 4}), pagedir, out) == 2
    assert out.getvalue().splitlines() == [
        "Matches 2 documents (ranked):",
        "score 4 doc 2: http://example.com/b.html",
        "score 2 doc 1: http://example.com/a.html",
    ]


def test_report_unknown_doc_raises(pagedir):
    with pytest.raises(PageDirectoryError):
        report(Counters({42: 1}), pagedir, io.StringIO())
