from tinysearch.index import InvertedIndex
from tinysearch.indexer import build_index, index_page
from tinysearch.pagedir import PageDirectory, WebPage
from tinysearch.words import tokenize_document, visible_text


class DictStore:
    """In-memory store: doc_id -> WebPage, with a call log."""

    def __init__(self, pages):
        self.pages = pages
        self.asked = []

    def get(self, doc_id):
        self.asked.append(doc_id)
        return self.pages.get(doc_id)


def test_tokenize_drops_short_words_and_lowercases():
    assert list(tokenize_document("The cat ON a Mat  of DOGS")) == ["the", "cat", "mat", "dogs"]


def test_index_page_counts_repeats():
    index = InvertedIndex()
    assert index_page(index, 3, "Cat cat CAT dog") == 4
    assert index.find("cat") == {3: 3}
    assert index.find("dog") == {3: 1}


def test_build_counts_every_document(pagedir):
    index, documents = build_index(pagedir)
    assert documents == 3
    assert index.find("cat") == {1: 2, 2: 1, 3: 1}
    assert index.find("dog") == {1: 1, 2: 3}
    assert index.find("bird") == {2: 1, 3: 1}
    assert index.find("on") is None
    assert index.find("the") == {1: 1}


def test_build_stops_at_first_gap():
    page = WebPage(url="http://example.com/", html="word")
    store = DictStore({1: page, 2: page, 3: page, 5: page, 6: page})
    index, documents = build_index(store)
    assert documents == 3
    assert store.asked == [1, 2, 3, 4]
    assert index.find("word") == {1: 1, 2: 1, 3: 1}


def test_build_skips_malformed_page(tmp_path):
    pages = PageDirectory(tmp_path)
    pages.init()
    pages.save(WebPage(url="http://example.com/1", html="alpha"), 1)
    (tmp_path / "2").write_text("http://example.com/2\nnot-a-depth\nbeta\n")
    pages.save(WebPage(url="http://example.com/3", html="gamma"), 3)
    index, documents = build_index(pages)
    assert documents == 3
    assert index.find("alpha") == {1: 1}
    assert index.find("beta") is None
    assert index.find("gamma") == {3: 1}


def test_build_with_markup_stripped(tmp_path):
    pages = PageDirectory(tmp_path)
    pages.init()
    html = "<html><head><script>var hidden;</script></head><body><p>Visible words</p></body></html>"
    pages.save(WebPage(url="http://example.com/", html=html), 1)
    index, _ = build_index(pages, extract=visible_text)
    assert index.find("visible") == {1: 1}
    assert index.find("words") == {1: 1}
    assert index.find("hidden;") is None
    assert index.find("var") is None
