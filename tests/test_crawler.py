import pytest

from tinysearch.config import Settings
from tinysearch.crawler import crawl, extract_links, is_internal_url, normalize_url
from tinysearch.pagedir import PageDirectory

SITE = {
    "http://example.com/index.html": """
        <a href="a.html">A</a>
        <a href="b.html#top">B</a>
        <a href="https://elsewhere.org/x.html">external</a>
    """,
    "http://example.com/a.html": '<a href="/index.html">home</a> <a href="c.html">C</a>',
    "http://example.com/b.html": '<a href="a.html">A again</a>',
    "http://example.com/c.html": "leaf page",
}

NO_DELAY = Settings(crawl_delay=0)


class FakeFetch:
    def __init__(self, site):
        self.site = site
        self.fetched = []

    def __call__(self, url):
        self.fetched.append(url)
        return self.site.get(url)


@pytest.fixture
def pages(tmp_path):
    p = PageDirectory(tmp_path)
    p.init()
    return p


def test_normalize_url():
    assert normalize_url("HTTP://Example.COM/a.html#frag") == "http://example.com/a.html"
    assert normalize_url("../b.html", base="http://example.com/dir/a.html") == "http://example.com/b.html"
    assert normalize_url("http://example.com") == "http://example.com/"
    assert normalize_url("mailto:someone@example.com") is None


def test_is_internal_url():
    assert is_internal_url("http://example.com/x", "http://example.com/")
    assert not is_internal_url("http://other.com/x", "http://example.com/")


def test_extract_links_resolves_relative():
    links = extract_links(SITE["http://example.com/index.html"], "http://example.com/index.html")
    assert links == [
        "http://example.com/a.html",
        "http://example.com/b.html",
        "https://elsewhere.org/x.html",
    ]


def test_depth_zero_fetches_only_seed(pages):
    fetch = FakeFetch(SITE)
    assert crawl("http://example.com/index.html", pages, 0, fetch=fetch, settings=NO_DELAY) == 1
    assert fetch.fetched == ["http://example.com/index.html"]
    assert pages.get(1).depth == 0
    assert pages.get(2) is None


def test_crawl_follows_internal_links_once(pages):
    fetch = FakeFetch(SITE)
    saved = crawl("http://example.com/index.html", pages, 2, fetch=fetch, settings=NO_DELAY)
    assert saved == 4
    assert fetch.fetched == [
        "http://example.com/index.html",
        "http://example.com/a.html",
        "http://example.com/b.html",
        "http://example.com/c.html",
    ]
    assert [pages.get(i).url for i in range(1, 5)] == fetch.fetched
    assert [pages.get(i).depth for i in range(1, 5)] == [0, 1, 1, 2]
    assert pages.get(4).html == "leaf page"


def test_failed_fetch_leaves_no_gap(pages):
    site = dict(SITE)
    del site["http://example.com/a.html"]
    fetch = FakeFetch(site)
    saved = crawl("http://example.com/index.html", pages, 1, fetch=fetch, settings=NO_DELAY)
    assert saved == 2
    assert pages.get(1).url == "http://example.com/index.html"
    assert pages.get(2).url == "http://example.com/b.html"
    assert pages.get(3) is None


def test_delay_between_fetches(pages):
    waits = []
    crawl("http://example.com/index.html", pages, 1, fetch=FakeFetch(SITE),
          settings=Settings(crawl_delay=0.5), sleep=waits.append)
    assert waits == [0.5, 0.5]


@pytest.mark.parametrize("depth", [-1, 11])
def test_bad_depth_rejected(pages, depth):
    with pytest.raises(ValueError):
        crawl("http://example.com/", pages, depth, fetch=FakeFetch(SITE), settings=NO_DELAY)


def test_seed_outside_prefix_rejected(pages):
    with pytest.raises(ValueError):
        crawl("http://other.com/", pages, 1, fetch=FakeFetch(SITE), settings=NO_DELAY,
              internal_prefix="http://example.com/")


class FakeResponse:
    def __init__(self, status_code=200, content_type="text/html; charset=utf-8", text="<p>ok</p>"):
        self.status_code = status_code
        self.headers = {"Content-Type": content_type}
        self.text = text


def test_make_fetcher_filters_responses(monkeypatch):
    import requests
    from tinysearch.crawler import make_fetcher

    responses = {
        "http://example.com/ok": FakeResponse(),
        "http://example.com/missing": FakeResponse(status_code=404),
        "http://example.com/image": FakeResponse(content_type="image/png"),
    }

    def fake_get(self, url, **kwargs):
        if url not in responses:
            raise requests.ConnectionError("unreachable")
        return responses[url]

    monkeypatch.setattr(requests.Session, "get", fake_get)
    fetch = make_fetcher(NO_DELAY)
    assert fetch("http://example.com/ok") == "<p>ok</p>"
    assert fetch("http://example.com/missing") is None
    assert fetch("http://example.com/image") is None
    assert fetch("http://example.com/down") is None
