# src/tinysearch/crawler.py
"""
Crawler: fills a page directory starting from one seed URL.

Responsibilities
- Fetch pages over HTTP (requests) and pull links out of them (BeautifulSoup)
- Follow only internal links, each URL at most once, up to a maximum depth
- Save every fetched page to the page directory with doc IDs 1, 2, 3, ...

The walk is breadth-first. Pages are saved in fetch order, so doc IDs are
contiguous and the indexer can stop at the first gap.
"""

from __future__ import annotations

import logging
import time
from collections import deque
from typing import Callable, Deque, List, Optional, Set
from urllib.parse import urldefrag, urljoin, urlsplit, urlunsplit

import requests
from bs4 import BeautifulSoup

from .config import MAX_CRAWL_DEPTH, Settings
from .pagedir import PageDirectory, WebPage

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], Optional[str]]


# -------------------------
# URL helpers
# -------------------------

def normalize_url(url: str, base: Optional[str] = None) -> Optional[str]:
    """
    Absolute form of `url` (resolved against `base`), fragment dropped,
    scheme and host lowercased. None for anything that is not http(s).
    """
    url = url.strip()
    if base is not None:
        url = urljoin(base, url)
    url, _ = urldefrag(url)
    parts = urlsplit(url)
    if parts.scheme.lower() not in ("http", "https") or not parts.netloc:
        return None
    path = parts.path or "/"
    return urlunsplit((parts.scheme.lower(), parts.netloc.lower(), path, parts.query, ""))


def site_prefix(url: str) -> str:
    parts = urlsplit(url)
    return f"{parts.scheme}://{parts.netloc}/"


def is_internal_url(url: str, prefix: str) -> bool:
    return url.startswith(prefix)


def extract_links(html: str, base_url: str) -> List[str]:
    """Normalized targets of every `<a href>` in `html`, in document order."""
    soup = BeautifulSoup(html, "html.parser")
    links = []
    for a in soup.find_all("a", href=True):
        target = normalize_url(a["href"], base=base_url)
        if target is not None:
            links.append(target)
    return links


# -------------------------
# Fetching
# -------------------------

def make_fetcher(settings: Optional[Settings] = None) -> Fetcher:
    """HTTP fetcher returning the page text, or None when it is not usable HTML."""
    settings = settings or Settings()
    session = requests.Session()
    session.headers["User-Agent"] = settings.user_agent

    def fetch(url: str) -> Optional[str]:
        try:
            resp = session.get(url, timeout=settings.timeout, allow_redirects=True)
        except requests.RequestException as e:
            logger.warning("fetch failed %s: %s", url, e)
            return None
        if resp.status_code != 200:
            logger.warning("fetch failed %s: HTTP %d", url, resp.status_code)
            return None
        if "text/html" not in resp.headers.get("Content-Type", ""):
            logger.info("not HTML, skipped: %s", url)
            return None
        return resp.text

    return fetch


# -------------------------
# Crawl
# -------------------------

def crawl(
    seed_url: str,
    pages: PageDirectory,
    max_depth: int,
    fetch: Optional[Fetcher] = None,
    settings: Optional[Settings] = None,
    internal_prefix: Optional[str] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """
    Crawl from `seed_url` down to `max_depth` and save pages into `pages`.

    `pages` must already be initialized. Returns the number of pages saved.
    Raises ValueError for a seed that is not an internal http(s) URL or a
    depth outside 0..MAX_CRAWL_DEPTH.
    """
    settings = settings or Settings()
    if not 0 <= max_depth <= MAX_CRAWL_DEPTH:
        raise ValueError(f"max depth must be between 0 and {MAX_CRAWL_DEPTH}, got {max_depth}")
    seed = normalize_url(seed_url)
    if seed is None:
        raise ValueError(f"seed URL {seed_url!r} is not an http(s) URL")
    prefix = internal_prefix or site_prefix(seed)
    if not is_internal_url(seed, prefix):
        raise ValueError(f"seed URL {seed!r} is not internal to {prefix!r}")
    if fetch is None:
        fetch = make_fetcher(settings)

    seen: Set[str] = {seed}
    frontier: Deque[WebPage] = deque([WebPage(url=seed, depth=0)])
    doc_id = 1
    first = True

    while frontier:
        page = frontier.popleft()
        if not first and settings.crawl_delay > 0:
            sleep(settings.crawl_delay)
        first = False

        html = fetch(page.url)
        if html is None:
            continue
        page.html = html
        logger.info("%d   Fetched: %s", page.depth, page.url)
        pages.save(page, doc_id)
        doc_id += 1

        if page.depth >= max_depth:
            continue
        logger.info("%d  Scanning: %s", page.depth, page.url)
        for link in extract_links(html, page.url):
            logger.debug("%d     Found: %s", page.depth, link)
            if not is_internal_url(link, prefix):
                logger.debug("%d  IgnExtrn: %s", page.depth, link)
                continue
            if link in seen:
                logger.debug("%d   IgnDupl: %s", page.depth, link)
                continue
            seen.add(link)
            frontier.append(WebPage(url=link, depth=page.depth + 1))
            logger.debug("%d     Added: %s", page.depth, link)

    saved = doc_id - 1
    logger.info("crawl done: %d pages saved to %s", saved, pages.path)
    return saved
