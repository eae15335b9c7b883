# src/tinysearch/pagedir.py
"""
Page directory: the on-disk document store the crawler fills and the
indexer and querier read.

Layout
- `<dir>/.crawler`   marker file; its presence makes the directory valid
- `<dir>/1`, `<dir>/2`, ...   one file per page, named by doc ID

Each page file holds the URL on the first line, the crawl depth on the
second, and the page content after that:

    http://example.com/index.html
    0
    <html>...</html>

Doc IDs start at 1 and have no gaps, so the first missing file marks the
end of the corpus.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .config import CRAWLER_MARKER
from .errors import PageDirectoryError, PageFormatError

logger = logging.getLogger(__name__)


@dataclass
class WebPage:
    url: str
    depth: int = 0
    html: str = ""


class PageDirectory:
    """doc_id -> WebPage, backed by one file per page."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"PageDirectory({str(self.path)!r})"

    def _page_file(self, doc_id: int) -> Path:
        return self.path / str(doc_id)

    # -------------------------
    # Marker
    # -------------------------

    def init(self) -> None:
        """Mark an existing directory as crawler output."""
        if not self.path.is_dir():
            raise PageDirectoryError(f"page directory {str(self.path)!r} does not exist")
        try:
            (self.path / CRAWLER_MARKER).touch()
        except OSError as e:
            raise PageDirectoryError(
                f"cannot create {CRAWLER_MARKER} in {str(self.path)!r}: {e.strerror or e}"
            ) from e

    def validate(self) -> bool:
        """True when the directory was produced by the crawler."""
        return (self.path / CRAWLER_MARKER).is_file()

    # -------------------------
    # Pages
    # -------------------------

    def save(self, page: WebPage, doc_id: int) -> None:
        if doc_id < 0:
            raise ValueError(f"doc_id must be >= 0, got {doc_id}")
        target = self._page_file(doc_id)
        try:
            with target.open("w", encoding="utf-8") as fh:
                fh.write(f"{page.url}\n{page.depth}\n{page.html}\n")
        except OSError as e:
            raise PageDirectoryError(
                f"cannot write page {doc_id} to {str(self.path)!r}: {e.strerror or e}"
            ) from e
        logger.debug("saved page %d: %s", doc_id, page.url)

    def put(self, doc_id: int, page: WebPage) -> None:
        self.save(page, doc_id)

    def get(self, doc_id: int) -> Optional[WebPage]:
        """
        The page stored under `doc_id`, or None when there is no such file.

        Raises PageFormatError when the file exists but the url/depth
        header is missing or the depth is not an integer.
        """
        target = self._page_file(doc_id)
        try:
            with target.open("r", encoding="utf-8", errors="replace") as fh:
                url = fh.readline()
                depth_line = fh.readline()
                html = fh.read()
        except (FileNotFoundError, IsADirectoryError):
            return None

        url = url.rstrip("\n")
        if not url or not depth_line:
            raise PageFormatError(f"page {doc_id} in {str(self.path)!r} has no url/depth header")
        try:
            depth = int(depth_line.strip())
        except ValueError:
            raise PageFormatError(
                f"page {doc_id} in {str(self.path)!r} has a bad depth {depth_line.strip()!r}"
            ) from None

        # `save` appends one newline after the content
        if html.endswith("\n"):
            html = html[:-1]
        return WebPage(url=url, depth=depth, html=html)

    def url_of(self, doc_id: int) -> Optional[str]:
        """Only the URL line of a page; None when the page does not exist."""
        try:
            with self._page_file(doc_id).open("r", encoding="utf-8", errors="replace") as fh:
                url = fh.readline().rstrip("\n")
        except (FileNotFoundError, IsADirectoryError):
            return None
        return url or None

