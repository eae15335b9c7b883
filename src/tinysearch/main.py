"""tinysearch command-line launcher

Purpose
-------
One entry point for the three programs of the search engine plus the
index round-trip check:

    tinysearch crawl SEED_URL PAGE_DIR MAX_DEPTH     # fill a page directory
    tinysearch index PAGE_DIR INDEX_FILE             # build and save the index
    tinysearch indextest OLD_INDEX NEW_INDEX         # load an index, save it again
    tinysearch query PAGE_DIR INDEX_FILE             # answer queries from stdin

Exit codes
----------
0 success; 1 bad arguments or page directory (or a result URL that cannot
be read back); 2 index file cannot be read or written. Usage errors caught
by argparse exit 2 as usual.
"""
from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from typing import List, Optional

from .config import LOG_DATEFMT, LOG_FORMAT, Settings
from .crawler import crawl
from .errors import IndexFileError, PageDirectoryError
from .index import InvertedIndex
from .indexer import build_index
from .pagedir import PageDirectory
from .querier import run_queries
from .words import raw_text, visible_text

logger = logging.getLogger("tinysearch")

EXIT_OK = 0
EXIT_ARGS = 1
EXIT_INDEX = 2


def configure_logging(settings: Settings, verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.level(),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        stream=sys.stderr,
    )


def _error(msg: str) -> None:
    print(f"Error: {msg}", file=sys.stderr)


def _valid_pagedir(path: str) -> Optional[PageDirectory]:
    pages = PageDirectory(path)
    if not pages.validate():
        _error(f"{path!r} is not a crawler-produced page directory")
        return None
    return pages


# ---------- commands ----------

def run_crawl(args: argparse.Namespace, settings: Settings) -> int:
    pages = PageDirectory(args.page_dir)
    try:
        if args.delay is not None:
            settings = dataclasses.replace(settings, crawl_delay=args.delay)
        pages.init()
        saved = crawl(args.seed_url, pages, args.max_depth, settings=settings)
    except (ValueError, PageDirectoryError) as e:
        _error(str(e))
        return EXIT_ARGS
    print(f"Crawled {saved} pages into {args.page_dir}")
    return EXIT_OK


def run_index(args: argparse.Namespace, settings: Settings) -> int:
    pages = _valid_pagedir(args.page_dir)
    if pages is None:
        return EXIT_ARGS
    # fail before a long build if the output cannot be written
    try:
        with open(args.index_file, "w", encoding="utf-8"):
            pass
    except OSError as e:
        _error(f"index file {args.index_file!r} could not be written: {e.strerror or e}")
        return EXIT_INDEX

    extract = raw_text if args.raw else visible_text
    index, documents = build_index(pages, extract=extract)
    try:
        index.save_file(args.index_file)
    except IndexFileError as e:
        _error(str(e))
        return EXIT_INDEX
    logger.info("%d documents -> %s", documents, args.index_file)
    return EXIT_OK


def run_indextest(args: argparse.Namespace, settings: Settings) -> int:
    try:
        index = InvertedIndex.load_file(args.old_index)
        index.save_file(args.new_index)
    except IndexFileError as e:
        _error(str(e))
        return EXIT_INDEX
    return EXIT_OK


def run_query(args: argparse.Namespace, settings: Settings) -> int:
    pages = _valid_pagedir(args.page_dir)
    if pages is None:
        return EXIT_ARGS
    try:
        index = InvertedIndex.load_file(args.index_file)
    except IndexFileError as e:
        _error(str(e))
        return EXIT_INDEX

    # undecodable bytes become U+FFFD and only reject their own line
    if hasattr(sys.stdin, "reconfigure"):
        sys.stdin.reconfigure(errors="replace")
    try:
        run_queries(sys.stdin, index, pages, interactive=sys.stdin.isatty())
    except PageDirectoryError as e:
        _error(str(e))
        return EXIT_ARGS
    return EXIT_OK


# ---------- argument parsing ----------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tinysearch",
        description="Tiny search engine: crawl, index and query web pages",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug messages to stderr")
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    p = sub.add_parser("crawl", help="Fetch pages from a seed URL into a page directory")
    p.add_argument("seed_url")
    p.add_argument("page_dir", help="Existing directory to store pages in")
    p.add_argument("max_depth", type=int, help="Maximum link depth (0-10)")
    p.add_argument("--delay", type=float, default=None, help="Seconds to wait between fetches")
    p.set_defaults(func=run_crawl)

    p = sub.add_parser("index", help="Build an index file from a page directory")
    p.add_argument("page_dir")
    p.add_argument("index_file")
    p.add_argument("--raw", action="store_true", help="Index page content as-is, markup included")
    p.set_defaults(func=run_index)

    p = sub.add_parser("indextest", help="Load an index file and write it back out")
    p.add_argument("old_index")
    p.add_argument("new_index")
    p.set_defaults(func=run_indextest)

    p = sub.add_parser("query", help="Answer AND/OR queries read from stdin")
    p.add_argument("page_dir")
    p.add_argument("index_file")
    p.set_defaults(func=run_query)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = Settings.from_env()
    except ValueError as e:
        _error(str(e))
        return EXIT_ARGS
    configure_logging(settings, args.verbose)
    return args.func(args, settings)


if __name__ == "__main__":
    sys.exit(main())
