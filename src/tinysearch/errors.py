# src/tinysearch/errors.py
"""Exceptions raised by the tinysearch modules.

Library code raises these; only `tinysearch.main` turns them into
messages on stderr and process exit codes.
"""


class TinySearchError(Exception):
    """Base class for every tinysearch error."""


class PageDirectoryError(TinySearchError):
    """The page directory is missing, not crawler-produced, or unwritable."""


class PageFormatError(TinySearchError):
    """A page file exists but its url/depth header cannot be read."""


class IndexFileError(TinySearchError):
    """An index file cannot be opened for reading or writing."""


class QueryError(TinySearchError):
    """A query line was rejected; the message says why."""
