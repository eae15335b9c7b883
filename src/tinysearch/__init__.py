"""Tiny search engine: crawler, word index builder and AND/OR querier."""

__version__ = "0.1.0"
