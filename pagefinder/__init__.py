"""A small search engine for Chinese and English web pages: suggestions, indexing and search."""

__version__ = "0.1.0"