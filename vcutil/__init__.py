"""Helpers for text ranking, vectors, collections, caching, conversation memory, timing and locks."""

__version__ = "0.1.0"