"""
Utility package for editor support functions built on the core.
"""

from .search import SearchResult, SearchSession, find_all

__all__ = [
    'SearchResult',
    'SearchSession',
    'find_all',
]
