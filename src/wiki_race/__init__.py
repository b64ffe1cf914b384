"""
Wiki Race - Core Library

Finds a chain of links between two Wikipedia articles by running a
round-synchronized bidirectional breadth-first search over pages that are
fetched lazily while the search runs.
"""

from .exceptions import LinkLookupError, RegistrySealedError
from .search import BidirectionalSearch, SearchResult, SearchSettings

__all__ = [
    'BidirectionalSearch',
    'SearchResult',
    'SearchSettings',
    'LinkLookupError',
    'RegistrySealedError',
]
