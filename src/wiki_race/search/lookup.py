"""
Collaborator interfaces the search depends on.

The search itself only ever calls LinkLookup. ArticleExistenceCheck is used by
callers to reject unknown articles before a search is started.
"""

from abc import ABC, abstractmethod
from typing import List, Tuple


class LinkLookup(ABC):
    """Source of outgoing links for a key."""

    @abstractmethod
    async def fetch_neighbors(self, key: str) -> List[str]:
        """
        Return the keys linked from the page identified by key.

        Only keys that are valid graph nodes are returned; filtering out
        non-article links is the implementation's job.

        Raises:
            LinkLookupError: If the page could not be fetched or parsed.
        """
        pass


class ArticleExistenceCheck(ABC):
    """Answers whether a title names a real article."""

    @abstractmethod
    async def article_exists(self, title: str) -> Tuple[bool, str]:
        """Return (exists, message); message explains a negative answer."""
        pass
