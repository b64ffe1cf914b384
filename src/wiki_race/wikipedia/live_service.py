import logging
import httpx
from typing import List, Optional, Tuple

from wiki_race.exceptions import LinkLookupError
from wiki_race.search.lookup import ArticleExistenceCheck, LinkLookup
from .links import (
    ARTICLE_BASE_URL,
    EXISTENCE_BASE_URL,
    existence_url,
    extract_article_keys,
)

USER_AGENT = "WikiRace/0.1 (https://github.com/wiki-race/wiki-race)"


class LiveWikiService(LinkLookup, ArticleExistenceCheck):
    """
    Fetches live Wikipedia pages over HTTP.

    Link lookups scrape anchors from the mobile article page; existence checks
    request the desktop article. All methods are asynchronous and share one
    httpx.AsyncClient, which the service closes unless it was passed in.
    """
    def __init__(
        self,
        article_base_url: str = ARTICLE_BASE_URL,
        existence_base_url: str = EXISTENCE_BASE_URL,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.article_base_url = article_base_url.rstrip("/")
        self.existence_base_url = existence_base_url.rstrip("/")
        self.logger = logging.getLogger(__name__)
        self._owns_client = client is None
        self.client = client if client is not None else httpx.AsyncClient(
            timeout=timeout,
            follow_redirects=True,
            headers={"User-Agent": USER_AGENT},
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        if self._owns_client:
            await self.client.aclose()

    async def fetch_neighbors(self, key: str) -> List[str]:
        """Return the article keys linked from the page at key."""
        try:
            response = await self.client.get(key)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise LinkLookupError(key, f"HTTP {e.response.status_code}") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise LinkLookupError(key, str(e) or type(e).__name__) from e

        keys = extract_article_keys(response.text, base_url=self.article_base_url)
        self.logger.debug(f"Fetched {len(keys)} article links from '{key}'")
        return keys

    async def article_exists(self, title: str) -> Tuple[bool, str]:
        """Check whether an article with this title exists."""
        missing = (False, f"The article {title} does not exist.")
        try:
            response = await self.client.get(existence_url(title, base_url=self.existence_base_url))
        except httpx.HTTPError as e:
            self.logger.warning(f"Existence check for '{title}' failed: {e}")
            return missing

        if response.status_code == 404:
            self.logger.debug(f"Article '{title}' not found")
            return missing
        return True, ""
