"""
RaceService - validates a race request, checks that both articles exist and
runs a fresh bidirectional search between them.
"""

import logging
import time
from typing import Optional, Tuple

from wiki_race.search import ArticleExistenceCheck, BidirectionalSearch, LinkLookup, SearchSettings
from wiki_race.wikipedia import ARTICLE_BASE_URL, key_from_title, title_from_key
from backend.exceptions import InvalidQueryException, PageNotFoundException, WikiRaceException
from backend.models.api_models import RaceResponse

logger = logging.getLogger(__name__)


def validate_query(start: Optional[str], destination: Optional[str]) -> Tuple[str, str]:
    """
    Check that both parameters are present and not blank.

    Raises:
        InvalidQueryException: Listing every missing parameter
    """
    error_msg = ""
    if not start or not start.strip():
        error_msg += "Url param 'start' is missing. "
    if not destination or not destination.strip():
        error_msg += "Url param 'destination' is missing. "
    if error_msg:
        raise InvalidQueryException(error_msg)
    return start, destination


class RaceService:
    """Runs races against a link lookup and an existence check."""

    def __init__(
        self,
        lookup: LinkLookup,
        existence_check: ArticleExistenceCheck,
        settings: Optional[SearchSettings] = None,
        article_base_url: str = ARTICLE_BASE_URL,
    ):
        self.lookup = lookup
        self.existence_check = existence_check
        self.settings = settings or SearchSettings()
        self.article_base_url = article_base_url

    async def race(self, start: Optional[str], destination: Optional[str]) -> RaceResponse:
        """
        Find a path from start to destination.

        Never raises for bad input; validation problems come back as an
        error response with completed=False.
        """
        start_time = time.time()
        try:
            start, destination = validate_query(start, destination)
            await self._ensure_exists(start)
            await self._ensure_exists(destination)
        except WikiRaceException as e:
            logger.info(f"Rejected race request: {e.message}")
            return RaceResponse.error(e.message)

        search = BidirectionalSearch(self.lookup, self.settings)
        result = await search.find_path(
            key_from_title(start, base_url=self.article_base_url),
            key_from_title(destination, base_url=self.article_base_url),
        )

        elapsed = time.time() - start_time
        if result.found:
            titles = " -> ".join(title_from_key(key) for key in result.keys)
            logger.info(f"Race {start!r} -> {destination!r}: {titles}")
        else:
            logger.info(f"Race {start!r} -> {destination!r}: no path found")
        return RaceResponse(
            completed=result.found,
            start=start,
            destination=destination,
            path=result.path,
            elapsed_time_sec=f"{elapsed:f}",
            message="",
        )

    async def _ensure_exists(self, title: str):
        exists, message = await self.existence_check.article_exists(title)
        if not exists:
            raise PageNotFoundException(message or f"The article {title} does not exist.")
