"""
Pytest configuration and shared fixtures.
"""

import asyncio
import logging
from typing import Callable, Dict, Iterable, List, Optional, Tuple

import pytest

from wiki_race.exceptions import LinkLookupError
from wiki_race.search import ArticleExistenceCheck, LinkLookup

# Configure logging for tests
logging.basicConfig(level=logging.INFO)


class FakeLinkGraph(LinkLookup):
    """
    In-memory link graph.

    Keys in `failing` raise LinkLookupError, keys in `raising` raise the
    mapped exception and keys in `hanging` never return. Every call yields to the event loop once, so lookups of the same
    round overlap and `max_in_flight` reflects real concurrency.
    """

    def __init__(
        self,
        edges: Dict[str, List[str]],
        failing: Iterable[str] = (),
        hanging: Iterable[str] = (),
        raising: Optional[Dict[str, Exception]] = None,
    ):
        self.edges = edges
        self.failing = set(failing)
        self.hanging = set(hanging)
        self.raising = dict(raising or {})
        self.calls: List[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def fetch_neighbors(self, key: str) -> List[str]:
        self.calls.append(key)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(0)
            if key in self.hanging:
                await asyncio.Event().wait()
            if key in self.failing:
                raise LinkLookupError(key, "simulated failure")
            if key in self.raising:
                raise self.raising[key]
            return list(self.edges.get(key, []))
        finally:
            self.in_flight -= 1


class FakeExistenceCheck(ArticleExistenceCheck):
    """Treats every title as existing except the ones listed as missing."""

    def __init__(self, missing: Iterable[str] = ()):
        self.missing = set(missing)
        self.checked: List[str] = []

    async def article_exists(self, title: str) -> Tuple[bool, str]:
        self.checked.append(title)
        if title in self.missing:
            return False, f"The article {title} does not exist."
        return True, ""


@pytest.fixture
def make_graph() -> Callable[..., FakeLinkGraph]:
    """Factory for in-memory link graphs."""
    return FakeLinkGraph


@pytest.fixture
def make_existence_check() -> Callable[..., FakeExistenceCheck]:
    """Factory for existence checks with a fixed set of missing titles."""
    return FakeExistenceCheck
