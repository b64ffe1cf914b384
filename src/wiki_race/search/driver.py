"""
Round driver for the bidirectional search.

Each round drains both frontiers through the FrontierProcessor, then waits
for every lookup dispatched in that round before building the next
frontiers. The visited registry is therefore only ever written by this
coroutine, between one round's fan-in and the next round's dispatch.
"""

import asyncio
import logging
import time
from dataclasses import dataclass, field
from itertools import zip_longest
from typing import Iterator, List, Optional, Sequence

from .frontier import FrontierProcessor, LookupBatch
from .lookup import LinkLookup
from .models import SearchResult, SearchSettings, SearchStats
from .paths import NO_PATH_FOUND, Path, select_path
from .registry import Node, Side, VisitedRegistry

logger = logging.getLogger(__name__)


@dataclass
class RoundOutcome:
    """The frontiers for the next round plus anything found in this one."""
    origin_queue: List[Node] = field(default_factory=list)
    destination_queue: List[Node] = field(default_factory=list)
    meetings: List[Path] = field(default_factory=list)
    dispatched: int = 0
    failed: int = 0

    @property
    def exhausted(self) -> bool:
        return not self.origin_queue and not self.destination_queue


def interleave(origin_queue: Sequence[Node], destination_queue: Sequence[Node]) -> Iterator[Node]:
    """Alternate between the two queues, origin first, until both are drained."""
    for origin_node, destination_node in zip_longest(origin_queue, destination_queue):
        if origin_node is not None:
            yield origin_node
        if destination_node is not None:
            yield destination_node


class BidirectionalSearch:
    """
    Finds a path between two keys by searching from both ends at once.

    Every call to find_path starts from an empty registry; nothing carries
    over between searches.
    """

    def __init__(self, lookup: LinkLookup, settings: Optional[SearchSettings] = None):
        self.lookup = lookup
        self.settings = settings or SearchSettings()

    async def find_path(self, origin_key: str, destination_key: str) -> SearchResult:
        """
        Search until the two frontiers meet or both run dry.

        Args:
            origin_key: Key of the node the path starts at
            destination_key: Key of the node the path ends at

        Returns:
            SearchResult with found=True and the rendered path, or found=False
            and the no-path sentinel
        """
        start_time = time.time()
        registry = VisitedRegistry()
        processor = FrontierProcessor(
            registry,
            self.lookup,
            asyncio.Semaphore(self.settings.max_concurrent_lookups),
            self.settings.lookup_timeout_sec,
        )
        stats = SearchStats()

        origin_queue = [Node(key=origin_key, side=Side.ORIGIN)]
        destination_queue = [Node(key=destination_key, side=Side.DESTINATION)]

        while origin_queue or destination_queue:
            stats.rounds += 1
            logger.debug(
                f"Round {stats.rounds}: origin frontier={len(origin_queue)}, "
                f"destination frontier={len(destination_queue)}, registered={len(registry)}"
            )

            outcome = await self.run_round(processor, origin_queue, destination_queue)
            stats.registered = len(registry)
            stats.lookups_dispatched += outcome.dispatched
            stats.lookups_failed += outcome.failed

            if outcome.meetings:
                stats.meetings = len(outcome.meetings)
                path = select_path(outcome.meetings)
                self._log_summary(origin_key, destination_key, stats, start_time, path)
                return SearchResult(found=True, path=path.render(), keys=list(path.keys), stats=stats)

            origin_queue, destination_queue = outcome.origin_queue, outcome.destination_queue

        self._log_summary(origin_key, destination_key, stats, start_time, None)
        return SearchResult(found=False, path=NO_PATH_FOUND, stats=stats)

    async def run_round(
        self,
        processor: FrontierProcessor,
        origin_queue: Sequence[Node],
        destination_queue: Sequence[Node],
    ) -> RoundOutcome:
        """
        Run one synchronized round for both sides.

        The given queues are consumed as-is; the queues for the next round
        come back in the RoundOutcome.
        """
        meetings: List[Path] = []
        lookups: List["asyncio.Task[LookupBatch]"] = []

        for node in interleave(origin_queue, destination_queue):
            expansion = processor.process(node)
            if expansion.meeting is not None:
                meetings.append(expansion.meeting)
            if expansion.lookup is not None:
                lookups.append(expansion.lookup)

        with processor.registry.sealed():
            if meetings:
                # The round's meetings are final, so its lookups are not needed.
                for task in lookups:
                    task.cancel()
                await asyncio.gather(*lookups, return_exceptions=True)
                return RoundOutcome(meetings=meetings, dispatched=len(lookups))

            batches = await asyncio.gather(*lookups)

        outcome = RoundOutcome(dispatched=len(lookups))
        for batch in batches:
            if batch.failed:
                outcome.failed += 1
            if batch.side is Side.ORIGIN:
                outcome.origin_queue.extend(batch.children)
            else:
                outcome.destination_queue.extend(batch.children)
        return outcome

    def _log_summary(
        self,
        origin_key: str,
        destination_key: str,
        stats: SearchStats,
        start_time: float,
        path: Optional[Path],
    ):
        elapsed_ms = (time.time() - start_time) * 1000
        logger.info(
            f"SEARCH SUMMARY for {origin_key} -> {destination_key}: "
            f"{'path of ' + str(path.hops) + ' hops' if path else 'no path'}, "
            f"rounds: {stats.rounds}, registered: {stats.registered}, "
            f"lookups: {stats.lookups_dispatched} ({stats.lookups_failed} failed), "
            f"total time: {elapsed_ms:.1f}ms"
        )
