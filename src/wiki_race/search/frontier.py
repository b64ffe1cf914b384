"""
Frontier processing: decides, for one dequeued node, whether it closes the
gap between the two searches or becomes a fresh expansion point.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from wiki_race.exceptions import LinkLookupError
from .lookup import LinkLookup
from .paths import Path, reconstruct_path
from .registry import Node, Side, VisitedRegistry

logger = logging.getLogger(__name__)


@dataclass
class LookupBatch:
    """Children discovered by one lookup task."""
    side: Side
    children: List[Node] = field(default_factory=list)
    failed: bool = False


@dataclass
class Expansion:
    """What processing a single node produced."""
    meeting: Optional[Path] = None
    lookup: Optional["asyncio.Task[LookupBatch]"] = None


class FrontierProcessor:
    """
    Consumes queued nodes for one query.

    Registry writes happen synchronously inside process(); lookup tasks only
    receive the key and arena index of their node and return a private batch.
    """

    def __init__(
        self,
        registry: VisitedRegistry,
        lookup: LinkLookup,
        semaphore: asyncio.Semaphore,
        lookup_timeout_sec: Optional[float] = None,
    ):
        self.registry = registry
        self.lookup = lookup
        self.semaphore = semaphore
        self.lookup_timeout_sec = lookup_timeout_sec

    def process(self, node: Node) -> Expansion:
        """
        Handle one dequeued node.

        Must be called from a running event loop, since expanding the node
        schedules its lookup as a task.
        """
        existing = self.registry.get(node.key)

        if existing is not None:
            if existing.side is node.side:
                return Expansion()
            # Orient the path origin first no matter which side got here last.
            if node.side is Side.ORIGIN:
                path = reconstruct_path(node, existing, self.registry)
            else:
                path = reconstruct_path(existing, node, self.registry)
            logger.debug(f"Searches met at '{node.key}' ({path.hops} hops)")
            return Expansion(meeting=path)

        index = self.registry.register(node)
        task = asyncio.create_task(self._expand(node, index))
        return Expansion(lookup=task)

    async def _expand(self, node: Node, index: int) -> LookupBatch:
        """Fetch the neighbors of a registered node and wrap them as children."""
        async with self.semaphore:
            try:
                keys = await asyncio.wait_for(
                    self.lookup.fetch_neighbors(node.key),
                    timeout=self.lookup_timeout_sec,
                )
            except LinkLookupError as e:
                logger.debug(f"Treating '{node.key}' as a dead end: {e.reason}")
                return LookupBatch(side=node.side, failed=True)
            except asyncio.TimeoutError:
                logger.warning(
                    f"Lookup for '{node.key}' timed out after {self.lookup_timeout_sec}s; treating as a dead end"
                )
                return LookupBatch(side=node.side, failed=True)
            except Exception as e:
                # Any other per-page problem is still only a dead end for this node.
                logger.warning(f"Lookup for '{node.key}' failed unexpectedly: {e!r}; treating as a dead end")
                return LookupBatch(side=node.side, failed=True)

        children = [Node(key=key, side=node.side, predecessor=index) for key in keys if key]
        return LookupBatch(side=node.side, children=children)
