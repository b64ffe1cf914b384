"""
Node model and the per-query visited registry.

Registered nodes live in an arena (a plain list) and refer to the node that
discovered them by arena index, so predecessor chains never hold references
and the whole registry can be dumped as plain data.
"""

from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional

from wiki_race.exceptions import RegistrySealedError


class Side(Enum):
    """Which of the two simultaneous searches reached a node."""
    ORIGIN = "origin"
    DESTINATION = "destination"

    @property
    def opposite(self) -> "Side":
        return Side.DESTINATION if self is Side.ORIGIN else Side.ORIGIN


@dataclass(frozen=True)
class Node:
    """A queued or registered location in the link graph."""
    key: str
    side: Side
    predecessor: Optional[int] = None  # arena index, None for the two roots


class VisitedRegistry:
    """
    Mapping from key to registered node, shared by both sides of one query.

    A key is registered at most once and the first write wins. Only the round
    driver writes here, and only between rounds: while a round's lookups are
    outstanding the registry is sealed and writes raise RegistrySealedError.
    """

    def __init__(self):
        self._nodes: List[Node] = []
        self._index_by_key: Dict[str, int] = {}
        self._sealed = False

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, key: str) -> bool:
        return key in self._index_by_key

    @property
    def is_sealed(self) -> bool:
        return self._sealed

    def get(self, key: str) -> Optional[Node]:
        """Return the node registered under key, if any."""
        index = self._index_by_key.get(key)
        return None if index is None else self._nodes[index]

    def index_of(self, key: str) -> Optional[int]:
        return self._index_by_key.get(key)

    def node_at(self, index: int) -> Node:
        return self._nodes[index]

    def register(self, node: Node) -> int:
        """
        Register a node and return its arena index.

        If the key is already present the existing index is returned and the
        registry is left untouched.
        """
        if self._sealed:
            raise RegistrySealedError(
                f"Cannot register '{node.key}' while lookups are in flight"
            )
        existing = self._index_by_key.get(node.key)
        if existing is not None:
            return existing
        if node.predecessor is not None and not 0 <= node.predecessor < len(self._nodes):
            raise ValueError(f"Predecessor index {node.predecessor} is not registered")

        index = len(self._nodes)
        self._nodes.append(node)
        self._index_by_key[node.key] = index
        return index

    @contextmanager
    def sealed(self) -> Iterator["VisitedRegistry"]:
        """Reject writes for the duration of the block."""
        self._sealed = True
        try:
            yield self
        finally:
            self._sealed = False

    def count(self, side: Side) -> int:
        return sum(1 for node in self._nodes if node.side is side)

    def snapshot(self) -> List[Dict[str, Any]]:
        """Dump the arena as plain dicts, in registration order."""
        return [
            {"key": node.key, "side": node.side.value, "predecessor": node.predecessor}
            for node in self._nodes
        ]
