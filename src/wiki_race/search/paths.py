"""
Path reconstruction and selection.

A meeting pairs two nodes with the same key from opposite sides. Walking both
predecessor chains back to their roots yields one path running from the first
node's root, through the meeting key, to the second node's root.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .registry import Node, VisitedRegistry

PATH_DELIMITER = " -> "
NO_PATH_FOUND = "No Path Found."


@dataclass(frozen=True)
class Path:
    """An ordered sequence of keys from one search root to the other."""
    keys: Tuple[str, ...]

    @property
    def hops(self) -> int:
        return len(self.keys) - 1

    def render(self) -> str:
        return PATH_DELIMITER.join(self.keys)


def walk_to_root(node: Node, registry: VisitedRegistry) -> List[str]:
    """Keys from node back to its search root, node first."""
    keys = [node.key]
    index = node.predecessor
    while index is not None:
        ancestor = registry.node_at(index)
        keys.append(ancestor.key)
        index = ancestor.predecessor
    return keys


def reconstruct_path(first: Node, second: Node, registry: VisitedRegistry) -> Path:
    """
    Build the path for the meeting pair (first, second).

    The result starts at first's root, passes through the shared key once and
    ends at second's root. Swapping the arguments yields the reverse path.
    """
    if first.key != second.key:
        raise ValueError(f"Meeting nodes disagree on key: '{first.key}' != '{second.key}'")

    head = list(reversed(walk_to_root(first, registry)))
    tail: List[str] = []
    if second.predecessor is not None:
        tail = walk_to_root(registry.node_at(second.predecessor), registry)
    return Path(tuple(head + tail))


def select_path(paths: Sequence[Path]) -> Path:
    """
    Pick the path with the fewest hops.

    Ties keep the earliest path in the sequence.
    """
    if not paths:
        raise ValueError("Cannot select from an empty list of paths")
    best = paths[0]
    for path in paths[1:]:
        if path.hops < best.hops:
            best = path
    return best
