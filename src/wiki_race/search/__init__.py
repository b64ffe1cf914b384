"""
Bidirectional, round-synchronized breadth-first search over a lazily
discovered link graph.
"""

from .driver import BidirectionalSearch, RoundOutcome
from .frontier import Expansion, FrontierProcessor, LookupBatch
from .lookup import ArticleExistenceCheck, LinkLookup
from .models import SearchResult, SearchSettings, SearchStats
from .paths import NO_PATH_FOUND, PATH_DELIMITER, Path, reconstruct_path, select_path
from .registry import Node, Side, VisitedRegistry

__all__ = [
    "BidirectionalSearch",
    "RoundOutcome",
    "Expansion",
    "FrontierProcessor",
    "LookupBatch",
    "ArticleExistenceCheck",
    "LinkLookup",
    "SearchResult",
    "SearchSettings",
    "SearchStats",
    "NO_PATH_FOUND",
    "PATH_DELIMITER",
    "Path",
    "reconstruct_path",
    "select_path",
    "Node",
    "Side",
    "VisitedRegistry",
]
