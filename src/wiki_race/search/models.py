"""
Settings and result models for the bidirectional search.
"""

from typing import List, Optional
from pydantic import BaseModel, Field


class SearchSettings(BaseModel):
    """Tuning knobs for one search."""
    max_concurrent_lookups: int = Field(32, ge=1, description="Upper bound on link lookups running at the same time")
    lookup_timeout_sec: Optional[float] = Field(15.0, gt=0, description="Per-lookup timeout; a timed out lookup counts as a dead end. None disables it")


class SearchStats(BaseModel):
    """Counters collected while a search runs."""
    rounds: int = Field(0, description="Number of rounds started")
    registered: int = Field(0, description="Nodes written to the visited registry")
    lookups_dispatched: int = Field(0, description="Link lookups started")
    lookups_failed: int = Field(0, description="Lookups that failed or timed out and contributed no children")
    meetings: int = Field(0, description="Meetings seen in the final round")


class SearchResult(BaseModel):
    """Outcome of a search."""
    found: bool = Field(..., description="Whether the two searches met")
    path: str = Field(..., description="Rendered path from origin to destination, or the no-path sentinel")
    keys: List[str] = Field(default_factory=list, description="Keys on the path, origin first; empty when not found")
    stats: SearchStats = Field(default_factory=SearchStats)

    @property
    def hops(self) -> Optional[int]:
        return len(self.keys) - 1 if self.keys else None
