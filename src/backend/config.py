import os
from typing import Optional
from pydantic import BaseModel

from wiki_race.search import SearchSettings
from wiki_race.wikipedia import ARTICLE_BASE_URL, EXISTENCE_BASE_URL


class BackendConfig(BaseModel):
    """Configuration for the FastAPI backend."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8083
    debug: bool = False
    log_level: str = "INFO"
    # "rich", "plain" or "auto" (rich only on a terminal)
    log_format: str = "auto"

    # CORS settings
    cors_origins: list = ["http://localhost:3000", "http://localhost:5173"]

    # Wikipedia endpoints
    article_base_url: str = ARTICLE_BASE_URL
    existence_base_url: str = EXISTENCE_BASE_URL
    http_timeout_sec: float = 10.0

    # Search settings
    max_concurrent_lookups: int = 32
    lookup_timeout_sec: Optional[float] = 15.0

    @classmethod
    def from_env(cls) -> "BackendConfig":
        """Create config from environment variables."""
        lookup_timeout = os.getenv("LOOKUP_TIMEOUT_SEC", "15")
        return cls(
            host=os.getenv("BACKEND_HOST", "0.0.0.0"),
            port=int(os.getenv("BACKEND_PORT", "8083")),
            debug=os.getenv("BACKEND_DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "auto").lower(),
            cors_origins=os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:5173").split(","),
            article_base_url=os.getenv("WIKI_ARTICLE_BASE_URL", ARTICLE_BASE_URL),
            existence_base_url=os.getenv("WIKI_EXISTENCE_BASE_URL", EXISTENCE_BASE_URL),
            http_timeout_sec=float(os.getenv("HTTP_TIMEOUT_SEC", "10")),
            max_concurrent_lookups=int(os.getenv("MAX_CONCURRENT_LOOKUPS", "32")),
            # "0" or "none" turns the per-lookup timeout off
            lookup_timeout_sec=None if lookup_timeout.lower() in ("0", "none", "") else float(lookup_timeout),
        )

    def use_rich_logging(self) -> Optional[bool]:
        if self.log_format == "rich":
            return True
        if self.log_format == "plain":
            return False
        return None

    def search_settings(self) -> SearchSettings:
        return SearchSettings(
            max_concurrent_lookups=self.max_concurrent_lookups,
            lookup_timeout_sec=self.lookup_timeout_sec,
        )

# Global config instance
config = BackendConfig.from_env()
