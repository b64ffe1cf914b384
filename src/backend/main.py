import logging
import uvicorn
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend.config import config
from backend.api.race import router as race_router
from backend.models.api_models import RaceResponse
from backend.services.race_service import RaceService
from wiki_race.wikipedia import LiveWikiService

from wiki_race.logging_config import setup_logging
setup_logging(level=config.log_level, use_rich=config.use_rich_logging())

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    logger.info("Starting Wiki Race API...")

    wiki_service = LiveWikiService(
        article_base_url=config.article_base_url,
        existence_base_url=config.existence_base_url,
        timeout=config.http_timeout_sec,
    )
    logger.info("LiveWikiService created.")

    race_service = RaceService(
        lookup=wiki_service,
        existence_check=wiki_service,
        settings=config.search_settings(),
        article_base_url=wiki_service.article_base_url,
    )
    logger.info(
        f"RaceService created (max {config.max_concurrent_lookups} concurrent lookups, "
        f"lookup timeout {config.lookup_timeout_sec}s)"
    )

    app.state.wiki_service = wiki_service
    app.state.race_service = race_service

    logger.info("Wiki Race API startup complete")

    yield

    logger.info("Shutting down Wiki Race API...")
    await wiki_service.close()
    logger.info("Wiki Race API shutdown complete")

# Create FastAPI app
app = FastAPI(
    title="Wiki Race API",
    description="Finds a chain of links between two Wikipedia articles",
    version="0.1.0",
    debug=config.debug,
    lifespan=lifespan
)

# Routers and Middleware
app.include_router(race_router)
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "message": "Wiki Race API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
        "race_example": "/wiki-race/goLang?start=St. Olaf College&destination=Pantheon (religion)",
    }

@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "wiki-race-api",
        "version": "0.1.0",
    }

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Report unhandled errors in the regular response shape."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=200,
        content=RaceResponse.error("Internal server error").model_dump(by_alias=True),
    )

if __name__ == "__main__":
    uvicorn.run(
        "backend.main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level="info"
    )
