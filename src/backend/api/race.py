from fastapi import APIRouter, Query, Depends
from typing import Optional
import logging

from backend.dependencies import get_race_service
from backend.models.api_models import RaceResponse
from backend.services.race_service import RaceService

router = APIRouter(prefix="/wiki-race", tags=["race"])
logger = logging.getLogger(__name__)

@router.get("/goLang", response_model=RaceResponse)
async def wiki_race(
    start: Optional[str] = Query(None, description="Start article title, spaces allowed"),
    destination: Optional[str] = Query(None, description="Destination article title, spaces allowed"),
    service: RaceService = Depends(get_race_service),
) -> RaceResponse:
    """
    Find a chain of links between two Wikipedia articles.

    Runs a bidirectional BFS from both articles at once. Missing parameters,
    unknown articles and exhausted searches are all reported in the response
    body with completed=false, never as an HTTP error.
    """
    response = await service.race(start, destination)
    if response.completed:
        logger.info(f"Race completed: {start} -> {destination} in {response.elapsed_time_sec}s")
    return response
