from fastapi import Request
from backend.services.race_service import RaceService

async def get_race_service(request: Request) -> RaceService:
    """Dependency provider to get the shared RaceService instance."""
    return request.app.state.race_service
