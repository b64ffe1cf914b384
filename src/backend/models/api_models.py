from pydantic import BaseModel, ConfigDict, Field

# API Response Models
class RaceResponse(BaseModel):
    """Result of a race request. Every outcome, including errors, uses this shape."""
    model_config = ConfigDict(populate_by_name=True)

    completed: bool = Field(False, description="Whether a path was found")
    start: str = Field("", description="Start article title as given")
    destination: str = Field("", description="Destination article title as given")
    path: str = Field("", description="Rendered path, the no-path sentinel, or empty on error")
    elapsed_time_sec: str = Field("", alias="elapsedTimeSec", description="Wall time in decimal seconds")
    message: str = Field("", description="Empty on success, otherwise a human-readable diagnostic")

    @classmethod
    def error(cls, message: str) -> "RaceResponse":
        """Response for a request that never reached the search."""
        return cls(completed=False, message=message)
