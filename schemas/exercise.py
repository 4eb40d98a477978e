"""Exercise response schemas."""

from pydantic import BaseModel, ConfigDict, Field


class LogEntry(BaseModel):
    """One entry of a user's exercise log."""
    description: str = Field(..., description="What was done")
    duration: int = Field(..., description="Duration in minutes")
    date: str = Field(..., description="Exercise date, e.g. 'Mon Jan 01 2024'")


class ExerciseCreated(BaseModel):
    """A newly logged exercise together with its owner."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="Owner's user identifier")
    username: str = Field(..., description="Owner's user name")
    description: str = Field(..., description="What was done")
    duration: int = Field(..., description="Duration in minutes")
    date: str = Field(..., description="Exercise date, e.g. 'Mon Jan 01 2024'")


class ErrorResponse(BaseModel):
    """Error payload for every failed request."""
    error: str = Field(..., description="Error message")
