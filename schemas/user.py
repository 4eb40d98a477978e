"""User response schemas."""

from typing import List
from pydantic import BaseModel, ConfigDict, Field

from schemas.exercise import LogEntry


class UserSummary(BaseModel):
    """User id and name, returned when creating and listing users."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="Unique user identifier")
    username: str = Field(..., description="User name")


class UserLog(BaseModel):
    """A user's exercise log, after date and limit filtering."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="Unique user identifier")
    username: str = Field(..., description="User name")
    count: int = Field(..., description="Number of entries in log")
    log: List[LogEntry] = Field(default_factory=list, description="Exercises, most recent first")
