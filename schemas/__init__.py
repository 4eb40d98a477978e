"""Response schemas."""

from schemas.exercise import ErrorResponse, ExerciseCreated, LogEntry
from schemas.user import UserLog, UserSummary

__all__ = [
    "ErrorResponse",
    "ExerciseCreated",
    "LogEntry",
    "UserLog",
    "UserSummary",
]
