"""REST API routes for users and their exercise logs."""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Request
from models.database import ExerciseStore, get_store
from config.settings import settings
from schemas import ErrorResponse, ExerciseCreated, UserLog, UserSummary
from services.exceptions import UserNotFoundError
from services.log_filter import filter_log_by_dates, filter_log_by_limit
from services.transform import (
    build_exercise_obj,
    build_exercise_obj_response,
    build_id_less_log,
    build_user_summary,
    build_version_less_user_obj,
)
from services.validation import (
    validate_exercise_fields,
    validate_req_query_props,
    validate_username,
)
from utils.helpers import read_request_fields
from utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.post("", response_model=UserSummary, responses=ERROR_RESPONSES)
async def create_user(request: Request, store: ExerciseStore = Depends(get_store)):
    """Create a new user from a form or JSON ``username`` field."""
    fields = await read_request_fields(request)
    username = validate_username(fields.get("username"))
    user = await store.create_user(username)
    return build_user_summary(user)


@router.get("", response_model=List[UserSummary], responses=ERROR_RESPONSES)
async def list_users(store: ExerciseStore = Depends(get_store)):
    """List all users."""
    users = await store.list_users()
    return [build_user_summary(user) for user in users]


@router.post("/{user_id}/exercises", response_model=ExerciseCreated, responses=ERROR_RESPONSES)
async def add_exercise(user_id: str, request: Request, store: ExerciseStore = Depends(get_store)):
    """
    Add an exercise to the front of a user's log.

    The date is optional and defaults to today.
    """
    user = await store.find_user(user_id)
    if user is None:
        logger.info(f"Exercise for unknown user {user_id} rejected")
        raise UserNotFoundError(user_id)

    fields = await read_request_fields(request)
    validated = validate_exercise_fields(
        fields.get("description"),
        fields.get("duration"),
        fields.get("date"),
        max_length=settings.description_max_length,
    )
    exercise = build_exercise_obj(validated["description"], validated["duration"], validated["date"])

    updated = await store.append_exercise(user_id, exercise)
    if updated is None:
        raise UserNotFoundError(user_id)

    logger.info(f"Exercise log {exercise} added to user {updated['username']} (ID: {user_id})")
    return build_exercise_obj_response(updated["_id"], updated["username"], exercise)


@router.get("/{user_id}/logs", response_model=UserLog, responses=ERROR_RESPONSES)
async def get_user_logs(
    user_id: str,
    request: Request,
    from_: Optional[str] = Query(None, alias="from", description="Earliest date, YYYY-MM-DD"),
    to: Optional[str] = Query(None, description="Latest date, YYYY-MM-DD"),
    limit: Optional[str] = Query(None, description="Maximum number of entries"),
    store: ExerciseStore = Depends(get_store),
):
    """Get a user's exercise log, optionally narrowed by date range and limit."""
    user = await store.find_user(user_id)
    if user is None:
        logger.info(f"Log request for unknown user {user_id}")
        raise UserNotFoundError(user_id)

    log = user.get("log", [])
    if request.query_params:
        query = validate_req_query_props(from_, to, limit)
        log = filter_log_by_dates(log, query.from_, query.to)
        log = filter_log_by_limit(log, query.limit)

    return build_version_less_user_obj(user, build_id_less_log(log))
