"""
Workouts router for the logging flow.

This router provides endpoints for:
- Starting a session for a split day
- Prefilling a split day's exercises with their most recent sets
- Recording the sets of an exercise (replaces earlier sets)
- Adjusting an exercise's configuration, alone or mid-session
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from api.deps import get_current_user, get_workout_log_service
from api.errors import to_http_exception
from application.exceptions import WorkoutHistoryError
from backend.core.workout_log_service import WorkoutLogService
from domain.models import ExerciseUpdate, LoggedSet

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/workouts",
    tags=["Workouts"],
)


# =============================================================================
# Request Models
# =============================================================================


class CreateSessionRequest(BaseModel):
    """Request to start a session."""
    split_day_id: str = Field(..., min_length=1)


class LogSetsRequest(BaseModel):
    """Sets to record for one exercise in one session."""
    sets: List[LoggedSet] = Field(..., min_length=1)


class ModifySessionExerciseRequest(BaseModel):
    """Exercise changes made during a session, with optional re-logged sets."""
    exercise: ExerciseUpdate
    sets: Optional[List[LoggedSet]] = None


# =============================================================================
# Endpoints
# =============================================================================


@router.post("/sessions", status_code=status.HTTP_201_CREATED)
def create_session(
    request: CreateSessionRequest,
    user_id: str = Depends(get_current_user),
    service: WorkoutLogService = Depends(get_workout_log_service),
):
    """Start a session dated today for a training day."""
    try:
        session = service.create_workout_session(user_id, request.split_day_id)
    except WorkoutHistoryError as e:
        raise to_http_exception(e)
    return {"success": True, "session": session}


@router.get("/split-days/{split_day_id}/prefilled")
def get_prefilled_workout(
    split_day_id: str,
    user_id: str = Depends(get_current_user),
    service: WorkoutLogService = Depends(get_workout_log_service),
):
    """
    Get a split day's exercises, each with the sets to start from: the sets
    of its most recent session, or empty sets when never logged.
    """
    try:
        exercises = service.load_workout_with_prefilled_sets(split_day_id)
    except WorkoutHistoryError as e:
        raise to_http_exception(e)
    return {
        "success": True,
        "exercises": [e.model_dump(mode="json", by_alias=True) for e in exercises],
    }


@router.get("/exercises/{exercise_id}/recent-sets")
def get_recent_sets(
    exercise_id: str,
    user_id: str = Depends(get_current_user),
    service: WorkoutLogService = Depends(get_workout_log_service),
):
    try:
        sets = service.get_most_recent_sets(exercise_id)
    except WorkoutHistoryError as e:
        raise to_http_exception(e)
    return {
        "success": True,
        "sets": [s.model_dump(mode="json", by_alias=True) for s in sets],
    }


@router.put("/sessions/{session_id}/exercises/{exercise_id}/sets")
def log_exercise_sets(
    session_id: str,
    exercise_id: str,
    request: LogSetsRequest,
    user_id: str = Depends(get_current_user),
    service: WorkoutLogService = Depends(get_workout_log_service),
):
    """Record the sets of an exercise; earlier sets for the pair are replaced."""
    try:
        logged = service.log_exercise_sets(user_id, session_id, exercise_id, request.sets)
    except WorkoutHistoryError as e:
        raise to_http_exception(e)
    return {"success": True, "sets": logged}


@router.patch("/exercises/{exercise_id}")
def update_exercise(
    exercise_id: str,
    update: ExerciseUpdate,
    user_id: str = Depends(get_current_user),
    service: WorkoutLogService = Depends(get_workout_log_service),
):
    try:
        exercise = service.update_exercise_details(exercise_id, update)
    except WorkoutHistoryError as e:
        raise to_http_exception(e)
    return {"success": True, "exercise": exercise}


@router.patch("/sessions/{session_id}/exercises/{exercise_id}")
def modify_session_exercise(
    session_id: str,
    exercise_id: str,
    request: ModifySessionExerciseRequest,
    user_id: str = Depends(get_current_user),
    service: WorkoutLogService = Depends(get_workout_log_service),
):
    """Update an exercise during a session and optionally re-log its sets."""
    try:
        result = service.modify_workout_session(
            user_id,
            session_id,
            exercise_id,
            request.exercise,
            sets=request.sets,
        )
    except WorkoutHistoryError as e:
        raise to_http_exception(e)
    return {"success": True, **result}
