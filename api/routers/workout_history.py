"""
Workout history router.

This router provides endpoints for:
- Comparing a workout with the previous instance of its scheduled day
- Listing the workouts of a week
- Recent workouts with a dashboard summary

Every endpoint answers 200 with a {success, error | data} envelope; data keys
are camelCase.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query

from api.deps import get_current_user, get_settings, get_workout_history_service
from backend.core.workout_history_service import WorkoutHistoryService
from backend.settings import Settings

router = APIRouter(
    prefix="/workout-history",
    tags=["Workout History"],
)


# =============================================================================
# Endpoints
# =============================================================================


@router.get("/week")
def get_week_history(
    week_offset: int = Query(0, le=0, description="0 for this week, -1 for last week, ..."),
    days_per_week: Optional[int] = Query(None, ge=1, le=7, description="Maximum sessions to return"),
    user_id: str = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
    service: WorkoutHistoryService = Depends(get_workout_history_service),
):
    """
    Get the workouts logged in a Sunday-to-Saturday week.
    """
    result = service.get_workout_history_for_week(
        user_id,
        week_offset=week_offset,
        days_per_week=days_per_week or settings.history_days_per_week,
    )
    return result.to_response()


@router.get("/recent")
def get_recent_workouts(
    limit: Optional[int] = Query(None, ge=1, le=20, description="Maximum workouts to return"),
    user_id: str = Depends(get_current_user),
    settings: Settings = Depends(get_settings),
    service: WorkoutHistoryService = Depends(get_workout_history_service),
):
    """
    Get the most recent workouts with total workouts, total sets and
    sets per muscle group.
    """
    result = service.get_recent_workouts(
        user_id,
        limit=limit or settings.recent_workouts_limit,
    )
    return result.to_response()


@router.get("/{workout_id}/comparison")
def get_workout_comparison(
    workout_id: str = Path(..., min_length=1, description="Session to review"),
    user_id: str = Depends(get_current_user),
    service: WorkoutHistoryService = Depends(get_workout_history_service),
):
    """
    Compare a workout with the most recent earlier session of the same
    scheduled day.

    Returns:
        - currentWorkout: snapshot of the requested session
        - previousWorkout / progressData: null on the first instance of a day
    """
    return service.get_workout_comparison(workout_id, user_id).to_response()
