"""
Splits router for training split authoring.

Endpoints:
- POST /splits: Create a split with its days and exercises
- GET /splits: List the caller's splits
- GET /splits/{split_id}/days: Days of a split
- GET /splits/days/{split_day_id}/exercises: Exercises of a split day
"""
import logging

from fastapi import APIRouter, Depends, status

from api.deps import get_current_user, get_split_service
from api.errors import to_http_exception
from application.exceptions import WorkoutHistoryError
from backend.core.split_service import SplitService
from domain.models import SplitDraft

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/splits",
    tags=["Splits"],
)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_split(
    draft: SplitDraft,
    user_id: str = Depends(get_current_user),
    service: SplitService = Depends(get_split_service),
):
    """
    Create a split.

    Days are given in weekday order starting on Sunday. Exercises may carry
    starting sets (setsData); those are stored as a baseline session so the
    first workout of each day is prefilled and compared against them.
    """
    try:
        split = service.create_split(user_id, draft)
    except WorkoutHistoryError as e:
        raise to_http_exception(e)
    return {"success": True, "split": split}


@router.get("")
def list_splits(
    user_id: str = Depends(get_current_user),
    service: SplitService = Depends(get_split_service),
):
    try:
        splits = service.list_splits(user_id)
    except WorkoutHistoryError as e:
        raise to_http_exception(e)
    return {"success": True, "splits": splits, "count": len(splits)}


@router.get("/{split_id}/days")
def get_split_days(
    split_id: str,
    user_id: str = Depends(get_current_user),
    service: SplitService = Depends(get_split_service),
):
    try:
        days = service.get_split_days(split_id)
    except WorkoutHistoryError as e:
        raise to_http_exception(e)
    return {"success": True, "days": days}


@router.get("/days/{split_day_id}/exercises")
def get_split_day_exercises(
    split_day_id: str,
    user_id: str = Depends(get_current_user),
    service: SplitService = Depends(get_split_service),
):
    try:
        exercises = service.get_split_day_exercises(split_day_id)
    except WorkoutHistoryError as e:
        raise to_http_exception(e)
    return {"success": True, "exercises": exercises}
