"""
Split Service for training split authoring.

Creates a weekly split from a draft: the split row, one split day per
weekday slot, the exercises of each training day, and, when starting
weights were entered, a baseline session holding them so the first real
workout has values to prefill and compare against.
"""
from typing import Any, Dict, List
import logging

from application.exceptions import SplitValidationError
from application.ports.split_repository import SplitRepository
from application.ports.workout_log_repository import WorkoutLogRepository
from domain.models import DayDraft, SplitDraft

logger = logging.getLogger(__name__)

MAX_DAYS_PER_SPLIT = 7


def validate_split_draft(draft: SplitDraft) -> None:
    """
    Check the structural rules of a split draft.

    Raises:
        SplitValidationError: Describing the first rule that fails
    """
    if not draft.split_name.strip():
        raise SplitValidationError("Split name is required")

    if not 1 <= len(draft.days) <= MAX_DAYS_PER_SPLIT:
        raise SplitValidationError(
            f"A split must have between 1 and {MAX_DAYS_PER_SPLIT} days"
        )

    for index, day in enumerate(draft.days):
        if day.is_rest_day:
            continue
        if not (day.workout_name or "").strip():
            raise SplitValidationError(f"Day {index}: workout name is required for a training day")
        if not day.exercises:
            raise SplitValidationError(f"Day {index}: a training day needs at least one exercise")
        for exercise in day.exercises:
            if not exercise.name.strip():
                raise SplitValidationError(f"Day {index}: exercise name is required")
            if exercise.sets_data is not None and len(exercise.sets_data) != exercise.sets:
                raise SplitValidationError(
                    f"Day {index}: '{exercise.name}' has {exercise.sets} sets "
                    f"but {len(exercise.sets_data)} starting values"
                )


class SplitService:
    """
    Service for creating and browsing training splits.
    """

    def __init__(
        self,
        split_repo: SplitRepository,
        log_repo: WorkoutLogRepository,
    ):
        """
        Initialize the split service.

        Args:
            split_repo: Repository for splits, split days and exercises
            log_repo: Repository for sessions and sets (baseline values)
        """
        self._split_repo = split_repo
        self._log_repo = log_repo

    def create_split(self, user_id: str, draft: SplitDraft) -> Dict[str, Any]:
        """
        Create a split with its days and exercises.

        Args:
            user_id: Owner of the split
            draft: Split to create; day index is the day of week (0 = Sunday)

        Returns:
            The created split row with a "days" list of created split days

        Raises:
            SplitValidationError: If the draft breaks a structural rule
            RepositoryError: If the backend fails part-way
        """
        validate_split_draft(draft)

        split = self._split_repo.create_split(user_id, draft.split_name.strip())
        days: List[Dict[str, Any]] = []

        for day_of_week, day in enumerate(draft.days):
            split_day = self._split_repo.create_split_day(
                split["id"],
                day_of_week=day_of_week,
                name=None if day.is_rest_day else day.workout_name.strip(),
                is_rest_day=day.is_rest_day,
            )
            if not day.is_rest_day:
                split_day["exercises"] = self._create_training_day(user_id, split_day["id"], day)
            days.append(split_day)

        logger.info(f"Created split {split['id']} with {len(days)} days for user {user_id}")
        return {**split, "days": days}

    def _create_training_day(
        self,
        user_id: str,
        split_day_id: str,
        day: DayDraft,
    ) -> List[Dict[str, Any]]:
        exercises: List[Dict[str, Any]] = []
        baseline_rows: List[Dict[str, Any]] = []

        for order, draft in enumerate(day.exercises):
            exercise = self._split_repo.create_exercise(
                split_day_id,
                name=draft.name.strip(),
                default_sets=draft.sets,
                rest_time_sec=draft.rest_time_sec,
                exercise_order=order,
                note=draft.note or None,
            )
            exercises.append(exercise)

            for set_number, baseline in enumerate(draft.sets_data or [], start=1):
                baseline_rows.append({
                    "exercise_id": exercise["id"],
                    "set_number": set_number,
                    "reps": baseline.reps,
                    "weight": baseline.weight,
                })

        if baseline_rows:
            # Undated session: excluded from history listings, but still the
            # earliest instance of this day for prefill and comparison
            session = self._log_repo.create_session(user_id, split_day_id, None)
            self._log_repo.insert_sets([
                {**row, "session_id": session["id"]} for row in baseline_rows
            ])

        return exercises

    def list_splits(self, user_id: str) -> List[Dict[str, Any]]:
        """List a user's splits, newest first."""
        return self._split_repo.list_splits(user_id)

    def get_split_days(self, split_id: str) -> List[Dict[str, Any]]:
        """List a split's days in weekday order."""
        return self._split_repo.list_split_days(split_id)

    def get_split_day_exercises(self, split_day_id: str) -> List[Dict[str, Any]]:
        """List a split day's exercises in configured order."""
        return self._split_repo.list_exercises(split_day_id)
