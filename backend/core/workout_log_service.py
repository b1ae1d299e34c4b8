"""
Workout Log Service.

Server-side steps of the workout logging flow:
- Start a session for a scheduled day
- Prefill each exercise with the sets from its most recent session
- Record (or re-record) the sets of an exercise
- Adjust an exercise's configuration mid-session

Set writes are last-write-wins: re-logging an exercise replaces its sets.
"""
from datetime import date
from typing import Any, Dict, List, Optional
import logging

from application.exceptions import (
    SplitValidationError,
    WorkoutAccessDeniedError,
    WorkoutNotFoundError,
)
from application.ports.split_repository import SplitRepository
from application.ports.workout_log_repository import WorkoutLogRepository
from domain.models import ExerciseUpdate, LoggedSet, PrefilledExercise

logger = logging.getLogger(__name__)


class WorkoutLogService:
    """
    Service for logging workout sessions.
    """

    def __init__(
        self,
        log_repo: WorkoutLogRepository,
        split_repo: SplitRepository,
    ):
        """
        Initialize the workout log service.

        Args:
            log_repo: Repository for sessions and sets
            split_repo: Repository for split days and exercises
        """
        self._log_repo = log_repo
        self._split_repo = split_repo

    def create_workout_session(
        self,
        user_id: str,
        split_day_id: str,
        *,
        today: Optional[date] = None,
    ) -> Dict[str, Any]:
        """
        Start a workout session for a scheduled day.

        Raises:
            WorkoutNotFoundError: If the split day does not exist
            SplitValidationError: If the split day is a rest day
        """
        split_day = self._split_repo.get_split_day(split_day_id)
        if not split_day:
            raise WorkoutNotFoundError(f"Split day not found: {split_day_id}")
        if split_day.get("is_rest_day"):
            raise SplitValidationError("Cannot start a workout on a rest day")

        session = self._log_repo.create_session(user_id, split_day_id, today or date.today())
        logger.info(f"Started session {session['id']} for split day {split_day_id}")
        return session

    def get_most_recent_sets(self, exercise_id: str) -> List[LoggedSet]:
        """Sets of the exercise from the most recent session that logged it."""
        rows = self._log_repo.get_most_recent_sets(exercise_id)
        return [
            LoggedSet(
                set_number=row["set_number"],
                reps=row.get("reps") or 0,
                weight=row.get("weight") or 0,
            )
            for row in rows
        ]

    def load_workout_with_prefilled_sets(self, split_day_id: str) -> List[PrefilledExercise]:
        """
        Load a split day's exercises with the sets a new session starts from.

        An exercise that was never logged gets `default_sets` empty sets.
        """
        exercises = self._split_repo.list_exercises(split_day_id)
        prefilled: List[PrefilledExercise] = []

        for exercise in exercises:
            default_sets = exercise.get("default_sets") or 1
            sets = self.get_most_recent_sets(exercise["id"])
            if not sets:
                logger.debug(
                    f"No previous sets for exercise {exercise['id']}, "
                    f"using {default_sets} empty sets"
                )
                sets = [LoggedSet(set_number=n) for n in range(1, default_sets + 1)]

            prefilled.append(PrefilledExercise(
                id=exercise["id"],
                name=exercise.get("name") or "",
                default_sets=default_sets,
                rest_time_sec=exercise.get("rest_time_sec") or 0,
                note=exercise.get("note"),
                exercise_order=exercise.get("exercise_order") or 0,
                sets=sets,
            ))

        return prefilled

    def log_exercise_sets(
        self,
        user_id: str,
        session_id: str,
        exercise_id: str,
        sets: List[LoggedSet],
    ) -> List[Dict[str, Any]]:
        """
        Record the sets of an exercise for a session, replacing earlier ones.

        Raises:
            WorkoutNotFoundError: If the session does not exist
            WorkoutAccessDeniedError: If the session belongs to another user
            SplitValidationError: If no sets are given or set numbers repeat
        """
        self._get_owned_session(user_id, session_id)

        if not sets:
            raise SplitValidationError("At least one set is required")
        numbers = [s.set_number for s in sets]
        if len(numbers) != len(set(numbers)):
            raise SplitValidationError("Set numbers must be unique")

        rows = [
            {
                "session_id": session_id,
                "exercise_id": exercise_id,
                "set_number": s.set_number,
                "reps": s.reps,
                "weight": s.weight,
            }
            for s in sorted(sets, key=lambda s: s.set_number)
        ]
        inserted = self._log_repo.replace_exercise_sets(session_id, exercise_id, rows)
        logger.info(f"Logged {len(inserted)} sets for exercise {exercise_id} in session {session_id}")
        return inserted

    def update_exercise_details(
        self,
        exercise_id: str,
        update: ExerciseUpdate,
    ) -> Dict[str, Any]:
        """
        Update an exercise's configuration.

        Raises:
            SplitValidationError: If no fields are provided
            WorkoutNotFoundError: If the exercise does not exist
        """
        fields = update.to_row()
        if not fields:
            raise SplitValidationError("No fields to update")

        updated = self._split_repo.update_exercise(exercise_id, fields)
        if not updated:
            raise WorkoutNotFoundError(f"Exercise not found: {exercise_id}")
        return updated

    def modify_workout_session(
        self,
        user_id: str,
        session_id: str,
        exercise_id: str,
        update: ExerciseUpdate,
        sets: Optional[List[LoggedSet]] = None,
    ) -> Dict[str, Any]:
        """
        Update an exercise's details and, when given, re-log its sets.

        Returns:
            Dict with the updated exercise and the logged sets (if any)
        """
        self._get_owned_session(user_id, session_id)

        exercise = self.update_exercise_details(exercise_id, update)
        logged: List[Dict[str, Any]] = []
        if sets:
            logged = self.log_exercise_sets(user_id, session_id, exercise_id, sets)

        return {
            "exercise": exercise,
            "sets": logged,
            "message": "Workout session modified successfully",
        }

    def _get_owned_session(self, user_id: str, session_id: str) -> Dict[str, Any]:
        session = self._log_repo.get_session(session_id)
        if not session:
            raise WorkoutNotFoundError(f"Workout not found: {session_id}")
        if session.get("user_id") != user_id:
            raise WorkoutAccessDeniedError("You do not have access to this workout")
        return session
