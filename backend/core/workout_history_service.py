"""
Workout History Service.

This module provides business logic for reviewing logged workouts:
- Predecessor resolution (previous instance of the same scheduled day)
- Workout comparison with progress deltas
- Weekly workout history
- Recent workouts with a dashboard summary

Read operations return a tagged ServiceResult instead of raising, so the
endpoints always produce a well-formed {success, error | data} response.
"""
from collections import Counter
from datetime import date, timedelta
from typing import List, Optional
import logging

from pydantic import ValidationError

from application.exceptions import (
    WorkoutAccessDeniedError,
    WorkoutHistoryError,
    WorkoutNotFoundError,
)
from application.ports.workout_history_repository import WorkoutHistoryRepository
from backend.core.progress_calculator import compute_progress
from backend.core.snapshot_loader import WorkoutSnapshotLoader
from domain.models import (
    PredecessorResult,
    RecentWorkouts,
    RecentWorkoutsSummary,
    ServiceResult,
    WeeklyHistory,
    WeekRange,
    WorkoutComparison,
    WorkoutSnapshot,
)

logger = logging.getLogger(__name__)

MALFORMED_DATA_ERROR = "Stored workout data is malformed"


def week_bounds(today: date, week_offset: int = 0) -> WeekRange:
    """
    Sunday-to-Saturday week containing `today`, shifted by `week_offset` weeks.

    Examples:
        >>> week_bounds(date(2025, 4, 30))  # a Wednesday
        WeekRange(start_date=datetime.date(2025, 4, 27), end_date=datetime.date(2025, 5, 3))
    """
    days_since_sunday = (today.weekday() + 1) % 7
    start = today - timedelta(days=days_since_sunday) + timedelta(weeks=week_offset)
    return WeekRange(start_date=start, end_date=start + timedelta(days=6))


class WorkoutHistoryService:
    """
    Service for workout history and week-over-week comparisons.
    """

    def __init__(self, history_repo: WorkoutHistoryRepository):
        """
        Initialize the workout history service.

        Args:
            history_repo: Repository for logged workout data
        """
        self._history_repo = history_repo
        self._loader = WorkoutSnapshotLoader(history_repo)

    # -------------------------------------------------------------------------
    # Predecessor resolution
    # -------------------------------------------------------------------------

    def find_predecessor(self, workout_id: str, user_id: str) -> PredecessorResult:
        """
        Find the most recent earlier session of the same scheduled day.

        Args:
            workout_id: Session being reviewed
            user_id: Authenticated caller, must own the session

        Returns:
            PredecessorResult.found(previous_id) or PredecessorResult.none()

        Raises:
            WorkoutNotFoundError: If the session does not exist
            WorkoutAccessDeniedError: If the session belongs to another user
            RepositoryError: If the backend fails
        """
        current = self._loader.load_session_ref(workout_id)
        if current.user_id != user_id:
            raise WorkoutAccessDeniedError("You do not have access to this workout")

        previous_id = self._history_repo.find_most_recent_prior_session(
            current.scheduled_day_key,
            user_id,
            before=current.created_at,
        )
        if previous_id is None or previous_id == current.id:
            return PredecessorResult.none()
        return PredecessorResult.found(previous_id)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def get_workout_comparison(
        self,
        workout_id: str,
        user_id: str,
    ) -> ServiceResult[WorkoutComparison]:
        """
        Compare a workout with the previous instance of its scheduled day.

        When there is no earlier instance, the result carries only the current
        workout ("first time doing this workout").

        Args:
            workout_id: Session being reviewed
            user_id: Authenticated caller

        Returns:
            ServiceResult wrapping a WorkoutComparison, or a failure message
        """
        try:
            predecessor = self.find_predecessor(workout_id, user_id)
            current = self._loader.load_snapshot(workout_id)

            if not predecessor.is_found:
                logger.info(f"No previous instance for workout {workout_id}")
                return ServiceResult.ok(WorkoutComparison(current_workout=current))

            previous = self._loader.load_snapshot(predecessor.workout_id)
            progress = compute_progress(current, previous)

            return ServiceResult.ok(WorkoutComparison(
                current_workout=current,
                previous_workout=previous,
                progress_data=progress,
            ))

        except WorkoutHistoryError as e:
            logger.warning(f"Workout comparison failed for {workout_id}: {e}")
            return ServiceResult.fail(str(e) or "Failed to fetch workout details")
        except ValidationError:
            logger.exception(f"Malformed workout data while comparing {workout_id}")
            return ServiceResult.fail(MALFORMED_DATA_ERROR)

    # -------------------------------------------------------------------------
    # History listings
    # -------------------------------------------------------------------------

    def get_workout_history_for_week(
        self,
        user_id: str,
        *,
        week_offset: int = 0,
        days_per_week: int = 7,
        today: Optional[date] = None,
    ) -> ServiceResult[WeeklyHistory]:
        """
        Get the workouts logged in one week.

        Args:
            user_id: Authenticated caller
            week_offset: 0 for the current week, -1 for last week, ...
            days_per_week: Maximum sessions to return for the week
            today: Reference date (defaults to today)

        Returns:
            ServiceResult wrapping WeeklyHistory; sessions that cannot be
            snapshotted (e.g. no logged sets) are skipped
        """
        week_range = week_bounds(today or date.today(), week_offset)

        try:
            sessions = self._history_repo.list_sessions_in_range(
                user_id,
                start_date=week_range.start_date,
                end_date=week_range.end_date,
                limit=days_per_week,
            )
            workouts = self._load_snapshots([s["id"] for s in sessions])
        except WorkoutHistoryError as e:
            logger.warning(f"Weekly history failed for user {user_id}: {e}")
            return ServiceResult.fail(str(e))
        except ValidationError:
            logger.exception(f"Malformed workout data in weekly history for user {user_id}")
            return ServiceResult.fail(MALFORMED_DATA_ERROR)

        return ServiceResult.ok(WeeklyHistory(workouts=workouts, week_range=week_range))

    def get_recent_workouts(
        self,
        user_id: str,
        *,
        limit: int = 3,
    ) -> ServiceResult[RecentWorkouts]:
        """
        Get the most recent workouts with a summary for the dashboard.

        Summary:
        - total_workouts: all dated sessions the user has logged
        - total_sets: sets across the returned workouts
        - muscle_group_counts: sets per muscle group across the returned workouts

        Args:
            user_id: Authenticated caller
            limit: Maximum workouts to return

        Returns:
            ServiceResult wrapping RecentWorkouts
        """
        try:
            sessions = self._history_repo.list_recent_sessions(user_id, limit=limit)
            workouts = self._load_snapshots([s["id"] for s in sessions])
            total_workouts = self._history_repo.count_sessions(user_id)
        except WorkoutHistoryError as e:
            logger.warning(f"Recent workouts failed for user {user_id}: {e}")
            return ServiceResult.fail(str(e))
        except ValidationError:
            logger.exception(f"Malformed workout data in recent workouts for user {user_id}")
            return ServiceResult.fail(MALFORMED_DATA_ERROR)

        muscle_group_counts: Counter = Counter()
        for workout in workouts:
            for exercise in workout.exercises:
                muscle_group_counts[exercise.muscle_group] += len(exercise.sets)

        return ServiceResult.ok(RecentWorkouts(
            workouts=workouts,
            summary=RecentWorkoutsSummary(
                total_workouts=total_workouts,
                total_sets=sum(w.total_sets for w in workouts),
                muscle_group_counts=dict(muscle_group_counts),
            ),
        ))

    def _load_snapshots(self, session_ids: List[str]) -> List[WorkoutSnapshot]:
        """Load snapshots in order, skipping sessions that cannot be resolved."""
        workouts: List[WorkoutSnapshot] = []
        for session_id in session_ids:
            try:
                workouts.append(self._loader.load_snapshot(session_id))
            except WorkoutNotFoundError as e:
                logger.info(f"Skipping session {session_id}: {e}")
        return workouts
