"""
Workout Log Repository Interface (Port).

This module defines the write-side interface used while a workout is being
logged: creating sessions and recording the sets performed for each exercise.
"""
from datetime import date
from typing import Any, Dict, List, Optional, Protocol


class WorkoutLogRepository(Protocol):
    """
    Abstract interface for session and set persistence.
    """

    def create_session(
        self,
        user_id: str,
        split_day_id: str,
        session_date: Optional[date],
    ) -> Dict[str, Any]:
        """
        Insert a session for a scheduled day.

        Args:
            user_id: Owner of the session
            split_day_id: Scheduled day the session is an instance of
            session_date: Calendar date, or None for a baseline session

        Returns:
            The created session row (id, user_id, split_day, date, created_at)
        """
        ...

    def get_session(self, session_id: str) -> Optional[Dict[str, Any]]:
        """Get a session row, or None."""
        ...

    def get_most_recent_sets(self, exercise_id: str) -> List[Dict[str, Any]]:
        """
        Get the sets of an exercise from the most recently created session
        that logged it.

        Returns:
            Set dicts (set_number, reps, weight) ordered by set_number,
            or [] if the exercise has never been logged
        """
        ...

    def insert_sets(self, rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """
        Insert set rows.

        Args:
            rows: Dicts with session_id, exercise_id, set_number, reps, weight

        Returns:
            The inserted rows
        """
        ...

    def replace_exercise_sets(
        self,
        session_id: str,
        exercise_id: str,
        rows: List[Dict[str, Any]],
    ) -> List[Dict[str, Any]]:
        """
        Replace every set of an exercise within a session.

        Existing rows for (session_id, exercise_id) are deleted before the new
        rows are inserted; the last write wins.

        Returns:
            The inserted rows
        """
        ...
