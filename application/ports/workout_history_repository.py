"""
Workout History Repository Interface (Port).

This module defines the read-side interface over the logged-workout tables:
sessions, split_days, splits, exercises and sets. It is used by the snapshot
loader and the workout history service to assemble workout snapshots and to
locate the previous instance of a scheduled day.

Implementations raise RepositoryError when the backend fails and return
None / [] when rows simply do not exist.
"""
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Protocol


class WorkoutHistoryRepository(Protocol):
    """
    Abstract interface for reading logged workouts.

    Rows are returned as plain dicts keyed by column name.
    """

    def get_session(self, session_id: str) -> Optional[Dict[str, Any]]:
        """
        Get a single session row.

        Args:
            session_id: Session UUID

        Returns:
            Dict with id, user_id, split_day, date, created_at, or None
        """
        ...

    def find_most_recent_prior_session(
        self,
        split_day_id: str,
        user_id: str,
        before: datetime,
    ) -> Optional[str]:
        """
        Find the latest session of a scheduled day created strictly before a moment.

        Ordered by created_at descending, then id descending; the first row wins.

        Args:
            split_day_id: Scheduled day (split_days.id) the session targeted
            user_id: Owner of the sessions
            before: Exclusive upper bound on created_at

        Returns:
            Session ID, or None if there is no earlier session
        """
        ...

    def get_split_day(self, split_day_id: str) -> Optional[Dict[str, Any]]:
        """
        Get a split day row.

        Returns:
            Dict with id, name, split_id, day_of_week, is_rest_day, or None
        """
        ...

    def get_split(self, split_id: str) -> Optional[Dict[str, Any]]:
        """
        Get a split row.

        Returns:
            Dict with id, name, user_id, or None
        """
        ...

    def list_split_day_exercises(self, split_day_id: str) -> List[Dict[str, Any]]:
        """
        List the exercises configured for a split day.

        Returns:
            Exercise dicts (id, name, muscle_groups, exercise_order),
            ordered by exercise_order ascending
        """
        ...

    def list_session_sets(self, session_id: str) -> List[Dict[str, Any]]:
        """
        List every set logged in a session.

        Returns:
            Set dicts (exercise_id, set_number, reps, weight),
            ordered by set_number ascending
        """
        ...

    def list_sessions_in_range(
        self,
        user_id: str,
        *,
        start_date: date,
        end_date: date,
        limit: int = 7,
    ) -> List[Dict[str, Any]]:
        """
        List a user's sessions whose date falls within [start_date, end_date].

        Returns:
            Session dicts ordered by date ascending, at most `limit`
        """
        ...

    def list_recent_sessions(
        self,
        user_id: str,
        *,
        limit: int = 3,
    ) -> List[Dict[str, Any]]:
        """
        List a user's most recent dated sessions.

        Baseline sessions created while authoring a split have no date and
        are not returned.

        Returns:
            Session dicts ordered by created_at descending, at most `limit`
        """
        ...

    def count_sessions(self, user_id: str) -> int:
        """Count a user's dated sessions."""
        ...
