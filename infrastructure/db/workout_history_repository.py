"""
Supabase Workout History Repository Implementation.

This module implements the WorkoutHistoryRepository protocol using Supabase.
Reads the sessions, split_days, splits, exercises and sets tables; each method
issues a single PostgREST query.
"""
from datetime import date, datetime
from typing import Any, Dict, List, Optional
import logging

from supabase import Client

from infrastructure.db.query import execute, first_row, rows

logger = logging.getLogger(__name__)

SESSION_COLUMNS = "id, user_id, split_day, date, created_at"


class SupabaseWorkoutHistoryRepository:
    """
    Supabase implementation of WorkoutHistoryRepository.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected)
        """
        self._client = client

    def get_session(self, session_id: str) -> Optional[Dict[str, Any]]:
        return first_row(
            self._client.table("sessions")
            .select(SESSION_COLUMNS)
            .eq("id", session_id)
            .limit(1),
            "fetch session",
        )

    def find_most_recent_prior_session(
        self,
        split_day_id: str,
        user_id: str,
        before: datetime,
    ) -> Optional[str]:
        row = first_row(
            self._client.table("sessions")
            .select("id, created_at")
            .eq("user_id", user_id)
            .eq("split_day", split_day_id)
            .lt("created_at", before.isoformat())
            .order("created_at", desc=True)
            .order("id", desc=True)
            .limit(1),
            "find previous session",
        )
        return row["id"] if row else None

    def get_split_day(self, split_day_id: str) -> Optional[Dict[str, Any]]:
        return first_row(
            self._client.table("split_days")
            .select("id, name, split_id, day_of_week, is_rest_day")
            .eq("id", split_day_id)
            .limit(1),
            "fetch split day",
        )

    def get_split(self, split_id: str) -> Optional[Dict[str, Any]]:
        return first_row(
            self._client.table("splits")
            .select("id, name, user_id")
            .eq("id", split_id)
            .limit(1),
            "fetch split",
        )

    def list_split_day_exercises(self, split_day_id: str) -> List[Dict[str, Any]]:
        return rows(
            self._client.table("exercises")
            .select("id, name, muscle_groups, exercise_order")
            .eq("split_day_id", split_day_id)
            .order("exercise_order"),
            "fetch split day exercises",
        )

    def list_session_sets(self, session_id: str) -> List[Dict[str, Any]]:
        return rows(
            self._client.table("sets")
            .select("exercise_id, set_number, reps, weight")
            .eq("session_id", session_id)
            .order("set_number"),
            "fetch session sets",
        )

    def list_sessions_in_range(
        self,
        user_id: str,
        *,
        start_date: date,
        end_date: date,
        limit: int = 7,
    ) -> List[Dict[str, Any]]:
        return rows(
            self._client.table("sessions")
            .select(SESSION_COLUMNS)
            .eq("user_id", user_id)
            .gte("date", start_date.isoformat())
            .lte("date", end_date.isoformat())
            .order("date")
            .order("created_at")
            .limit(limit),
            "fetch sessions for week",
        )

    def list_recent_sessions(
        self,
        user_id: str,
        *,
        limit: int = 3,
    ) -> List[Dict[str, Any]]:
        return rows(
            self._client.table("sessions")
            .select(SESSION_COLUMNS)
            .eq("user_id", user_id)
            .not_.is_("date", "null")
            .order("created_at", desc=True)
            .limit(limit),
            "fetch recent sessions",
        )

    def count_sessions(self, user_id: str) -> int:
        result = execute(
            self._client.table("sessions")
            .select("id", count="exact")
            .eq("user_id", user_id)
            .not_.is_("date", "null"),
            "count sessions",
        )
        return result.count or 0
