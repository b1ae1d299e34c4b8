"""
Supabase Workout Log Repository Implementation.

This module implements the WorkoutLogRepository protocol using Supabase.
Handles the sessions and sets tables during workout logging.
"""
from datetime import date
from typing import Any, Dict, List, Optional
import logging

from supabase import Client

from application.exceptions import RepositoryError
from infrastructure.db.query import execute, first_row, rows

logger = logging.getLogger(__name__)


class SupabaseWorkoutLogRepository:
    """
    Supabase implementation of WorkoutLogRepository.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected)
        """
        self._client = client

    def create_session(
        self,
        user_id: str,
        split_day_id: str,
        session_date: Optional[date],
    ) -> Dict[str, Any]:
        session = first_row(
            self._client.table("sessions").insert({
                "user_id": user_id,
                "split_day": split_day_id,
                "date": session_date.isoformat() if session_date else None,
            }),
            "create session",
        )
        if not session:
            raise RepositoryError("No session returned after insert")
        return session

    def get_session(self, session_id: str) -> Optional[Dict[str, Any]]:
        return first_row(
            self._client.table("sessions")
            .select("id, user_id, split_day, date, created_at")
            .eq("id", session_id)
            .limit(1),
            "fetch session",
        )

    def get_most_recent_sets(self, exercise_id: str) -> List[Dict[str, Any]]:
        logged = rows(
            self._client.table("sets")
            .select("set_number, reps, weight, session_id, sessions:session_id(id, created_at)")
            .eq("exercise_id", exercise_id),
            "fetch sets for exercise",
        )
        if not logged:
            return []

        # PostgREST renders every created_at in the same ISO-8601 form, so the
        # string order is the time order
        latest = max(logged, key=lambda s: (s.get("sessions") or {}).get("created_at") or "")
        latest_session_id = latest["session_id"]
        logger.debug(f"Most recent session for exercise {exercise_id}: {latest_session_id}")

        recent = [
            {"set_number": s["set_number"], "reps": s.get("reps"), "weight": s.get("weight")}
            for s in logged
            if s["session_id"] == latest_session_id
        ]
        return sorted(recent, key=lambda s: s["set_number"])

    def insert_sets(self, rows_to_insert: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        if not rows_to_insert:
            return []
        return rows(self._client.table("sets").insert(rows_to_insert), "insert sets")

    def replace_exercise_sets(
        self,
        session_id: str,
        exercise_id: str,
        rows_to_insert: List[Dict[str, Any]],
    ) -> List[Dict[str, Any]]:
        execute(
            self._client.table("sets")
            .delete()
            .eq("session_id", session_id)
            .eq("exercise_id", exercise_id),
            "delete existing sets",
        )
        return self.insert_sets(rows_to_insert)
