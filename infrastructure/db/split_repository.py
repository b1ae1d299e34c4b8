"""
Supabase Split Repository Implementation.

This module implements the SplitRepository protocol using Supabase.
Handles the splits, split_days and exercises tables.
"""
from typing import Any, Dict, List, Optional
import logging

from supabase import Client

from application.exceptions import RepositoryError
from infrastructure.db.query import first_row, rows

logger = logging.getLogger(__name__)


class SupabaseSplitRepository:
    """
    Supabase implementation of SplitRepository.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected)
        """
        self._client = client

    def _insert(self, table: str, row: Dict[str, Any]) -> Dict[str, Any]:
        created = first_row(self._client.table(table).insert(row), f"create {table} row")
        if not created:
            raise RepositoryError(f"No row returned after insert into {table}")
        return created

    def create_split(self, user_id: str, name: str) -> Dict[str, Any]:
        return self._insert("splits", {"user_id": user_id, "name": name})

    def create_split_day(
        self,
        split_id: str,
        *,
        day_of_week: int,
        name: Optional[str],
        is_rest_day: bool,
    ) -> Dict[str, Any]:
        return self._insert("split_days", {
            "split_id": split_id,
            "day_of_week": day_of_week,
            "name": name,
            "is_rest_day": is_rest_day,
        })

    def create_exercise(
        self,
        split_day_id: str,
        *,
        name: str,
        default_sets: int,
        rest_time_sec: int,
        exercise_order: int,
        note: Optional[str] = None,
    ) -> Dict[str, Any]:
        return self._insert("exercises", {
            "split_day_id": split_day_id,
            "name": name,
            "default_sets": default_sets,
            "rest_time_sec": rest_time_sec,
            "exercise_order": exercise_order,
            "note": note,
        })

    def list_splits(self, user_id: str) -> List[Dict[str, Any]]:
        return rows(
            self._client.table("splits")
            .select("*")
            .eq("user_id", user_id)
            .order("created_at", desc=True),
            "fetch splits",
        )

    def get_split_day(self, split_day_id: str) -> Optional[Dict[str, Any]]:
        return first_row(
            self._client.table("split_days")
            .select("*")
            .eq("id", split_day_id)
            .limit(1),
            "fetch split day",
        )

    def list_split_days(self, split_id: str) -> List[Dict[str, Any]]:
        return rows(
            self._client.table("split_days")
            .select("*")
            .eq("split_id", split_id)
            .order("day_of_week"),
            "fetch split days",
        )

    def list_exercises(self, split_day_id: str) -> List[Dict[str, Any]]:
        return rows(
            self._client.table("exercises")
            .select("*")
            .eq("split_day_id", split_day_id)
            .order("exercise_order"),
            "fetch exercises",
        )

    def get_exercise(self, exercise_id: str) -> Optional[Dict[str, Any]]:
        return first_row(
            self._client.table("exercises")
            .select("*")
            .eq("id", exercise_id)
            .limit(1),
            "fetch exercise",
        )

    def update_exercise(
        self,
        exercise_id: str,
        fields: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        return first_row(
            self._client.table("exercises")
            .update(fields)
            .eq("id", exercise_id),
            "update exercise",
        )
