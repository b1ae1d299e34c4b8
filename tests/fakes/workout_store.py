"""
Shared in-memory tables backing the fake repositories.

The Supabase repositories all read and write the same relational tables, so
the fakes share one store: a split created through FakeSplitRepository is
visible to FakeWorkoutHistoryRepository, as it would be in the database.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional, Set
import uuid

from application.exceptions import RepositoryError

BASE_TIME = datetime(2025, 1, 5, 9, 0, tzinfo=timezone.utc)


class FakeWorkoutStore:
    """
    In-memory stand-in for the sessions, split_days, splits, exercises,
    sets and users tables.

    Rows are plain dicts shaped like PostgREST results. Timestamps are
    ISO-8601 strings; generated created_at values increase by one minute per
    insert so ordering is deterministic.
    """

    TABLES = ("users", "splits", "split_days", "exercises", "sessions", "sets")

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        """Clear all tables and failure switches."""
        self.tables: Dict[str, List[Dict[str, Any]]] = {t: [] for t in self.TABLES}
        self.failing: Set[str] = set()
        self._tick = 0

    # -------------------------------------------------------------------------
    # Failure injection
    # -------------------------------------------------------------------------

    def fail_on(self, *method_names: str) -> None:
        """Make the named repository methods raise RepositoryError."""
        self.failing.update(method_names)

    def check(self, method_name: str) -> None:
        if method_name in self.failing:
            raise RepositoryError(f"Simulated failure in {method_name}")

    # -------------------------------------------------------------------------
    # Row helpers
    # -------------------------------------------------------------------------

    def next_timestamp(self) -> str:
        self._tick += 1
        return (BASE_TIME + timedelta(minutes=self._tick)).isoformat()

    def insert(self, table: str, row: Dict[str, Any]) -> Dict[str, Any]:
        stored = dict(row)
        stored.setdefault("id", str(uuid.uuid4()))
        if table in ("splits", "sessions"):
            stored.setdefault("created_at", self.next_timestamp())
        self.tables[table].append(stored)
        return dict(stored)

    def find(self, table: str, row_id: str) -> Optional[Dict[str, Any]]:
        for row in self.tables[table]:
            if row["id"] == row_id:
                return row
        return None

    def where(self, table: str, **filters: Any) -> List[Dict[str, Any]]:
        return [
            dict(row) for row in self.tables[table]
            if all(row.get(k) == v for k, v in filters.items())
        ]

    def delete_where(self, table: str, column: str, values: List[Any]) -> int:
        keep = [r for r in self.tables[table] if r.get(column) not in values]
        removed = len(self.tables[table]) - len(keep)
        self.tables[table] = keep
        return removed

    # -------------------------------------------------------------------------
    # Seeding
    # -------------------------------------------------------------------------

    def seed_split_day(
        self,
        *,
        user_id: str = "user-1",
        split_name: str = "Push Pull Legs",
        day_name: str = "Push",
        exercises: Optional[List[Dict[str, Any]]] = None,
    ) -> Dict[str, Any]:
        """
        Seed a split with one training day and its exercises.

        Args:
            exercises: Exercise rows (id, name, muscle_groups, default_sets...);
                exercise_order defaults to list position

        Returns:
            Dict with "split", "split_day" and "exercises"
        """
        split = self.insert("splits", {"user_id": user_id, "name": split_name})
        split_day = self.insert("split_days", {
            "split_id": split["id"],
            "day_of_week": 1,
            "name": day_name,
            "is_rest_day": False,
        })
        created = []
        for order, exercise in enumerate(exercises or []):
            row = {
                "split_day_id": split_day["id"],
                "exercise_order": order,
                "default_sets": 3,
                "rest_time_sec": 90,
                "note": None,
                **exercise,
            }
            created.append(self.insert("exercises", row))
        return {"split": split, "split_day": split_day, "exercises": created}

    def seed_session(
        self,
        *,
        user_id: str,
        split_day_id: str,
        sets: Optional[List[Dict[str, Any]]] = None,
        session_id: Optional[str] = None,
        session_date: Optional[str] = "2025-04-29",
        created_at: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Seed a session with its sets.

        Args:
            sets: Rows with exercise_id, set_number, reps, weight
            session_date: ISO date, or None for an undated (baseline) session
        """
        row: Dict[str, Any] = {
            "user_id": user_id,
            "split_day": split_day_id,
            "date": session_date,
        }
        if session_id:
            row["id"] = session_id
        if created_at:
            row["created_at"] = created_at
        session = self.insert("sessions", row)
        for set_row in sets or []:
            self.insert("sets", {"session_id": session["id"], **set_row})
        return session
