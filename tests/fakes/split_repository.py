"""
Fake Split Repository for Testing.

In-memory implementation of SplitRepository over FakeWorkoutStore.
"""
from typing import Any, Dict, List, Optional

from tests.fakes.workout_store import FakeWorkoutStore


class FakeSplitRepository:
    """
    In-memory fake implementation of SplitRepository.
    """

    def __init__(self, store: Optional[FakeWorkoutStore] = None):
        self.store = store or FakeWorkoutStore()

    def create_split(self, user_id: str, name: str) -> Dict[str, Any]:
        self.store.check("create_split")
        return self.store.insert("splits", {"user_id": user_id, "name": name})

    def create_split_day(
        self,
        split_id: str,
        *,
        day_of_week: int,
        name: Optional[str],
        is_rest_day: bool,
    ) -> Dict[str, Any]:
        self.store.check("create_split_day")
        return self.store.insert("split_days", {
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
        self.store.check("create_exercise")
        return self.store.insert("exercises", {
            "split_day_id": split_day_id,
            "name": name,
            "default_sets": default_sets,
            "rest_time_sec": rest_time_sec,
            "exercise_order": exercise_order,
            "note": note,
            "muscle_groups": None,
        })

    def list_splits(self, user_id: str) -> List[Dict[str, Any]]:
        self.store.check("list_splits")
        splits = self.store.where("splits", user_id=user_id)
        return sorted(splits, key=lambda s: s["created_at"], reverse=True)

    def get_split_day(self, split_day_id: str) -> Optional[Dict[str, Any]]:
        self.store.check("get_split_day")
        row = self.store.find("split_days", split_day_id)
        return dict(row) if row else None

    def list_split_days(self, split_id: str) -> List[Dict[str, Any]]:
        self.store.check("list_split_days")
        days = self.store.where("split_days", split_id=split_id)
        return sorted(days, key=lambda d: d["day_of_week"])

    def list_exercises(self, split_day_id: str) -> List[Dict[str, Any]]:
        self.store.check("list_exercises")
        exercises = self.store.where("exercises", split_day_id=split_day_id)
        return sorted(exercises, key=lambda e: e.get("exercise_order") or 0)

    def get_exercise(self, exercise_id: str) -> Optional[Dict[str, Any]]:
        self.store.check("get_exercise")
        row = self.store.find("exercises", exercise_id)
        return dict(row) if row else None

    def update_exercise(
        self,
        exercise_id: str,
        fields: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        self.store.check("update_exercise")
        row = self.store.find("exercises", exercise_id)
        if row is None:
            return None
        row.update(fields)
        return dict(row)
