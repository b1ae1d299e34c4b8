"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Fakes built on one FakeWorkoutStore see each other's writes
- Failure injection via store.fail_on("method_name")
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeWorkoutStore, FakeWorkoutHistoryRepository

    store = FakeWorkoutStore()
    seeded = store.seed_split_day(exercises=[{"id": "bench", "name": "Bench Press"}])
    repo = FakeWorkoutHistoryRepository(store)
"""
from typing import Any, Dict, Optional

from tests.fakes.workout_store import FakeWorkoutStore
from tests.fakes.workout_history_repository import FakeWorkoutHistoryRepository
from tests.fakes.split_repository import FakeSplitRepository
from tests.fakes.workout_log_repository import FakeWorkoutLogRepository
from tests.fakes.account_repository import FakeAccountRepository


# =============================================================================
# Factory Functions
# =============================================================================


def create_repos(store: Optional[FakeWorkoutStore] = None) -> Dict[str, Any]:
    """
    Create all fake repositories over one shared store.

    Returns:
        Dict with "store", "history_repo", "split_repo", "log_repo", "account_repo"
    """
    store = store or FakeWorkoutStore()
    return {
        "store": store,
        "history_repo": FakeWorkoutHistoryRepository(store),
        "split_repo": FakeSplitRepository(store),
        "log_repo": FakeWorkoutLogRepository(store),
        "account_repo": FakeAccountRepository(store),
    }


def seed_push_day_history(
    store: FakeWorkoutStore,
    *,
    user_id: str = "user-1",
) -> Dict[str, Any]:
    """
    Seed a Push day logged twice, one week apart.

    Previous week: bench 3x(5 @ 165), overhead press 3x(8 @ 95)
    Current week:  bench 3x(5 @ 175), overhead press 3x(8 @ 95)

    Returns:
        Dict with "split", "split_day", "exercises", "previous" and "current"
    """
    seeded = store.seed_split_day(
        user_id=user_id,
        exercises=[
            {"id": "bench", "name": "Bench Press", "muscle_groups": ["Chest", "Triceps"]},
            {"id": "ohp", "name": "Overhead Press", "muscle_groups": "{shoulders}"},
        ],
    )
    split_day_id = seeded["split_day"]["id"]

    def sets(bench_weight: float):
        rows = []
        for n in (1, 2, 3):
            rows.append({"exercise_id": "bench", "set_number": n, "reps": 5, "weight": bench_weight})
            rows.append({"exercise_id": "ohp", "set_number": n, "reps": 8, "weight": 95})
        return rows

    seeded["previous"] = store.seed_session(
        user_id=user_id,
        split_day_id=split_day_id,
        session_id="session-prev",
        session_date="2025-04-22",
        created_at="2025-04-22T18:00:00+00:00",
        sets=sets(165),
    )
    seeded["current"] = store.seed_session(
        user_id=user_id,
        split_day_id=split_day_id,
        session_id="session-curr",
        session_date="2025-04-29",
        created_at="2025-04-29T18:00:00+00:00",
        sets=sets(175),
    )
    return seeded


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Fake implementations
    "FakeWorkoutStore",
    "FakeWorkoutHistoryRepository",
    "FakeSplitRepository",
    "FakeWorkoutLogRepository",
    "FakeAccountRepository",
    # Factory functions
    "create_repos",
    "seed_push_day_history",
]
