"""
Repository Interfaces (Ports) for the Split Tracker API.

This package defines abstract interfaces that decouple domain logic from
infrastructure (database, external services). Implementations are provided
in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the domain needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import WorkoutHistoryRepository

    class WorkoutHistoryService:
        def __init__(self, history_repo: WorkoutHistoryRepository):
            self._history_repo = history_repo
"""

# Logged workouts (read side)
from application.ports.workout_history_repository import WorkoutHistoryRepository

# Sessions and sets (write side)
from application.ports.workout_log_repository import WorkoutLogRepository

# Training splits
from application.ports.split_repository import SplitRepository

# Account data
from application.ports.account_repository import AccountRepository

__all__ = [
    "WorkoutHistoryRepository",
    "WorkoutLogRepository",
    "SplitRepository",
    "AccountRepository",
]
