"""
Domain layer for the Split Tracker API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).
"""

from domain.models import (
    ExerciseProgress,
    ExerciseSnapshot,
    ProgressReport,
    SetProgress,
    SetSnapshot,
    WorkoutSnapshot,
)

__all__ = [
    "WorkoutSnapshot",
    "ExerciseSnapshot",
    "SetSnapshot",
    "ProgressReport",
    "ExerciseProgress",
    "SetProgress",
]
