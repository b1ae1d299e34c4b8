"""
Domain models for the Split Tracker API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).

These models represent the core business concepts:
- WorkoutSnapshot: one logged session with its exercises and sets
- ProgressReport: set/exercise/overall deltas between two snapshots
- PredecessorResult: the previous instance of a scheduled day, if any
- SplitDraft: a weekly training split being authored

Usage:
    >>> from domain.models import WorkoutSnapshot, ExerciseSnapshot, SetSnapshot

    >>> snapshot = WorkoutSnapshot.model_validate_json(payload)
    >>> snapshot.model_dump(by_alias=True)  # camelCase for the web client
"""

from domain.models.history import (
    RecentWorkouts,
    RecentWorkoutsSummary,
    ServiceResult,
    WeeklyHistory,
    WeekRange,
)
from domain.models.progress import (
    ExerciseProgress,
    OverallProgress,
    PredecessorResult,
    ProgressReport,
    SetProgress,
    WorkoutComparison,
)
from domain.models.split import (
    BaselineSet,
    DayDraft,
    ExerciseDraft,
    ExerciseUpdate,
    LoggedSet,
    PrefilledExercise,
    SplitDraft,
)
from domain.models.workout_snapshot import (
    ExerciseSnapshot,
    SessionRef,
    SetSnapshot,
    WorkoutSnapshot,
)

__all__ = [
    # Snapshots
    "WorkoutSnapshot",
    "ExerciseSnapshot",
    "SetSnapshot",
    "SessionRef",
    # Progress
    "ProgressReport",
    "ExerciseProgress",
    "SetProgress",
    "OverallProgress",
    "PredecessorResult",
    "WorkoutComparison",
    # History listings
    "WeeklyHistory",
    "WeekRange",
    "RecentWorkouts",
    "RecentWorkoutsSummary",
    "ServiceResult",
    # Split authoring and logging
    "SplitDraft",
    "DayDraft",
    "ExerciseDraft",
    "BaselineSet",
    "LoggedSet",
    "PrefilledExercise",
    "ExerciseUpdate",
]
