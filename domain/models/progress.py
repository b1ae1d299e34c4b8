"""
Progress report value objects produced by comparing two workout snapshots.

All percentages are relative to the previous value and are exactly 0 when the
previous value is not positive.
"""

from typing import List, Literal, Optional

from pydantic import Field, model_validator

from domain.models.base import DomainModel
from domain.models.workout_snapshot import WorkoutSnapshot


class SetProgress(DomainModel):
    """Deltas for one set number present in both workouts."""

    set_number: int
    current_reps: int
    previous_reps: int
    current_weight: float
    previous_weight: float
    reps_change: int
    weight_change: float
    reps_change_percent: float
    weight_change_percent: float


class ExerciseProgress(DomainModel):
    """
    Aggregated deltas for one exercise present in both workouts.

    Weight totals are volume (reps * weight) summed over matched sets;
    rep totals are plain sums over matched sets.
    """

    exercise_id: str
    exercise_name: str
    muscle_group: str
    sets: List[SetProgress] = Field(default_factory=list)
    total_weight_change: float
    total_reps_change: int
    total_weight_change_percent: float
    total_reps_change_percent: float


class OverallProgress(DomainModel):
    """Totals across all matched exercises."""

    total_weight_change: float
    total_reps_change: int
    total_weight_change_percent: float
    total_reps_change_percent: float


class ProgressReport(DomainModel):
    exercises: List[ExerciseProgress] = Field(default_factory=list)
    overall_progress: OverallProgress


class PredecessorResult(DomainModel):
    """
    Outcome of looking up the previous instance of a scheduled day.

    Examples:
        >>> PredecessorResult.none().is_found
        False
        >>> PredecessorResult.found("session-1").workout_id
        'session-1'
    """

    kind: Literal["none", "found"]
    workout_id: Optional[str] = None

    @model_validator(mode="after")
    def check_workout_id(self) -> "PredecessorResult":
        if self.kind == "found" and not self.workout_id:
            raise ValueError("a found predecessor requires a workout_id")
        if self.kind == "none" and self.workout_id is not None:
            raise ValueError("workout_id must be empty when no predecessor exists")
        return self

    @classmethod
    def none(cls) -> "PredecessorResult":
        return cls(kind="none")

    @classmethod
    def found(cls, workout_id: str) -> "PredecessorResult":
        return cls(kind="found", workout_id=workout_id)

    @property
    def is_found(self) -> bool:
        return self.kind == "found"


class WorkoutComparison(DomainModel):
    """
    Current workout plus, when one exists, its predecessor and the progress
    between them. previous_workout and progress_data are null together.
    """

    current_workout: WorkoutSnapshot
    previous_workout: Optional[WorkoutSnapshot] = None
    progress_data: Optional[ProgressReport] = None

    @model_validator(mode="after")
    def check_pairing(self) -> "WorkoutComparison":
        if (self.previous_workout is None) != (self.progress_data is None):
            raise ValueError("previous_workout and progress_data must both be set or both be null")
        return self
