"""
Training split authoring and workout logging payloads.

A split is a weekly schedule: seven (or fewer) days, each either a rest day
or a training day with an ordered list of exercises. Structural rules that
depend on more than one field (e.g. a training day needs exercises) are
enforced by SplitService so they surface as SplitValidationError.
"""

from typing import List, Optional

from pydantic import Field

from domain.models.base import DomainModel


class BaselineSet(DomainModel):
    """Starting reps/weight entered while authoring a split."""

    reps: int = Field(default=0, ge=0)
    weight: float = Field(default=0.0, ge=0)


class ExerciseDraft(DomainModel):
    name: str = Field(..., min_length=1, max_length=200)
    sets: int = Field(..., ge=1, le=20, description="Default number of sets")
    rest_time_sec: int = Field(default=90, ge=0, le=3600)
    note: Optional[str] = Field(default=None, max_length=1000)
    sets_data: Optional[List[BaselineSet]] = None


class DayDraft(DomainModel):
    is_rest_day: bool = False
    workout_name: Optional[str] = Field(default=None, max_length=200)
    exercises: List[ExerciseDraft] = Field(default_factory=list)


class SplitDraft(DomainModel):
    split_name: str = Field(..., max_length=200)
    days: List[DayDraft] = Field(default_factory=list)


class LoggedSet(DomainModel):
    set_number: int = Field(..., ge=1)
    reps: int = Field(default=0, ge=0)
    weight: float = Field(default=0.0, ge=0)


class PrefilledExercise(DomainModel):
    """An exercise of a split day with the sets a new session should start from."""

    id: str
    name: str
    default_sets: int
    rest_time_sec: int
    note: Optional[str] = None
    exercise_order: int
    sets: List[LoggedSet] = Field(default_factory=list)


class ExerciseUpdate(DomainModel):
    """Partial update of an exercise's configuration; unset fields are left alone."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    default_sets: Optional[int] = Field(default=None, ge=1, le=20)
    rest_time_sec: Optional[int] = Field(default=None, ge=0, le=3600)
    note: Optional[str] = Field(default=None, max_length=1000)

    def to_row(self) -> dict:
        """Column/value pairs for the fields that were provided."""
        return self.model_dump(exclude_none=True)
