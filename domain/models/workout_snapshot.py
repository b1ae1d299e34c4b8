"""
Workout snapshot value objects.

A snapshot is a read-only projection of one logged session: which scheduled
day it was an instance of, and for every exercise that has at least one set
recorded in that session, the set values in set-number order.
"""

import datetime
from typing import List, Optional

from pydantic import Field, computed_field, field_validator

from domain.models.base import DomainModel


class SetSnapshot(DomainModel):
    """One logged set."""

    set_number: int = Field(..., ge=1, description="1-based position within the exercise")
    reps: int = Field(default=0, ge=0, description="Repetitions completed")
    weight: float = Field(default=0.0, ge=0, description="Unit-less load")

    @property
    def volume(self) -> float:
        """Volume for this set (reps * weight)."""
        return self.reps * self.weight


class ExerciseSnapshot(DomainModel):
    """
    An exercise as it was logged in one session.

    `id` is the configured exercise id, which is stable across sessions of
    the same scheduled day, so it is the key used to pair exercises when two
    snapshots are compared.
    """

    id: str
    name: str
    muscle_group: str = Field(default="NA", description="Normalized lowercase label or 'NA'")
    sets: List[SetSnapshot] = Field(default_factory=list)

    @field_validator("sets")
    @classmethod
    def sort_unique_sets(cls, v: List[SetSnapshot]) -> List[SetSnapshot]:
        """Sets are kept ascending by set_number; duplicates are rejected."""
        numbers = [s.set_number for s in v]
        if len(numbers) != len(set(numbers)):
            raise ValueError("set_number values must be unique within an exercise")
        return sorted(v, key=lambda s: s.set_number)


class WorkoutSnapshot(DomainModel):
    """
    One completed (or partially completed) workout instance.

    Examples:
        >>> snapshot = WorkoutSnapshot(
        ...     id="session-2",
        ...     date=datetime.date(2025, 4, 29),
        ...     created_at=datetime.datetime(2025, 4, 29, 18, 0),
        ...     split_name="PPL",
        ...     day_name="Push",
        ...     scheduled_day_key="day-1",
        ...     exercises=[
        ...         ExerciseSnapshot(
        ...             id="bench",
        ...             name="Bench Press",
        ...             muscle_group="chest",
        ...             sets=[SetSnapshot(set_number=1, reps=5, weight=175)],
        ...         )
        ...     ],
        ... )
        >>> snapshot.total_sets
        1
    """

    id: str
    date: Optional[datetime.date] = Field(default=None, description="Calendar date, display only")
    created_at: datetime.datetime = Field(..., description="Creation timestamp, the ordering key")
    split_name: str = "Unknown Split"
    day_name: str = "Unknown Day"
    scheduled_day_key: str = Field(..., description="split_days.id this session was an instance of")
    exercises: List[ExerciseSnapshot] = Field(default_factory=list)

    @field_validator("exercises")
    @classmethod
    def unique_exercise_ids(cls, v: List[ExerciseSnapshot]) -> List[ExerciseSnapshot]:
        ids = [e.id for e in v]
        if len(ids) != len(set(ids)):
            raise ValueError("exercise ids must be unique within a workout")
        return v

    @computed_field(alias="totalSets")
    @property
    def total_sets(self) -> int:
        return sum(len(e.sets) for e in self.exercises)


class SessionRef(DomainModel):
    """Lightweight session lookup used to resolve predecessors and ownership."""

    id: str
    user_id: str
    scheduled_day_key: str
    created_at: datetime.datetime
    date: Optional[datetime.date] = None
