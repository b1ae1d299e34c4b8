"""
Workout history listings and the tagged service result envelope.
"""

import datetime
from typing import Dict, Generic, List, Optional, TypeVar

from pydantic import Field, model_validator

from domain.models.base import DomainModel
from domain.models.workout_snapshot import WorkoutSnapshot

T = TypeVar("T")


class WeekRange(DomainModel):
    start_date: datetime.date
    end_date: datetime.date


class WeeklyHistory(DomainModel):
    """Workouts logged in one Sunday-to-Saturday week."""

    workouts: List[WorkoutSnapshot] = Field(default_factory=list)
    week_range: WeekRange


class RecentWorkoutsSummary(DomainModel):
    total_workouts: int = 0
    total_sets: int = 0
    muscle_group_counts: Dict[str, int] = Field(default_factory=dict)


class RecentWorkouts(DomainModel):
    workouts: List[WorkoutSnapshot] = Field(default_factory=list)
    summary: RecentWorkoutsSummary = Field(default_factory=RecentWorkoutsSummary)


class ServiceResult(DomainModel, Generic[T]):
    """
    Tagged result returned by read services: either success with data, or
    failure with a human-readable error. Services return this instead of
    raising so endpoints always produce a well-formed response.
    """

    success: bool
    error: Optional[str] = None
    data: Optional[T] = None

    @model_validator(mode="after")
    def check_tag(self) -> "ServiceResult[T]":
        if self.success and self.error is not None:
            raise ValueError("a successful result cannot carry an error")
        if not self.success and not self.error:
            raise ValueError("a failed result requires an error message")
        return self

    @classmethod
    def ok(cls, data: T) -> "ServiceResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str) -> "ServiceResult[T]":
        return cls(success=False, error=error)

    def to_response(self) -> dict:
        """Envelope dict with camelCase data, omitting whichever side is absent."""
        payload: dict = {"success": self.success}
        if self.error is not None:
            payload["error"] = self.error
        if self.data is not None:
            payload["data"] = self.data.model_dump(by_alias=True, mode="json")
        return payload
