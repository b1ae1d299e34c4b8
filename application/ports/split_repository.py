"""
Split Repository Interface (Port).

This module defines the interface for persisting training splits: the split
itself, its split days (one per weekday slot) and the exercises configured
for each training day.
"""
from typing import Any, Dict, List, Optional, Protocol


class SplitRepository(Protocol):
    """
    Abstract interface for training split persistence.

    Create methods return the inserted row (including generated id).
    """

    def create_split(self, user_id: str, name: str) -> Dict[str, Any]:
        """
        Insert a split.

        Args:
            user_id: Owner of the split
            name: Display name

        Returns:
            The created split row
        """
        ...

    def create_split_day(
        self,
        split_id: str,
        *,
        day_of_week: int,
        name: Optional[str],
        is_rest_day: bool,
    ) -> Dict[str, Any]:
        """
        Insert a split day.

        Args:
            split_id: Parent split
            day_of_week: 0 (Sunday) to 6 (Saturday)
            name: Workout name for training days, None for rest days
            is_rest_day: Whether the slot is a rest day

        Returns:
            The created split day row
        """
        ...

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
        """Insert an exercise for a split day and return the created row."""
        ...

    def list_splits(self, user_id: str) -> List[Dict[str, Any]]:
        """List a user's splits, newest first."""
        ...

    def get_split_day(self, split_day_id: str) -> Optional[Dict[str, Any]]:
        """Get a split day row, or None."""
        ...

    def list_split_days(self, split_id: str) -> List[Dict[str, Any]]:
        """List a split's days ordered by day_of_week ascending."""
        ...

    def list_exercises(self, split_day_id: str) -> List[Dict[str, Any]]:
        """List a split day's exercises ordered by exercise_order ascending."""
        ...

    def get_exercise(self, exercise_id: str) -> Optional[Dict[str, Any]]:
        """Get an exercise row, or None."""
        ...

    def update_exercise(
        self,
        exercise_id: str,
        fields: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """
        Update an exercise's configuration.

        Args:
            exercise_id: Exercise to update
            fields: Column/value pairs to set (name, default_sets, rest_time_sec, note)

        Returns:
            The updated row, or None if the exercise does not exist
        """
        ...
