"""
Workout snapshot assembly.

Builds a WorkoutSnapshot from the relational rows of one session:
session -> split_day -> split for the labels, the split day's exercises in
configured order, and the sets logged in that session. Exercises without a
set in the session are left out; a session with no sets at all cannot be
snapshotted.
"""
from collections import defaultdict
from typing import Any, Dict, List
import logging

from application.exceptions import WorkoutNotFoundError
from application.ports.workout_history_repository import WorkoutHistoryRepository
from backend.core.muscle_groups import normalize_muscle_group
from domain.models import ExerciseSnapshot, SessionRef, SetSnapshot, WorkoutSnapshot

logger = logging.getLogger(__name__)


class WorkoutSnapshotLoader:
    """Loads read-only workout snapshots through the history repository."""

    def __init__(self, history_repo: WorkoutHistoryRepository):
        self._history_repo = history_repo

    def load_session_ref(self, session_id: str) -> SessionRef:
        """
        Resolve a session to its owner, scheduled day and creation time.

        Raises:
            WorkoutNotFoundError: If the session does not exist
        """
        session = self._history_repo.get_session(session_id)
        if not session:
            raise WorkoutNotFoundError(f"Workout not found: {session_id}")

        return SessionRef(
            id=session["id"],
            user_id=session["user_id"],
            scheduled_day_key=session["split_day"],
            created_at=session["created_at"],
            date=session.get("date"),
        )

    def load_snapshot(self, session_id: str) -> WorkoutSnapshot:
        """
        Assemble the full snapshot for a session.

        Args:
            session_id: Session to load

        Returns:
            WorkoutSnapshot with exercises in configured order

        Raises:
            WorkoutNotFoundError: If the session, its split day or split cannot
                be resolved, or no exercise has a logged set
            RepositoryError: If the backend fails
        """
        session = self.load_session_ref(session_id)

        split_day = self._history_repo.get_split_day(session.scheduled_day_key)
        if not split_day:
            raise WorkoutNotFoundError(f"Split day not found: {session.scheduled_day_key}")

        split = self._history_repo.get_split(split_day["split_id"])
        if not split:
            raise WorkoutNotFoundError(f"Split not found: {split_day['split_id']}")

        exercises = self._history_repo.list_split_day_exercises(split_day["id"])
        sets_by_exercise = self._group_sets(self._history_repo.list_session_sets(session.id))

        snapshots: List[ExerciseSnapshot] = []
        for exercise in exercises:
            sets = sets_by_exercise.get(exercise["id"])
            if not sets:
                continue
            snapshots.append(ExerciseSnapshot(
                id=exercise["id"],
                name=exercise.get("name") or "",
                muscle_group=normalize_muscle_group(exercise.get("muscle_groups")),
                sets=sets,
            ))

        if not snapshots:
            raise WorkoutNotFoundError("No exercises with sets found for this workout")

        logger.debug(
            f"Loaded snapshot {session.id}: {len(snapshots)} exercises "
            f"of {len(exercises)} configured"
        )

        return WorkoutSnapshot(
            id=session.id,
            date=session.date,
            created_at=session.created_at,
            split_name=split.get("name") or "Unknown Split",
            day_name=split_day.get("name") or "Unknown Day",
            scheduled_day_key=session.scheduled_day_key,
            exercises=snapshots,
        )

    @staticmethod
    def _group_sets(rows: List[Dict[str, Any]]) -> Dict[str, List[SetSnapshot]]:
        # A repeated set_number keeps the later row
        grouped: Dict[str, Dict[int, SetSnapshot]] = defaultdict(dict)
        for row in rows:
            grouped[row["exercise_id"]][row["set_number"]] = SetSnapshot(
                set_number=row["set_number"],
                reps=row.get("reps") or 0,
                weight=row.get("weight") or 0,
            )
        return {
            exercise_id: list(sets.values())
            for exercise_id, sets in grouped.items()
        }
