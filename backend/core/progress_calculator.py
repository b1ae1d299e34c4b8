"""
Workout progress calculation.

Compares a workout against the previous instance of the same scheduled day
and produces per-set, per-exercise and overall deltas for reps and weight.

- Exercises are paired by exercise id, sets by set number. Anything present
  on only one side is left out of the report and out of every total.
- Exercise and overall "weight" totals are volume: sum of reps * weight.
- A percentage is relative to the previous value and is exactly 0 when the
  previous value is zero or negative, whatever the change.

The calculation is pure: no I/O, no rounding, and the summation order is fixed
by the snapshot ordering, so identical inputs give identical output.
"""
from dataclasses import dataclass
from typing import List, Tuple

from domain.models import (
    ExerciseProgress,
    ExerciseSnapshot,
    OverallProgress,
    ProgressReport,
    SetProgress,
    WorkoutSnapshot,
)


# =============================================================================
# Delta Formulas
# =============================================================================


def change_percent(change: float, previous_value: float) -> float:
    """
    Percentage change relative to a previous value.

    Args:
        change: current - previous
        previous_value: The baseline value

    Returns:
        (change / previous_value) * 100, or 0.0 when previous_value <= 0
    """
    if previous_value > 0:
        return (change / previous_value) * 100
    return 0.0


@dataclass
class _Totals:
    """Running sums over matched sets."""
    current_weight: float = 0.0
    previous_weight: float = 0.0
    current_reps: int = 0
    previous_reps: int = 0

    def add(self, other: "_Totals") -> None:
        self.current_weight += other.current_weight
        self.previous_weight += other.previous_weight
        self.current_reps += other.current_reps
        self.previous_reps += other.previous_reps

    @property
    def weight_change(self) -> float:
        return self.current_weight - self.previous_weight

    @property
    def reps_change(self) -> int:
        return self.current_reps - self.previous_reps


# =============================================================================
# Comparison
# =============================================================================


def _compare_exercise(
    current: ExerciseSnapshot,
    previous: ExerciseSnapshot,
) -> Tuple[ExerciseProgress, _Totals]:
    """Pair sets by set number and aggregate the matched ones."""
    previous_sets = {s.set_number: s for s in previous.sets}
    totals = _Totals()
    set_progress: List[SetProgress] = []

    for current_set in current.sets:
        previous_set = previous_sets.get(current_set.set_number)
        if previous_set is None:
            continue

        reps_change = current_set.reps - previous_set.reps
        weight_change = current_set.weight - previous_set.weight

        totals.current_weight += current_set.volume
        totals.previous_weight += previous_set.volume
        totals.current_reps += current_set.reps
        totals.previous_reps += previous_set.reps

        set_progress.append(SetProgress(
            set_number=current_set.set_number,
            current_reps=current_set.reps,
            previous_reps=previous_set.reps,
            current_weight=current_set.weight,
            previous_weight=previous_set.weight,
            reps_change=reps_change,
            weight_change=weight_change,
            reps_change_percent=change_percent(reps_change, previous_set.reps),
            weight_change_percent=change_percent(weight_change, previous_set.weight),
        ))

    progress = ExerciseProgress(
        exercise_id=current.id,
        exercise_name=current.name,
        muscle_group=current.muscle_group,
        sets=set_progress,
        total_weight_change=totals.weight_change,
        total_reps_change=totals.reps_change,
        total_weight_change_percent=change_percent(totals.weight_change, totals.previous_weight),
        total_reps_change_percent=change_percent(totals.reps_change, totals.previous_reps),
    )
    return progress, totals


def compute_progress(
    current: WorkoutSnapshot,
    previous: WorkoutSnapshot,
) -> ProgressReport:
    """
    Compute the progress report between two workout snapshots.

    Args:
        current: The workout being reviewed
        previous: The most recent earlier instance of the same scheduled day

    Returns:
        ProgressReport with exercises in current-workout order

    Example:
        Bench press 5x175, 5x185 against 5x170, 5x180 gives set weight
        changes of +5 (2.94%, 2.78%) and an exercise volume change of
        1800 - 1750 = +50 (2.86%).
    """
    previous_exercises = {e.id: e for e in previous.exercises}
    overall = _Totals()
    exercises: List[ExerciseProgress] = []

    for current_exercise in current.exercises:
        previous_exercise = previous_exercises.get(current_exercise.id)
        if previous_exercise is None:
            continue

        progress, totals = _compare_exercise(current_exercise, previous_exercise)
        overall.add(totals)
        exercises.append(progress)

    return ProgressReport(
        exercises=exercises,
        overall_progress=OverallProgress(
            total_weight_change=overall.weight_change,
            total_reps_change=overall.reps_change,
            total_weight_change_percent=change_percent(overall.weight_change, overall.previous_weight),
            total_reps_change_percent=change_percent(overall.reps_change, overall.previous_reps),
        ),
    )
