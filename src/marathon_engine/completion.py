"""Workout completion — records actuals by rebuilding the plan.

The plan aggregate is never mutated.  Completing a workout copies the
path plan -> week -> workout, so readers holding the old plan keep a
consistent view.
"""

from __future__ import annotations

import dataclasses
import logging

from marathon_engine.exceptions import WorkoutNotFoundError
from marathon_engine.math.rounding import round_int
from marathon_engine.models.training_plan import TrainingPlan
from marathon_engine.models.workout import Workout

logger = logging.getLogger(__name__)

MIN_FEELING = 1
MAX_FEELING = 5


def actual_pace(distance_km: float | None, duration_min: float | None) -> int | None:
    """Pace in s/km from reported actuals, or None unless both are positive."""
    if not distance_km or not duration_min or distance_km <= 0 or duration_min <= 0:
        return None
    return round_int(duration_min * 60 / distance_km)


def complete_workout(
    plan: TrainingPlan,
    workout_id: str,
    *,
    actual_distance_km: float | None = None,
    actual_duration_min: float | None = None,
    feeling: int | None = None,
    notes: str | None = None,
) -> TrainingPlan:
    """Return a new plan with *workout_id* marked complete.

    Args:
        plan: The current plan; left unchanged.
        workout_id: Id of the workout to complete.
        actual_distance_km: Distance actually run.
        actual_duration_min: Time actually taken.
        feeling: Subjective rating, 1 (awful) to 5 (great).
        notes: Free-text note.

    Raises:
        WorkoutNotFoundError: If no workout has *workout_id*.
        ValueError: If *feeling* is outside 1-5.
    """
    if feeling is not None and not MIN_FEELING <= feeling <= MAX_FEELING:
        raise ValueError(f"Feeling must be {MIN_FEELING}-{MAX_FEELING}, got {feeling}")

    def _complete(workout: Workout) -> Workout:
        return dataclasses.replace(
            workout,
            completed=True,
            actual_distance_km=actual_distance_km,
            actual_duration_min=actual_duration_min,
            actual_pace_s_per_km=actual_pace(actual_distance_km, actual_duration_min),
            feeling=feeling,
            notes=notes,
        )

    new_weeks = list(plan.weeks)
    for i, week in enumerate(plan.weeks):
        for j, workout in enumerate(week.workouts):
            if workout.id != workout_id:
                continue
            workouts = list(week.workouts)
            workouts[j] = _complete(workout)
            new_weeks[i] = dataclasses.replace(week, workouts=tuple(workouts))
            logger.info("Completed workout %s (week %d)", workout_id, week.week_number)
            return dataclasses.replace(plan, weeks=tuple(new_weeks))

    raise WorkoutNotFoundError(workout_id)
