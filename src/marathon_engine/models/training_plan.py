"""Training plan aggregate: weeks, the plan root, and weekly statistics."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import date, datetime

from marathon_engine.models.enums import TrainingPhase
from marathon_engine.models.pace_zones import PaceZones
from marathon_engine.models.runner_profile import RunnerProfile
from marathon_engine.models.workout import Workout


@dataclass(frozen=True)
class WeeklyStats:
    """Planned-versus-actual summary of one training week."""

    week_number: int
    planned_km: float
    actual_km: float
    completed_workouts: int
    total_workouts: int
    avg_pace_s_per_km: float
    avg_feeling: float


@dataclass(frozen=True)
class TrainingWeek:
    """One week of the plan with its workouts in scheduled order."""

    week_number: int
    phase: TrainingPhase
    total_distance_km: float
    workouts: tuple[Workout, ...] = field(default_factory=tuple)
    is_deload_week: bool = False

    def stats(self) -> WeeklyStats:
        """Summarise completed work against the plan for this week."""
        done = [w for w in self.workouts if w.completed]
        paces = [w.actual_pace_s_per_km for w in done if w.actual_pace_s_per_km]
        feelings = [w.feeling for w in done if w.feeling]
        return WeeklyStats(
            week_number=self.week_number,
            planned_km=self.total_distance_km,
            actual_km=sum(w.actual_distance_km or 0.0 for w in done),
            completed_workouts=len(done),
            total_workouts=len(self.workouts),
            avg_pace_s_per_km=sum(paces) / len(paces) if paces else 0.0,
            avg_feeling=sum(feelings) / len(feelings) if feelings else 0.0,
        )


@dataclass(frozen=True)
class TrainingPlan:
    """Aggregate root of a generated marathon plan.

    The plan is frozen.  Updates (e.g. marking a workout complete) build a
    new plan rather than mutating this one.
    """

    id: str
    created_at: datetime
    profile: RunnerProfile
    pace_zones: PaceZones
    vdot: float
    weeks: tuple[TrainingWeek, ...]
    total_weeks: int

    # -- Query helpers ----------------------------------------------------

    def all_workouts(self) -> Iterator[Workout]:
        """Iterate every workout in calendar order."""
        for week in self.weeks:
            yield from week.workouts

    def find_workout(self, workout_id: str) -> Workout | None:
        """Return the workout with *workout_id*, or None."""
        for workout in self.all_workouts():
            if workout.id == workout_id:
                return workout
        return None

    def current_week(self, today: date) -> int:
        """1-indexed plan week for *today*, clamped to the plan length."""
        elapsed_weeks = (today - self.created_at.date()).days // 7 + 1
        return min(max(elapsed_weeks, 1), self.total_weeks)

    def next_workout(self, today: date) -> Workout | None:
        """Today's workout, else the nearest upcoming uncompleted one."""
        for workout in self.all_workouts():
            if workout.scheduled_date == today:
                return workout

        upcoming = [
            w for w in self.all_workouts()
            if w.scheduled_date is not None and w.scheduled_date > today and not w.completed
        ]
        if not upcoming:
            return None
        return min(upcoming, key=lambda w: w.scheduled_date)
