"""Workout models — segments and complete workouts."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import date

from marathon_engine.models.enums import SegmentType, TrainingPhase, WorkoutType, ZoneType


def new_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class WorkoutSegment:
    """A typed leg of a workout run in one pace zone.

    Exactly one of ``distance_km`` / ``duration_min`` is authoritative;
    both may be None for an open-ended segment (lap button).  For
    INTERVAL segments ``distance_km`` is the total over all ``repeats``.
    """

    segment_type: SegmentType
    zone: ZoneType
    distance_km: float | None = None
    duration_min: float | None = None
    repeats: int | None = None
    description: str = ""

    @property
    def rep_distance_km(self) -> float | None:
        """Distance of a single repeat, or the whole segment if not repeated."""
        if self.distance_km is None:
            return None
        if self.repeats:
            return self.distance_km / self.repeats
        return self.distance_km


@dataclass(frozen=True)
class Workout:
    """A single planned run.

    Created unplaced by the template factory (no date, week 0) and bound to
    a calendar date by the plan assembler.  The actual_* fields, ``feeling``
    and ``notes`` are only filled in by ``complete_workout``.
    """

    workout_type: WorkoutType
    title: str
    description: str
    total_distance_km: float
    estimated_duration_min: int
    segments: tuple[WorkoutSegment, ...]
    id: str = field(default_factory=new_id)
    week_number: int = 0
    day_of_week: int | None = None  # 0=Monday, 6=Sunday
    scheduled_date: date | None = None
    phase: TrainingPhase | None = None
    completed: bool = False
    actual_distance_km: float | None = None
    actual_duration_min: float | None = None
    actual_pace_s_per_km: int | None = None
    feeling: int | None = None  # 1-5
    notes: str | None = None

    @property
    def is_long_run(self) -> bool:
        return self.workout_type in (WorkoutType.LONG, WorkoutType.LONG_WITH_MARATHON_PACE)

    @property
    def is_quality(self) -> bool:
        return self.workout_type in _QUALITY_TYPES


_QUALITY_TYPES = frozenset({
    WorkoutType.TEMPO,
    WorkoutType.INTERVALS,
    WorkoutType.REPETITION,
    WorkoutType.PROGRESSION,
    WorkoutType.LONG_WITH_MARATHON_PACE,
})
