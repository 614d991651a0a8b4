"""Data models for the marathon plan engine."""

from marathon_engine.models.enums import (
    RunnerLevel,
    SegmentType,
    TrainingPhase,
    WorkoutType,
    ZoneType,
)
from marathon_engine.models.pace_zones import PaceZone, PaceZones
from marathon_engine.models.runner_profile import RunnerProfile
from marathon_engine.models.training_plan import TrainingPlan, TrainingWeek, WeeklyStats
from marathon_engine.models.workout import Workout, WorkoutSegment

__all__ = [
    "PaceZone",
    "PaceZones",
    "RunnerLevel",
    "RunnerProfile",
    "SegmentType",
    "TrainingPhase",
    "TrainingPlan",
    "TrainingWeek",
    "WeeklyStats",
    "Workout",
    "WorkoutSegment",
    "WorkoutType",
    "ZoneType",
]
