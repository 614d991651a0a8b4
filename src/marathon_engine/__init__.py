"""Marathon plan engine — periodized, science-based marathon training plans."""

from marathon_engine.completion import complete_workout
from marathon_engine.engine import generate_plan
from marathon_engine.exceptions import (
    InvalidProfileError,
    MarathonEngineError,
    PlanFormatError,
    WorkoutNotFoundError,
)
from marathon_engine.models import RunnerLevel, RunnerProfile, TrainingPlan

__all__ = [
    "InvalidProfileError",
    "MarathonEngineError",
    "PlanFormatError",
    "RunnerLevel",
    "RunnerProfile",
    "TrainingPlan",
    "WorkoutNotFoundError",
    "complete_workout",
    "generate_plan",
]
