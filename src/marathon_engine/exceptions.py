"""Exception hierarchy for the marathon plan engine."""

from __future__ import annotations


class MarathonEngineError(Exception):
    """Base exception for all marathon_engine errors."""


class InvalidProfileError(MarathonEngineError, ValueError):
    """The runner profile violates a precondition of plan generation."""


class WorkoutNotFoundError(MarathonEngineError, KeyError):
    """No workout with the requested id exists in the plan."""

    def __init__(self, workout_id: str) -> None:
        super().__init__(workout_id)
        self.workout_id = workout_id

    def __str__(self) -> str:
        return f"No workout with id {self.workout_id!r} in plan"


class PlanFormatError(MarathonEngineError, ValueError):
    """A persisted plan document could not be decoded."""
