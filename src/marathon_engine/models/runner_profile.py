"""Runner profile — the sole input to plan generation."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from marathon_engine.exceptions import InvalidProfileError
from marathon_engine.models.enums import (
    MAX_RUNS_PER_WEEK,
    MIN_RUNS_PER_WEEK,
    RunnerLevel,
)


@dataclass(frozen=True)
class RunnerProfile:
    """Immutable description of the runner and their weekly availability.

    The recent performance (``recent_duration_min`` over
    ``recent_distance_km``) is the fitness test used to derive VDOT.
    ``run_days`` holds weekday indices, 0 = Monday ... 6 = Sunday.
    """

    level: RunnerLevel
    race_date: date
    goal_time_min: float
    recent_duration_min: float
    recent_distance_km: float
    runs_per_week: int
    run_days: tuple[int, ...]
    weekly_distance_base_km: float
    height_cm: float | None = None
    weight_kg: float | None = None

    def weeks_until_race(self, today: date) -> int:
        """Whole weeks between *today* and race day (rounded down)."""
        return (self.race_date - today).days // 7

    def validate(self, today: date) -> None:
        """Check every precondition of plan generation.

        Raises:
            InvalidProfileError: On the first violated precondition.
        """
        if self.recent_duration_min <= 0:
            raise InvalidProfileError(
                f"Recent performance duration must be positive, got {self.recent_duration_min}"
            )
        if self.recent_distance_km <= 0:
            raise InvalidProfileError(
                f"Recent performance distance must be positive, got {self.recent_distance_km}"
            )
        if self.weekly_distance_base_km < 0:
            raise InvalidProfileError(
                f"Weekly distance base cannot be negative, got {self.weekly_distance_base_km}"
            )
        if not MIN_RUNS_PER_WEEK <= self.runs_per_week <= MAX_RUNS_PER_WEEK:
            raise InvalidProfileError(
                f"Runs per week must be {MIN_RUNS_PER_WEEK}-{MAX_RUNS_PER_WEEK}, "
                f"got {self.runs_per_week}"
            )
        if len(set(self.run_days)) != len(self.run_days):
            raise InvalidProfileError(f"Duplicate run days: {self.run_days}")
        if len(self.run_days) != self.runs_per_week:
            raise InvalidProfileError(
                f"{self.runs_per_week} runs per week need {self.runs_per_week} run days, "
                f"got {len(self.run_days)}"
            )
        if any(not 0 <= day <= 6 for day in self.run_days):
            raise InvalidProfileError(f"Run days must be weekday indices 0-6, got {self.run_days}")
        if self.weeks_until_race(today) < 1:
            raise InvalidProfileError(
                f"Race date {self.race_date.isoformat()} is less than a week after "
                f"{today.isoformat()}"
            )
