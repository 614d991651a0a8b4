"""Shared test fixtures: runner profiles, pace zones, generated plans."""

from __future__ import annotations

from datetime import date
from typing import Callable

import pytest

from marathon_engine.engine import generate_plan
from marathon_engine.math.pace_zones import calculate_pace_zones
from marathon_engine.models.enums import RunnerLevel
from marathon_engine.models.pace_zones import PaceZones
from marathon_engine.models.runner_profile import RunnerProfile
from marathon_engine.models.training_plan import TrainingPlan

# A Monday; race 90 days out gives a 12-week plan
PLAN_START = date(2026, 3, 2)
RACE_DATE = date(2026, 5, 31)


@pytest.fixture
def plan_start() -> date:
    return PLAN_START


@pytest.fixture
def make_profile() -> Callable[..., RunnerProfile]:
    """Factory for RunnerProfile with sensible intermediate defaults."""

    def _make(**overrides) -> RunnerProfile:
        defaults = {
            "level": RunnerLevel.INTERMEDIATE,
            "race_date": RACE_DATE,
            "goal_time_min": 225.0,
            "recent_duration_min": 50.0,
            "recent_distance_km": 10.0,
            "runs_per_week": 3,
            "run_days": (1, 3, 6),  # Tue, Thu, Sun
            "weekly_distance_base_km": 25.0,
        }
        defaults.update(overrides)
        return RunnerProfile(**defaults)

    return _make


@pytest.fixture
def intermediate_profile(make_profile) -> RunnerProfile:
    """10 km in 50:00, 25 km/week base, 3 runs/week, race 12 weeks out."""
    return make_profile()


@pytest.fixture
def advanced_profile(make_profile) -> RunnerProfile:
    """10 km in 38:00, 60 km/week base, 5 runs/week, 16-week plan."""
    return make_profile(
        level=RunnerLevel.ADVANCED,
        race_date=date(2026, 6, 28),
        goal_time_min=170.0,
        recent_duration_min=38.0,
        runs_per_week=5,
        run_days=(0, 1, 3, 4, 6),
        weekly_distance_base_km=60.0,
    )


@pytest.fixture
def vdot40_paces() -> PaceZones:
    """Pace zones for a 50:00 10 km (VDOT ~40)."""
    paces, _ = calculate_pace_zones(50.0, 10.0)
    return paces


@pytest.fixture
def intermediate_plan(intermediate_profile) -> TrainingPlan:
    return generate_plan(intermediate_profile, today=PLAN_START, plan_id="plan-1")
