"""Plan assembler — the single entry point of the marathon plan engine."""

from __future__ import annotations

import dataclasses
import logging
from datetime import date, datetime, time, timedelta

from marathon_engine.math.long_run import build_long_run_progression
from marathon_engine.math.pace_zones import calculate_pace_zones
from marathon_engine.math.periodization import (
    PhaseSchedule,
    compute_plan_weeks,
    create_periodization,
    peak_weekly_volume,
)
from marathon_engine.math.rounding import round_int
from marathon_engine.models.enums import TrainingPhase
from marathon_engine.models.pace_zones import PaceZones
from marathon_engine.models.runner_profile import RunnerProfile
from marathon_engine.models.training_plan import TrainingPlan, TrainingWeek
from marathon_engine.models.workout import Workout, new_id
from marathon_engine.scheduling.weekly_scheduler import WeekContext, schedule_week

logger = logging.getLogger(__name__)


def week_start(plan_start: date, week_number: int) -> date:
    """Monday of plan week *week_number* (week 1 contains *plan_start*)."""
    first_monday = plan_start - timedelta(days=plan_start.weekday())
    return first_monday + timedelta(weeks=week_number - 1)


def _bind_to_calendar(
    workouts: list[Workout],
    week_number: int,
    phase: TrainingPhase,
    run_days: tuple[int, ...],
    plan_start: date,
) -> tuple[Workout, ...]:
    """Assign the i-th workout to the i-th chosen weekday of the week."""
    days = sorted(run_days)
    monday = week_start(plan_start, week_number)
    placed = []
    for i, workout in enumerate(workouts):
        day = days[i % len(days)]
        placed.append(dataclasses.replace(
            workout,
            week_number=week_number,
            day_of_week=day,
            scheduled_date=monday + timedelta(days=day),
            phase=phase,
            completed=False,
        ))
    return tuple(placed)


def _build_weeks(
    profile: RunnerProfile,
    schedule: PhaseSchedule,
    paces: PaceZones,
    peak_km: int,
    plan_start: date,
) -> tuple[TrainingWeek, ...]:
    long_runs = build_long_run_progression(schedule, peak_km)

    weeks: list[TrainingWeek] = []
    for week in range(1, schedule.total_weeks + 1):
        phase = schedule.phase_for_week(week)
        is_deload = schedule.is_deload(week)
        week_km = round_int(peak_km * schedule.volume_multipliers[week - 1])

        ctx = WeekContext(
            week_number=week,
            total_weeks=schedule.total_weeks,
            phase=phase,
            is_deload=is_deload,
            weekly_km=week_km,
            long_run_km=long_runs[week - 1],
            runs_per_week=profile.runs_per_week,
            paces=paces,
        )
        workouts = _bind_to_calendar(
            schedule_week(ctx), week, phase, profile.run_days, plan_start,
        )
        weeks.append(TrainingWeek(
            week_number=week,
            phase=phase,
            total_distance_km=week_km,
            workouts=workouts,
            is_deload_week=is_deload,
        ))
    return tuple(weeks)


def generate_plan(
    profile: RunnerProfile,
    today: date | None = None,
    plan_id: str | None = None,
) -> TrainingPlan:
    """Generate a complete marathon training plan for *profile*.

    Everything except the plan and workout ids and the creation timestamp
    is a deterministic function of *profile* and *today*.

    Args:
        profile: The runner's recent performance, race date and availability.
        today: Plan start date. Defaults to the current date.
        plan_id: Identity for the plan. A random UUID by default.

    Returns:
        A new, frozen TrainingPlan.

    Raises:
        InvalidProfileError: If the profile violates a precondition.
    """
    if today is None:
        created_at = datetime.now()
        today = created_at.date()
    else:
        created_at = datetime.combine(today, time.min)

    profile.validate(today)

    total_weeks = compute_plan_weeks(today, profile.race_date)
    paces, vdot = calculate_pace_zones(profile.recent_duration_min, profile.recent_distance_km)
    schedule = create_periodization(total_weeks)
    peak_km = peak_weekly_volume(profile.weekly_distance_base_km, total_weeks)

    logger.info(
        "Generating %d-week plan: VDOT %.1f, peak %d km/week, %d runs/week",
        total_weeks, vdot, peak_km, profile.runs_per_week,
    )

    weeks = _build_weeks(profile, schedule, paces, peak_km, today)

    return TrainingPlan(
        id=plan_id or new_id(),
        created_at=created_at,
        profile=profile,
        pace_zones=paces,
        vdot=vdot,
        weeks=weeks,
        total_weeks=total_weeks,
    )
