"""Weekly workout scheduler (Daniels / Pfitzinger hybrid).

Each week gets one pattern chosen by phase, with deload overriding the
phase.  Patterns hold two quality days at most (Daniels Q1/Q2) and a
Pfitzinger medium-long run, with the long run always last:

    Base:   [easy?]     tempo        [medium-long?]  easy  long
    Build:  [recovery?] I or cruise  [medium-long?]  easy  MP long (30%)
    Peak:   [recovery?] VO2max       [progression?]  easy  MP long (40%)
    Taper:  [recovery?] light tempo  [easy?]         easy  long
    Deload: [recovery?] light tempo  [easy?]         easy  long

Optional slots marked ``?`` appear at 5 and 4 runs per week respectively.
The race week drops the long run entirely.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from marathon_engine.math.rounding import round_int
from marathon_engine.models.enums import (
    BASE_TEMPO_FRACTION,
    BUILD_MP_FRACTION,
    DELOAD_TEMPO_FRACTION,
    MEDIUM_LONG_FRACTION,
    MIN_OTHER_RUN_KM,
    PEAK_MP_FRACTION,
    TAPER_TEMPO_FRACTION,
    TrainingPhase,
)
from marathon_engine.models.pace_zones import PaceZones
from marathon_engine.models.workout import Workout
from marathon_engine.workout_builder.templates import (
    create_cruise_intervals,
    create_easy_run,
    create_interval_session,
    create_long_run,
    create_long_run_mp,
    create_medium_long_run,
    create_progression_run,
    create_recovery_run,
    create_tempo_run,
)

# Runs per week at which the optional slots are filled
_FIFTH_SLOT_RUNS = 5
_FOURTH_SLOT_RUNS = 4

# Quality session shapes: (rep distance, repeats)
_BUILD_INTERVAL = (1000, 5)
_BUILD_CRUISE = (1.6, 4)
_PEAK_INTERVAL = (1200, 5)

# Race week distances (km)
_RACE_WEEK_SHORT_EASY_KM = 3
_RACE_WEEK_TEMPO = (5, 2)
_RACE_WEEK_RECOVERY_KM = 3
_RACE_WEEK_FINAL_EASY_KM = 4


@dataclass(frozen=True)
class WeekContext:
    """Everything the scheduler needs to lay out one week."""

    week_number: int
    total_weeks: int
    phase: TrainingPhase
    is_deload: bool
    weekly_km: int
    long_run_km: int
    runs_per_week: int
    paces: PaceZones

    @property
    def other_run_km(self) -> int:
        """Average distance of the non-long runs, at least 4 km."""
        remaining = self.weekly_km - self.long_run_km
        return max(MIN_OTHER_RUN_KM, round_int(remaining / (self.runs_per_week - 1)))

    @property
    def medium_long_km(self) -> int:
        return round_int(self.long_run_km * MEDIUM_LONG_FRACTION)

    @property
    def is_race_week(self) -> bool:
        return self.week_number == self.total_weeks


def _base_week(ctx: WeekContext) -> list[Workout]:
    km, p = ctx.other_run_km, ctx.paces
    tempo_km = max(2, round_int(km * BASE_TEMPO_FRACTION))
    workouts: list[Workout] = []

    if ctx.runs_per_week >= _FIFTH_SLOT_RUNS:
        workouts.append(create_easy_run(km, p))
    workouts.append(create_tempo_run(km + 1, tempo_km, p))
    if ctx.runs_per_week >= _FOURTH_SLOT_RUNS:
        workouts.append(create_medium_long_run(ctx.medium_long_km, p))
    workouts.append(create_easy_run(km, p))
    workouts.append(create_long_run(ctx.long_run_km, p))
    return workouts


def _build_week(ctx: WeekContext) -> list[Workout]:
    km, p = ctx.other_run_km, ctx.paces
    mp_km = round_int(ctx.long_run_km * BUILD_MP_FRACTION)
    workouts: list[Workout] = []

    if ctx.runs_per_week >= _FIFTH_SLOT_RUNS:
        workouts.append(create_recovery_run(max(4, km - 2), p))
    # Q1 alternates VO2max intervals (even weeks) and cruise intervals (odd weeks)
    if ctx.week_number % 2 == 0:
        workouts.append(create_interval_session(km + 1, *_BUILD_INTERVAL, p))
    else:
        workouts.append(create_cruise_intervals(km + 1, *_BUILD_CRUISE, p))
    if ctx.runs_per_week >= _FOURTH_SLOT_RUNS:
        workouts.append(create_medium_long_run(ctx.medium_long_km, p))
    workouts.append(create_easy_run(km, p))
    workouts.append(create_long_run_mp(ctx.long_run_km, mp_km, p))
    return workouts


def _peak_week(ctx: WeekContext) -> list[Workout]:
    km, p = ctx.other_run_km, ctx.paces
    mp_km = round_int(ctx.long_run_km * PEAK_MP_FRACTION)
    workouts: list[Workout] = []

    if ctx.runs_per_week >= _FIFTH_SLOT_RUNS:
        workouts.append(create_recovery_run(max(4, km - 2), p))
    workouts.append(create_interval_session(km + 1, *_PEAK_INTERVAL, p))
    if ctx.runs_per_week >= _FOURTH_SLOT_RUNS:
        workouts.append(create_progression_run(km + 2, p))
    workouts.append(create_easy_run(km, p))
    workouts.append(create_long_run_mp(ctx.long_run_km, mp_km, p))
    return workouts


def _race_week(ctx: WeekContext) -> list[Workout]:
    km, p = ctx.other_run_km, ctx.paces
    workouts: list[Workout] = [create_easy_run(max(4, km - 2), p)]

    if ctx.runs_per_week >= _FOURTH_SLOT_RUNS:
        workouts.append(create_easy_run(_RACE_WEEK_SHORT_EASY_KM, p))
    workouts.append(create_tempo_run(*_RACE_WEEK_TEMPO, p))
    if ctx.runs_per_week >= _FIFTH_SLOT_RUNS:
        workouts.append(create_recovery_run(_RACE_WEEK_RECOVERY_KM, p))
    workouts.append(create_easy_run(_RACE_WEEK_FINAL_EASY_KM, p))
    return workouts


def _taper_week(ctx: WeekContext) -> list[Workout]:
    if ctx.is_race_week:
        return _race_week(ctx)

    km, p = ctx.other_run_km, ctx.paces
    workouts: list[Workout] = []
    if ctx.runs_per_week >= _FIFTH_SLOT_RUNS:
        workouts.append(create_recovery_run(max(3, km - 3), p))
    workouts.append(create_tempo_run(km, max(2, round_int(km * TAPER_TEMPO_FRACTION)), p))
    if ctx.runs_per_week >= _FOURTH_SLOT_RUNS:
        workouts.append(create_easy_run(km, p))
    workouts.append(create_easy_run(km, p))
    workouts.append(create_long_run(ctx.long_run_km, p))
    return workouts


def _deload_week(ctx: WeekContext) -> list[Workout]:
    p = ctx.paces
    km = max(3, ctx.other_run_km - 2)
    workouts: list[Workout] = []

    if ctx.runs_per_week >= _FIFTH_SLOT_RUNS:
        workouts.append(create_recovery_run(km, p))
    workouts.append(create_tempo_run(km + 1, max(2, round_int(km * DELOAD_TEMPO_FRACTION)), p))
    if ctx.runs_per_week >= _FOURTH_SLOT_RUNS:
        workouts.append(create_easy_run(km, p))
    workouts.append(create_easy_run(km, p))
    workouts.append(create_long_run(ctx.long_run_km, p))
    return workouts


_PHASE_STRATEGIES: dict[TrainingPhase, Callable[[WeekContext], list[Workout]]] = {
    TrainingPhase.BASE: _base_week,
    TrainingPhase.BUILD: _build_week,
    TrainingPhase.PEAK: _peak_week,
    TrainingPhase.TAPER: _taper_week,
}


def select_strategy(phase: TrainingPhase, is_deload: bool) -> Callable[[WeekContext], list[Workout]]:
    """Pick the week pattern; deload overrides the phase pattern."""
    if is_deload:
        return _deload_week
    return _PHASE_STRATEGIES[phase]


def _fit_to_run_count(workouts: list[Workout], runs: int) -> list[Workout]:
    """Trim to *runs* workouts, keeping the final (long) run last."""
    if len(workouts) <= runs:
        return workouts
    return workouts[: runs - 1] + workouts[-1:]


def schedule_week(ctx: WeekContext) -> list[Workout]:
    """Ordered, undated workouts for one week.

    Args:
        ctx: Phase, volume and runner availability for the week.

    Returns:
        Exactly ``ctx.runs_per_week`` workouts in training order.
    """
    strategy = select_strategy(ctx.phase, ctx.is_deload)
    return _fit_to_run_count(strategy(ctx), ctx.runs_per_week)
