"""Long run progression (Pfitzinger / Daniels hybrid).

The longest run of each week ramps linearly from ~30% of peak weekly
distance to a peak of 28-35 km, holds through PEAK, then drops through
the taper.  Deload weeks cut it by a quarter.
"""

from __future__ import annotations

from marathon_engine.math.periodization import PhaseSchedule
from marathon_engine.math.rounding import round_int
from marathon_engine.models.enums import (
    BASE_LONG_RUN_HEADROOM_KM,
    DELOAD_LONG_RUN_FRACTION,
    LONG_RUN_CAP_KM,
    LONG_RUN_DEFAULT_INCREMENT_KM,
    LONG_RUN_HARD_MAX_PCT,
    LONG_RUN_HIGH_VOLUME_KM,
    LONG_RUN_LONG_PLAN_WEEKS,
    LONG_RUN_MEDIUM_PLAN_WEEKS,
    LONG_RUN_MIN_PEAK_LONG_PLAN_KM,
    LONG_RUN_MIN_PEAK_MEDIUM_PLAN_KM,
    LONG_RUN_MIN_PEAK_SHORT_PLAN_KM,
    LONG_RUN_PEAK_PCT,
    LONG_RUN_START_MIN_KM,
    LONG_RUN_START_PCT,
    MIN_LONG_RUN_KM,
    TAPER_LONG_RUN_FRACTIONS,
    TrainingPhase,
)


def start_long_run_km(peak_weekly_km: float) -> int:
    """First-week long run: 30% of peak weekly distance, at least 14 km."""
    return max(LONG_RUN_START_MIN_KM, round_int(peak_weekly_km * LONG_RUN_START_PCT))


def min_peak_long_run_km(total_weeks: int, peak_weekly_km: float) -> int:
    """Marathon-specific floor for the longest run, by plan length."""
    if total_weeks >= LONG_RUN_LONG_PLAN_WEEKS:
        return LONG_RUN_MIN_PEAK_LONG_PLAN_KM
    if total_weeks >= LONG_RUN_MEDIUM_PLAN_WEEKS:
        if peak_weekly_km >= LONG_RUN_HIGH_VOLUME_KM:
            return LONG_RUN_MIN_PEAK_LONG_PLAN_KM
        return LONG_RUN_MIN_PEAK_MEDIUM_PLAN_KM
    return LONG_RUN_MIN_PEAK_SHORT_PLAN_KM


def max_long_run_km(total_weeks: int, peak_weekly_km: float) -> int:
    """Peak long run distance.

    The larger of the plan-length floor and min(35 km, 45% of peak weekly
    distance), but never more than 60% of peak weekly distance.
    """
    hard_max = round_int(peak_weekly_km * LONG_RUN_HARD_MAX_PCT)
    proportional = min(LONG_RUN_CAP_KM, round_int(peak_weekly_km * LONG_RUN_PEAK_PCT))
    return min(hard_max, max(min_peak_long_run_km(total_weeks, peak_weekly_km), proportional))


def build_long_run_progression(
    schedule: PhaseSchedule, peak_weekly_km: float
) -> list[int]:
    """Long run distance (km) for every week of the plan.

    Args:
        schedule: Output of create_periodization().
        peak_weekly_km: Peak weekly distance of the plan.

    Returns:
        One whole-km distance per week, each at least MIN_LONG_RUN_KM.
    """
    total_weeks = schedule.total_weeks
    start = start_long_run_km(peak_weekly_km)
    peak = max_long_run_km(total_weeks, peak_weekly_km)

    build_up_weeks = schedule.weeks_in_phase(TrainingPhase.BASE) + schedule.weeks_in_phase(
        TrainingPhase.BUILD
    )
    if build_up_weeks > 1:
        increment = (peak - start) / (build_up_weeks - 1)
    else:
        increment = LONG_RUN_DEFAULT_INCREMENT_KM

    taper_fractions = TAPER_LONG_RUN_FRACTIONS[schedule.weeks_in_phase(TrainingPhase.TAPER)]

    progression: list[int] = []
    build_up_idx = 0
    taper_idx = 0
    for week in range(1, total_weeks + 1):
        phase = schedule.phase_for_week(week)

        if phase == TrainingPhase.BASE:
            km = min(start + build_up_idx * increment, peak - BASE_LONG_RUN_HEADROOM_KM)
            build_up_idx += 1
        elif phase == TrainingPhase.BUILD:
            km = min(start + build_up_idx * increment, peak)
            build_up_idx += 1
        elif phase == TrainingPhase.PEAK:
            km = peak
        else:
            km = round_int(peak * taper_fractions[taper_idx])
            taper_idx += 1

        if schedule.is_deload(week):
            km = round_int(km * DELOAD_LONG_RUN_FRACTION)

        progression.append(max(MIN_LONG_RUN_KM, round_int(km)))

    return progression
