"""Periodization math: phase allocation, deload cadence, volume targets.

Implements a Pfitzinger-style marathon macrocycle:
- Fixed TAPER (2-3 weeks) and PEAK (2 weeks) at the end
- BASE takes ~40% of the remaining weeks, BUILD the rest
- Deload weeks on a 3:1 cadence inside BASE and BUILD only

References:
    Pfitzinger & Douglas (2009), Advanced Marathoning, 2nd ed.
    Damsted et al. (2019), weekly volume progression and injury risk.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date

import numpy as np

from marathon_engine.math.rounding import round_int
from marathon_engine.models.enums import (
    BASE_SHARE_OF_REMAINDER,
    BASE_VOLUME_RAMP,
    BUILD_VOLUME_RAMP,
    DELOAD_INTERVAL,
    DELOAD_VOLUME_FRACTION,
    HIGH_BASE_GROWTH_RATE,
    LOADING_WEEK_SHARE,
    LOW_BASE_GROWTH_RATE,
    LOW_BASE_THRESHOLD_KM,
    MAX_PLAN_WEEKS,
    MAX_TAPER_WEEKS,
    MIN_BASE_WEEKS,
    MIN_PLAN_WEEKS,
    MIN_TAPER_WEEKS,
    PEAK_VOLUME_FRACTION,
    PEAK_WEEKS,
    TAPER_LONG_PLAN_THRESHOLD,
    TAPER_VOLUME_FRACTIONS,
    TrainingPhase,
)


@dataclass(frozen=True)
class PhaseSpec:
    """Specification for a single training phase within the macrocycle."""

    phase: TrainingPhase
    start_week: int  # 1-indexed
    end_week: int  # inclusive
    duration_weeks: int


@dataclass(frozen=True)
class PhaseSchedule:
    """Week-by-week output of the periodization planner.

    All sequences are indexed by ``week - 1``.
    """

    phases: tuple[TrainingPhase, ...]
    deload_weeks: frozenset[int]
    volume_multipliers: tuple[float, ...]

    @property
    def total_weeks(self) -> int:
        return len(self.phases)

    def phase_for_week(self, week: int) -> TrainingPhase:
        return self.phases[week - 1]

    def is_deload(self, week: int) -> bool:
        return week in self.deload_weeks

    def weeks_in_phase(self, phase: TrainingPhase) -> int:
        return sum(1 for p in self.phases if p == phase)


def taper_weeks_for(total_weeks: int) -> int:
    """Taper length: 3 weeks for plans of 12+ weeks, else 2."""
    return MAX_TAPER_WEEKS if total_weeks >= TAPER_LONG_PLAN_THRESHOLD else MIN_TAPER_WEEKS


def allocate_phases(total_weeks: int) -> list[PhaseSpec]:
    """Allocate BASE/BUILD/PEAK/TAPER across the plan.

    Args:
        total_weeks: Plan length, MIN_PLAN_WEEKS to MAX_PLAN_WEEKS.

    Returns:
        List of PhaseSpec in chronological order.

    Raises:
        ValueError: If total_weeks is outside the supported range.
    """
    if not MIN_PLAN_WEEKS <= total_weeks <= MAX_PLAN_WEEKS:
        raise ValueError(
            f"Plan must be {MIN_PLAN_WEEKS}-{MAX_PLAN_WEEKS} weeks, got {total_weeks}"
        )

    taper_weeks = taper_weeks_for(total_weeks)
    remaining = total_weeks - taper_weeks - PEAK_WEEKS
    base_weeks = max(MIN_BASE_WEEKS, math.ceil(remaining * BASE_SHARE_OF_REMAINDER))
    build_weeks = remaining - base_weeks

    phase_durations = [
        (TrainingPhase.BASE, base_weeks),
        (TrainingPhase.BUILD, build_weeks),
        (TrainingPhase.PEAK, PEAK_WEEKS),
        (TrainingPhase.TAPER, taper_weeks),
    ]

    phases: list[PhaseSpec] = []
    current_week = 1
    for phase_type, duration in phase_durations:
        if duration > 0:
            phases.append(
                PhaseSpec(
                    phase=phase_type,
                    start_week=current_week,
                    end_week=current_week + duration - 1,
                    duration_weeks=duration,
                )
            )
            current_week += duration
    return phases


def _ramp(start: float, stop: float, weeks: int) -> list[float]:
    """Linear ramp from *start* to *stop* over *weeks* entries."""
    return [float(x) for x in np.linspace(start, stop, num=weeks)]


def _phase_multipliers(spec: PhaseSpec) -> list[float]:
    if spec.phase == TrainingPhase.BASE:
        return _ramp(*BASE_VOLUME_RAMP, spec.duration_weeks)
    if spec.phase == TrainingPhase.BUILD:
        return _ramp(*BUILD_VOLUME_RAMP, spec.duration_weeks)
    if spec.phase == TrainingPhase.PEAK:
        return [PEAK_VOLUME_FRACTION] * spec.duration_weeks
    fractions = TAPER_VOLUME_FRACTIONS[spec.duration_weeks]
    return list(fractions[: spec.duration_weeks])


def create_periodization(total_weeks: int) -> PhaseSchedule:
    """Build the phase, deload and volume-multiplier schedule for a plan.

    Volume multipliers are fractions of the plan's peak weekly distance:
    BASE ramps 0.75 -> 0.90, BUILD 0.90 -> 1.00, PEAK holds 1.00, TAPER
    steps down 0.75/0.60/0.40 (or 0.65/0.40 for a 2-week taper).  Every
    3rd week counted from week 1 is a deload while still in BASE or BUILD,
    and its multiplier is scaled by 0.72.

    Raises:
        ValueError: If total_weeks is outside the supported range.
    """
    specs = allocate_phases(total_weeks)

    phases: list[TrainingPhase] = []
    multipliers: list[float] = []
    for spec in specs:
        phases.extend([spec.phase] * spec.duration_weeks)
        multipliers.extend(_phase_multipliers(spec))

    loading_end = sum(
        s.duration_weeks for s in specs
        if s.phase in (TrainingPhase.BASE, TrainingPhase.BUILD)
    )
    deload_weeks = frozenset(
        w for w in range(DELOAD_INTERVAL, loading_end + 1, DELOAD_INTERVAL)
    )
    for week in deload_weeks:
        multipliers[week - 1] *= DELOAD_VOLUME_FRACTION

    return PhaseSchedule(
        phases=tuple(phases),
        deload_weeks=deload_weeks,
        volume_multipliers=tuple(multipliers),
    )


def peak_weekly_volume(base_km: float, total_weeks: int) -> int:
    """Peak weekly distance reachable from *base_km* over the plan.

    Assumes ~75% of the pre-taper weeks are loading weeks and compounds
    8% per loading week for bases under 35 km (7% otherwise).
    """
    loading_weeks = round_int((total_weeks - taper_weeks_for(total_weeks)) * LOADING_WEEK_SHARE)
    growth = LOW_BASE_GROWTH_RATE if base_km < LOW_BASE_THRESHOLD_KM else HIGH_BASE_GROWTH_RATE
    return round_int(base_km * growth ** loading_weeks)


def compute_plan_weeks(start_date: date, race_date: date) -> int:
    """Whole weeks from *start_date* to *race_date*, clamped to 8-16."""
    weeks = (race_date - start_date).days // 7
    return max(MIN_PLAN_WEEKS, min(MAX_PLAN_WEEKS, weeks))
