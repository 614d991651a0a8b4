"""VDOT estimation and pace zone derivation.

Implements the Daniels & Gilbert oxygen power model: the oxygen cost of
running is quadratic in velocity, and the sustainable fraction of VO2max
decays bi-exponentially with race duration.  VDOT is their ratio.

References:
    Daniels & Gilbert (1979). Oxygen Power: Performance Tables for
        Distance Runners.
    Daniels (2022). Daniels' Running Formula, 4th ed.
"""

from __future__ import annotations

import logging
import math

from marathon_engine.math.rounding import round_half_up, round_int
from marathon_engine.models.enums import (
    EASY_VDOT_FRACTION,
    INTERVAL_RACE_DURATION_MIN,
    MARATHON_DISTANCE_M,
    MARATHON_INITIAL_GUESS_MIN,
    MARATHON_MAX_ITERATIONS,
    MARATHON_TOLERANCE_M,
    MIN_VELOCITY_M_PER_MIN,
    RECOVERY_VDOT_FRACTION,
    REPETITION_RACE_DURATION_MIN,
    TEMPO_RACE_DURATION_MIN,
    VELOCITY_INITIAL_GUESS_M_PER_MIN,
    VELOCITY_MAX_ITERATIONS,
    VELOCITY_TOLERANCE_M_PER_MIN,
    VO2_COST_INTERCEPT,
    VO2_COST_LINEAR,
    VO2_COST_QUADRATIC,
    VO2MAX_FRACTION_BASE,
    VO2MAX_FRACTION_K1,
    VO2MAX_FRACTION_K2,
    VO2MAX_FRACTION_R1,
    VO2MAX_FRACTION_R2,
    ZONE_BUFFER_S_PER_KM,
    ZONE_NOMINAL_DURATION_MIN,
    ZoneType,
)
from marathon_engine.models.pace_zones import PaceZone, PaceZones

logger = logging.getLogger(__name__)


def vo2_cost(velocity_m_per_min: float) -> float:
    """Oxygen cost (ml/kg/min) of running at *velocity_m_per_min*."""
    v = velocity_m_per_min
    return VO2_COST_INTERCEPT + VO2_COST_LINEAR * v + VO2_COST_QUADRATIC * v * v


def sustainable_vo2max_fraction(duration_min: float) -> float:
    """Fraction of VO2max sustainable for an effort of *duration_min*."""
    return (
        VO2MAX_FRACTION_BASE
        + VO2MAX_FRACTION_K1 * math.exp(-VO2MAX_FRACTION_R1 * duration_min)
        + VO2MAX_FRACTION_K2 * math.exp(-VO2MAX_FRACTION_R2 * duration_min)
    )


def calculate_vdot(distance_m: float, duration_min: float) -> float:
    """Estimate VDOT from a race or time trial.

    Args:
        distance_m: Distance covered in metres.
        duration_min: Time taken in minutes.

    Returns:
        Unrounded VDOT.

    Raises:
        ValueError: If either argument is non-positive.
    """
    if distance_m <= 0 or duration_min <= 0:
        raise ValueError(
            f"Distance and duration must be positive, got {distance_m} m in {duration_min} min"
        )
    velocity = distance_m / duration_min
    return vo2_cost(velocity) / sustainable_vo2max_fraction(duration_min)


def velocity_at_vdot(
    vdot: float,
    duration_min: float,
    *,
    initial_guess: float = VELOCITY_INITIAL_GUESS_M_PER_MIN,
    max_iterations: int = VELOCITY_MAX_ITERATIONS,
    tolerance: float = VELOCITY_TOLERANCE_M_PER_MIN,
) -> float:
    """Velocity (m/min) a runner of *vdot* can hold for *duration_min*.

    Inverts the VO2 cost curve with Newton-Raphson.  If the iteration cap
    is hit before the step falls under *tolerance*, the last iterate is
    returned.  The result is never below MIN_VELOCITY_M_PER_MIN.
    """
    target_vo2 = vdot * sustainable_vo2max_fraction(duration_min)

    v = initial_guess
    for _ in range(max_iterations):
        slope = VO2_COST_LINEAR + 2 * VO2_COST_QUADRATIC * v
        delta = (vo2_cost(v) - target_vo2) / slope
        v -= delta
        if abs(delta) < tolerance:
            break
    else:
        logger.debug(
            "Velocity solve for VDOT %.2f at %.1f min stopped after %d iterations",
            vdot, duration_min, max_iterations,
        )
    return max(v, MIN_VELOCITY_M_PER_MIN)


def predict_marathon_time(
    vdot: float,
    *,
    initial_guess_min: float = MARATHON_INITIAL_GUESS_MIN,
    max_iterations: int = MARATHON_MAX_ITERATIONS,
    tolerance_m: float = MARATHON_TOLERANCE_M,
) -> float:
    """Predicted marathon finish time in minutes for *vdot*.

    Fixed-point search: rescale the duration guess by the ratio of the
    marathon distance to the distance implied at that duration until the
    error is under *tolerance_m*.  Returns the last guess on cap.
    """
    t = initial_guess_min
    for _ in range(max_iterations):
        predicted_m = velocity_at_vdot(vdot, t) * t
        if abs(predicted_m - MARATHON_DISTANCE_M) < tolerance_m:
            break
        t = t * MARATHON_DISTANCE_M / predicted_m
    else:
        logger.debug(
            "Marathon time search for VDOT %.2f stopped after %d iterations at %.1f min",
            vdot, max_iterations, t,
        )
    return t


def pace_from_velocity(velocity_m_per_min: float) -> float:
    """Convert m/min to seconds per km."""
    return 1000.0 / velocity_m_per_min * 60.0


def _fraction_band(zone: ZoneType, vdot: float, fractions: tuple[float, float]) -> PaceZone:
    slow_fraction, fast_fraction = fractions
    fast_v = velocity_at_vdot(vdot * fast_fraction, ZONE_NOMINAL_DURATION_MIN)
    slow_v = velocity_at_vdot(vdot * slow_fraction, ZONE_NOMINAL_DURATION_MIN)
    return PaceZone(
        zone=zone,
        lower=round_int(pace_from_velocity(fast_v)),
        upper=round_int(pace_from_velocity(slow_v)),
    )


def _buffered_band(zone: ZoneType, vdot: float, duration_min: float) -> PaceZone:
    pace = pace_from_velocity(velocity_at_vdot(vdot, duration_min))
    return PaceZone(
        zone=zone,
        lower=round_int(pace - ZONE_BUFFER_S_PER_KM),
        upper=round_int(pace + ZONE_BUFFER_S_PER_KM),
    )


def calculate_pace_zones(
    recent_duration_min: float, recent_distance_km: float
) -> tuple[PaceZones, float]:
    """Derive VDOT and the six Daniels pace zones from a recent performance.

    Easy (65-79% VDOT) and recovery (58-65%) are fractional bands evaluated
    at a nominal 30 min effort.  Marathon, tempo, interval and repetition
    are race-pace point estimates at the predicted marathon time, 60, 11
    and 3.5 min, widened by a +-3 s/km buffer.

    Args:
        recent_duration_min: Duration of the recent performance in minutes.
        recent_distance_km: Distance of the recent performance in km.

    Returns:
        ``(pace_zones, vdot)`` with VDOT rounded to one decimal.
    """
    vdot = calculate_vdot(recent_distance_km * 1000.0, recent_duration_min)
    marathon_min = predict_marathon_time(vdot)

    zones = PaceZones(
        recovery=_fraction_band(ZoneType.RECOVERY, vdot, RECOVERY_VDOT_FRACTION),
        easy=_fraction_band(ZoneType.EASY, vdot, EASY_VDOT_FRACTION),
        marathon=_buffered_band(ZoneType.MARATHON, vdot, marathon_min),
        tempo=_buffered_band(ZoneType.TEMPO, vdot, TEMPO_RACE_DURATION_MIN),
        interval=_buffered_band(ZoneType.INTERVAL, vdot, INTERVAL_RACE_DURATION_MIN),
        repetition=_buffered_band(ZoneType.REPETITION, vdot, REPETITION_RACE_DURATION_MIN),
    )
    return zones, round_half_up(vdot, 1)
