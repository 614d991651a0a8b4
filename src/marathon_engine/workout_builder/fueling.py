"""Fueling guidance for long runs.

Long and MP long runs of 16 km or more get pre-run, during-run and
post-run carbohydrate advice, tiered by distance.

References:
    Jeukendrup (2014). A step towards personalized sports nutrition:
        carbohydrate intake during exercise. Sports Med 44(S1):25-33.
    Thomas et al. (2016). ACSM position stand: nutrition and athletic
        performance. Med Sci Sports Exerc 48(3):543-568.
    Burke et al. (2011). Carbohydrates for training and competition.
        J Sports Sci 29(S1):S17-S27.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from marathon_engine.models.enums import (
    FUELING_LONG_DISTANCE_KM,
    FUELING_MEDIUM_DISTANCE_KM,
    FUELING_MIN_DISTANCE_KM,
    WorkoutType,
)

_LONG_RUN_TYPES = frozenset({WorkoutType.LONG, WorkoutType.LONG_WITH_MARATHON_PACE})


@dataclass(frozen=True)
class FuelingTip:
    """Nutrition advice attached to a single long run."""

    title: str
    timing: str
    details: tuple[str, ...] = field(default_factory=tuple)
    during_run: str = ""
    after_run: str = ""


def get_fueling_tips(workout_type: WorkoutType, distance_km: float) -> FuelingTip | None:
    """Return fueling advice for a workout, or None if it needs none.

    Args:
        workout_type: Archetype of the workout.
        distance_km: Planned total distance.
    """
    if workout_type not in _LONG_RUN_TYPES:
        return None

    with_mp = workout_type == WorkoutType.LONG_WITH_MARATHON_PACE
    if distance_km >= FUELING_LONG_DISTANCE_KM:
        return _tips_30_plus(with_mp)
    if distance_km >= FUELING_MEDIUM_DISTANCE_KM:
        return _tips_24_to_30(with_mp)
    if distance_km >= FUELING_MIN_DISTANCE_KM:
        return _tips_16_to_24()
    return None


def _tips_16_to_24() -> FuelingTip:
    return FuelingTip(
        title="Fueling: Long Run (16-24 km)",
        timing="Evening before + morning",
        details=(
            "Evening before: carbohydrate-rich meal (pasta, rice, potatoes)",
            "2-3h before the run: 1-2 g carbohydrate per kg body weight",
            "Example: oats with banana and honey, or toast with jam",
            "Drink 400-600 ml in the 2h before the start",
        ),
        during_run=(
            "From 60 min: 30-60 g carbohydrate per hour (gel, sports drink or banana). "
            "Small sips of water every 15-20 min."
        ),
        after_run=(
            "Within 30 min: carbohydrate + protein at 3:1. "
            "Example: chocolate milk, banana + yoghurt, or a recovery shake."
        ),
    )


def _tips_24_to_30(with_mp: bool) -> FuelingTip:
    during = (
        "60-90 g carbohydrate per hour (2-3 gels or gel + sports drink). "
        "Start early (km 5-8), not once you feel tired."
    )
    if with_mp:
        during += " Take another gel before the marathon-pace block."
    return FuelingTip(
        title="Fueling: MP Long Run (24-30 km)" if with_mp else "Fueling: Long Run (24-30 km)",
        timing="24h before + morning",
        details=(
            "24h before: raise carbohydrate intake to 7-8 g/kg body weight",
            "Evening before: large portion of pasta or rice, low fibre and fat",
            "2-3h before the run: 2 g carbohydrate per kg (150 g at 75 kg)",
            "Example breakfast: big porridge, white bread with honey, banana, juice",
            "Nothing new: only use food you have already tested",
        ),
        during_run=during,
        after_run=(
            "Within 30 min: 1-1.2 g carbohydrate/kg + 0.3 g protein/kg. "
            "Keep eating regularly for 4h."
        ),
    )


def _tips_30_plus(with_mp: bool) -> FuelingTip:
    during = (
        "60-90 g carbohydrate per hour, exactly as on race day. "
        "First gel from km 5, drink every 15 min."
    )
    if with_mp:
        during += " Before the marathon-pace block: last gel + water, then refuel every 30 min."
    during += " Test your gels and drinks now, not on race day."
    return FuelingTip(
        title=(
            "Fueling: MP Long Run (30+ km) - race simulation"
            if with_mp
            else "Fueling: Long Run (30+ km) - race rehearsal"
        ),
        timing="48h before (carb loading)",
        details=(
            "Carb loading: 8-10 g carbohydrate/kg/day for the 48h before the run",
            "At 75 kg that is 600-750 g carbohydrate per day",
            "Example day: porridge + banana, pasta, rice with chicken, bread, juice, dried fruit",
            "Low fibre, fat and protein to leave room for carbohydrate",
            "3h before the run: 2-3 g carbohydrate/kg (150-225 g at 75 kg)",
            "Use this run as the dress rehearsal for race-day nutrition",
        ),
        during_run=during,
        after_run=(
            "Carbohydrate + protein straight away (shake, chocolate milk), "
            "then carbohydrate-rich meals every 2h for 6-8h. Drink plenty, with electrolytes."
        ),
    )
