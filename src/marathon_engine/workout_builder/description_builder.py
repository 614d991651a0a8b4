"""Description builder — titles, descriptions and display labels.

Text only; nothing here feeds back into planning decisions.
"""

from __future__ import annotations

from marathon_engine.models.enums import (
    FUELING_LONG_DISTANCE_KM,
    FUELING_MEDIUM_DISTANCE_KM,
    SegmentType,
    TrainingPhase,
    WorkoutType,
    ZoneType,
)

PHASE_LABELS: dict[TrainingPhase, str] = {
    TrainingPhase.BASE: "Base",
    TrainingPhase.BUILD: "Build",
    TrainingPhase.PEAK: "Peak",
    TrainingPhase.TAPER: "Taper",
}

WORKOUT_LABELS: dict[WorkoutType, str] = {
    WorkoutType.EASY: "Easy Run",
    WorkoutType.LONG: "Long Run",
    WorkoutType.LONG_WITH_MARATHON_PACE: "MP Long Run",
    WorkoutType.MEDIUM_LONG: "Medium Long Run",
    WorkoutType.TEMPO: "Tempo Run",
    WorkoutType.INTERVALS: "VO2max Intervals",
    WorkoutType.REPETITION: "Repetitions",
    WorkoutType.RECOVERY: "Recovery Run",
    WorkoutType.PROGRESSION: "Progression Run",
    WorkoutType.REST: "Rest Day",
}

ZONE_LABELS: dict[ZoneType, str] = {
    ZoneType.RECOVERY: "Recovery",
    ZoneType.EASY: "Easy",
    ZoneType.MARATHON: "Marathon Pace",
    ZoneType.TEMPO: "Threshold",
    ZoneType.INTERVAL: "VO2max",
    ZoneType.REPETITION: "Speed",
}

SEGMENT_LABELS: dict[SegmentType, str] = {
    SegmentType.WARMUP: "Warm-up",
    SegmentType.MAIN: "Main",
    SegmentType.COOLDOWN: "Cool-down",
    SegmentType.INTERVAL: "Intervals",
    SegmentType.REST: "Rest",
}


def long_run_description(distance_km: float) -> str:
    """Aerobic long run text with fueling advice scaled to distance."""
    if distance_km >= FUELING_LONG_DISTANCE_KM:
        return (
            "Long run - race preparation! Start carb loading 48h before "
            "(8-10 g carbohydrate/kg). During the run: 60-90 g carbohydrate/hour from km 5."
        )
    if distance_km >= FUELING_MEDIUM_DISTANCE_KM:
        return (
            "Long run. Carbohydrate-rich dinner the evening before. "
            "From 60 min: 30-60 g carbohydrate/hour (gel or sports drink)."
        )
    return "Long, relaxed run. Focus: time on feet and building the aerobic base."


def mp_long_run_description(distance_km: float, mp_km: float) -> str:
    """MP long run text with fueling advice scaled to distance."""
    if distance_km >= FUELING_LONG_DISTANCE_KM:
        return (
            f"Race simulation! {mp_km:g} km at marathon pace. Carb load for 48h before. "
            "During: 60-90 g carbohydrate/hour from km 5, exactly as on race day."
        )
    return (
        f"Pfitzinger style: {mp_km:g} km at marathon pace built into the long run. "
        "Carbohydrate-rich dinner the evening before, gels or sports drink from 60 min."
    )


def interval_rest_description(rep_m: int, repeats: int) -> str:
    """Interval block text including the jog recovery between reps."""
    if rep_m >= 1000:
        return f"{repeats}x {rep_m}m @ I-pace, 3 min jog recovery (50-90% of rep time)"
    return f"{repeats}x {rep_m}m @ I-pace, 2 min jog recovery"


def workout_heading(workout_type: WorkoutType, phase: TrainingPhase | None, week_number: int) -> str:
    """Calendar heading such as ``"Build W5 - Tempo Run"``."""
    label = WORKOUT_LABELS.get(workout_type, "Workout")
    if phase is None or week_number <= 0:
        return label
    return f"{PHASE_LABELS[phase]} W{week_number} - {label}"
