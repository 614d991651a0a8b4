"""Workout template factory.

One constructor per archetype.  Each clamps its distance to a minimum,
lays out warm-up / main / cool-down (or interval) segments with a pace
zone each, and estimates duration from the zones' faster bounds.

Workouts come back unplaced: no date, week 0.  The plan assembler binds
them to the calendar.
"""

from __future__ import annotations

from collections.abc import Sequence

from marathon_engine.math.rounding import round_half_up, round_int
from marathon_engine.models.enums import (
    MAX_MP_SHARE_OF_LONG_RUN,
    MIN_CRUISE_KM,
    MIN_EASY_KM,
    MIN_INTERVAL_KM,
    MIN_LONG_RUN_KM,
    MIN_MEDIUM_LONG_KM,
    MIN_MP_LONG_RUN_KM,
    MIN_PROGRESSION_KM,
    MIN_RECOVERY_KM,
    MIN_REPETITION_KM,
    MIN_TEMPO_KM,
    PROGRESSION_EASY_SHARE,
    PROGRESSION_MARATHON_SHARE,
    SegmentType,
    WorkoutType,
    ZoneType,
)
from marathon_engine.models.pace_zones import PaceZones
from marathon_engine.models.workout import Workout, WorkoutSegment
from marathon_engine.workout_builder.description_builder import (
    interval_rest_description,
    long_run_description,
    mp_long_run_description,
)


# 2 km warm-up plus the shortest cool-down around a rep block
_EASY_LEGS_KM = 3


def estimate_duration_min(segments: Sequence[WorkoutSegment], paces: PaceZones) -> int:
    """Whole minutes to run *segments* at each zone's faster bound."""
    seconds = sum(
        (seg.distance_km or 0.0) * paces.get(seg.zone).lower for seg in segments
    )
    return round_int(seconds / 60)


def _workout(
    workout_type: WorkoutType,
    title: str,
    description: str,
    distance_km: float,
    segments: list[WorkoutSegment],
    paces: PaceZones,
) -> Workout:
    return Workout(
        workout_type=workout_type,
        title=title,
        description=description,
        total_distance_km=distance_km,
        estimated_duration_min=estimate_duration_min(segments, paces),
        segments=tuple(segments),
    )


def create_easy_run(distance_km: float, paces: PaceZones) -> Workout:
    """Daniels E-pace run: 1 km warm-up, easy main set, 1 km cool-down."""
    d = max(distance_km, MIN_EASY_KM)
    segments = [
        WorkoutSegment(SegmentType.WARMUP, ZoneType.RECOVERY, 1, description="1 km warm-up"),
        WorkoutSegment(SegmentType.MAIN, ZoneType.EASY, max(d - 2, 1), description="Main set at easy pace (E)"),
        WorkoutSegment(SegmentType.COOLDOWN, ZoneType.RECOVERY, 1, description="1 km cool-down"),
    ]
    return _workout(
        WorkoutType.EASY,
        f"Easy Run - {d:.1f} km",
        "Relaxed run in the easy zone (Daniels E-pace). You should be able to hold a conversation.",
        d, segments, paces,
    )


def create_recovery_run(distance_km: float, paces: PaceZones) -> Workout:
    """Single very easy leg in the recovery zone."""
    d = max(distance_km, MIN_RECOVERY_KM)
    segments = [
        WorkoutSegment(SegmentType.MAIN, ZoneType.RECOVERY, d, description="Recovery pace - truly easy"),
    ]
    return _workout(
        WorkoutType.RECOVERY,
        f"Recovery Run - {d:.1f} km",
        "Very easy regeneration run. Leave the ego at home; this is active recovery.",
        d, segments, paces,
    )


def create_medium_long_run(distance_km: float, paces: PaceZones) -> Workout:
    """Pfitzinger medium-long run: a steady aerobic run shorter than the long run."""
    d = max(distance_km, MIN_MEDIUM_LONG_KM)
    segments = [
        WorkoutSegment(SegmentType.WARMUP, ZoneType.RECOVERY, 1, description="1 km warm-up"),
        WorkoutSegment(SegmentType.MAIN, ZoneType.EASY, max(d - 2, 1), description="Steady easy pace"),
        WorkoutSegment(SegmentType.COOLDOWN, ZoneType.RECOVERY, 1, description="1 km cool-down"),
    ]
    return _workout(
        WorkoutType.MEDIUM_LONG,
        f"Medium Long Run - {d:.1f} km",
        "Pfitzinger medium-long run: longer than a normal easy run, builds aerobic "
        "capacity without the fatigue of a full long run.",
        d, segments, paces,
    )


def create_long_run(distance_km: float, paces: PaceZones) -> Workout:
    """Purely aerobic long run."""
    d = max(distance_km, MIN_LONG_RUN_KM)
    segments = [
        WorkoutSegment(SegmentType.WARMUP, ZoneType.RECOVERY, 2, description="2 km warm-up"),
        WorkoutSegment(SegmentType.MAIN, ZoneType.EASY, max(d - 3, 1), description="Easy pace - stay relaxed"),
        WorkoutSegment(SegmentType.COOLDOWN, ZoneType.RECOVERY, 1, description="1 km cool-down"),
    ]
    return _workout(
        WorkoutType.LONG, f"Long Run - {d:.1f} km", long_run_description(d), d, segments, paces,
    )


def create_long_run_mp(distance_km: float, mp_km: float, paces: PaceZones) -> Workout:
    """Long run finishing with a marathon-pace block of at most 45% of the distance."""
    d = max(distance_km, MIN_MP_LONG_RUN_KM)
    mp = min(mp_km, round_int(d * MAX_MP_SHARE_OF_LONG_RUN))
    segments = [
        WorkoutSegment(SegmentType.WARMUP, ZoneType.RECOVERY, 2, description="2 km warm-up"),
        WorkoutSegment(SegmentType.MAIN, ZoneType.EASY, max(d - mp - 3, 2), description="Easy pace"),
        WorkoutSegment(
            SegmentType.MAIN, ZoneType.MARATHON, mp,
            description=f"{mp:g} km @ marathon pace - race simulation",
        ),
        WorkoutSegment(SegmentType.COOLDOWN, ZoneType.RECOVERY, 1, description="1 km cool-down"),
    ]
    return _workout(
        WorkoutType.LONG_WITH_MARATHON_PACE,
        f"MP Long Run - {d:.0f} km ({mp:g} km @ MP)",
        mp_long_run_description(d, mp),
        d, segments, paces,
    )


def create_tempo_run(distance_km: float, tempo_km: float, paces: PaceZones) -> Workout:
    """Daniels threshold run: continuous T-pace block between easy legs."""
    d = max(distance_km, MIN_TEMPO_KM)
    t = max(1, min(tempo_km, d - 3))
    segments = [
        WorkoutSegment(SegmentType.WARMUP, ZoneType.EASY, 2, description="2 km warm-up"),
        WorkoutSegment(SegmentType.MAIN, ZoneType.TEMPO, t, description=f"{t:g} km @ threshold pace (T)"),
        WorkoutSegment(SegmentType.COOLDOWN, ZoneType.EASY, max(d - t - 2, 1), description="Cool-down"),
    ]
    return _workout(
        WorkoutType.TEMPO,
        f"Tempo Run - {t:g} km @ T-pace",
        f"Daniels threshold run: {t:g} km at lactate threshold. Should feel "
        "comfortably hard; you can still speak in short sentences.",
        d, segments, paces,
    )


def create_cruise_intervals(
    distance_km: float, rep_km: float, repeats: int, paces: PaceZones
) -> Workout:
    """Daniels cruise intervals: repeats of *rep_km* at T-pace with 60 s jogs."""
    tempo_km = round_half_up(rep_km * repeats, 2)
    d = max(distance_km, MIN_CRUISE_KM, tempo_km + _EASY_LEGS_KM)
    segments = [
        WorkoutSegment(SegmentType.WARMUP, ZoneType.EASY, 2, description="2 km warm-up"),
        WorkoutSegment(
            SegmentType.INTERVAL, ZoneType.TEMPO, tempo_km, repeats=repeats,
            description=f"{repeats}x {rep_km:.1f} km @ T-pace, 60s jog recovery",
        ),
        WorkoutSegment(
            SegmentType.COOLDOWN, ZoneType.EASY, max(round_half_up(d - tempo_km - 2, 2), 1),
            description="Cool-down",
        ),
    ]
    return _workout(
        WorkoutType.TEMPO,
        f"Cruise Intervals - {repeats}x {rep_km:.1f} km @ T-pace",
        f"Daniels cruise intervals: {repeats} reps of {rep_km:.1f} km with a 60s jog. "
        "Same threshold stimulus as a continuous tempo with less strain.",
        d, segments, paces,
    )


def create_interval_session(
    total_km: float, rep_m: int, repeats: int, paces: PaceZones
) -> Workout:
    """Daniels I-pace session: repeats of *rep_m* metres at VO2max pace."""
    interval_km = rep_m * repeats / 1000
    d = max(total_km, MIN_INTERVAL_KM, interval_km + _EASY_LEGS_KM)
    segments = [
        WorkoutSegment(SegmentType.WARMUP, ZoneType.EASY, 2, description="2 km warm-up + drills + 4 strides"),
        WorkoutSegment(
            SegmentType.INTERVAL, ZoneType.INTERVAL, interval_km, repeats=repeats,
            description=interval_rest_description(rep_m, repeats),
        ),
        WorkoutSegment(
            SegmentType.COOLDOWN, ZoneType.EASY, max(round_half_up(d - interval_km - 2, 2), 1),
            description="Cool-down",
        ),
    ]
    return _workout(
        WorkoutType.INTERVALS,
        f"VO2max Intervals - {repeats}x {rep_m}m",
        f"Daniels I-pace: {repeats} reps of {rep_m}m to raise VO2max. "
        "Jog recovery of 50-90% of the rep time.",
        d, segments, paces,
    )


def create_repetition_session(
    total_km: float, rep_m: int, repeats: int, paces: PaceZones
) -> Workout:
    """Daniels R-pace session: short fast reps with full recovery."""
    rep_km = rep_m * repeats / 1000
    d = max(total_km, MIN_REPETITION_KM, rep_km + _EASY_LEGS_KM)
    segments = [
        WorkoutSegment(SegmentType.WARMUP, ZoneType.EASY, 2, description="2 km warm-up + drills + strides"),
        WorkoutSegment(
            SegmentType.INTERVAL, ZoneType.REPETITION, rep_km, repeats=repeats,
            description=f"{repeats}x {rep_m}m @ R-pace, full recovery (jog = rep time)",
        ),
        WorkoutSegment(
            SegmentType.COOLDOWN, ZoneType.EASY, max(round_half_up(d - rep_km - 2, 2), 1),
            description="Cool-down",
        ),
    ]
    return _workout(
        WorkoutType.REPETITION,
        f"Repetitions - {repeats}x {rep_m}m",
        f"Daniels R-pace: {repeats}x {rep_m}m fast with full recovery. "
        "Improves running economy and neuromuscular power.",
        d, segments, paces,
    )


def create_progression_run(distance_km: float, paces: PaceZones) -> Workout:
    """Easy -> marathon pace -> threshold, no separate warm-up or cool-down."""
    d = max(distance_km, MIN_PROGRESSION_KM)
    easy_km = round_int(d * PROGRESSION_EASY_SHARE)
    mp_km = round_int(d * PROGRESSION_MARATHON_SHARE)
    tempo_km = max(d - easy_km - mp_km, 1)
    segments = [
        WorkoutSegment(SegmentType.MAIN, ZoneType.EASY, easy_km, description=f"{easy_km} km easy pace - settle in"),
        WorkoutSegment(SegmentType.MAIN, ZoneType.MARATHON, mp_km, description=f"{mp_km} km marathon pace - pick it up"),
        WorkoutSegment(SegmentType.MAIN, ZoneType.TEMPO, tempo_km, description=f"{tempo_km:g} km threshold pace - finish strong"),
    ]
    return _workout(
        WorkoutType.PROGRESSION,
        f"Progression Run - {d:.0f} km",
        "Start easy and build: easy -> marathon pace -> threshold. "
        "Rehearses the negative split for race day.",
        d, segments, paces,
    )
