"""Garmin Connect JSON serialization for planned workouts.

Converts a Workout (plus the plan's PaceZones) into Garmin Connect-compatible
JSON that can be imported via Garmin Connect web/app and synced to a watch.

All functions are pure (no I/O, no network calls).
"""

from __future__ import annotations

import json
import re

from marathon_engine.models.enums import SegmentType, ZoneType
from marathon_engine.models.pace_zones import PaceZones
from marathon_engine.models.workout import Workout, WorkoutSegment

# Garmin enforces limits on certain text fields.
_GARMIN_NAME_MAX = 32
_GARMIN_DESCRIPTION_MAX = 1024
_GARMIN_STEP_NOTES_MAX = 200

DEFAULT_REST_SECONDS = 120

# Garmin stepTypeId / stepTypeKey pairs.
_WARMUP = (1, "warmup")
_COOLDOWN = (2, "cooldown")
_INTERVAL = (3, "interval")
_RECOVERY = (4, "recovery")
_REST = (5, "rest")
_REPEAT = (6, "repeat")

_STEP_TYPES = {
    SegmentType.WARMUP: _WARMUP,
    SegmentType.COOLDOWN: _COOLDOWN,
    SegmentType.MAIN: _INTERVAL,
    SegmentType.INTERVAL: _INTERVAL,
    SegmentType.REST: _REST,
}

_SPORT_TYPE = {
    "sportTypeId": 1,
    "sportTypeKey": "running",
    "displayOrder": 1,
}

_REST_MINUTES = re.compile(r"(\d+(?:\.\d+)?)\s*min", re.IGNORECASE)
_REST_SECONDS = re.compile(r"(\d+)\s*(?:s|sec)\b", re.IGNORECASE)


def to_garmin_json(workout: Workout, pace_zones: PaceZones) -> dict:
    """Convert a Workout to a Garmin Connect-compatible dict."""
    steps = []
    for order, seg in enumerate(workout.segments, start=1):
        if seg.segment_type == SegmentType.INTERVAL and (seg.repeats or 0) > 1:
            steps.append(_convert_repeat_segment(seg, order, pace_zones))
        else:
            steps.append(_convert_segment(seg, order, pace_zones))

    return {
        "workoutName": workout.title[:_GARMIN_NAME_MAX],
        "description": workout.description[:_GARMIN_DESCRIPTION_MAX],
        "sportType": dict(_SPORT_TYPE),
        "estimatedDurationInSecs": workout.estimated_duration_min * 60,
        "estimatedDistanceInMeters": workout.total_distance_km * 1000,
        "workoutSegments": [
            {
                "segmentOrder": 1,
                "sportType": dict(_SPORT_TYPE),
                "workoutSteps": steps,
            }
        ],
    }


def to_garmin_json_string(workout: Workout, pace_zones: PaceZones, indent: int = 2) -> str:
    """Convert a Workout to a Garmin-compatible JSON string."""
    return json.dumps(to_garmin_json(workout, pace_zones), indent=indent)


def parse_rest_seconds(description: str) -> int:
    """Recovery time between reps as stated in a segment description.

    ``"3 min jog recovery"`` -> 180, ``"60s jog"`` -> 60.  Falls back to
    DEFAULT_REST_SECONDS when the text names no duration.
    """
    match = _REST_MINUTES.search(description)
    if match:
        return round(float(match.group(1)) * 60)
    match = _REST_SECONDS.search(description)
    if match:
        return int(match.group(1))
    return DEFAULT_REST_SECONDS


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _step_type(type_pair: tuple[int, str]) -> dict:
    return {"stepTypeId": type_pair[0], "stepTypeKey": type_pair[1]}


def _executable_step(
    step_order: int,
    type_pair: tuple[int, str],
    distance_km: float | None,
    duration_s: float | None,
    target: dict,
    notes: str = "",
) -> dict:
    """Build an ExecutableStepDTO."""
    result = {
        "type": "ExecutableStepDTO",
        "stepOrder": step_order,
        "stepType": _step_type(type_pair),
    }

    # Duration / end condition
    if distance_km is not None and distance_km > 0:
        result["endCondition"] = {
            "conditionTypeId": 3,
            "conditionTypeKey": "distance",
        }
        result["endConditionValue"] = round(distance_km * 1000, 1)  # km → m
    elif duration_s is not None and duration_s > 0:
        result["endCondition"] = {
            "conditionTypeId": 2,
            "conditionTypeKey": "time",
        }
        result["endConditionValue"] = duration_s
    else:
        result["endCondition"] = {
            "conditionTypeId": 1,
            "conditionTypeKey": "lap.button",
        }
        result["endConditionValue"] = None

    result.update(target)

    if notes:
        result["stepNotes"] = notes[:_GARMIN_STEP_NOTES_MAX]

    return result


def _convert_segment(seg: WorkoutSegment, step_order: int, pace_zones: PaceZones) -> dict:
    """Build an ExecutableStepDTO for a single segment."""
    duration_s = seg.duration_min * 60 if seg.duration_min is not None else None
    if seg.segment_type == SegmentType.REST:
        target = _no_target()
    else:
        target = _pace_target(seg.zone, pace_zones)
    return _executable_step(
        step_order,
        _STEP_TYPES[seg.segment_type],
        seg.distance_km,
        duration_s,
        target,
        seg.description,
    )


def _convert_repeat_segment(seg: WorkoutSegment, step_order: int, pace_zones: PaceZones) -> dict:
    """Build a RepeatGroupDTO of [work, jog recovery] for an interval segment."""
    work = _executable_step(
        1,
        _INTERVAL,
        seg.rep_distance_km,
        None,
        _pace_target(seg.zone, pace_zones),
        seg.description,
    )
    recovery = _executable_step(
        2,
        _RECOVERY,
        None,
        parse_rest_seconds(seg.description),
        _pace_target(ZoneType.RECOVERY, pace_zones),
    )
    return {
        "type": "RepeatGroupDTO",
        "stepOrder": step_order,
        "stepType": _step_type(_REPEAT),
        "numberOfIterations": seg.repeats,
        "endCondition": {
            "conditionTypeId": 7,
            "conditionTypeKey": "iterations",
        },
        "endConditionValue": seg.repeats,
        "workoutSteps": [work, recovery],
    }


def _pace_target(zone: ZoneType, pace_zones: PaceZones) -> dict:
    """Pace target for *zone*: faster bound (low s/km) becomes higher m/s (targetValueOne)."""
    band = pace_zones.get(zone)
    return {
        "targetType": {
            "workoutTargetTypeId": 6,
            "workoutTargetTypeKey": "pace.zone",
        },
        "targetValueOne": _pace_s_per_km_to_m_per_s(band.lower),
        "targetValueTwo": _pace_s_per_km_to_m_per_s(band.upper),
    }


def _no_target() -> dict:
    return {
        "targetType": {
            "workoutTargetTypeId": 1,
            "workoutTargetTypeKey": "no.target",
        },
        "targetValueOne": None,
        "targetValueTwo": None,
    }


def _pace_s_per_km_to_m_per_s(s_per_km: float) -> float:
    """Convert pace in seconds/km to speed in meters/second.

    Example: 300 s/km (5:00/km) → 1000/300 ≈ 3.333 m/s
    """
    return 1000.0 / s_per_km
