"""Plan persistence — plain JSON documents for TrainingPlan and RunnerProfile.

Enums are stored by lowercase member name, dates and timestamps as ISO-8601
strings.  The engine itself never reads these documents; they exist for
storage and for the command-line front end.
"""

from __future__ import annotations

import json
import logging
from datetime import date, datetime
from enum import IntEnum
from pathlib import Path
from typing import Any, TypeVar

from marathon_engine.exceptions import PlanFormatError
from marathon_engine.models.enums import (
    RunnerLevel,
    SegmentType,
    TrainingPhase,
    WorkoutType,
    ZoneType,
)
from marathon_engine.models.pace_zones import PaceZone, PaceZones
from marathon_engine.models.runner_profile import RunnerProfile
from marathon_engine.models.training_plan import TrainingPlan, TrainingWeek
from marathon_engine.models.workout import Workout, WorkoutSegment

logger = logging.getLogger(__name__)

_E = TypeVar("_E", bound=IntEnum)

FORMAT_VERSION = 1


def _enum_out(member: IntEnum | None) -> str | None:
    return None if member is None else member.name.lower()


def _enum_in(enum_cls: type[_E], value: str | None) -> _E | None:
    if value is None:
        return None
    try:
        return enum_cls[value.upper()]
    except (KeyError, AttributeError):
        raise PlanFormatError(f"Unknown {enum_cls.__name__} value {value!r}") from None


def _date_in(value: str | None) -> date | None:
    return None if value is None else date.fromisoformat(value)


def _require_object(data: Any, what: str) -> None:
    if not isinstance(data, dict):
        raise PlanFormatError(f"{what} must be a JSON object, got {type(data).__name__}")


# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------


def profile_to_dict(profile: RunnerProfile) -> dict[str, Any]:
    return {
        "level": _enum_out(profile.level),
        "race_date": profile.race_date.isoformat(),
        "goal_time_min": profile.goal_time_min,
        "recent_duration_min": profile.recent_duration_min,
        "recent_distance_km": profile.recent_distance_km,
        "runs_per_week": profile.runs_per_week,
        "run_days": list(profile.run_days),
        "weekly_distance_base_km": profile.weekly_distance_base_km,
        "height_cm": profile.height_cm,
        "weight_kg": profile.weight_kg,
    }


def profile_from_dict(data: dict[str, Any]) -> RunnerProfile:
    """Build a RunnerProfile from a document.

    Raises:
        PlanFormatError: If a required field is missing or malformed.
    """
    _require_object(data, "Runner profile")
    try:
        return RunnerProfile(
            level=_enum_in(RunnerLevel, data.get("level", "intermediate")),
            race_date=date.fromisoformat(data["race_date"]),
            goal_time_min=float(data.get("goal_time_min", 0.0)),
            recent_duration_min=float(data["recent_duration_min"]),
            recent_distance_km=float(data["recent_distance_km"]),
            runs_per_week=int(data["runs_per_week"]),
            run_days=tuple(int(d) for d in data["run_days"]),
            weekly_distance_base_km=float(data["weekly_distance_base_km"]),
            height_cm=data.get("height_cm"),
            weight_kg=data.get("weight_kg"),
        )
    except PlanFormatError:
        raise
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise PlanFormatError(f"Invalid runner profile: {exc!r}") from exc


# ---------------------------------------------------------------------------
# Plan
# ---------------------------------------------------------------------------


def _segment_to_dict(seg: WorkoutSegment) -> dict[str, Any]:
    return {
        "type": _enum_out(seg.segment_type),
        "zone": _enum_out(seg.zone),
        "distance_km": seg.distance_km,
        "duration_min": seg.duration_min,
        "repeats": seg.repeats,
        "description": seg.description,
    }


def _workout_to_dict(w: Workout) -> dict[str, Any]:
    return {
        "id": w.id,
        "type": _enum_out(w.workout_type),
        "title": w.title,
        "description": w.description,
        "total_distance_km": w.total_distance_km,
        "estimated_duration_min": w.estimated_duration_min,
        "segments": [_segment_to_dict(s) for s in w.segments],
        "week_number": w.week_number,
        "day_of_week": w.day_of_week,
        "date": w.scheduled_date.isoformat() if w.scheduled_date else None,
        "phase": _enum_out(w.phase),
        "completed": w.completed,
        "actual_distance_km": w.actual_distance_km,
        "actual_duration_min": w.actual_duration_min,
        "actual_pace_s_per_km": w.actual_pace_s_per_km,
        "feeling": w.feeling,
        "notes": w.notes,
    }


def plan_to_dict(plan: TrainingPlan) -> dict[str, Any]:
    """Encode *plan* as a JSON-compatible dict."""
    return {
        "format_version": FORMAT_VERSION,
        "id": plan.id,
        "created_at": plan.created_at.isoformat(),
        "profile": profile_to_dict(plan.profile),
        "pace_zones": {
            zone.zone.name.lower(): {"min": zone.lower, "max": zone.upper}
            for zone in plan.pace_zones
        },
        "vdot": plan.vdot,
        "total_weeks": plan.total_weeks,
        "weeks": [
            {
                "week_number": week.week_number,
                "phase": _enum_out(week.phase),
                "total_distance_km": week.total_distance_km,
                "is_deload_week": week.is_deload_week,
                "workouts": [_workout_to_dict(w) for w in week.workouts],
            }
            for week in plan.weeks
        ],
    }


def _segment_from_dict(data: dict[str, Any]) -> WorkoutSegment:
    return WorkoutSegment(
        segment_type=_enum_in(SegmentType, data["type"]),
        zone=_enum_in(ZoneType, data["zone"]),
        distance_km=data.get("distance_km"),
        duration_min=data.get("duration_min"),
        repeats=data.get("repeats"),
        description=data.get("description", ""),
    )


def _workout_from_dict(data: dict[str, Any]) -> Workout:
    return Workout(
        id=data["id"],
        workout_type=_enum_in(WorkoutType, data["type"]),
        title=data["title"],
        description=data["description"],
        total_distance_km=data["total_distance_km"],
        estimated_duration_min=data["estimated_duration_min"],
        segments=tuple(_segment_from_dict(s) for s in data["segments"]),
        week_number=data["week_number"],
        day_of_week=data.get("day_of_week"),
        scheduled_date=_date_in(data.get("date")),
        phase=_enum_in(TrainingPhase, data.get("phase")),
        completed=data.get("completed", False),
        actual_distance_km=data.get("actual_distance_km"),
        actual_duration_min=data.get("actual_duration_min"),
        actual_pace_s_per_km=data.get("actual_pace_s_per_km"),
        feeling=data.get("feeling"),
        notes=data.get("notes"),
    )


def _pace_zones_from_dict(data: dict[str, Any]) -> PaceZones:
    bands = {
        zone.name.lower(): PaceZone(
            zone=zone,
            lower=data[zone.name.lower()]["min"],
            upper=data[zone.name.lower()]["max"],
        )
        for zone in ZoneType
    }
    return PaceZones(**bands)


def plan_from_dict(data: dict[str, Any]) -> TrainingPlan:
    """Decode a dict produced by plan_to_dict().

    Raises:
        PlanFormatError: If the document is malformed.
    """
    _require_object(data, "Plan document")
    try:
        weeks = tuple(
            TrainingWeek(
                week_number=w["week_number"],
                phase=_enum_in(TrainingPhase, w["phase"]),
                total_distance_km=w["total_distance_km"],
                workouts=tuple(_workout_from_dict(x) for x in w["workouts"]),
                is_deload_week=w.get("is_deload_week", False),
            )
            for w in data["weeks"]
        )
        return TrainingPlan(
            id=data["id"],
            created_at=datetime.fromisoformat(data["created_at"]),
            profile=profile_from_dict(data["profile"]),
            pace_zones=_pace_zones_from_dict(data["pace_zones"]),
            vdot=data["vdot"],
            weeks=weeks,
            total_weeks=data["total_weeks"],
        )
    except PlanFormatError:
        raise
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise PlanFormatError(f"Invalid plan document: {exc!r}") from exc


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------


def save_plan(plan: TrainingPlan, path: Path | str) -> Path:
    """Write *plan* to *path* as indented UTF-8 JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(plan_to_dict(plan), indent=2), encoding="utf-8")
    logger.info("Saved plan %s to %s", plan.id, path)
    return path


def load_plan(path: Path | str) -> TrainingPlan:
    """Read a plan written by save_plan().

    Raises:
        FileNotFoundError: If *path* does not exist.
        PlanFormatError: If the file is not a valid plan document.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise PlanFormatError(f"{path} is not valid JSON: {exc}") from exc
    return plan_from_dict(data)


def load_profile(path: Path | str) -> RunnerProfile:
    """Read a runner profile JSON file."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise PlanFormatError(f"{path} is not valid JSON: {exc}") from exc
    return profile_from_dict(data)
