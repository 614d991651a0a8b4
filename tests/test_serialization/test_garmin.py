"""Tests for Garmin Connect JSON serialization."""

from __future__ import annotations

import json

import pytest

from marathon_engine.models.enums import SegmentType, WorkoutType, ZoneType
from marathon_engine.models.workout import Workout, WorkoutSegment
from marathon_engine.serialization.garmin import (
    DEFAULT_REST_SECONDS,
    _pace_s_per_km_to_m_per_s,
    parse_rest_seconds,
    to_garmin_json,
    to_garmin_json_string,
)
from marathon_engine.workout_builder.templates import (
    create_cruise_intervals,
    create_easy_run,
    create_interval_session,
    create_repetition_session,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _make_workout(segments, **overrides) -> Workout:
    defaults = {
        "workout_type": WorkoutType.EASY,
        "title": "Easy Run",
        "description": "Relaxed run",
        "total_distance_km": 8.0,
        "estimated_duration_min": 45,
        "segments": tuple(segments),
    }
    defaults.update(overrides)
    return Workout(**defaults)


def _steps(payload: dict) -> list[dict]:
    return payload["workoutSegments"][0]["workoutSteps"]


# ---------------------------------------------------------------------------
# Pace conversion
# ---------------------------------------------------------------------------

class TestPaceConversion:
    def test_5_min_per_km(self) -> None:
        """5:00/km = 300 s/km → 3.333 m/s."""
        assert _pace_s_per_km_to_m_per_s(300.0) == pytest.approx(3.333, abs=0.01)

    def test_6_min_per_km(self) -> None:
        """6:00/km = 360 s/km → 2.778 m/s."""
        assert _pace_s_per_km_to_m_per_s(360.0) == pytest.approx(2.778, abs=0.01)


# ---------------------------------------------------------------------------
# Rest parsing
# ---------------------------------------------------------------------------

class TestParseRestSeconds:
    @pytest.mark.parametrize(
        "description,expected",
        [
            ("5x 1000m @ I-pace, 3 min jog recovery", 180),
            ("6x 800m @ I-pace, 2 min jog recovery", 120),
            ("4x 1.6 km @ T-pace, 60s jog recovery", 60),
            ("8x 400m, 90 sec standing rest", 90),
            ("8x 200m @ R-pace, full recovery", DEFAULT_REST_SECONDS),
            ("", DEFAULT_REST_SECONDS),
        ],
    )
    def test_parse(self, description: str, expected: int) -> None:
        assert parse_rest_seconds(description) == expected


# ---------------------------------------------------------------------------
# Full workout conversion
# ---------------------------------------------------------------------------

class TestToGarminJson:
    def test_top_level_structure(self, vdot40_paces) -> None:
        result = to_garmin_json(create_easy_run(9, vdot40_paces), vdot40_paces)
        assert result["workoutName"] == "Easy Run - 9.0 km"
        assert result["sportType"]["sportTypeKey"] == "running"
        assert result["estimatedDistanceInMeters"] == 9000
        assert len(result["workoutSegments"]) == 1
        assert len(_steps(result)) == 3

    def test_step_types_and_order(self, vdot40_paces) -> None:
        steps = _steps(to_garmin_json(create_easy_run(9, vdot40_paces), vdot40_paces))
        assert [s["stepType"]["stepTypeKey"] for s in steps] == ["warmup", "interval", "cooldown"]
        assert [s["stepOrder"] for s in steps] == [1, 2, 3]
        assert all(s["type"] == "ExecutableStepDTO" for s in steps)

    def test_distance_end_condition_in_metres(self, vdot40_paces) -> None:
        steps = _steps(to_garmin_json(create_easy_run(9, vdot40_paces), vdot40_paces))
        assert steps[1]["endCondition"]["conditionTypeKey"] == "distance"
        assert steps[1]["endConditionValue"] == 7000

    def test_pace_target_from_zone(self, vdot40_paces) -> None:
        steps = _steps(to_garmin_json(create_easy_run(9, vdot40_paces), vdot40_paces))
        easy = vdot40_paces.easy
        assert steps[1]["targetType"]["workoutTargetTypeKey"] == "pace.zone"
        assert steps[1]["targetValueOne"] == pytest.approx(1000.0 / easy.lower)
        assert steps[1]["targetValueTwo"] == pytest.approx(1000.0 / easy.upper)
        assert steps[1]["targetValueOne"] > steps[1]["targetValueTwo"]

    def test_time_and_lap_button_end_conditions(self, vdot40_paces) -> None:
        workout = _make_workout([
            WorkoutSegment(SegmentType.WARMUP, ZoneType.EASY, duration_min=10),
            WorkoutSegment(SegmentType.MAIN, ZoneType.EASY),
        ])
        steps = _steps(to_garmin_json(workout, vdot40_paces))
        assert steps[0]["endCondition"]["conditionTypeKey"] == "time"
        assert steps[0]["endConditionValue"] == 600
        assert steps[1]["endCondition"]["conditionTypeKey"] == "lap.button"
        assert steps[1]["endConditionValue"] is None

    def test_rest_step_has_no_target(self, vdot40_paces) -> None:
        workout = _make_workout([
            WorkoutSegment(SegmentType.REST, ZoneType.RECOVERY, duration_min=2),
        ])
        step = _steps(to_garmin_json(workout, vdot40_paces))[0]
        assert step["stepType"]["stepTypeKey"] == "rest"
        assert step["targetType"]["workoutTargetTypeKey"] == "no.target"

    def test_step_notes_from_description(self, vdot40_paces) -> None:
        steps = _steps(to_garmin_json(create_easy_run(9, vdot40_paces), vdot40_paces))
        assert steps[0]["stepNotes"] == "1 km warm-up"

    def test_name_truncated(self, vdot40_paces) -> None:
        workout = _make_workout([], title="A" * 50, description="B" * 2000)
        result = to_garmin_json(workout, vdot40_paces)
        assert len(result["workoutName"]) == 32
        assert len(result["description"]) == 1024


class TestRepeatGroups:
    def test_interval_session_becomes_repeat_group(self, vdot40_paces) -> None:
        workout = create_interval_session(10, 1000, 5, vdot40_paces)
        group = _steps(to_garmin_json(workout, vdot40_paces))[1]
        assert group["type"] == "RepeatGroupDTO"
        assert group["stepOrder"] == 2
        assert group["endCondition"]["conditionTypeKey"] == "iterations"
        assert group["endConditionValue"] == 5
        assert group["numberOfIterations"] == 5

    def test_children_are_work_then_recovery(self, vdot40_paces) -> None:
        workout = create_interval_session(10, 1000, 5, vdot40_paces)
        work, recovery = _steps(to_garmin_json(workout, vdot40_paces))[1]["workoutSteps"]
        assert work["stepType"]["stepTypeKey"] == "interval"
        assert work["endConditionValue"] == 1000
        assert work["targetValueOne"] == pytest.approx(1000.0 / vdot40_paces.interval.lower)
        assert recovery["stepType"]["stepTypeKey"] == "recovery"
        assert recovery["endCondition"]["conditionTypeKey"] == "time"
        assert recovery["endConditionValue"] == 180

    def test_cruise_interval_rest(self, vdot40_paces) -> None:
        workout = create_cruise_intervals(10, 1.6, 4, vdot40_paces)
        work, recovery = _steps(to_garmin_json(workout, vdot40_paces))[1]["workoutSteps"]
        assert work["endConditionValue"] == pytest.approx(1600)
        assert recovery["endConditionValue"] == 60

    def test_repetition_default_rest(self, vdot40_paces) -> None:
        workout = create_repetition_session(8, 200, 8, vdot40_paces)
        _, recovery = _steps(to_garmin_json(workout, vdot40_paces))[1]["workoutSteps"]
        assert recovery["endConditionValue"] == DEFAULT_REST_SECONDS

    def test_single_repeat_stays_flat(self, vdot40_paces) -> None:
        workout = _make_workout([
            WorkoutSegment(SegmentType.INTERVAL, ZoneType.INTERVAL, 1.0, repeats=1),
        ])
        step = _steps(to_garmin_json(workout, vdot40_paces))[0]
        assert step["type"] == "ExecutableStepDTO"
        assert step["endConditionValue"] == 1000


class TestToGarminJsonString:
    def test_valid_json(self, vdot40_paces) -> None:
        workout = create_interval_session(10, 1000, 5, vdot40_paces)
        parsed = json.loads(to_garmin_json_string(workout, vdot40_paces))
        assert parsed == to_garmin_json(workout, vdot40_paces)
