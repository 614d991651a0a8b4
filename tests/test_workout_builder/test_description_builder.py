"""Tests for titles, descriptions and display labels."""

from __future__ import annotations

import pytest

from marathon_engine.models.enums import SegmentType, TrainingPhase, WorkoutType, ZoneType
from marathon_engine.workout_builder.description_builder import (
    PHASE_LABELS,
    SEGMENT_LABELS,
    WORKOUT_LABELS,
    ZONE_LABELS,
    interval_rest_description,
    long_run_description,
    mp_long_run_description,
    workout_heading,
)


class TestLabels:
    @pytest.mark.parametrize(
        "labels,enum_cls",
        [
            (PHASE_LABELS, TrainingPhase),
            (WORKOUT_LABELS, WorkoutType),
            (ZONE_LABELS, ZoneType),
            (SEGMENT_LABELS, SegmentType),
        ],
    )
    def test_every_member_labelled(self, labels: dict, enum_cls) -> None:
        assert set(labels) == set(enum_cls)


class TestLongRunDescription:
    def test_30_km_carb_loading(self) -> None:
        assert "carb loading" in long_run_description(30)

    def test_24_km_dinner_before(self) -> None:
        assert "dinner" in long_run_description(24)

    def test_short_long_run_focus_on_base(self) -> None:
        assert "aerobic base" in long_run_description(18)

    def test_mp_description_names_block(self) -> None:
        assert "8 km at marathon pace" in mp_long_run_description(22, 8)
        assert mp_long_run_description(32, 12).startswith("Race simulation!")


class TestIntervalRest:
    def test_long_reps_get_3_min(self) -> None:
        assert "3 min jog" in interval_rest_description(1200, 5)

    def test_short_reps_get_2_min(self) -> None:
        assert "2 min jog" in interval_rest_description(800, 6)


class TestWorkoutHeading:
    def test_with_phase(self) -> None:
        assert workout_heading(WorkoutType.TEMPO, TrainingPhase.BUILD, 5) == "Build W5 - Tempo Run"

    def test_unplaced(self) -> None:
        assert workout_heading(WorkoutType.EASY, None, 0) == "Easy Run"
