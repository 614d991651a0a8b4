"""Tests for the long run progression."""

import pytest

from marathon_engine.math.long_run import (
    build_long_run_progression,
    max_long_run_km,
    min_peak_long_run_km,
    start_long_run_km,
)
from marathon_engine.math.periodization import create_periodization
from marathon_engine.models.enums import TrainingPhase


class TestStartLongRun:
    def test_floor_of_14_km(self) -> None:
        assert start_long_run_km(30) == 14

    def test_30_percent_of_peak(self) -> None:
        assert start_long_run_km(80) == 24


class TestMaxLongRun:
    @pytest.mark.parametrize(
        "total,peak_km,expected",
        [(16, 40, 32), (12, 40, 30), (12, 60, 32), (9, 40, 28)],
    )
    def test_plan_length_floor(self, total: int, peak_km: float, expected: int) -> None:
        assert min_peak_long_run_km(total, peak_km) == expected

    def test_capped_at_60_percent_of_peak_week(self) -> None:
        # floor 30 km, but 60% of 43 km is 26 km
        assert max_long_run_km(12, 43) == 26

    def test_capped_at_35_km(self) -> None:
        assert max_long_run_km(16, 100) == 35

    def test_proportional_above_floor(self) -> None:
        # 45% of 75 = 33.75 -> 34 beats the 32 km floor
        assert max_long_run_km(16, 75) == 34


class TestBuildLongRunProgression:
    def test_12_week_plan_from_43_km_peak(self) -> None:
        schedule = create_periodization(12)
        assert build_long_run_progression(schedule, 43) == [
            14, 16, 14, 20, 22, 18, 26, 26, 26, 18, 14, 9,
        ]

    @pytest.mark.parametrize("total", range(8, 17))
    @pytest.mark.parametrize("peak_km", [20, 43, 79, 120])
    def test_bounds(self, total: int, peak_km: int) -> None:
        schedule = create_periodization(total)
        progression = build_long_run_progression(schedule, peak_km)
        peak = max_long_run_km(total, peak_km)
        assert len(progression) == total
        assert all(8 <= km for km in progression)
        assert all(km <= max(peak, 8) for km in progression)

    @pytest.mark.parametrize("total", range(8, 17))
    def test_peak_weeks_hold_peak(self, total: int) -> None:
        schedule = create_periodization(total)
        progression = build_long_run_progression(schedule, 60)
        peak = max_long_run_km(total, 60)
        for week in range(1, total + 1):
            if schedule.phase_for_week(week) == TrainingPhase.PEAK:
                assert progression[week - 1] == peak

    @pytest.mark.parametrize("total", range(8, 17))
    def test_taper_decreases(self, total: int) -> None:
        schedule = create_periodization(total)
        progression = build_long_run_progression(schedule, 60)
        taper = [
            progression[w - 1] for w in range(1, total + 1)
            if schedule.phase_for_week(w) == TrainingPhase.TAPER
        ]
        assert taper == sorted(taper, reverse=True)

    def test_deload_weeks_cut_long_run(self) -> None:
        schedule = create_periodization(16)
        progression = build_long_run_progression(schedule, 79)
        for week in schedule.deload_weeks:
            assert progression[week - 1] < progression[week]

    def test_whole_kilometres(self) -> None:
        progression = build_long_run_progression(create_periodization(14), 55)
        assert all(isinstance(km, int) for km in progression)
