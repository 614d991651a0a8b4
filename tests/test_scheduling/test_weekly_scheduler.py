"""Tests for the weekly workout scheduler."""

from __future__ import annotations

import pytest

from marathon_engine.models.enums import TrainingPhase, WorkoutType
from marathon_engine.scheduling.weekly_scheduler import (
    WeekContext,
    schedule_week,
    select_strategy,
)

RUN_COUNTS = [3, 4, 5]
PHASES = [TrainingPhase.BASE, TrainingPhase.BUILD, TrainingPhase.PEAK, TrainingPhase.TAPER]


def _make_ctx(paces, **overrides) -> WeekContext:
    defaults = {
        "week_number": 4,
        "total_weeks": 12,
        "phase": TrainingPhase.BUILD,
        "is_deload": False,
        "weekly_km": 50,
        "long_run_km": 20,
        "runs_per_week": 4,
        "paces": paces,
    }
    defaults.update(overrides)
    return WeekContext(**defaults)


def _types(workouts) -> list[WorkoutType]:
    return [w.workout_type for w in workouts]


class TestWeekContext:
    def test_other_run_km(self, vdot40_paces) -> None:
        ctx = _make_ctx(vdot40_paces, weekly_km=50, long_run_km=20, runs_per_week=4)
        assert ctx.other_run_km == 10

    def test_other_run_km_floor(self, vdot40_paces) -> None:
        ctx = _make_ctx(vdot40_paces, weekly_km=20, long_run_km=18, runs_per_week=5)
        assert ctx.other_run_km == 4

    def test_medium_long_is_60_percent_of_long(self, vdot40_paces) -> None:
        assert _make_ctx(vdot40_paces, long_run_km=25).medium_long_km == 15

    def test_race_week(self, vdot40_paces) -> None:
        assert _make_ctx(vdot40_paces, week_number=12, total_weeks=12).is_race_week
        assert not _make_ctx(vdot40_paces, week_number=11, total_weeks=12).is_race_week


class TestScheduleSize:
    @pytest.mark.parametrize("runs", RUN_COUNTS)
    @pytest.mark.parametrize("phase", PHASES)
    @pytest.mark.parametrize("is_deload", [False, True])
    def test_exact_run_count_and_long_run_last(
        self, vdot40_paces, runs: int, phase: TrainingPhase, is_deload: bool
    ) -> None:
        ctx = _make_ctx(vdot40_paces, phase=phase, is_deload=is_deload, runs_per_week=runs)
        workouts = schedule_week(ctx)
        assert len(workouts) == runs
        assert workouts[-1].is_long_run
        assert sum(w.is_long_run for w in workouts) == 1

    @pytest.mark.parametrize("runs", RUN_COUNTS)
    def test_race_week_has_no_long_run(self, vdot40_paces, runs: int) -> None:
        ctx = _make_ctx(
            vdot40_paces, phase=TrainingPhase.TAPER, week_number=12, total_weeks=12,
            weekly_km=17, long_run_km=9, runs_per_week=runs,
        )
        workouts = schedule_week(ctx)
        assert len(workouts) == runs
        assert not any(w.is_long_run for w in workouts)
        assert _types(workouts)[-1] == WorkoutType.EASY

    @pytest.mark.parametrize("runs", RUN_COUNTS)
    @pytest.mark.parametrize("phase", PHASES)
    def test_at_most_two_quality_sessions(self, vdot40_paces, runs: int, phase: TrainingPhase) -> None:
        workouts = schedule_week(_make_ctx(vdot40_paces, phase=phase, runs_per_week=runs))
        quality = [w for w in workouts if w.is_quality and not w.is_long_run]
        assert len(quality) <= 2

    @pytest.mark.parametrize("runs", RUN_COUNTS)
    def test_workouts_are_unplaced(self, vdot40_paces, runs: int) -> None:
        for w in schedule_week(_make_ctx(vdot40_paces, runs_per_week=runs)):
            assert w.scheduled_date is None
            assert w.week_number == 0


class TestPhasePatterns:
    def test_base_week_five_runs(self, vdot40_paces) -> None:
        ctx = _make_ctx(vdot40_paces, phase=TrainingPhase.BASE, runs_per_week=5)
        assert _types(schedule_week(ctx)) == [
            WorkoutType.EASY,
            WorkoutType.TEMPO,
            WorkoutType.MEDIUM_LONG,
            WorkoutType.EASY,
            WorkoutType.LONG,
        ]

    def test_base_week_three_runs(self, vdot40_paces) -> None:
        ctx = _make_ctx(vdot40_paces, phase=TrainingPhase.BASE, runs_per_week=3)
        assert _types(schedule_week(ctx)) == [WorkoutType.TEMPO, WorkoutType.EASY, WorkoutType.LONG]

    def test_build_even_week_runs_vo2max_intervals(self, vdot40_paces) -> None:
        workouts = schedule_week(_make_ctx(vdot40_paces, week_number=4))
        assert WorkoutType.INTERVALS in _types(workouts)
        assert workouts[-1].workout_type == WorkoutType.LONG_WITH_MARATHON_PACE

    def test_build_odd_week_runs_cruise_intervals(self, vdot40_paces) -> None:
        workouts = schedule_week(_make_ctx(vdot40_paces, week_number=5))
        assert WorkoutType.INTERVALS not in _types(workouts)
        assert workouts[0].title.startswith("Cruise Intervals")

    def test_build_mp_block_is_30_percent(self, vdot40_paces) -> None:
        long_run = schedule_week(_make_ctx(vdot40_paces, long_run_km=20))[-1]
        assert "(6 km @ MP)" in long_run.title

    def test_peak_week_four_runs(self, vdot40_paces) -> None:
        ctx = _make_ctx(vdot40_paces, phase=TrainingPhase.PEAK, runs_per_week=4)
        workouts = schedule_week(ctx)
        assert _types(workouts) == [
            WorkoutType.INTERVALS,
            WorkoutType.PROGRESSION,
            WorkoutType.EASY,
            WorkoutType.LONG_WITH_MARATHON_PACE,
        ]
        assert "(8 km @ MP)" in workouts[-1].title

    def test_taper_week_plain_long_run(self, vdot40_paces) -> None:
        ctx = _make_ctx(vdot40_paces, phase=TrainingPhase.TAPER, week_number=10)
        assert schedule_week(ctx)[-1].workout_type == WorkoutType.LONG

    def test_deload_overrides_build_pattern(self, vdot40_paces) -> None:
        ctx = _make_ctx(vdot40_paces, phase=TrainingPhase.BUILD, is_deload=True, runs_per_week=5)
        assert _types(schedule_week(ctx)) == [
            WorkoutType.RECOVERY,
            WorkoutType.TEMPO,
            WorkoutType.EASY,
            WorkoutType.EASY,
            WorkoutType.LONG,
        ]


class TestSelectStrategy:
    @pytest.mark.parametrize("phase", PHASES)
    def test_deload_wins(self, phase: TrainingPhase) -> None:
        assert select_strategy(phase, True) is select_strategy(TrainingPhase.BASE, True)

    def test_distinct_phase_patterns(self) -> None:
        strategies = {select_strategy(phase, False) for phase in PHASES}
        assert len(strategies) == 4
