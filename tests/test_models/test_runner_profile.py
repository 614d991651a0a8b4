"""Tests for RunnerProfile validation."""

from __future__ import annotations

from datetime import date

import pytest

from marathon_engine.exceptions import InvalidProfileError, MarathonEngineError

TODAY = date(2026, 3, 2)


class TestWeeksUntilRace:
    def test_rounds_down(self, make_profile) -> None:
        assert make_profile(race_date=date(2026, 3, 15)).weeks_until_race(TODAY) == 1

    def test_past_race_is_negative(self, make_profile) -> None:
        assert make_profile(race_date=date(2026, 2, 1)).weeks_until_race(TODAY) < 0


class TestValidate:
    def test_valid_profile_passes(self, intermediate_profile) -> None:
        intermediate_profile.validate(TODAY)

    @pytest.mark.parametrize(
        "overrides",
        [
            {"recent_duration_min": 0},
            {"recent_duration_min": -5.0},
            {"recent_distance_km": 0},
            {"weekly_distance_base_km": -1.0},
            {"runs_per_week": 2, "run_days": (1, 6)},
            {"runs_per_week": 6, "run_days": (0, 1, 2, 3, 4, 5)},
            {"run_days": (1, 3)},
            {"run_days": (1, 1, 6)},
            {"run_days": (1, 3, 7)},
            {"run_days": (-1, 3, 6)},
            {"race_date": date(2026, 3, 8)},
            {"race_date": date(2025, 10, 1)},
        ],
    )
    def test_invalid_profile_raises(self, make_profile, overrides: dict) -> None:
        with pytest.raises(InvalidProfileError):
            make_profile(**overrides).validate(TODAY)

    def test_error_is_value_error(self, make_profile) -> None:
        """Callers catching ValueError or the package base both work."""
        with pytest.raises(ValueError):
            make_profile(recent_distance_km=0).validate(TODAY)
        with pytest.raises(MarathonEngineError):
            make_profile(recent_distance_km=0).validate(TODAY)

    def test_exactly_one_week_is_enough(self, make_profile) -> None:
        make_profile(race_date=date(2026, 3, 9)).validate(TODAY)

    def test_zero_base_allowed(self, make_profile) -> None:
        make_profile(weekly_distance_base_km=0.0).validate(TODAY)
