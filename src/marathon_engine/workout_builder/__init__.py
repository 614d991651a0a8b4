"""Workout builder — archetype templates, text and fueling guidance."""

from marathon_engine.workout_builder.fueling import FuelingTip, get_fueling_tips
from marathon_engine.workout_builder.templates import (
    create_cruise_intervals,
    create_easy_run,
    create_interval_session,
    create_long_run,
    create_long_run_mp,
    create_medium_long_run,
    create_progression_run,
    create_recovery_run,
    create_repetition_session,
    create_tempo_run,
)

__all__ = [
    "FuelingTip",
    "create_cruise_intervals",
    "create_easy_run",
    "create_interval_session",
    "create_long_run",
    "create_long_run_mp",
    "create_medium_long_run",
    "create_progression_run",
    "create_recovery_run",
    "create_repetition_session",
    "create_tempo_run",
    "get_fueling_tips",
]
