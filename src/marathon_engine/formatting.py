"""Display formatting for paces, durations and goal times."""

from __future__ import annotations

from marathon_engine.math.rounding import round_int


def format_pace(s_per_km: float) -> str:
    """Pace in seconds per km as ``"m:ss"`` (e.g. 330 -> ``"5:30"``)."""
    total = round_int(s_per_km)
    minutes, seconds = divmod(total, 60)
    return f"{minutes}:{seconds:02d}"


def format_pace_range(lower: float, upper: float) -> str:
    """``"4:55 - 5:05 /km"``; *lower* is the faster bound."""
    return f"{format_pace(lower)} - {format_pace(upper)} /km"


def format_duration(minutes: float) -> str:
    """``"45 min"`` under an hour, ``"1:05h"`` from an hour on."""
    total = round_int(minutes)
    if total < 60:
        return f"{total} min"
    hours, mins = divmod(total, 60)
    return f"{hours}:{mins:02d}h"


def format_goal_time(minutes: float) -> str:
    """Race time in minutes as ``"h:mm:ss"``."""
    total_s = round_int(minutes * 60)
    hours, rem = divmod(total_s, 3600)
    mins, secs = divmod(rem, 60)
    return f"{hours}:{mins:02d}:{secs:02d}"
