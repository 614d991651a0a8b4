"""Weekly workout scheduling."""

from marathon_engine.scheduling.weekly_scheduler import WeekContext, schedule_week

__all__ = ["WeekContext", "schedule_week"]
