"""Serialization module — plan persistence and device export formats."""

from marathon_engine.serialization.garmin import to_garmin_json, to_garmin_json_string
from marathon_engine.serialization.plan_json import (
    load_plan,
    load_profile,
    plan_from_dict,
    plan_to_dict,
    profile_from_dict,
    profile_to_dict,
    save_plan,
)

__all__ = [
    "load_plan",
    "load_profile",
    "plan_from_dict",
    "plan_to_dict",
    "profile_from_dict",
    "profile_to_dict",
    "save_plan",
    "to_garmin_json",
    "to_garmin_json_string",
]
