"""Environment-variable-based configuration for the command-line front end."""

from __future__ import annotations

import os
from pathlib import Path

PROFILE_PATH: Path = Path(os.environ.get("MARATHON_PROFILE", "profile.json")).expanduser()
PLAN_PATH: Path = Path(os.environ.get("MARATHON_PLAN", "plan.json")).expanduser()
LOG_LEVEL: str = os.environ.get("MARATHON_LOG_LEVEL", "INFO").upper()
