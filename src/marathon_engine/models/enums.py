"""Enumerations and tuned constants for the marathon plan engine.

Planning constants follow Daniels' Running Formula and Pfitzinger & Douglas,
Advanced Marathoning.  Several of them are heuristics rather than derived
values; they are kept here so they can be tuned in one place.
"""

from enum import IntEnum, auto


class RunnerLevel(IntEnum):
    """Self-reported experience level."""

    BEGINNER = auto()
    INTERMEDIATE = auto()
    ADVANCED = auto()


class TrainingPhase(IntEnum):
    """Macrocycle phases, in chronological order."""

    BASE = auto()
    BUILD = auto()
    PEAK = auto()
    TAPER = auto()


class WorkoutType(IntEnum):
    """Workout archetypes produced by the template factory."""

    EASY = auto()
    LONG = auto()
    LONG_WITH_MARATHON_PACE = auto()
    MEDIUM_LONG = auto()
    TEMPO = auto()
    INTERVALS = auto()
    REPETITION = auto()
    RECOVERY = auto()
    PROGRESSION = auto()
    REST = auto()


class SegmentType(IntEnum):
    """Kind of leg within a workout."""

    WARMUP = auto()
    MAIN = auto()
    COOLDOWN = auto()
    INTERVAL = auto()
    REST = auto()


class ZoneType(IntEnum):
    """Daniels pace zones ordered fastest to slowest."""

    REPETITION = 1
    INTERVAL = 2
    TEMPO = 3
    MARATHON = 4
    EASY = 5
    RECOVERY = 6


# ---------------------------------------------------------------------------
# Daniels & Gilbert oxygen power model
# ---------------------------------------------------------------------------
# VO2 cost (ml/kg/min) = a + b*v + c*v^2 with v in m/min
VO2_COST_INTERCEPT = -4.60
VO2_COST_LINEAR = 0.182258
VO2_COST_QUADRATIC = 0.000104

# Sustainable %VO2max = base + k1*exp(-r1*t) + k2*exp(-r2*t) with t in min
VO2MAX_FRACTION_BASE = 0.8
VO2MAX_FRACTION_K1 = 0.1894393
VO2MAX_FRACTION_R1 = 0.012778
VO2MAX_FRACTION_K2 = 0.2989558
VO2MAX_FRACTION_R2 = 0.1932605

# Newton-Raphson inversion of the VO2 cost curve
VELOCITY_INITIAL_GUESS_M_PER_MIN = 200.0
VELOCITY_MAX_ITERATIONS = 50
VELOCITY_TOLERANCE_M_PER_MIN = 0.001
MIN_VELOCITY_M_PER_MIN = 50.0

# Marathon time fixed-point search
MARATHON_DISTANCE_M = 42195.0
MARATHON_INITIAL_GUESS_MIN = 240.0
MARATHON_MAX_ITERATIONS = 100
MARATHON_TOLERANCE_M = 1.0

# ---------------------------------------------------------------------------
# Pace zone derivation — Daniels' Running Formula (4th ed.)
# ---------------------------------------------------------------------------
ZONE_NOMINAL_DURATION_MIN = 30.0
EASY_VDOT_FRACTION = (0.65, 0.79)       # (slow, fast)
RECOVERY_VDOT_FRACTION = (0.58, 0.65)   # (slow, fast)
TEMPO_RACE_DURATION_MIN = 60.0
INTERVAL_RACE_DURATION_MIN = 11.0
REPETITION_RACE_DURATION_MIN = 3.5
ZONE_BUFFER_S_PER_KM = 3

# ---------------------------------------------------------------------------
# Periodization — Pfitzinger 3:1 mesocycles
# ---------------------------------------------------------------------------
MIN_PLAN_WEEKS = 8
MAX_PLAN_WEEKS = 16

# Plans of this length or longer get a 3-week taper, shorter ones 2 weeks
TAPER_LONG_PLAN_THRESHOLD = 12
MIN_TAPER_WEEKS = 2
MAX_TAPER_WEEKS = 3
PEAK_WEEKS = 2
BASE_SHARE_OF_REMAINDER = 0.40
MIN_BASE_WEEKS = 2

# Every 3rd week of base+build is a deload (3 load : 1 recovery)
DELOAD_INTERVAL = 3
DELOAD_VOLUME_FRACTION = 0.72

BASE_VOLUME_RAMP = (0.75, 0.90)
BUILD_VOLUME_RAMP = (0.90, 1.00)
PEAK_VOLUME_FRACTION = 1.0
TAPER_VOLUME_FRACTIONS = {
    3: (0.75, 0.60, 0.40),
    2: (0.65, 0.40),
}

# Peak weekly volume growth: 7-8% per loading week, under the 10% rule
LOADING_WEEK_SHARE = 0.75
LOW_BASE_THRESHOLD_KM = 35.0
LOW_BASE_GROWTH_RATE = 1.08
HIGH_BASE_GROWTH_RATE = 1.07

# ---------------------------------------------------------------------------
# Long run progression
# ---------------------------------------------------------------------------
LONG_RUN_START_MIN_KM = 14
LONG_RUN_START_PCT = 0.30
LONG_RUN_HARD_MAX_PCT = 0.60
LONG_RUN_CAP_KM = 35
LONG_RUN_PEAK_PCT = 0.45
LONG_RUN_MIN_PEAK_LONG_PLAN_KM = 32      # >= 14 weeks
LONG_RUN_MIN_PEAK_MEDIUM_PLAN_KM = 30    # 10-13 weeks
LONG_RUN_MIN_PEAK_SHORT_PLAN_KM = 28     # 8-9 weeks
LONG_RUN_LONG_PLAN_WEEKS = 14
LONG_RUN_MEDIUM_PLAN_WEEKS = 10
LONG_RUN_HIGH_VOLUME_KM = 55
LONG_RUN_DEFAULT_INCREMENT_KM = 2.0
BASE_LONG_RUN_HEADROOM_KM = 4
TAPER_LONG_RUN_FRACTIONS = {
    3: (0.70, 0.55, 0.35),
    2: (0.60, 0.35),
}
DELOAD_LONG_RUN_FRACTION = 0.75
MIN_LONG_RUN_KM = 8

# ---------------------------------------------------------------------------
# Weekly scheduling
# ---------------------------------------------------------------------------
MIN_RUNS_PER_WEEK = 3
MAX_RUNS_PER_WEEK = 5
MEDIUM_LONG_FRACTION = 0.60
MIN_OTHER_RUN_KM = 4
BASE_TEMPO_FRACTION = 0.35
TAPER_TEMPO_FRACTION = 0.30
DELOAD_TEMPO_FRACTION = 0.25
BUILD_MP_FRACTION = 0.30
PEAK_MP_FRACTION = 0.40

# ---------------------------------------------------------------------------
# Workout templates — minimum distances (km)
# ---------------------------------------------------------------------------
MIN_EASY_KM = 3
MIN_RECOVERY_KM = 3
MIN_MEDIUM_LONG_KM = 6
MIN_MP_LONG_RUN_KM = 10
MIN_TEMPO_KM = 5
MIN_CRUISE_KM = 6
MIN_INTERVAL_KM = 6
MIN_REPETITION_KM = 5
MIN_PROGRESSION_KM = 6
MAX_MP_SHARE_OF_LONG_RUN = 0.45
PROGRESSION_EASY_SHARE = 0.5
PROGRESSION_MARATHON_SHARE = 0.3

# ---------------------------------------------------------------------------
# Fueling — Jeukendrup (2014), Burke et al. (2011)
# ---------------------------------------------------------------------------
FUELING_MIN_DISTANCE_KM = 16
FUELING_MEDIUM_DISTANCE_KM = 24
FUELING_LONG_DISTANCE_KM = 30
