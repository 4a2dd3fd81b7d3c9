"""
Scoring constants for the shotstats engine.

Ring ranges follow ISSF target scoring: whole-ring targets score 0-10,
tenth-ring (decimal) targets subdivide each ring into .0-.9 with 10.9 as
the best possible shot.
"""

# =============================================================================
# Ring / Bucket Constants
# =============================================================================

MIN_RING = 0                   # Miss
MAX_RING = 10                  # Centre ring
BUCKET_COUNT = MAX_RING - MIN_RING + 1  # 11 buckets, index = ring value

MAX_SHOT_WHOLE = 10.0          # Best whole-ring shot
MAX_SHOT_TENTH = 10.9          # Best tenth-ring shot (inner ten)

# =============================================================================
# Session Defaults
# =============================================================================

# Shots per series assumed when a session has no discipline attached and
# no individual shots were recorded.
DEFAULT_SHOTS_PER_SERIES = 10

# Window used for the trend line on the results chart.
DEFAULT_TREND_WINDOW = 5

# Decimal places for reported averages, trends and percentages.
REPORT_DECIMALS = 1

# =============================================================================
# Session Types
# =============================================================================

SESSION_TYPE_TRAINING = "TRAINING"
SESSION_TYPE_COMPETITION = "WETTKAMPF"

# Types that produce scores; other types (dry fire, mental work) do not.
SCORING_SESSION_TYPES = (SESSION_TYPE_TRAINING, SESSION_TYPE_COMPETITION)

# Filter value that disables a criterion
FILTER_ALL = "all"

# =============================================================================
# Wellbeing
# =============================================================================

WELLBEING_METRICS = ("sleep", "energy", "stress", "motivation")
