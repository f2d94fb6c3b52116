"""
Simulation Engine Constants

Defines the sub-score caps, classification thresholds, scenario deltas and
planner targets used by the admission fit simulator, plus the closed enums
shared by every stage. All values are deterministic with no AI/ML components.
"""

from enum import Enum
from typing import Dict

# =============================================================================
# GRADING SCALE
# =============================================================================

# 9-tier rank scale (1 = best, 9 = worst)
BEST_RANK = 1
WORST_RANK = 9

# Fallback average rank used by the planner when no ranked grade exists
DEFAULT_AVERAGE_RANK = 5.0

# =============================================================================
# SUB-SCORE CAPS
# =============================================================================

GRADE_SCORE_MAX = 50.0
ACTIVITY_SCORE_MAX = 25.0
VOLUNTEER_SCORE_MAX = 15.0
ATTENDANCE_SCORE_MAX = 10.0

POINTS_PER_ACTIVITY = 5.0
VOLUNTEER_HOURS_PER_POINT = 4.0
POINTS_PER_ATTENDANCE_PENALTY = 2.0

# =============================================================================
# CLASSIFICATION
# =============================================================================

class FitTier(str, Enum):
    """Ordinal admission fit tiers."""
    UNLIKELY = "UNLIKELY"
    CHALLENGE = "CHALLENGE"
    FIT = "FIT"


TIER_ORDER: Dict[FitTier, int] = {
    FitTier.UNLIKELY: 0,
    FitTier.CHALLENGE: 1,
    FitTier.FIT: 2,
}

# Threshold used when a school has no published cutoff
DEFAULT_FIT_THRESHOLD = 60.0

# Offset added to the cutoff-derived grade score (activity/volunteer/attendance share)
CUTOFF_THRESHOLD_OFFSET = 25.0

# CHALLENGE covers [threshold - 15, threshold)
CHALLENGE_BAND_WIDTH = 15.0

# Probability estimate shape
PROBABILITY_FLOOR = 5.0
PROBABILITY_CEILING = 95.0
PROBABILITY_BAND_WIDTH = 10.0

# =============================================================================
# SCORE CATEGORIES
# =============================================================================

class ScoreCategory(str, Enum):
    """Sub-score category tagging change factors and suggestions."""
    GRADE = "grade"
    ACTIVITY = "activity"
    VOLUNTEER = "volunteer"
    ATTENDANCE = "attendance"


CATEGORY_LABELS: Dict[ScoreCategory, str] = {
    ScoreCategory.GRADE: "Grades",
    ScoreCategory.ACTIVITY: "Extracurricular activities",
    ScoreCategory.VOLUNTEER: "Volunteer work",
    ScoreCategory.ATTENDANCE: "Attendance",
}

# =============================================================================
# RECOMMENDATION RULES
# =============================================================================

# Simulated sub-scores below these trigger a recommendation
GRADE_FOCUS_THRESHOLD = 40.0
ACTIVITY_TARGET_SCORE = 20.0
VOLUNTEER_TARGET_SCORE = 10.0

# =============================================================================
# SCENARIOS
# =============================================================================

class ScenarioKind(str, Enum):
    """Canned improvement scenarios, in reporting order."""
    GRADE_IMPROVEMENT = "grade_improvement"
    ACTIVITY_GROWTH = "activity_growth"
    VOLUNTEER_GROWTH = "volunteer_growth"
    COMBINED = "combined"


SCENARIO_RANK_DELTA = -1
SCENARIO_EXTRA_ACTIVITIES = 3
SCENARIO_EXTRA_VOLUNTEER_HOURS = 20

SCENARIO_NAMES: Dict[ScenarioKind, str] = {
    ScenarioKind.GRADE_IMPROVEMENT: "Grades up one rank",
    ScenarioKind.ACTIVITY_GROWTH: f"{SCENARIO_EXTRA_ACTIVITIES} more activities",
    ScenarioKind.VOLUNTEER_GROWTH: f"{SCENARIO_EXTRA_VOLUNTEER_HOURS} more volunteer hours",
    ScenarioKind.COMBINED: "Combined improvement (all of the above)",
}

# =============================================================================
# IMPROVEMENT PLANNER
# =============================================================================

class Difficulty(str, Enum):
    """Estimated effort for an improvement suggestion."""
    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"


FIT_TARGET_MARGIN = 10.0        # FIT target = threshold + 10
CHALLENGE_TARGET_MARGIN = -5.0  # CHALLENGE target = threshold - 5
FLOOR_TARGET_SCORE = 40.0

# Grade suggestion is only offered below this grade score
GRADE_SUGGESTION_CEILING = 45.0
MAX_GRADE_GAIN = 15.0
GRADE_GAP_SHARE = 0.5
GRADE_TIME_ESTIMATE = "3-6 months"

HARD_GRADE_GAIN = 10.0
MEDIUM_GRADE_GAIN = 5.0
MEDIUM_ACTIVITY_COUNT = 3
MEDIUM_VOLUNTEER_HOURS = 30

# Overall duration by gap size: (gap strictly greater than, weeks)
DURATION_BANDS = (
    (20.0, 24),
    (10.0, 12),
)
DEFAULT_DURATION_WEEKS = 6

# =============================================================================
# RECORD FILTERS
# =============================================================================

APPROVED_STATUS = "APPROVED"
PUBLISHED_STATUS = "PUBLISHED"

ENGINE_VERSION = "1.0.0"
