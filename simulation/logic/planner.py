"""
Improvement Planner

Works backward from a target tier to the score gap, then proposes how to
close it across the grade, activity and volunteer sub-scores.

Each category is an independent rule evaluated in a fixed order; a rule
returns None when its sub-score is already at the cap.
"""

from typing import Callable, List, Optional

from .contracts import (
    StudentRecordSnapshot,
    SchoolAdmissionInfo,
    SubScores,
    ImprovementSuggestion,
    ImprovementPlan,
)
from .constants import (
    FitTier,
    ScoreCategory,
    Difficulty,
    CATEGORY_LABELS,
    BEST_RANK,
    WORST_RANK,
    DEFAULT_AVERAGE_RANK,
    GRADE_SCORE_MAX,
    ACTIVITY_SCORE_MAX,
    VOLUNTEER_SCORE_MAX,
    POINTS_PER_ACTIVITY,
    VOLUNTEER_HOURS_PER_POINT,
    FIT_TARGET_MARGIN,
    CHALLENGE_TARGET_MARGIN,
    FLOOR_TARGET_SCORE,
    GRADE_SUGGESTION_CEILING,
    MAX_GRADE_GAIN,
    GRADE_GAP_SHARE,
    GRADE_TIME_ESTIMATE,
    HARD_GRADE_GAIN,
    MEDIUM_GRADE_GAIN,
    MEDIUM_ACTIVITY_COUNT,
    MEDIUM_VOLUNTEER_HOURS,
    DURATION_BANDS,
    DEFAULT_DURATION_WEEKS,
)
from .score_calculator import calculate_sub_scores
from .classifier import fit_threshold
from .simulator import ceil_points
from .display import round_display


def target_score_for(tier: FitTier, threshold: float) -> float:
    """Composite score to aim for to land comfortably in a tier."""
    if tier == FitTier.FIT:
        return threshold + FIT_TARGET_MARGIN
    if tier == FitTier.CHALLENGE:
        return threshold + CHALLENGE_TARGET_MARGIN
    return FLOOR_TARGET_SCORE


def estimate_weeks(gap: float) -> int:
    for min_gap, weeks in DURATION_BANDS:
        if gap > min_gap:
            return weeks
    return DEFAULT_DURATION_WEEKS


# =============================================================================
# SUGGESTION RULES
# =============================================================================

SuggestionRule = Callable[[StudentRecordSnapshot, SubScores, float], Optional[ImprovementSuggestion]]


def grade_suggestion(
    snapshot: StudentRecordSnapshot,
    scores: SubScores,
    gap: float,
) -> Optional[ImprovementSuggestion]:
    """
    Close up to half the gap (max 15 points) through grades.

    The point gain is translated back into a lower average rank.
    """
    if scores.grade_score >= GRADE_SUGGESTION_CEILING:
        return None

    gain = min(MAX_GRADE_GAIN, gap * GRADE_GAP_SHARE)
    if gain <= 0:
        return None

    current_avg = snapshot.average_rank if snapshot.average_rank is not None else DEFAULT_AVERAGE_RANK
    rank_drop = gain / GRADE_SCORE_MAX * (WORST_RANK - BEST_RANK)
    target_avg = max(BEST_RANK, current_avg - rank_drop)

    if gain > HARD_GRADE_GAIN:
        difficulty = Difficulty.HARD
    elif gain > MEDIUM_GRADE_GAIN:
        difficulty = Difficulty.MEDIUM
    else:
        difficulty = Difficulty.EASY

    return ImprovementSuggestion(
        category=ScoreCategory.GRADE,
        area=CATEGORY_LABELS[ScoreCategory.GRADE],
        current_value=f"Average rank {current_avg:.1f}",
        target_value=f"Average rank {target_avg:.1f}",
        potential_gain=round_display(gain),
        difficulty=difficulty,
        time_estimate=GRADE_TIME_ESTIMATE,
    )


def activity_suggestion(
    snapshot: StudentRecordSnapshot,
    scores: SubScores,
    gap: float,
) -> Optional[ImprovementSuggestion]:
    """Fill the remaining activity headroom."""
    if scores.activity_score >= ACTIVITY_SCORE_MAX:
        return None

    headroom = ACTIVITY_SCORE_MAX - scores.activity_score
    needed = ceil_points(headroom / POINTS_PER_ACTIVITY)

    return ImprovementSuggestion(
        category=ScoreCategory.ACTIVITY,
        area=CATEGORY_LABELS[ScoreCategory.ACTIVITY],
        current_value=f"{snapshot.activity_count} activities",
        target_value=f"{snapshot.activity_count + needed} activities",
        potential_gain=round_display(headroom),
        difficulty=Difficulty.MEDIUM if needed > MEDIUM_ACTIVITY_COUNT else Difficulty.EASY,
        time_estimate=f"{needed * 2}-{needed * 4} weeks",
    )


def volunteer_suggestion(
    snapshot: StudentRecordSnapshot,
    scores: SubScores,
    gap: float,
) -> Optional[ImprovementSuggestion]:
    """Fill the remaining volunteer headroom."""
    if scores.volunteer_score >= VOLUNTEER_SCORE_MAX:
        return None

    headroom = VOLUNTEER_SCORE_MAX - scores.volunteer_score
    needed_hours = ceil_points(headroom * VOLUNTEER_HOURS_PER_POINT)
    min_weeks = ceil_points(needed_hours / 4)
    max_weeks = ceil_points(needed_hours / 2)

    return ImprovementSuggestion(
        category=ScoreCategory.VOLUNTEER,
        area=CATEGORY_LABELS[ScoreCategory.VOLUNTEER],
        current_value=f"{snapshot.volunteer_hours:g} hours",
        target_value=f"{snapshot.volunteer_hours + needed_hours:g} hours",
        potential_gain=round_display(headroom),
        difficulty=Difficulty.MEDIUM if needed_hours > MEDIUM_VOLUNTEER_HOURS else Difficulty.EASY,
        time_estimate=f"{min_weeks}-{max_weeks} weeks",
    )


SUGGESTION_RULES: List[SuggestionRule] = [
    grade_suggestion,
    activity_suggestion,
    volunteer_suggestion,
]


def build_improvement_plan(
    snapshot: StudentRecordSnapshot,
    school: SchoolAdmissionInfo,
    target_tier: FitTier = FitTier.FIT,
) -> ImprovementPlan:
    """
    Build the improvement plan toward a target tier.

    Args:
        snapshot: Student's real records
        school: Target school with its cutoff
        target_tier: Tier to aim for (default FIT)

    Returns:
        ImprovementPlan with suggestions in grade, activity, volunteer order
    """
    scores = calculate_sub_scores(snapshot)
    threshold = fit_threshold(school.cutoff_grade)
    target_score = target_score_for(target_tier, threshold)
    gap = target_score - scores.composite_score

    improvements: List[ImprovementSuggestion] = []
    for rule in SUGGESTION_RULES:
        suggestion = rule(snapshot, scores, gap)
        if suggestion:
            improvements.append(suggestion)

    return ImprovementPlan(
        school_id=school.school_id,
        school_name=school.name,
        target_tier=target_tier,
        current_score=round_display(scores.composite_score),
        target_score=round_display(target_score),
        gap=round_display(gap),
        improvements=improvements,
        estimated_weeks=estimate_weeks(gap),
    )
