"""
Score Calculator

Derives the four sub-scores (grade, activity, volunteer, attendance) from a
student's approved records. Each scorer is clamped to its cap, so missing
or extreme data degrades gracefully instead of raising.
"""

from typing import Dict, List, Optional

from .contracts import GradeEntry, StudentRecords, StudentRecordSnapshot, SubScores
from .constants import (
    BEST_RANK,
    WORST_RANK,
    GRADE_SCORE_MAX,
    ACTIVITY_SCORE_MAX,
    VOLUNTEER_SCORE_MAX,
    ATTENDANCE_SCORE_MAX,
    POINTS_PER_ACTIVITY,
    VOLUNTEER_HOURS_PER_POINT,
    POINTS_PER_ATTENDANCE_PENALTY,
)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def clamp_rank(rank: float) -> float:
    """Clamp a rank into the valid [1, 9] range."""
    return _clamp(rank, BEST_RANK, WORST_RANK)


# =============================================================================
# GRADE AGGREGATION
# =============================================================================

def latest_rank_by_subject(grades: List[GradeEntry]) -> Dict[str, int]:
    """
    Most recent ranked grade for every subject.

    Grades are ordered by year then term, newest first; unranked rows are
    skipped so an older ranked grade still counts.
    """
    ordered = sorted(grades, key=lambda g: (g.year, g.term), reverse=True)

    latest: Dict[str, int] = {}
    for grade in ordered:
        if grade.rank is None or grade.subject in latest:
            continue
        latest[grade.subject] = grade.rank
    return latest


def average_rank(grades: List[GradeEntry]) -> Optional[float]:
    """Mean of the latest per-subject ranks, or None if nothing is ranked."""
    latest = latest_rank_by_subject(grades)
    if not latest:
        return None
    return sum(latest.values()) / len(latest)


def build_snapshot(records: StudentRecords) -> StudentRecordSnapshot:
    return StudentRecordSnapshot(
        average_rank=average_rank(records.grades),
        activity_count=records.activity_count,
        volunteer_hours=records.volunteer_hours,
        unexcused_absence_and_lateness_count=records.unexcused_absence_and_lateness_count,
    )


# =============================================================================
# SUB-SCORES
# =============================================================================

def score_grades(avg_rank: Optional[float]) -> float:
    """Linear between rank 9 (0 points) and rank 1 (50 points)."""
    if avg_rank is None:
        return 0.0
    raw = (WORST_RANK - avg_rank) / (WORST_RANK - BEST_RANK) * GRADE_SCORE_MAX
    return _clamp(raw, 0.0, GRADE_SCORE_MAX)


def score_activities(activity_count: float) -> float:
    """5 points per activity, capped at 25."""
    return _clamp(activity_count * POINTS_PER_ACTIVITY, 0.0, ACTIVITY_SCORE_MAX)


def score_volunteering(volunteer_hours: float) -> float:
    """1 point per 4 hours, capped at 15."""
    return _clamp(volunteer_hours / VOLUNTEER_HOURS_PER_POINT, 0.0, VOLUNTEER_SCORE_MAX)


def score_attendance(penalty_count: float) -> float:
    """Starts at 10 and loses 2 points per unexcused absence or lateness."""
    raw = ATTENDANCE_SCORE_MAX - penalty_count * POINTS_PER_ATTENDANCE_PENALTY
    return _clamp(raw, 0.0, ATTENDANCE_SCORE_MAX)


def calculate_sub_scores(snapshot: StudentRecordSnapshot) -> SubScores:
    """
    Compute all four sub-scores for a snapshot.

    Args:
        snapshot: Aggregated student records

    Returns:
        SubScores; composite_score is their sum
    """
    return SubScores(
        grade_score=score_grades(snapshot.average_rank),
        activity_score=score_activities(snapshot.activity_count),
        volunteer_score=score_volunteering(snapshot.volunteer_hours),
        attendance_score=score_attendance(snapshot.unexcused_absence_and_lateness_count),
    )
