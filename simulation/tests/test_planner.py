"""
Tests for the improvement planner.
"""

import pytest

from simulation.logic.contracts import StudentRecordSnapshot
from simulation.logic.constants import FitTier, ScoreCategory, Difficulty
from simulation.logic.score_calculator import build_snapshot, calculate_sub_scores
from simulation.logic.planner import (
    target_score_for,
    estimate_weeks,
    grade_suggestion,
    activity_suggestion,
    volunteer_suggestion,
    build_improvement_plan,
)


def test_target_scores():
    assert target_score_for(FitTier.FIT, 60) == 70
    assert target_score_for(FitTier.CHALLENGE, 60) == 55
    assert target_score_for(FitTier.UNLIKELY, 60) == 40
    assert target_score_for(FitTier.FIT, 62.5) == 72.5


@pytest.mark.parametrize("gap, weeks", [
    (25, 24),
    (20.5, 24),
    (20, 12),
    (10.1, 12),
    (10, 6),
    (-3, 6),
])
def test_estimate_weeks(gap, weeks):
    assert estimate_weeks(gap) == weeks


def test_fit_plan(baseline_records, open_school):
    plan = build_improvement_plan(build_snapshot(baseline_records), open_school)

    assert plan.target_tier == FitTier.FIT
    assert plan.current_score == 45
    assert plan.target_score == 70
    assert plan.gap == 25
    assert plan.estimated_weeks == 24

    grade, activity, volunteer = plan.improvements

    assert grade.category == ScoreCategory.GRADE
    assert grade.potential_gain == 12.5
    assert grade.difficulty == Difficulty.HARD
    assert grade.current_value == "Average rank 5.0"
    assert grade.target_value == "Average rank 3.0"
    assert grade.time_estimate == "3-6 months"

    assert activity.category == ScoreCategory.ACTIVITY
    assert activity.potential_gain == 15
    assert activity.target_value == "5 activities"
    assert activity.difficulty == Difficulty.EASY
    assert activity.time_estimate == "6-12 weeks"

    assert volunteer.category == ScoreCategory.VOLUNTEER
    assert volunteer.potential_gain == 13
    assert volunteer.current_value == "8 hours"
    assert volunteer.target_value == "60 hours"
    assert volunteer.difficulty == Difficulty.MEDIUM
    assert volunteer.time_estimate == "13-26 weeks"


def test_challenge_plan(baseline_records, open_school):
    plan = build_improvement_plan(build_snapshot(baseline_records), open_school, FitTier.CHALLENGE)
    assert plan.target_score == 55
    assert plan.gap == 10
    assert plan.estimated_weeks == 6
    assert plan.improvements[0].potential_gain == 5
    assert plan.improvements[0].difficulty == Difficulty.EASY


def test_cutoff_shifts_target(baseline_records, selective_school):
    plan = build_improvement_plan(build_snapshot(baseline_records), selective_school)
    assert plan.target_score == 72.5
    assert plan.gap == 27.5
    assert plan.improvements[0].potential_gain == 13.8


def test_capped_categories_are_skipped():
    snapshot = StudentRecordSnapshot(
        average_rank=1.5,
        activity_count=5,
        volunteer_hours=60,
        unexcused_absence_and_lateness_count=4,
    )
    scores = calculate_sub_scores(snapshot)
    assert grade_suggestion(snapshot, scores, 10) is None
    assert activity_suggestion(snapshot, scores, 10) is None
    assert volunteer_suggestion(snapshot, scores, 10) is None


def test_grade_rule_uses_default_rank_when_unknown():
    snapshot = StudentRecordSnapshot()
    suggestion = grade_suggestion(snapshot, calculate_sub_scores(snapshot), 8)
    assert suggestion.potential_gain == 4
    assert suggestion.current_value == "Average rank 5.0"
    assert suggestion.target_value == "Average rank 4.4"
    assert suggestion.difficulty == Difficulty.EASY


def test_grade_rule_needs_a_positive_gap():
    snapshot = StudentRecordSnapshot(average_rank=6)
    scores = calculate_sub_scores(snapshot)
    assert grade_suggestion(snapshot, scores, 0) is None
    assert grade_suggestion(snapshot, scores, -12) is None


def test_many_activities_is_medium():
    snapshot = StudentRecordSnapshot(activity_count=0)
    suggestion = activity_suggestion(snapshot, calculate_sub_scores(snapshot), 30)
    assert suggestion.target_value == "5 activities"
    assert suggestion.difficulty == Difficulty.MEDIUM
    assert suggestion.time_estimate == "10-20 weeks"


def test_small_volunteer_gap_is_easy():
    snapshot = StudentRecordSnapshot(volunteer_hours=40)
    suggestion = volunteer_suggestion(snapshot, calculate_sub_scores(snapshot), 5)
    assert suggestion.potential_gain == 5
    assert suggestion.target_value == "60 hours"
    assert suggestion.difficulty == Difficulty.EASY
    assert suggestion.time_estimate == "5-10 weeks"


def test_floor_target_with_strong_profile(open_school):
    snapshot = StudentRecordSnapshot(average_rank=2, activity_count=3, volunteer_hours=20)
    plan = build_improvement_plan(snapshot, open_school, FitTier.UNLIKELY)
    assert plan.target_score == 40
    assert plan.gap < 0
    assert [s.category for s in plan.improvements] == [ScoreCategory.ACTIVITY, ScoreCategory.VOLUNTEER]
