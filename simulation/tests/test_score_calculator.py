"""
Tests for the score calculator.
"""

import pytest

from simulation.logic.contracts import GradeEntry, StudentRecords, StudentRecordSnapshot
from simulation.logic.score_calculator import (
    latest_rank_by_subject,
    average_rank,
    build_snapshot,
    calculate_sub_scores,
    score_grades,
    score_activities,
    score_volunteering,
    score_attendance,
)


def test_worked_example(baseline_records):
    snapshot = build_snapshot(baseline_records)
    assert snapshot.average_rank == 5

    scores = calculate_sub_scores(snapshot)
    assert scores.grade_score == 25
    assert scores.activity_score == 10
    assert scores.volunteer_score == 2
    assert scores.attendance_score == 8
    assert scores.composite_score == 45


def test_latest_ranked_grade_per_subject_wins():
    grades = [
        GradeEntry(subject="Math", rank=2, year=2023, term=1),
        GradeEntry(subject="Math", rank=4, year=2023, term=2),
        GradeEntry(subject="Math", rank=None, year=2024, term=1),
        GradeEntry(subject="Science", rank=7, year=2022, term=2),
        GradeEntry(subject="Science", rank=1, year=2023, term=1),
    ]
    assert latest_rank_by_subject(grades) == {"Math": 4, "Science": 1}
    assert average_rank(grades) == 2.5


def test_no_ranked_grades_scores_zero():
    grades = [GradeEntry(subject="Art", rank=None, year=2024, term=1)]
    assert average_rank(grades) is None

    snapshot = build_snapshot(StudentRecords(grades=grades))
    scores = calculate_sub_scores(snapshot)
    assert scores.grade_score == 0
    assert scores.activity_score == 0
    assert scores.volunteer_score == 0
    # no attendance records means no penalties
    assert scores.attendance_score == 10


@pytest.mark.parametrize("rank, expected", [
    (1, 50.0),
    (9, 0.0),
    (5, 25.0),
    (0, 50.0),
    (12, 0.0),
])
def test_grade_score_is_linear_and_clamped(rank, expected):
    assert score_grades(rank) == expected


def test_caps():
    assert score_activities(5) == 25
    assert score_activities(40) == 25
    assert score_volunteering(60) == 15
    assert score_volunteering(1000) == 15
    assert score_attendance(5) == 0
    assert score_attendance(30) == 0


def test_sub_scores_stay_in_range():
    for avg in [None, 1, 2.5, 9]:
        for count in [0, 1, 3, 5, 50]:
            for hours in [0, 3.5, 60, 500]:
                for penalties in [0, 2, 5, 40]:
                    scores = calculate_sub_scores(StudentRecordSnapshot(
                        average_rank=avg,
                        activity_count=count,
                        volunteer_hours=hours,
                        unexcused_absence_and_lateness_count=penalties,
                    ))
                    assert 0 <= scores.grade_score <= 50
                    assert 0 <= scores.activity_score <= 25
                    assert 0 <= scores.volunteer_score <= 15
                    assert 0 <= scores.attendance_score <= 10
                    assert scores.composite_score == (
                        scores.grade_score
                        + scores.activity_score
                        + scores.volunteer_score
                        + scores.attendance_score
                    )
