"""
Tests for the scenario comparator.
"""

from simulation.logic.contracts import GradeEntry, StudentRecords
from simulation.logic.constants import ScenarioKind, FitTier
from simulation.logic.scenarios import hypothetical_grades, build_scenarios, compare_scenarios


def test_hypothetical_grades_use_latest_rank_and_clamp():
    grades = [
        GradeEntry(subject="Math", rank=1, year=2024, term=1),
        GradeEntry(subject="Math", rank=6, year=2023, term=2),
        GradeEntry(subject="English", rank=9, year=2024, term=2),
        GradeEntry(subject="Korean", rank=4, year=2024, term=1),
        GradeEntry(subject="Korean", rank=2, year=2024, term=2),
    ]

    improved = {g.subject: g.rank for g in hypothetical_grades(grades, -1)}
    assert improved == {"Math": 1, "English": 8, "Korean": 1}

    worse = {g.subject: g.rank for g in hypothetical_grades(grades, +1)}
    assert worse == {"Math": 2, "English": 9, "Korean": 3}

    for delta in [-20, 20]:
        for grade in hypothetical_grades(grades, delta):
            assert 1 <= grade.rank <= 9


def test_scenarios_in_fixed_order(baseline_records):
    kinds = [kind for kind, _ in build_scenarios(baseline_records)]
    assert kinds == [
        ScenarioKind.GRADE_IMPROVEMENT,
        ScenarioKind.ACTIVITY_GROWTH,
        ScenarioKind.VOLUNTEER_GROWTH,
        ScenarioKind.COMBINED,
    ]


def test_scenario_overrides(baseline_records):
    scenarios = dict(build_scenarios(baseline_records))

    grades = scenarios[ScenarioKind.GRADE_IMPROVEMENT].hypothetical_grades
    assert {g.subject: g.rank for g in grades} == {"Math": 4, "English": 4}
    assert scenarios[ScenarioKind.ACTIVITY_GROWTH].hypothetical_activities == 5
    assert scenarios[ScenarioKind.VOLUNTEER_GROWTH].hypothetical_volunteer_hours == 28

    combined = scenarios[ScenarioKind.COMBINED]
    assert combined.hypothetical_grades == grades
    assert combined.hypothetical_activities == 5
    assert combined.hypothetical_volunteer_hours == 28


def test_compare_scenarios(baseline_records, open_school):
    comparison = compare_scenarios(baseline_records, open_school)

    assert comparison.base_case.current_score == 45
    assert comparison.base_case.change_factors == []

    improvements = [s.improvement for s in comparison.scenarios]
    assert improvements == [6.3, 15, 5, 26.3]

    activity = comparison.scenarios[1]
    assert activity.result.simulated_level == FitTier.FIT
    assert activity.name == "3 more activities"

    combined = comparison.scenarios[3]
    assert combined.result.simulated_score == 71.3
    for individual in comparison.scenarios[:3]:
        assert combined.improvement >= individual.improvement


def test_combined_dominates_for_any_profile(open_school):
    profiles = [
        StudentRecords(),
        StudentRecords(
            grades=[GradeEntry(subject="Math", rank=1, year=2024, term=1)],
            activity_count=7,
            volunteer_hours=90,
        ),
        StudentRecords(
            grades=[
                GradeEntry(subject="Math", rank=9, year=2024, term=1),
                GradeEntry(subject="Science", rank=2, year=2024, term=1),
            ],
            activity_count=4,
            volunteer_hours=50,
            unexcused_absence_and_lateness_count=3,
        ),
    ]
    for records in profiles:
        comparison = compare_scenarios(records, open_school)
        combined = comparison.scenarios[-1].improvement
        for outcome in comparison.scenarios[:3]:
            assert outcome.improvement >= 0
            assert combined >= outcome.improvement


def test_no_ranked_grades_means_no_grade_gain(open_school):
    comparison = compare_scenarios(StudentRecords(activity_count=1), open_school)
    grade = comparison.scenarios[0]
    assert grade.improvement == 0
    assert grade.result.change_factors == []
