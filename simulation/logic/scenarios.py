"""
Scenario Comparator

Runs the simulation under four canned improvement scenarios and reports each
against the real baseline:
- Grades up one rank in every subject
- Three more activities
- Twenty more volunteer hours
- All three combined

Scenarios are always reported in this order, never sorted by improvement.
"""

from typing import List, Tuple

from .contracts import (
    GradeEntry,
    HypotheticalGrade,
    StudentRecords,
    SchoolAdmissionInfo,
    SimulationInput,
    ScenarioOutcome,
    ScenarioComparison,
)
from .constants import (
    ScenarioKind,
    SCENARIO_NAMES,
    SCENARIO_RANK_DELTA,
    SCENARIO_EXTRA_ACTIVITIES,
    SCENARIO_EXTRA_VOLUNTEER_HOURS,
)
from .score_calculator import build_snapshot, clamp_rank, latest_rank_by_subject
from .simulator import simulate, build_simulation_result
from .display import round_display


def hypothetical_grades(
    grades: List[GradeEntry],
    rank_delta: int,
) -> List[HypotheticalGrade]:
    """
    Shift each subject's latest ranked grade by rank_delta.

    Negative deltas are improvements. Results are clamped to [1, 9].
    """
    return [
        HypotheticalGrade(subject=subject, rank=int(clamp_rank(rank + rank_delta)))
        for subject, rank in latest_rank_by_subject(grades).items()
    ]


def build_scenarios(
    records: StudentRecords,
) -> List[Tuple[ScenarioKind, SimulationInput]]:
    """The canned scenarios for a student, in reporting order."""
    improved_grades = hypothetical_grades(records.grades, SCENARIO_RANK_DELTA)
    more_activities = records.activity_count + SCENARIO_EXTRA_ACTIVITIES
    more_hours = records.volunteer_hours + SCENARIO_EXTRA_VOLUNTEER_HOURS

    return [
        (ScenarioKind.GRADE_IMPROVEMENT, SimulationInput(
            hypothetical_grades=improved_grades,
        )),
        (ScenarioKind.ACTIVITY_GROWTH, SimulationInput(
            hypothetical_activities=more_activities,
        )),
        (ScenarioKind.VOLUNTEER_GROWTH, SimulationInput(
            hypothetical_volunteer_hours=more_hours,
        )),
        (ScenarioKind.COMBINED, SimulationInput(
            hypothetical_grades=improved_grades,
            hypothetical_activities=more_activities,
            hypothetical_volunteer_hours=more_hours,
        )),
    ]


def compare_scenarios(
    records: StudentRecords,
    school: SchoolAdmissionInfo,
) -> ScenarioComparison:
    """
    Compare the baseline with every canned scenario.

    Args:
        records: Student's approved records
        school: Target school with its cutoff

    Returns:
        ScenarioComparison; improvements are measured at full precision
        and rounded for display
    """
    snapshot = build_snapshot(records)
    base = simulate(snapshot, school)
    baseline_score = base.baseline.composite_score

    outcomes: List[ScenarioOutcome] = []
    for kind, simulation_input in build_scenarios(records):
        computation = simulate(snapshot, school, simulation_input)
        outcomes.append(ScenarioOutcome(
            kind=kind,
            name=SCENARIO_NAMES[kind],
            result=build_simulation_result(computation),
            improvement=round_display(computation.simulated.composite_score - baseline_score),
        ))

    return ScenarioComparison(
        base_case=build_simulation_result(base),
        scenarios=outcomes,
    )
