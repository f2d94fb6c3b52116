"""
Tests for the engine orchestration over in-memory readers.
"""

import asyncio

import pytest

from simulation.logic import (
    AdmissionSimulator,
    InMemoryRecordStore,
    StudentRecords,
    SimulationInput,
    SchoolNotFoundError,
    StudentNotFoundError,
    FitTier,
)


@pytest.fixture
def simulator(store):
    return AdmissionSimulator(records=store, schools=store, targets=store)


def test_run_simulation(simulator):
    result = asyncio.run(simulator.run_simulation(
        "student-1", "school-open", SimulationInput(hypothetical_activities=5),
    ))
    assert result.school_name == "Hanbit High School"
    assert result.current_level == FitTier.CHALLENGE
    assert result.simulated_level == FitTier.FIT
    assert result.level_changed is True


def test_unknown_school_raises(simulator):
    with pytest.raises(SchoolNotFoundError) as exc:
        asyncio.run(simulator.run_simulation("student-1", "missing", SimulationInput()))
    assert exc.value.school_id == "missing"

    with pytest.raises(SchoolNotFoundError):
        asyncio.run(simulator.compare_scenarios("student-1", "missing"))

    with pytest.raises(SchoolNotFoundError):
        asyncio.run(simulator.get_improvement_plan("student-1", "missing"))


def test_school_is_checked_before_student(simulator):
    with pytest.raises(SchoolNotFoundError):
        asyncio.run(simulator.run_simulation("nobody", "missing"))


def test_unknown_student_raises(simulator):
    with pytest.raises(StudentNotFoundError):
        asyncio.run(simulator.run_simulation("nobody", "school-open"))


def test_compare_scenarios(simulator):
    comparison = asyncio.run(simulator.compare_scenarios("student-1", "school-sci"))
    assert comparison.base_case.threshold == 62.5
    assert len(comparison.scenarios) == 4


def test_improvement_plan_defaults_to_fit(simulator):
    plan = asyncio.run(simulator.get_improvement_plan("student-1", "school-open"))
    assert plan.target_tier == FitTier.FIT
    assert plan.target_score == 70

    challenge = asyncio.run(simulator.get_improvement_plan("student-1", "school-open", FitTier.CHALLENGE))
    assert challenge.target_score == 55


def test_simulate_all_targets_sorted_by_priority(simulator):
    results = asyncio.run(simulator.simulate_all_targets("student-1"))
    assert [r.school_id for r in results] == ["school-open", "school-sci"]
    assert [r.priority for r in results] == [1, 2]
    for result in results:
        assert result.change_factors == []
        assert result.simulated_score == result.current_score == 45


def test_simulate_all_targets_without_targets(simulator):
    assert asyncio.run(simulator.simulate_all_targets("student-without-targets")) == []


def test_simulate_all_targets_requires_reader(store):
    simulator = AdmissionSimulator(records=store, schools=store)
    with pytest.raises(RuntimeError):
        asyncio.run(simulator.simulate_all_targets("student-1"))


def test_student_with_no_records_degrades(open_school):
    store = InMemoryRecordStore(
        students={"empty": StudentRecords(student_id="empty")},
        schools={open_school.school_id: open_school},
    )
    simulator = AdmissionSimulator(records=store, schools=store)
    result = asyncio.run(simulator.run_simulation("empty", open_school.school_id))
    assert result.current_score == 10
    assert result.current_level == FitTier.UNLIKELY
    assert result.probability_estimate == 5
