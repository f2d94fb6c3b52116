"""
Simulation Engine

Main orchestrator that resolves a student's records and a target school
through the injected readers, then runs the pure scoring components.
This is the primary entry point for simulations.
"""

import asyncio
import logging
from typing import List, Optional

from .contracts import (
    StudentRecords,
    SchoolAdmissionInfo,
    SimulationInput,
    SimulationResult,
    TargetSimulationResult,
    ScenarioComparison,
    ImprovementPlan,
)
from .constants import FitTier, ENGINE_VERSION
from .errors import SchoolNotFoundError, StudentNotFoundError
from .readers import StudentRecordReader, SchoolReader, TargetListReader
from .score_calculator import build_snapshot
from .simulator import run_simulation as simulate_snapshot
from .scenarios import compare_scenarios as compare_records
from .planner import build_improvement_plan

logger = logging.getLogger(__name__)


class AdmissionSimulator:
    """
    Admission fit simulator over externally owned records.

    Pipeline flow:
    1. School resolution - latest published cutoff (fails fast if missing)
    2. Record loading - grades, activities, volunteering, attendance in parallel
    3. Scoring - sub-scores and composite
    4. Classification - fit tier and probability
    5. Simulation / comparison / planning on top of the baseline
    """

    def __init__(
        self,
        records: StudentRecordReader,
        schools: SchoolReader,
        targets: Optional[TargetListReader] = None,
    ):
        """
        Initialize the simulator.

        Args:
            records: Student record reader
            schools: School reader
            targets: Target list reader, only needed by simulate_all_targets
        """
        self.records = records
        self.schools = schools
        self.targets = targets
        self.version = ENGINE_VERSION

    async def resolve_school(self, school_id: str) -> SchoolAdmissionInfo:
        school = await self.schools.fetch_school(school_id)
        if school is None:
            logger.warning(f"⚠️ School not found: {school_id}")
            raise SchoolNotFoundError(school_id)
        return school

    async def load_records(self, student_id: str) -> StudentRecords:
        """
        Load a student's approved records.

        The four record types are independent, so they are gathered together.
        """
        if not await self.records.student_exists(student_id):
            logger.warning(f"⚠️ Student not found: {student_id}")
            raise StudentNotFoundError(student_id)

        grades, activity_count, volunteer_hours, penalty_count = await asyncio.gather(
            self.records.fetch_grades(student_id),
            self.records.fetch_activity_count(student_id),
            self.records.fetch_volunteer_hours(student_id),
            self.records.fetch_attendance_penalty_count(student_id),
        )

        return StudentRecords(
            student_id=student_id,
            grades=grades,
            activity_count=activity_count,
            volunteer_hours=volunteer_hours,
            unexcused_absence_and_lateness_count=penalty_count,
        )

    async def run_simulation(
        self,
        student_id: str,
        school_id: str,
        simulation_input: Optional[SimulationInput] = None,
    ) -> SimulationResult:
        """
        Simulate what-if overrides for a student at a school.

        Args:
            student_id: Student identifier
            school_id: Target school identifier
            simulation_input: Overrides; omitted fields keep the real values

        Returns:
            SimulationResult

        Raises:
            SchoolNotFoundError: school cannot be resolved
            StudentNotFoundError: student cannot be resolved
        """
        school = await self.resolve_school(school_id)
        records = await self.load_records(student_id)

        result = simulate_snapshot(build_snapshot(records), school, simulation_input)
        logger.info(
            f"🎲 Simulation for {student_id} @ {school.name or school_id}: "
            f"{result.current_score} ({result.current_level.value}) -> "
            f"{result.simulated_score} ({result.simulated_level.value})"
        )
        return result

    async def compare_scenarios(self, student_id: str, school_id: str) -> ScenarioComparison:
        """Baseline plus the canned improvement scenarios, in fixed order."""
        school = await self.resolve_school(school_id)
        records = await self.load_records(student_id)

        comparison = compare_records(records, school)
        logger.info(
            f"📊 Scenario comparison for {student_id} @ {school.name or school_id}: "
            f"improvements {[s.improvement for s in comparison.scenarios]}"
        )
        return comparison

    async def get_improvement_plan(
        self,
        student_id: str,
        school_id: str,
        target_tier: FitTier = FitTier.FIT,
    ) -> ImprovementPlan:
        """Gap to target_tier and per-category suggestions to close it."""
        school = await self.resolve_school(school_id)
        records = await self.load_records(student_id)

        plan = build_improvement_plan(build_snapshot(records), school, target_tier)
        logger.info(
            f"🎯 Improvement plan for {student_id} @ {school.name or school_id}: "
            f"{plan.current_score} -> {plan.target_score} (gap {plan.gap}, "
            f"{len(plan.improvements)} suggestions)"
        )
        return plan

    async def simulate_all_targets(self, student_id: str) -> List[TargetSimulationResult]:
        """
        Baseline simulation for every school on the student's target list,
        ordered by priority (1 first).
        """
        if self.targets is None:
            raise RuntimeError("AdmissionSimulator was created without a target list reader")

        targets = await self.targets.fetch_targets(student_id)
        if not targets:
            logger.info(f"📭 No target schools for {student_id}")
            return []

        records = await self.load_records(student_id)
        snapshot = build_snapshot(records)

        results: List[TargetSimulationResult] = []
        for target in targets:
            school = await self.resolve_school(target.school_id)
            result = simulate_snapshot(snapshot, school)
            results.append(TargetSimulationResult(
                **result.model_dump(),
                priority=target.priority,
            ))

        results.sort(key=lambda r: r.priority)
        logger.info(f"🏫 Simulated {len(results)} target schools for {student_id}")
        return results
