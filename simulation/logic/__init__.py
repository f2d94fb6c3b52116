"""
Simulation Logic Module

Provides the deterministic admission fit simulation engine.
"""

from .contracts import (
    GradeEntry,
    StudentRecords,
    StudentRecordSnapshot,
    SchoolAdmissionInfo,
    TargetSchoolEntry,
    HypotheticalGrade,
    SimulationInput,
    SubScores,
    SubScoreBreakdown,
    FitAssessment,
    ChangeFactor,
    SimulationResult,
    TargetSimulationResult,
    ScenarioOutcome,
    ScenarioComparison,
    ImprovementSuggestion,
    ImprovementPlan,
)
from .engine import AdmissionSimulator
from .errors import SimulatorError, SchoolNotFoundError, StudentNotFoundError
from .readers import InMemoryRecordStore
from .constants import FitTier, ScoreCategory, ScenarioKind, Difficulty

__all__ = [
    # Main engine
    "AdmissionSimulator",
    "InMemoryRecordStore",

    # Contracts
    "GradeEntry",
    "StudentRecords",
    "StudentRecordSnapshot",
    "SchoolAdmissionInfo",
    "TargetSchoolEntry",
    "HypotheticalGrade",
    "SimulationInput",
    "SubScores",
    "SubScoreBreakdown",
    "FitAssessment",
    "ChangeFactor",
    "SimulationResult",
    "TargetSimulationResult",
    "ScenarioOutcome",
    "ScenarioComparison",
    "ImprovementSuggestion",
    "ImprovementPlan",

    # Errors
    "SimulatorError",
    "SchoolNotFoundError",
    "StudentNotFoundError",

    # Enums
    "FitTier",
    "ScoreCategory",
    "ScenarioKind",
    "Difficulty",
]
