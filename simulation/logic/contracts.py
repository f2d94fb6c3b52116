"""
Data Contracts for the Admission Fit Simulator

Defines Pydantic models for the records the engine reads (input), the
what-if overrides a caller supplies, and the results it returns (output).
These contracts are the API boundary for the simulation engine.
"""

from typing import List, Optional
from pydantic import BaseModel, Field, computed_field

from .constants import FitTier, ScoreCategory, ScenarioKind, Difficulty
from .display import round_display


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class GradeEntry(BaseModel):
    """One approved grade row for a subject in a given term."""
    subject: str
    rank: Optional[int] = None  # 1 (best) - 9 (worst), None when unranked
    year: int = 0
    term: int = 0


class StudentRecords(BaseModel):
    """
    Raw approved records for a student, as read from the record store.
    """
    student_id: Optional[str] = None
    grades: List[GradeEntry] = Field(default_factory=list)
    activity_count: int = Field(default=0, ge=0)
    volunteer_hours: float = Field(default=0.0, ge=0.0)
    unexcused_absence_and_lateness_count: int = Field(default=0, ge=0)


class StudentRecordSnapshot(BaseModel):
    """Aggregated view of a student's records used for scoring."""
    average_rank: Optional[float] = None
    activity_count: int = Field(default=0, ge=0)
    volunteer_hours: float = Field(default=0.0, ge=0.0)
    unexcused_absence_and_lateness_count: int = Field(default=0, ge=0)


class SchoolAdmissionInfo(BaseModel):
    """Target school with its most recently published admission cutoff."""
    school_id: str
    name: str = ""
    school_type: Optional[str] = None
    region: Optional[str] = None
    cutoff_grade: Optional[float] = None
    admission_year: Optional[int] = None


class TargetSchoolEntry(BaseModel):
    """A school on a student's target list."""
    school_id: str
    priority: int = 1


class HypotheticalGrade(BaseModel):
    """What-if rank for a subject. Out-of-range ranks are clamped, not rejected."""
    subject: str
    rank: float


class SimulationInput(BaseModel):
    """
    What-if overrides. Any field left out keeps the student's real value.
    """
    hypothetical_grades: Optional[List[HypotheticalGrade]] = None
    hypothetical_activities: Optional[int] = Field(default=None, ge=0)
    hypothetical_volunteer_hours: Optional[float] = Field(default=None, ge=0.0)


# =============================================================================
# SCORING STRUCTURES
# =============================================================================

class SubScores(BaseModel):
    """The four capped sub-scores. The composite is always their sum."""
    grade_score: float = Field(default=0.0, ge=0.0, le=50.0)
    activity_score: float = Field(default=0.0, ge=0.0, le=25.0)
    volunteer_score: float = Field(default=0.0, ge=0.0, le=15.0)
    attendance_score: float = Field(default=0.0, ge=0.0, le=10.0)

    @computed_field
    @property
    def composite_score(self) -> float:
        return (
            self.grade_score
            + self.activity_score
            + self.volunteer_score
            + self.attendance_score
        )

    def rounded(self) -> "SubScoreBreakdown":
        """Display copy; the composite is rounded from the full-precision sum."""
        return SubScoreBreakdown(
            grade_score=round_display(self.grade_score),
            activity_score=round_display(self.activity_score),
            volunteer_score=round_display(self.volunteer_score),
            attendance_score=round_display(self.attendance_score),
            composite_score=round_display(self.composite_score),
        )


class SubScoreBreakdown(BaseModel):
    """Sub-scores and composite as reported, each rounded to one decimal."""
    grade_score: float
    activity_score: float
    volunteer_score: float
    attendance_score: float
    composite_score: float


class FitAssessment(BaseModel):
    """Tier and probability for a composite score against one threshold."""
    tier: FitTier
    probability: float = Field(ge=0.0, le=100.0)
    threshold: float


class ChangeFactor(BaseModel):
    """A sub-score that moved under simulation."""
    category: ScoreCategory
    factor: str
    impact: float  # signed points
    description: str


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class SimulationResult(BaseModel):
    """
    Result of a what-if simulation against one school.
    Scores are rounded to one decimal for display.
    """
    school_id: Optional[str] = None
    school_name: str = ""
    school_type: Optional[str] = None
    cutoff_grade: Optional[float] = None
    threshold: float

    current_level: FitTier
    current_score: float
    simulated_level: FitTier
    simulated_score: float
    score_difference: float
    level_changed: bool

    current_sub_scores: SubScoreBreakdown
    simulated_sub_scores: SubScoreBreakdown

    change_factors: List[ChangeFactor] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    probability_estimate: float = Field(ge=0.0, le=100.0)


class TargetSimulationResult(SimulationResult):
    """Baseline simulation for one entry of the student's target list."""
    priority: int = 1


class ScenarioOutcome(BaseModel):
    """One canned scenario and how far it moves the composite score."""
    kind: ScenarioKind
    name: str
    result: SimulationResult
    improvement: float


class ScenarioComparison(BaseModel):
    """Baseline plus every canned scenario, in fixed order."""
    base_case: SimulationResult
    scenarios: List[ScenarioOutcome] = Field(default_factory=list)


class ImprovementSuggestion(BaseModel):
    """Actionable step toward the target score for one sub-score."""
    category: ScoreCategory
    area: str
    current_value: str
    target_value: str
    potential_gain: float
    difficulty: Difficulty
    time_estimate: str


class ImprovementPlan(BaseModel):
    """Gap to a target tier and how to close it."""
    school_id: Optional[str] = None
    school_name: str = ""
    target_tier: FitTier = FitTier.FIT
    current_score: float
    target_score: float
    gap: float
    improvements: List[ImprovementSuggestion] = Field(default_factory=list)
    estimated_weeks: int


# =============================================================================
# INTERMEDIATE DATA STRUCTURES
# =============================================================================

class SimulationComputation(BaseModel):
    """
    Full-precision simulation state.
    Used between scoring and result assembly; comparisons use these values.
    """
    school: SchoolAdmissionInfo
    snapshot: StudentRecordSnapshot
    baseline: SubScores
    simulated: SubScores
    baseline_fit: FitAssessment
    simulated_fit: FitAssessment
    change_factors: List[ChangeFactor] = Field(default_factory=list)

    @property
    def score_difference(self) -> float:
        return self.simulated.composite_score - self.baseline.composite_score

    @property
    def level_changed(self) -> bool:
        return self.baseline_fit.tier != self.simulated_fit.tier
