"""
Simulation Runner

Applies what-if overrides on top of a student's real records, rescoring only
the overridden sub-scores, and reports the change against the baseline with
change factors and recommendations.

Attendance is never overridable; the simulated attendance score is always
the baseline one.
"""

import math
from typing import Callable, List, Optional, Tuple

from .contracts import (
    StudentRecordSnapshot,
    SchoolAdmissionInfo,
    SimulationInput,
    SimulationComputation,
    SimulationResult,
    SubScores,
    ChangeFactor,
)
from .constants import (
    FitTier,
    ScoreCategory,
    GRADE_FOCUS_THRESHOLD,
    ACTIVITY_TARGET_SCORE,
    VOLUNTEER_TARGET_SCORE,
    POINTS_PER_ACTIVITY,
    VOLUNTEER_HOURS_PER_POINT,
)
from .score_calculator import (
    calculate_sub_scores,
    clamp_rank,
    score_grades,
    score_activities,
    score_volunteering,
)
from .classifier import assess_fit, is_improvement
from .display import round_display


def ceil_points(value: float) -> int:
    """Ceiling that ignores float noise (e.g. 12.000000001 -> 12)."""
    return math.ceil(round(value, 6))


def _format_number(value: float) -> str:
    return f"{value:g}"


# =============================================================================
# OVERRIDES
# =============================================================================

# (rescored sub-score, change factor) for an override that moved the score
Override = Optional[Tuple[float, ChangeFactor]]


def _grade_override(
    snapshot: StudentRecordSnapshot,
    simulation_input: SimulationInput,
    baseline_score: float,
) -> Override:
    grades = simulation_input.hypothetical_grades
    if not grades:
        return None

    hypothetical_avg = sum(clamp_rank(g.rank) for g in grades) / len(grades)
    new_score = score_grades(hypothetical_avg)
    impact = new_score - baseline_score
    if impact == 0:
        return None

    if snapshot.average_rank is not None:
        description = f"Average rank {snapshot.average_rank:.1f} → {hypothetical_avg:.1f}"
    else:
        description = f"Average rank set to {hypothetical_avg:.1f}"

    return new_score, ChangeFactor(
        category=ScoreCategory.GRADE,
        factor="Grade change",
        impact=impact,
        description=description,
    )


def _activity_override(
    snapshot: StudentRecordSnapshot,
    simulation_input: SimulationInput,
    baseline_score: float,
) -> Override:
    count = simulation_input.hypothetical_activities
    if count is None:
        return None

    new_score = score_activities(count)
    impact = new_score - baseline_score
    if impact == 0:
        return None

    return new_score, ChangeFactor(
        category=ScoreCategory.ACTIVITY,
        factor="Activity change",
        impact=impact,
        description=f"Activities {snapshot.activity_count} → {count}",
    )


def _volunteer_override(
    snapshot: StudentRecordSnapshot,
    simulation_input: SimulationInput,
    baseline_score: float,
) -> Override:
    hours = simulation_input.hypothetical_volunteer_hours
    if hours is None:
        return None

    new_score = score_volunteering(hours)
    impact = new_score - baseline_score
    if impact == 0:
        return None

    return new_score, ChangeFactor(
        category=ScoreCategory.VOLUNTEER,
        factor="Volunteer change",
        impact=impact,
        description=(
            f"Volunteer hours {_format_number(snapshot.volunteer_hours)} → "
            f"{_format_number(hours)}"
        ),
    )


def simulate(
    snapshot: StudentRecordSnapshot,
    school: SchoolAdmissionInfo,
    simulation_input: Optional[SimulationInput] = None,
) -> SimulationComputation:
    """
    Rescore a snapshot with overrides applied.

    Args:
        snapshot: Student's real records
        school: Target school with its cutoff
        simulation_input: What-if overrides; None keeps everything at baseline

    Returns:
        SimulationComputation at full precision
    """
    simulation_input = simulation_input or SimulationInput()

    baseline = calculate_sub_scores(snapshot)
    baseline_fit = assess_fit(baseline.composite_score, school.cutoff_grade)

    scores = {
        "grade_score": baseline.grade_score,
        "activity_score": baseline.activity_score,
        "volunteer_score": baseline.volunteer_score,
    }
    overrides = [
        ("grade_score", _grade_override),
        ("activity_score", _activity_override),
        ("volunteer_score", _volunteer_override),
    ]

    change_factors: List[ChangeFactor] = []
    for field, override in overrides:
        outcome = override(snapshot, simulation_input, scores[field])
        if outcome is None:
            continue
        new_score, factor = outcome
        scores[field] = new_score
        change_factors.append(factor)

    simulated = SubScores(attendance_score=baseline.attendance_score, **scores)
    simulated_fit = assess_fit(simulated.composite_score, school.cutoff_grade)

    return SimulationComputation(
        school=school,
        snapshot=snapshot,
        baseline=baseline,
        simulated=simulated,
        baseline_fit=baseline_fit,
        simulated_fit=simulated_fit,
        change_factors=change_factors,
    )


# =============================================================================
# RECOMMENDATIONS
# =============================================================================

RecommendationRule = Callable[[SimulationComputation], Optional[str]]


def recommend_grade_focus(computation: SimulationComputation) -> Optional[str]:
    if computation.simulated.grade_score < GRADE_FOCUS_THRESHOLD:
        return "Improving grades has the biggest impact. Focus your study on core subjects."
    return None


def recommend_activities(computation: SimulationComputation) -> Optional[str]:
    score = computation.simulated.activity_score
    if score < ACTIVITY_TARGET_SCORE:
        needed = ceil_points((ACTIVITY_TARGET_SCORE - score) / POINTS_PER_ACTIVITY)
        return f"Add at least {needed} more extracurricular activities."
    return None


def recommend_volunteering(computation: SimulationComputation) -> Optional[str]:
    score = computation.simulated.volunteer_score
    if score < VOLUNTEER_TARGET_SCORE:
        needed = ceil_points((VOLUNTEER_TARGET_SCORE - score) * VOLUNTEER_HOURS_PER_POINT)
        return f"Add at least {needed} more volunteer hours."
    return None


def note_reached_fit(computation: SimulationComputation) -> Optional[str]:
    before = computation.baseline_fit.tier
    after = computation.simulated_fit.tier
    if after == FitTier.FIT and is_improvement(before, after):
        return "🎉 This scenario reaches the FIT level for this school!"
    return None


def warn_dropped_to_unlikely(computation: SimulationComputation) -> Optional[str]:
    before = computation.baseline_fit.tier
    after = computation.simulated_fit.tier
    if after == FitTier.UNLIKELY and is_improvement(after, before):
        return "⚠️ Under this plan admission may be unlikely."
    return None


RECOMMENDATION_RULES: List[RecommendationRule] = [
    recommend_grade_focus,
    recommend_activities,
    recommend_volunteering,
    note_reached_fit,
    warn_dropped_to_unlikely,
]


def build_recommendations(computation: SimulationComputation) -> List[str]:
    """Evaluate every recommendation rule in order, keeping the ones that fire."""
    recommendations = []
    for rule in RECOMMENDATION_RULES:
        message = rule(computation)
        if message:
            recommendations.append(message)
    return recommendations


# =============================================================================
# RESULT ASSEMBLY
# =============================================================================

def build_simulation_result(computation: SimulationComputation) -> SimulationResult:
    """Round a computation for display."""
    school = computation.school

    return SimulationResult(
        school_id=school.school_id,
        school_name=school.name,
        school_type=school.school_type,
        cutoff_grade=school.cutoff_grade,
        threshold=round_display(computation.simulated_fit.threshold),

        current_level=computation.baseline_fit.tier,
        current_score=round_display(computation.baseline.composite_score),
        simulated_level=computation.simulated_fit.tier,
        simulated_score=round_display(computation.simulated.composite_score),
        score_difference=round_display(computation.score_difference),
        level_changed=computation.level_changed,

        current_sub_scores=computation.baseline.rounded(),
        simulated_sub_scores=computation.simulated.rounded(),

        change_factors=[
            factor.model_copy(update={"impact": round_display(factor.impact)})
            for factor in computation.change_factors
        ],
        recommendations=build_recommendations(computation),
        probability_estimate=round_display(computation.simulated_fit.probability),
    )


def run_simulation(
    snapshot: StudentRecordSnapshot,
    school: SchoolAdmissionInfo,
    simulation_input: Optional[SimulationInput] = None,
) -> SimulationResult:
    """Simulate and assemble the display result in one step."""
    return build_simulation_result(simulate(snapshot, school, simulation_input))
