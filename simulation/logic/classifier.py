"""
Classifier

Classifies a composite score into a fit tier against a school threshold:
- Fit (score at or above the threshold)
- Challenge (within 15 points below the threshold)
- Unlikely (further below)

Also estimates an admission probability from the same threshold.
"""

from typing import Optional

from .contracts import FitAssessment
from .constants import (
    FitTier,
    TIER_ORDER,
    WORST_RANK,
    BEST_RANK,
    GRADE_SCORE_MAX,
    DEFAULT_FIT_THRESHOLD,
    CUTOFF_THRESHOLD_OFFSET,
    CHALLENGE_BAND_WIDTH,
    PROBABILITY_FLOOR,
    PROBABILITY_CEILING,
    PROBABILITY_BAND_WIDTH,
)


def fit_threshold(cutoff_grade: Optional[float] = None) -> float:
    """
    Composite score needed for FIT at a school.

    A published cutoff grade is converted with the grade scoring formula and
    the non-grade share added on top; without one the default threshold applies.
    """
    if cutoff_grade is None:
        return DEFAULT_FIT_THRESHOLD
    grade_part = (WORST_RANK - cutoff_grade) / (WORST_RANK - BEST_RANK) * GRADE_SCORE_MAX
    return grade_part + CUTOFF_THRESHOLD_OFFSET


def classify_score(score: float, threshold: float) -> FitTier:
    """
    Classify a composite score. Boundaries resolve to the higher tier.
    """
    if score >= threshold:
        return FitTier.FIT
    if score >= threshold - CHALLENGE_BAND_WIDTH:
        return FitTier.CHALLENGE
    return FitTier.UNLIKELY


def estimate_probability(score: float, threshold: float) -> float:
    """
    Estimated admission probability (percent), in [5, 95].

    Piecewise linear around the threshold, flattening far above it.
    """
    band = PROBABILITY_BAND_WIDTH

    if score >= threshold + band:
        estimate = min(PROBABILITY_CEILING, 70 + (score - threshold - band) * 1.5)
    elif score >= threshold:
        estimate = 50 + (score - threshold) * 2
    elif score >= threshold - band:
        estimate = 30 + (score - threshold + band) * 2
    else:
        estimate = max(PROBABILITY_FLOOR, 30 + (score - threshold + band) * 2)

    return max(PROBABILITY_FLOOR, min(PROBABILITY_CEILING, estimate))


def assess_fit(score: float, cutoff_grade: Optional[float] = None) -> FitAssessment:
    """
    Tier and probability for a score at a school.

    Args:
        score: Composite score (0-100)
        cutoff_grade: School's latest published cutoff, if any

    Returns:
        FitAssessment evaluated against a single threshold
    """
    threshold = fit_threshold(cutoff_grade)
    return FitAssessment(
        tier=classify_score(score, threshold),
        probability=estimate_probability(score, threshold),
        threshold=threshold,
    )


def tier_rank(tier: FitTier) -> int:
    return TIER_ORDER[FitTier(tier)]


def is_improvement(before: FitTier, after: FitTier) -> bool:
    return tier_rank(after) > tier_rank(before)
