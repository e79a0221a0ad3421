"""Complexity analyzer stage: a fixed threshold ladder over feature counts."""

from roadforge.models.analysis import (
    ComplexityRating,
    ComplexityTier,
    FeatureSignal,
    SkillLevel,
)
from roadforge.pipeline.stages.features import AUTHENTICATION, PAYMENTS, SEARCH

# Features that imply relational, transactional data
DATA_HEAVY_FEATURES = frozenset({AUTHENTICATION, PAYMENTS, SEARCH})

# (max features, max high-tier features, tier), checked in order
TIER_LADDER: tuple[tuple[int, int, SkillLevel], ...] = (
    (3, 0, SkillLevel.BEGINNER),
    (6, 1, SkillLevel.INTERMEDIATE),
    (10, 3, SkillLevel.ADVANCED),
)

TIER_REASONING = {
    SkillLevel.BEGINNER: "Simple project with basic features suitable for beginners",
    SkillLevel.INTERMEDIATE: (
        "Moderate complexity with several features requiring intermediate skills"
    ),
    SkillLevel.ADVANCED: (
        "Complex project with multiple advanced features requiring significant experience"
    ),
    SkillLevel.EXPERT: "Highly complex project requiring expert-level development skills",
}


def _clamp(score: float) -> float:
    return max(0.0, min(10.0, score))


def _overall_tier(total: int, high: int) -> SkillLevel:
    for max_total, max_high, tier in TIER_LADDER:
        if total <= max_total and high <= max_high:
            return tier
    return SkillLevel.EXPERT


def analyze_complexity(features: list[FeatureSignal]) -> ComplexityRating:
    """Rate overall difficulty and per-axis scores.

    Args:
        features: Signals from the feature extractor.

    Returns:
        ComplexityRating with axis scores clamped to [0, 10].
    """
    total = len(features)
    high = sum(1 for f in features if f.complexity == ComplexityTier.HIGH)
    data_heavy = sum(1 for f in features if f.feature in DATA_HEAVY_FEATURES)
    overall = _overall_tier(total, high)

    return ComplexityRating(
        overall=overall,
        frontend=_clamp(total * 1.2 + high * 2),
        backend=_clamp(total * 1.5 + high * 2.5),
        database=_clamp(data_heavy * 2),
        reasoning=TIER_REASONING[overall],
    )
