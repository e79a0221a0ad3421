"""Timeline estimator stage."""

import math

from roadforge.models.analysis import ComplexityRating, FeatureSignal, TimelineEstimate
from roadforge.models.project import ExperienceLevel

HOURS_PER_DAY = 6
DAYS_PER_WEEK = 5

EXPERIENCE_FACTOR = {
    ExperienceLevel.BEGINNER: 2.0,
    ExperienceLevel.INTERMEDIATE: 1.5,
    ExperienceLevel.ADVANCED: 1.0,
    ExperienceLevel.EXPERT: 1.0,
}

PHASES = [
    "Phase 1: Project Setup & Basic Structure (1-2 days)",
    "Phase 2: Core Features Development (60% of time)",
    "Phase 3: Integration & Testing (20% of time)",
    "Phase 4: Polish & Deployment (20% of time)",
]


def estimate_timeline(
    features: list[FeatureSignal],
    complexity: ComplexityRating,
    experience: ExperienceLevel,
) -> TimelineEstimate:
    """Estimate working days and weeks from feature effort.

    Both conversions round up and never go below one, so a project with no
    detected features still gets the smallest nonzero estimate.

    Args:
        features: Signals from the feature extractor.
        complexity: Rating from the complexity analyzer, used in the narrative.
        experience: Developer experience level.

    Returns:
        TimelineEstimate with the numeric derivation attached.
    """
    total_hours = sum(f.estimated_hours for f in features)
    adjusted_hours = total_hours * EXPERIENCE_FACTOR[experience]
    days = max(1, math.ceil(adjusted_hours / HOURS_PER_DAY))
    weeks = max(1, math.ceil(days / DAYS_PER_WEEK))

    week_label = "week" if weeks == 1 else "weeks"
    day_label = "working day" if days == 1 else "working days"

    return TimelineEstimate(
        estimated=f"{weeks} {week_label} ({days} {day_label})",
        phases=list(PHASES),
        reasoning=(
            f"Based on {len(features)} features requiring {total_hours:g} base hours, "
            f"adjusted for {experience.value} experience level on a "
            f"{complexity.overall.value} project"
        ),
        total_hours=total_hours,
        adjusted_hours=adjusted_hours,
        days=days,
        weeks=weeks,
    )
