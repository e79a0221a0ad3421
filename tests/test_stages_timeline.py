"""Tests for the timeline estimator stage."""

import pytest

from roadforge.models.analysis import ComplexityTier, FeatureSignal
from roadforge.models.project import ExperienceLevel
from roadforge.pipeline.stages.complexity import analyze_complexity
from roadforge.pipeline.stages.timeline import PHASES, estimate_timeline


def _hours(*hours: float) -> list[FeatureSignal]:
    return [
        FeatureSignal(
            feature=f"F{i}",
            confidence=0.8,
            reasoning="r",
            complexity=ComplexityTier.MEDIUM,
            estimated_hours=h,
        )
        for i, h in enumerate(hours)
    ]


def _estimate(features, experience=ExperienceLevel.ADVANCED):
    return estimate_timeline(features, analyze_complexity(features), experience)


class TestEstimateTimeline:
    """Test estimate_timeline function."""

    def test_zero_features_minimum_bound(self):
        """No features still gives one day and one week."""
        result = _estimate([], ExperienceLevel.BEGINNER)
        assert result.total_hours == 0
        assert result.days == 1
        assert result.weeks == 1
        assert result.estimated == "1 week (1 working day)"

    def test_hours_conserved(self):
        """Total hours is exactly the sum of feature hours."""
        result = _estimate(_hours(8, 16, 6))
        assert result.total_hours == 30

    @pytest.mark.parametrize(
        "experience,factor",
        [
            (ExperienceLevel.BEGINNER, 2.0),
            (ExperienceLevel.INTERMEDIATE, 1.5),
            (ExperienceLevel.ADVANCED, 1.0),
            (ExperienceLevel.EXPERT, 1.0),
        ],
    )
    def test_experience_factor(self, experience, factor):
        """Hours scale by the experience factor."""
        result = _estimate(_hours(12), experience)
        assert result.adjusted_hours == pytest.approx(12 * factor)

    def test_ceiling_conversions(self):
        """Days and weeks round up at each conversion."""
        # 31 hours -> 6 days (5.17 rounded up) -> 2 weeks (1.2 rounded up)
        result = _estimate(_hours(31))
        assert result.days == 6
        assert result.weeks == 2
        assert result.estimated == "2 weeks (6 working days)"

    def test_exact_boundaries(self):
        """Exact multiples do not round up further."""
        result = _estimate(_hours(30))
        assert result.days == 5
        assert result.weeks == 1

    def test_shop_example(self):
        """Auth plus payments for a beginner is 48 hours, 8 days, 2 weeks."""
        result = _estimate(_hours(8, 16), ExperienceLevel.BEGINNER)
        assert result.adjusted_hours == 48
        assert (result.days, result.weeks) == (8, 2)

    def test_fixed_phases(self):
        """Four descriptive phases are always emitted."""
        result = _estimate(_hours(8))
        assert result.phases == PHASES
        assert len(result.phases) == 4
        assert "60%" in result.phases[1]

    def test_more_features_never_shorter(self):
        """Adding a feature never shortens the estimate."""
        a = _estimate(_hours(8, 6))
        b = _estimate(_hours(8, 6, 4))
        assert b.days >= a.days
        assert b.weeks >= a.weeks

    def test_reasoning_mentions_experience(self):
        """Reasoning explains the derivation."""
        result = _estimate(_hours(8), ExperienceLevel.INTERMEDIATE)
        assert "intermediate" in result.reasoning
        assert "1 features" in result.reasoning
