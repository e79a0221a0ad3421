"""Risk identifier stage.

Unlike the classifier, every matching rule is emitted.
"""

from collections.abc import Callable
from dataclasses import dataclass

from roadforge.models.analysis import (
    ComplexityRating,
    ComplexityTier,
    FeatureSignal,
    Risk,
    Severity,
    SkillLevel,
)
from roadforge.models.project import ExperienceLevel, ProjectInput

RiskCheck = Callable[[ProjectInput, ComplexityRating, list[FeatureSignal]], bool]


@dataclass(frozen=True)
class RiskRule:
    """A predicate and the risk it raises."""

    risk: str
    severity: Severity
    mitigation: str
    applies: RiskCheck


def _high_count(features: list[FeatureSignal]) -> int:
    return sum(1 for f in features if f.complexity == ComplexityTier.HIGH)


RISK_RULES: tuple[RiskRule, ...] = (
    RiskRule(
        risk="Project Scope Too Large",
        severity=Severity.HIGH,
        mitigation="Consider breaking into smaller phases or reducing initial feature set",
        applies=lambda project, complexity, features: complexity.overall == SkillLevel.EXPERT,
    ),
    RiskRule(
        risk="Multiple Complex Features",
        severity=Severity.MEDIUM,
        mitigation="Implement complex features one at a time and thoroughly test each",
        applies=lambda project, complexity, features: _high_count(features) > 2,
    ),
    RiskRule(
        risk="Skill Gap",
        severity=Severity.MEDIUM,
        mitigation="Start with simpler version and gradually add features as skills develop",
        applies=lambda project, complexity, features: (
            project.experience == ExperienceLevel.BEGINNER
            and complexity.overall != SkillLevel.BEGINNER
        ),
    ),
    RiskRule(
        risk="Ambitious Timeline",
        severity=Severity.MEDIUM,
        mitigation="Focus on MVP first, then iterate with additional features",
        applies=lambda project, complexity, features: (
            bool((project.timeline or "").strip()) and len(features) > 5
        ),
    ),
)


def identify_risks(
    project: ProjectInput,
    complexity: ComplexityRating,
    features: list[FeatureSignal],
    rules: tuple[RiskRule, ...] = RISK_RULES,
) -> list[Risk]:
    """Flag risks from the input and earlier stage outputs.

    Args:
        project: Original project input (experience, timeline preference).
        complexity: Rating from the complexity analyzer.
        features: Signals from the feature extractor.
        rules: Risk rules, all evaluated.

    Returns:
        Risks for every matching rule, in rule order. May be empty.
    """
    return [
        Risk(risk=rule.risk, severity=rule.severity, mitigation=rule.mitigation)
        for rule in rules
        if rule.applies(project, complexity, features)
    ]
