"""Pydantic models for roadforge."""

from roadforge.models.analysis import (
    Analysis,
    ComplexityRating,
    ComplexityTier,
    FeatureSignal,
    Priority,
    ProjectType,
    Risk,
    Severity,
    SkillLevel,
    TechCategory,
    TechRecommendation,
    TimelineEstimate,
)
from roadforge.models.project import ExperienceLevel, ProjectInput
from roadforge.models.recipe import Recipe, RecipeSection, SectionStatus
from roadforge.models.roadmap import Roadmap, RoadmapPhase, RoadmapStep, TaskPrompt

__all__ = [
    "Analysis",
    "ComplexityRating",
    "ComplexityTier",
    "ExperienceLevel",
    "FeatureSignal",
    "Priority",
    "ProjectInput",
    "ProjectType",
    "Recipe",
    "RecipeSection",
    "Risk",
    "Roadmap",
    "RoadmapPhase",
    "RoadmapStep",
    "SectionStatus",
    "Severity",
    "SkillLevel",
    "TaskPrompt",
    "TechCategory",
    "TechRecommendation",
    "TimelineEstimate",
]
