"""Pydantic models for project analysis."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from roadforge.models.project import ExperienceLevel

# Complexity ratings share the experience scale
SkillLevel = ExperienceLevel


class ComplexityTier(str, Enum):
    """Per-feature complexity."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TechCategory(str, Enum):
    """Category of a technology recommendation."""

    FRONTEND = "frontend"
    BACKEND = "backend"
    DATABASE = "database"
    HOSTING = "hosting"
    TOOLS = "tools"


class Priority(str, Enum):
    """How strongly a technology is recommended."""

    REQUIRED = "required"
    RECOMMENDED = "recommended"
    OPTIONAL = "optional"


class Severity(str, Enum):
    """Risk severity."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ProjectType(BaseModel):
    """Classified project archetype."""

    model_config = ConfigDict(frozen=True)

    archetype: str
    confidence: float = Field(ge=0, le=1)
    reasoning: str


class FeatureSignal(BaseModel):
    """A capability requirement detected in the description."""

    model_config = ConfigDict(frozen=True)

    feature: str
    confidence: float = Field(ge=0, le=1)
    reasoning: str
    complexity: ComplexityTier
    estimated_hours: float = Field(gt=0)


class ComplexityRating(BaseModel):
    """Difficulty rating derived from the detected features."""

    model_config = ConfigDict(frozen=True)

    overall: SkillLevel
    frontend: float = Field(ge=0, le=10)
    backend: float = Field(ge=0, le=10)
    database: float = Field(ge=0, le=10)
    reasoning: str


class TechRecommendation(BaseModel):
    """A recommended technology with display-only alternatives."""

    model_config = ConfigDict(frozen=True)

    technology: str
    category: TechCategory
    reasoning: str
    alternatives: list[str] = Field(default_factory=list)
    priority: Priority


class TimelineEstimate(BaseModel):
    """Effort estimate in working days and weeks."""

    model_config = ConfigDict(frozen=True)

    estimated: str = Field(description="Human readable: 3 weeks (12 working days)")
    phases: list[str] = Field(default_factory=list)
    reasoning: str
    total_hours: float = Field(ge=0, description="Sum of feature effort before adjustment")
    adjusted_hours: float = Field(ge=0, description="Hours after the experience factor")
    days: int = Field(ge=1)
    weeks: int = Field(ge=1)


class Risk(BaseModel):
    """A flagged project risk."""

    model_config = ConfigDict(frozen=True)

    risk: str
    severity: Severity
    mitigation: str


class Analysis(BaseModel):
    """Combined result of all analysis stages."""

    model_config = ConfigDict(frozen=True)

    project_type: ProjectType
    features: list[FeatureSignal] = Field(default_factory=list)
    complexity: ComplexityRating
    tech_stack: list[TechRecommendation] = Field(default_factory=list)
    timeline: TimelineEstimate
    risks: list[Risk] = Field(default_factory=list)

    def has_feature(self, name: str) -> bool:
        """Check whether a feature was detected."""
        return any(f.feature == name for f in self.features)

    def technology_for(self, category: TechCategory, default: str) -> str:
        """First recommended technology in a category, or default."""
        for rec in self.tech_stack:
            if rec.category == category:
                return rec.technology
        return default
