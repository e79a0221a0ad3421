"""Pydantic models for the project input record."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ExperienceLevel(str, Enum):
    """Developer experience, also used as the ordinal complexity scale."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"

    @property
    def rank(self) -> int:
        """Ordinal position: beginner < intermediate < advanced < expert."""
        return list(ExperienceLevel).index(self)


class ProjectInput(BaseModel):
    """A project submitted for analysis. Never mutated after submission."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Project name")
    description: str = Field(description="Free-text description, the primary signal source")
    goals: list[str] = Field(default_factory=list)
    constraints: list[str] = Field(default_factory=list)
    timeline: str | None = Field(default=None, description="Timeline preference: 2 months")
    experience: ExperienceLevel = ExperienceLevel.BEGINNER
