"""Pydantic models for the roadmap."""

from pydantic import BaseModel, Field, computed_field

from roadforge.models.analysis import SkillLevel
from roadforge.models.recipe import SectionStatus


class TaskPrompt(BaseModel):
    """Hand-off payload for an external text-generation tool."""

    task: str
    expected_output: str


class RoadmapStep(BaseModel):
    """A single numbered step."""

    number: int = Field(ge=1)
    title: str
    description: str
    estimated_time: str = Field(description="Range in hours: 2-4 hours")
    difficulty: SkillLevel
    prompt: TaskPrompt | None = None


class RoadmapPhase(BaseModel):
    """An ordered group of steps."""

    title: str
    duration: str
    steps: list[RoadmapStep] = Field(default_factory=list)
    status: SectionStatus = SectionStatus.COMPLETE
    note: str | None = None


class Roadmap(BaseModel):
    """Ordered, time-boxed steps derived from a Recipe."""

    project_name: str
    phases: list[RoadmapPhase] = Field(default_factory=list)

    @computed_field
    @property
    def total_steps(self) -> int:
        """Number of steps across all phases."""
        return sum(len(p.steps) for p in self.phases)

    def steps(self) -> list[RoadmapStep]:
        """All steps in order."""
        return [step for phase in self.phases for step in phase.steps]
