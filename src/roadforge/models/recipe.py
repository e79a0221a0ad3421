"""Pydantic models for the recipe (expanded technical specification)."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field


class SectionStatus(str, Enum):
    """Whether a prose section was fully produced."""

    COMPLETE = "complete"
    INCOMPLETE = "incomplete"


class RecipeSection(BaseModel):
    """A keyed block of specification text."""

    key: str = Field(description="Section key: overview, frontend, database")
    title: str
    body: str
    status: SectionStatus = SectionStatus.COMPLETE
    note: str | None = Field(default=None, description="Why the section is incomplete")


class Component(BaseModel):
    """An architectural component."""

    name: str
    purpose: str
    technologies: list[str] = Field(default_factory=list)


class TechnicalArchitecture(BaseModel):
    """High-level architecture of the project."""

    overview: str
    components: list[Component] = Field(default_factory=list)
    data_flow: str
    security: str


class FileSpec(BaseModel):
    """A file in the proposed layout."""

    filename: str
    purpose: str
    dependencies: list[str] = Field(default_factory=list)


class DirectorySpec(BaseModel):
    """A directory in the proposed layout."""

    directory: str
    purpose: str
    files: list[FileSpec] = Field(default_factory=list)


class TableField(BaseModel):
    """A column in a proposed table."""

    name: str
    type: str
    constraints: str = ""
    description: str


class Table(BaseModel):
    """A proposed database table."""

    name: str
    purpose: str
    fields: list[TableField] = Field(default_factory=list)
    relationships: list[str] = Field(default_factory=list)


class DatabaseSchema(BaseModel):
    """Proposed database schema."""

    database: str
    tables: list[Table] = Field(default_factory=list)
    indexes: list[str] = Field(default_factory=list)


class ApiEndpoint(BaseModel):
    """A proposed HTTP endpoint."""

    endpoint: str
    method: Literal["GET", "POST", "PUT", "DELETE", "PATCH"]
    purpose: str
    request_body: str | None = None
    response_format: str
    authentication: bool
    rate_limiting: str | None = None


class ImplementationPhase(BaseModel):
    """A phase of the implementation plan."""

    phase: str = Field(description="Phase 1: Project Foundation")
    duration: str = Field(description="Range in days: 3-5 days")
    tasks: list[str] = Field(default_factory=list)
    deliverables: list[str] = Field(default_factory=list)
    dependencies: list[str] = Field(default_factory=list)


class DeploymentGuide(BaseModel):
    """Production deployment checklist."""

    environment: str
    requirements: list[str] = Field(default_factory=list)
    steps: list[str] = Field(default_factory=list)
    configuration: list[str] = Field(default_factory=list)


class Recipe(BaseModel):
    """Technical specification derived from an Analysis."""

    project_name: str
    description: str
    overview: RecipeSection
    sections: list[RecipeSection] = Field(default_factory=list)
    architecture: TechnicalArchitecture
    file_structure: list[DirectorySpec] = Field(default_factory=list)
    database_schema: DatabaseSchema
    api_endpoints: list[ApiEndpoint] = Field(default_factory=list)
    implementation_phases: list[ImplementationPhase] = Field(default_factory=list)
    deployment: DeploymentGuide

    def incomplete_sections(self) -> list[str]:
        """Keys of sections the prose collaborator could not finish."""
        return [
            s.key
            for s in [self.overview, *self.sections]
            if s.status == SectionStatus.INCOMPLETE
        ]
