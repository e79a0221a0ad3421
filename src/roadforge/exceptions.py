"""Exception hierarchy for roadforge."""

from typing import Any


class RoadforgeError(Exception):
    """Base exception for all roadforge errors."""


class InvalidInputError(RoadforgeError):
    """Project input is missing required fields. Raised before any stage runs."""

    def __init__(self, problems: list[str]) -> None:
        self.problems = problems
        super().__init__("Invalid project input: " + "; ".join(problems))


class StageFailure(RoadforgeError):
    """A pipeline stage raised. Outputs of earlier stages stay available."""

    def __init__(self, stage: str, completed: dict[str, Any] | None = None) -> None:
        self.stage = stage
        self.completed = dict(completed or {})
        super().__init__(f"Stage '{stage}' failed")


class CollaboratorError(RoadforgeError):
    """The prose-generation collaborator is unavailable or failed."""


class ArtifactError(RoadforgeError):
    """Failed to read or write a persisted artifact."""
