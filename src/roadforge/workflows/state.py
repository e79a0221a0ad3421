"""State for the planner workflow."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from roadforge.agents.prose import ProseWriter
from roadforge.models.analysis import Analysis
from roadforge.models.project import ProjectInput
from roadforge.models.recipe import Recipe
from roadforge.models.roadmap import Roadmap


class Stage(StrEnum):
    """Workflow stages, in order."""

    INPUT = "input"
    ANALYSIS = "analysis"
    RECIPE = "recipe"
    ROADMAP = "roadmap"

    @property
    def index(self) -> int:
        return list(Stage).index(self)


class Severity(StrEnum):
    """Severity levels for progress messages."""

    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


ProgressCallback = Callable[[Severity, str], None]


def _noop_progress(severity: Severity, message: str) -> None:
    """Default no-op progress callback."""


@dataclass
class PlannerState:
    """Shared state for the planner workflow."""

    project: ProjectInput
    stop_after: Stage = Stage.ROADMAP
    writer: ProseWriter | None = None
    include_prompts: bool = True

    # Callback for UI interaction (CLI provides a Rich-based implementation)
    on_progress: ProgressCallback = _noop_progress

    # Furthest stage the user is looking at
    current: Stage = Stage.INPUT

    # Cached stage outputs, reused until invalidated
    analysis: Analysis | None = None
    recipe: Recipe | None = None
    roadmap: Roadmap | None = None

    def go_back(self, stage: Stage) -> None:
        """Move to an earlier stage. Cached outputs are kept.

        Raises:
            ValueError: If stage is ahead of the current stage.
        """
        if stage.index > self.current.index:
            raise ValueError(f"Cannot go back from {self.current} to {stage}")
        self.current = stage

    def invalidate_from(self, stage: Stage) -> None:
        """Clear cached outputs for stage and every later stage."""
        if stage.index <= Stage.ANALYSIS.index:
            self.analysis = None
        if stage.index <= Stage.RECIPE.index:
            self.recipe = None
        self.roadmap = None
        if self.current.index >= stage.index:
            self.current = list(Stage)[max(stage.index - 1, 0)]
