"""Roadmap builder: turns recipe phases into numbered, time-boxed steps."""

import logging
import math
import re

from roadforge.agents.prose import ProseWriter
from roadforge.exceptions import StageFailure
from roadforge.models.analysis import Analysis, SkillLevel
from roadforge.models.project import ProjectInput
from roadforge.models.recipe import ImplementationPhase, Recipe, SectionStatus
from roadforge.models.roadmap import Roadmap, RoadmapPhase, RoadmapStep
from roadforge.pipeline.roadmap.prompts import render_task_prompt
from roadforge.pipeline.stages.timeline import HOURS_PER_DAY

logger = logging.getLogger(__name__)

ROADMAP_STAGE = "roadmap"

_DAY_RANGE = re.compile(r"(\d+)\s*-\s*(\d+)\s*days?")


def step_time(duration: str, task_count: int) -> str:
    """Split a phase duration ("3-5 days") evenly into per-step hours."""
    match = _DAY_RANGE.search(duration)
    if not match or task_count < 1:
        return duration
    low, high = (int(g) * HOURS_PER_DAY for g in match.groups())
    return f"{math.ceil(low / task_count)}-{math.ceil(high / task_count)} hours"


def phase_difficulty(index: int, count: int, analysis: Analysis) -> SkillLevel:
    """Foundation is beginner, release is intermediate, the rest follow the analysis."""
    if index == 0:
        return SkillLevel.BEGINNER
    if index == count - 1:
        return SkillLevel.INTERMEDIATE
    return analysis.complexity.overall


def _build_phase(
    phase: ImplementationPhase,
    difficulty: SkillLevel,
    first_number: int,
    project: ProjectInput,
    analysis: Analysis,
    include_prompts: bool,
) -> RoadmapPhase:
    estimated = step_time(phase.duration, len(phase.tasks))
    steps = []
    for offset, task in enumerate(phase.tasks):
        number = first_number + offset
        prompt = None
        if include_prompts:
            prompt = render_task_prompt(
                project, analysis, phase.phase, number, task, difficulty, phase.deliverables
            )
        steps.append(
            RoadmapStep(
                number=number,
                title=task,
                description=f"{task}. Delivers: {', '.join(phase.deliverables)}.",
                estimated_time=estimated,
                difficulty=difficulty,
                prompt=prompt,
            )
        )
    return RoadmapPhase(title=phase.phase, duration=phase.duration, steps=steps)


async def _refine_prompts(
    phase: RoadmapPhase,
    writer: ProseWriter,
    project: ProjectInput,
    analysis: Analysis,
) -> RoadmapPhase:
    """Let the collaborator reword task prompts; stop at the first failure."""
    steps = []
    for index, step in enumerate(phase.steps):
        if step.prompt is None:
            steps.append(step)
            continue
        try:
            task = await writer("task_prompt", step.prompt.task, project, analysis)
        except Exception as e:
            # Writers are caller-supplied and may raise anything
            logger.warning("Phase '%s' left incomplete: %s", phase.title, e)
            return phase.model_copy(
                update={
                    "steps": steps + phase.steps[index:],
                    "status": SectionStatus.INCOMPLETE,
                    "note": str(e) or type(e).__name__,
                }
            )
        prompt = step.prompt.model_copy(update={"task": task})
        steps.append(step.model_copy(update={"prompt": prompt}))
    return phase.model_copy(update={"steps": steps})


async def build_roadmap(
    project: ProjectInput,
    analysis: Analysis,
    recipe: Recipe,
    writer: ProseWriter | None = None,
    include_prompts: bool = True,
) -> Roadmap:
    """Expand a Recipe into a Roadmap.

    Step numbers run 1..N across all phases in recipe phase order.

    Args:
        project: Original project input.
        analysis: Analysis the recipe was built from.
        recipe: Recipe whose implementation phases become roadmap phases.
        writer: Optional prose collaborator for task prompts.
        include_prompts: Attach a TaskPrompt to every step.

    Returns:
        Roadmap. Phases the collaborator failed on keep template prompts and
        are marked incomplete.

    Raises:
        StageFailure: If the rule-based expansion itself fails.
    """
    logger.info("Building roadmap for %s", project.name)
    try:
        phases = []
        number = 1
        count = len(recipe.implementation_phases)
        for index, phase in enumerate(recipe.implementation_phases):
            difficulty = phase_difficulty(index, count, analysis)
            built = _build_phase(phase, difficulty, number, project, analysis, include_prompts)
            phases.append(built)
            number += len(built.steps)
        roadmap = Roadmap(project_name=recipe.project_name, phases=phases)
    except Exception as e:
        logger.error("  [%s] failed: %s", ROADMAP_STAGE, e)
        raise StageFailure(ROADMAP_STAGE, {"analysis": analysis, "recipe": recipe}) from e

    if writer is None or not include_prompts:
        return roadmap

    refined = [await _refine_prompts(p, writer, project, analysis) for p in roadmap.phases]
    return roadmap.model_copy(update={"phases": refined})
