"""Planner workflow using Pydantic Graph: Analyze -> Expand -> Chart."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic_graph import BaseNode, End, Graph, GraphRunContext

from roadforge.exceptions import StageFailure
from roadforge.pipeline.orchestrator import run_analysis_async
from roadforge.pipeline.recipe import build_recipe
from roadforge.pipeline.roadmap import build_roadmap
from roadforge.workflows.state import PlannerState, Severity, Stage


@dataclass
class Planned:
    """Workflow reached the requested stage."""

    stage: Stage


Ctx = GraphRunContext[PlannerState, None]


@dataclass
class Analyze(BaseNode[PlannerState, None, Planned]):
    """Run the analysis pipeline unless a cached Analysis exists."""

    async def run(self, ctx: Ctx) -> Expand | End[Planned]:
        state = ctx.state
        progress = state.on_progress

        if state.analysis is None:
            progress(Severity.INFO, "Analyzing project...")
            try:
                state.analysis = await run_analysis_async(state.project)
            except StageFailure as e:
                progress(Severity.ERROR, f"Analysis failed at {e.stage}")
                raise
            progress(
                Severity.SUCCESS,
                f"{state.analysis.project_type.archetype}, "
                f"{len(state.analysis.features)} features, "
                f"{state.analysis.complexity.overall.value} complexity",
            )
        else:
            progress(Severity.INFO, "Using cached analysis")

        state.current = Stage.ANALYSIS
        if state.stop_after == Stage.ANALYSIS:
            return End(Planned(stage=Stage.ANALYSIS))
        return Expand()


@dataclass
class Expand(BaseNode[PlannerState, None, Planned]):
    """Expand the Analysis into a Recipe."""

    async def run(self, ctx: Ctx) -> Chart | End[Planned]:
        state = ctx.state
        progress = state.on_progress

        if state.recipe is None:
            progress(Severity.INFO, "Writing recipe...")
            try:
                state.recipe = await build_recipe(state.project, state.analysis, state.writer)
            except StageFailure:
                progress(Severity.ERROR, "Recipe failed")
                raise
            incomplete = state.recipe.incomplete_sections()
            if incomplete:
                progress(Severity.WARNING, f"Recipe incomplete: {', '.join(incomplete)}")
            else:
                progress(Severity.SUCCESS, "Recipe written")
        else:
            progress(Severity.INFO, "Using cached recipe")

        state.current = Stage.RECIPE
        if state.stop_after == Stage.RECIPE:
            return End(Planned(stage=Stage.RECIPE))
        return Chart()


@dataclass
class Chart(BaseNode[PlannerState, None, Planned]):
    """Expand the Recipe into a Roadmap."""

    async def run(self, ctx: Ctx) -> End[Planned]:
        state = ctx.state
        progress = state.on_progress

        if state.roadmap is None:
            progress(Severity.INFO, "Charting roadmap...")
            try:
                state.roadmap = await build_roadmap(
                    state.project,
                    state.analysis,
                    state.recipe,
                    state.writer,
                    include_prompts=state.include_prompts,
                )
            except StageFailure:
                progress(Severity.ERROR, "Roadmap failed")
                raise
            progress(Severity.SUCCESS, f"Roadmap charted ({state.roadmap.total_steps} steps)")
        else:
            progress(Severity.INFO, "Using cached roadmap")

        state.current = Stage.ROADMAP
        return End(Planned(stage=Stage.ROADMAP))


planner_graph = Graph(
    nodes=[Analyze, Expand, Chart],
    state_type=PlannerState,
    run_end_type=Planned,
)
