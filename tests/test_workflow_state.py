"""Tests for planner workflow state."""

import pytest

from roadforge.workflows.state import PlannerState, Severity, Stage


class TestStage:
    """Test Stage enum."""

    def test_order(self):
        """Stages are ordered input, analysis, recipe, roadmap."""
        assert [s.value for s in Stage] == ["input", "analysis", "recipe", "roadmap"]
        assert Stage.ROADMAP.index == 3


class TestSeverity:
    """Test Severity enum."""

    def test_values(self):
        """Severity covers the progress message levels."""
        assert {s.value for s in Severity} == {"info", "success", "warning", "error"}


class TestPlannerState:
    """Test PlannerState navigation."""

    def test_defaults(self, shop_project):
        """New state starts at input with nothing cached."""
        state = PlannerState(project=shop_project)
        assert state.current == Stage.INPUT
        assert state.stop_after == Stage.ROADMAP
        assert state.analysis is None
        assert state.recipe is None
        assert state.roadmap is None
        assert state.include_prompts is True
        state.on_progress(Severity.INFO, "ignored")

    def test_go_back_keeps_caches(self, shop_project, shop_analysis, shop_recipe):
        """Going back moves the stage without clearing outputs."""
        state = PlannerState(
            project=shop_project,
            current=Stage.RECIPE,
            analysis=shop_analysis,
            recipe=shop_recipe,
        )
        state.go_back(Stage.ANALYSIS)

        assert state.current == Stage.ANALYSIS
        assert state.analysis is shop_analysis
        assert state.recipe is shop_recipe

    def test_go_back_cannot_go_forward(self, shop_project):
        """go_back rejects a later stage."""
        state = PlannerState(project=shop_project, current=Stage.ANALYSIS)
        with pytest.raises(ValueError, match="Cannot go back"):
            state.go_back(Stage.ROADMAP)

    def test_invalidate_from_recipe(self, shop_project, shop_analysis, shop_recipe):
        """Invalidating the recipe clears it and the roadmap only."""
        state = PlannerState(
            project=shop_project,
            current=Stage.ROADMAP,
            analysis=shop_analysis,
            recipe=shop_recipe,
        )
        state.invalidate_from(Stage.RECIPE)

        assert state.analysis is shop_analysis
        assert state.recipe is None
        assert state.roadmap is None
        assert state.current == Stage.ANALYSIS

    def test_invalidate_from_analysis_clears_everything(
        self, shop_project, shop_analysis, shop_recipe
    ):
        """Invalidating the analysis clears every cached output."""
        state = PlannerState(
            project=shop_project,
            current=Stage.RECIPE,
            analysis=shop_analysis,
            recipe=shop_recipe,
        )
        state.invalidate_from(Stage.ANALYSIS)

        assert state.analysis is None
        assert state.recipe is None
        assert state.current == Stage.INPUT

    def test_invalidate_later_stage_keeps_current(self, shop_project, shop_analysis):
        """Invalidating a stage ahead of the current one leaves the position alone."""
        state = PlannerState(project=shop_project, current=Stage.ANALYSIS, analysis=shop_analysis)
        state.invalidate_from(Stage.ROADMAP)

        assert state.current == Stage.ANALYSIS
        assert state.analysis is shop_analysis
