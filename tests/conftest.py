"""Shared test fixtures."""

import pytest
import pytest_asyncio

from roadforge.models.analysis import Analysis
from roadforge.models.project import ExperienceLevel, ProjectInput
from roadforge.models.recipe import Recipe
from roadforge.pipeline.orchestrator import run_analysis
from roadforge.pipeline.recipe.builder import build_recipe
from roadforge.workflows.state import PlannerState, Severity

# No archetype or feature keyword appears in this text
PLAIN_DESCRIPTION = "A quiet place to jot down daily thoughts"

SHOP_DESCRIPTION = "Users can log in, add products to a cart, and pay with a card"

LARGE_DESCRIPTION = (
    "Members log in, get realtime alerts, checkout with stripe, upload photos, "
    "search listings, use an admin area on mobile, see an analytics dashboard, "
    "receive email reminders, get ai-powered suggestions and watch video clips"
)


@pytest.fixture
def shop_project() -> ProjectInput:
    """A small e-commerce project."""
    return ProjectInput(
        name="Corner Shop",
        description=SHOP_DESCRIPTION,
        goals=["Sell handmade goods online"],
        constraints=["Small budget"],
        timeline="2 months",
        experience=ExperienceLevel.BEGINNER,
    )


@pytest.fixture
def plain_project() -> ProjectInput:
    """A project whose description triggers no rule."""
    return ProjectInput(
        name="Daily Notes",
        description=PLAIN_DESCRIPTION,
        goals=["Write every day"],
        timeline="1 month",
        experience=ExperienceLevel.BEGINNER,
    )


@pytest.fixture
def large_project() -> ProjectInput:
    """A project that triggers eleven features, four of them high tier."""
    return ProjectInput(
        name="Everything App",
        description=LARGE_DESCRIPTION,
        goals=["Do it all"],
        timeline="3 months",
        experience=ExperienceLevel.INTERMEDIATE,
    )


@pytest.fixture
def shop_analysis(shop_project) -> Analysis:
    """Analysis of the e-commerce project."""
    return run_analysis(shop_project)


@pytest.fixture
def plain_analysis(plain_project) -> Analysis:
    """Analysis of the keyword-free project."""
    return run_analysis(plain_project)


@pytest_asyncio.fixture
async def shop_recipe(shop_project, shop_analysis) -> Recipe:
    """Rule-based recipe for the e-commerce project."""
    return await build_recipe(shop_project, shop_analysis)


@pytest.fixture
def progress_messages() -> list[tuple[Severity, str]]:
    """Collect progress messages for assertions."""
    return []


@pytest.fixture
def planner_state(shop_project, progress_messages) -> PlannerState:
    """Planner state wired to collect progress messages."""

    def on_progress(severity: Severity, message: str) -> None:
        progress_messages.append((severity, message))

    return PlannerState(project=shop_project, on_progress=on_progress)
