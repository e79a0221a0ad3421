"""Workflow orchestration."""

from roadforge.workflows.plan import Analyze, Chart, Expand, Planned, planner_graph
from roadforge.workflows.state import PlannerState, Severity, Stage

__all__ = [
    # Graph and nodes
    "planner_graph",
    "Analyze",
    "Expand",
    "Chart",
    "Planned",
    # State
    "PlannerState",
    "Severity",
    "Stage",
]
