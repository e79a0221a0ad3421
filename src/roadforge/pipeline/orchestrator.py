"""Analysis orchestrator.

Runs the six rule stages in dependency order on one ProjectInput and
assembles an Analysis. A failing stage is reported by name together with
the outputs of the stages that already completed.
"""

import asyncio
import logging
from collections.abc import Callable
from enum import StrEnum
from typing import Any

from roadforge.exceptions import InvalidInputError, StageFailure
from roadforge.models.analysis import Analysis, FeatureSignal, ProjectType
from roadforge.models.project import ProjectInput
from roadforge.pipeline.stages import (
    analyze_complexity,
    classify_project_type,
    estimate_timeline,
    extract_features,
    identify_risks,
    recommend_stack,
)

logger = logging.getLogger(__name__)


class AnalysisStage(StrEnum):
    """Named pipeline stages, in execution order."""

    TYPE_CLASSIFIER = "type_classifier"
    FEATURE_EXTRACTOR = "feature_extractor"
    COMPLEXITY_ANALYZER = "complexity_analyzer"
    STACK_RECOMMENDER = "stack_recommender"
    TIMELINE_ESTIMATOR = "timeline_estimator"
    RISK_IDENTIFIER = "risk_identifier"


def validate_input(project: ProjectInput) -> None:
    """Reject input that is missing required fields.

    Raises:
        InvalidInputError: Listing every problem found.
    """
    problems = []
    if not project.name.strip():
        problems.append("name is required")
    if not project.description.strip():
        problems.append("description is required")
    if not any(goal.strip() for goal in project.goals):
        problems.append("at least one non-empty goal is required")
    if not (project.timeline or "").strip():
        problems.append("timeline is required")
    if problems:
        raise InvalidInputError(problems)


def _run_stage(
    stage: AnalysisStage,
    completed: dict[str, Any],
    fn: Callable[..., Any],
    *args: Any,
) -> Any:
    """Run one stage, recording its output or wrapping its failure."""
    logger.debug("  [%s] starting...", stage)
    try:
        output = fn(*args)
    except Exception as e:
        logger.error("  [%s] failed: %s", stage, e)
        raise StageFailure(stage, completed) from e
    completed[stage] = output
    logger.debug("  [%s] completed", stage)
    return output


def _finish(
    project: ProjectInput,
    completed: dict[str, Any],
    project_type: ProjectType,
    features: list[FeatureSignal],
) -> Analysis:
    """Run stages 3-6 and assemble the Analysis."""
    complexity = _run_stage(
        AnalysisStage.COMPLEXITY_ANALYZER, completed, analyze_complexity, features
    )
    tech_stack = _run_stage(
        AnalysisStage.STACK_RECOMMENDER,
        completed,
        recommend_stack,
        project_type.archetype,
        features,
        project.experience,
    )
    timeline = _run_stage(
        AnalysisStage.TIMELINE_ESTIMATOR,
        completed,
        estimate_timeline,
        features,
        complexity,
        project.experience,
    )
    risks = _run_stage(
        AnalysisStage.RISK_IDENTIFIER, completed, identify_risks, project, complexity, features
    )

    analysis = Analysis(
        project_type=project_type,
        features=features,
        complexity=complexity,
        tech_stack=tech_stack,
        timeline=timeline,
        risks=risks,
    )
    logger.info(
        "Analyzed %s: %s, %d features, %s complexity, %d risks",
        project.name,
        project_type.archetype,
        len(features),
        complexity.overall.value,
        len(risks),
    )
    return analysis


def run_analysis(project: ProjectInput) -> Analysis:
    """Execute the analysis pipeline.

    Args:
        project: Validated or raw project input.

    Returns:
        Analysis assembled from all six stages.

    Raises:
        InvalidInputError: If required input fields are missing.
        StageFailure: If a stage raises.
    """
    validate_input(project)
    logger.info("Starting analysis of %s", project.name)

    completed: dict[str, Any] = {}
    project_type = _run_stage(
        AnalysisStage.TYPE_CLASSIFIER, completed, classify_project_type, project.description
    )
    features = _run_stage(
        AnalysisStage.FEATURE_EXTRACTOR, completed, extract_features, project.description
    )
    return _finish(project, completed, project_type, features)


async def run_analysis_async(project: ProjectInput) -> Analysis:
    """Execute the analysis pipeline with stages 1 and 2 in parallel.

    The classifier and the feature extractor are independent, so they run
    concurrently in worker threads. Their outputs are recorded in stage
    order once both have settled, so a failure carries exactly the same
    completed outputs as run_analysis would report.
    """
    validate_input(project)
    logger.info("Starting analysis of %s", project.name)

    parallel = [
        (AnalysisStage.TYPE_CLASSIFIER, classify_project_type),
        (AnalysisStage.FEATURE_EXTRACTOR, extract_features),
    ]
    results = await asyncio.gather(
        *(asyncio.to_thread(fn, project.description) for _, fn in parallel),
        return_exceptions=True,
    )

    completed: dict[str, Any] = {}
    for (stage, _), result in zip(parallel, results):
        if isinstance(result, Exception):
            logger.error("  [%s] failed: %s", stage, result)
            raise StageFailure(stage, completed) from result
        completed[stage] = result
        logger.debug("  [%s] completed", stage)
    return _finish(
        project,
        completed,
        completed[AnalysisStage.TYPE_CLASSIFIER],
        completed[AnalysisStage.FEATURE_EXTRACTOR],
    )
