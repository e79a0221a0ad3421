"""Rule-based analysis stages, in pipeline order."""

from roadforge.pipeline.stages.classifier import classify_project_type
from roadforge.pipeline.stages.complexity import analyze_complexity
from roadforge.pipeline.stages.features import extract_features
from roadforge.pipeline.stages.risks import identify_risks
from roadforge.pipeline.stages.stack import recommend_stack
from roadforge.pipeline.stages.timeline import estimate_timeline

__all__ = [
    "analyze_complexity",
    "classify_project_type",
    "estimate_timeline",
    "extract_features",
    "identify_risks",
    "recommend_stack",
]
