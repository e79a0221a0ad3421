"""Recipe builder: expands an Analysis into a technical specification."""

import logging

from roadforge.agents.prose import ProseWriter
from roadforge.exceptions import StageFailure
from roadforge.models.analysis import Analysis, TechCategory
from roadforge.models.project import ProjectInput
from roadforge.models.recipe import Recipe, RecipeSection, SectionStatus
from roadforge.pipeline.recipe.sections import (
    build_api_endpoints,
    build_architecture,
    build_database_schema,
    build_deployment_guide,
    build_file_structure,
    build_implementation_phases,
    overview_text,
)

logger = logging.getLogger(__name__)

RECIPE_STAGE = "recipe"

CATEGORY_TITLES = {
    TechCategory.FRONTEND: "Frontend",
    TechCategory.BACKEND: "Backend",
    TechCategory.DATABASE: "Database",
    TechCategory.HOSTING: "Hosting",
    TechCategory.TOOLS: "Tools & Services",
}


def _category_sections(analysis: Analysis) -> list[RecipeSection]:
    """One draft section per technology category present, in category order."""
    sections = []
    for category, title in CATEGORY_TITLES.items():
        recs = [r for r in analysis.tech_stack if r.category == category]
        if not recs:
            continue
        lines = []
        for rec in recs:
            line = f"**{rec.technology}** ({rec.priority.value}): {rec.reasoning}"
            if rec.alternatives:
                line += f" Alternatives: {', '.join(rec.alternatives)}."
            lines.append(line)
        sections.append(RecipeSection(key=category.value, title=title, body="\n".join(lines)))
    return sections


async def _refine(
    section: RecipeSection,
    writer: ProseWriter,
    project: ProjectInput,
    analysis: Analysis,
) -> RecipeSection:
    """Let the collaborator reword a section; keep the draft if it fails."""
    try:
        body = await writer(section.key, section.body, project, analysis)
    except Exception as e:
        # Writers are caller-supplied and may raise anything
        logger.warning("Section '%s' left incomplete: %s", section.key, e)
        return section.model_copy(
            update={"status": SectionStatus.INCOMPLETE, "note": str(e) or type(e).__name__}
        )
    return section.model_copy(update={"body": body})


async def build_recipe(
    project: ProjectInput,
    analysis: Analysis,
    writer: ProseWriter | None = None,
) -> Recipe:
    """Expand an Analysis into a Recipe.

    Args:
        project: Original project input.
        analysis: Completed analysis; read, never mutated.
        writer: Optional prose collaborator for overview and category sections.

    Returns:
        Recipe. Sections the collaborator failed on keep their rule-based
        text and are marked incomplete.

    Raises:
        StageFailure: If the rule-based expansion itself fails.
    """
    logger.info("Building recipe for %s", project.name)
    try:
        overview = RecipeSection(
            key="overview", title="Overview", body=overview_text(project, analysis)
        )
        sections = _category_sections(analysis)
        recipe = Recipe(
            project_name=project.name,
            description=project.description,
            overview=overview,
            sections=sections,
            architecture=build_architecture(project, analysis),
            file_structure=build_file_structure(project, analysis),
            database_schema=build_database_schema(analysis),
            api_endpoints=build_api_endpoints(analysis),
            implementation_phases=build_implementation_phases(analysis),
            deployment=build_deployment_guide(analysis),
        )
    except Exception as e:
        logger.error("  [%s] failed: %s", RECIPE_STAGE, e)
        raise StageFailure(RECIPE_STAGE, {"analysis": analysis}) from e

    if writer is None:
        return recipe

    overview = await _refine(recipe.overview, writer, project, analysis)
    sections = [await _refine(s, writer, project, analysis) for s in recipe.sections]
    return recipe.model_copy(update={"overview": overview, "sections": sections})
