"""Render Analysis, Recipe and Roadmap as markdown documents."""

from roadforge.models.analysis import Analysis
from roadforge.models.recipe import Recipe, RecipeSection, SectionStatus
from roadforge.models.roadmap import Roadmap


def _percent(value: float) -> str:
    return f"{round(value * 100)}%"


def render_analysis(analysis: Analysis, project_name: str | None = None) -> str:
    """Convert an Analysis to a markdown report.

    Args:
        analysis: Output of the analysis pipeline.
        project_name: Optional heading title.

    Returns:
        Markdown string for the analysis report.
    """
    title = f"# Project Analysis: {project_name}\n" if project_name else "# Project Analysis\n"
    sections = [title]

    # Project type section
    pt = analysis.project_type
    sections.append("## Project Type\n")
    sections.append(f"- **Archetype:** {pt.archetype}")
    sections.append(f"- **Confidence:** {_percent(pt.confidence)}")
    sections.append(f"- **Reasoning:** {pt.reasoning}")
    sections.append("")

    # Features section
    sections.append("## Features\n")
    if analysis.features:
        sections.append("| Feature | Complexity | Hours | Confidence |")
        sections.append("|---------|------------|-------|------------|")
        for f in analysis.features:
            sections.append(
                f"| {f.feature} | {f.complexity.value} | {f.estimated_hours:g} "
                f"| {_percent(f.confidence)} |"
            )
    else:
        sections.append("No specific features detected.")
    sections.append("")

    # Complexity section
    c = analysis.complexity
    sections.append("## Complexity\n")
    sections.append(f"- **Overall:** {c.overall.value}")
    sections.append(f"- **Frontend:** {c.frontend:g}/10")
    sections.append(f"- **Backend:** {c.backend:g}/10")
    sections.append(f"- **Database:** {c.database:g}/10")
    sections.append(f"\n{c.reasoning}\n")

    # Tech stack section
    sections.append("## Tech Stack\n")
    for rec in analysis.tech_stack:
        sections.append(
            f"- **{rec.category.value}:** {rec.technology} ({rec.priority.value})"
            f" - {rec.reasoning}"
        )
        if rec.alternatives:
            sections.append(f"  - Alternatives: {', '.join(rec.alternatives)}")
    sections.append("")

    # Timeline section
    t = analysis.timeline
    sections.append("## Timeline\n")
    sections.append(f"**{t.estimated}** ({t.adjusted_hours:g} hours)\n")
    for i, phase in enumerate(t.phases, 1):
        sections.append(f"{i}. {phase}")
    sections.append(f"\n{t.reasoning}\n")

    # Risks section
    sections.append("## Risks\n")
    if analysis.risks:
        for r in analysis.risks:
            sections.append(f"- **{r.risk}** ({r.severity.value}): {r.mitigation}")
    else:
        sections.append("No significant risks identified.")

    return "\n".join(sections)


def _render_section(section: RecipeSection, level: str = "##") -> list[str]:
    lines = [f"{level} {section.title}\n", section.body]
    if section.status == SectionStatus.INCOMPLETE:
        lines.append(f"\n> Incomplete: {section.note or 'prose generation failed'}")
    lines.append("")
    return lines


def render_recipe(recipe: Recipe) -> str:
    """Convert a Recipe to a markdown technical specification."""
    sections = [f"# {recipe.project_name} - Technical Recipe\n"]
    sections.append(f"{recipe.description}\n")
    sections.extend(_render_section(recipe.overview))

    if recipe.sections:
        sections.append("## Technology Choices\n")
        for section in recipe.sections:
            sections.extend(_render_section(section, "###"))

    arch = recipe.architecture
    sections.append("## Technical Architecture\n")
    sections.append(f"{arch.overview}\n")
    sections.append("### Components\n")
    for comp in arch.components:
        techs = f" ({', '.join(comp.technologies)})" if comp.technologies else ""
        sections.append(f"- **{comp.name}**{techs}: {comp.purpose}")
    sections.append(f"\n### Data Flow\n\n{arch.data_flow}\n")
    sections.append(f"### Security\n\n{arch.security}\n")

    sections.append("## File Structure\n")
    for directory in recipe.file_structure:
        sections.append(f"### `{directory.directory}`\n")
        sections.append(f"{directory.purpose}\n")
        for f in directory.files:
            sections.append(f"- `{f.filename}`: {f.purpose}")
        sections.append("")

    schema = recipe.database_schema
    sections.append(f"## Database Schema ({schema.database})\n")
    for table in schema.tables:
        sections.append(f"### {table.name}\n")
        sections.append(f"{table.purpose}\n")
        sections.append("| Field | Type | Constraints | Description |")
        sections.append("|-------|------|-------------|-------------|")
        for field in table.fields:
            constraints = field.constraints or "-"
            sections.append(
                f"| {field.name} | {field.type} | {constraints} | {field.description} |"
            )
        if table.relationships:
            sections.append("\n**Relationships:**\n")
            for rel in table.relationships:
                sections.append(f"- {rel}")
        sections.append("")
    if schema.indexes:
        sections.append("### Indexes\n")
        for index in schema.indexes:
            sections.append(f"- `{index}`")
        sections.append("")

    sections.append("## API Endpoints\n")
    sections.append("| Method | Endpoint | Purpose | Auth |")
    sections.append("|--------|----------|---------|------|")
    for ep in recipe.api_endpoints:
        auth = "Yes" if ep.authentication else "No"
        sections.append(f"| {ep.method} | `{ep.endpoint}` | {ep.purpose} | {auth} |")
    sections.append("")

    sections.append("## Implementation Plan\n")
    for phase in recipe.implementation_phases:
        sections.append(f"### {phase.phase} ({phase.duration})\n")
        for task in phase.tasks:
            sections.append(f"- [ ] {task}")
        if phase.deliverables:
            sections.append(f"\n**Deliverables:** {', '.join(phase.deliverables)}")
        if phase.dependencies:
            sections.append(f"**Depends on:** {', '.join(phase.dependencies)}")
        sections.append("")

    deploy = recipe.deployment
    sections.append(f"## Deployment ({deploy.environment})\n")
    if deploy.requirements:
        sections.append("### Requirements\n")
        for req in deploy.requirements:
            sections.append(f"- {req}")
        sections.append("")
    if deploy.steps:
        sections.append("### Steps\n")
        for i, step in enumerate(deploy.steps, 1):
            sections.append(f"{i}. {step}")
        sections.append("")
    if deploy.configuration:
        sections.append("### Configuration\n")
        for item in deploy.configuration:
            sections.append(f"- {item}")

    return "\n".join(sections)


def render_roadmap(roadmap: Roadmap) -> str:
    """Convert a Roadmap to a markdown checklist with task prompts."""
    sections = [f"# {roadmap.project_name} - Roadmap\n"]
    sections.append(f"{roadmap.total_steps} steps across {len(roadmap.phases)} phases.\n")

    for phase in roadmap.phases:
        sections.append(f"## {phase.title} ({phase.duration})\n")
        if phase.status == SectionStatus.INCOMPLETE:
            sections.append(f"> Incomplete: {phase.note or 'prompt refinement failed'}\n")
        for step in phase.steps:
            sections.append(f"### Step {step.number}: {step.title}\n")
            sections.append(
                f"- **Estimated time:** {step.estimated_time}\n"
                f"- **Difficulty:** {step.difficulty.value}\n"
            )
            sections.append(f"{step.description}\n")
            if step.prompt:
                sections.append("**Prompt:**\n")
                sections.append("```text")
                sections.append(step.prompt.task)
                sections.append("```\n")
                sections.append(f"**Expected output:** {step.prompt.expected_output}\n")

    return "\n".join(sections)
