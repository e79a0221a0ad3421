"""Task prompt templates for roadmap steps."""

from jinja2 import Template

from roadforge.models.analysis import Analysis, SkillLevel, TechCategory
from roadforge.models.project import ProjectInput
from roadforge.models.roadmap import TaskPrompt

TASK_TEMPLATE = Template("""\
Act as a senior {{ stack }} developer mentoring a {{ experience }} developer.

I am building {{ project.name }}, a {{ archetype }}.
{% if features %}Detected features: {{ features }}.
{% endif %}\
{% if constraints %}Constraints: {{ constraints }}.
{% endif %}
Current phase: {{ phase }}
Step {{ number }}: {{ title }}

First explain the approach for this step, then provide complete, working code \
and commands, then list how to verify the result. Keep explanations at a \
{{ difficulty }} level.\
""")

EXPECTED_TEMPLATE = Template("""\
Complete code and commands for "{{ title }}" that I can copy into the project, \
followed by a verification checklist{% if deliverables %} confirming progress \
toward: {{ deliverables }}{% endif %}.\
""")


def _stack_summary(analysis: Analysis) -> str:
    parts = [
        analysis.technology_for(category, "")
        for category in (TechCategory.FRONTEND, TechCategory.BACKEND, TechCategory.DATABASE)
    ]
    return " / ".join(p for p in parts if p) or "web"


def render_task_prompt(
    project: ProjectInput,
    analysis: Analysis,
    phase: str,
    number: int,
    title: str,
    difficulty: SkillLevel,
    deliverables: list[str],
) -> TaskPrompt:
    """Render the template prompt for one roadmap step."""
    constraints = "; ".join(c for c in project.constraints if c.strip())
    task = TASK_TEMPLATE.render(
        stack=_stack_summary(analysis),
        experience=project.experience.value,
        project=project,
        archetype=analysis.project_type.archetype,
        features=", ".join(f.feature for f in analysis.features),
        constraints=constraints,
        phase=phase,
        number=number,
        title=title,
        difficulty=difficulty.value,
    )
    expected = EXPECTED_TEMPLATE.render(title=title, deliverables=", ".join(deliverables))
    return TaskPrompt(task=task, expected_output=expected)
