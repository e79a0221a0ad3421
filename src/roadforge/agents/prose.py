"""Prose collaborator agent.

Fleshes out rule-based recipe sections and task prompts. The engine's
numbers and classifications never depend on it: every call gets a complete
draft and may only reword it.
"""

import logging
from collections.abc import Awaitable, Callable

from jinja2 import Template
from pydantic_ai import Agent

from roadforge.exceptions import CollaboratorError
from roadforge.models.analysis import Analysis
from roadforge.models.project import ProjectInput
from roadforge.settings import Prose, get_fallback_model, get_model

logger = logging.getLogger(__name__)

# (section_key, draft, project, analysis) -> rewritten text
ProseWriter = Callable[[str, str, ProjectInput, Analysis], Awaitable[str]]

SYSTEM_PROMPT = """\
You are a senior software architect writing a technical specification.

You receive a DRAFT section produced by a rule engine together with the
project context. Rewrite the draft as clear, specific prose for the project.

Rules:
- Keep every technology name, number, and priority from the draft exactly.
- Do NOT add technologies, features, or estimates that are not in the draft.
- Do NOT contradict the draft.
- Plain Markdown, no headings, at most 200 words.

Output ONLY the rewritten section text.
"""

USER_PROMPT = Template("""\
<project>
Name: {{ project.name }}
Type: {{ analysis.project_type.archetype }}
Experience: {{ project.experience.value }}
Complexity: {{ analysis.complexity.overall.value }}
{% if project.goals %}Goals:
{% for goal in project.goals if goal.strip() %}- {{ goal }}
{% endfor %}{% endif %}\
{% if project.constraints %}Constraints:
{% for constraint in project.constraints if constraint.strip() %}- {{ constraint }}
{% endfor %}{% endif %}\
</project>

<section key="{{ key }}">
{{ draft }}
</section>
""")

_AGENT_TYPES = {"task_prompt": Prose.TASK_PROMPT}

agent = Agent(
    model=get_model(Prose.RECIPE),
    output_type=str,
    system_prompt=SYSTEM_PROMPT,
    defer_model_check=True,
)


async def write_prose(
    key: str,
    draft: str,
    project: ProjectInput,
    analysis: Analysis,
) -> str:
    """Rewrite a rule-based draft section.

    Args:
        key: Section key (overview, frontend, task_prompt, ...).
        draft: Rule-based text the rewrite must stay faithful to.
        project: Original project input.
        analysis: Analysis the section was derived from.

    Returns:
        Rewritten section text.

    Raises:
        CollaboratorError: If no model is configured or the call fails.
    """
    prompt = USER_PROMPT.render(key=key, draft=draft, project=project, analysis=analysis)
    agent_type = _AGENT_TYPES.get(key, Prose.RECIPE)
    try:
        result = await agent.run(prompt, model=get_fallback_model(agent_type))
    except Exception as e:
        logger.warning("  [prose:%s] failed: %s", key, e)
        raise CollaboratorError(f"Prose generation failed for '{key}': {e}") from e

    text = result.output.strip()
    if not text:
        raise CollaboratorError(f"Prose generation returned nothing for '{key}'")
    return text
