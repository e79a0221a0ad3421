"""Type classifier stage.

Detects the project archetype from the description. Rules are evaluated in
priority order and the first rule with a matching keyword wins, so earlier
archetypes pre-empt later ones ("social task manager" is task management).
"""

from dataclasses import dataclass

from roadforge.models.analysis import ProjectType

DEFAULT_ARCHETYPE = "Custom Web Application"
DEFAULT_CONFIDENCE = 0.6


@dataclass(frozen=True)
class ArchetypeRule:
    """Trigger keywords and the ProjectType they produce."""

    archetype: str
    keywords: tuple[str, ...]
    confidence: float
    reasoning: str

    def matches(self, text: str) -> bool:
        return any(keyword in text for keyword in self.keywords)


ARCHETYPE_RULES: tuple[ArchetypeRule, ...] = (
    ArchetypeRule(
        archetype="E-commerce Platform",
        keywords=("shop", "store", "product", "cart", "payment", "inventory"),
        confidence=0.9,
        reasoning=(
            'Based on keywords like "shop", "product", "cart", or "payment" in your '
            "description, this appears to be an e-commerce platform. This will require "
            "product management, shopping cart functionality, payment processing, and "
            "inventory tracking."
        ),
    ),
    ArchetypeRule(
        archetype="Task Management System",
        keywords=("task", "todo", "project management", "kanban", "team", "collaboration"),
        confidence=0.85,
        reasoning=(
            "Your description mentions task management, team collaboration, or project "
            "organization features. This suggests a productivity application that will "
            "need user management, task tracking, team features, and possibly real-time "
            "collaboration."
        ),
    ),
    ArchetypeRule(
        archetype="Content Management System",
        keywords=("blog", "cms", "content", "article", "post", "publish"),
        confidence=0.8,
        reasoning=(
            "Based on content-related keywords, this appears to be a content management "
            "system or blogging platform. This will require content creation tools, "
            "publishing workflows, and possibly multi-user content management."
        ),
    ),
    ArchetypeRule(
        archetype="Analytics Dashboard",
        keywords=("dashboard", "analytics", "chart", "report", "metrics", "data visualization"),
        confidence=0.85,
        reasoning=(
            "Your project description suggests a data-driven application with dashboards "
            "and analytics. This will require data visualization components, real-time "
            "updates, and potentially complex data processing."
        ),
    ),
    ArchetypeRule(
        archetype="Social Platform",
        keywords=("social", "community", "chat", "message", "forum", "user profile"),
        confidence=0.8,
        reasoning=(
            "Based on social features mentioned in your description, this appears to be "
            "a community or social platform. This will require user profiles, messaging "
            "systems, and real-time communication features."
        ),
    ),
    ArchetypeRule(
        archetype="Learning Management System",
        keywords=("learn", "course", "education", "tutorial", "quiz", "student"),
        confidence=0.8,
        reasoning=(
            "Your description indicates an educational platform or learning management "
            "system. This will require course management, progress tracking, and "
            "possibly assessment tools."
        ),
    ),
)

DEFAULT_REASONING = (
    "Based on your description, this appears to be a custom web application. "
    "Recommendations are tailored to the specific features you mentioned."
)


def classify_project_type(
    description: str,
    rules: tuple[ArchetypeRule, ...] = ARCHETYPE_RULES,
) -> ProjectType:
    """Classify the project archetype.

    Args:
        description: Free-text project description.
        rules: Archetype rules in priority order.

    Returns:
        ProjectType of the first matching rule, or the default archetype with
        low confidence when nothing matches.
    """
    text = description.lower()
    for rule in rules:
        if rule.matches(text):
            return ProjectType(
                archetype=rule.archetype,
                confidence=rule.confidence,
                reasoning=rule.reasoning,
            )

    return ProjectType(
        archetype=DEFAULT_ARCHETYPE,
        confidence=DEFAULT_CONFIDENCE,
        reasoning=DEFAULT_REASONING,
    )
