"""Stack recommender stage.

Experience picks the frontend; feature flags pick backend, database and
extra tools. The archetype is accepted for context but never branches.
"""

from roadforge.models.analysis import (
    FeatureSignal,
    Priority,
    TechCategory,
    TechRecommendation,
)
from roadforge.models.project import ExperienceLevel
from roadforge.pipeline.stages.complexity import DATA_HEAVY_FEATURES
from roadforge.pipeline.stages.features import FILE_UPLOAD, PAYMENTS, REAL_TIME

BEGINNER_FRONTEND = TechRecommendation(
    technology="React with Vite",
    category=TechCategory.FRONTEND,
    reasoning=(
        "React is beginner-friendly with excellent documentation and community support. "
        "Vite provides fast development experience."
    ),
    alternatives=["Vue.js", "Plain HTML/CSS/JS"],
    priority=Priority.REQUIRED,
)

FULLSTACK_FRONTEND = TechRecommendation(
    technology="Next.js",
    category=TechCategory.FRONTEND,
    reasoning=(
        "Next.js provides full-stack capabilities, built-in optimization, and excellent "
        "developer experience for complex applications."
    ),
    alternatives=["React + Express", "SvelteKit"],
    priority=Priority.REQUIRED,
)

CONCURRENT_BACKEND = TechRecommendation(
    technology="Node.js with Express",
    category=TechCategory.BACKEND,
    reasoning=(
        "Node.js excels at real-time applications and has excellent payment processing "
        "libraries"
    ),
    alternatives=["Python with FastAPI", "Go with Gin"],
    priority=Priority.REQUIRED,
)

LIGHT_BACKEND = TechRecommendation(
    technology="Node.js with Express",
    category=TechCategory.BACKEND,
    reasoning=(
        "Lightweight and efficient for standard web applications with good JavaScript "
        "ecosystem"
    ),
    alternatives=["Python with Flask", "Ruby on Rails"],
    priority=Priority.RECOMMENDED,
)

RELATIONAL_DATABASE = TechRecommendation(
    technology="PostgreSQL",
    category=TechCategory.DATABASE,
    reasoning=(
        "PostgreSQL provides ACID compliance, complex queries, and excellent reliability "
        "for user data and transactions"
    ),
    alternatives=["MongoDB", "MySQL"],
    priority=Priority.REQUIRED,
)

LIGHT_DATABASE = TechRecommendation(
    technology="SQLite or MongoDB",
    category=TechCategory.DATABASE,
    reasoning="Simple database solution suitable for straightforward data storage needs",
    alternatives=["PostgreSQL", "Firebase"],
    priority=Priority.RECOMMENDED,
)

# Feature name -> extra tool appended when the feature is present, in this order
FEATURE_TOOLS: tuple[tuple[str, TechRecommendation], ...] = (
    (
        PAYMENTS,
        TechRecommendation(
            technology="Stripe",
            category=TechCategory.TOOLS,
            reasoning=(
                "Industry-standard payment processing with excellent documentation and "
                "security"
            ),
            alternatives=["PayPal", "Square"],
            priority=Priority.REQUIRED,
        ),
    ),
    (
        REAL_TIME,
        TechRecommendation(
            technology="Socket.io or WebSockets",
            category=TechCategory.TOOLS,
            reasoning="Essential for real-time communication and live updates",
            alternatives=["Server-Sent Events", "WebRTC"],
            priority=Priority.REQUIRED,
        ),
    ),
    (
        FILE_UPLOAD,
        TechRecommendation(
            technology="Cloudinary or AWS S3",
            category=TechCategory.TOOLS,
            reasoning="Managed object storage keeps uploaded files out of the application server",
            alternatives=["Firebase Storage"],
            priority=Priority.RECOMMENDED,
        ),
    ),
)

HOSTING = {
    FULLSTACK_FRONTEND.technology: TechRecommendation(
        technology="Vercel",
        category=TechCategory.HOSTING,
        reasoning="First-class Next.js hosting with preview deployments",
        alternatives=["Netlify", "Render"],
        priority=Priority.OPTIONAL,
    ),
    BEGINNER_FRONTEND.technology: TechRecommendation(
        technology="Netlify",
        category=TechCategory.HOSTING,
        reasoning="Simple static hosting for a Vite build with a generous free tier",
        alternatives=["Vercel", "GitHub Pages"],
        priority=Priority.OPTIONAL,
    ),
}


def recommend_stack(
    archetype: str,
    features: list[FeatureSignal],
    experience: ExperienceLevel,
) -> list[TechRecommendation]:
    """Recommend technologies for the project.

    Args:
        archetype: Classified archetype, informational only.
        features: Signals from the feature extractor.
        experience: Developer experience level.

    Returns:
        Recommendations ordered frontend, backend, database, tools, hosting.
    """
    names = {f.feature for f in features}

    frontend = BEGINNER_FRONTEND if experience == ExperienceLevel.BEGINNER else FULLSTACK_FRONTEND
    recommendations = [frontend]

    if REAL_TIME in names or PAYMENTS in names:
        recommendations.append(CONCURRENT_BACKEND)
    else:
        recommendations.append(LIGHT_BACKEND)

    if names & DATA_HEAVY_FEATURES:
        recommendations.append(RELATIONAL_DATABASE)
    else:
        recommendations.append(LIGHT_DATABASE)

    recommendations.extend(tool for feature, tool in FEATURE_TOOLS if feature in names)
    recommendations.append(HOSTING[frontend.technology])
    # Callers own the result; never hand out the shared table entries
    return [rec.model_copy(deep=True) for rec in recommendations]
