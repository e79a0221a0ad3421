"""Application settings and model selection."""

from enum import Enum
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    anthropic_api_key: str | None = None
    openai_api_key: str | None = None
    logfire_token: str | None = None

    # Prose collaborator is opt-in; rule-based output never depends on it
    prose_enabled: bool = False

    # Artifact settings
    cache_dir: str = ".roadforge"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


class Prose(Enum):
    """Prose agent types."""

    RECIPE = "prose.recipe"
    TASK_PROMPT = "prose.task_prompt"


# Model tiers - recipe prose uses standard, task prompts use fast
_STANDARD_MODELS = ["anthropic:claude-sonnet-4-5-20250929", "openai:gpt-4o"]
_FAST_MODELS = ["anthropic:claude-3-5-haiku-20241022", "openai:gpt-4o-mini"]

_FAST_AGENTS: set[Prose] = {Prose.TASK_PROMPT}


def _get_model_priority(agent: Prose) -> list[str]:
    """Get model priority list for an agent."""
    return _FAST_MODELS if agent in _FAST_AGENTS else _STANDARD_MODELS


class NoAPIKeyError(Exception):
    """Raised when no API keys are configured."""

    def __init__(self) -> None:
        super().__init__(
            "No API keys configured. Set ANTHROPIC_API_KEY or OPENAI_API_KEY environment variable."
        )


def _get_available_providers() -> set[str]:
    """Get set of available providers based on configured API keys."""
    settings = get_settings()
    providers = set()
    if settings.anthropic_api_key:
        providers.add("anthropic")
    if settings.openai_api_key:
        providers.add("openai")
    return providers


def get_model(agent: Prose) -> str:
    """Get primary model string for an agent.

    Agents are built with defer_model_check=True, so the string is only
    validated when the agent runs. Use get_fallback_model() at runtime.
    """
    return _get_model_priority(agent)[0]


def _create_model(model_str: str):
    """Create a model instance with API key from settings.

    pydantic-settings loads .env into Settings without exporting to environ,
    so keys are passed to the providers explicitly.
    """
    from pydantic_ai.models.anthropic import AnthropicModel
    from pydantic_ai.models.openai import OpenAIModel
    from pydantic_ai.providers.anthropic import AnthropicProvider
    from pydantic_ai.providers.openai import OpenAIProvider

    settings = get_settings()
    provider, model_name = model_str.split(":", 1)

    if provider == "anthropic":
        return AnthropicModel(
            model_name,
            provider=AnthropicProvider(api_key=settings.anthropic_api_key),
        )
    elif provider == "openai":
        return OpenAIModel(
            model_name,
            provider=OpenAIProvider(api_key=settings.openai_api_key),
        )
    else:
        raise ValueError(f"Unknown provider: {provider}")


def get_fallback_model(agent: Prose):
    """Get model with fallback support for runtime use.

    Args:
        agent: The agent type enum value

    Returns:
        FallbackModel if multiple models available, otherwise single model instance.

    Raises:
        NoAPIKeyError: If no configured provider serves this agent.
    """
    from pydantic_ai.models.fallback import FallbackModel

    available_providers = _get_available_providers()
    if not available_providers:
        raise NoAPIKeyError()

    priority_list = _get_model_priority(agent)
    available_models = [
        model for model in priority_list if model.split(":")[0] in available_providers
    ]

    if not available_models:
        raise NoAPIKeyError()

    model_instances = [_create_model(m) for m in available_models]

    if len(model_instances) == 1:
        return model_instances[0]

    return FallbackModel(model_instances[0], *model_instances[1:])
