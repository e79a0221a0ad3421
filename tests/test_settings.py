"""Tests for settings module."""

from unittest.mock import MagicMock, patch

import pytest

from roadforge.settings import (
    NoAPIKeyError,
    Prose,
    Settings,
    _create_model,
    _get_available_providers,
    _get_model_priority,
    get_fallback_model,
    get_model,
    get_settings,
)


class TestSettings:
    """Test Settings class configuration."""

    def test_settings_defaults(self):
        """Settings has correct default values."""
        with patch.dict("os.environ", {}, clear=True):
            get_settings.cache_clear()
            # Disable .env file loading for this test
            with patch.object(Settings, "model_config", {"env_file": None}):
                settings = Settings()
                assert settings.anthropic_api_key is None
                assert settings.openai_api_key is None
                assert settings.logfire_token is None
                assert settings.prose_enabled is False
                assert settings.cache_dir == ".roadforge"

    def test_settings_loads_from_env(self):
        """Settings loads keys and flags from environment."""
        with patch.dict(
            "os.environ",
            {
                "ANTHROPIC_API_KEY": "sk-ant-test123",
                "OPENAI_API_KEY": "sk-openai-test456",
                "PROSE_ENABLED": "true",
                "CACHE_DIR": ".plans",
            },
            clear=True,
        ):
            get_settings.cache_clear()
            settings = Settings()
            assert settings.anthropic_api_key == "sk-ant-test123"
            assert settings.openai_api_key == "sk-openai-test456"
            assert settings.prose_enabled is True
            assert settings.cache_dir == ".plans"
        get_settings.cache_clear()


class TestGetSettings:
    """Test get_settings caching."""

    def test_get_settings_returns_same_instance(self):
        """get_settings returns cached instance."""
        get_settings.cache_clear()
        assert get_settings() is get_settings()

    def test_cache_clear_creates_new_instance(self):
        """Clearing cache creates new Settings."""
        get_settings.cache_clear()
        s1 = get_settings()
        get_settings.cache_clear()
        s2 = get_settings()
        assert s1 is not s2


class TestModelPriority:
    """Test model priority selection."""

    def test_task_prompts_get_fast_models(self):
        """Task prompt rewrites use the fast model list."""
        assert "haiku" in _get_model_priority(Prose.TASK_PROMPT)[0]

    def test_recipe_gets_standard_models(self):
        """Recipe prose uses the standard model list."""
        assert "sonnet" in _get_model_priority(Prose.RECIPE)[0]


class TestGetAvailableProviders:
    """Test provider detection from API keys."""

    @pytest.mark.parametrize(
        "anthropic,openai,expected",
        [
            (None, None, set()),
            ("sk-ant-test", None, {"anthropic"}),
            (None, "sk-openai-test", {"openai"}),
            ("sk-ant-test", "sk-openai-test", {"anthropic", "openai"}),
        ],
    )
    def test_providers_from_keys(self, anthropic, openai, expected):
        """Each configured key enables its provider."""
        with patch("roadforge.settings.get_settings") as mock:
            mock_settings = MagicMock()
            mock_settings.anthropic_api_key = anthropic
            mock_settings.openai_api_key = openai
            mock.return_value = mock_settings
            assert _get_available_providers() == expected


class TestNoAPIKeyError:
    """Test NoAPIKeyError exception."""

    def test_error_message(self):
        """NoAPIKeyError has helpful message."""
        error = NoAPIKeyError()
        assert "ANTHROPIC_API_KEY" in str(error)
        assert "OPENAI_API_KEY" in str(error)


class TestGetModel:
    """Test get_model function."""

    def test_returns_first_model_in_priority(self):
        """get_model returns first model string."""
        assert get_model(Prose.RECIPE) == _get_model_priority(Prose.RECIPE)[0]


class TestCreateModel:
    """Test _create_model function."""

    def test_creates_anthropic_model(self):
        """_create_model creates AnthropicModel for anthropic: prefix."""
        from pydantic_ai.models.anthropic import AnthropicModel

        with patch("roadforge.settings.get_settings") as mock_settings:
            mock_settings.return_value.anthropic_api_key = "sk-ant-test"

            result = _create_model("anthropic:claude-3-5-haiku-20241022")

            assert isinstance(result, AnthropicModel)
            assert result.model_name == "claude-3-5-haiku-20241022"

    def test_creates_openai_model(self):
        """_create_model creates OpenAIModel for openai: prefix."""
        from pydantic_ai.models.openai import OpenAIModel

        with patch("roadforge.settings.get_settings") as mock_settings:
            mock_settings.return_value.openai_api_key = "sk-openai-test"

            result = _create_model("openai:gpt-4o")

            assert isinstance(result, OpenAIModel)
            assert result.model_name == "gpt-4o"

    def test_unknown_provider_raises(self):
        """_create_model raises for unknown provider."""
        with pytest.raises(ValueError, match="Unknown provider"):
            _create_model("unknown:model-name")


class TestGetFallbackModel:
    """Test get_fallback_model function."""

    def test_no_api_keys_raises_error(self):
        """get_fallback_model raises NoAPIKeyError when no keys configured."""
        with patch("roadforge.settings._get_available_providers", return_value=set()):
            with pytest.raises(NoAPIKeyError):
                get_fallback_model(Prose.RECIPE)

    def test_single_provider_returns_single_model(self):
        """Single provider returns model instance (not FallbackModel)."""
        from pydantic_ai.models.anthropic import AnthropicModel
        from pydantic_ai.models.fallback import FallbackModel

        with patch("roadforge.settings.get_settings") as mock_settings:
            mock_settings.return_value.anthropic_api_key = "sk-ant-test"
            mock_settings.return_value.openai_api_key = None

            result = get_fallback_model(Prose.RECIPE)

            assert isinstance(result, AnthropicModel)
            assert not isinstance(result, FallbackModel)

    def test_multiple_providers_returns_fallback_model(self):
        """Multiple providers returns FallbackModel."""
        from pydantic_ai.models.fallback import FallbackModel

        with patch("roadforge.settings.get_settings") as mock_settings:
            mock_settings.return_value.anthropic_api_key = "sk-ant-test"
            mock_settings.return_value.openai_api_key = "sk-openai-test"

            result = get_fallback_model(Prose.TASK_PROMPT)

            assert isinstance(result, FallbackModel)
