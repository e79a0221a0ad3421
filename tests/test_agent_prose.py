"""Tests for the prose collaborator agent."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from roadforge.agents.prose import SYSTEM_PROMPT, USER_PROMPT, agent, write_prose
from roadforge.exceptions import CollaboratorError
from roadforge.settings import NoAPIKeyError, Prose


class TestProseAgent:
    """Test prose agent configuration."""

    def test_system_prompt_forbids_new_facts(self):
        """System prompt keeps the rewrite faithful to the draft."""
        assert "Do NOT add technologies" in SYSTEM_PROMPT

    def test_agent_output_type_is_string(self):
        """Agent outputs a string."""
        assert agent.output_type is str

    def test_user_prompt_includes_context(self, shop_project, shop_analysis):
        """User prompt carries the project, the key and the draft."""
        prompt = USER_PROMPT.render(
            key="frontend", draft="Use React", project=shop_project, analysis=shop_analysis
        )
        assert "Name: Corner Shop" in prompt
        assert "Type: E-commerce Platform" in prompt
        assert "- Small budget" in prompt
        assert '<section key="frontend">' in prompt
        assert "Use React" in prompt


class TestWriteProse:
    """Test write_prose function."""

    @pytest.mark.asyncio
    async def test_returns_agent_output(self, shop_project, shop_analysis):
        """write_prose returns the stripped agent output."""
        with (
            patch.object(agent, "run", new_callable=AsyncMock) as mock_run,
            patch("roadforge.agents.prose.get_fallback_model") as mock_model,
        ):
            mock_result = MagicMock()
            mock_result.output = "  Rewritten overview  "
            mock_run.return_value = mock_result

            result = await write_prose("overview", "Draft", shop_project, shop_analysis)

            assert result == "Rewritten overview"
            mock_model.assert_called_once_with(Prose.RECIPE)
            assert "Draft" in mock_run.call_args[0][0]

    @pytest.mark.asyncio
    async def test_task_prompts_use_fast_agent(self, shop_project, shop_analysis):
        """Task prompt rewrites select the fast model tier."""
        with (
            patch.object(agent, "run", new_callable=AsyncMock) as mock_run,
            patch("roadforge.agents.prose.get_fallback_model") as mock_model,
        ):
            mock_run.return_value = MagicMock(output="Prompt")

            await write_prose("task_prompt", "Draft", shop_project, shop_analysis)

            mock_model.assert_called_once_with(Prose.TASK_PROMPT)

    @pytest.mark.asyncio
    async def test_no_api_key_is_collaborator_error(self, shop_project, shop_analysis):
        """Missing API keys surface as CollaboratorError."""
        with patch(
            "roadforge.agents.prose.get_fallback_model", side_effect=NoAPIKeyError()
        ):
            with pytest.raises(CollaboratorError, match="overview"):
                await write_prose("overview", "Draft", shop_project, shop_analysis)

    @pytest.mark.asyncio
    async def test_agent_failure_is_collaborator_error(self, shop_project, shop_analysis):
        """Agent errors surface as CollaboratorError."""
        with (
            patch.object(agent, "run", new_callable=AsyncMock, side_effect=RuntimeError("down")),
            patch("roadforge.agents.prose.get_fallback_model"),
        ):
            with pytest.raises(CollaboratorError, match="down"):
                await write_prose("database", "Draft", shop_project, shop_analysis)

    @pytest.mark.asyncio
    async def test_empty_output_is_collaborator_error(self, shop_project, shop_analysis):
        """Blank output is treated as a failure."""
        with (
            patch.object(agent, "run", new_callable=AsyncMock) as mock_run,
            patch("roadforge.agents.prose.get_fallback_model"),
        ):
            mock_run.return_value = MagicMock(output="   ")

            with pytest.raises(CollaboratorError, match="nothing"):
                await write_prose("overview", "Draft", shop_project, shop_analysis)
