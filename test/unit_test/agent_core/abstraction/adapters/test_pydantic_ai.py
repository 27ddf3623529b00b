"""Unit tests for the Pydantic AI chat client.

Real providers are never called: the client is given Pydantic AI's
``TestModel`` and ``FunctionModel`` instead of a model identifier.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest
from pydantic_ai.messages import ModelMessage, ModelResponse, TextPart
from pydantic_ai.models.function import AgentInfo, FunctionModel
from pydantic_ai.models.test import TestModel as StubModel

from deep_agent.agent_core.abstraction import ChatClientConfig, PydanticAIChatClient
from deep_agent.agent_core.errors import ChatClientError


def _config(**overrides) -> ChatClientConfig:
    values = {"name": "test-client", "model": "openai:gpt-4o"}
    values.update(overrides)
    return ChatClientConfig(**values)


class TestBuildInitKwargs:
    def test_uses_model_identifier_from_config(self):
        client = PydanticAIChatClient(_config(temperature=None))

        kwargs = client.build_init_kwargs()

        assert kwargs == {"model": "openai:gpt-4o", "output_type": str}

    def test_model_object_overrides_identifier(self):
        model = StubModel()
        client = PydanticAIChatClient(_config(), model=model)

        assert client.build_init_kwargs()["model"] is model

    def test_collects_model_settings_and_system_prompt(self):
        client = PydanticAIChatClient(
            _config(system_prompt="be brief", temperature=0.3, max_tokens=256, timeout=30.0)
        )

        kwargs = client.build_init_kwargs()

        assert kwargs["system_prompt"] == "be brief"
        assert kwargs["model_settings"] == {"temperature": 0.3, "max_tokens": 256, "timeout": 30.0}

    def test_metadata_is_passed_through(self):
        client = PydanticAIChatClient(_config(metadata={"retries": 2}))

        assert client.build_init_kwargs()["retries"] == 2


class TestInitialize:
    @pytest.mark.asyncio
    async def test_initialize_creates_agent(self):
        client = PydanticAIChatClient(_config(), model=StubModel())

        await client.initialize()

        assert client.is_initialized

    @pytest.mark.asyncio
    async def test_initialize_wraps_agent_errors(self):
        client = PydanticAIChatClient(_config())

        with patch(
            "deep_agent.agent_core.abstraction.adapters.pydantic_ai.Agent",
            side_effect=ValueError("bad model"),
        ):
            with pytest.raises(ChatClientError, match="bad model"):
                await client.initialize()

        assert not client.is_initialized

    @pytest.mark.asyncio
    async def test_cleanup_resets_state(self):
        client = PydanticAIChatClient(_config(), model=StubModel())
        await client.initialize()

        await client.cleanup()

        assert not client.is_initialized


class TestInvoke:
    @pytest.mark.asyncio
    async def test_invoke_initializes_lazily_and_returns_text(self):
        client = PydanticAIChatClient(_config(), model=StubModel(custom_output_text="1. Do the thing"))

        response = await client.invoke("plan this")

        assert client.is_initialized
        assert response.success
        assert response.content == "1. Do the thing"
        assert response.metadata["framework"] == "pydantic_ai"
        assert set(response.metadata["usage"]) == {"input_tokens", "output_tokens"}

    @pytest.mark.asyncio
    async def test_invoke_sends_prompt_and_settings(self):
        seen = {}

        def respond(messages: list[ModelMessage], info: AgentInfo) -> ModelResponse:
            seen["prompt"] = messages[-1].parts[-1].content
            seen["temperature"] = (info.model_settings or {}).get("temperature")
            return ModelResponse(parts=[TextPart("0.8")])

        client = PydanticAIChatClient(_config(temperature=0.2), model=FunctionModel(respond))

        assert await client.complete("grade this") == "0.8"
        assert seen == {"prompt": "grade this", "temperature": 0.2}

    @pytest.mark.asyncio
    async def test_invoke_reports_model_errors(self):
        def explode(messages: list[ModelMessage], info: AgentInfo) -> ModelResponse:
            raise RuntimeError("provider down")

        client = PydanticAIChatClient(_config(), model=FunctionModel(explode))

        response = await client.invoke("anything")

        assert not response.success
        assert response.content is None
        assert "provider down" in response.error

    @pytest.mark.asyncio
    async def test_invoke_reports_initialization_errors(self):
        client = PydanticAIChatClient(_config())

        with patch(
            "deep_agent.agent_core.abstraction.adapters.pydantic_ai.Agent",
            side_effect=ValueError("missing api key"),
        ):
            response = await client.invoke("anything")

        assert not response.success
        assert "missing api key" in response.error

    @pytest.mark.asyncio
    async def test_invoke_logs_llm_call(self):
        client = PydanticAIChatClient(_config(), model=StubModel(custom_output_text="ok"))

        with patch("deep_agent.agent_core.abstraction.adapters.pydantic_ai.log_llm_call") as mock_log:
            await client.invoke("hi")

        mock_log.assert_called_once()
        assert mock_log.call_args[0][0] == client.model_name
