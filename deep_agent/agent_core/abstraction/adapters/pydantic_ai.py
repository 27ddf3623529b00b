"""Pydantic AI Framework Adapter.

This module provides a chat client that implements ``ChatClientBase`` on top
of ``pydantic_ai.Agent``. The model may be given as an identifier string
(``openai:gpt-4o``) or as a ready model object, which is how tests plug in
``TestModel``/``FunctionModel``.
"""

from typing import Any, Dict, Optional

from pydantic_ai import Agent

from deep_agent.core.logging_config import get_logger
from deep_agent.core.monitoring import log_llm_call

from ...errors import ChatClientError
from ..base import ChatClientBase, ChatClientConfig, ChatResponse

logger = get_logger(__name__)


def _usage_tokens(result: Any) -> tuple[Optional[int], Optional[int]]:
    usage_attr = getattr(result, "usage", None)
    if usage_attr is None:
        return None, None
    usage = usage_attr() if callable(usage_attr) else usage_attr
    input_tokens = getattr(usage, "input_tokens", None)
    if input_tokens is None:
        input_tokens = getattr(usage, "request_tokens", None)
    output_tokens = getattr(usage, "output_tokens", None)
    if output_tokens is None:
        output_tokens = getattr(usage, "response_tokens", None)
    return input_tokens, output_tokens


class PydanticAIChatClient(ChatClientBase):
    """Chat client backed by a Pydantic AI agent.

    The agent is created on first use, so building the client never touches
    provider credentials.

    Attributes:
        _agent: The underlying Pydantic AI agent instance
        _model: Optional model object overriding ``config.model``
    """

    def __init__(self, config: ChatClientConfig, *, model: Any | None = None) -> None:
        super().__init__(config)
        self._model = model
        self._agent: Optional[Agent] = None

    @property
    def model_name(self) -> str:
        if self._model is not None:
            return str(getattr(self._model, "model_name", type(self._model).__name__))
        return self._config.model

    def build_init_kwargs(self) -> Dict[str, Any]:
        """Build the keyword arguments for the ``pydantic_ai.Agent`` constructor."""
        kwargs: Dict[str, Any] = {
            "model": self._model if self._model is not None else self._config.model,
            "output_type": str,
        }

        if self._config.system_prompt:
            kwargs["system_prompt"] = self._config.system_prompt

        model_settings: Dict[str, Any] = {}
        if self._config.temperature is not None:
            model_settings["temperature"] = self._config.temperature
        if self._config.max_tokens is not None:
            model_settings["max_tokens"] = self._config.max_tokens
        if self._config.timeout is not None:
            model_settings["timeout"] = self._config.timeout
        if model_settings:
            kwargs["model_settings"] = model_settings

        if self._config.metadata:
            kwargs.update(self._config.metadata)

        logger.debug(f"Built initialization kwargs for {self._config.name}: {list(kwargs.keys())}")
        return kwargs

    async def initialize(self) -> None:
        """Create the Pydantic AI agent.

        Raises:
            ChatClientError: If the agent cannot be created (e.g. unknown model
                or missing provider credentials)
        """
        try:
            self._agent = Agent(**self.build_init_kwargs())
        except Exception as e:
            raise ChatClientError(f"Failed to initialize Pydantic AI agent '{self._config.name}': {e}") from e
        self._initialized = True
        logger.debug(f"Pydantic AI chat client initialized: {self._config.name} ({self.model_name})")

    async def invoke(self, input_text: str, **kwargs: Any) -> ChatResponse:
        try:
            if not self._initialized or self._agent is None:
                await self.initialize()

            logger.debug(f"Invoking {self._config.name} with input length {len(input_text)}")
            run_kwargs: Dict[str, Any] = {}
            if kwargs.get("model_settings"):
                run_kwargs["model_settings"] = kwargs["model_settings"]
            result = await self._agent.run(input_text, **run_kwargs)

            input_tokens, output_tokens = _usage_tokens(result)
            log_llm_call(self.model_name, input_tokens, output_tokens)

            return ChatResponse(
                content=str(result.output),
                metadata={
                    "model": self.model_name,
                    "framework": "pydantic_ai",
                    "usage": {"input_tokens": input_tokens, "output_tokens": output_tokens},
                },
                success=True,
            )
        except Exception as e:
            logger.error(f"Pydantic AI chat invocation failed: {self._config.name}: {e}", exc_info=True)
            return ChatResponse(content=None, error=str(e), success=False)

    async def cleanup(self) -> None:
        logger.debug(f"Cleaning up Pydantic AI chat client: {self._config.name}")
        self._agent = None
        self._initialized = False
