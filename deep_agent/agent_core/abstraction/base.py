"""Base abstraction for chat clients.

This module defines the interface every chat-model client implements, so the
graph nodes can talk to an LLM without depending on a specific framework.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..errors import ChatCompletionError


class ChatClientConfig(BaseModel):
    """Configuration for initializing a chat client.

    Attributes:
        name: Identifier of the client instance (used in logs and errors)
        model: The LLM model identifier (e.g., 'openai:gpt-4o')
        system_prompt: System prompt/instructions for the model
        temperature: Model temperature for response generation
        max_tokens: Maximum tokens for response generation
        timeout: Request timeout in seconds
        metadata: Additional framework-specific constructor arguments
    """

    model_config = ConfigDict(frozen=False, validate_assignment=True)

    name: str = Field(..., description="Identifier of the client instance")
    model: str = Field(..., description="The LLM model identifier")
    system_prompt: Optional[str] = Field(None, description="System prompt/instructions for the model")
    temperature: Optional[float] = Field(default=0.7, ge=0.0, le=2.0, description="Model temperature")
    max_tokens: Optional[int] = Field(None, ge=1, description="Maximum tokens for response generation")
    timeout: Optional[float] = Field(None, gt=0, description="Request timeout in seconds")
    metadata: Dict[str, Any] = Field(default_factory=dict, description="Additional framework-specific configuration")


class ChatResponse(BaseModel):
    """Response from a chat client.

    Attributes:
        content: The response text
        metadata: Additional response metadata (model, token usage, ...)
        error: Error message if the request failed
        success: Whether the request was successful
    """

    content: Optional[str] = Field(None, description="The response text")
    metadata: Dict[str, Any] = Field(default_factory=dict, description="Additional response metadata")
    error: Optional[str] = Field(None, description="Error message if the request failed")
    success: bool = Field(default=True, description="Whether the request was successful")


class ChatClientBase(ABC):
    """Abstract base class for chat client implementations.

    Subclasses must implement:
    - initialize(): Set up the underlying framework objects
    - invoke(): Send a prompt and return a ``ChatResponse``
    - cleanup(): Release resources
    """

    def __init__(self, config: ChatClientConfig) -> None:
        self._config = config
        self._initialized = False

    @property
    def config(self) -> ChatClientConfig:
        return self._config

    @property
    def name(self) -> str:
        return self._config.name

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize the client.

        Raises:
            ChatClientError: If initialization fails
        """

    @abstractmethod
    async def invoke(self, input_text: str, **kwargs: Any) -> ChatResponse:
        """Send ``input_text`` to the model.

        Failures are reported through ``ChatResponse.success``/``error``
        instead of being raised.
        """

    @abstractmethod
    async def cleanup(self) -> None:
        """Clean up client resources."""

    async def complete(self, input_text: str, **kwargs: Any) -> str:
        """Send a prompt and return the response text.

        Raises:
            ChatCompletionError: If the call failed or returned no content
        """
        response = await self.invoke(input_text, **kwargs)
        if not response.success:
            raise ChatCompletionError(self.name, response.error or "unknown error")
        if response.content is None:
            raise ChatCompletionError(self.name, "empty response")
        return response.content

    async def __aenter__(self):
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.cleanup()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self._config.name}, model={self._config.model})"
