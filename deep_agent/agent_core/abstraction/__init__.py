"""Chat client abstraction layer.

Provides a framework-agnostic interface for chat-model calls so the graph
nodes only ever see ``ChatClientBase``.

Key Components:
- ChatClientBase: Core abstraction for chat client implementations
- ChatClientConfig: Configuration for client initialization
- ChatResponse: Result of a single chat call
- PydanticAIChatClient: Pydantic AI implementation
"""

from .adapters import PydanticAIChatClient
from .base import ChatClientBase, ChatClientConfig, ChatResponse

__all__ = [
    "ChatClientBase",
    "ChatClientConfig",
    "ChatResponse",
    "PydanticAIChatClient",
]
