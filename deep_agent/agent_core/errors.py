"""Error types for the agent core.

A small hierarchy of exceptions raised by chat clients and the agent graph.
Chat errors are recoverable (graph nodes fall back to deterministic output);
graph errors signal a corrupted state and propagate to the caller.
"""

from __future__ import annotations


class DeepAgentError(Exception):
    """Base error for all agent core exceptions."""


class ChatClientError(DeepAgentError):
    """Raised when a chat client cannot be set up or used."""


class ChatCompletionError(ChatClientError):
    """Raised when a chat completion fails or returns no content."""

    def __init__(self, client_name: str, message: str) -> None:
        super().__init__(f"Chat completion failed for '{client_name}': {message}")
        self.client_name = client_name


class UnknownActionError(DeepAgentError):
    """Raised when the graph is asked to dispatch an action it does not know."""

    def __init__(self, action: object) -> None:
        super().__init__(f"Unknown action: {action}")
        self.action = action
