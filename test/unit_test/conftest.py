"""Shared fixtures for unit tests.

``ScriptedChatClient`` stands in for a real model: it answers each prompt
through a responder callable and records every prompt it receives. A
responder that raises turns into a failed ``ChatResponse``, the same way a
real client reports provider errors.
"""

from __future__ import annotations

from typing import Any, Callable, List

import pytest

from deep_agent.agent_core.abstraction.base import ChatClientBase, ChatClientConfig, ChatResponse

Responder = Callable[[str], str]

PLANNER_PREFIX = "You are a planning assistant"
EXECUTOR_PREFIX = "You are an execution assistant"
SYNTHESIS_PREFIX = "You are a synthesis assistant"
EVALUATOR_PREFIX = "You are a quality evaluator"


class ScriptedChatClient(ChatClientBase):
    def __init__(self, responder: Responder, name: str = "scripted") -> None:
        super().__init__(ChatClientConfig(name=name, model="test"))
        self._responder = responder
        self.prompts: List[str] = []

    async def initialize(self) -> None:
        self._initialized = True

    async def invoke(self, input_text: str, **kwargs: Any) -> ChatResponse:
        self.prompts.append(input_text)
        try:
            content = self._responder(input_text)
        except Exception as e:
            return ChatResponse(content=None, error=str(e), success=False)
        return ChatResponse(content=content)

    async def cleanup(self) -> None:
        self._initialized = False


def role_responder(
    *,
    plan: str = "1. First step\n2. Second step",
    execution: str = "step result",
    synthesis: str = "final answer",
    score: str = "0.9",
) -> Responder:
    """Answer each prompt according to which node sent it."""

    def _respond(prompt: str) -> str:
        if prompt.startswith(PLANNER_PREFIX):
            return plan
        if prompt.startswith(EXECUTOR_PREFIX):
            return execution
        if prompt.startswith(SYNTHESIS_PREFIX):
            return synthesis
        if prompt.startswith(EVALUATOR_PREFIX):
            return score
        raise AssertionError(f"unexpected prompt: {prompt[:40]!r}")

    return _respond


def _always_fail(prompt: str) -> str:
    raise RuntimeError("model unavailable")


@pytest.fixture
def chat_client_factory() -> Callable[..., ScriptedChatClient]:
    def _make(responder: Responder | None = None, **role_answers: str) -> ScriptedChatClient:
        return ScriptedChatClient(responder or role_responder(**role_answers))

    return _make


@pytest.fixture
def failing_chat_client() -> ScriptedChatClient:
    return ScriptedChatClient(_always_fail, name="failing")
