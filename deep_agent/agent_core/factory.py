from __future__ import annotations

"""Convenience factories for wiring the agent core.

Keeps application wiring and tests concise: one chat client is shared by the
three nodes, and the evaluator receives the loop limits.
"""

from .abstraction.adapters import PydanticAIChatClient
from .abstraction.base import ChatClientBase, ChatClientConfig
from .graph import AgentGraph, EvaluatorNode, ExecutorNode, PlannerNode
from .graph.graph import MAX_GRAPH_ITERATIONS


def build_chat_client(
    *,
    model: str,
    temperature: float | None = 0.7,
    timeout: float | None = None,
    name: str = "deep-agent",
) -> ChatClientBase:
    """Build the default Pydantic AI chat client for a ``provider:model`` id."""
    config = ChatClientConfig(name=name, model=model, temperature=temperature, timeout=timeout)
    return PydanticAIChatClient(config)


def build_agent_graph(
    chat_client: ChatClientBase,
    *,
    max_iterations: int = 10,
    quality_threshold: float = 0.75,
    max_graph_iterations: int = MAX_GRAPH_ITERATIONS,
) -> AgentGraph:
    """Construct an ``AgentGraph`` whose nodes share ``chat_client``."""
    return AgentGraph(
        PlannerNode(chat_client),
        ExecutorNode(chat_client),
        EvaluatorNode(chat_client, max_iterations=max_iterations, quality_threshold=quality_threshold),
        max_graph_iterations=max_graph_iterations,
    )
