from __future__ import annotations

from deep_agent.agent_core import AgentGraph, PydanticAIChatClient, build_agent_graph, build_chat_client
from deep_agent.agent_core.graph.nodes import EvaluatorNode


def test_build_chat_client_does_not_touch_provider():
    client = build_chat_client(model="openai:gpt-4o", temperature=0.1, timeout=5.0)

    assert isinstance(client, PydanticAIChatClient)
    assert not client.is_initialized
    assert client.name == "deep-agent"
    assert client.config.model == "openai:gpt-4o"
    assert client.config.temperature == 0.1
    assert client.config.timeout == 5.0


def test_build_agent_graph_shares_client_and_limits(failing_chat_client):
    graph = build_agent_graph(failing_chat_client, max_iterations=4, quality_threshold=0.6)

    assert isinstance(graph, AgentGraph)
    nodes = list(graph._nodes.values())
    assert all(node._chat is failing_chat_client for node in nodes)
    evaluator = next(node for node in nodes if isinstance(node, EvaluatorNode))
    assert evaluator._max_iterations == 4
    assert evaluator._quality_threshold == 0.6
