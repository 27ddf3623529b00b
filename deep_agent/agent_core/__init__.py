"""Agent loop, chat client abstraction and domain state.

Design overview
---------------

A run starts from ``AgentState.create_initial(query)`` and is driven by
``AgentGraph``:

- the planner turns the query into a numbered plan,
- the executor works through the plan one step at a time,
- the evaluator synthesises an answer, grades it, and either finishes or
  asks for a new plan.

Every LLM call goes through ``ChatClientBase``. Chat failures never abort a
run; each node has a deterministic fallback.

Typical usage
-------------

.. code-block:: python

    client = build_chat_client(model="openai:gpt-4o")
    graph = build_agent_graph(client)
    final_state = await graph.execute(AgentState.create_initial("Explain REST APIs"))
"""

from .abstraction import ChatClientBase, ChatClientConfig, ChatResponse, PydanticAIChatClient
from .factory import build_agent_graph, build_chat_client
from .graph import AgentGraph
from .schemas import AgentState, ExecutionStep, NextAction

__all__ = [
    "AgentGraph",
    "AgentState",
    "ChatClientBase",
    "ChatClientConfig",
    "ChatResponse",
    "ExecutionStep",
    "NextAction",
    "PydanticAIChatClient",
    "build_agent_graph",
    "build_chat_client",
]
