"""deep-agent.

This package contains a small "deep agent": an LLM-driven loop that turns a
user query into a plan, executes the plan step by step and evaluates the
result, replanning until the answer is good enough.

High-level architecture
-----------------------

- ``deep_agent.agent_core``:

  - Domain state (``AgentState``, ``ExecutionStep``).
  - A chat client abstraction with a Pydantic AI adapter.
  - Planner, executor and evaluator nodes.
  - A LangGraph-based ``AgentGraph`` wiring the nodes together.

- ``deep_agent.server``:

  - FastAPI application exposing ``POST /api/agent/execute``.

Typical workflow
----------------

1. Create an initial state with ``AgentState.create_initial(query)``.
2. Run it through ``AgentGraph.execute`` (or ``execute_with_trace``).
3. Read the synthesis, quality score and execution history from the final
   state.
"""

__version__ = "0.0.1"
