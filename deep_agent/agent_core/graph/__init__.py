"""LangGraph-based agent loop.

The loop alternates between three nodes, chosen by ``AgentState.next_action``:

- ``PlannerNode`` builds a numbered plan for the query.
- ``ExecutorNode`` runs the plan one step at a time.
- ``EvaluatorNode`` synthesises an answer, grades it, and either finishes or
  sends the agent back to planning.

The main entry point is ``AgentGraph``.
"""

from .graph import AgentGraph
from .nodes import EvaluatorNode, ExecutorNode, Node, PlannerNode

__all__ = [
    "AgentGraph",
    "EvaluatorNode",
    "ExecutorNode",
    "Node",
    "PlannerNode",
]
