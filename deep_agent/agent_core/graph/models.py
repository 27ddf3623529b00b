from __future__ import annotations

"""LangGraph state type for the agent loop.

The graph carries the live ``AgentState`` under ``agent``. Traced runs also
accumulate a snapshot after every node under ``trace`` (list concatenation
reducer); plain runs leave that channel empty.
"""

import operator
from typing import Annotated, List, Required, TypedDict

from ..schemas.domain import AgentState


class _GraphState(TypedDict, total=False):
    """Mutable LangGraph state for a single agent execution.

    - ``agent``: the live state, mutated in place by the nodes.
    - ``trace``: snapshots, starting with the initial state. Only filled by
      ``AgentGraph.execute_with_trace``.
    """

    agent: Required[AgentState]
    trace: Annotated[List[AgentState], operator.add]
