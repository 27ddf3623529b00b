from __future__ import annotations

"""LangGraph agent loop.

``AgentGraph`` dispatches on ``AgentState.next_action``:

- ``plan`` → ``PlannerNode``
- ``execute`` → ``ExecutorNode`` (once per plan step)
- ``evaluate`` → ``EvaluatorNode``
- ``finish`` → end of the run

The routing check runs before every node, including the first one, so a
state that is already finished is returned untouched. Independently of the
evaluator's own iteration budget, the loop stops once ``iteration_count``
reaches ``max_graph_iterations``.
"""

import logging
from typing import Any, Awaitable, Callable, List

from langgraph.graph import END, START, StateGraph

from ..abstraction.base import ChatClientBase
from ..errors import UnknownActionError
from ..schemas.domain import AgentState, NextAction
from .models import _GraphState
from .nodes import EvaluatorNode, ExecutorNode, Node, PlannerNode

logger = logging.getLogger(__name__)

MAX_GRAPH_ITERATIONS = 10
DEFAULT_RECURSION_LIMIT = 1000

_FINISH = "finish"


class AgentGraph:
    """Run the plan/execute/evaluate loop over an ``AgentState``."""

    def __init__(
        self,
        planner: PlannerNode,
        executor: ExecutorNode,
        evaluator: EvaluatorNode,
        *,
        max_graph_iterations: int = MAX_GRAPH_ITERATIONS,
        recursion_limit: int = DEFAULT_RECURSION_LIMIT,
    ) -> None:
        self._nodes: dict[NextAction, Node] = {
            NextAction.plan: planner,
            NextAction.execute: executor,
            NextAction.evaluate: evaluator,
        }
        self._max_graph_iterations = max_graph_iterations
        self._recursion_limit = recursion_limit
        self._graph = self._build_graph(with_trace=False)
        self._trace_graph = self._build_graph(with_trace=True)

    def _build_graph(self, *, with_trace: bool):
        """Build and compile the LangGraph state machine.

        Each node is registered under its ``name``; the router's action values
        are mapped onto those names.
        """
        g: StateGraph = StateGraph(_GraphState)
        path_map: dict[str, str] = {_FINISH: END}
        for action, node in self._nodes.items():
            g.add_node(node.name, self._wrap(node, with_trace=with_trace))
            path_map[action.value] = node.name

        g.add_conditional_edges(START, self._route, path_map)
        for node in self._nodes.values():
            g.add_conditional_edges(node.name, self._route, path_map)
        return g.compile()

    @staticmethod
    def _wrap(node: Node, *, with_trace: bool) -> Callable[[_GraphState], Awaitable[dict[str, Any]]]:
        async def _run(state: _GraphState) -> dict[str, Any]:
            agent = await node.execute(state["agent"])
            if with_trace:
                return {"agent": agent, "trace": [agent.copy()]}
            return {"agent": agent}

        return _run

    def _route(self, state: _GraphState) -> str:
        """Pick the next action from ``next_action``, or finish."""
        agent = state["agent"]
        if agent.next_action == NextAction.finish or agent.iteration_count >= self._max_graph_iterations:
            return _FINISH

        try:
            action = NextAction(agent.next_action)
        except ValueError:
            raise UnknownActionError(agent.next_action) from None

        logger.info(f"AgentGraph: Iteration {agent.iteration_count}, Next action: {action.value}")
        return action.value

    async def execute(self, initial_state: AgentState) -> AgentState:
        """Run the loop to completion and return the final state."""
        logger.info(f"AgentGraph: Starting execution for thread: {initial_state.thread_id}")
        result = await self._graph.ainvoke(
            {"agent": initial_state},
            config={"recursion_limit": self._recursion_limit},
        )
        final_state = result["agent"]
        logger.info(f"AgentGraph: Execution completed for thread: {final_state.thread_id}")
        return final_state

    async def execute_with_trace(self, initial_state: AgentState) -> List[AgentState]:
        """Run the loop and return the initial snapshot plus one snapshot per node."""
        logger.info(f"AgentGraph: Starting execution with trace for thread: {initial_state.thread_id}")
        result = await self._trace_graph.ainvoke(
            {"agent": initial_state, "trace": [initial_state.copy()]},
            config={"recursion_limit": self._recursion_limit},
        )
        trace = list(result["trace"])
        logger.info(f"AgentGraph: Execution with trace completed. Total states: {len(trace)}")
        return trace

    async def cleanup(self) -> None:
        """Release the chat clients used by the nodes, once per distinct client."""
        released: list[ChatClientBase] = []
        for node in self._nodes.values():
            client = node.chat_client
            if any(client is seen for seen in released):
                continue
            released.append(client)
            await client.cleanup()
        logger.info(f"AgentGraph: Released {len(released)} chat client(s)")
