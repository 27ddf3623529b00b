from __future__ import annotations

"""Executor node.

Executes the current plan step by asking the chat model to carry it out,
given the original query and the results of the steps already completed.
Each call appends exactly one ``ExecutionStep`` to the history, then either
moves to the next plan step or hands over to evaluation.
"""

import logging
from datetime import datetime, timezone

from ...schemas.domain import AgentState, ExecutionStep, NextAction
from .base import Node

logger = logging.getLogger(__name__)


class ExecutorNode(Node):
    name = "execute"

    async def execute(self, state: AgentState) -> AgentState:
        logger.info(f"ExecutorNode: Executing step: {state.current_step}")

        step_number = len(state.execution_history) + 1
        description = state.current_step or ""

        try:
            result = await self._chat.complete(self._build_prompt(state))
        except Exception as e:
            logger.error(f"ExecutorNode: Error calling LLM for execution: {e}", exc_info=True)
            result = f"Error executing step: {state.current_step}. Using fallback."

        state.execution_history.append(
            ExecutionStep(
                step_number=step_number,
                step_description=description,
                result=result,
                timestamp=datetime.now(timezone.utc),
            )
        )

        next_index = state.current_step_index + 1
        if next_index < len(state.plan):
            state.current_step_index = next_index
            state.current_step = state.plan[next_index]
            state.next_action = NextAction.execute
            logger.info(f"ExecutorNode: Moving to next step ({next_index + 1}/{len(state.plan)})")
        else:
            state.next_action = NextAction.evaluate
            logger.info("ExecutorNode: All steps executed, moving to evaluation")

        return state

    def _build_prompt(self, state: AgentState) -> str:
        parts = [
            "You are an execution assistant working on the following query:\n\n",
            f"Original Query: {state.user_query}\n\n",
            f"Current Step to Execute: {state.current_step}\n\n",
        ]

        if state.execution_history:
            parts.append("Previous steps completed:\n")
            for step in state.execution_history:
                parts.append(f"{step.step_number}. {step.step_description}\n   Result: {step.result}\n")
            parts.append("\n")

        parts.append("Execute the current step and provide a detailed result. ")
        parts.append("Be thorough and specific in your execution.")
        return "".join(parts)
