from __future__ import annotations

"""Evaluator node.

Turns the execution history into a final answer and decides whether the
agent is done:

1. Ask the chat model to synthesise the step results into one answer.
2. Ask the chat model to grade that answer on a 0.0-1.0 scale.
3. Finish when the iteration budget is spent or the grade reaches the
   quality threshold; otherwise go back to planning.

If the synthesis call fails, a plain-text summary of the steps is used as
the answer and the run finishes with the default score.
"""

import logging
import re

from ...abstraction.base import ChatClientBase
from ...schemas.domain import AgentState, NextAction
from .base import Node

logger = logging.getLogger(__name__)

DEFAULT_QUALITY_SCORE = 0.75

_NON_NUMERIC = re.compile(r"[^0-9.]")


def parse_quality_score(response: str) -> float:
    """Parse a grade out of free text and clamp it to ``[0.0, 1.0]``.

    Everything except digits and dots is dropped before parsing.

    Raises:
        ValueError: If no number can be parsed
    """
    score = float(_NON_NUMERIC.sub("", response.strip()))
    return max(0.0, min(1.0, score))


class EvaluatorNode(Node):
    name = "evaluate"

    def __init__(
        self,
        chat_client: ChatClientBase,
        *,
        max_iterations: int = 10,
        quality_threshold: float = 0.75,
    ) -> None:
        super().__init__(chat_client)
        self._max_iterations = max_iterations
        self._quality_threshold = quality_threshold

    async def execute(self, state: AgentState) -> AgentState:
        logger.info("EvaluatorNode: Evaluating execution quality")

        try:
            synthesis = await self._chat.complete(self._build_synthesis_prompt(state))
        except Exception as e:
            logger.error(f"EvaluatorNode: Error calling LLM for evaluation, using fallback: {e}", exc_info=True)
            state.synthesis = self._fallback_synthesis(state)
            state.quality_score = DEFAULT_QUALITY_SCORE
            state.next_action = NextAction.finish
            return state

        state.synthesis = synthesis
        state.quality_score = await self._score(state, synthesis)
        state.next_action = self._next_action(state, state.quality_score)

        logger.info(f"EvaluatorNode: Quality score: {state.quality_score}, Next action: {state.next_action.value}")
        return state

    async def _score(self, state: AgentState, synthesis: str) -> float:
        try:
            response = await self._chat.complete(self._build_scoring_prompt(state, synthesis))
            return parse_quality_score(response)
        except Exception as e:
            logger.warning(
                f"EvaluatorNode: Could not parse quality score, using default {DEFAULT_QUALITY_SCORE}: {e}"
            )
            return DEFAULT_QUALITY_SCORE

    def _next_action(self, state: AgentState, quality_score: float) -> NextAction:
        if state.iteration_count >= self._max_iterations:
            logger.info("EvaluatorNode: Max iterations reached, finishing")
            return NextAction.finish

        if quality_score >= self._quality_threshold:
            logger.info("EvaluatorNode: Quality threshold met, finishing")
            return NextAction.finish

        logger.info("EvaluatorNode: Quality below threshold, replanning")
        return NextAction.plan

    def _build_synthesis_prompt(self, state: AgentState) -> str:
        parts = [
            "You are a synthesis assistant. Create a comprehensive answer to the following query "
            "based on the execution results.\n\n",
            f"Original Query: {state.user_query}\n\n",
            "Execution Steps and Results:\n",
        ]
        for step in state.execution_history:
            parts.append(f"{step.step_number}. {step.step_description}\n")
            parts.append(f"   Result: {step.result}\n\n")

        parts.append("Synthesize the above results into a clear, comprehensive answer to the original query. ")
        parts.append("Be thorough and well-structured.")
        return "".join(parts)

    def _build_scoring_prompt(self, state: AgentState, synthesis: str) -> str:
        return (
            "You are a quality evaluator. Evaluate the quality and completeness of the following answer.\n\n"
            f"Original Query: {state.user_query}\n\n"
            f"Answer: {synthesis}\n\n"
            "Evaluate on a scale from 0.0 to 1.0 where:\n"
            "- 1.0 = Perfect, complete, accurate answer\n"
            "- 0.7-0.9 = Good answer with minor gaps\n"
            "- 0.5-0.7 = Acceptable but incomplete\n"
            "- Below 0.5 = Poor or significantly incomplete\n\n"
            "Return ONLY a number between 0.0 and 1.0, nothing else."
        )

    def _fallback_synthesis(self, state: AgentState) -> str:
        parts = [f"Based on the query: '{state.user_query}'\n\n", "Execution Summary:\n"]
        for step in state.execution_history:
            parts.append(f"{step.step_number}. {step.step_description}\n")
            parts.append(f"   Result: {step.result}\n")
        parts.append("\nThe agent completed the planned steps.")
        return "".join(parts)
