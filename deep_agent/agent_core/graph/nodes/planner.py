from __future__ import annotations

"""Planner node.

Asks the chat model to break the user query into a short numbered list of
steps. On a later iteration the previous synthesis is fed back so the model
can produce an improved plan.

The planner never fails the run: if the model errors out or the answer
contains no numbered lines, a fixed three-step research/analyse/synthesise
plan is used instead.
"""

import logging
import re
from typing import List

from ...schemas.domain import AgentState, NextAction
from .base import Node

logger = logging.getLogger(__name__)

_NUMBERED_LINE = re.compile(r"^\d+\..*")
_NUMBER_PREFIX = re.compile(r"^\d+\.\s*")


def parse_plan(response: str) -> List[str]:
    """Extract the steps from a numbered-list answer.

    Keeps trimmed, non-empty lines starting with ``<digits>.`` and strips that
    prefix (plus following whitespace).
    """
    steps: List[str] = []
    for raw in response.split("\n"):
        line = raw.strip()
        if line and _NUMBERED_LINE.match(line):
            steps.append(_NUMBER_PREFIX.sub("", line, count=1))
    return steps


def fallback_plan(query: str) -> List[str]:
    return [
        f"Research and gather information about: {query}",
        "Analyze the gathered information and identify key points",
        "Synthesize findings into a comprehensive answer",
    ]


class PlannerNode(Node):
    name = "plan"

    async def execute(self, state: AgentState) -> AgentState:
        logger.info(f"PlannerNode: Creating plan for query: {state.user_query}")

        try:
            response = await self._chat.complete(self._build_prompt(state))
            plan = parse_plan(response)
            if not plan:
                logger.warning("PlannerNode: LLM returned empty plan, using fallback")
                plan = fallback_plan(state.user_query)
        except Exception as e:
            logger.error(f"PlannerNode: Error calling LLM, using fallback plan: {e}", exc_info=True)
            plan = fallback_plan(state.user_query)

        state.plan = plan
        state.current_step = plan[0]
        state.current_step_index = 0
        state.next_action = NextAction.execute
        state.iteration_count += 1

        logger.info(f"PlannerNode: Created plan with {len(plan)} steps")
        return state

    def _build_prompt(self, state: AgentState) -> str:
        parts = [
            "You are a planning assistant. Break down the following task into 3-5 specific, actionable steps.\n\n",
            f"Task: {state.user_query}\n\n",
        ]

        if state.iteration_count > 0 and state.synthesis is not None:
            parts.append("Previous attempt summary:\n")
            parts.append(f"{state.synthesis}\n\n")
            parts.append("Please create an improved plan based on the previous attempt.\n\n")

        parts.append("Return ONLY the numbered steps, one per line, starting with '1.', '2.', etc.\n")
        parts.append("Do not include any explanation or preamble. Just the steps.")
        return "".join(parts)
