from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional
from uuid import uuid4

from pydantic import ConfigDict, Field

from .base import BaseSchema


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class NextAction(str, Enum):
    plan = "plan"
    execute = "execute"
    evaluate = "evaluate"
    finish = "finish"


class ExecutionStep(BaseSchema):
    """Result of executing a single plan step. Step numbers start at 1."""

    model_config = ConfigDict(frozen=True)

    step_number: int = Field(ge=1)
    step_description: str
    result: str
    timestamp: datetime = Field(default_factory=_utc_now)


class AgentState(BaseSchema):
    """Mutable state carried through the plan/execute/evaluate loop.

    Nodes mutate the state in place and hand it back; ``copy`` produces a
    snapshot whose lists are detached from the live state, which is what the
    trace keeps.
    """

    thread_id: str = Field(default_factory=lambda: str(uuid4()))
    user_query: str
    plan: List[str] = Field(default_factory=list)
    current_step: Optional[str] = None
    current_step_index: int = 0
    execution_history: List[ExecutionStep] = Field(default_factory=list)
    synthesis: Optional[str] = None
    quality_score: float = 0.0
    iteration_count: int = 0
    next_action: NextAction = NextAction.plan

    @classmethod
    def create_initial(cls, user_query: str) -> AgentState:
        return cls(user_query=user_query)

    def copy(self) -> AgentState:  # type: ignore[override]
        return self.model_copy(
            update={
                "plan": list(self.plan),
                "execution_history": list(self.execution_history),
            }
        )
