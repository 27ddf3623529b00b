"""
API Schemas.

This module contains Pydantic models used for API request bodies and response validation.
These schemas define the interface contract between the client and the server.
Responses are serialized with camelCase keys.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from deep_agent.agent_core.schemas.domain import AgentState, ExecutionStep


class AgentRequest(BaseModel):
    """
    Schema for an agent execution request.
    """

    query: str = Field(
        ...,
        min_length=1,
        description="The question or task the agent should work on.",
        examples=["What are the benefits of microservices?"],
    )


class AgentResponse(BaseModel):
    """
    Schema for the result of an agent execution.

    Mirrors the final ``AgentState``: the synthesis becomes the final answer
    and the execution history becomes the trace.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "threadId": "5f0c6c1e-8f2f-4b7b-9a59-1c2a3b4c5d6e",
                "finalAnswer": "REST APIs expose resources over HTTP...",
                "executionTrace": [
                    {
                        "stepNumber": 1,
                        "stepDescription": "Research and gather information about: Explain REST APIs",
                        "result": "REST stands for Representational State Transfer...",
                        "timestamp": "2026-01-01T12:00:00Z",
                    }
                ],
                "iterations": 1,
                "qualityScore": 0.85,
                "planSteps": ["Research and gather information about: Explain REST APIs"],
            }
        },
    )

    thread_id: str = Field(..., description="Identifier of the agent run.")
    final_answer: str | None = Field(default=None, description="Synthesized answer to the query.")
    execution_trace: List[ExecutionStep] = Field(default_factory=list, description="Every executed step in order.")
    iterations: int = Field(..., description="Number of planning iterations performed.")
    quality_score: float = Field(..., description="Final quality score assigned by the evaluator (0.0-1.0).")
    plan_steps: List[str] = Field(default_factory=list, description="Steps of the last plan.")

    @classmethod
    def from_state(cls, state: AgentState) -> "AgentResponse":
        return cls(
            thread_id=state.thread_id,
            final_answer=state.synthesis,
            execution_trace=list(state.execution_history),
            iterations=state.iteration_count,
            quality_score=state.quality_score,
            plan_steps=list(state.plan),
        )
