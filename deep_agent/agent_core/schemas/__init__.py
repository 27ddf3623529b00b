"""Domain schemas for the agent core.

``AgentState`` is the single object threaded through every graph node;
``ExecutionStep`` records the outcome of one executed plan step.
"""

from .base import BaseSchema
from .domain import AgentState, ExecutionStep, NextAction

__all__ = [
    "AgentState",
    "BaseSchema",
    "ExecutionStep",
    "NextAction",
]
