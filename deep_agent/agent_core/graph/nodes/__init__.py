from .base import Node
from .evaluator import EvaluatorNode
from .executor import ExecutorNode
from .planner import PlannerNode

__all__ = [
    "EvaluatorNode",
    "ExecutorNode",
    "Node",
    "PlannerNode",
]
