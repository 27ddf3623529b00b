"""Chat framework adapters.

Available Adapters:
- PydanticAIChatClient: Adapter for the Pydantic AI framework
"""

from .pydantic_ai import PydanticAIChatClient

__all__ = [
    "PydanticAIChatClient",
]
