from __future__ import annotations

from abc import ABC, abstractmethod

from ...abstraction.base import ChatClientBase
from ...schemas.domain import AgentState


class Node(ABC):
    """A single step of the agent loop.

    A node receives the live ``AgentState``, mutates it and returns it. Nodes
    must set ``next_action`` so the graph knows where to go next. ``name`` is
    the node's id inside the compiled graph.
    """

    name: str

    def __init__(self, chat_client: ChatClientBase) -> None:
        self._chat = chat_client

    @property
    def chat_client(self) -> ChatClientBase:
        return self._chat

    @abstractmethod
    async def execute(self, state: AgentState) -> AgentState: ...
