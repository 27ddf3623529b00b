"""
Agent Graph Dependency.

Provides a process-wide ``AgentGraph`` for API endpoints, built from the
application settings on first use.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from deep_agent.agent_core.factory import build_agent_graph, build_chat_client
from deep_agent.agent_core.graph import AgentGraph
from deep_agent.core.logging_config import get_logger
from deep_agent.server.core.config import settings
from deep_agent.server.core.provider_env import export_openai_env_vars

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def get_agent_graph() -> AgentGraph:
    openai_config = settings.openai
    agent_config = settings.agent

    exported = export_openai_env_vars(openai_config)
    if not exported["OPENAI_API_KEY"]:
        logger.warning("OPENAI_API_KEY is not configured; the agent will answer with fallback output only")

    chat_client = build_chat_client(
        model=openai_config.model_id,
        temperature=openai_config.temperature,
        timeout=openai_config.timeout,
    )
    logger.info(
        f"Agent graph ready: model={openai_config.model_id}, "
        f"max_iterations={agent_config.max_iterations}, quality_threshold={agent_config.quality_threshold}"
    )
    return build_agent_graph(
        chat_client,
        max_iterations=agent_config.max_iterations,
        quality_threshold=agent_config.quality_threshold,
    )


AgentGraphDep = Annotated[AgentGraph, Depends(get_agent_graph)]
