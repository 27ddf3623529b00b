"""Unit tests for the application lifespan."""

import os
from unittest.mock import AsyncMock, patch

import pytest

from deep_agent.server.core.config import Settings
from deep_agent.server.main import app, lifespan
from deep_agent.server.services import deps

pytestmark = pytest.mark.asyncio


@pytest.fixture(autouse=True)
def _fresh_cache():
    deps.get_agent_graph.cache_clear()
    with patch.dict(os.environ), patch.object(deps, "settings", Settings(_env_file=None)):
        os.environ.pop("OPENAI_API_KEY", None)
        yield
    deps.get_agent_graph.cache_clear()


async def test_shutdown_releases_built_graph():
    graph = deps.get_agent_graph()

    with patch.object(graph, "cleanup", new_callable=AsyncMock) as mock_cleanup:
        async with lifespan(app):
            pass

    mock_cleanup.assert_awaited_once()
    assert deps.get_agent_graph.cache_info().currsize == 0


async def test_shutdown_without_graph_builds_nothing():
    async with lifespan(app):
        pass

    assert deps.get_agent_graph.cache_info().currsize == 0
