from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from deep_agent.agent_core.factory import build_agent_graph


@pytest.fixture
def agent_graph(failing_chat_client):
    """Agent graph whose model always fails, so every node takes its fallback path."""
    return build_agent_graph(failing_chat_client)


@pytest_asyncio.fixture(name="client")
async def client_fixture(agent_graph) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client with the agent graph dependency overridden."""
    from deep_agent.server.main import app
    from deep_agent.server.services.deps import get_agent_graph

    app.dependency_overrides[get_agent_graph] = lambda: agent_graph

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client

    app.dependency_overrides.clear()
