"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS,
request tracing), registers exception handlers and includes all API routers.
``run`` starts the server with uvicorn and backs the ``deep-agent-server``
console script.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from deep_agent.core.logging_config import get_logger, setup_logging
from deep_agent.core.monitoring import initialize_logfire

from .api.v1 import agent, health
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import LogfireMiddleware
from .services.deps import get_agent_graph

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    The agent graph is built lazily by its dependency, so startup only reports
    the effective configuration. On shutdown the cached graph, if one was
    built, releases its chat client.
    """
    agent_config = settings.agent
    logger.info(
        f"Starting up {constant.PROJECT_NAME} server: model={settings.openai.model_id}, "
        f"max_iterations={agent_config.max_iterations}, quality_threshold={agent_config.quality_threshold}"
    )

    yield

    logger.info(f"Shutting down {constant.PROJECT_NAME} server...")
    if get_agent_graph.cache_info().currsize:
        await get_agent_graph().cleanup()
        get_agent_graph.cache_clear()


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    Deep Agent Server API

    Answers a query by planning it into steps, executing each step with a language model,
    then synthesizing and grading the result, re-planning until the answer is good enough.
    """,
    version=constant.API_VERSION,
    lifespan=lifespan,
)

cors_config = settings.cors
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_config.origins,
    allow_credentials=cors_config.allow_credentials,
    allow_methods=cors_config.allow_methods,
    allow_headers=cors_config.allow_headers,
)
app.add_middleware(LogfireMiddleware)

setup_exception_handlers(app)
initialize_logfire(app)

app.include_router(health.router, tags=["health"])
app.include_router(agent.router, prefix=f"{constant.API_PREFIX}/agent", tags=["agent"])


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    logger.info(f"Serving on {settings.server_host}:{settings.server_port}")
    uvicorn.run(app, host=settings.server_host, port=settings.server_port, log_config=None)


if __name__ == "__main__":
    run()
