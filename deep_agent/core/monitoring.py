"""
Monitoring and Tracing Configuration Module.

This module provides integration with Pydantic Logfire for monitoring and
tracing of the agent service, including:
- Agent execution traces
- LLM model calls made through Pydantic AI
- API endpoint tracing
- Error tracking

Logfire is opt-in. When it is disabled (the default) the ``log_*`` helpers
fall back to debug-level standard logging so callers never need to check.
"""

import logging
import os
from typing import Optional

import logfire
from fastapi import FastAPI

logger = logging.getLogger(__name__)

# Logfire configuration from environment
LOGFIRE_ENABLED = os.getenv("LOGFIRE_ENABLED", "false").lower() in ("true", "1", "yes")
LOGFIRE_TOKEN = os.getenv("LOGFIRE_TOKEN", "")
LOGFIRE_ENVIRONMENT = os.getenv("LOGFIRE_ENVIRONMENT", "development")
LOGFIRE_SERVICE_NAME = os.getenv("LOGFIRE_SERVICE_NAME", "deep-agent-server")
LOGFIRE_SERVICE_VERSION = os.getenv("LOGFIRE_SERVICE_VERSION", "0.0.1")

# Feature flags
LOGFIRE_TRACE_PYDANTIC_AI = os.getenv("LOGFIRE_TRACE_PYDANTIC_AI", "true").lower() in ("true", "1", "yes")
LOGFIRE_TRACE_HTTPX = os.getenv("LOGFIRE_TRACE_HTTPX", "true").lower() in ("true", "1", "yes")
LOGFIRE_TRACE_FASTAPI = os.getenv("LOGFIRE_TRACE_FASTAPI", "true").lower() in ("true", "1", "yes")

_configured = False


def is_logfire_configured() -> bool:
    return _configured


def initialize_logfire(app: FastAPI | None = None) -> bool:
    """
    Initialize Pydantic Logfire for monitoring and tracing.

    Sets up automatic instrumentation for:
    - Pydantic AI model calls
    - HTTPX HTTP requests (the OpenAI client transport)
    - FastAPI endpoints, when ``app`` is given

    Args:
        app: FastAPI application instance for endpoint instrumentation (optional).

    Returns:
        True if Logfire was configured, False otherwise.
    """
    global _configured

    if not LOGFIRE_ENABLED:
        logger.info("Logfire monitoring is disabled. Set LOGFIRE_ENABLED=true to enable.")
        return False

    if not LOGFIRE_TOKEN:
        logger.warning(
            "Logfire is enabled but LOGFIRE_TOKEN is not set. "
            "Monitoring will not work. Set LOGFIRE_TOKEN to enable Logfire."
        )
        return False

    try:
        logfire.configure(
            token=LOGFIRE_TOKEN,
            service_name=LOGFIRE_SERVICE_NAME,
            service_version=LOGFIRE_SERVICE_VERSION,
            environment=LOGFIRE_ENVIRONMENT,
        )
    except Exception as e:
        logger.error(f"Failed to initialize Logfire: {e}", exc_info=True)
        return False

    if LOGFIRE_TRACE_PYDANTIC_AI:
        try:
            logfire.instrument_pydantic_ai()
            logger.info("Logfire: Pydantic AI instrumentation enabled")
        except Exception as e:
            logger.warning(f"Failed to instrument Pydantic AI: {e}")

    if LOGFIRE_TRACE_HTTPX:
        try:
            logfire.instrument_httpx()
            logger.info("Logfire: HTTPX instrumentation enabled")
        except Exception as e:
            logger.warning(f"Failed to instrument HTTPX: {e}")

    if LOGFIRE_TRACE_FASTAPI and app is not None:
        try:
            logfire.instrument_fastapi(app=app)
            logger.info("Logfire: FastAPI instrumentation enabled")
        except Exception as e:
            logger.warning(f"Failed to instrument FastAPI: {e}")

    _configured = True
    logger.info(f"Logfire monitoring initialized: environment={LOGFIRE_ENVIRONMENT}, service={LOGFIRE_SERVICE_NAME}")
    return True


def log_agent_run(thread_id: str, query: str) -> None:
    """
    Log the start of an agent run.

    Args:
        thread_id: The thread identifier of the run
        query: The user query driving the run
    """
    if not _configured:
        logger.debug(f"Agent run started: thread_id={thread_id}")
        return
    try:
        logfire.info("Agent run started", thread_id=thread_id, query=query)
    except Exception:
        logger.debug(f"Could not log agent run to Logfire: {thread_id}")


def log_agent_completion(thread_id: str, iterations: int, quality_score: float, duration_ms: float) -> None:
    """
    Log the completion of an agent run.

    Args:
        thread_id: The thread identifier of the run
        iterations: Number of planning iterations performed
        quality_score: Final quality score assigned by the evaluator
        duration_ms: The duration of the run in milliseconds
    """
    if not _configured:
        logger.debug(
            f"Agent run completed: thread_id={thread_id}, iterations={iterations}, "
            f"quality_score={quality_score}, duration_ms={duration_ms:.2f}"
        )
        return
    try:
        logfire.info(
            "Agent run completed",
            thread_id=thread_id,
            iterations=iterations,
            quality_score=quality_score,
            duration_ms=duration_ms,
        )
    except Exception:
        logger.debug(f"Could not log agent completion to Logfire: {thread_id}")


def log_llm_call(model: str, input_tokens: Optional[int], output_tokens: Optional[int]) -> None:
    """
    Log an LLM call with token usage.

    Args:
        model: The model identifier
        input_tokens: Prompt tokens consumed, if reported
        output_tokens: Completion tokens produced, if reported
    """
    if not _configured:
        logger.debug(f"LLM call completed: model={model}, input_tokens={input_tokens}, output_tokens={output_tokens}")
        return
    try:
        logfire.info("LLM call completed", model=model, input_tokens=input_tokens, output_tokens=output_tokens)
    except Exception:
        logger.debug(f"Could not log LLM call to Logfire: {model}")


def log_api_request(method: str, path: str, status_code: int, duration_ms: float) -> None:
    """
    Log an API request with performance metrics.

    Args:
        method: HTTP method
        path: Request path
        status_code: HTTP status code
        duration_ms: Request duration in milliseconds
    """
    if not _configured:
        logger.debug(f"API request completed: {method} {path} -> {status_code} in {duration_ms:.2f}ms")
        return
    try:
        logfire.info(
            "API request completed",
            method=method,
            path=path,
            status_code=status_code,
            duration_ms=duration_ms,
        )
    except Exception:
        logger.debug(f"Could not log API request to Logfire: {method} {path}")


def log_error(error_type: str, error_message: str, context: Optional[dict] = None) -> None:
    """
    Log an error with context for debugging.

    Args:
        error_type: Type of error
        error_message: Error message
        context: Additional context dictionary
    """
    if not _configured:
        logger.debug(f"{error_type}: {error_message} context={context or {}}")
        return
    try:
        logfire.error(f"{error_type}: {error_message}", **(context or {}))
    except Exception:
        logger.debug(f"Could not log error to Logfire: {error_type}")
