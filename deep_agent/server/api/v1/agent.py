"""
Agent Execution API Endpoints.

Exposes the deep agent loop over HTTP. A request carries a single query; the
response carries the synthesized answer together with the full execution
trace, the number of planning iterations and the final quality score.
"""

import time

from fastapi import APIRouter

from deep_agent.agent_core.schemas.domain import AgentState
from deep_agent.core.logging_config import get_logger
from deep_agent.core.monitoring import log_agent_completion, log_agent_run
from deep_agent.server.schemas import AgentRequest, AgentResponse
from deep_agent.server.services.deps import AgentGraphDep

logger = get_logger(__name__)
router = APIRouter()


@router.post(
    "/execute",
    response_model=AgentResponse,
    summary="Execute Agent",
    description="Run the plan, execute and evaluate loop for a query and return the final answer with its trace.",
    response_description="The final answer, execution trace, iteration count and quality score.",
)
async def execute_agent(request: AgentRequest, graph: AgentGraphDep) -> AgentResponse:
    """
    Execute the deep agent for a user query.

    Builds a fresh state, drives it through the agent graph to completion and
    maps the final state onto the response.
    """
    initial_state = AgentState.create_initial(request.query)
    logger.info(f"Executing agent for thread {initial_state.thread_id}: {request.query!r}")
    log_agent_run(thread_id=initial_state.thread_id, query=request.query)

    start_time = time.perf_counter()
    final_state = await graph.execute(initial_state)
    duration_ms = (time.perf_counter() - start_time) * 1000

    logger.info(
        f"Agent finished thread {final_state.thread_id}: iterations={final_state.iteration_count}, "
        f"steps={len(final_state.execution_history)}, quality_score={final_state.quality_score:.2f}"
    )
    log_agent_completion(
        thread_id=final_state.thread_id,
        iterations=final_state.iteration_count,
        quality_score=final_state.quality_score,
        duration_ms=duration_ms,
    )
    return AgentResponse.from_state(final_state)
