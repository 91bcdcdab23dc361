"""
JSON API over the lesson assistant.

Two ways to get a lesson: the blocking endpoint that polls inside the
request, or start + status where the client does the polling.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse

from fluentai.dependencies import get_orchestrator
from fluentai.errors import MissingParameter
from fluentai.schemas import ErrorResponse, LessonPromptRequest, PollResult, RunHandle
from fluentai.security import get_api_key
from fluentai.services.orchestrator import LessonOrchestrator, PollMode

router = APIRouter(
    prefix="/api",
    tags=["assistant"],
    dependencies=[Depends(get_api_key)],
    responses={500: {"model": ErrorResponse}},
)
logger = logging.getLogger(__name__)


def get_run_ids(
    thread_id: Optional[str] = Query(None, alias="threadId"),
    run_id: Optional[str] = Query(None, alias="runId"),
) -> RunHandle:
    if not thread_id or not run_id:
        raise MissingParameter("Missing threadId or runId")
    return RunHandle(thread_id=thread_id, run_id=run_id)


@router.post("/openai-create", response_model=RunHandle)
async def create_run(
    request: LessonPromptRequest,
    orchestrator: LessonOrchestrator = Depends(get_orchestrator),
):
    """
    Start an assistant run for the prompt and return its ids.
    """
    try:
        return await orchestrator.execute(request.prompt, PollMode.SINGLE_SHOT)
    except Exception as e:
        logger.error(f"Error starting run: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get(
    "/openai-status",
    response_model=PollResult,
    response_model_exclude_unset=True,
    responses={400: {"model": ErrorResponse}},
)
async def run_status(
    handle: RunHandle = Depends(get_run_ids),
    orchestrator: LessonOrchestrator = Depends(get_orchestrator),
):
    """
    Check a run once; the lesson is included when it has completed.
    """
    try:
        return await orchestrator.poll_once(handle.thread_id, handle.run_id)
    except Exception as e:
        logger.error(f"Error checking run {handle.run_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/openai")
async def generate_lesson(
    request: LessonPromptRequest,
    orchestrator: LessonOrchestrator = Depends(get_orchestrator),
):
    """
    Run the assistant to completion and return its JSON reply.
    """
    try:
        payload = await orchestrator.execute(request.prompt, PollMode.BLOCKING)
    except Exception as e:
        logger.error(f"Error generating lesson: {e}")
        raise HTTPException(status_code=500, detail=str(e))
    return JSONResponse(content=payload)
