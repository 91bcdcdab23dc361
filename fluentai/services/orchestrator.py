"""
Drives one assistant run per lesson request.

thread -> user message -> run -> poll status -> read the newest message.
Threads and runs are never reused and never deleted; OpenAI expires them.
"""
import asyncio
import json
import logging
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Union

from fluentai import config
from fluentai.errors import InvalidJSONPayload, MalformedAssistantReply, RunFailed
from fluentai.schemas import PollResult, RunHandle
from fluentai.services.assistant_client import AssistantClient

logger = logging.getLogger(__name__)

NON_TERMINAL_STATUSES = ("queued", "in_progress")


class PollMode(str, Enum):
    BLOCKING = "blocking"  # poll inside the request until the run ends
    SINGLE_SHOT = "single_shot"  # start only, the caller polls the status endpoint


def extract_reply_text(messages: Dict[str, Any]) -> str:
    """Text of the first content block of the newest message."""
    try:
        value = messages["data"][0]["content"][0]["text"]["value"]
    except (KeyError, IndexError, TypeError) as e:
        raise MalformedAssistantReply("Invalid message format received from OpenAI") from e
    if not isinstance(value, str) or not value:
        raise MalformedAssistantReply("Invalid message format received from OpenAI")
    return value


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Unexpected non-standard JSON constant {name}")


def decode_reply(text: str) -> Any:
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        raise InvalidJSONPayload(str(e)) from e


class LessonOrchestrator:
    """Sequences the assistant calls for a single prompt."""

    def __init__(
        self,
        client: AssistantClient,
        assistant_id: str = config.ASSISTANT_ID,
        poll_interval: float = config.POLL_INTERVAL,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        self.client = client
        self.assistant_id = assistant_id
        self.poll_interval = poll_interval
        self._sleep = sleep

    async def start_run(self, prompt: str) -> RunHandle:
        thread = await self.client.create_thread()
        thread_id = thread["id"]
        await self.client.create_message(thread_id, prompt)
        run = await self.client.create_run(thread_id, self.assistant_id)
        logger.info(f"Started run {run['id']} on thread {thread_id}")
        return RunHandle(thread_id=thread_id, run_id=run["id"])

    async def poll_once(self, thread_id: str, run_id: str) -> PollResult:
        run = await self.client.retrieve_run(thread_id, run_id)
        status = run.get("status")
        if not status:
            raise MalformedAssistantReply("Run status missing from OpenAI response")
        logger.debug(f"Run {run_id} on thread {thread_id}: {status}")
        if status != "completed":
            return PollResult(status=status, completed=False)
        messages = await self.client.list_messages(thread_id)
        data = decode_reply(extract_reply_text(messages))
        return PollResult(status=status, completed=True, data=data)

    async def run_to_completion(self, prompt: str) -> Any:
        handle = await self.start_run(prompt)
        while True:
            await self._sleep(self.poll_interval)
            result = await self.poll_once(handle.thread_id, handle.run_id)
            if result.status not in NON_TERMINAL_STATUSES:
                break
        if not result.completed:
            logger.error(f"Run {handle.run_id} on thread {handle.thread_id} ended with status {result.status}")
            raise RunFailed(result.status)
        logger.info(f"Run {handle.run_id} on thread {handle.thread_id} completed")
        return result.data

    async def execute(self, prompt: str, mode: PollMode = PollMode.BLOCKING) -> Union[RunHandle, Any]:
        if mode is PollMode.SINGLE_SHOT:
            return await self.start_run(prompt)
        return await self.run_to_completion(prompt)

    async def close(self) -> None:
        await self.client.close()
