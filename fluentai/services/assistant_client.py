"""
Client for the OpenAI Assistants API.

Each method is a single HTTP call that returns the decoded JSON body.
Non-success answers are raised as ``RemoteCallFailed``; nothing is retried.
"""
import logging
from typing import Any, Dict, Optional

import httpx
import openai
from openai import APIConnectionError, APIStatusError

from fluentai import config
from fluentai.errors import RemoteCallFailed

logger = logging.getLogger(__name__)


class AssistantClient:
    """Talks to the threads, messages and runs endpoints."""

    def __init__(
        self,
        api_key: str,
        base_url: str = config.OPENAI_BASE_URL,
        beta_header: str = config.OPENAI_BETA_HEADER,
        timeout: float = config.REQUEST_TIMEOUT,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.client = openai.AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
            default_headers={"OpenAI-Beta": beta_header},
            http_client=http_client,
        )

    async def _request(self, endpoint: str, method: str, path: str, body: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        try:
            if method == "POST":
                response = await self.client.post(path, cast_to=httpx.Response, body=body or {})
            else:
                response = await self.client.get(path, cast_to=httpx.Response)
        except APIStatusError as e:
            logger.error(f"OpenAI answered {e.status_code} to '{endpoint}': {e.response.text}")
            raise RemoteCallFailed(endpoint, e.response.text) from e
        except APIConnectionError as e:
            logger.error(f"OpenAI unreachable during '{endpoint}': {e}")
            raise RemoteCallFailed(endpoint, str(e)) from e
        try:
            return response.json()
        except ValueError as e:
            raise RemoteCallFailed(endpoint, response.text) from e

    async def create_thread(self) -> Dict[str, Any]:
        return await self._request("create thread", "POST", "/threads")

    async def create_message(self, thread_id: str, content: str, role: str = "user") -> Dict[str, Any]:
        return await self._request(
            "create message",
            "POST",
            f"/threads/{thread_id}/messages",
            {"role": role, "content": content},
        )

    async def create_run(self, thread_id: str, assistant_id: str) -> Dict[str, Any]:
        return await self._request(
            "create run",
            "POST",
            f"/threads/{thread_id}/runs",
            {"assistant_id": assistant_id},
        )

    async def retrieve_run(self, thread_id: str, run_id: str) -> Dict[str, Any]:
        return await self._request("get run status", "GET", f"/threads/{thread_id}/runs/{run_id}")

    async def list_messages(self, thread_id: str) -> Dict[str, Any]:
        """Messages of a thread, newest first."""
        return await self._request("get messages", "GET", f"/threads/{thread_id}/messages")

    async def close(self) -> None:
        await self.client.close()
