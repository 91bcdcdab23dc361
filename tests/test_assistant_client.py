import json
import unittest

import httpx

from fluentai.errors import RemoteCallFailed
from fluentai.services.assistant_client import AssistantClient


class TestAssistantClient(unittest.IsolatedAsyncioTestCase):
    def make_client(self, handler):
        self.requests = []

        def record(request):
            self.requests.append(request)
            return handler(request)

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(record))
        client = AssistantClient(api_key="sk-test", base_url="https://api.test/v1", http_client=http_client)
        self.addAsyncCleanup(client.close)
        return client

    async def test_create_thread_sends_credential_and_version_header(self):
        client = self.make_client(lambda r: httpx.Response(200, json={"id": "thread_1", "object": "thread"}))

        thread = await client.create_thread()

        self.assertEqual(thread["id"], "thread_1")
        request = self.requests[0]
        self.assertEqual(request.method, "POST")
        self.assertEqual(request.url.path, "/v1/threads")
        self.assertEqual(request.headers["Authorization"], "Bearer sk-test")
        self.assertEqual(request.headers["OpenAI-Beta"], "assistants=v2")

    async def test_create_message_posts_user_prompt(self):
        client = self.make_client(lambda r: httpx.Response(200, json={"id": "msg_1"}))

        await client.create_message("thread_1", "Teach me Spanish")

        request = self.requests[0]
        self.assertEqual(request.url.path, "/v1/threads/thread_1/messages")
        self.assertEqual(json.loads(request.content), {"role": "user", "content": "Teach me Spanish"})

    async def test_create_run_names_the_assistant(self):
        client = self.make_client(lambda r: httpx.Response(200, json={"id": "run_1", "status": "queued"}))

        run = await client.create_run("thread_1", "asst_123")

        self.assertEqual(run["status"], "queued")
        self.assertEqual(self.requests[0].url.path, "/v1/threads/thread_1/runs")
        self.assertEqual(json.loads(self.requests[0].content), {"assistant_id": "asst_123"})

    async def test_status_and_messages_are_get_requests(self):
        client = self.make_client(lambda r: httpx.Response(200, json={"status": "in_progress", "data": []}))

        await client.retrieve_run("thread_1", "run_1")
        await client.list_messages("thread_1")

        self.assertEqual([r.method for r in self.requests], ["GET", "GET"])
        self.assertEqual(self.requests[0].url.path, "/v1/threads/thread_1/runs/run_1")
        self.assertEqual(self.requests[1].url.path, "/v1/threads/thread_1/messages")

    async def test_error_status_raises_with_endpoint_and_body(self):
        body = {"error": {"message": "No assistant found", "type": "invalid_request_error"}}
        client = self.make_client(lambda r: httpx.Response(404, json=body))

        with self.assertRaises(RemoteCallFailed) as ctx:
            await client.create_run("thread_1", "asst_missing")

        self.assertEqual(ctx.exception.endpoint, "create run")
        self.assertIn("No assistant found", ctx.exception.body)
        self.assertTrue(str(ctx.exception).startswith("Failed to create run: "))

    async def test_server_error_is_not_retried(self):
        client = self.make_client(lambda r: httpx.Response(500, text="upstream exploded"))

        with self.assertRaises(RemoteCallFailed) as ctx:
            await client.create_thread()

        self.assertEqual(len(self.requests), 1)
        self.assertEqual(ctx.exception.body, "upstream exploded")

    async def test_connection_error_becomes_remote_call_failed(self):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = self.make_client(refuse)

        with self.assertRaises(RemoteCallFailed) as ctx:
            await client.list_messages("thread_1")

        self.assertEqual(ctx.exception.endpoint, "get messages")


if __name__ == "__main__":
    unittest.main()
