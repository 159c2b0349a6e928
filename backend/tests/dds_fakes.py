"""
Fake DDS endpoint for tests

Wraps httpx.MockTransport: every request is recorded, responses are
served in order. An exception in the queue is raised instead of answering.
"""
import json
import os
import sys
from typing import Any, List, Union

import httpx

# Add backend to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from dds_gateway.clients.dds_rest_client import DdsRestClient
from dds_gateway.core.config import Settings

TEST_SETTINGS = Settings(
    DDS_ENDPOINT="https://dds.example.test",
    DDS_PROJECT_ID="0549b4a43100d4f32f51c01c2fe4acdb",
    DDS_AUTH_TOKEN="test-token",
    DDS_LANGUAGE="en-us",
    DDS_TIMEOUT_SEC=5,
    DDS_LIST_PAGE_SIZE=2,
)
BASE_URL = "https://dds.example.test/v3/0549b4a43100d4f32f51c01c2fe4acdb"
INSTANCE_ID = "9136fd2a9fcd405ea4674276ce36dae8in02"


class FakeDds:
    def __init__(self, *responses: Union[httpx.Response, Exception]):
        self.responses: List[Union[httpx.Response, Exception]] = list(responses)
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.responses:
            raise AssertionError(f"unexpected request: {request.method} {request.url}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def client(self) -> DdsRestClient:
        return DdsRestClient(config=TEST_SETTINGS, transport=httpx.MockTransport(self))

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def body(self, i: int) -> Any:
        content = self.requests[i].content
        return json.loads(content) if content else None

    def path(self, i: int) -> str:
        return self.requests[i].url.path
