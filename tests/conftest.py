"""Shared fixtures: fake settings, a recording stub client, mock HTTP."""

import json

import httpx
import pytest

from runpod_mcp.core.client import RunPodClient
from runpod_mcp.core.config import Settings

BASE_URL = "https://rest.runpod.io/v1"


class StubClient:
    """Stands in for RunPodClient and records every request."""

    def __init__(self, result=None, error=None):
        self.result = {"ok": True} if result is None else result
        self.error = error
        self.calls = []

    async def request(self, path, method="GET", body=None, params=None):
        self.calls.append({"path": path, "method": method, "body": body, "params": params})
        if self.error is not None:
            raise self.error
        return self.result

    async def aclose(self):
        pass


class MockRunPod:
    """httpx.MockTransport handler that records requests and replays one response."""

    def __init__(self, status_code=200, json_body=None, text=None, headers=None, exc=None):
        self.status_code = status_code
        self.json_body = json_body
        self.text = text
        self.headers = headers
        self.exc = exc
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if self.json_body is not None:
            return httpx.Response(self.status_code, json=self.json_body, headers=self.headers)
        return httpx.Response(self.status_code, text=self.text or "", headers=self.headers)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def settings():
    return Settings(api_key="test-key", api_base_url=BASE_URL, timeout_seconds=5.0)


@pytest.fixture
def stub_client():
    return StubClient()


def make_client(settings, handler) -> RunPodClient:
    return RunPodClient(settings, http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))
