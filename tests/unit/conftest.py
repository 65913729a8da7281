"""Shared fixtures: clients wired to an in-memory transport."""

import asyncio

import httpx
import pytest

from congress_client import ClientConfig, CongressClient

API_KEY = "test-key"
BASE_URL = "https://api.example.com/svc/politics"


class Recorder:
    """MockTransport handler that records requested URLs."""

    def __init__(self, status: int = 200, body: str = '{"status":"OK"}'):
        self.status = status
        self.body = body
        self.urls: list[str] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.urls.append(str(request.url))
        return httpx.Response(self.status, text=self.body)


@pytest.fixture
def make_recorder():
    return Recorder


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def make_client(recorder):
    def _make(fmt: str = "json", handler=None, **config_kwargs) -> CongressClient:
        config = ClientConfig(api_key=API_KEY, api_version="v3", format=fmt, base_url=BASE_URL, **config_kwargs)
        return CongressClient(config, transport=httpx.MockTransport(handler or recorder))

    return _make


@pytest.fixture
def call():
    """Run one operation inside an open session and return its body."""

    def _call(client: CongressClient, operation: str, *args, **kwargs) -> str:
        async def run():
            async with client:
                return await getattr(client, operation)(*args, **kwargs)

        return asyncio.run(run())

    return _call


@pytest.fixture
def requested(make_client, recorder, call):
    """Run one operation and return the URL that went over the wire."""

    def _requested(operation: str, *args, fmt: str = "json", **kwargs) -> str:
        call(make_client(fmt), operation, *args, **kwargs)
        assert len(recorder.urls) == 1
        return recorder.urls.pop()

    return _requested
