import asyncio
from typing import Callable, List

import httpx
import pytest
from fastapi.testclient import TestClient

from average_calculator.api.dependencies import get_upstream
from average_calculator.main import app
from average_calculator.upstream.client import UpstreamClient


class ScriptedUpstream:
    """Stands in for UpstreamClient and replays queued outcomes."""

    def __init__(self):
        self.outcomes: List[object] = []
        self.calls: List[tuple] = []

    def queue(self, *outcomes):
        self.outcomes.extend(outcomes)

    async def fetch_numbers(self, url: str, timeout_s: float):
        self.calls.append((url, timeout_s))
        outcome = self.outcomes.pop(0) if self.outcomes else []
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def make_upstream() -> Callable[..., UpstreamClient]:
    """Build a real UpstreamClient on top of an httpx.MockTransport handler."""

    def _make(handler, auth_token=None) -> UpstreamClient:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return UpstreamClient(client, auth_token=auth_token)

    return _make


@pytest.fixture
def slow_handler():
    async def _handler(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(5)
        return httpx.Response(200, json={"numbers": [1, 2, 3]})

    return _handler


@pytest.fixture
def scripted_upstream():
    return ScriptedUpstream()


@pytest.fixture
def test_client(scripted_upstream):
    """TestClient with a fresh window per test and a scripted upstream."""
    app.dependency_overrides[get_upstream] = lambda: scripted_upstream
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
