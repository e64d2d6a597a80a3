"""Shared fixtures — fake Exa API built on httpx.MockTransport."""
import json
from typing import Callable, List
from unittest.mock import patch

import httpx
import pytest

from exa_mcp import client as upstream
from exa_mcp.recent import recent_searches

_real_create_client = upstream.create_client


def exa_response(query: str, n: int = 2) -> dict:
    return {
        "requestId": f"req-{query}",
        "autopromptString": query,
        "resolvedSearchType": "neural",
        "results": [
            {
                "id": f"https://example.com/{query}/{i}",
                "title": f"{query} result {i}",
                "url": f"https://example.com/{query}/{i}",
                "publishedDate": "2024-01-01",
                "author": "someone",
                "text": f"text about {query}",
                "score": 0.9,
            }
            for i in range(n)
        ],
    }


class FakeExa:
    """Records every request and answers with ``handler(request)``."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.handler = handler
        self.requests: List[httpx.Request] = []

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        result = self.handler(request)
        if not isinstance(result, httpx.Response):
            result = await result
        return result

    @property
    def bodies(self) -> List[dict]:
        return [json.loads(r.content) for r in self.requests]

    def factory(self):
        transport = httpx.MockTransport(self)
        return lambda: _real_create_client(api_key="test-key", transport=transport)


@pytest.fixture(autouse=True)
def clear_recent():
    recent_searches.clear()
    yield
    recent_searches.clear()


@pytest.fixture
def fake_exa():
    """Patch the upstream client factory; returns a function to install a handler."""
    patches = []

    def install(handler) -> FakeExa:
        fake = FakeExa(handler)
        p = patch("exa_mcp.client.create_client", fake.factory())
        p.start()
        patches.append(p)
        return fake

    yield install
    for p in patches:
        p.stop()


@pytest.fixture
def ok_exa(fake_exa):
    def handler(request):
        body = json.loads(request.content)
        key = body.get("query") or (body.get("ids") or ["?"])[0]
        return httpx.Response(200, json=exa_response(key))
    return fake_exa(handler)
