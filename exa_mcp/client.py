"""Upstream client factory — one short-lived httpx client per tool call."""
from typing import Optional

import httpx

from .config import API_BASE_URL, REQUEST_TIMEOUT_S, settings


def build_headers(api_key: Optional[str] = None) -> dict:
    return {
        "accept": "application/json",
        "content-type": "application/json",
        "x-api-key": api_key if api_key is not None else settings.exa_api_key,
    }


def create_client(api_key: Optional[str] = None,
                  transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    """Create a fresh client for a single request.

    Nothing is pooled between calls, so a failure in one call cannot leave
    connection state behind for another.
    """
    return httpx.AsyncClient(
        base_url=API_BASE_URL,
        headers=build_headers(api_key),
        timeout=REQUEST_TIMEOUT_S,
        transport=transport,
    )
