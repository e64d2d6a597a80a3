"""Tool executor — the shared request/relay pipeline behind every Exa tool."""
import json
import logging
import random
import string
import time
from typing import Optional, Set

import httpx

from .. import client as upstream
from ..logger import RequestLogger
from ..protocol import UpstreamRequest
from ..recent import recent_searches
from .registry import ToolResult

logger = logging.getLogger(__name__)

_SUFFIX_ALPHABET = string.ascii_lowercase + string.digits

# Correlation ids of calls currently waiting on the upstream API
_in_flight: Set[str] = set()


def new_request_id(tool_id: str) -> str:
    suffix = "".join(random.choices(_SUFFIX_ALPHABET, k=5))
    return f"{tool_id}-{int(time.time() * 1000)}-{suffix}"


def in_flight() -> Set[str]:
    return set(_in_flight)


def _upstream_message(response: httpx.Response) -> Optional[str]:
    try:
        data = response.json()
    except ValueError:
        return None
    if isinstance(data, dict):
        message = data.get("message") or data.get("error")
        if message:
            return str(message)
    return None


async def run_exa_call(
    tool_id: str,
    endpoint: str,
    request: UpstreamRequest,
    *,
    query: str,
    error_label: str,
    empty_text: str,
    step_note: str = "",
) -> ToolResult:
    """Send one request to Exa and turn the outcome into a ToolResult.

    Never raises: HTTP, transport and unexpected failures all come back as
    ``is_error`` results.
    """
    request_id = new_request_id(tool_id)
    log = RequestLogger(request_id, tool_id)
    _in_flight.add(request_id)
    log.start(query)
    t0 = time.monotonic()

    try:
        body = request.to_body()
        if step_note:
            log.log(step_note)
        log.log("Sending request to Exa API")
        async with upstream.create_client() as http:
            resp = await http.post(endpoint, json=body)
            resp.raise_for_status()
            data = resp.json()
        log.log("Received response from Exa API")

        results = data.get("results") if isinstance(data, dict) else None
        if not results:
            log.log("Warning: Empty or invalid response from Exa API")
            return ToolResult(text=empty_text)

        log.log(f"Found {len(results)} results")
        await recent_searches.add(query, tool_id, data)
        log.complete()
        return ToolResult(text=json.dumps(data, indent=2))

    except httpx.HTTPStatusError as e:
        log.error(e)
        status = e.response.status_code
        # httpx appends a documentation link on a second line
        message = _upstream_message(e.response) or str(e).splitlines()[0]
        log.log(f"HTTP error ({status}): {message}")
        return ToolResult(text=f"{error_label} ({status}): {message}", is_error=True)
    except httpx.HTTPError as e:
        # Connection failures and timeouts: no response, so no status code
        log.error(e)
        message = str(e) or type(e).__name__
        log.log(f"HTTP error (unknown): {message}")
        return ToolResult(text=f"{error_label} (unknown): {message}", is_error=True)
    except Exception as e:
        log.error(e)
        logger.debug(f"Tool {tool_id} failed", exc_info=True)
        return ToolResult(text=f"{error_label}: {e}", is_error=True)
    finally:
        _in_flight.discard(request_id)
        logger.debug(f"[{request_id}] finished in {time.monotonic() - t0:.1f}s")
