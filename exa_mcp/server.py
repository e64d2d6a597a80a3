"""MCP server shim — binds the enabled tools to the SDK and runs the stdio transport."""
import json
import logging
from typing import Any, Dict, Iterable, List, Optional

import anyio
import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from pydantic import ValidationError

from .config import SERVER_NAME, SERVER_VERSION
from .recent import RecentSearches, recent_searches
from .tools.registry import ToolRegistry, ToolSpec

logger = logging.getLogger(__name__)

RECENT_SEARCHES_URI = "exa://recent-searches"


class ToolCallError(Exception):
    """Reported to the caller as a tool result with ``isError: true``."""


class ExaServer:
    """Owns the low-level MCP server for one process.

    The enabled set is fixed at construction; tools cannot be re-bound later.
    """

    def __init__(self, registry: ToolRegistry, enabled_ids: Iterable[str],
                 recent: Optional[RecentSearches] = None):
        self.registry = registry
        self.enabled: Dict[str, ToolSpec] = {}
        for tool_id in enabled_ids:
            spec = registry.get(tool_id)
            if spec is not None:
                self.enabled[tool_id] = spec
        self._by_name = {spec.name: spec for spec in self.enabled.values()}
        self.recent = recent if recent is not None else recent_searches

        self.server = Server(SERVER_NAME, version=SERVER_VERSION)
        self.server.list_tools()(self.list_tools)
        self.server.call_tool()(self.call_tool)
        self.server.list_resources()(self.list_resources)
        self.server.read_resource()(self.read_resource)
        logger.info("Server initialized")

    async def list_tools(self) -> List[types.Tool]:
        return [
            types.Tool(
                name=spec.name,
                description=spec.description,
                inputSchema=spec.input_schema(),
            )
            for spec in self.enabled.values()
        ]

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
        spec = self._by_name.get(name)
        if spec is None:
            logger.warning(f"Call to unknown or disabled tool: {name}")
            raise ToolCallError(f"Unknown tool: {name}")

        try:
            params = spec.params.model_validate(arguments or {})
        except ValidationError as e:
            raise ToolCallError(f"Invalid arguments for {name}: {e}") from e

        result = await spec.handler(params)
        if result.is_error:
            raise ToolCallError(result.text)
        return [types.TextContent(type="text", text=result.text)]

    async def list_resources(self) -> List[types.Resource]:
        return [
            types.Resource(
                uri=RECENT_SEARCHES_URI,
                name="recent-searches",
                description=f"The last {self.recent.maxlen} Exa responses returned by this server",
                mimeType="application/json",
            )
        ]

    async def read_resource(self, uri) -> List[ReadResourceContents]:
        if str(uri).rstrip("/") != RECENT_SEARCHES_URI:
            raise ValueError(f"Unknown resource: {uri}")
        payload = json.dumps(self.recent.snapshot(), indent=2)
        return [ReadResourceContents(content=payload, mime_type="application/json")]

    def on_transport_error(self, error: BaseException) -> None:
        logger.error(f"Transport error: {error}")

    async def _relay(self, source, sink) -> None:
        # Stream-level faults arrive as Exception items; log them and keep serving
        async with sink:
            async for message in source:
                if isinstance(message, Exception):
                    self.on_transport_error(message)
                    continue
                await sink.send(message)

    async def run(self) -> None:
        async with stdio_server() as (read_stream, write_stream):
            relay_send, relay_receive = anyio.create_memory_object_stream(0)
            async with anyio.create_task_group() as tg:
                tg.start_soon(self._relay, read_stream, relay_send)
                logger.info("Exa Search MCP server running on stdio")
                await self.server.run(
                    relay_receive,
                    write_stream,
                    self.server.create_initialization_options(),
                )
                tg.cancel_scope.cancel()
