"""Diagnostic logging — everything goes to stderr, stdout belongs to the MCP transport."""
import logging
import sys
from typing import Optional

LOG_PREFIX = "[EXA-MCP-DEBUG]"

logger = logging.getLogger("exa_mcp.request")


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=f"{LOG_PREFIX} %(message)s",
        stream=sys.stderr,
    )


class RequestLogger:
    """Logger bound to one tool call; every line carries the correlation id."""

    def __init__(self, request_id: str, tool_id: str, base: Optional[logging.Logger] = None):
        self.request_id = request_id
        self.tool_id = tool_id
        self._logger = base or logger

    def _fmt(self, message: str) -> str:
        return f"[{self.request_id}] [{self.tool_id}] {message}"

    def log(self, message: str) -> None:
        self._logger.info(self._fmt(message))

    def start(self, query: str) -> None:
        self._logger.info(self._fmt(f'Starting search for query: "{query}"'))

    def error(self, error: BaseException) -> None:
        self._logger.error(self._fmt(f"Error: {error}"))

    def complete(self) -> None:
        self._logger.info(self._fmt("Successfully completed request"))
