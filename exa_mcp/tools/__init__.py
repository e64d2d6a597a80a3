"""Tool system — registry, activation selector, executor."""
from .registry import (
    ToolRegistry, ToolResult, ToolSpec, DuplicateToolError,
    build_registry, default_registry, describe_tools,
)
from .selector import select_enabled, parse_tool_ids
from .executor import run_exa_call
