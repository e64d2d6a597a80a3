"""Tool registry — explicit, ordered construction from tool factories."""
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Iterable, Iterator, Optional, Type

from pydantic import BaseModel

logger = logging.getLogger(__name__)


@dataclass
class ToolResult:
    text: str
    is_error: bool = False


@dataclass(frozen=True)
class ToolSpec:
    id: str
    name: str
    description: str
    params: Type[BaseModel]
    handler: Callable[[Any], Awaitable[ToolResult]]
    enabled_by_default: bool = False

    def input_schema(self) -> Dict[str, Any]:
        """JSON schema advertised to MCP clients, using the camelCase wire names."""
        return self.params.model_json_schema(by_alias=True)


ToolFactory = Callable[[], ToolSpec]


class DuplicateToolError(ValueError):
    pass


class ToolRegistry:
    """Mapping of tool id to ToolSpec, in registration order.

    There is no removal; a second registration under the same id is rejected.
    """

    def __init__(self):
        self._tools: Dict[str, ToolSpec] = {}

    def register(self, spec: ToolSpec) -> ToolSpec:
        if spec.id in self._tools:
            raise DuplicateToolError(f"Duplicate tool id: {spec.id}")
        self._tools[spec.id] = spec
        logger.debug(f"Registered tool: {spec.id}")
        return spec

    def get(self, tool_id: str) -> Optional[ToolSpec]:
        return self._tools.get(tool_id)

    def all(self) -> Dict[str, ToolSpec]:
        return dict(self._tools)

    def __contains__(self, tool_id: object) -> bool:
        return tool_id in self._tools

    def __iter__(self) -> Iterator[str]:
        return iter(self._tools)

    def __len__(self) -> int:
        return len(self._tools)


def build_registry(factories: Iterable[ToolFactory]) -> ToolRegistry:
    registry = ToolRegistry()
    for factory in factories:
        registry.register(factory())
    return registry


def default_registry() -> ToolRegistry:
    from .builtin import BUILTIN_TOOLS
    return build_registry(BUILTIN_TOOLS)


def describe_tools(registry: ToolRegistry) -> str:
    """Human-readable listing, one block per tool (used by --list-tools)."""
    lines = ["Available tools:"]
    for tool_id, spec in registry.all().items():
        lines.append(f"- {tool_id}: {spec.name}")
        lines.append(f"  Description: {spec.description}")
        lines.append(f"  Enabled by default: {'Yes' if spec.enabled_by_default else 'No'}")
        lines.append("")
    return "\n".join(lines)
