"""Start-up activation: which registered tools get bound to the server."""
import logging
from typing import Iterable, List

from .registry import ToolRegistry

logger = logging.getLogger(__name__)


def parse_tool_ids(values: Iterable[str]) -> List[str]:
    """Flatten repeated and comma-separated ids, dropping blanks and duplicates."""
    ids: List[str] = []
    for value in values or ():
        for part in value.split(","):
            part = part.strip()
            if part and part not in ids:
                ids.append(part)
    return ids


def select_enabled(
    registry: ToolRegistry,
    include_ids: Iterable[str] = (),
    exclude_ids: Iterable[str] = (),
) -> List[str]:
    """Return enabled tool ids in registry order.

    A non-empty include set replaces the per-tool defaults; excludes always win.
    Unknown ids are ignored with a warning.
    """
    include = set(include_ids or ())
    exclude = set(exclude_ids or ())

    unknown = sorted((include | exclude) - set(registry))
    if unknown:
        logger.warning(f"Ignoring unknown tool id(s): {', '.join(unknown)}")

    enabled = []
    for tool_id, spec in registry.all().items():
        should_enable = tool_id in include if include else spec.enabled_by_default
        if should_enable and tool_id not in exclude:
            enabled.append(tool_id)
    return enabled
