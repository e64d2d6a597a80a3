"""Command-line entry point: list tools, or select them and serve over stdio."""
import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from .config import ConfigError, require_api_key, settings
from .logger import setup_logging
from .server import ExaServer
from .tools import default_registry, describe_tools, parse_tool_ids, select_enabled

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exa-mcp-server",
        description="Exa AI search tools over the Model Context Protocol (stdio)",
    )
    parser.add_argument(
        "--tools",
        nargs="*",
        action="extend",
        default=[],
        metavar="ID",
        help="Tools to enable (if not specified, all enabled-by-default tools are used)",
    )
    parser.add_argument(
        "--exclude-tools",
        nargs="+",
        action="extend",
        default=[],
        metavar="ID",
        help="Tools to keep disabled even if selected or enabled by default",
    )
    parser.add_argument(
        "--list-tools", action="store_true", help="List all available tools and exit"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(settings.log_level)

    try:
        registry = default_registry()
    except Exception as e:
        logger.error(f"Tool registration failed: {e}")
        return 1

    if args.list_tools:
        print(describe_tools(registry))
        return 0

    # Checked after --list-tools so listing works without a key
    try:
        require_api_key()
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    try:
        enabled = select_enabled(
            registry,
            parse_tool_ids(args.tools),
            parse_tool_ids(args.exclude_tools),
        )
        server = ExaServer(registry, enabled)
        logger.info(f"Starting Exa MCP server with {len(enabled)} tools: {', '.join(enabled)}")
        asyncio.run(server.run())
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    except Exception as e:
        logger.error(f"Fatal server error: {e}", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
