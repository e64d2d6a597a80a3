#!/usr/bin/env python3
"""
Exa MCP Server - stdio launcher
Equivalent to the `exa-mcp-server` console script
"""
import sys

from exa_mcp.main import main

if __name__ == "__main__":
    sys.exit(main())
