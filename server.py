#!/usr/bin/env python3
"""
Raindrop MCP Server

An MCP server that provides access to Raindrop.io bookmarks through the
Raindrop.io REST API.

Usage:
    RAINDROP_ACCESS_TOKEN="your-token" python server.py

This is a convenience entry point. The actual CLI is in raindrop_mcp/cli.py.
"""

from raindrop_mcp.cli import main

if __name__ == "__main__":
    main()
