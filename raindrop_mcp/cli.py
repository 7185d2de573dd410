#!/usr/bin/env python3
"""
CLI entry point for Raindrop MCP Server.

Usage:
    # As MCP server over stdio
    RAINDROP_ACCESS_TOKEN="your-token" raindrop-mcp

    # Verbose logging (written to stderr)
    raindrop-mcp --log-level DEBUG
"""

import argparse
import logging
import sys

from dotenv import load_dotenv

from raindrop_mcp import __version__
from raindrop_mcp.config import ConfigError, load_config

logger = logging.getLogger("raindrop_mcp")

LOG_FORMAT = "[%(asctime)s] %(levelname)-5s [%(name)s] %(message)s"


def _configure_logging(level: str) -> None:
    """Send log records to stderr; stdout carries the MCP protocol."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def main(argv=None):
    """Main entry point - parse CLI args, load configuration, run MCP server."""
    parser = argparse.ArgumentParser(
        description="Raindrop.io MCP Server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment:
  RAINDROP_ACCESS_TOKEN  Raindrop.io API token (required)
  RAINDROP_TIMEOUT       Request timeout in seconds (default: none)
  LOG_LEVEL              Log level (default: INFO)

Variables may also be placed in a .env file in the working directory.

Examples:
  # Run as MCP server
  RAINDROP_ACCESS_TOKEN="your-token" uvx raindrop-mcp

  # Register with Claude Code
  claude mcp add raindrop -e RAINDROP_ACCESS_TOKEN='your-token' -- uvx raindrop-mcp
""",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--log-level",
        metavar="LEVEL",
        help="Override LOG_LEVEL (DEBUG, INFO, WARNING, ERROR)",
    )

    args = parser.parse_args(argv)

    load_dotenv()

    try:
        config = load_config()
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    _configure_logging(args.log_level or config.log_level)

    from raindrop_mcp.api import configure

    configure(config)

    # MCP server mode - only now import the full server and register tools
    try:
        from raindrop_mcp.server import run

        run()
    except KeyboardInterrupt:
        print("Shutting down...", file=sys.stderr, flush=True)
    except Exception:
        logger.exception("Fatal error")
        sys.exit(1)


if __name__ == "__main__":
    main()
