#!/usr/bin/env python3
"""
Maps MCP Server - Entry Point

Provides geocoding, reverse geocoding, place search and details, distance
matrix, directions, and elevation via the Google Maps Platform.
Supports both stdio (for Claude Desktop) and HTTP (for API access) transports.
"""

import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from .constants import EnvVar, GoogleMapsConfig

# Load environment variables from .env file
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)

logger = logging.getLogger(__name__)

from .analytics import ToolAnalytics  # noqa: E402
from .async_server import create_server  # noqa: E402
from .core.exceptions import MissingCredentialError  # noqa: E402
from .core.google_maps import load_api_key  # noqa: E402


def main() -> None:
    """Main entry point for the MCP server."""
    import argparse

    parser = argparse.ArgumentParser(description="Maps MCP Server")
    parser.add_argument(
        "mode",
        nargs="?",
        choices=["stdio", "http"],
        default=None,
        help="Transport mode (stdio for Claude Desktop, http for API)",
    )
    parser.add_argument(
        "--host", default="localhost", help="Host for HTTP mode (default: localhost)"
    )
    parser.add_argument("--port", type=int, default=8010, help="Port for HTTP mode (default: 8010)")
    parser.add_argument(
        "--analytics", action="store_true", help="Record tool calls to a local SQLite database"
    )
    parser.add_argument(
        "--db-path", default=None, help="Analytics database path (default: ~/.chuk-mcp-maps)"
    )

    args = parser.parse_args()

    try:
        api_key = load_api_key()
    except MissingCredentialError as e:
        logger.error("Cannot start Maps MCP Server: %s", e)
        sys.exit(1)

    analytics = ToolAnalytics(args.db_path) if args.analytics else None
    if analytics is not None:
        print(f"Analytics enabled ({analytics.db_path})", file=sys.stderr)

    base_url = os.environ.get(EnvVar.GOOGLE_MAPS_BASE_URL) or GoogleMapsConfig.BASE_URL
    mcp = create_server(api_key, base_url=base_url, analytics=analytics)

    if args.mode == "stdio":
        print("Maps MCP Server starting in STDIO mode", file=sys.stderr)
        mcp.run(stdio=True)
    elif args.mode == "http":
        print(
            f"Maps MCP Server starting in HTTP mode on {args.host}:{args.port}",
            file=sys.stderr,
        )
        mcp.run(host=args.host, port=args.port, stdio=False)
    else:
        if os.environ.get(EnvVar.MCP_STDIO) or (not sys.stdin.isatty()):
            print("Maps MCP Server starting in STDIO mode (auto-detected)", file=sys.stderr)
            mcp.run(stdio=True)
        else:
            print(
                f"Maps MCP Server starting in HTTP mode on {args.host}:{args.port}",
                file=sys.stderr,
            )
            mcp.run(host=args.host, port=args.port, stdio=False)


if __name__ == "__main__":
    main()
