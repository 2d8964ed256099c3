#!/usr/bin/env python3
"""
Async Maps MCP Server using chuk-mcp-server

Geocoding, reverse geocoding, place search and details, distance matrix,
directions, and elevation via the Google Maps Platform web services.
"""

import logging

from chuk_mcp_server import ChukMCPServer

from .analytics import ToolAnalytics
from .constants import GoogleMapsConfig, ServerConfig
from .core.google_maps import GoogleMapsClient
from .core.maps import GoogleMaps
from .tools.discovery import register_discovery_tools
from .tools.elevation import register_elevation_tools
from .tools.geocoding import register_geocoding_tools
from .tools.places import register_places_tools
from .tools.routing import register_routing_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def register_all_tools(mcp, maps: GoogleMaps) -> None:
    """Register every tool module against any registry exposing ``tool()``."""
    register_geocoding_tools(mcp, maps)
    register_places_tools(mcp, maps)
    register_routing_tools(mcp, maps)
    register_elevation_tools(mcp, maps)
    register_discovery_tools(mcp, maps)


def create_server(
    api_key: str,
    base_url: str = GoogleMapsConfig.BASE_URL,
    analytics: ToolAnalytics | None = None,
) -> ChukMCPServer:
    """Create the MCP server instance with all tools registered.

    Args:
        api_key: Google Maps API key
        base_url: Upstream API root, overridable for proxies and tests
        analytics: When given, every tool call is recorded to its database
    """
    mcp = ChukMCPServer(ServerConfig.NAME)
    maps = GoogleMaps(GoogleMapsClient(api_key=api_key, base_url=base_url))
    registry = analytics.enhance(mcp) if analytics is not None else mcp
    register_all_tools(registry, maps)
    return mcp
