"""
Discovery tool registration for chuk-mcp-maps.

Registers status and capabilities tools.
"""

import logging

from ...constants import (
    ALL_TOOLS,
    DISCOVERY_TOOLS,
    ELEVATION_TOOLS,
    GEOCODING_TOOLS,
    PLACES_TOOLS,
    ROUTING_TOOLS,
    TRAVEL_MODES,
    ServerConfig,
    SuccessMessages,
)
from ...models.responses import CapabilitiesResponse, StatusResponse, format_response

logger = logging.getLogger(__name__)


def register_discovery_tools(mcp, maps):
    """Register discovery tools with the MCP server."""

    @mcp.tool()
    async def maps_status(output_mode: str = "json") -> str:
        """Get maps server status.

        Returns server version, Google Maps API URL, and tool count.

        Args:
            output_mode: "json" (default) or "text"

        Returns:
            Server status information
        """
        response = StatusResponse(
            server=ServerConfig.NAME,
            version=ServerConfig.VERSION,
            api_url=maps.base_url,
            tool_count=len(ALL_TOOLS),
            message=SuccessMessages.STATUS.format(ServerConfig.VERSION),
        )
        return format_response(response, output_mode)

    @mcp.tool()
    async def maps_capabilities(output_mode: str = "json") -> str:
        """Get full server capabilities.

        Returns the complete list of tools, Google Maps API details,
        and LLM-friendly usage guidance.

        Args:
            output_mode: "json" (default) or "text"

        Returns:
            Full server capabilities including tool lists and guidance
        """
        response = CapabilitiesResponse(
            server=ServerConfig.NAME,
            version=ServerConfig.VERSION,
            geocoding_tools=GEOCODING_TOOLS,
            places_tools=PLACES_TOOLS,
            routing_tools=ROUTING_TOOLS,
            elevation_tools=ELEVATION_TOOLS,
            discovery_tools=DISCOVERY_TOOLS,
            travel_modes=TRAVEL_MODES,
            tool_count=len(ALL_TOOLS),
            api_url=maps.base_url,
            llm_guidance=(
                "Use 'maps_geocode' to convert an address to coordinates and a place_id. "
                "Use 'maps_reverse_geocode' to identify the address at coordinates. "
                "Use 'maps_search_places' to find places by free text, optionally "
                "around a center point. "
                "Use 'maps_place_details' with a place_id for phone, website, "
                "rating, reviews and opening hours. "
                "Use 'maps_distance_matrix' for travel times between many origins "
                "and destinations. "
                "Use 'maps_directions' for step-by-step routes between two points. "
                "Use 'maps_elevation' for the elevation of one or more coordinates. "
                "Tool failures come back as {\"error\": ...} rather than raising."
            ),
            message=SuccessMessages.CAPABILITIES.format(ServerConfig.NAME, ServerConfig.VERSION),
        )
        return format_response(response, output_mode)
