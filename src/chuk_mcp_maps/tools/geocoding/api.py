"""
Geocoding tool registration for chuk-mcp-maps.

Registers forward and reverse geocoding tools.
"""

import logging

from ...core.operations import GEOCODE, REVERSE_GEOCODE
from ...models.responses import ErrorResponse, LatLng, format_response

logger = logging.getLogger(__name__)


def register_geocoding_tools(mcp, maps):
    """Register geocoding tools with the MCP server."""

    @mcp.tool()
    async def maps_geocode(address: str, output_mode: str = "json") -> str:
        """Geocode an address to get its coordinates.

        Only the best (first) match is returned when Google finds several
        candidates for the address.

        Args:
            address: The address to geocode (e.g. "1600 Amphitheatre Parkway, Mountain View")
            output_mode: "json" (default) or "text"

        Returns:
            location {lat, lng}, formatted_address and place_id
        """
        try:
            result = await maps.execute(GEOCODE, address=address)
        except ValueError as e:
            logger.error("maps_geocode failed: %s", e)
            result = ErrorResponse(error=str(e))
        return format_response(result, output_mode)

    @mcp.tool()
    async def maps_reverse_geocode(
        latitude: float,
        longitude: float,
        output_mode: str = "json",
    ) -> str:
        """Reverse geocode coordinates to get an address.

        Args:
            latitude: Latitude coordinate
            longitude: Longitude coordinate
            output_mode: "json" (default) or "text"

        Returns:
            formatted_address, place_id and address_components of the best match
        """
        try:
            result = await maps.execute(
                REVERSE_GEOCODE, latlng=LatLng(lat=latitude, lng=longitude)
            )
        except ValueError as e:
            logger.error("maps_reverse_geocode failed: %s", e)
            result = ErrorResponse(error=str(e))
        return format_response(result, output_mode)
