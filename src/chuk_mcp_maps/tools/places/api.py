"""
Places tool registration for chuk-mcp-maps.

Registers text search and place details tools.
"""

import logging

from ...core.operations import PLACE_DETAILS, SEARCH_PLACES
from ...models.responses import ErrorResponse, LatLng, format_response

logger = logging.getLogger(__name__)


def register_places_tools(mcp, maps):
    """Register places tools with the MCP server."""

    @mcp.tool()
    async def maps_search_places(
        query: str,
        latitude: float | None = None,
        longitude: float | None = None,
        radius: int | None = None,
        output_mode: str = "json",
    ) -> str:
        """Search for places using a text query.

        Results are biased towards the search center when both latitude and
        longitude are given; otherwise no location is sent.

        Args:
            query: Search query (e.g. "coffee near Union Square")
            latitude: Optional latitude for search center
            longitude: Optional longitude for search center
            radius: Search radius in meters (max 50000)
            output_mode: "json" (default) or "text"

        Returns:
            places: name, formatted_address, location, place_id, rating, types
        """
        center = None
        if latitude is not None and longitude is not None:
            center = LatLng(lat=latitude, lng=longitude)
        try:
            result = await maps.execute(
                SEARCH_PLACES, query=query, location=center, radius=radius
            )
        except ValueError as e:
            logger.error("maps_search_places failed: %s", e)
            result = ErrorResponse(error=str(e))
        return format_response(result, output_mode)

    @mcp.tool()
    async def maps_place_details(place_id: str, output_mode: str = "json") -> str:
        """Get detailed information about a place.

        Args:
            place_id: The place ID to get details for (from maps_geocode or maps_search_places)
            output_mode: "json" (default) or "text"

        Returns:
            name, formatted_address, location, phone number, website, rating,
            reviews and opening hours where Google has them
        """
        try:
            result = await maps.execute(PLACE_DETAILS, place_id=place_id)
        except ValueError as e:
            logger.error("maps_place_details failed: %s", e)
            result = ErrorResponse(error=str(e))
        return format_response(result, output_mode)
