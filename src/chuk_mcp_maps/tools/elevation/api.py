"""
Elevation tool registration for chuk-mcp-maps.
"""

import logging

from pydantic import ValidationError

from ...constants import ErrorMessages
from ...core.operations import ELEVATION
from ...models.responses import Coordinate, ErrorResponse, format_response

logger = logging.getLogger(__name__)


def register_elevation_tools(mcp, maps):
    """Register elevation tools with the MCP server."""

    @mcp.tool()
    async def maps_elevation(locations: list[Coordinate], output_mode: str = "json") -> str:
        """Get elevation data for locations.

        Args:
            locations: Array of {"latitude": ..., "longitude": ...} objects
                       ({"lat": ..., "lng": ...} is accepted too)
            output_mode: "json" (default) or "text"

        Returns:
            results: elevation in metres, sampled location and resolution per point
        """
        try:
            points = [Coordinate.model_validate(location).to_latlng() for location in locations]
        except ValidationError as e:
            logger.error("maps_elevation failed: %s", e)
            return format_response(
                ErrorResponse(error=ErrorMessages.INCOMPLETE_LOCATION), output_mode
            )
        try:
            result = await maps.execute(ELEVATION, locations=points)
        except ValueError as e:
            logger.error("maps_elevation failed: %s", e)
            result = ErrorResponse(error=str(e))
        return format_response(result, output_mode)
