"""
Routing tool registration for chuk-mcp-maps.

Registers distance matrix and directions tools.
"""

import logging

from ...constants import TRAVEL_MODES, ErrorMessages, TravelMode
from ...core.operations import DIRECTIONS, DISTANCE_MATRIX
from ...models.responses import ErrorResponse, format_response

logger = logging.getLogger(__name__)


def _check_mode(mode: str | None) -> None:
    """Raise ValueError unless mode is None or a known travel mode."""
    if mode is not None and mode not in TRAVEL_MODES:
        raise ValueError(ErrorMessages.INVALID_MODE.format(mode, ", ".join(TRAVEL_MODES)))


def register_routing_tools(mcp, maps):
    """Register routing tools with the MCP server."""

    # A bare Literal annotation is what publishes the enum in the tool schema.
    @mcp.tool()
    async def maps_distance_matrix(
        origins: list[str],
        destinations: list[str],
        mode: TravelMode = None,
        output_mode: str = "json",
    ) -> str:
        """Calculate distances between multiple origins and destinations.

        Args:
            origins: Array of origin addresses or "lat,lng" coordinates
            destinations: Array of destination addresses or "lat,lng" coordinates
            mode: Travel mode (driving, walking, bicycling, transit)
            output_mode: "json" (default) or "text"

        Returns:
            origin_addresses, destination_addresses and one row per origin with
            status, duration and distance for each destination
        """
        try:
            _check_mode(mode)
            result = await maps.execute(
                DISTANCE_MATRIX, origins=origins, destinations=destinations, mode=mode
            )
        except ValueError as e:
            logger.error("maps_distance_matrix failed: %s", e)
            result = ErrorResponse(error=str(e))
        return format_response(result, output_mode)

    @mcp.tool()
    async def maps_directions(
        origin: str,
        destination: str,
        mode: TravelMode = None,
        output_mode: str = "json",
    ) -> str:
        """Get directions between two points.

        Distance and duration are reported for the first leg of each route.

        Args:
            origin: Starting point address or coordinates
            destination: Ending point address or coordinates
            mode: Travel mode (driving, walking, bicycling, transit)
            output_mode: "json" (default) or "text"

        Returns:
            routes with summary, distance, duration and step-by-step instructions
        """
        try:
            _check_mode(mode)
            result = await maps.execute(
                DIRECTIONS, origin=origin, destination=destination, mode=mode
            )
        except ValueError as e:
            logger.error("maps_directions failed: %s", e)
            result = ErrorResponse(error=str(e))
        return format_response(result, output_mode)
