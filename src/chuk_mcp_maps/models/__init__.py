"""Response models for chuk-mcp-maps."""

from .responses import (
    AddressComponent,
    Coordinate,
    CapabilitiesResponse,
    DirectionsResponse,
    DirectionsRoute,
    DirectionsStep,
    DistanceMatrixElement,
    DistanceMatrixResponse,
    DistanceMatrixRow,
    ElevationResponse,
    ElevationResult,
    ErrorResponse,
    GeocodeResponse,
    LatLng,
    OpeningHours,
    PlaceDetailsResponse,
    PlaceSearchResponse,
    PlaceSummary,
    ReverseGeocodeResponse,
    Review,
    StatusResponse,
    TextValue,
    format_response,
)

__all__ = [
    "AddressComponent",
    "Coordinate",
    "CapabilitiesResponse",
    "DirectionsResponse",
    "DirectionsRoute",
    "DirectionsStep",
    "DistanceMatrixElement",
    "DistanceMatrixResponse",
    "DistanceMatrixRow",
    "ElevationResponse",
    "ElevationResult",
    "ErrorResponse",
    "GeocodeResponse",
    "LatLng",
    "OpeningHours",
    "PlaceDetailsResponse",
    "PlaceSearchResponse",
    "PlaceSummary",
    "ReverseGeocodeResponse",
    "Review",
    "StatusResponse",
    "TextValue",
    "format_response",
]
