"""
Operation descriptors for the seven Google Maps lookups.

Each descriptor names its endpoint, its parameters, and a projector that
reduces a successful upstream envelope to a response model. Projectors may
assume status is OK; missing fields raise and are reported by the dispatcher.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from ..constants import Endpoint, ErrorMessages
from ..models.responses import (
    AddressComponent,
    DirectionsResponse,
    DirectionsRoute,
    DirectionsStep,
    DistanceMatrixElement,
    DistanceMatrixResponse,
    DistanceMatrixRow,
    ElevationResponse,
    ElevationResult,
    GeocodeResponse,
    PlaceDetailsResponse,
    PlaceSearchResponse,
    PlaceSummary,
    ReverseGeocodeResponse,
)
from .exceptions import MalformedEnvelopeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Operation:
    """Static definition of one tool's endpoint, parameters, and projection."""

    name: str
    endpoint: str
    required: tuple[str, ...]
    optional: tuple[str, ...]
    project: Callable[[dict], BaseModel]
    failure_label: str

    def build_params(self, params: Mapping[str, Any]) -> dict[str, Any]:
        """Select this operation's parameters, dropping absent optionals.

        None, empty strings and empty lists count as absent.

        Raises:
            ValueError: If a required parameter is missing
        """
        selected: dict[str, Any] = {}
        for name in self.required:
            if _is_blank(params.get(name)):
                raise ValueError(ErrorMessages.MISSING_PARAM.format(name, self.name))
            selected[name] = params[name]
        for name in self.optional:
            if not _is_blank(params.get(name)):
                selected[name] = params[name]
        return selected


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple)):
        return not value or all(_is_blank(item) for item in value)
    return False


def _first(items: list, what: str = "results") -> dict:
    """Return items[0]; the remaining candidates are deliberately ignored."""
    if not items:
        raise MalformedEnvelopeError(ErrorMessages.NO_RESULTS)
    if len(items) > 1:
        logger.debug("Using first of %d %s", len(items), what)
    return items[0]


def project_geocode(envelope: dict) -> GeocodeResponse:
    result = _first(envelope["results"])
    return GeocodeResponse(
        location=result["geometry"]["location"],
        formatted_address=result["formatted_address"],
        place_id=result["place_id"],
    )


def project_reverse_geocode(envelope: dict) -> ReverseGeocodeResponse:
    result = _first(envelope["results"])
    return ReverseGeocodeResponse(
        formatted_address=result["formatted_address"],
        place_id=result["place_id"],
        address_components=[
            AddressComponent.model_validate(c) for c in result.get("address_components", [])
        ],
    )


def project_search_places(envelope: dict) -> PlaceSearchResponse:
    return PlaceSearchResponse(
        places=[
            PlaceSummary(
                name=place["name"],
                formatted_address=place["formatted_address"],
                location=place["geometry"]["location"],
                place_id=place["place_id"],
                rating=place.get("rating"),
                types=place.get("types", []),
            )
            for place in envelope["results"]
        ]
    )


def project_place_details(envelope: dict) -> PlaceDetailsResponse:
    result = envelope["result"]
    return PlaceDetailsResponse(
        name=result["name"],
        formatted_address=result["formatted_address"],
        location=result["geometry"]["location"],
        formatted_phone_number=result.get("formatted_phone_number"),
        website=result.get("website"),
        rating=result.get("rating"),
        reviews=result.get("reviews"),
        opening_hours=result.get("opening_hours"),
    )


def project_distance_matrix(envelope: dict) -> DistanceMatrixResponse:
    return DistanceMatrixResponse(
        origin_addresses=envelope["origin_addresses"],
        destination_addresses=envelope["destination_addresses"],
        results=[
            DistanceMatrixRow(
                elements=[
                    DistanceMatrixElement(
                        status=element["status"],
                        duration=element.get("duration"),
                        distance=element.get("distance"),
                    )
                    for element in row["elements"]
                ]
            )
            for row in envelope["rows"]
        ],
    )


def project_elevation(envelope: dict) -> ElevationResponse:
    return ElevationResponse(
        results=[
            ElevationResult(
                elevation=result["elevation"],
                location=result["location"],
                resolution=result.get("resolution"),
            )
            for result in envelope["results"]
        ]
    )


def _project_route(route: dict) -> DirectionsRoute:
    # Only the first leg is reported; multi-waypoint routes lose later legs.
    legs = route.get("legs") or []
    if not legs:
        raise MalformedEnvelopeError(ErrorMessages.NO_LEGS.format(route.get("summary", "")))
    leg = legs[0]
    return DirectionsRoute(
        summary=route.get("summary", ""),
        distance=leg["distance"],
        duration=leg["duration"],
        steps=[
            DirectionsStep(
                instructions=step["html_instructions"],
                distance=step["distance"],
                duration=step["duration"],
                travel_mode=step["travel_mode"],
            )
            for step in leg["steps"]
        ],
    )


def project_directions(envelope: dict) -> DirectionsResponse:
    return DirectionsResponse(routes=[_project_route(r) for r in envelope.get("routes", [])])


GEOCODE = Operation(
    name="geocode",
    endpoint=Endpoint.GEOCODE,
    required=("address",),
    optional=(),
    project=project_geocode,
    failure_label="Geocoding failed",
)

REVERSE_GEOCODE = Operation(
    name="reverse_geocode",
    endpoint=Endpoint.GEOCODE,
    required=("latlng",),
    optional=(),
    project=project_reverse_geocode,
    failure_label="Reverse geocoding failed",
)

SEARCH_PLACES = Operation(
    name="search_places",
    endpoint=Endpoint.PLACE_TEXT_SEARCH,
    required=("query",),
    optional=("location", "radius"),
    project=project_search_places,
    failure_label="Place search failed",
)

PLACE_DETAILS = Operation(
    name="place_details",
    endpoint=Endpoint.PLACE_DETAILS,
    required=("place_id",),
    optional=(),
    project=project_place_details,
    failure_label="Place details request failed",
)

DISTANCE_MATRIX = Operation(
    name="distance_matrix",
    endpoint=Endpoint.DISTANCE_MATRIX,
    required=("origins", "destinations"),
    optional=("mode",),
    project=project_distance_matrix,
    failure_label="Distance matrix request failed",
)

ELEVATION = Operation(
    name="elevation",
    endpoint=Endpoint.ELEVATION,
    required=("locations",),
    optional=(),
    project=project_elevation,
    failure_label="Elevation request failed",
)

DIRECTIONS = Operation(
    name="directions",
    endpoint=Endpoint.DIRECTIONS,
    required=("origin", "destination"),
    optional=("mode",),
    project=project_directions,
    failure_label="Directions request failed",
)

OPERATIONS: dict[str, Operation] = {
    op.name: op
    for op in (
        GEOCODE,
        REVERSE_GEOCODE,
        SEARCH_PLACES,
        PLACE_DETAILS,
        DISTANCE_MATRIX,
        ELEVATION,
        DIRECTIONS,
    )
}
