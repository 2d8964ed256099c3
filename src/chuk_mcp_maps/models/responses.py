"""
Response models for chuk-mcp-maps tools.

All tool responses are Pydantic models for type safety and a stable schema.
Optional fields the upstream omits are left out of the JSON output.
"""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from ..constants import SuccessMessages


def format_response(model: BaseModel, output_mode: str = "json") -> str:
    """Format a response model as JSON or human-readable text.

    Args:
        model: Pydantic response model instance
        output_mode: "json" (default) or "text"

    Returns:
        Formatted string
    """
    if output_mode == "text" and hasattr(model, "to_text"):
        return str(model.to_text())
    return str(model.model_dump_json(exclude_none=True))


class ErrorResponse(BaseModel):
    """Error response model for tool failures."""

    model_config = ConfigDict(extra="forbid")

    error: str = Field(..., description="Error message describing what went wrong")

    def to_text(self) -> str:
        return f"Error: {self.error}"


# --- Shared value types ---


class LatLng(BaseModel):
    """A coordinate pair. Accepts lat/lng or latitude/longitude on input."""

    model_config = ConfigDict(extra="ignore")

    lat: int | float = Field(
        ..., description="Latitude", validation_alias=AliasChoices("lat", "latitude")
    )
    lng: int | float = Field(
        ..., description="Longitude", validation_alias=AliasChoices("lng", "longitude")
    )

    def to_param(self) -> str:
        return f"{self.lat},{self.lng}"

    def to_text(self) -> str:
        return f"{self.lat:.6f}, {self.lng:.6f}"


class Coordinate(BaseModel):
    """A point passed to a tool. Accepts latitude/longitude or lat/lng."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    latitude: float = Field(
        ..., description="Latitude", validation_alias=AliasChoices("latitude", "lat")
    )
    longitude: float = Field(
        ..., description="Longitude", validation_alias=AliasChoices("longitude", "lng")
    )

    def to_latlng(self) -> LatLng:
        return LatLng(lat=self.latitude, lng=self.longitude)


class TextValue(BaseModel):
    """A distance or duration as reported upstream: display text plus raw value."""

    model_config = ConfigDict(extra="ignore")

    text: str = Field(..., description="Human-readable value (e.g. '5.2 km')")
    value: int | float = Field(..., description="Raw value in metres or seconds")


# --- Geocoding ---


class GeocodeResponse(BaseModel):
    """Forward geocoding projection (first upstream result only)."""

    model_config = ConfigDict(extra="forbid")

    location: LatLng = Field(..., description="Coordinates of the address")
    formatted_address: str = Field(..., description="Normalised address")
    place_id: str = Field(..., description="Google place ID")

    def to_text(self) -> str:
        return "\n".join(
            [
                self.formatted_address,
                f"  Coordinates: {self.location.to_text()}",
                f"  Place ID: {self.place_id}",
            ]
        )


class AddressComponent(BaseModel):
    model_config = ConfigDict(extra="ignore")

    long_name: str = Field(..., description="Full component name")
    short_name: str = Field(..., description="Abbreviated component name")
    types: list[str] = Field(default_factory=list, description="Component types")


class ReverseGeocodeResponse(BaseModel):
    """Reverse geocoding projection (first upstream result only)."""

    model_config = ConfigDict(extra="forbid")

    formatted_address: str = Field(..., description="Normalised address")
    place_id: str = Field(..., description="Google place ID")
    address_components: list[AddressComponent] = Field(
        ..., description="Structured address components"
    )

    def to_text(self) -> str:
        lines = [self.formatted_address, f"Place ID: {self.place_id}"]
        if self.address_components:
            lines.append("Address:")
            for component in self.address_components:
                kind = component.types[0] if component.types else "component"
                lines.append(f"  {kind}: {component.long_name}")
        return "\n".join(lines)


# --- Places ---


class PlaceSummary(BaseModel):
    """A single text-search hit."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., description="Place name")
    formatted_address: str = Field(..., description="Normalised address")
    location: LatLng = Field(..., description="Coordinates")
    place_id: str = Field(..., description="Google place ID")
    rating: int | float | None = Field(None, description="Average user rating")
    types: list[str] = Field(default_factory=list, description="Place types")

    def to_text(self) -> str:
        rating = f" [{self.rating}]" if self.rating is not None else ""
        return f"{self.name}{rating} - {self.formatted_address}"


class PlaceSearchResponse(BaseModel):
    """Text search projection."""

    model_config = ConfigDict(extra="forbid")

    places: list[PlaceSummary] = Field(..., description="Matching places")

    def to_text(self) -> str:
        lines = [SuccessMessages.PLACES_FOUND.format(len(self.places)), ""]
        for i, place in enumerate(self.places, 1):
            lines.append(f"{i}. {place.to_text()}")
        return "\n".join(lines)


class Review(BaseModel):
    model_config = ConfigDict(extra="ignore")

    author_name: str = Field(..., description="Reviewer name")
    rating: int | float = Field(..., description="Review rating")
    text: str = Field("", description="Review text")
    time: int = Field(..., description="Review time as a Unix timestamp")


class OpeningHours(BaseModel):
    model_config = ConfigDict(extra="ignore")

    open_now: bool | None = Field(None, description="Whether the place is open now")
    weekday_text: list[str] = Field(default_factory=list, description="Hours per weekday")
    periods: list[dict[str, Any]] | None = Field(
        None, description="Opening periods as reported upstream (open/close day and time)"
    )


class PlaceDetailsResponse(BaseModel):
    """Place details projection."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., description="Place name")
    formatted_address: str = Field(..., description="Normalised address")
    location: LatLng = Field(..., description="Coordinates")
    formatted_phone_number: str | None = Field(None, description="Local phone number")
    website: str | None = Field(None, description="Website URL")
    rating: int | float | None = Field(None, description="Average user rating")
    reviews: list[Review] | None = Field(None, description="User reviews")
    opening_hours: OpeningHours | None = Field(None, description="Opening hours")

    def to_text(self) -> str:
        lines = [self.name, f"Address: {self.formatted_address}"]
        if self.formatted_phone_number:
            lines.append(f"Phone: {self.formatted_phone_number}")
        if self.website:
            lines.append(f"Website: {self.website}")
        if self.rating is not None:
            lines.append(f"Rating: {self.rating}")
        if self.opening_hours and self.opening_hours.weekday_text:
            lines.append("Hours:")
            lines.extend(f"  {day}" for day in self.opening_hours.weekday_text)
        return "\n".join(lines)


# --- Routing ---


class DistanceMatrixElement(BaseModel):
    """One origin/destination pair."""

    model_config = ConfigDict(extra="forbid")

    status: str = Field(..., description="Element status (OK, NOT_FOUND, ZERO_RESULTS)")
    duration: TextValue | None = Field(None, description="Travel time")
    distance: TextValue | None = Field(None, description="Travel distance")


class DistanceMatrixRow(BaseModel):
    """All destinations for one origin."""

    model_config = ConfigDict(extra="forbid")

    elements: list[DistanceMatrixElement] = Field(..., description="One element per destination")


class DistanceMatrixResponse(BaseModel):
    """Distance matrix projection."""

    model_config = ConfigDict(extra="forbid")

    origin_addresses: list[str] = Field(..., description="Resolved origin addresses")
    destination_addresses: list[str] = Field(..., description="Resolved destination addresses")
    results: list[DistanceMatrixRow] = Field(..., description="One row per origin")

    def to_text(self) -> str:
        lines = []
        for origin, row in zip(self.origin_addresses, self.results):
            lines.append(origin)
            for destination, element in zip(self.destination_addresses, row.elements):
                if element.distance and element.duration:
                    detail = f"{element.distance.text}, {element.duration.text}"
                else:
                    detail = element.status
                lines.append(f"  -> {destination}: {detail}")
        return "\n".join(lines)


class DirectionsStep(BaseModel):
    model_config = ConfigDict(extra="forbid")

    instructions: str = Field(..., description="Step instructions (HTML)")
    distance: TextValue = Field(..., description="Step distance")
    duration: TextValue = Field(..., description="Step duration")
    travel_mode: str = Field(..., description="Travel mode for this step")


class DirectionsRoute(BaseModel):
    """One route; distance and duration are those of its first leg."""

    model_config = ConfigDict(extra="forbid")

    summary: str = Field("", description="Route summary (e.g. main roads)")
    distance: TextValue = Field(..., description="First leg distance")
    duration: TextValue = Field(..., description="First leg duration")
    steps: list[DirectionsStep] = Field(..., description="First leg steps")


class DirectionsResponse(BaseModel):
    """Directions projection."""

    model_config = ConfigDict(extra="forbid")

    routes: list[DirectionsRoute] = Field(..., description="Candidate routes")

    def to_text(self) -> str:
        if not self.routes:
            return "No routes found"
        lines = []
        for i, route in enumerate(self.routes, 1):
            lines.append(
                f"{i}. {route.summary or 'Route'} ({route.distance.text}, {route.duration.text})"
            )
            for step in route.steps:
                lines.append(f"   - {step.instructions} [{step.distance.text}]")
        return "\n".join(lines)


# --- Elevation ---


class ElevationResult(BaseModel):
    model_config = ConfigDict(extra="forbid")

    elevation: int | float = Field(..., description="Elevation in metres above sea level")
    location: LatLng = Field(..., description="Sampled coordinates")
    resolution: int | float | None = Field(None, description="Sample spacing in metres")


class ElevationResponse(BaseModel):
    """Elevation projection."""

    model_config = ConfigDict(extra="forbid")

    results: list[ElevationResult] = Field(..., description="One result per location")

    def to_text(self) -> str:
        return "\n".join(
            f"{r.location.to_text()}: {r.elevation:.1f} m" for r in self.results
        )


# --- Discovery ---


class StatusResponse(BaseModel):
    """Response model for server status queries."""

    model_config = ConfigDict(extra="forbid")

    server: str = Field(default="chuk-mcp-maps", description="Server name")
    version: str = Field(default="0.1.0", description="Server version")
    api_url: str = Field(..., description="Google Maps API base URL")
    tool_count: int = Field(..., description="Number of available tools", ge=0)
    message: str = Field(..., description="Operation result message")

    def to_text(self) -> str:
        lines = [
            f"{self.server} v{self.version}",
            f"Google Maps: {self.api_url}",
            f"Tools: {self.tool_count}",
        ]
        return "\n".join(lines)


class CapabilitiesResponse(BaseModel):
    """Response model for server capabilities listing."""

    model_config = ConfigDict(extra="forbid")

    server: str = Field(..., description="Server name")
    version: str = Field(..., description="Server version")
    geocoding_tools: list[str] = Field(..., description="Available geocoding tools")
    places_tools: list[str] = Field(..., description="Available places tools")
    routing_tools: list[str] = Field(..., description="Available routing tools")
    elevation_tools: list[str] = Field(..., description="Available elevation tools")
    discovery_tools: list[str] = Field(..., description="Available discovery tools")
    travel_modes: list[str] = Field(..., description="Accepted travel modes")
    tool_count: int = Field(..., description="Total number of tools", ge=0)
    api_url: str = Field(..., description="Google Maps API base URL")
    llm_guidance: str = Field(..., description="LLM-friendly usage guidance")
    message: str = Field(..., description="Operation result message")

    def to_text(self) -> str:
        lines = [
            f"{self.server} v{self.version}",
            f"Tools: {self.tool_count}",
            f"Geocoding: {', '.join(self.geocoding_tools)}",
            f"Places: {', '.join(self.places_tools)}",
            f"Routing: {', '.join(self.routing_tools)}",
            f"Elevation: {', '.join(self.elevation_tools)}",
            f"Discovery: {', '.join(self.discovery_tools)}",
            f"Travel modes: {', '.join(self.travel_modes)}",
            f"Google Maps: {self.api_url}",
            f"Guidance: {self.llm_guidance}",
        ]
        return "\n".join(lines)
