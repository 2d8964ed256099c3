"""
Constants for chuk-mcp-maps server.

All magic strings, API metadata, and configuration values live here.
"""

from typing import Literal


class ServerConfig:
    NAME = "chuk-mcp-maps"
    VERSION = "0.1.0"
    DESCRIPTION = "Geocoding, Places, Routing & Elevation MCP Server via Google Maps Platform"


class GoogleMapsConfig:
    BASE_URL = "https://maps.googleapis.com/maps/api"
    USER_AGENT = "chuk-mcp-maps/0.1.0"
    TIMEOUT_SECONDS = 30.0
    SUCCESS_STATUS = "OK"
    UNKNOWN_STATUS = "UNKNOWN_ERROR"
    LIST_DELIMITER = "|"
    KEY_PARAM = "key"


class EnvVar:
    MCP_STDIO = "MCP_STDIO"
    GOOGLE_MAPS_API_KEY = "GOOGLE_MAPS_API_KEY"
    GOOGLE_MAPS_BASE_URL = "GOOGLE_MAPS_BASE_URL"


class Endpoint:
    """Upstream paths, relative to GoogleMapsConfig.BASE_URL."""

    GEOCODE = "geocode/json"
    PLACE_TEXT_SEARCH = "place/textsearch/json"
    PLACE_DETAILS = "place/details/json"
    DISTANCE_MATRIX = "distancematrix/json"
    ELEVATION = "elevation/json"
    DIRECTIONS = "directions/json"


class AnalyticsConfig:
    DEFAULT_DB_DIR = ".chuk-mcp-maps"
    DEFAULT_DB_NAME = "analytics.db"
    TABLE = "tool_calls"


TravelMode = Literal["driving", "walking", "bicycling", "transit"]
TRAVEL_MODES = ["driving", "walking", "bicycling", "transit"]

# Tool lists
GEOCODING_TOOLS = ["maps_geocode", "maps_reverse_geocode"]
PLACES_TOOLS = ["maps_search_places", "maps_place_details"]
ROUTING_TOOLS = ["maps_distance_matrix", "maps_directions"]
ELEVATION_TOOLS = ["maps_elevation"]
DISCOVERY_TOOLS = ["maps_status", "maps_capabilities"]
ALL_TOOLS = GEOCODING_TOOLS + PLACES_TOOLS + ROUTING_TOOLS + ELEVATION_TOOLS + DISCOVERY_TOOLS


class ErrorMessages:
    MISSING_API_KEY = "GOOGLE_MAPS_API_KEY environment variable is not set"
    MISSING_PARAM = "Missing required parameter '{}' for {}"
    NETWORK_ERROR = "Network error contacting Google Maps: {}"
    INVALID_JSON = "Google Maps returned a non-JSON response (HTTP {})"
    UNEXPECTED_BODY = "Google Maps returned an unexpected response body (HTTP {})"
    NO_RESULTS = "response contained no results"
    NO_LEGS = "route '{}' has no legs"
    MALFORMED = "malformed response ({})"
    FAILURE = "{}: {}"
    INCOMPLETE_LOCATION = "Each location needs both latitude and longitude"
    INVALID_MODE = "Invalid travel mode {!r}; expected one of: {}"


class SuccessMessages:
    STATUS = "Maps MCP Server v{}"
    CAPABILITIES = "{} v{} capabilities"
    PLACES_FOUND = "Found {} place(s)"
