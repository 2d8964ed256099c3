"""Core client, operation descriptors, and dispatch for chuk-mcp-maps."""

from .exceptions import MalformedEnvelopeError, MapsError, MissingCredentialError, TransportError
from .google_maps import GoogleMapsClient, load_api_key
from .maps import GoogleMaps
from .operations import OPERATIONS, Operation

__all__ = [
    "GoogleMaps",
    "GoogleMapsClient",
    "MalformedEnvelopeError",
    "MapsError",
    "MissingCredentialError",
    "OPERATIONS",
    "Operation",
    "TransportError",
    "load_api_key",
]
