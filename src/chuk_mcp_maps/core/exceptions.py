"""Exceptions raised by the Google Maps client and dispatch layer."""


class MapsError(Exception):
    """Base class for chuk-mcp-maps errors."""


class MissingCredentialError(MapsError):
    """The Google Maps API key is not configured."""


class TransportError(MapsError):
    """The upstream call failed before a JSON envelope could be read."""


class MalformedEnvelopeError(MapsError):
    """Status was OK but the fields a projection depends on are absent."""
