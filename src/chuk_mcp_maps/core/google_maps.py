"""
Low-level async HTTP client for the Google Maps Platform web services.

Handles query serialisation and credential injection. Does not interpret
the upstream status field, cache, or retry.
"""

import logging
import os
from collections.abc import Mapping
from typing import Any

import httpx

from ..constants import EnvVar, ErrorMessages, GoogleMapsConfig
from ..models.responses import LatLng
from .exceptions import MissingCredentialError, TransportError

logger = logging.getLogger(__name__)


def load_api_key(environ: Mapping[str, str] | None = None) -> str:
    """Read the Google Maps API key from the environment.

    Raises:
        MissingCredentialError: If the variable is unset or empty
    """
    environ = os.environ if environ is None else environ
    api_key = environ.get(EnvVar.GOOGLE_MAPS_API_KEY, "").strip()
    if not api_key:
        raise MissingCredentialError(ErrorMessages.MISSING_API_KEY)
    return api_key


def format_latlng(value: LatLng | tuple[float, float]) -> str:
    """Serialise a coordinate pair as "<lat>,<lng>"."""
    if isinstance(value, LatLng):
        return value.to_param()
    lat, lng = value
    return f"{lat},{lng}"


def serialize_value(value: Any) -> str:
    """Serialise a single query value to its wire form."""
    if isinstance(value, LatLng):
        return format_latlng(value)
    if isinstance(value, (list, tuple)):
        return join_values(value)
    return str(value)


def join_values(values: list | tuple) -> str:
    """Join list-valued parameters with the upstream delimiter.

    Coordinate pairs inside the list are serialised as "<lat>,<lng>".
    """
    parts = []
    for value in values:
        if isinstance(value, LatLng) or (
            isinstance(value, tuple)
            and len(value) == 2
            and all(isinstance(v, (int, float)) for v in value)
        ):
            parts.append(format_latlng(value))
        else:
            parts.append(str(value))
    return GoogleMapsConfig.LIST_DELIMITER.join(parts)


def build_query(params: Mapping[str, Any]) -> dict[str, str]:
    """Serialise query parameters, omitting any that are None."""
    return {name: serialize_value(value) for name, value in params.items() if value is not None}


class GoogleMapsClient:
    """Async HTTP client for the Google Maps web service endpoints.

    Every request is a GET against ``{base_url}/{endpoint}`` with the API
    key attached as the ``key`` query parameter.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = GoogleMapsConfig.BASE_URL,
        timeout: float = GoogleMapsConfig.TIMEOUT_SECONDS,
    ):
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        return self._base_url

    async def _get_client(self) -> httpx.AsyncClient:
        """Lazily create httpx client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                headers={"User-Agent": GoogleMapsConfig.USER_AGENT},
                timeout=self._timeout,
            )
        return self._client

    async def get(self, endpoint: str, params: Mapping[str, Any]) -> dict:
        """Issue one GET request and return the parsed JSON envelope.

        Args:
            endpoint: Path relative to the base URL (e.g. "geocode/json")
            params: Query parameters; None values are dropped, lists are
                pipe-joined, coordinates become "lat,lng"

        Returns:
            The decoded JSON object, status not inspected

        Raises:
            TransportError: On network failure or a body that is not a JSON object
        """
        query = build_query(params)
        query[GoogleMapsConfig.KEY_PARAM] = self._api_key

        client = await self._get_client()
        url = f"{self._base_url}/{endpoint}"
        logger.debug("GET %s (%s)", endpoint, ", ".join(sorted(params)))

        try:
            response = await client.get(url, params=query)
        except httpx.HTTPError as e:
            logger.error("Request to %s failed: %s", endpoint, e)
            raise TransportError(ErrorMessages.NETWORK_ERROR.format(e)) from e

        try:
            data = response.json()
        except ValueError as e:
            raise TransportError(ErrorMessages.INVALID_JSON.format(response.status_code)) from e

        if not isinstance(data, dict):
            raise TransportError(ErrorMessages.UNEXPECTED_BODY.format(response.status_code))
        return data

    async def close(self) -> None:
        """Close the httpx client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
