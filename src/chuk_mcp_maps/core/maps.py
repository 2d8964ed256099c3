"""
Maps manager: the single dispatch routine shared by every operation.

Wraps GoogleMapsClient and turns each call into either a projected response
model or an ErrorResponse. Upstream failures are data here, not exceptions.
"""

import logging
from typing import Any

from pydantic import BaseModel, ValidationError

from ..constants import ErrorMessages, GoogleMapsConfig
from ..models.responses import ErrorResponse
from .exceptions import MalformedEnvelopeError, TransportError
from .google_maps import GoogleMapsClient
from .operations import Operation

logger = logging.getLogger(__name__)


class GoogleMaps:
    """Central manager for Google Maps operations.

    Every tool goes through ``execute``: build the query, issue one request,
    branch on the envelope status, then project or report the failure.
    """

    def __init__(self, client: GoogleMapsClient):
        self._client = client

    @property
    def base_url(self) -> str:
        return self._client.base_url

    async def execute(self, operation: Operation, **params: Any) -> BaseModel:
        """Run one operation and return its projection or an ErrorResponse.

        Raises:
            ValueError: If a required parameter is missing
        """
        query = operation.build_params(params)

        try:
            envelope = await self._client.get(operation.endpoint, query)
        except TransportError as e:
            return self._failure(operation, str(e))

        status = envelope.get("status") or GoogleMapsConfig.UNKNOWN_STATUS
        if status != GoogleMapsConfig.SUCCESS_STATUS:
            detail = envelope.get("error_message") or status
            return self._failure(operation, detail, level=logging.WARNING)

        try:
            return operation.project(envelope)
        except MalformedEnvelopeError as e:
            return self._failure(operation, str(e))
        except (KeyError, IndexError, TypeError, ValidationError) as e:
            return self._failure(operation, ErrorMessages.MALFORMED.format(_describe(e)))

    def _failure(
        self, operation: Operation, detail: str, level: int = logging.ERROR
    ) -> ErrorResponse:
        message = ErrorMessages.FAILURE.format(operation.failure_label, detail)
        logger.log(level, "%s failed: %s", operation.name, detail)
        return ErrorResponse(error=message)

    async def close(self) -> None:
        await self._client.close()


def _describe(error: Exception) -> str:
    if isinstance(error, KeyError):
        return f"missing field {error}"
    if isinstance(error, ValidationError):
        return f"{error.error_count()} invalid field(s)"
    return str(error) or type(error).__name__
