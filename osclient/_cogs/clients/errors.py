"""
The errors of the API, as opposed to the errors of the network.

The API responds with a ``kind: Status`` object for all the failed requests.
The status object is kept in the errors as is, and its most used fields are
exposed as properties. Bodies of any other kinds are not kept in the errors,
since they can contain data that must not leak into the logs (e.g. secrets).

The few statuses that the callers usually react to have their own classes:
e.g., a missing object on getting, or a conflict on updating. Everything else
is the base class, distinguishable only by its status & code.

The networking, TLS, and timeout errors are not wrapped: they are raised
from ``aiohttp`` as they are. The HTTP errors of ``aiohttp`` are chained
to the API errors as their causes.
"""
import collections.abc
import json
from typing import Collection, Dict, Optional, Type

import aiohttp
from typing_extensions import Literal, TypedDict


class RawStatusCause(TypedDict):
    field: str
    reason: str
    message: str


class RawStatusDetails(TypedDict):
    name: str
    kind: str
    retryAfterSeconds: int
    causes: Collection[RawStatusCause]


class RawStatus(TypedDict):
    apiVersion: str
    kind: Literal["Status"]
    code: int
    status: Literal["Success", "Failure"]
    reason: str
    message: str
    details: RawStatusDetails


class APIError(Exception):
    """
    A failed API request, with the server's explanation if it was provided.
    """

    def __init__(self, payload: Optional[RawStatus], *, status: int) -> None:
        super().__init__(payload.get('message') if payload else None, payload)
        self._payload = payload
        self._status = status

    @property
    def status(self) -> int:
        """ The HTTP status of the response. """
        return self._status

    @property
    def payload(self) -> Optional[RawStatus]:
        return self._payload

    @property
    def code(self) -> Optional[int]:
        """ The status code as reported in the body (usually same as the HTTP status). """
        return self._payload.get('code') if self._payload else None

    @property
    def message(self) -> Optional[str]:
        return self._payload.get('message') if self._payload else None

    @property
    def details(self) -> Optional[RawStatusDetails]:
        return self._payload.get('details') if self._payload else None


class APIUnauthorizedError(APIError):
    pass


class APIForbiddenError(APIError):
    pass


class APINotFoundError(APIError):
    pass


class APIConflictError(APIError):
    pass


class WatchingError(Exception):
    """
    An ``ERROR`` event was received in a watch-stream.
    """


ERRORS_BY_STATUS: Dict[int, Type[APIError]] = {
    401: APIUnauthorizedError,
    403: APIForbiddenError,
    404: APINotFoundError,
    409: APIConflictError,
}


async def check_response(response: aiohttp.ClientResponse) -> None:
    """
    Raise an API error for the failed responses, do nothing for the good ones.
    """
    if response.status < 400:
        return

    # The body must be read now: raise_for_status() releases the response.
    payload: Optional[RawStatus]
    try:
        payload = await response.json(content_type=None)
    except (json.JSONDecodeError, UnicodeDecodeError, aiohttp.ClientConnectionError):
        payload = None
    if not isinstance(payload, collections.abc.Mapping) or payload.get('kind') != 'Status':
        payload = None

    cls = ERRORS_BY_STATUS.get(response.status, APIError)
    try:
        response.raise_for_status()
    except aiohttp.ClientResponseError as e:
        raise cls(payload, status=response.status) from e
