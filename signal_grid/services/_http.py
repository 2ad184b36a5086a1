"""Single round trip to the backend plus response classification.

Each call is one request with a fixed timeout and no retry. Outcomes:

* 200 / 201 -> decoded JSON body
* 404       -> :class:`NotFoundError` (or the subclass the caller asks for)
* other     -> :class:`RemoteError` with the backend's own message
* timeout / transport failure -> :class:`NetworkError`
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Type, TypeVar

import requests

from ..clients.backend_client import DEFAULT_HEADERS, get_backend_session
from ..config import REQUEST_TIMEOUT_SECONDS, STATUS_CREATED, STATUS_NOT_FOUND, STATUS_OK
from ..errors import MalformedPayloadError, NetworkError, NotFoundError, RemoteError, ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def parse_error_message(response: requests.Response) -> str:
    """Pull the backend's message out of an error response.

    Looks at ``error`` then ``message``; a body that is not JSON yields
    ``"Status <code>: <reason>"``.
    """
    try:
        data = response.json()
    except ValueError:
        return f"Status {response.status_code}: {response.reason}"
    if isinstance(data, dict):
        message = data.get("error") or data.get("message")
        if message:
            return str(message)
    return "Unknown error"


def send(
    method: str,
    url: str,
    *,
    action: str,
    json: Any = None,
    not_found: Optional[Type[NotFoundError]] = None,
    not_found_message: str = "Resource not found",
    timeout: float = REQUEST_TIMEOUT_SECONDS,
) -> Any:
    """Issue one request and return the decoded JSON body of a success response."""
    logger.info("%s: %s %s", action, method, url)
    try:
        response = get_backend_session().request(
            method, url, headers=DEFAULT_HEADERS, json=json, timeout=timeout
        )
    except requests.Timeout as exc:
        logger.error("%s timed out after %ss: %s", action, timeout, exc)
        raise NetworkError(
            f"{action} timed out after {timeout:g} seconds. Please try again."
        ) from exc
    except requests.RequestException as exc:
        logger.error("%s could not reach the backend: %s", action, exc)
        raise NetworkError(
            f"{action} failed: could not reach the server. Please check your connection and try again."
        ) from exc

    status = response.status_code
    if status in (STATUS_OK, STATUS_CREATED):
        try:
            return response.json()
        except ValueError as exc:
            logger.error("%s returned a body that is not JSON", action)
            raise RemoteError(f"Malformed response from server: {exc}", status) from exc

    if status == STATUS_NOT_FOUND:
        logger.warning("%s: not found (%s)", action, url)
        raise (not_found or NotFoundError)(not_found_message)

    message = parse_error_message(response)
    logger.error("Error from backend during %s: %s - %s", action, status, message)
    raise RemoteError(message, status)


def decode(body: Any, decoder: Callable[[Any], T], action: str) -> T:
    """Run a wire decoder, reporting a bad success body as :class:`RemoteError`."""
    try:
        return decoder(body)
    except (MalformedPayloadError, ValidationError) as exc:
        logger.error("%s returned an unusable payload: %s", action, exc)
        raise RemoteError(f"Malformed response from server: {exc.message}") from exc


__all__ = ["send", "decode", "parse_error_message"]
