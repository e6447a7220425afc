"""Synchronous HTTP request makers."""

from __future__ import annotations

import logging
from abc import ABC
from abc import abstractmethod
from enum import Enum
from typing import Any
from typing import Mapping
from typing import Optional
from typing import Type
from typing import Union
from urllib.parse import quote

import httpx

from outseta.errors import OutsetaAPIError
from outseta.errors import OutsetaBadRequestError
from outseta.errors import OutsetaFailedError
from outseta.errors import OutsetaInvalidRequestMakerError
from outseta.errors import OutsetaInvalidURLError
from outseta.errors import OutsetaUnknownError

logger = logging.getLogger(__name__)


def build_url(url: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """Append query parameters to a URL.

    Values are percent-encoded except for ``+``, which the API reads as the
    separator in ``orderBy=<field>+<direction>``.

    Args:
        url: Absolute URL without a query string
        params: Query parameters

    Returns:
        URL with the query string appended
    """
    if not params:
        return url
    query = "&".join(
        f"{quote(str(key), safe='')}={quote(str(value), safe='+')}"
        for key, value in params.items()
    )
    return f"{url}?{query}"


class RequestMaker(ABC):
    """Transport performing one HTTP round trip per call.

    Every method returns the response body as text for a 2xx status and
    raises an :class:`~outseta.errors.OutsetaAPIError` subclass otherwise.
    """

    @abstractmethod
    def get(
        self,
        url: str,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> str:
        """Send a GET request."""

    @abstractmethod
    def post(
        self,
        url: str,
        params: Optional[Mapping[str, Any]] = None,
        payload: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> str:
        """Send a POST request."""

    @abstractmethod
    def put(
        self,
        url: str,
        params: Optional[Mapping[str, Any]] = None,
        payload: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> str:
        """Send a PUT request."""

    @abstractmethod
    def patch(
        self,
        url: str,
        params: Optional[Mapping[str, Any]] = None,
        payload: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> str:
        """Send a PATCH request."""

    @abstractmethod
    def delete(
        self,
        url: str,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> str:
        """Send a DELETE request."""


class HttpxRequestMaker(RequestMaker):
    """Request maker built on :class:`httpx.Client`.

    Each call opens its own client without a timeout. Redirects are not
    followed, so a 3xx response raises :class:`~outseta.errors.OutsetaUnknownError`.
    """

    def request(
        self,
        method: str,
        url: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        payload: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> str:
        """Make an HTTP request.

        Args:
            method: HTTP method
            url: Absolute request URL
            params: Query parameters
            payload: Request body
            headers: Request headers

        Returns:
            Response body

        Raises:
            OutsetaInvalidURLError: The URL is malformed or cannot be reached
            OutsetaBadRequestError: 4xx response
            OutsetaFailedError: 5xx response
            OutsetaUnknownError: Any other non-2xx response or transport failure
        """
        context = {
            "url": url,
            "payload": payload,
            "params": params,
            "headers": headers,
        }
        full_url = build_url(url, params)

        try:
            parsed = httpx.URL(full_url)
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            raise OutsetaInvalidURLError(f"Invalid URL: {url}", cause=e, **context) from e
        if parsed.scheme not in ("http", "https") or not parsed.host:
            raise OutsetaInvalidURLError(f"Invalid URL: {url}", **context)

        logger.debug(f"{method} {url}")

        try:
            with httpx.Client(timeout=None, follow_redirects=False) as client:
                response = client.request(
                    method,
                    parsed,
                    content=payload,
                    headers=dict(headers or {}),
                )
        except (httpx.UnsupportedProtocol, httpx.ConnectError) as e:
            raise OutsetaInvalidURLError(f"Unable to reach URL: {url}", cause=e, **context) from e
        except httpx.HTTPError as e:
            raise OutsetaUnknownError(f"Request to {url} failed: {e}", cause=e, **context) from e

        if 200 <= response.status_code < 300:
            return response.text

        raise self._error_for_response(response, context)

    def _error_for_response(self, response: httpx.Response, context: Mapping[str, Any]) -> OutsetaAPIError:
        """Build the error matching a non-2xx response.

        Args:
            response: HTTP response
            context: Request URL, payload, params and headers

        Returns:
            Error carrying the response and request details
        """
        status_code = response.status_code
        error_class: Type[OutsetaAPIError]
        if 400 <= status_code < 500:
            error_class = OutsetaBadRequestError
        elif 500 <= status_code < 600:
            error_class = OutsetaFailedError
        else:
            error_class = OutsetaUnknownError

        logger.debug(f"{context['url']} returned HTTP {status_code}")
        return error_class(
            f"Unexpected response code {status_code}",
            status_code=status_code,
            response_text=response.text,
            **context,
        )

    def get(
        self,
        url: str,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> str:
        return self.request("GET", url, params=params, headers=headers)

    def post(
        self,
        url: str,
        params: Optional[Mapping[str, Any]] = None,
        payload: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> str:
        return self.request("POST", url, params=params, payload=payload, headers=headers)

    def put(
        self,
        url: str,
        params: Optional[Mapping[str, Any]] = None,
        payload: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> str:
        return self.request("PUT", url, params=params, payload=payload, headers=headers)

    def patch(
        self,
        url: str,
        params: Optional[Mapping[str, Any]] = None,
        payload: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> str:
        return self.request("PATCH", url, params=params, payload=payload, headers=headers)

    def delete(
        self,
        url: str,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> str:
        return self.request("DELETE", url, params=params, headers=headers)


class RequestMakerType(str, Enum):
    """Built-in request makers selectable by name."""
    HTTP_CLIENT = "HTTP_CLIENT"
    DEFAULT = "DEFAULT"
    INVALID = "INVALID"


_REQUEST_MAKERS = {
    RequestMakerType.HTTP_CLIENT: HttpxRequestMaker,
    RequestMakerType.DEFAULT: HttpxRequestMaker,
}


def create_request_maker(request_maker_type: Union[RequestMakerType, str, None]) -> RequestMaker:
    """Create a built-in request maker.

    Args:
        request_maker_type: Request maker type or its name, in any case

    Returns:
        New request maker

    Raises:
        OutsetaInvalidRequestMakerError: Unknown, blank or missing type
    """
    if request_maker_type is None:
        raise OutsetaInvalidRequestMakerError("The request maker type cannot be null.")
    if isinstance(request_maker_type, str) and not isinstance(request_maker_type, RequestMakerType):
        name = request_maker_type.strip().upper()
        if not name:
            raise OutsetaInvalidRequestMakerError("The request maker type cannot be blank.")
        try:
            request_maker_type = RequestMakerType[name]
        except KeyError as e:
            raise OutsetaInvalidRequestMakerError() from e

    maker_class = _REQUEST_MAKERS.get(request_maker_type)
    if maker_class is None:
        raise OutsetaInvalidRequestMakerError()
    return maker_class()
