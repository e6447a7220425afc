"""Exception classes for the Outseta SDK."""

from __future__ import annotations

from enum import Enum
from typing import Any
from typing import Dict
from typing import Mapping
from typing import Optional


class ErrorKind(str, Enum):
    """Error kind tag carried by every SDK error as its ``error_code``."""
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    INVALID_URL = "INVALID_URL"
    BAD_REQUEST = "BAD_REQUEST"
    FAILED = "FAILED"
    UNKNOWN = "UNKNOWN"
    PARSE_ERROR = "PARSE_ERROR"
    CLIENT_BUILD_ERROR = "CLIENT_BUILD_ERROR"
    INVALID_REQUEST_MAKER = "INVALID_REQUEST_MAKER"
    PAGE_BUILD_ERROR = "PAGE_BUILD_ERROR"


class OutsetaError(Exception):
    """Base exception for all Outseta SDK errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[ErrorKind] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize Outseta error.

        Args:
            message: Error message
            error_code: Optional error kind
            details: Optional error details
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    @property
    def kind(self) -> Optional[ErrorKind]:
        """Error kind, for callers that match on a tag instead of a class."""
        return self.error_code

    def __str__(self) -> str:
        """String representation of the error."""
        if self.error_code:
            return f"[{self.error_code.value}] {self.message}"
        return self.message

    def __repr__(self) -> str:
        """Detailed representation of the error."""
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code!r}, "
            f"details={self.details!r})"
        )


class OutsetaInvalidArgumentError(OutsetaError):
    """A caller supplied a missing, blank or otherwise invalid argument."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, ErrorKind.INVALID_ARGUMENT, details)


class OutsetaAPIError(OutsetaError):
    """A request to the Outseta API did not produce a usable response."""

    default_kind = ErrorKind.UNKNOWN

    def __init__(
        self,
        message: str,
        url: str,
        *,
        payload: Optional[str] = None,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
        status_code: Optional[int] = None,
        response_text: Optional[str] = None,
        cause: Optional[BaseException] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize API error.

        Args:
            message: Error message
            url: URL of the request that failed
            payload: Request body that was sent
            params: Query parameters of the request
            headers: Headers of the request
            status_code: HTTP status code, when a response was received
            response_text: Raw response body, when a response was received
            cause: Lower-level exception that triggered this error
            details: Optional error details
        """
        super().__init__(message, self.default_kind, details)
        self.url = url
        self.payload = payload
        self.params = dict(params or {})
        self.headers = dict(headers or {})
        self.status_code = status_code
        self.response_text = response_text
        self.cause = cause

    def __str__(self) -> str:
        """String representation of the API error."""
        base = super().__str__()
        if self.status_code is not None:
            return f"HTTP {self.status_code}: {base} ({self.url})"
        return f"{base} ({self.url})"


class OutsetaInvalidURLError(OutsetaAPIError):
    """The request URL is malformed or cannot be reached."""

    default_kind = ErrorKind.INVALID_URL


class OutsetaBadRequestError(OutsetaAPIError):
    """The API rejected the request with a 4xx status."""

    default_kind = ErrorKind.BAD_REQUEST


class OutsetaFailedError(OutsetaAPIError):
    """The API failed to handle the request with a 5xx status."""

    default_kind = ErrorKind.FAILED


class OutsetaUnknownError(OutsetaAPIError):
    """Any other non-2xx outcome or an unusable response."""

    default_kind = ErrorKind.UNKNOWN


class OutsetaParseError(OutsetaError):
    """JSON serialization or deserialization error."""

    def __init__(
        self,
        message: str,
        data: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize parse error.

        Args:
            message: Error message
            data: Text or object that could not be converted
            details: Optional error details
        """
        super().__init__(message, ErrorKind.PARSE_ERROR, details)
        self.data = data


class OutsetaClientBuildError(OutsetaError):
    """A client could not be built from the supplied configuration."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, ErrorKind.CLIENT_BUILD_ERROR, details)


class OutsetaInvalidRequestMakerError(OutsetaError):
    """An unrecognized request maker was requested."""

    def __init__(
        self,
        message: str = "A request maker of this type does not exist.",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, ErrorKind.INVALID_REQUEST_MAKER, details)


class OutsetaPageBuildError(OutsetaError):
    """A page request was built with out-of-range values."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, ErrorKind.PAGE_BUILD_ERROR, details)
