"""Tests for SDK errors."""

from outseta.errors import ErrorKind
from outseta.errors import OutsetaAPIError
from outseta.errors import OutsetaBadRequestError
from outseta.errors import OutsetaClientBuildError
from outseta.errors import OutsetaError
from outseta.errors import OutsetaFailedError
from outseta.errors import OutsetaInvalidArgumentError
from outseta.errors import OutsetaInvalidRequestMakerError
from outseta.errors import OutsetaInvalidURLError
from outseta.errors import OutsetaPageBuildError
from outseta.errors import OutsetaParseError
from outseta.errors import OutsetaUnknownError


class TestErrorKinds:
    """Test the kind tag carried by each error."""

    def test_kinds(self):
        """Test every error class reports its kind."""
        assert OutsetaInvalidArgumentError("x").kind is ErrorKind.INVALID_ARGUMENT
        assert OutsetaInvalidURLError("x", "u").kind is ErrorKind.INVALID_URL
        assert OutsetaBadRequestError("x", "u").kind is ErrorKind.BAD_REQUEST
        assert OutsetaFailedError("x", "u").kind is ErrorKind.FAILED
        assert OutsetaUnknownError("x", "u").kind is ErrorKind.UNKNOWN
        assert OutsetaParseError("x").kind is ErrorKind.PARSE_ERROR
        assert OutsetaClientBuildError("x").kind is ErrorKind.CLIENT_BUILD_ERROR
        assert OutsetaInvalidRequestMakerError().kind is ErrorKind.INVALID_REQUEST_MAKER
        assert OutsetaPageBuildError("x").kind is ErrorKind.PAGE_BUILD_ERROR

    def test_hierarchy(self):
        """Test all errors share the SDK base class."""
        assert issubclass(OutsetaBadRequestError, OutsetaAPIError)
        assert issubclass(OutsetaAPIError, OutsetaError)
        assert issubclass(OutsetaParseError, OutsetaError)

    def test_default_request_maker_message(self):
        """Test the default message of an invalid request maker error."""
        assert OutsetaInvalidRequestMakerError().message == "A request maker of this type does not exist."


class TestErrorFormatting:
    """Test error string representations."""

    def test_base_error_str(self):
        """Test the base error without a kind."""
        assert str(OutsetaError("Something broke")) == "Something broke"

    def test_tagged_error_str(self):
        """Test the kind prefix."""
        error = OutsetaInvalidArgumentError("Plan id cannot be null or blank.")
        assert str(error) == "[INVALID_ARGUMENT] Plan id cannot be null or blank."

    def test_api_error_with_status(self):
        """Test the status code and URL in API errors."""
        error = OutsetaBadRequestError(
            "Unexpected response code 404",
            "https://x/api",
            status_code=404,
            response_text="Not found",
        )
        assert str(error) == "HTTP 404: [BAD_REQUEST] Unexpected response code 404 (https://x/api)"
        assert error.response_text == "Not found"

    def test_api_error_without_status(self):
        """Test API errors raised before a response arrived."""
        error = OutsetaInvalidURLError("Invalid URL: nope", "nope")
        assert str(error) == "[INVALID_URL] Invalid URL: nope (nope)"

    def test_api_error_context(self):
        """Test API errors keep the request details."""
        cause = ValueError("boom")
        error = OutsetaFailedError(
            "failed",
            "https://x/api",
            payload="{}",
            params={"offset": "0"},
            headers={"Accept": "application/json"},
            cause=cause,
        )
        assert error.payload == "{}"
        assert error.params == {"offset": "0"}
        assert error.headers == {"Accept": "application/json"}
        assert error.cause is cause

    def test_repr(self):
        """Test the detailed representation."""
        error = OutsetaParseError("bad json", data="{")
        assert repr(error).startswith("OutsetaParseError(message='bad json'")
        assert error.data == "{"
