"""Tests for the HTTP request makers."""

from unittest.mock import MagicMock
from unittest.mock import patch

import httpx
import pytest

from outseta.errors import OutsetaBadRequestError
from outseta.errors import OutsetaFailedError
from outseta.errors import OutsetaInvalidRequestMakerError
from outseta.errors import OutsetaInvalidURLError
from outseta.errors import OutsetaUnknownError
from outseta.http import HttpxRequestMaker
from outseta.http import RequestMakerType
from outseta.http import build_url
from outseta.http import create_request_maker

URL = "https://test.outseta.com/api/v1/crm/accounts"
HEADERS = {"Authorization": "Bearer key", "Accept": "application/json"}

REAL_CLIENT = httpx.Client


def _mock_client(mock_client_class, response=None, side_effect=None):
    client = MagicMock()
    if side_effect is not None:
        client.request.side_effect = side_effect
    else:
        client.request.return_value = response
    mock_client_class.return_value.__enter__.return_value = client
    return client


def _response(status_code, text=""):
    response = MagicMock(spec=httpx.Response)
    response.status_code = status_code
    response.text = text
    return response


class TestBuildUrl:
    """Test query string construction."""

    def test_no_params(self):
        """Test a URL without parameters is unchanged."""
        assert build_url(URL, {}) == URL
        assert build_url(URL) == URL

    def test_params_in_order(self):
        """Test parameters keep their order."""
        assert build_url(URL, {"offset": "0", "limit": "1"}) == f"{URL}?offset=0&limit=1"

    def test_encoding(self):
        """Test values are percent-encoded except for the sort separator."""
        url = build_url(URL, {"orderBy": "Created+DESC", "q": "a b&c"})
        assert url == f"{URL}?orderBy=Created+DESC&q=a%20b%26c"

    def test_non_string_values(self):
        """Test numeric filter values."""
        assert build_url(URL, {"AccountStage": 3}) == f"{URL}?AccountStage=3"


class TestHttpxRequestMaker:
    """Test the httpx request maker."""

    @patch("httpx.Client")
    def test_get_success(self, mock_client_class, mock_httpx_response):
        """Test a 2xx response returns the body."""
        client = _mock_client(mock_client_class, mock_httpx_response)
        maker = HttpxRequestMaker()

        result = maker.get(URL, {"offset": "0", "limit": "1"}, HEADERS)

        assert result == '{"Uid": "acc-1"}'
        args, kwargs = client.request.call_args
        assert args[0] == "GET"
        assert str(args[1]) == f"{URL}?offset=0&limit=1"
        assert kwargs["headers"] == HEADERS
        assert kwargs["content"] is None
        mock_client_class.assert_called_once_with(timeout=None, follow_redirects=False)

    @patch("httpx.Client")
    def test_post_sends_payload(self, mock_client_class):
        """Test the payload is sent as the body."""
        client = _mock_client(mock_client_class, _response(201, '{"Uid": "p-1"}'))
        maker = HttpxRequestMaker()

        result = maker.post(URL, {}, '{"Name": "Acme"}', HEADERS)

        assert result == '{"Uid": "p-1"}'
        args, kwargs = client.request.call_args
        assert args[0] == "POST"
        assert kwargs["content"] == '{"Name": "Acme"}'

    @pytest.mark.parametrize("method", ["put", "patch"])
    @patch("httpx.Client")
    def test_put_and_patch(self, mock_client_class, method):
        """Test the remaining body methods."""
        client = _mock_client(mock_client_class, _response(200, "{}"))
        maker = HttpxRequestMaker()

        assert getattr(maker, method)(URL, {}, "", HEADERS) == "{}"
        assert client.request.call_args[0][0] == method.upper()

    @patch("httpx.Client")
    def test_delete_empty_body(self, mock_client_class):
        """Test an empty 204 response."""
        client = _mock_client(mock_client_class, _response(204, ""))
        maker = HttpxRequestMaker()

        assert maker.delete(f"{URL}/acc-1", {}, HEADERS) == ""
        assert client.request.call_args[0][0] == "DELETE"

    @patch("httpx.Client")
    def test_bad_request(self, mock_client_class):
        """Test a 4xx response."""
        _mock_client(mock_client_class, _response(400, '{"Message": "bad"}'))
        maker = HttpxRequestMaker()

        with pytest.raises(OutsetaBadRequestError) as exc_info:
            maker.get(URL, {"offset": "0"}, HEADERS)

        error = exc_info.value
        assert error.url == URL
        assert error.params == {"offset": "0"}
        assert error.headers == HEADERS
        assert error.status_code == 400
        assert error.response_text == '{"Message": "bad"}'
        assert error.message == "Unexpected response code 400"

    @patch("httpx.Client")
    def test_not_found(self, mock_client_class):
        """Test 404 is a bad request."""
        _mock_client(mock_client_class, _response(404))

        with pytest.raises(OutsetaBadRequestError):
            HttpxRequestMaker().get(URL, {}, HEADERS)

    @patch("httpx.Client")
    def test_server_failure(self, mock_client_class):
        """Test a 5xx response."""
        _mock_client(mock_client_class, _response(500, "oops"))
        maker = HttpxRequestMaker()

        with pytest.raises(OutsetaFailedError) as exc_info:
            maker.post(URL, {"sendConfirmationEmail": "true"}, "{}", HEADERS)

        assert exc_info.value.url == URL
        assert exc_info.value.params == {"sendConfirmationEmail": "true"}
        assert exc_info.value.payload == "{}"

    @patch("httpx.Client")
    def test_other_status(self, mock_client_class):
        """Test a non-2xx status outside the error ranges."""
        _mock_client(mock_client_class, _response(304))

        with pytest.raises(OutsetaUnknownError) as exc_info:
            HttpxRequestMaker().get(URL, {}, HEADERS)
        assert exc_info.value.status_code == 304

    def test_redirect_not_followed(self):
        """Test a redirect is reported and its target is never requested."""
        calls = []

        def handler(request):
            calls.append((request.method, str(request.url)))
            if request.url.path == "/elsewhere":
                return httpx.Response(200, text='{"redirected": true}')
            return httpx.Response(302, headers={"Location": "https://test.outseta.com/elsewhere"})

        transport = httpx.MockTransport(handler)
        with patch("httpx.Client", side_effect=lambda **kwargs: REAL_CLIENT(transport=transport, **kwargs)):
            with pytest.raises(OutsetaUnknownError) as exc_info:
                HttpxRequestMaker().post(URL, {}, '{"Email": "ada@example.com"}', HEADERS)

        assert exc_info.value.status_code == 302
        assert exc_info.value.payload == '{"Email": "ada@example.com"}'
        assert calls == [("POST", URL)]

    @pytest.mark.parametrize("url", ["not a url", "ftp://test.outseta.com/api", "https://"])
    @patch("httpx.Client")
    def test_malformed_url(self, mock_client_class, url):
        """Test malformed URLs fail before any network attempt."""
        with pytest.raises(OutsetaInvalidURLError) as exc_info:
            HttpxRequestMaker().get(url, {"limit": "1"}, HEADERS)

        assert exc_info.value.url == url
        assert exc_info.value.params == {"limit": "1"}
        mock_client_class.assert_not_called()

    @patch("httpx.Client")
    def test_unreachable_host(self, mock_client_class):
        """Test a connection failure."""
        cause = httpx.ConnectError("Name or service not known")
        _mock_client(mock_client_class, side_effect=cause)

        with pytest.raises(OutsetaInvalidURLError) as exc_info:
            HttpxRequestMaker().get(URL, {}, HEADERS)
        assert exc_info.value.cause is cause

    @patch("httpx.Client")
    def test_transport_failure(self, mock_client_class):
        """Test other transport failures."""
        _mock_client(mock_client_class, side_effect=httpx.ReadTimeout("timed out"))

        with pytest.raises(OutsetaUnknownError) as exc_info:
            HttpxRequestMaker().get(URL, {}, HEADERS)
        assert exc_info.value.status_code is None


class TestCreateRequestMaker:
    """Test the request maker factory."""

    @pytest.mark.parametrize(
        "request_maker_type",
        [RequestMakerType.DEFAULT, RequestMakerType.HTTP_CLIENT, "DEFAULT", "http_client", " Default "],
    )
    def test_known_types(self, request_maker_type):
        """Test known types and names."""
        assert isinstance(create_request_maker(request_maker_type), HttpxRequestMaker)

    def test_new_instance_per_call(self):
        """Test each call creates a new request maker."""
        assert create_request_maker("DEFAULT") is not create_request_maker("DEFAULT")

    @pytest.mark.parametrize(
        "request_maker_type,message",
        [
            (None, "The request maker type cannot be null."),
            ("  ", "The request maker type cannot be blank."),
            ("OKHTTP", "A request maker of this type does not exist."),
            (RequestMakerType.INVALID, "A request maker of this type does not exist."),
        ],
    )
    def test_invalid_types(self, request_maker_type, message):
        """Test unknown, blank and missing types."""
        with pytest.raises(OutsetaInvalidRequestMakerError) as exc_info:
            create_request_maker(request_maker_type)
        assert exc_info.value.message == message
