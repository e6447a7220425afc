"""Test configuration and fixtures."""

from unittest.mock import MagicMock

import httpx
import pytest

from outseta.http import RequestMaker
from outseta.parser import ParserFacade

BASE_URL = "https://test.outseta.com/api/v1"

ACCESS_KEY = "test_access_key"

EXPECTED_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
    "Authorization": f"Bearer {ACCESS_KEY}",
}

ACCOUNT_JSON = """
{
    "Uid": "acc-1",
    "Name": "Acme",
    "ClientIdentifier": "",
    "AccountStage": 3,
    "Created": "2024-01-02T03:04:05",
    "Updated": "",
    "BillingAddress": {"Uid": "addr-1", "City": "Berlin", "GeoLocation": {"lat": 52.5, "lng": 13.4}},
    "PersonAccount": [
        {
            "Uid": "pa-1",
            "IsPrimary": true,
            "Person": {"Uid": "per-1", "Email": "ada@example.com", "IPAddress": "10.0.0.1"},
            "ActivityEventData": {"source": "signup"}
        }
    ],
    "Subscriptions": [
        {"Uid": "sub-1", "BillingRenewalTerm": 1, "Plan": {"Uid": "plan-1", "Name": "Pro"}}
    ],
    "SomeNewField": "ignored"
}
"""

PLAN_PAGE_JSON = """
{
    "metadata": {"limit": 25, "offset": 0, "total": 2},
    "items": [
        {"Uid": "plan-1", "Name": "Basic", "MonthlyRate": 10.0},
        {"Uid": "plan-2", "Name": "Pro", "MonthlyRate": 25.5}
    ]
}
"""


@pytest.fixture
def base_url():
    """Base URL fixture."""
    return BASE_URL


@pytest.fixture
def parser():
    """Parser facade fixture."""
    return ParserFacade()


@pytest.fixture
def request_maker():
    """Mock request maker fixture."""
    maker = MagicMock(spec=RequestMaker)
    maker.get.return_value = "{}"
    maker.post.return_value = "{}"
    maker.put.return_value = "{}"
    maker.patch.return_value = "{}"
    maker.delete.return_value = ""
    return maker


@pytest.fixture
def mock_parser():
    """Mock parser facade fixture."""
    return MagicMock(spec=ParserFacade)


@pytest.fixture
def make_client(base_url, request_maker):
    """Factory building endpoint clients on the mock request maker."""
    def _make(client_class, parser=None):
        builder = client_class.builder(base_url).access_key(ACCESS_KEY).request_maker(request_maker)
        if parser is not None:
            return builder.parser(parser).build()
        return builder.default_parser().build()
    return _make


@pytest.fixture
def mock_httpx_response():
    """Mock httpx response fixture."""
    response = MagicMock(spec=httpx.Response)
    response.status_code = 200
    response.headers = {}
    response.text = '{"Uid": "acc-1"}'
    return response
