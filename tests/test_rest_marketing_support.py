"""Tests for the marketing and support endpoint clients."""

import json

import pytest

from conftest import BASE_URL
from conftest import EXPECTED_HEADERS
from outseta.errors import OutsetaInvalidArgumentError
from outseta.models import Case
from outseta.models import CaseReply
from outseta.models import CaseSource
from outseta.models import MarketingSubscription
from outseta.models import Person
from outseta.pagination import PageRequest
from outseta.rest import MarketingClient
from outseta.rest import SupportClient

INVALID_IDS = [None, "", "   "]


def _sent_json(mock_method):
    return json.loads(mock_method.call_args[0][2])


class TestMarketingClient:
    """Test email list endpoints."""

    def test_get_email_list(self, make_client, request_maker):
        """Test fetching an email list."""
        request_maker.get.return_value = '{"Uid": "list-1", "Name": "News", "CountSubscriptionsActive": 12}'
        client = make_client(MarketingClient)

        email_list = client.get_email_list("list-1")

        assert email_list.count_subscriptions_active == 12
        request_maker.get.assert_called_once_with(f"{BASE_URL}/email/lists/list-1", {}, EXPECTED_HEADERS)

    def test_get_email_list_page(self, make_client, request_maker):
        """Test fetching a page of email lists."""
        request_maker.get.return_value = '{"metadata": {"limit": 25, "offset": 0, "total": 0}, "items": []}'
        client = make_client(MarketingClient)

        client.get_email_list_page(PageRequest(page_size=25))

        request_maker.get.assert_called_once_with(f"{BASE_URL}/email/lists", {"limit": "25"}, EXPECTED_HEADERS)

    def test_get_subscription_page(self, make_client, request_maker):
        """Test fetching subscribers of a list."""
        request_maker.get.return_value = (
            '{"metadata": {"limit": 25, "offset": 0, "total": 1},'
            ' "items": [{"Uid": "ms-1", "Person": {"Email": "ada@example.com"}, "SubscribedDate": "2024-01-05T08:00:00"}]}'
        )
        client = make_client(MarketingClient)

        page = client.get_subscription_page("list-1", PageRequest(page=0))

        assert page.items[0].person.email == "ada@example.com"
        request_maker.get.assert_called_once_with(
            f"{BASE_URL}/email/lists/list-1/subscriptions", {"offset": "0"}, EXPECTED_HEADERS
        )

    def test_subscribe_person_to_list(self, make_client, request_maker):
        """Test subscribing a person."""
        request_maker.post.return_value = '{"Uid": "ms-2"}'
        client = make_client(MarketingClient)

        subscription = client.subscribe_person_to_list(
            "list-1", MarketingSubscription(person=Person(email="ada@example.com"), send_welcome_email=True)
        )

        assert subscription.uid == "ms-2"
        assert request_maker.post.call_args[0][0] == f"{BASE_URL}/email/lists/list-1/subscriptions"
        body = _sent_json(request_maker.post)
        assert body["Person"]["Email"] == "ada@example.com"
        assert body["SendWelcomeEmail"] is True

    def test_remove_subscriber_from_list(self, make_client, request_maker):
        """Test removing a subscriber."""
        client = make_client(MarketingClient)

        client.remove_subscriber_from_list("list-1", "ms-1")

        request_maker.delete.assert_called_once_with(
            f"{BASE_URL}/email/lists/list-1/subscriptions/ms-1", {}, EXPECTED_HEADERS
        )

    @pytest.mark.parametrize("email_list_id", INVALID_IDS)
    def test_invalid_email_list_id(self, make_client, request_maker, email_list_id):
        """Test missing and blank email list ids."""
        client = make_client(MarketingClient)

        with pytest.raises(OutsetaInvalidArgumentError, match="Email list id cannot be null or blank."):
            client.get_subscription_page(email_list_id, PageRequest())
        request_maker.get.assert_not_called()

    @pytest.mark.parametrize("subscription_id", INVALID_IDS)
    def test_remove_subscriber_invalid_subscription_id(self, make_client, request_maker, subscription_id):
        """Test missing and blank subscription ids."""
        client = make_client(MarketingClient)

        with pytest.raises(OutsetaInvalidArgumentError, match="Subscription id cannot be null or blank."):
            client.remove_subscriber_from_list("list-1", subscription_id)
        request_maker.delete.assert_not_called()

    def test_subscribe_person_to_list_requires_body(self, make_client, request_maker, mock_parser):
        """Test a null subscription is rejected."""
        client = make_client(MarketingClient, mock_parser)

        with pytest.raises(OutsetaInvalidArgumentError, match="Marketing subscription request cannot be null."):
            client.subscribe_person_to_list("list-1", None)
        mock_parser.object_to_json_string.assert_not_called()
        request_maker.post.assert_not_called()


class TestSupportClient:
    """Test support case endpoints."""

    def test_get_case(self, make_client, request_maker):
        """Test fetching a case."""
        request_maker.get.return_value = (
            '{"Uid": "case-1", "Subject": "Help", "Status": 1,'
            ' "CaseHistories": [{"Uid": "h-1", "Comment": "Hi", "SeenDateTime": ""}]}'
        )
        client = make_client(SupportClient)

        case = client.get_case("case-1")

        assert case.subject == "Help"
        assert case.case_histories[0].seen_date_time is None
        request_maker.get.assert_called_once_with(f"{BASE_URL}/support/cases/case-1", {}, EXPECTED_HEADERS)

    def test_get_case_page(self, make_client, request_maker):
        """Test fetching a page of cases."""
        request_maker.get.return_value = '{"metadata": {"limit": 25, "offset": 0, "total": 0}, "items": []}'
        client = make_client(SupportClient)

        client.get_case_page(PageRequest())

        request_maker.get.assert_called_once_with(f"{BASE_URL}/support/cases", {}, EXPECTED_HEADERS)

    @pytest.mark.parametrize("flag,text", [(True, "true"), (False, "false")])
    def test_add_case(self, make_client, request_maker, flag, text):
        """Test opening a case."""
        request_maker.post.return_value = '{"Uid": "case-2"}'
        client = make_client(SupportClient)

        case = client.add_case(flag, Case(subject="Broken", source=CaseSource.EMAIL))

        assert case.uid == "case-2"
        args = request_maker.post.call_args[0]
        assert args[0] == f"{BASE_URL}/support/cases"
        assert args[1] == {"sendAutoResponder": text}
        assert _sent_json(request_maker.post)["Source"] == 2

    def test_add_client_response(self, make_client, request_maker):
        """Test the comment travels in the path with encoded spaces."""
        client = make_client(SupportClient)

        client.add_client_response("case-1", "Thanks for the help")

        request_maker.post.assert_called_once_with(
            f"{BASE_URL}/support/cases/case-1/clientresponse/Thanks%20for%20the%20help",
            {},
            "",
            EXPECTED_HEADERS,
        )

    @pytest.mark.parametrize("comment", INVALID_IDS)
    def test_add_client_response_invalid_comment(self, make_client, request_maker, comment):
        """Test missing and blank comments."""
        client = make_client(SupportClient)

        with pytest.raises(OutsetaInvalidArgumentError, match="Comment"):
            client.add_client_response("case-1", comment)
        request_maker.post.assert_not_called()

    def test_add_reply(self, make_client, request_maker):
        """Test an agent reply."""
        request_maker.post.return_value = '{"Uid": "case-1"}'
        client = make_client(SupportClient)

        case = client.add_reply("case-1", CaseReply(agent_name="Bo", comment="On it"))

        assert case.uid == "case-1"
        assert request_maker.post.call_args[0][0] == f"{BASE_URL}/support/cases/case-1/replies"
        body = _sent_json(request_maker.post)
        assert body["AgentName"] == "Bo"
        assert body["Comment"] == "On it"

    @pytest.mark.parametrize("case_id", INVALID_IDS)
    def test_get_case_invalid_id(self, make_client, request_maker, case_id):
        """Test missing and blank case ids."""
        client = make_client(SupportClient)

        with pytest.raises(OutsetaInvalidArgumentError, match="Case id cannot be null or blank."):
            client.get_case(case_id)
        request_maker.get.assert_not_called()

    @pytest.mark.parametrize("case_uid", INVALID_IDS)
    def test_add_reply_invalid_case_uid(self, make_client, request_maker, case_uid):
        """Test missing and blank case uids on replies."""
        client = make_client(SupportClient)

        with pytest.raises(OutsetaInvalidArgumentError, match="Case uid cannot be null or blank."):
            client.add_reply(case_uid, CaseReply(comment="Hi"))
        request_maker.post.assert_not_called()

    def test_add_reply_requires_body(self, make_client, request_maker, mock_parser):
        """Test a null reply is rejected."""
        client = make_client(SupportClient, mock_parser)

        with pytest.raises(OutsetaInvalidArgumentError, match="Case reply cannot be null."):
            client.add_reply("case-1", None)
        mock_parser.object_to_json_string.assert_not_called()
        request_maker.post.assert_not_called()
