"""Marketing API endpoints: email lists and their subscriptions."""

from __future__ import annotations

from outseta.models import EmailList
from outseta.models import MarketingSubscription
from outseta.pagination import ItemPage
from outseta.pagination import PageRequest
from outseta.rest.base import BaseClient


class MarketingClient(BaseClient):
    """Email lists and their subscribers."""

    def get_email_list(self, email_list_id: str) -> EmailList:
        """Get email list by UID."""
        self._require_id(email_list_id, "Email list id")
        return self._get_object(f"/email/lists/{email_list_id}", EmailList)

    def get_email_list_page(self, page_request: PageRequest) -> ItemPage[EmailList]:
        """Get a page of email lists."""
        return self._get_page("/email/lists", EmailList, page_request)

    def get_subscription_page(
        self,
        email_list_id: str,
        page_request: PageRequest,
    ) -> ItemPage[MarketingSubscription]:
        """Get a page of subscriptions to an email list.

        Args:
            email_list_id: Email list UID
            page_request: Page to fetch

        Returns:
            Page of subscriptions
        """
        self._require_id(email_list_id, "Email list id")
        return self._get_page(
            f"/email/lists/{email_list_id}/subscriptions", MarketingSubscription, page_request
        )

    def subscribe_person_to_list(
        self,
        email_list_id: str,
        subscription: MarketingSubscription,
    ) -> MarketingSubscription:
        """Subscribe the person named in ``subscription`` to an email list.

        Args:
            email_list_id: Email list UID
            subscription: Subscription holding at least ``person``

        Returns:
            Created subscription
        """
        self._require_id(email_list_id, "Email list id")
        self._require(subscription, "Marketing subscription request")
        return self._post_object(
            f"/email/lists/{email_list_id}/subscriptions", subscription, MarketingSubscription
        )

    def remove_subscriber_from_list(self, email_list_id: str, subscription_id: str) -> None:
        """Remove a subscription from an email list."""
        self._require_id(email_list_id, "Email list id")
        self._require_id(subscription_id, "Subscription id")
        self._delete(f"/email/lists/{email_list_id}/subscriptions/{subscription_id}")
