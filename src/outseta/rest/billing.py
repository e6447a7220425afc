"""Billing API endpoints: subscriptions, plans, add-ons, discounts and invoices."""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from typing import Union

from outseta.models import OUTSETA_DATETIME_FORMAT
from outseta.models import AddOn
from outseta.models import AddOnUsageRequest
from outseta.models import CreateOrChangeSubscriptionRequest
from outseta.models import Discount
from outseta.models import Invoice
from outseta.models import Plan
from outseta.models import PlanFamily
from outseta.models import Subscription
from outseta.models import SubscriptionAddOn
from outseta.models import Transaction
from outseta.models import UpdatePaymentInfoRequest
from outseta.pagination import ItemPage
from outseta.pagination import PageRequest
from outseta.rest.base import BaseClient


def _date_text(value: Union[str, datetime]) -> str:
    if isinstance(value, datetime):
        return value.strftime(OUTSETA_DATETIME_FORMAT)
    return value


class SubscriptionClient(BaseClient):
    """Subscriptions of accounts to plans."""

    def get_subscription(self, subscription_id: str) -> Subscription:
        """Get subscription by UID.

        Args:
            subscription_id: Subscription UID

        Returns:
            Subscription

        Raises:
            OutsetaInvalidArgumentError: Missing or blank subscription id
        """
        self._require_id(subscription_id, "Subscription id")
        return self._get_object(f"/billing/subscriptions/{subscription_id}", Subscription)

    def get_subscription_page(self, page_request: PageRequest) -> ItemPage[Subscription]:
        """Get a page of subscriptions."""
        return self._get_page("/billing/subscriptions", Subscription, page_request)

    def add_first_time_subscription_preview(
        self,
        as_of: Optional[Union[str, datetime]],
        subscription_request: CreateOrChangeSubscriptionRequest,
    ) -> Invoice:
        """Preview the first invoice of a new subscription.

        Args:
            as_of: Optional date the charges are computed for
            subscription_request: Subscription to preview

        Returns:
            Invoice the subscription would produce
        """
        self._require(subscription_request, "Subscription request")
        params = {}
        if as_of is not None and str(as_of).strip():
            params["asOf"] = _date_text(as_of)
        return self._post_object(
            "/billing/subscriptions/compute-charge-summary",
            subscription_request,
            Invoice,
            params=params,
        )

    def add_first_time_subscription(
        self,
        subscription_request: CreateOrChangeSubscriptionRequest,
    ) -> Subscription:
        """Subscribe an account that has no subscription yet."""
        self._require(subscription_request, "Subscription request")
        return self._put_object(
            "/billing/subscriptions/firsttimesubscription", subscription_request, Subscription
        )

    def change_subscription_preview(
        self,
        subscription_id: str,
        subscription_request: CreateOrChangeSubscriptionRequest,
    ) -> Invoice:
        """Preview the invoice produced by a subscription change."""
        self._require_id(subscription_id, "Subscription id")
        self._require(subscription_request, "Subscription request")
        return self._put_object(
            f"/billing/subscriptions/{subscription_id}/changesubscriptionpreview",
            subscription_request,
            Invoice,
        )

    def change_subscription(
        self,
        subscription_id: str,
        subscription_request: CreateOrChangeSubscriptionRequest,
    ) -> Subscription:
        """Change the plan or add-ons of a subscription."""
        self._require_id(subscription_id, "Subscription id")
        self._require(subscription_request, "Subscription request")
        return self._put_object(
            f"/billing/subscriptions/{subscription_id}/changesubscription",
            subscription_request,
            Subscription,
        )

    def set_subscription_upgrade_required(
        self,
        subscription_id: str,
        subscription: Subscription,
    ) -> Subscription:
        """Flag a subscription as needing a plan upgrade."""
        self._require_id(subscription_id, "Subscription id")
        self._require(subscription, "Subscription request")
        return self._put_object(
            f"/billing/subscriptions/{subscription_id}/setsubscriptionupgraderequired",
            subscription,
            Subscription,
        )

    def extend_trial_subscription(self, account_id: str, date: Union[str, datetime]) -> None:
        """Move the trial end of an account to ``date``.

        Args:
            account_id: Account UID
            date: New trial end, as a datetime or as text already in the
                API's format
        """
        self._require_id(account_id, "Account id")
        if isinstance(date, datetime):
            date = _date_text(date)
        self._require_id(date, "Date")
        self._put(f"/crm/accounts/extendtrial/{account_id}/{date}", payload="")

    def add_add_on_to_subscription(self, subscription_add_on: SubscriptionAddOn) -> Subscription:
        """Attach an add-on to the subscription named in ``subscription_add_on``."""
        self._require(subscription_add_on, "Subscription add-on request")
        return self._post_object("/billing/subscriptionaddons", subscription_add_on, Subscription)

    def add_discount_to_subscription(self, subscription_id: str, discount_id: str) -> None:
        """Apply a discount coupon to a subscription."""
        self._require_id(subscription_id, "Subscription id")
        self._require_id(discount_id, "Discount id")
        self._post(f"/billing/subscriptions/{subscription_id}/discounts/{discount_id}", payload="")


class PlanClient(BaseClient):
    """Subscription plans."""

    def get_plan(self, plan_id: str) -> Plan:
        self._require_id(plan_id, "Plan id")
        return self._get_object(f"/billing/plans/{plan_id}", Plan)

    def get_plan_page(self, page_request: PageRequest) -> ItemPage[Plan]:
        return self._get_page("/billing/plans", Plan, page_request)


class PlanFamilyClient(BaseClient):
    """Plan families."""

    def get_plan_family(self, plan_family_id: str) -> PlanFamily:
        self._require_id(plan_family_id, "Plan family id")
        return self._get_object(f"/billing/planfamilies/{plan_family_id}", PlanFamily)

    def get_plan_family_page(self, page_request: PageRequest) -> ItemPage[PlanFamily]:
        return self._get_page("/billing/planfamilies", PlanFamily, page_request)


class AddOnClient(BaseClient):
    """Add-ons and their metered usage."""

    def get_add_on(self, add_on_id: str) -> AddOn:
        """Get add-on by UID."""
        self._require_id(add_on_id, "Add-on id")
        return self._get_object(f"/billing/addons/{add_on_id}", AddOn)

    def get_add_on_page(self, page_request: PageRequest) -> ItemPage[AddOn]:
        """Get a page of add-ons."""
        return self._get_page("/billing/addons", AddOn, page_request)

    def add_usage_for_add_on(self, usage_request: AddOnUsageRequest) -> None:
        """Report usage of a metered add-on."""
        self._require(usage_request, "Add-on usage request")
        self._send("POST", "/billing/usage", usage_request)


class DiscountClient(BaseClient):
    """Discount coupons."""

    def create_discount(self, discount: Discount) -> Discount:
        self._require(discount, "Discount request")
        return self._post_object("/billing/discountcoupons", discount, Discount)


class InvoiceClient(BaseClient):
    """Invoices and billing transactions."""

    def create_invoice(self, invoice: Invoice) -> Invoice:
        """Create an invoice for the subscription named in ``invoice``."""
        self._require(invoice, "Invoice request")
        return self._post_object("/billing/invoices", invoice, Invoice)

    def get_transaction_page(self, account_id: str, page_request: PageRequest) -> ItemPage[Transaction]:
        """Get a page of transactions of an account.

        Args:
            account_id: Account UID
            page_request: Page to fetch; a ``TransactionPageRequest`` filters by type

        Returns:
            Page of transactions
        """
        self._require_id(account_id, "Account id")
        return self._get_page(f"/billing/transactions/{account_id}", Transaction, page_request)

    def add_invoice_payment(self, transaction: Transaction) -> Transaction:
        """Record a payment against an invoice."""
        self._require(transaction, "Transaction request")
        return self._post_object("/billing/transactions/payment", transaction, Transaction)


class UpdatePaymentInfoClient(BaseClient):
    """Payment details of accounts."""

    def update_payment_info(self, payment_info_request: UpdatePaymentInfoRequest) -> None:
        """Replace the payment details of the account named in the request."""
        self._require(payment_info_request, "Payment info request")
        self._send("POST", "/billing/paymentinformation", payment_info_request)
