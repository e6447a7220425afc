"""CRM API endpoints: accounts, people, deals and activities."""

from __future__ import annotations

from outseta.models import Account
from outseta.models import Activity
from outseta.models import CancelAccountRequest
from outseta.models import Deal
from outseta.models import Person
from outseta.models import PersonAccount
from outseta.models import TemporaryPasswordRequest
from outseta.pagination import ItemPage
from outseta.pagination import PageRequest
from outseta.rest.base import BaseClient


def _flag(value: bool) -> str:
    return "true" if value else "false"


class AccountClient(BaseClient):
    """Accounts and their memberships."""

    def get_account(self, account_id: str) -> Account:
        """Get account by UID.

        Args:
            account_id: Account UID

        Returns:
            Account

        Raises:
            OutsetaInvalidArgumentError: Missing or blank account id
        """
        self._require_id(account_id, "Account id")
        return self._get_object(f"/crm/accounts/{account_id}", Account)

    def get_account_page(self, page_request: PageRequest) -> ItemPage[Account]:
        """Get a page of accounts.

        Args:
            page_request: Page to fetch; an ``AccountPageRequest`` filters by stage

        Returns:
            Page of accounts
        """
        return self._get_page("/crm/accounts", Account, page_request)

    def create_account_with_existing_person(self, account: Account) -> Account:
        """Create an account whose members are existing people."""
        self._require(account, "Account request")
        return self._post_object("/crm/accounts", account, Account)

    def create_account_with_new_person(self, send_confirmation_email: bool, account: Account) -> Account:
        """Create an account together with new people.

        Args:
            send_confirmation_email: Email the new people a confirmation link
            account: Account with its new members in ``person_account``

        Returns:
            Created account
        """
        self._require(account, "Account request")
        return self._post_object(
            "/crm/accounts",
            account,
            Account,
            params={"sendConfirmationEmail": _flag(send_confirmation_email)},
        )

    def add_new_person_to_existing_account(
        self,
        send_welcome_email: bool,
        account_id: str,
        person_account: PersonAccount,
    ) -> PersonAccount:
        """Add a person who does not exist yet to an account.

        Args:
            send_welcome_email: Email the person a welcome message
            account_id: Account UID
            person_account: Membership holding the new person

        Returns:
            Created membership
        """
        self._require_id(account_id, "Account id")
        self._require(person_account, "Person account request")
        return self._post_object(
            f"/crm/accounts/{account_id}/memberships",
            person_account,
            PersonAccount,
            params={"sendWelcomeEmail": _flag(send_welcome_email)},
        )

    def add_existing_person_to_existing_account(
        self,
        account_id: str,
        person_account: PersonAccount,
    ) -> PersonAccount:
        """Add an existing person to an account."""
        self._require_id(account_id, "Account id")
        self._require(person_account, "Person account request")
        return self._post_object(
            f"/crm/accounts/{account_id}/memberships", person_account, PersonAccount
        )

    def register_account(self, account: Account) -> Account:
        """Register an account, as the sign-up form does."""
        self._require(account, "Account request")
        return self._post_object("/crm/accounts", account, Account)

    def update_account(self, account_id: str, account: Account) -> Account:
        """Update an account."""
        self._require_id(account_id, "Account id")
        self._require(account, "Account request")
        return self._put_object(f"/crm/accounts/{account_id}", account, Account)

    def cancel_account(self, account_id: str, cancel_request: CancelAccountRequest) -> None:
        """Cancel the subscription of an account at the end of its term."""
        self._require_id(account_id, "Account id")
        self._require(cancel_request, "Cancel account request")
        self._send("PUT", f"/crm/accounts/cancellation/{account_id}", cancel_request)

    def remove_cancellation(self, account_id: str) -> None:
        """Withdraw a pending cancellation."""
        self._require_id(account_id, "Account id")
        self._put(f"/crm/accounts/removecancellation/{account_id}", payload="")

    def update_account_membership(
        self,
        account_id: str,
        membership_id: str,
        person_account: PersonAccount,
    ) -> None:
        """Update a membership, e.g. to change the primary contact."""
        self._require_id(account_id, "Account id")
        self._require_id(membership_id, "Membership id")
        self._require(person_account, "Person account request")
        self._send("PUT", f"/crm/accounts/{account_id}/memberships/{membership_id}", person_account)

    def delete_account(self, account_id: str) -> None:
        """Delete an account."""
        self._require_id(account_id, "Account id")
        self._delete(f"/crm/accounts/{account_id}")

    def remove_person_from_account(self, account_id: str, membership_id: str) -> None:
        """Remove a membership from an account."""
        self._require_id(account_id, "Account id")
        self._require_id(membership_id, "Membership id")
        self._delete(f"/crm/accounts/{account_id}/memberships/{membership_id}")


class PeopleClient(BaseClient):
    """People in the CRM."""

    def get_person(self, person_id: str) -> Person:
        """Get person by UID."""
        self._require_id(person_id, "Person id")
        return self._get_object(f"/crm/people/{person_id}", Person)

    def get_person_page(self, page_request: PageRequest) -> ItemPage[Person]:
        """Get a page of people."""
        return self._get_page("/crm/people", Person, page_request)

    def create_person(self, person: Person) -> Person:
        """Create a person."""
        self._require(person, "Person request")
        return self._post_object("/crm/people", person, Person)

    def update_person(self, person_id: str, person: Person) -> Person:
        """Update a person."""
        self._require_id(person_id, "Person id")
        self._require(person, "Person request")
        return self._put_object(f"/crm/people/{person_id}", person, Person)

    def delete_person(self, person_id: str) -> None:
        """Delete a person."""
        self._require_id(person_id, "Person id")
        self._delete(f"/crm/people/{person_id}")

    def set_temporary_password(
        self,
        person_id: str,
        password_request: TemporaryPasswordRequest,
    ) -> None:
        """Set a temporary password the person must change at next login."""
        self._require_id(person_id, "Person id")
        self._require(password_request, "Temporary password request")
        self._send("PUT", f"/crm/people/{person_id}/setTemporaryPassword", password_request)


class DealClient(BaseClient):
    """Sales deals."""

    def get_deal(self, deal_id: str) -> Deal:
        self._require_id(deal_id, "Deal id")
        return self._get_object(f"/crm/deals/{deal_id}", Deal)

    def get_deal_page(self, page_request: PageRequest) -> ItemPage[Deal]:
        return self._get_page("/crm/deals", Deal, page_request)

    def create_deal(self, deal: Deal) -> Deal:
        self._require(deal, "Deal request")
        return self._post_object("/crm/deals", deal, Deal)

    def update_deal(self, deal_id: str, deal: Deal) -> Deal:
        self._require_id(deal_id, "Deal id")
        self._require(deal, "Deal request")
        return self._put_object(f"/crm/deals/{deal_id}", deal, Deal)

    def delete_deal(self, deal_id: str) -> None:
        self._require_id(deal_id, "Deal id")
        self._delete(f"/crm/deals/{deal_id}")


class ActivityClient(BaseClient):
    """Activity timeline."""

    def get_activity_page(self, page_request: PageRequest) -> ItemPage[Activity]:
        """Get a page of activities.

        Args:
            page_request: Page to fetch; an ``ActivityPageRequest`` filters by
                entity and activity type

        Returns:
            Page of activities
        """
        return self._get_page("/activities", Activity, page_request)

    def create_custom_activity(self, activity: Activity) -> Activity:
        """Record a custom activity on an account, person or deal."""
        self._require(activity, "Activity request")
        return self._post_object("/activities/customactivity", activity, Activity)
