"""Pydantic models for Outseta API entities."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from enum import IntEnum
from typing import Annotated
from typing import Any
from typing import ClassVar
from typing import List
from typing import Optional
from typing import Tuple

from pydantic import BaseModel
from pydantic import BeforeValidator
from pydantic import ConfigDict
from pydantic import Field
from pydantic import PlainSerializer
from pydantic import ValidationInfo
from pydantic import field_validator
from pydantic.alias_generators import to_pascal

OUTSETA_DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%S"


def _parse_datetime(value: Any) -> Any:
    if isinstance(value, str):
        return datetime.strptime(value, OUTSETA_DATETIME_FORMAT)
    if isinstance(value, datetime):
        return value
    raise ValueError(f"Expected a {OUTSETA_DATETIME_FORMAT} timestamp, got {type(value).__name__}")


def _format_datetime(value: datetime) -> str:
    return value.strftime(OUTSETA_DATETIME_FORMAT)


OutsetaDateTime = Annotated[
    datetime,
    BeforeValidator(_parse_datetime),
    PlainSerializer(_format_datetime, return_type=str),
]

_TEXT_ANNOTATIONS = (str, Optional[str], Any, Optional[Any])


class OutsetaBaseModel(BaseModel):
    """Base model with common configuration.

    Attributes are snake_case in Python and PascalCase on the wire; fields
    whose wire name does not follow that rule declare an explicit alias.
    """

    model_config = ConfigDict(
        # Wire names are PascalCase
        alias_generator=to_pascal,
        # Allow population by field name and alias
        populate_by_name=True,
        # Use enum values instead of enum objects
        use_enum_values=True,
        # Validate field assignment
        validate_assignment=True,
        # The API adds fields over time
        extra="ignore",
        arbitrary_types_allowed=True,
    )

    @field_validator("*", mode="before")
    @classmethod
    def _empty_string_as_none(cls, value: Any, info: ValidationInfo) -> Any:
        if value == "" and info.field_name is not None:
            if cls.model_fields[info.field_name].annotation not in _TEXT_ANNOTATIONS:
                return None
        return value


class OutsetaEntity(OutsetaBaseModel):
    """Entity compared and hashed on a fixed set of fields.

    ``equality_fields`` names the identifying fields; ``None`` means every
    field takes part.
    """

    equality_fields: ClassVar[Optional[Tuple[str, ...]]] = None

    def _identity(self) -> Tuple[Any, ...]:
        names = self.equality_fields or tuple(type(self).model_fields)
        values = (getattr(self, name) for name in names)
        return tuple(tuple(value) if isinstance(value, list) else value for value in values)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash((type(self).__name__,) + self._identity())


class OutsetaRecord(OutsetaEntity):
    """Server-side record identified by its ``Uid``."""

    equality_fields: ClassVar[Optional[Tuple[str, ...]]] = ("uid",)

    uid: Optional[str] = Field(None, description="Unique identifier")
    created: Optional[OutsetaDateTime] = Field(None, description="Creation timestamp")
    updated: Optional[OutsetaDateTime] = Field(None, description="Last update timestamp")


# ============================================================================
# Enums
# ============================================================================

class AccountStage(IntEnum):
    """Lifecycle stage of an account."""
    TRIALING = 2
    SUBSCRIBING = 3
    CANCELLING = 4
    EXPIRED = 5
    TRIAL_EXPIRED = 6
    PAST_DUE = 7


class ActivityType(IntEnum):
    """Activity type enumeration."""
    CUSTOM = 10
    NOTE = 50
    EMAIL = 51
    PHONE_CALL = 52
    MEETING = 53
    ACCOUNT_CREATED = 100
    ACCOUNT_UPDATED = 101
    ACCOUNT_ADD_PERSON = 102
    ACCOUNT_STAGE_UPDATED = 103
    ACCOUNT_DELETED = 104
    ACCOUNT_BILLING_INFORMATION_UPDATED = 105
    PERSON_CREATED = 200
    PERSON_UPDATED = 201
    PERSON_DELETED = 202
    PERSON_LOGIN = 203
    PERSON_LIST_SUBSCRIBED = 204
    PERSON_LIST_UNSUBSCRIBED = 205
    PERSON_SEGMENT_ADDED = 206
    PERSON_SEGMENT_REMOVED = 207
    PERSON_EMAIL_OPENED = 208
    PERSON_EMAIL_CLICKED = 209
    PERSON_EMAIL_BOUNCE = 210
    PERSON_EMAIL_SPAM = 211
    PERSON_SUPPORT_TICKET_CREATED = 212
    PERSON_SUPPORT_TICKET_UPDATED = 213
    DEAL_CREATED = 300
    DEAL_UPDATED = 301
    DEAL_ADD_PERSON = 302
    DEAL_ADD_ACCOUNT = 303


class BillingRenewalTerm(IntEnum):
    """Billing renewal term enumeration."""
    MONTHLY = 1
    YEARLY = 2
    QUARTERLY = 3
    ONE_TIME = 4


class BillingTransactionType(IntEnum):
    """Billing transaction type enumeration."""
    INVOICE = 1
    PAYMENT = 2
    CREDIT = 3
    REFUND = 4
    CHARGEBACK = 5


class CaseSource(IntEnum):
    """Channel a support case came in through."""
    WEBSITE = 1
    EMAIL = 2
    FACEBOOK = 3
    TWITTER = 4


class CaseStatus(IntEnum):
    """Support case status enumeration."""
    OPEN = 1
    CLOSED = 2


class DiscountDuration(IntEnum):
    """How long a discount coupon applies."""
    FOREVER = 1
    ONCE = 2
    REPEATING = 3


class EntityType(IntEnum):
    """Entity an activity is attached to."""
    ACCOUNT = 1
    PERSON = 2
    DEAL = 3


class Sort(str, Enum):
    """Sort direction for page requests."""
    ASC = "ASC"
    DESC = "DESC"


# ============================================================================
# CRM Models
# ============================================================================

class Address(OutsetaRecord):
    """Postal address, used as both billing and mailing address."""

    address_line1: Optional[str] = Field(None, description="First address line")
    address_line2: Optional[str] = Field(None, description="Second address line")
    address_line3: Optional[str] = Field(None, description="Third address line")
    city: Optional[str] = Field(None, description="City")
    state: Optional[str] = Field(None, description="State or region")
    postal_code: Optional[str] = Field(None, description="Postal code")
    country: Optional[str] = Field(None, description="Country")
    geo_location: Optional[Any] = Field(None, description="Geolocation, kept as raw JSON")
    activity_event_data: Optional[Any] = Field(None, description="Activity event data, kept as raw JSON")


MailingAddress = Address


class Person(OutsetaRecord):
    """A person in the CRM."""

    email: Optional[str] = Field(None, description="Email address")
    first_name: Optional[str] = Field(None, description="First name")
    last_name: Optional[str] = Field(None, description="Last name")
    mailing_address: Optional[Address] = Field(None, description="Mailing address")
    password_last_updated: Optional[OutsetaDateTime] = Field(None, description="Last password change")
    password_must_change: Optional[bool] = Field(None, description="Password change required at next login")
    phone_mobile: Optional[str] = Field(None, description="Mobile phone")
    phone_work: Optional[str] = Field(None, description="Work phone")
    profile_image_s3_url: Optional[str] = Field(None, description="Profile image URL")
    title: Optional[str] = Field(None, description="Job title")
    timezone: Optional[str] = Field(None, description="Time zone")
    language: Optional[str] = Field(None, description="Preferred language")
    ip_address: Optional[str] = Field(None, alias="IPAddress", description="Last known IP address")
    referer: Optional[str] = Field(None, description="Referer")
    user_agent: Optional[str] = Field(None, description="Last known user agent")
    last_login_date_time: Optional[OutsetaDateTime] = Field(None, description="Last login")
    oauth_google_profile_id: Optional[str] = Field(
        None, alias="OAuthGoogleProfileId", description="Google OAuth profile ID"
    )
    person_account: Optional[List[PersonAccount]] = Field(None, description="Account memberships")
    email_bounce_date_time: Optional[OutsetaDateTime] = Field(None, description="Last bounce")
    email_spam_date_time: Optional[OutsetaDateTime] = Field(None, description="Last spam report")
    email_unsubscribe_date_time: Optional[OutsetaDateTime] = Field(None, description="Unsubscribe time")
    email_last_delivered_date_time: Optional[OutsetaDateTime] = Field(None, description="Last delivery")
    full_name: Optional[str] = Field(None, description="Full name")


class PersonAccount(OutsetaRecord):
    """Membership of a person in an account."""

    person: Optional[Person] = Field(None, description="Member")
    account: Optional[Account] = Field(None, description="Account")
    is_primary: Optional[bool] = Field(None, description="Primary contact of the account")
    receive_invoices: Optional[bool] = Field(None, description="Member receives invoices")
    activity_event_data: Optional[Any] = Field(None, description="Activity event data, kept as raw JSON")


class Account(OutsetaRecord):
    """A customer account."""

    name: Optional[str] = Field(None, description="Account name")
    client_identifier: Optional[str] = Field(None, description="Caller-defined identifier")
    billing_address: Optional[Address] = Field(None, description="Billing address")
    mailing_address: Optional[Address] = Field(None, description="Mailing address")
    account_stage: Optional[int] = Field(None, description="Stage, see AccountStage")
    payment_information: Optional[str] = Field(None, description="Payment information")
    person_account: Optional[List[PersonAccount]] = Field(None, description="Members")
    subscriptions: Optional[List[Subscription]] = Field(None, description="Subscriptions")


class Activity(OutsetaRecord):
    """Timeline activity on an account, person or deal."""

    equality_fields: ClassVar[Optional[Tuple[str, ...]]] = None

    title: Optional[str] = Field(None, description="Title")
    description: Optional[str] = Field(None, description="Description")
    activity_data: Optional[str] = Field(None, description="Free-form activity data")
    activity_date_time: Optional[OutsetaDateTime] = Field(None, description="When the activity happened")
    activity_type: Optional[int] = Field(None, description="Type, see ActivityType")
    entity_type: Optional[int] = Field(None, description="Entity kind, see EntityType")
    entity_uid: Optional[str] = Field(None, description="UID of the entity")


class DealPipelineStage(OutsetaRecord):
    """Reference to a stage of a deal pipeline."""


class DealPerson(OutsetaEntity):
    """Person attached to a deal."""

    person: Optional[Person] = Field(None, description="Person")


class Deal(OutsetaRecord):
    """A sales deal."""

    name: Optional[str] = Field(None, description="Deal name")
    deal_pipeline_stage: Optional[DealPipelineStage] = Field(None, description="Pipeline stage")
    amount: Optional[float] = Field(None, description="Deal amount")
    assigned_to_person_client_identifier: Optional[str] = Field(None, description="Owner")
    account: Optional[Account] = Field(None, description="Account of the deal")
    deal_people: Optional[List[DealPerson]] = Field(None, description="People on the deal")


# ============================================================================
# Billing Models
# ============================================================================

class PlanFamily(OutsetaRecord):
    """Group of related plans."""

    name: Optional[str] = Field(None, description="Family name")
    is_active: Optional[bool] = Field(None, description="Active flag")
    is_default: Optional[bool] = Field(None, description="Default family flag")
    plans: Optional[List[Plan]] = Field(None, description="Plans in the family")
    activity_event_data: Optional[Any] = Field(None, description="Activity event data, kept as raw JSON")


class Plan(OutsetaRecord):
    """A subscription plan."""

    name: Optional[str] = Field(None, description="Plan name")
    description: Optional[str] = Field(None, description="Description")
    plan_family: Optional[PlanFamily] = Field(None, description="Plan family")
    account_registration_mode: Optional[int] = Field(None, description="Registration mode")
    is_quantity_editable: Optional[bool] = Field(None, description="Quantity is editable")
    minimum_quantity: Optional[int] = Field(None, description="Minimum quantity")
    maximum_people: Optional[int] = Field(None, description="Maximum number of people")
    monthly_rate: Optional[float] = Field(None, description="Monthly rate")
    annual_rate: Optional[float] = Field(None, description="Annual rate")
    quarterly_rate: Optional[float] = Field(None, description="Quarterly rate")
    one_time_rate: Optional[float] = Field(None, description="One-time rate")
    setup_fee: Optional[float] = Field(None, description="Setup fee")
    is_taxable: Optional[bool] = Field(None, description="Taxable flag")
    is_active: Optional[bool] = Field(None, description="Active flag")
    is_per_user: Optional[bool] = Field(None, description="Billed per user")
    require_payment_information: Optional[bool] = Field(None, description="Payment details required")
    trial_period_days: Optional[int] = Field(None, description="Trial length in days")
    trial_until_date: Optional[OutsetaDateTime] = Field(None, description="Fixed trial end")
    expires_after_months: Optional[int] = Field(None, description="Expiry in months")
    expiration_date: Optional[OutsetaDateTime] = Field(None, description="Fixed expiry date")
    post_login_path: Optional[str] = Field(None, description="Redirect path after login")
    stripe_tax_code_id: Optional[str] = Field(None, description="Stripe tax code")
    unit_of_measure: Optional[str] = Field(None, description="Unit of measure")
    plan_add_ons: Optional[List[PlanAddOn]] = Field(None, description="Add-ons offered with the plan")
    content_groups: Optional[List[str]] = Field(None, description="Content groups")
    number_of_subscriptions: Optional[int] = Field(None, description="Subscription count")
    activity_event_data: Optional[Any] = Field(None, description="Activity event data, kept as raw JSON")


class AddOn(OutsetaRecord):
    """A billable add-on."""

    name: Optional[str] = Field(None, description="Add-on name")
    billing_add_on_type: Optional[int] = Field(None, description="Add-on type")
    is_quantity_editable: Optional[bool] = Field(None, description="Quantity is editable")
    minimum_quantity: Optional[int] = Field(None, description="Minimum quantity")
    monthly_rate: Optional[float] = Field(None, description="Monthly rate")
    annual_rate: Optional[float] = Field(None, description="Annual rate")
    setup_fee: Optional[float] = Field(None, description="Setup fee")
    unit_of_measure: Optional[str] = Field(None, description="Unit of measure")
    is_taxable: Optional[bool] = Field(None, description="Taxable flag")
    is_billed_during_trial: Optional[bool] = Field(None, description="Billed during trial")
    stripe_tax_code_id: Optional[str] = Field(None, description="Stripe tax code")
    plan_add_ons: Optional[List[PlanAddOn]] = Field(None, description="Plans offering the add-on")
    content_groups: Optional[List[str]] = Field(None, description="Content groups")
    subscription_count: Optional[int] = Field(None, description="Subscription count")
    quantity: Optional[int] = Field(None, description="Quantity")
    activity_event_data: Optional[Any] = Field(None, description="Activity event data, kept as raw JSON")


class PlanAddOn(OutsetaRecord):
    """Link between a plan and an add-on."""

    plan: Optional[Plan] = Field(None, description="Plan")
    add_on: Optional[AddOn] = Field(None, description="Add-on")
    is_user_selectable: Optional[bool] = Field(None, description="User may pick the add-on")
    activity_event_data: Optional[Any] = Field(None, description="Activity event data, kept as raw JSON")


class Subscription(OutsetaRecord):
    """Subscription of an account to a plan."""

    billing_renewal_term: Optional[int] = Field(None, description="Renewal term, see BillingRenewalTerm")
    account: Optional[Account] = Field(None, description="Subscribed account")
    plan: Optional[Plan] = Field(None, description="Plan")
    quantity: Optional[int] = Field(None, description="Quantity")
    start_date: Optional[OutsetaDateTime] = Field(None, description="Start date")
    end_date: Optional[OutsetaDateTime] = Field(None, description="End date")
    renewal_date: Optional[OutsetaDateTime] = Field(None, description="Next renewal")
    new_required_quantity: Optional[int] = Field(None, description="Quantity required after upgrade")
    is_plan_upgrade_required: Optional[bool] = Field(None, description="Plan upgrade required")
    plan_upgrade_required_message: Optional[str] = Field(None, description="Upgrade message")
    subscription_add_ons: Optional[List[SubscriptionAddOn]] = Field(None, description="Add-ons")


class SubscriptionAddOn(OutsetaRecord):
    """Add-on attached to a subscription."""

    billing_renewal_term: Optional[int] = Field(None, description="Renewal term, see BillingRenewalTerm")
    subscription: Optional[Subscription] = Field(None, description="Subscription")
    add_on: Optional[AddOn] = Field(None, description="Add-on")
    quantity: Optional[int] = Field(None, description="Quantity")
    start_date: Optional[OutsetaDateTime] = Field(None, description="Start date")
    end_date: Optional[OutsetaDateTime] = Field(None, description="End date")
    renewal_date: Optional[OutsetaDateTime] = Field(None, description="Next renewal")
    new_required_quantity: Optional[int] = Field(None, description="Quantity required after upgrade")


class Discount(OutsetaEntity):
    """A discount coupon."""

    equality_fields: ClassVar[Optional[Tuple[str, ...]]] = ("unique_identifier", "uid")

    unique_identifier: Optional[str] = Field(None, description="Coupon code")
    name: Optional[str] = Field(None, description="Name")
    is_active: Optional[bool] = Field(None, description="Active flag")
    amount_off: Optional[float] = Field(None, description="Fixed amount off")
    percent_off: Optional[int] = Field(None, description="Percentage off")
    duration: Optional[int] = Field(None, description="Duration, see DiscountDuration")
    duration_in_months: Optional[int] = Field(None, description="Months for repeating discounts")
    max_redemptions: Optional[int] = Field(None, description="Redemption limit")
    redeem_by: Optional[OutsetaDateTime] = Field(None, description="Last redemption date")
    discount_coupon_plans: Optional[List[Plan]] = Field(None, description="Plans the coupon applies to")
    uid: Optional[str] = Field(None, description="Unique identifier")


class InvoiceLineItem(OutsetaRecord):
    """Line item of an invoice."""

    start_date: Optional[OutsetaDateTime] = Field(None, description="Period start")
    end_date: Optional[OutsetaDateTime] = Field(None, description="Period end")
    description: Optional[str] = Field(None, description="Description")
    unit_of_measure: Optional[str] = Field(None, description="Unit of measure")
    quantity: Optional[int] = Field(None, description="Quantity")
    rate: Optional[float] = Field(None, description="Rate")
    amount: Optional[float] = Field(None, description="Amount")
    tax: Optional[float] = Field(None, description="Tax")
    invoice: Optional[Invoice] = Field(None, description="Owning invoice")


class InvoiceDisplayItem(OutsetaEntity):
    """Rendered invoice row."""

    equality_fields: ClassVar[Optional[Tuple[str, ...]]] = ("date",)

    date: Optional[OutsetaDateTime] = Field(None, description="Row date")
    start_date: Optional[OutsetaDateTime] = Field(None, description="Period start")
    end_date: Optional[OutsetaDateTime] = Field(None, description="Period end")
    type: Optional[str] = Field(None, description="Row type")
    description: Optional[str] = Field(None, description="Description")
    original_description: Optional[str] = Field(None, description="Description before edits")
    amount: Optional[float] = Field(None, description="Amount")
    tax: Optional[float] = Field(None, description="Tax")
    total: Optional[float] = Field(None, description="Total")
    quantity: Optional[int] = Field(None, description="Quantity")
    units: Optional[str] = Field(None, description="Units")
    quantity_and_units: Optional[str] = Field(None, description="Formatted quantity")
    line_item_type: Optional[int] = Field(None, description="Line item type")
    line_item_entity_uid: Optional[str] = Field(None, description="UID of the billed entity")


class Invoice(OutsetaRecord):
    """An invoice."""

    invoice_date: Optional[OutsetaDateTime] = Field(None, description="Invoice date")
    number: Optional[int] = Field(None, description="Invoice number")
    billing_invoice_status: Optional[int] = Field(None, description="Status")
    subscription: Optional[Subscription] = Field(None, description="Invoiced subscription")
    amount: Optional[float] = Field(None, description="Amount")
    amount_outstanding: Optional[float] = Field(None, description="Outstanding amount")
    invoice_line_items: Optional[List[InvoiceLineItem]] = Field(None, description="Line items")
    is_user_generated: Optional[bool] = Field(None, description="Created by a user")
    subtotal: Optional[float] = Field(None, description="Subtotal")
    tax: Optional[float] = Field(None, description="Tax")
    tax_behaviour: Optional[str] = Field(None, description="Tax behaviour")
    paid: Optional[float] = Field(None, description="Paid amount")
    invoice_display_items: Optional[List[InvoiceDisplayItem]] = Field(None, description="Display rows")
    total: Optional[float] = Field(None, description="Total")
    balance: Optional[float] = Field(None, description="Balance")


class Transaction(OutsetaRecord):
    """A billing transaction."""

    transaction_date: Optional[OutsetaDateTime] = Field(None, description="Transaction date")
    billing_transaction_type: Optional[int] = Field(None, description="Type, see BillingTransactionType")
    account: Optional[Account] = Field(None, description="Account")
    invoice: Optional[Invoice] = Field(None, description="Invoice")
    amount: Optional[float] = Field(None, description="Amount")


# ============================================================================
# Marketing Models
# ============================================================================

class EmailList(OutsetaRecord):
    """A marketing email list."""

    name: Optional[str] = Field(None, description="List name")
    welcome_subject: Optional[str] = Field(None, description="Welcome email subject")
    welcome_body: Optional[str] = Field(None, description="Welcome email body")
    welcome_from_name: Optional[str] = Field(None, description="Welcome email sender name")
    welcome_from_email: Optional[str] = Field(None, description="Welcome email sender address")
    email_list_person: Optional[List[Person]] = Field(None, description="Subscribed people")
    count_subscriptions_active: Optional[int] = Field(None, description="Active subscriptions")
    count_subscriptions_bounce: Optional[int] = Field(None, description="Bounced subscriptions")
    count_subscriptions_spam: Optional[int] = Field(None, description="Spam reports")
    count_subscriptions_unsubscribed: Optional[int] = Field(None, description="Unsubscribed")


class MarketingSubscription(OutsetaRecord):
    """Subscription of a person to an email list."""

    person: Optional[Person] = Field(None, description="Subscriber")
    email_list: Optional[EmailList] = Field(None, description="Email list")
    email_list_subscriber_status: Optional[int] = Field(None, description="Subscriber status")
    subscribed_date: Optional[OutsetaDateTime] = Field(None, description="Subscription date")
    confirmed_date: Optional[OutsetaDateTime] = Field(None, description="Confirmation date")
    unsubscribed_date: Optional[OutsetaDateTime] = Field(None, description="Unsubscribe date")
    cleaned_date: Optional[OutsetaDateTime] = Field(None, description="Cleaned date")
    welcome_email_deliver_date_time: Optional[OutsetaDateTime] = Field(None, description="Welcome email sent")
    welcome_email_open_date_time: Optional[OutsetaDateTime] = Field(None, description="Welcome email opened")
    unsubscribe_reason: Optional[str] = Field(None, description="Unsubscribe reason")
    unsubscribe_reason_other: Optional[str] = Field(None, description="Free-form unsubscribe reason")
    send_welcome_email: Optional[bool] = Field(None, description="Send the welcome email")


# ============================================================================
# Support Models
# ============================================================================

class Case(OutsetaRecord):
    """A support case."""

    submitted_date_time: Optional[OutsetaDateTime] = Field(None, description="Submission time")
    from_person: Optional[Person] = Field(None, description="Submitter")
    assigned_to_person_client_identifier: Optional[str] = Field(None, description="Assignee")
    subject: Optional[str] = Field(None, description="Subject")
    body: Optional[str] = Field(None, description="Body")
    user_agent: Optional[str] = Field(None, description="Submitter user agent")
    status: Optional[int] = Field(None, description="Status, see CaseStatus")
    source: Optional[int] = Field(None, description="Source, see CaseSource")
    case_histories: Optional[List[CaseHistory]] = Field(None, description="History entries")


class CaseHistory(OutsetaRecord):
    """History entry of a support case."""

    history_date_time: Optional[OutsetaDateTime] = Field(None, description="Entry time")
    case: Optional[Case] = Field(None, description="Owning case")
    agent_name: Optional[str] = Field(None, description="Agent name")
    comment: Optional[str] = Field(None, description="Comment")
    type: Optional[int] = Field(None, description="Entry type")
    seen_date_time: Optional[OutsetaDateTime] = Field(None, description="Seen by the client")
    click_date_time: Optional[OutsetaDateTime] = Field(None, description="Clicked by the client")


class CaseReply(OutsetaEntity):
    """Agent reply to a support case."""

    agent_name: Optional[str] = Field(None, description="Agent name")
    case: Optional[Case] = Field(None, description="Case replied to")
    comment: Optional[str] = Field(None, description="Reply text")


# ============================================================================
# Authentication Models
# ============================================================================

class AuthToken(OutsetaEntity):
    """Access token issued for a user."""

    access_token: Optional[str] = Field(None, alias="access_token", description="Access token")
    token_type: Optional[str] = Field(None, alias="token_type", description="Token type")
    expires_in: Optional[int] = Field(None, alias="expires_in", description="Lifetime in seconds")


# ============================================================================
# Request Models
# ============================================================================

class GetAuthTokenRequest(OutsetaEntity):
    """Credentials exchanged for an access token."""

    username: Optional[str] = Field(None, alias="username")
    password: Optional[str] = Field(None, alias="password", repr=False)


class TemporaryPasswordRequest(OutsetaEntity):
    """Temporary password for a person."""

    temporary_password: Optional[str] = Field(None, alias="temporaryPassword", repr=False)


class UpdatePasswordRequest(OutsetaEntity):
    """Password change of the current user."""

    existing_password: Optional[str] = Field(None, repr=False)
    new_password: Optional[str] = Field(None, repr=False)


class CancelAccountRequest(OutsetaEntity):
    """Account cancellation."""

    cancellation_reason: Optional[str] = Field(None, alias="CancelationReason", description="Reason")
    comment: Optional[str] = Field(None, description="Comment")
    account: Optional[Account] = Field(None, description="Account being cancelled")


class CreateOrChangeSubscriptionRequest(OutsetaEntity):
    """New or changed subscription of an account."""

    plan: Optional[Plan] = Field(None, description="Plan to subscribe to")
    billing_renewal_term: Optional[int] = Field(None, description="Renewal term, see BillingRenewalTerm")
    subscription_add_ons: Optional[List[SubscriptionAddOn]] = Field(None, description="Add-ons")
    account: Optional[Account] = Field(None, description="Account")


class UpdatePaymentInfoRequest(OutsetaEntity):
    """Payment details of an account."""

    account: Optional[Account] = Field(None, description="Account")
    customer_token: Optional[str] = Field(None, description="Payment provider customer token")
    name_on_card: Optional[str] = Field(None, description="Card holder")
    payment_token: Optional[str] = Field(None, description="Payment provider token")


class AddOnUsageRequest(OutsetaEntity):
    """Usage report for a metered add-on."""

    usage_date: Optional[OutsetaDateTime] = Field(None, description="Usage date")
    amount: Optional[int] = Field(None, description="Used amount")
    subscription_add_on: Optional[SubscriptionAddOn] = Field(None, description="Metered add-on")


for _model in (
    Address, Person, PersonAccount, Account, Activity, DealPipelineStage, DealPerson, Deal,
    PlanFamily, Plan, AddOn, PlanAddOn, Subscription, SubscriptionAddOn, Discount,
    InvoiceLineItem, InvoiceDisplayItem, Invoice, Transaction, EmailList,
    MarketingSubscription, Case, CaseHistory, CaseReply, CancelAccountRequest,
    CreateOrChangeSubscriptionRequest, UpdatePaymentInfoRequest, AddOnUsageRequest,
):
    _model.model_rebuild()
