"""REST API endpoint clients for Outseta."""

from outseta.rest.base import BaseClient
from outseta.rest.billing import AddOnClient
from outseta.rest.billing import DiscountClient
from outseta.rest.billing import InvoiceClient
from outseta.rest.billing import PlanClient
from outseta.rest.billing import PlanFamilyClient
from outseta.rest.billing import SubscriptionClient
from outseta.rest.billing import UpdatePaymentInfoClient
from outseta.rest.crm import AccountClient
from outseta.rest.crm import ActivityClient
from outseta.rest.crm import DealClient
from outseta.rest.crm import PeopleClient
from outseta.rest.marketing import MarketingClient
from outseta.rest.profile import AuthenticationClient
from outseta.rest.profile import ProfileClient
from outseta.rest.support import SupportClient

__all__ = [
    "AccountClient",
    "ActivityClient",
    "AddOnClient",
    "AuthenticationClient",
    "BaseClient",
    "DealClient",
    "DiscountClient",
    "InvoiceClient",
    "MarketingClient",
    "PeopleClient",
    "PlanClient",
    "PlanFamilyClient",
    "ProfileClient",
    "SubscriptionClient",
    "SupportClient",
    "UpdatePaymentInfoClient",
]
