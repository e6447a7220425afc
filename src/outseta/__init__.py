"""Outseta Python SDK - typed client for the Outseta CRM and billing API."""

__version__ = "1.0.0"

from .client import ClientBuilder
from .errors import ErrorKind
from .errors import OutsetaAPIError
from .errors import OutsetaBadRequestError
from .errors import OutsetaClientBuildError
from .errors import OutsetaError
from .errors import OutsetaFailedError
from .errors import OutsetaInvalidArgumentError
from .errors import OutsetaInvalidRequestMakerError
from .errors import OutsetaInvalidURLError
from .errors import OutsetaPageBuildError
from .errors import OutsetaParseError
from .errors import OutsetaUnknownError
from .http import HttpxRequestMaker
from .http import RequestMaker
from .http import RequestMakerType
from .pagination import AccountPageRequest
from .pagination import ActivityPageRequest
from .pagination import ItemPage
from .pagination import Metadata
from .pagination import PageRequest
from .pagination import TransactionPageRequest
from .parser import JsonParser
from .parser import ParserFacade
from .parser import PydanticJsonParser
from .rest import AccountClient
from .rest import ActivityClient
from .rest import AddOnClient
from .rest import AuthenticationClient
from .rest import DealClient
from .rest import DiscountClient
from .rest import InvoiceClient
from .rest import MarketingClient
from .rest import PeopleClient
from .rest import PlanClient
from .rest import PlanFamilyClient
from .rest import ProfileClient
from .rest import SubscriptionClient
from .rest import SupportClient
from .rest import UpdatePaymentInfoClient

__all__ = [
    "AccountClient",
    "AccountPageRequest",
    "ActivityClient",
    "ActivityPageRequest",
    "AddOnClient",
    "AuthenticationClient",
    "ClientBuilder",
    "DealClient",
    "DiscountClient",
    "ErrorKind",
    "HttpxRequestMaker",
    "InvoiceClient",
    "ItemPage",
    "JsonParser",
    "MarketingClient",
    "Metadata",
    "OutsetaAPIError",
    "OutsetaBadRequestError",
    "OutsetaClientBuildError",
    "OutsetaError",
    "OutsetaFailedError",
    "OutsetaInvalidArgumentError",
    "OutsetaInvalidRequestMakerError",
    "OutsetaInvalidURLError",
    "OutsetaPageBuildError",
    "OutsetaParseError",
    "OutsetaUnknownError",
    "PageRequest",
    "ParserFacade",
    "PeopleClient",
    "PlanClient",
    "PlanFamilyClient",
    "ProfileClient",
    "PydanticJsonParser",
    "RequestMaker",
    "RequestMakerType",
    "SubscriptionClient",
    "SupportClient",
    "TransactionPageRequest",
    "UpdatePaymentInfoClient",
    "__version__",
]
