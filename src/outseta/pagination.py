"""Page requests and typed result pages."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from dataclasses import replace
from typing import Any
from typing import Dict
from typing import Generic
from typing import List
from typing import Mapping
from typing import Optional
from typing import TypeVar

from pydantic import Field

from outseta.errors import OutsetaPageBuildError
from outseta.models import AccountStage
from outseta.models import ActivityType
from outseta.models import BillingTransactionType
from outseta.models import EntityType
from outseta.models import OutsetaBaseModel
from outseta.models import Sort

T = TypeVar("T")

MAX_PAGE_SIZE = 25


class Metadata(OutsetaBaseModel):
    """Paging metadata returned with every page."""

    limit: int = Field(0, alias="limit", description="Page size used by the server")
    offset: int = Field(0, alias="offset", description="Offset of the page")
    total: int = Field(0, alias="total", description="Total number of items across all pages")


class ItemPage(OutsetaBaseModel, Generic[T]):
    """One page of typed results.

    ``metadata.total`` is authoritative when looping over pages; the number
    of items never exceeds ``metadata.limit``.
    """

    metadata: Metadata = Field(..., alias="metadata", description="Paging metadata")
    items: List[T] = Field(..., alias="items", description="Items on this page")


@dataclass(frozen=True)
class PageRequest:
    """Offset/limit page request.

    Unset ``page`` and ``page_size`` are left out of the query string
    entirely, so the server applies its own defaults.

    Example:
        request = PageRequest(page=0, page_size=25, order_by="Created", order_by_direction=Sort.DESC)
        page = client.get_plan_page(request)
        while page.items and (request.page + 1) * request.page_size < page.metadata.total:
            request = request.next_page_request()
            page = client.get_plan_page(request)
    """

    page: Optional[int] = None
    page_size: Optional[int] = None
    custom_params: Mapping[str, Any] = field(default_factory=dict, hash=False)
    order_by: Optional[str] = None
    order_by_direction: Optional[Sort] = None

    def __post_init__(self) -> None:
        if self.page is not None and self.page < 0:
            raise OutsetaPageBuildError("The page number cannot be negative.")
        if self.page_size is not None and not 0 < self.page_size <= MAX_PAGE_SIZE:
            raise OutsetaPageBuildError(
                f"The page size must be between 1 and {MAX_PAGE_SIZE}."
            )
        object.__setattr__(self, "custom_params", dict(self.custom_params or {}))

    def build_params(self) -> Dict[str, Any]:
        """Build the query parameters for this request.

        Returns:
            Custom parameters followed by ``offset``, ``limit`` and ``orderBy``
            where set
        """
        params: Dict[str, Any] = dict(self.custom_params)

        if self.page is not None:
            offset = self.page * self.page_size if self.page_size is not None else self.page
            params["offset"] = str(offset)

        if self.page_size is not None:
            params["limit"] = str(self.page_size)

        if self.order_by and self.order_by.strip():
            direction = Sort(self.order_by_direction or Sort.ASC)
            params["orderBy"] = f"{self.order_by}+{direction.value}"

        return params

    def next_page_request(self) -> PageRequest:
        """Request for the following page, with every other field unchanged."""
        return replace(self, page=(self.page or 0) + 1)


@dataclass(frozen=True)
class AccountPageRequest(PageRequest):
    """Page request for accounts, optionally filtered by stage."""

    account_stage: Optional[AccountStage] = None

    def build_params(self) -> Dict[str, Any]:
        params = super().build_params()
        if self.account_stage is not None:
            params["AccountStage"] = int(self.account_stage)
        return params


@dataclass(frozen=True)
class ActivityPageRequest(PageRequest):
    """Page request for activities, optionally filtered by entity and type."""

    entity_type: Optional[EntityType] = None
    activity_type: Optional[ActivityType] = None

    def build_params(self) -> Dict[str, Any]:
        params = super().build_params()
        if self.entity_type is not None:
            params["EntityType"] = int(self.entity_type)
        if self.activity_type is not None:
            params["ActivityType"] = int(self.activity_type)
        return params


@dataclass(frozen=True)
class TransactionPageRequest(PageRequest):
    """Page request for billing transactions, optionally filtered by type."""

    billing_transaction_type: Optional[BillingTransactionType] = None

    def build_params(self) -> Dict[str, Any]:
        params = super().build_params()
        if self.billing_transaction_type is not None:
            params["BillingTransactionType"] = int(self.billing_transaction_type)
        return params
