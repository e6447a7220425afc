"""Base class for REST API endpoint clients."""

from __future__ import annotations

from typing import Any
from typing import ClassVar
from typing import Dict
from typing import Mapping
from typing import Optional
from typing import Type
from typing import TypeVar

from outseta.client import ClientBuilder
from outseta.config import AUTHORIZATION_HEADER
from outseta.config import ClientConfiguration
from outseta.errors import OutsetaInvalidArgumentError
from outseta.http import RequestMaker
from outseta.models import OutsetaBaseModel
from outseta.pagination import ItemPage
from outseta.pagination import PageRequest
from outseta.parser import ParserFacade

T = TypeVar("T", bound=OutsetaBaseModel)


class BaseClient:
    """Base class for REST API endpoint clients.

    Instances are created by ``SomeClient.builder(base_url)...build()``,
    which validates the configuration first. Errors raised by the request
    maker or the parser propagate unchanged.

    Header changes through :meth:`update_headers` and :meth:`replace_headers`
    are not synchronized; callers sharing a client across threads must
    serialize them.
    """

    builder_class: ClassVar[Type[ClientBuilder]] = ClientBuilder

    def __init__(self, configuration: ClientConfiguration) -> None:
        """Initialize base client.

        Args:
            configuration: Complete configuration, as produced by the builder

        Raises:
            OutsetaClientBuildError: Incomplete configuration
        """
        configuration.validate()
        self._configuration = configuration

    @classmethod
    def builder(cls, base_url: str) -> ClientBuilder:
        """Start building a client of this class.

        Args:
            base_url: API base URL

        Returns:
            Client builder
        """
        return cls.builder_class(cls, base_url)

    @property
    def configuration(self) -> ClientConfiguration:
        return self._configuration

    @property
    def base_url(self) -> str:
        return self._configuration.base_url

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self._configuration.headers)

    @property
    def parser(self) -> ParserFacade:
        return self._configuration.parser

    @property
    def request_maker(self) -> RequestMaker:
        return self._configuration.request_maker

    def is_headers_valid(self) -> bool:
        """Whether the headers still carry an authorization entry."""
        return AUTHORIZATION_HEADER in self._configuration.headers

    def update_headers(self, headers: Mapping[str, str]) -> None:
        """Merge headers into the current ones; given values win."""
        merged = dict(self._configuration.headers)
        merged.update(headers)
        self._configuration = self._configuration.with_headers(merged)

    def replace_headers(self, headers: Mapping[str, str]) -> None:
        """Replace all headers, including the authorization entry."""
        self._configuration = self._configuration.with_headers(headers)

    # ------------------------------------------------------------------
    # HTTP helpers
    # ------------------------------------------------------------------

    def _url(self, path: str) -> str:
        return self._configuration.base_url + path

    def _get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> str:
        return self.request_maker.get(self._url(path), params or {}, self.headers)

    def _post(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        payload: Optional[str] = None,
    ) -> str:
        return self.request_maker.post(self._url(path), params or {}, payload, self.headers)

    def _put(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        payload: Optional[str] = None,
    ) -> str:
        return self.request_maker.put(self._url(path), params or {}, payload, self.headers)

    def _patch(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        payload: Optional[str] = None,
    ) -> str:
        return self.request_maker.patch(self._url(path), params or {}, payload, self.headers)

    def _delete(self, path: str, params: Optional[Mapping[str, Any]] = None) -> str:
        return self.request_maker.delete(self._url(path), params or {}, self.headers)

    # ------------------------------------------------------------------
    # Request/parse template
    # ------------------------------------------------------------------

    @staticmethod
    def _require_id(value: Optional[str], label: str) -> str:
        """Validate a path identifier.

        Raises:
            OutsetaInvalidArgumentError: ``value`` is missing or blank
        """
        if value is None or not str(value).strip():
            raise OutsetaInvalidArgumentError(f"{label} cannot be null or blank.")
        return value

    @staticmethod
    def _require(value: Any, label: str) -> Any:
        """Validate a required request object.

        Raises:
            OutsetaInvalidArgumentError: ``value`` is missing
        """
        if value is None:
            raise OutsetaInvalidArgumentError(f"{label} cannot be null.")
        return value

    def _get_object(
        self,
        path: str,
        model_class: Type[T],
        *,
        params: Optional[Mapping[str, Any]] = None,
    ) -> T:
        """GET a single object.

        Args:
            path: Path below the base URL
            model_class: Pydantic model class
            params: Query parameters

        Returns:
            Parsed object
        """
        return self.parser.json_string_to_object(self._get(path, params), model_class)

    def _get_page(
        self,
        path: str,
        model_class: Type[T],
        page_request: PageRequest,
    ) -> ItemPage[T]:
        """GET a page of objects.

        Args:
            path: Path below the base URL
            model_class: Pydantic model class of the items
            page_request: Page to fetch

        Returns:
            Parsed page

        Raises:
            OutsetaInvalidArgumentError: Missing page request
        """
        self._require(page_request, "Page request")
        return self.parser.json_string_to_page(
            self._get(path, page_request.build_params()), model_class
        )

    def _send(
        self,
        method: str,
        path: str,
        body: Optional[OutsetaBaseModel],
        *,
        params: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Serialize ``body`` and send it.

        A ``None`` body is sent as an empty payload.

        Raises:
            ValueError: ``method`` is not POST, PUT or PATCH
        """
        senders = {"POST": self._post, "PUT": self._put, "PATCH": self._patch}
        if method not in senders:
            raise ValueError(f"Cannot send a body with {method}")
        payload = "" if body is None else self.parser.object_to_json_string(body)
        return senders[method](path, params, payload)

    def _post_object(
        self,
        path: str,
        body: Optional[OutsetaBaseModel],
        model_class: Type[T],
        *,
        params: Optional[Mapping[str, Any]] = None,
    ) -> T:
        """POST a body and parse the response object."""
        return self.parser.json_string_to_object(
            self._send("POST", path, body, params=params), model_class
        )

    def _put_object(
        self,
        path: str,
        body: Optional[OutsetaBaseModel],
        model_class: Type[T],
        *,
        params: Optional[Mapping[str, Any]] = None,
    ) -> T:
        """PUT a body and parse the response object."""
        return self.parser.json_string_to_object(
            self._send("PUT", path, body, params=params), model_class
        )
