"""Fluent construction of Outseta endpoint clients."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from typing import Dict
from typing import Generic
from typing import Mapping
from typing import Optional
from typing import Type
from typing import TypeVar
from typing import Union

from outseta.config import AUTHORIZATION_HEADER
from outseta.config import DEFAULT_HEADERS
from outseta.config import ClientConfiguration
from outseta.env_config import load_config_from_env
from outseta.errors import OutsetaClientBuildError
from outseta.http import RequestMaker
from outseta.http import RequestMakerType
from outseta.http import create_request_maker
from outseta.parser import ParserFacade
from outseta.parser import PydanticJsonParser

if TYPE_CHECKING:
    from outseta.rest.base import BaseClient

logger = logging.getLogger(__name__)

C = TypeVar("C", bound="BaseClient")


class ClientBuilder(Generic[C]):
    """Builder collecting the configuration of one endpoint client.

    Every endpoint client is created through its ``builder()`` factory:

        client = (
            PlanClient.builder("https://example.outseta.com/api/v1")
            .api_key("Outseta <key>:<secret>")
            .default_parser()
            .default_request_maker()
            .build()
        )

    The base URL, an API or access key, a parser and a request maker are all
    required; the order of the calls does not matter.
    """

    def __init__(self, client_class: Type[C], base_url: str) -> None:
        """Initialize builder.

        Args:
            client_class: Endpoint client class to build
            base_url: API base URL, e.g. ``https://<domain>.outseta.com/api/v1``

        Raises:
            OutsetaClientBuildError: Missing or blank base URL
        """
        if base_url is None:
            raise OutsetaClientBuildError("Cannot initialize with null base url.")
        if not base_url.strip():
            raise OutsetaClientBuildError("The base url cannot be blank.")

        self._client_class = client_class
        self._base_url = base_url
        self._headers: Dict[str, str] = dict(DEFAULT_HEADERS)
        self._parser: Optional[ParserFacade] = None
        self._request_maker: Optional[RequestMaker] = None

    @staticmethod
    def from_env(client_class: Type[C], dotenv_path: Optional[str] = None) -> ClientBuilder[C]:
        """Create a builder from ``OUTSETA_*`` environment variables.

        The default parser and the configured request maker are applied. The
        access key is used when present, otherwise the API key.

        Args:
            client_class: Endpoint client class to build
            dotenv_path: Optional path of the .env file to read

        Returns:
            Builder ready for ``build()`` when credentials were found
        """
        env = load_config_from_env(dotenv_path)
        builder = client_class.builder(env.base_url)
        if env.access_key:
            builder.access_key(env.access_key)
        elif env.api_key:
            builder.api_key(env.api_key)
        return builder.default_parser().request_maker(env.request_maker)

    @staticmethod
    def _require_text(value: Optional[str], label: str) -> str:
        if value is None:
            raise OutsetaClientBuildError(f"The {label} cannot be null.")
        if not value.strip():
            raise OutsetaClientBuildError(f"The {label} cannot be blank.")
        return value

    def api_key(self, api_key: str) -> ClientBuilder[C]:
        """Authenticate with a server-side API key.

        The key is sent as the ``Authorization`` header exactly as given.
        """
        self._headers[AUTHORIZATION_HEADER] = self._require_text(api_key, "api key")
        return self

    def access_key(self, access_key: str) -> ClientBuilder[C]:
        """Authenticate with a user access token, sent as a bearer token."""
        self._headers[AUTHORIZATION_HEADER] = f"Bearer {self._require_text(access_key, 'access key')}"
        return self

    def headers(self, headers: Mapping[str, str]) -> ClientBuilder[C]:
        """Merge extra headers; given values replace existing ones."""
        if headers is None:
            raise OutsetaClientBuildError("The headers cannot be null.")
        self._headers.update(headers)
        return self

    def request_maker(
        self,
        request_maker: Union[RequestMaker, RequestMakerType, str],
    ) -> ClientBuilder[C]:
        """Set the request maker.

        Args:
            request_maker: Request maker instance, type, or type name

        Raises:
            OutsetaInvalidRequestMakerError: Unknown, blank or missing type
        """
        if isinstance(request_maker, RequestMaker):
            self._request_maker = request_maker
        else:
            self._request_maker = create_request_maker(request_maker)
        return self

    def default_request_maker(self) -> ClientBuilder[C]:
        """Use the built-in httpx request maker."""
        return self.request_maker(RequestMakerType.DEFAULT)

    def parser(self, parser: ParserFacade) -> ClientBuilder[C]:
        """Set the parser facade."""
        if parser is None:
            raise OutsetaClientBuildError("The parser cannot be null.")
        self._parser = parser
        return self

    def default_parser(self) -> ClientBuilder[C]:
        """Use the built-in pydantic parser."""
        return self.parser(ParserFacade(PydanticJsonParser()))

    def build(self) -> C:
        """Build the client.

        Returns:
            Endpoint client owning a validated configuration

        Raises:
            OutsetaClientBuildError: A required setting is missing
        """
        configuration = ClientConfiguration(
            base_url=self._base_url,
            headers=self._headers,
            parser=self._parser,
            request_maker=self._request_maker,
        )
        configuration.validate()
        logger.debug(f"Building {self._client_class.__name__} for {self._base_url}")
        return self._client_class(configuration)


class ProfileClientBuilder(ClientBuilder[C]):
    """Builder for clients acting as a signed-in user, which need an access key."""

    def api_key(self, api_key: str) -> ClientBuilder[C]:
        raise OutsetaClientBuildError("The ProfileClient cannot be built with an api key.")
