"""
Client configuration for the Outseta SDK.

A :class:`ClientConfiguration` is produced by
:class:`~outseta.client.ClientBuilder` and owned by exactly one client. It is
frozen: header changes made through a client replace the configuration
object instead of mutating it.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from dataclasses import replace
from typing import TYPE_CHECKING
from typing import Any
from typing import Dict
from typing import Mapping
from typing import Optional

from outseta.errors import OutsetaClientBuildError

if TYPE_CHECKING:
    from outseta.http import RequestMaker
    from outseta.parser import ParserFacade

AUTHORIZATION_HEADER = "Authorization"

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


@dataclass(frozen=True)
class ClientConfiguration:
    """Validated settings shared by every request a client makes."""
    base_url: str
    headers: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_HEADERS))
    parser: Optional[ParserFacade] = None
    request_maker: Optional[RequestMaker] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", dict(self.headers or {}))

    def validate(self) -> None:
        """Validate configuration completeness.

        Raises:
            OutsetaClientBuildError: A required setting is missing or blank
        """
        if self.base_url is None:
            raise OutsetaClientBuildError("Cannot initialize with null base url.")
        if not self.base_url.strip():
            raise OutsetaClientBuildError("The base url cannot be blank.")
        if not self.headers.get(AUTHORIZATION_HEADER, "").strip():
            raise OutsetaClientBuildError(
                "Either an api key or an access key is required to build the client."
            )
        if self.parser is None:
            raise OutsetaClientBuildError("A parser is required to build the client.")
        if self.request_maker is None:
            raise OutsetaClientBuildError("A request maker is required to build the client.")

    def with_headers(self, headers: Mapping[str, str]) -> ClientConfiguration:
        """Copy of this configuration with ``headers`` in place of the current ones."""
        return replace(self, headers=dict(headers))

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary, without header values."""
        return {
            "base_url": self.base_url,
            "headers": sorted(self.headers),
            "parser": type(self.parser).__name__ if self.parser else None,
            "request_maker": type(self.request_maker).__name__ if self.request_maker else None,
        }
