"""Endpoints acting as a user: profile and token issuing."""

from __future__ import annotations

from typing import ClassVar
from typing import Type

from outseta.client import ClientBuilder
from outseta.client import ProfileClientBuilder
from outseta.models import AuthToken
from outseta.models import GetAuthTokenRequest
from outseta.models import Person
from outseta.models import UpdatePasswordRequest
from outseta.rest.base import BaseClient


class ProfileClient(BaseClient):
    """Profile of the signed-in user.

    Must be built with ``access_key()``; ``api_key()`` is rejected.
    """

    builder_class: ClassVar[Type[ClientBuilder]] = ProfileClientBuilder

    def get_profile(self) -> Person:
        """Get the signed-in user."""
        return self._get_object("/profile", Person)

    def update_profile(self, profile: Person) -> Person:
        """Update the signed-in user."""
        self._require(profile, "Profile request")
        return self._put_object("/profile", profile, Person)

    def update_password(self, password_request: UpdatePasswordRequest) -> None:
        """Change the password of the signed-in user."""
        self._require(password_request, "Update password request")
        self._send("PUT", "/profile/password", password_request)


class AuthenticationClient(BaseClient):
    """Issues access tokens for users."""

    def get_auth_token(self, username: str, password: str) -> AuthToken:
        """Exchange user credentials for an access token.

        Args:
            username: User email
            password: User password

        Returns:
            Access token, usable with ``ClientBuilder.access_key()``

        Raises:
            OutsetaInvalidArgumentError: Missing or blank username or password
        """
        self._require_id(username, "Username")
        self._require_id(password, "Password")
        request = GetAuthTokenRequest(username=username, password=password)
        return self._post_object("/tokens", request, AuthToken)
