"""Interactors that talk to the Crowd usermanagement REST API.

Each interactor performs one named interaction and returns an ``Either``:
the success model on HTTP 200, the Crowd error model on any other status.
Transport failures are not converted; they propagate to the caller.

Usage:
    auth = authentication("http://localhost:8095/crowd", "appName", "appPass")
    result = auth.execute("userName", "userPass")

    if not result.is_error():
        print(result.get_value())
    else:
        print(result.get_error())
"""

import logging
from dataclasses import dataclass, field

import httpx

from crowdcontrol.config import CrowdConfig
from crowdcontrol.either import Either
from crowdcontrol.errors import InvalidArgumentError, check_not_none
from crowdcontrol.models import (
    AuthenticationError,
    AuthenticationRequest,
    AuthenticationResponse,
    GroupError,
    GroupResponse,
)

logger = logging.getLogger("crowdcontrol.http")

AUTHENTICATION_PATH = "/rest/usermanagement/latest/authentication"
GROUP_DIRECT_PATH = "/rest/usermanagement/latest/group/user/direct"


@dataclass(frozen=True)
class Credentials:
    """Crowd base URL plus the calling application's name and password."""

    base_url: str
    app_name: str
    app_password: str = field(repr=False)

    def __post_init__(self) -> None:
        check_not_none(self.base_url, "base_url")
        check_not_none(self.app_name, "app_name")
        check_not_none(self.app_password, "app_password")
        if not self.app_name:
            raise InvalidArgumentError("app_name cannot be empty")
        if not self.app_password:
            raise InvalidArgumentError("app_password cannot be empty")


class _Interactor:
    def __init__(
        self,
        base_url: str,
        app_name: str,
        app_password: str,
        *,
        timeout: float = 10.0,
        verify: bool = True,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.credentials = Credentials(base_url, app_name, app_password)
        self.timeout = timeout
        self.verify = verify
        self.transport = transport

    def _client(self) -> httpx.Client:
        return httpx.Client(
            base_url=self.credentials.base_url,
            auth=httpx.BasicAuth(self.credentials.app_name, self.credentials.app_password),
            headers={"Accept": "application/json"},
            timeout=self.timeout,
            verify=self.verify,
            transport=self.transport,
        )

    def _send(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            with self._client() as client:
                return client.request(method, path, **kwargs)
        except httpx.TransportError as e:
            logger.error(f"Failed to reach Crowd at {self.credentials.base_url}: {e}")
            raise


class AuthenticationInteractor(_Interactor):
    """Authenticates a user's password against Crowd."""

    def execute(
        self, username: str, password: str
    ) -> Either[AuthenticationResponse, AuthenticationError]:
        """Authenticate ``username`` with ``password``.

        Returns the user entity on success, or Crowd's reason for refusing
        (bad password, unknown user, inactive account and so on).
        """
        check_not_none(username, "username")
        check_not_none(password, "password")

        logger.debug(f"Authenticating {username} against {self.credentials.base_url}")
        resp = self._send(
            "POST",
            AUTHENTICATION_PATH,
            params={"username": username},
            json=AuthenticationRequest(password).to_dict(),
        )

        if resp.status_code == httpx.codes.OK:
            logger.debug(f"Authentication succeeded for {username}")
            return Either.value(AuthenticationResponse.from_dict(resp.json()))

        error = AuthenticationError.from_dict(resp.json())
        logger.info(f"Authentication failed for {username}: {resp.status_code} {error.reason}")
        return Either.error(error)


class GroupInteractor(_Interactor):
    """Checks direct group membership."""

    def execute(self, username: str, groupname: str) -> Either[GroupResponse, GroupError]:
        """Check whether ``username`` is a direct member of ``groupname``.

        A user who is not a member comes back as a ``GroupError``, not as a
        false value.
        """
        check_not_none(username, "username")
        check_not_none(groupname, "groupname")

        logger.debug(f"Checking membership of {username} in {groupname}")
        resp = self._send(
            "GET",
            GROUP_DIRECT_PATH,
            params={"groupname": groupname, "username": username},
        )

        if resp.status_code == httpx.codes.OK:
            return Either.value(GroupResponse.from_dict(resp.json()))

        error = GroupError.from_dict(resp.json())
        logger.debug(f"{username} not confirmed in {groupname}: {resp.status_code} {error.reason}")
        return Either.error(error)


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


def authentication(base_url: str, app_name: str, app_password: str, **kwargs) -> AuthenticationInteractor:
    """Create an authentication interactor, useful for authenticating a user."""
    return AuthenticationInteractor(base_url, app_name, app_password, **kwargs)


def group(base_url: str, app_name: str, app_password: str, **kwargs) -> GroupInteractor:
    """Create a group interactor, useful for checking group membership."""
    return GroupInteractor(base_url, app_name, app_password, **kwargs)


def from_config(
    config: CrowdConfig, transport: httpx.BaseTransport | None = None
) -> tuple[AuthenticationInteractor, GroupInteractor]:
    """Create both interactors from loaded configuration."""
    kwargs = {"timeout": config.timeout, "verify": config.verify, "transport": transport}
    return (
        authentication(config.base_url, config.app_name, config.app_password, **kwargs),
        group(config.base_url, config.app_name, config.app_password, **kwargs),
    )
