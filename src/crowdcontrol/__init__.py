"""Crowd Control - client library for the Atlassian Crowd REST API."""

from crowdcontrol.config import CrowdConfig, load_config
from crowdcontrol.either import Either, Error, Value
from crowdcontrol.errors import (
    ConfigError,
    CrowdControlError,
    InvalidArgumentError,
    InvalidStateError,
    NullInputError,
)
from crowdcontrol.interactors import (
    AuthenticationInteractor,
    Credentials,
    GroupInteractor,
    authentication,
    from_config,
    group,
)
from crowdcontrol.models import (
    AuthenticationError,
    AuthenticationRequest,
    AuthenticationResponse,
    GroupError,
    GroupResponse,
    Link,
)

__all__ = [
    "AuthenticationError",
    "AuthenticationInteractor",
    "AuthenticationRequest",
    "AuthenticationResponse",
    "ConfigError",
    "Credentials",
    "CrowdConfig",
    "CrowdControlError",
    "Either",
    "Error",
    "GroupError",
    "GroupInteractor",
    "GroupResponse",
    "InvalidArgumentError",
    "InvalidStateError",
    "Link",
    "NullInputError",
    "Value",
    "authentication",
    "from_config",
    "group",
    "load_config",
]
