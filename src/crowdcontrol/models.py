"""Dataclasses for Crowd request and response bodies."""

from dataclasses import dataclass, field, fields
from typing import Any, Self

from crowdcontrol.errors import check_not_none


def _check_fields(obj: object, optional: tuple[str, ...] = ()) -> None:
    for f in fields(obj):
        if f.name not in optional:
            check_not_none(getattr(obj, f.name), f.name)


@dataclass(frozen=True)
class Link:
    rel: str
    href: str

    def __post_init__(self) -> None:
        _check_fields(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Link":
        return cls(rel=data["rel"], href=data["href"])

    def to_dict(self) -> dict[str, str]:
        return {"rel": self.rel, "href": self.href}


@dataclass(frozen=True)
class AuthenticationRequest:
    """Password-based authentication request body."""

    password: str = field(repr=False)

    def __post_init__(self) -> None:
        _check_fields(self)

    def to_dict(self) -> dict[str, str]:
        return {"value": self.password}


@dataclass(frozen=True)
class AuthenticationResponse:
    """The user entity Crowd returns when authentication succeeds.

    ``given_name``, ``family_name`` and ``display_name`` travel as the
    hyphenated ``first-name``, ``last-name`` and ``display-name`` keys.
    """

    expand: str
    link: Link
    username: str
    given_name: str
    family_name: str
    display_name: str
    email: str
    key: str
    active: bool

    def __post_init__(self) -> None:
        _check_fields(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AuthenticationResponse":
        return cls(
            expand=data.get("expand", ""),
            link=Link.from_dict(data["link"]),
            username=data["name"],
            given_name=data["first-name"],
            family_name=data["last-name"],
            display_name=data["display-name"],
            email=data["email"],
            key=data.get("key", ""),
            active=bool(data.get("active", False)),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "expand": self.expand,
            "link": self.link.to_dict(),
            "name": self.username,
            "first-name": self.given_name,
            "last-name": self.family_name,
            "display-name": self.display_name,
            "email": self.email,
            "key": self.key,
            "active": self.active,
        }


@dataclass(frozen=True)
class CrowdError:
    """Error body returned by Crowd: a symbolic reason and a message."""

    reason: str
    message: str

    def __post_init__(self) -> None:
        _check_fields(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        return cls(reason=data["reason"], message=data["message"])

    def to_dict(self) -> dict[str, str]:
        return {"reason": self.reason, "message": self.message}


@dataclass(frozen=True)
class AuthenticationError(CrowdError):
    pass


@dataclass(frozen=True)
class GroupError(CrowdError):
    pass


@dataclass(frozen=True)
class GroupResponse:
    """Group entity returned when the user is a direct member."""

    name: str
    link: Link | None = None
    description: str = ""
    type: str = "GROUP"
    active: bool = True
    expand: str = ""

    def __post_init__(self) -> None:
        _check_fields(self, optional=("link",))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GroupResponse":
        link = data.get("link")
        return cls(
            name=data["name"],
            link=Link.from_dict(link) if link is not None else None,
            description=data.get("description") or "",
            type=data.get("type", "GROUP"),
            active=bool(data.get("active", True)),
            expand=data.get("expand", ""),
        )
