"""Two-case result type returned by the interactors.

An ``Either`` is exactly one of ``Value`` (the call succeeded) or ``Error``
(Crowd answered with an error body).  There is no way to build an instance
holding both or neither, so callers only need to ask which case they have:

    result = interactor.execute("alice", "secret")
    if result.is_error():
        print(result.get_error().reason)
    else:
        print(result.get_value().display_name)

Reading the absent side, through ``get_*`` or the ``value``/``error``
attributes, raises ``InvalidStateError``.

Structural pattern matching works too:

    match result:
        case Value(response):
            ...
        case Error(error):
            ...
"""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from crowdcontrol.errors import InvalidArgumentError, InvalidStateError, check_not_none

V = TypeVar("V")
E = TypeVar("E")


class Either(Generic[V, E]):
    """Either a valid value or an error, never both."""

    __slots__ = ()

    @staticmethod
    def value(value: V) -> "Either[V, Any]":
        """Create a result holding a valid value."""
        return Value(value)

    @staticmethod
    def error(error: E) -> "Either[Any, E]":
        """Create a result holding an error."""
        return Error(error)

    @staticmethod
    def of(value: V | None = None, error: E | None = None) -> "Either[V, E]":
        """Build a result from a value candidate and an error candidate.

        Exactly one of the two must be given.
        """
        if value is not None and error is not None:
            raise InvalidArgumentError("Both value and error cannot be present")
        if value is None and error is None:
            raise InvalidArgumentError("Both value and error cannot be absent")
        if value is not None:
            return Value(value)
        return Error(error)

    def is_error(self) -> bool:
        raise NotImplementedError

    def get_value(self) -> V:
        raise NotImplementedError

    def get_error(self) -> E:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Value(Either[V, E]):
    # field() keeps dataclass from picking up Either.value as a default
    value: V = field()

    def __post_init__(self) -> None:
        check_not_none(self.value, "value")

    def is_error(self) -> bool:
        return False

    def get_value(self) -> V:
        return self.value

    def get_error(self) -> E:
        raise InvalidStateError("error is not present")

    @property
    def error(self) -> E:
        return self.get_error()


@dataclass(frozen=True, slots=True)
class Error(Either[V, E]):
    error: E = field()

    def __post_init__(self) -> None:
        check_not_none(self.error, "error")

    def is_error(self) -> bool:
        return True

    def get_value(self) -> V:
        raise InvalidStateError("value is not present")

    @property
    def value(self) -> V:
        return self.get_value()

    def get_error(self) -> E:
        return self.error
