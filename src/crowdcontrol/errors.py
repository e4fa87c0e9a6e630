"""Exception types raised by the Crowd client library."""


class CrowdControlError(Exception):
    """Base exception for crowdcontrol errors."""

    pass


class NullInputError(CrowdControlError, TypeError):
    """A required argument or field was None."""

    pass


class InvalidArgumentError(CrowdControlError, ValueError):
    """An argument was present but not acceptable."""

    pass


class InvalidStateError(CrowdControlError, RuntimeError):
    """An operation was attempted on an object in the wrong state."""

    pass


class ConfigError(CrowdControlError, ValueError):
    """Configuration is missing or cannot be parsed."""

    pass


def check_not_none(value, name: str):
    """Return value, raising NullInputError if it is None."""
    if value is None:
        raise NullInputError(f"{name} cannot be None")
    return value
