"""Configuration registry and loading.

Every configurable setting is declared here with its key, type, default,
description, and whether it contains a secret.  The registry is the single
source of truth for what settings exist.  Values are layered: registry
defaults, then an optional INI file, then environment variables.
"""

import configparser
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from crowdcontrol.errors import ConfigError


class ConfigType(Enum):
    STRING = "string"
    FLOAT = "float"
    BOOL = "bool"


@dataclass(frozen=True, slots=True)
class ConfigEntry:
    key: str
    type: ConfigType
    default: str | int | float | bool
    description: str
    secret: bool = False
    required: bool = False


# ---------------------------------------------------------------------------
# Registry -- every known setting
# ---------------------------------------------------------------------------

REGISTRY: list[ConfigEntry] = [
    ConfigEntry("crowd.base_url", ConfigType.STRING, "", "Crowd base URL, e.g. http://localhost:8095/crowd", required=True),
    ConfigEntry("crowd.app_name", ConfigType.STRING, "", "Application name as defined in Crowd", required=True),
    ConfigEntry(
        "crowd.app_password",
        ConfigType.STRING,
        "",
        "Application password as defined in Crowd",
        secret=True,
        required=True,
    ),
    ConfigEntry("crowd.timeout", ConfigType.FLOAT, 10.0, "HTTP timeout in seconds"),
    ConfigEntry("crowd.verify", ConfigType.BOOL, True, "Verify TLS certificates"),
]

# ---------------------------------------------------------------------------
# Value parsing / serialization
# ---------------------------------------------------------------------------


def parse_value(entry: ConfigEntry, raw: str) -> str | int | float | bool:
    """Parse a raw string value according to the entry's type."""
    try:
        match entry.type:
            case ConfigType.STRING:
                return raw
            case ConfigType.FLOAT:
                return float(raw)
            case ConfigType.BOOL:
                return raw.strip().lower() in ("true", "1", "yes", "on")
    except ValueError as e:
        raise ConfigError(f"Invalid {entry.type.value} for {entry.key}: {raw!r}") from e


def serialize_value(entry: ConfigEntry, value: str | int | float | bool) -> str:
    """Serialize a typed value to a string."""
    match entry.type:
        case ConfigType.BOOL:
            return "true" if value else "false"
        case _:
            return str(value)


# ---------------------------------------------------------------------------
# Environment variable / INI section+key -> registry key mapping
# ---------------------------------------------------------------------------

ENV_MAP: dict[str, str] = {
    "CROWD_BASE_URL": "crowd.base_url",
    "CROWD_APP_NAME": "crowd.app_name",
    "CROWD_APP_PASSWORD": "crowd.app_password",
    "CROWD_TIMEOUT": "crowd.timeout",
    "CROWD_VERIFY": "crowd.verify",
}

INI_MAP: dict[tuple[str, str], str] = {
    ("crowd", "BASE_URL"): "crowd.base_url",
    ("crowd", "APP_NAME"): "crowd.app_name",
    ("crowd", "APP_PASSWORD"): "crowd.app_password",
    ("crowd", "TIMEOUT"): "crowd.timeout",
    ("crowd", "VERIFY"): "crowd.verify",
}


@dataclass(frozen=True)
class CrowdConfig:
    base_url: str
    app_name: str
    app_password: str = field(repr=False)
    timeout: float = 10.0
    verify: bool = True


def _read_ini(path: str | Path) -> dict[str, str]:
    parser = configparser.ConfigParser()
    # Keep keys as written so they line up with INI_MAP
    parser.optionxform = str  # type: ignore[assignment,method-assign]
    try:
        found = parser.read(path)
    except configparser.Error as e:
        raise ConfigError(f"Cannot parse config file {path}: {e}") from e
    if not found:
        raise ConfigError(f"Config file not found: {path}")

    raw: dict[str, str] = {}
    for section in parser.sections():
        for name, value in parser.items(section):
            key = INI_MAP.get((section, name.upper()))
            if key is not None:
                raw[key] = value
    return raw


def load_config(
    ini_path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> CrowdConfig:
    """Load settings from registry defaults, an INI file, then the environment."""
    if environ is None:
        environ = os.environ

    raw: dict[str, str] = {}
    if ini_path is not None:
        raw.update(_read_ini(ini_path))
    for env_name, key in ENV_MAP.items():
        if env_name in environ:
            raw[key] = environ[env_name]

    values: dict[str, str | int | float | bool] = {}
    for entry in REGISTRY:
        if entry.key in raw:
            values[entry.key] = parse_value(entry, raw[entry.key])
        else:
            values[entry.key] = entry.default
        if entry.required and not values[entry.key]:
            raise ConfigError(f"Missing required setting: {entry.key}")

    return CrowdConfig(
        base_url=str(values["crowd.base_url"]),
        app_name=str(values["crowd.app_name"]),
        app_password=str(values["crowd.app_password"]),
        timeout=float(values["crowd.timeout"]),
        verify=bool(values["crowd.verify"]),
    )


def describe(config: CrowdConfig) -> dict[str, str]:
    """Return serialized settings with secrets masked, for diagnostics."""
    current = {
        "crowd.base_url": config.base_url,
        "crowd.app_name": config.app_name,
        "crowd.app_password": config.app_password,
        "crowd.timeout": config.timeout,
        "crowd.verify": config.verify,
    }
    result = {}
    for entry in REGISTRY:
        value = current[entry.key]
        if entry.secret and value:
            result[entry.key] = "********"
        else:
            result[entry.key] = serialize_value(entry, value)
    return result
