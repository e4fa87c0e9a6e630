"""Unit tests for config module."""

import tempfile
from pathlib import Path

import pytest

from crowdcontrol.config import (
    ENV_MAP,
    INI_MAP,
    REGISTRY,
    ConfigType,
    CrowdConfig,
    describe,
    load_config,
    parse_value,
    serialize_value,
)
from crowdcontrol.errors import ConfigError

ENV = {
    "CROWD_BASE_URL": "http://localhost:8095/crowd",
    "CROWD_APP_NAME": "myapp",
    "CROWD_APP_PASSWORD": "apppass",
}


def entry(key: str):
    return next(e for e in REGISTRY if e.key == key)


class TestRegistry:
    """Test the settings registry."""

    def test_every_entry_has_env_and_ini_names(self) -> None:
        """Test that each setting can be supplied both ways."""
        keys = {e.key for e in REGISTRY}
        assert set(ENV_MAP.values()) == keys
        assert set(INI_MAP.values()) == keys

    def test_password_is_secret(self) -> None:
        """Test that only the application password is marked secret."""
        assert [e.key for e in REGISTRY if e.secret] == ["crowd.app_password"]


class TestParseValue:
    """Test parse_value and serialize_value."""

    @pytest.mark.parametrize("raw,expected", [("true", True), ("1", True), ("Yes", True), ("off", False), ("", False)])
    def test_bool(self, raw: str, expected: bool) -> None:
        """Test boolean parsing."""
        assert parse_value(entry("crowd.verify"), raw) is expected

    def test_float(self) -> None:
        """Test float parsing."""
        assert parse_value(entry("crowd.timeout"), "2.5") == 2.5

    def test_bad_float(self) -> None:
        """Test that an unparseable number is a ConfigError."""
        with pytest.raises(ConfigError, match="crowd.timeout"):
            parse_value(entry("crowd.timeout"), "soon")

    def test_serialize(self) -> None:
        """Test serializing typed values back to strings."""
        assert serialize_value(entry("crowd.verify"), False) == "false"
        assert serialize_value(entry("crowd.timeout"), 10.0) == "10.0"
        assert entry("crowd.base_url").type is ConfigType.STRING


class TestLoadConfig:
    """Test load_config."""

    def setup_method(self) -> None:
        """Setup test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.ini_file = Path(self.temp_dir) / "crowd.ini"

    def write_ini(self, content: str) -> Path:
        """Helper to create a test INI file."""
        self.ini_file.write_text(content)
        return self.ini_file

    def test_from_environment(self) -> None:
        """Test loading from environment variables with defaults."""
        config = load_config(environ=ENV)

        assert config == CrowdConfig("http://localhost:8095/crowd", "myapp", "apppass")
        assert config.timeout == 10.0
        assert config.verify is True

    def test_from_ini(self) -> None:
        """Test loading from an INI file."""
        path = self.write_ini(
            "[crowd]\n"
            "BASE_URL = https://crowd.example.com/crowd\n"
            "APP_NAME = myapp\n"
            "APP_PASSWORD = apppass\n"
            "TIMEOUT = 3\n"
            "VERIFY = false\n"
        )

        config = load_config(path, environ={})

        assert config.base_url == "https://crowd.example.com/crowd"
        assert config.timeout == 3.0
        assert config.verify is False

    def test_lowercase_ini_keys(self) -> None:
        """Test that INI keys are matched case-insensitively."""
        path = self.write_ini("[crowd]\nbase_url = http://a\napp_name = n\napp_password = p\n")

        assert load_config(path, environ={}).app_name == "n"

    def test_environment_overrides_ini(self) -> None:
        """Test precedence of environment over file."""
        path = self.write_ini("[crowd]\nBASE_URL = http://from-file\nAPP_NAME = fileapp\nAPP_PASSWORD = filepass\n")

        config = load_config(path, environ={"CROWD_APP_NAME": "envapp"})

        assert config.base_url == "http://from-file"
        assert config.app_name == "envapp"

    def test_missing_required(self) -> None:
        """Test that a missing password is reported."""
        env = {k: v for k, v in ENV.items() if k != "CROWD_APP_PASSWORD"}

        with pytest.raises(ConfigError, match="crowd.app_password"):
            load_config(environ=env)

    def test_no_section_header(self) -> None:
        """Test that a malformed INI file is a ConfigError."""
        path = self.write_ini("BASE_URL = http://x\n")

        with pytest.raises(ConfigError, match="Cannot parse"):
            load_config(path, environ={})

    def test_missing_file(self) -> None:
        """Test that a missing INI file is reported."""
        with pytest.raises(ConfigError, match="not found"):
            load_config(Path(self.temp_dir) / "nope.ini", environ=ENV)

    def test_describe_masks_secret(self) -> None:
        """Test that describe hides the application password."""
        described = describe(load_config(environ={**ENV, "CROWD_VERIFY": "no"}))

        assert described["crowd.app_password"] == "********"
        assert described["crowd.app_name"] == "myapp"
        assert described["crowd.verify"] == "false"
        assert "apppass" not in repr(load_config(environ=ENV))
