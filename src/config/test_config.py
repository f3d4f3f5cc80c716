"""
Unit tests for config_module.py.

Tests cover:
- .env file loading and environment variable overriding
- get_config with prefixed and unprefixed keys, missing keys and defaults
- parse_params for query-string style values
- validate_config passing and failing scenarios
"""

import logging
import os

import pytest

from .config_module import (
    ConfigError,
    env_key,
    get_config,
    load_config,
    parse_params,
    validate_config,
)


class TestEnvKey:
    """Test cases for env_key."""

    def test_adds_prefix(self):
        assert env_key("api_key") == "WOOSMAP_API_KEY"

    def test_keeps_existing_prefix(self):
        assert env_key("WOOSMAP_API_KEY") == "WOOSMAP_API_KEY"


class TestLoadConfig:
    """Test cases for load_config function."""

    def test_load_config_existing_file(self, tmp_path, caplog, monkeypatch):
        """Test loading configuration from existing .env file."""
        monkeypatch.setenv("WOOSMAP_TEST_KEY", "")

        env_file = tmp_path / ".env"
        env_file.write_text("WOOSMAP_TEST_KEY=test_value\n")

        with caplog.at_level(logging.INFO):
            load_config(str(env_file))

        assert os.getenv("WOOSMAP_TEST_KEY") == "test_value"
        assert f"Loaded configuration from {str(env_file)}" in caplog.text

    def test_load_config_nonexistent_file(self, caplog):
        """Test loading configuration when .env file doesn't exist."""
        nonexistent_file = "/path/that/does/not/exist/.env"

        with caplog.at_level(logging.WARNING):
            load_config(nonexistent_file)

        assert f"Configuration file {nonexistent_file} not found" in caplog.text

    def test_load_config_override_existing_env(self, tmp_path, monkeypatch):
        """Test that .env file values override existing environment variables."""
        monkeypatch.setenv("WOOSMAP_OVERRIDE_TEST", "original_value")

        env_file = tmp_path / ".env"
        env_file.write_text("WOOSMAP_OVERRIDE_TEST=new_value\n")

        load_config(str(env_file))

        assert os.getenv("WOOSMAP_OVERRIDE_TEST") == "new_value"


class TestGetConfig:
    """Test cases for get_config function."""

    def test_get_config_existing_key(self, monkeypatch):
        monkeypatch.setenv("WOOSMAP_END_POINT", "http://maps.example.com/")

        assert get_config("END_POINT") == "http://maps.example.com/"
        assert get_config("end_point") == "http://maps.example.com/"
        assert get_config("WOOSMAP_END_POINT") == "http://maps.example.com/"

    def test_get_config_missing_key_with_default(self, monkeypatch):
        monkeypatch.delenv("WOOSMAP_MISSING_KEY", raising=False)
        assert get_config("MISSING_KEY", "default_value") == "default_value"

    def test_get_config_missing_key_no_default(self, monkeypatch):
        monkeypatch.delenv("WOOSMAP_MISSING_KEY", raising=False)
        assert get_config("MISSING_KEY") is None

    def test_get_config_empty_key(self, monkeypatch):
        """An empty variable is returned as-is, not replaced by the default."""
        monkeypatch.setenv("WOOSMAP_EMPTY_KEY", "")
        assert get_config("EMPTY_KEY", "default") == ""


class TestParseParams:
    """Test cases for parse_params."""

    def test_parse_pairs(self):
        assert parse_params("region=nl&units=metric") == {"region": "nl", "units": "metric"}

    def test_parse_keeps_order(self):
        assert list(parse_params("b=2&a=1&c=3")) == ["b", "a", "c"]

    def test_parse_decodes_values(self):
        assert parse_params("components=country%3ANL&q=a+b") == {
            "components": "country:NL",
            "q": "a b",
        }

    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_parse_blank(self, value):
        assert parse_params(value) == {}

    def test_parse_invalid(self):
        with pytest.raises(ConfigError) as exc_info:
            parse_params("region")

        assert "Invalid parameter string" in str(exc_info.value)


class TestValidateConfig:
    """Test cases for validate_config function."""

    @pytest.fixture(autouse=True)
    def env(self, monkeypatch):
        monkeypatch.setenv("WOOSMAP_VALID_KEY1", "value1")
        monkeypatch.setenv("WOOSMAP_VALID_KEY2", "value2")
        monkeypatch.setenv("WOOSMAP_EMPTY_KEY", "")
        monkeypatch.setenv("WOOSMAP_WHITESPACE_KEY", "   ")
        monkeypatch.delenv("WOOSMAP_MISSING_KEY", raising=False)

    def test_validate_config_all_present(self, caplog):
        with caplog.at_level(logging.INFO):
            validate_config(["VALID_KEY1", "VALID_KEY2"])

        assert "Configuration validation passed" in caplog.text
        assert "WOOSMAP_VALID_KEY1" in caplog.text

    def test_validate_config_missing_keys(self, caplog):
        with pytest.raises(ConfigError) as exc_info:
            validate_config(["VALID_KEY1", "MISSING_KEY"])

        assert "Missing keys: WOOSMAP_MISSING_KEY" in str(exc_info.value)
        assert "Configuration validation failed" in caplog.text

    def test_validate_config_empty_and_whitespace_keys(self):
        with pytest.raises(ConfigError) as exc_info:
            validate_config(["EMPTY_KEY", "WHITESPACE_KEY"])

        assert "Empty keys: WOOSMAP_EMPTY_KEY, WOOSMAP_WHITESPACE_KEY" in str(exc_info.value)

    def test_validate_config_missing_and_empty(self):
        with pytest.raises(ConfigError) as exc_info:
            validate_config(["VALID_KEY1", "MISSING_KEY", "EMPTY_KEY"])

        error_msg = str(exc_info.value)
        assert "Missing keys: WOOSMAP_MISSING_KEY" in error_msg
        assert "Empty keys: WOOSMAP_EMPTY_KEY" in error_msg


class TestConfigError:
    """Test cases for ConfigError exception."""

    def test_config_error_message(self):
        error = ConfigError("Test configuration error")
        assert isinstance(error, Exception)
        assert str(error) == "Test configuration error"
