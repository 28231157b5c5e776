"""Tests for client configuration."""

import dataclasses

import pytest

from conftest import TEST_API_KEY, TEST_HOST
from pihole_api.config import API_KEY_ENV_VAR, HOST_ENV_VAR, PiHoleAPIConfig, PiHoleAPIConfigWithKey
from pihole_api.exceptions import PiHoleConfigurationError, PiHoleMissingAPIKeyError


@pytest.mark.unit
class TestPiHoleAPIConfig:
    """Test host-only configuration."""

    def test_trailing_slash_stripped(self):
        assert PiHoleAPIConfig("http://pi.hole/").host == "http://pi.hole"

    def test_https_accepted(self):
        assert PiHoleAPIConfig("https://pi.hole:8443").host == "https://pi.hole:8443"

    @pytest.mark.parametrize("host", ["192.168.0.100", "pi.hole", "ftp://pi.hole", ""])
    def test_scheme_required(self, host):
        with pytest.raises(PiHoleConfigurationError) as exc_info:
            PiHoleAPIConfig(host)

        assert exc_info.value.details["parameter"] == "host"

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            PiHoleAPIConfig("pi.hole")

    def test_frozen(self):
        config = PiHoleAPIConfig(TEST_HOST)

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.host = "http://other"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv(HOST_ENV_VAR, "http://10.0.0.2/")

        assert PiHoleAPIConfig.from_env().host == "http://10.0.0.2"
        assert PiHoleAPIConfig.from_env(TEST_HOST).host == TEST_HOST

    def test_from_env_without_host(self, monkeypatch):
        monkeypatch.delenv(HOST_ENV_VAR, raising=False)

        with pytest.raises(PiHoleConfigurationError):
            PiHoleAPIConfig.from_env()


@pytest.mark.unit
class TestPiHoleAPIConfigWithKey:
    """Test host and key configuration."""

    def test_key_hidden_from_repr(self):
        config = PiHoleAPIConfigWithKey(TEST_HOST, TEST_API_KEY)

        assert config.api_key == TEST_API_KEY
        assert TEST_API_KEY not in repr(config)

    def test_empty_key_rejected(self):
        with pytest.raises(PiHoleMissingAPIKeyError):
            PiHoleAPIConfigWithKey(TEST_HOST, "")

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv(HOST_ENV_VAR, TEST_HOST)
        monkeypatch.setenv(API_KEY_ENV_VAR, "envkey")

        config = PiHoleAPIConfigWithKey.from_env()

        assert config.host == TEST_HOST
        assert config.api_key == "envkey"

    def test_explicit_values_win(self, monkeypatch):
        monkeypatch.setenv(API_KEY_ENV_VAR, "envkey")

        assert PiHoleAPIConfigWithKey.from_env(TEST_HOST, "argkey").api_key == "argkey"

    def test_from_env_without_key(self, monkeypatch):
        monkeypatch.delenv(API_KEY_ENV_VAR, raising=False)

        with pytest.raises(PiHoleMissingAPIKeyError):
            PiHoleAPIConfigWithKey.from_env(TEST_HOST)
