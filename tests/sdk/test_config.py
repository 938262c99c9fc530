import pytest

from whcs._config import Config, ServiceDefaults, resolve_config
from whcs.models.errors import MissingParametersError

DEFAULTS = ServiceDefaults(name="my_service", url="https://default.example.com/api")


class TestResolveConfig:
    def test_defaults(self):
        config = resolve_config(DEFAULTS, version="2023-01-01")

        assert config.service_name == "my_service"
        assert config.service_url == "https://default.example.com/api"
        assert config.version == "2023-01-01"
        assert config.headers == {}
        assert config.disable_ssl_verification is False

    def test_missing_version(self):
        with pytest.raises(MissingParametersError) as exc_info:
            resolve_config(DEFAULTS, version=None)
        assert exc_info.value.missing == ["version"]

    def test_explicit_url_wins(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("MY_SERVICE_URL", "https://env.example.com")
        config = resolve_config(
            DEFAULTS, version="v", service_url="https://explicit.example.com/"
        )
        assert config.service_url == "https://explicit.example.com"

    def test_environment_url_and_ssl(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("MY_SERVICE_URL", "https://env.example.com/api/")
        monkeypatch.setenv("MY_SERVICE_DISABLE_SSL", "true")

        config = resolve_config(DEFAULTS, version="v")

        assert config.service_url == "https://env.example.com/api"
        assert config.disable_ssl_verification is True

    def test_service_name_changes_lookup(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("OTHER_URL", "https://other.example.com")
        config = resolve_config(DEFAULTS, version="v", service_name="other")
        assert config.service_name == "other"
        assert config.service_url == "https://other.example.com"


class TestConfig:
    def test_negative_retries_rejected(self):
        with pytest.raises(ValueError):
            Config(service_name="s", service_url="https://x", version="v", max_retries=-1)

    def test_empty_url_rejected(self):
        with pytest.raises(ValueError):
            Config(service_name="s", service_url="", version="v")
