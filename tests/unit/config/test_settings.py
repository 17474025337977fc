"""Unit tests for ZuoraSettings."""

import pytest
from pydantic import ValidationError

from zuora_soap.config import settings as settings_module
from zuora_soap.config.settings import ZuoraSettings, get_settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove ZUORA_* variables so defaults are observable."""
    for name in [
        "ZUORA_USERNAME",
        "ZUORA_PASSWORD",
        "ZUORA_SANDBOX",
        "ZUORA_API_VERSION",
        "ZUORA_SANDBOX_URL",
        "ZUORA_PRODUCTION_URL",
        "ZUORA_VERIFY_SSL",
        "ZUORA_TIMEOUT",
    ]:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(settings_module, "_settings_instance", None)


class TestDefaults:
    def test_default_values(self) -> None:
        settings = ZuoraSettings(_env_file=None)
        assert settings.ZUORA_USERNAME is None
        assert settings.ZUORA_PASSWORD is None
        assert settings.ZUORA_SANDBOX is True
        assert settings.ZUORA_API_VERSION == "74.0"
        assert settings.ZUORA_VERIFY_SSL is False
        assert settings.ZUORA_TIMEOUT == 30.0

    def test_sandbox_base_url(self) -> None:
        settings = ZuoraSettings(_env_file=None)
        assert settings.base_url == "https://apisandbox.zuora.com"
        assert settings.api_path == "/apps/services/a/74.0"

    def test_production_base_url(self) -> None:
        settings = ZuoraSettings(ZUORA_SANDBOX=False, _env_file=None)
        assert settings.base_url == "https://api.zuora.com"


class TestEnvironment:
    def test_reads_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("ZUORA_USERNAME", "env-user")
        monkeypatch.setenv("ZUORA_PASSWORD", "env-pw")
        monkeypatch.setenv("ZUORA_SANDBOX", "false")
        monkeypatch.setenv("ZUORA_VERIFY_SSL", "true")
        monkeypatch.setenv("ZUORA_TIMEOUT", "12")

        settings = ZuoraSettings(_env_file=None)

        assert settings.ZUORA_USERNAME == "env-user"
        assert settings.ZUORA_PASSWORD == "env-pw"
        assert settings.ZUORA_SANDBOX is False
        assert settings.ZUORA_VERIFY_SSL is True
        assert settings.ZUORA_TIMEOUT == 12.0

    def test_reads_env_file(self, tmp_path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("ZUORA_USERNAME=file-user\nZUORA_API_VERSION=91.0\n")

        settings = ZuoraSettings(_env_file=env_file)

        assert settings.ZUORA_USERNAME == "file-user"
        assert settings.api_path == "/apps/services/a/91.0"

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()


class TestValidation:
    def test_strips_trailing_slash(self) -> None:
        settings = ZuoraSettings(ZUORA_SANDBOX_URL="https://sandbox.zuora.example.com/", _env_file=None)
        assert settings.base_url == "https://sandbox.zuora.example.com"

    @pytest.mark.parametrize("timeout", [0, -1])
    def test_rejects_non_positive_timeout(self, timeout) -> None:
        with pytest.raises(ValidationError):
            ZuoraSettings(ZUORA_TIMEOUT=timeout, _env_file=None)

