from typing import Any

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ZuoraSettings(BaseSettings):
    """
    Zuora SOAP client configuration using Pydantic BaseSettings.
    Loads values from environment variables and .env automatically.
    """

    # Credentials
    ZUORA_USERNAME: str | None = Field(None, description="Zuora API user")
    ZUORA_PASSWORD: str | None = Field(None, description="Zuora API password")

    # Endpoint selection
    ZUORA_SANDBOX: bool = Field(True, description="Target the sandbox tenant instead of production")
    ZUORA_API_VERSION: str = Field("74.0", description="SOAP API version used in the request path")
    ZUORA_SANDBOX_URL: str = Field("https://apisandbox.zuora.com", description="Sandbox base URL")
    ZUORA_PRODUCTION_URL: str = Field("https://api.zuora.com", description="Production base URL")

    # Transport
    # Certificate verification is off by default to match deployed sandbox setups
    ZUORA_VERIFY_SSL: bool = Field(False, description="Verify TLS certificates")
    ZUORA_TIMEOUT: float = Field(30.0, description="Request timeout in seconds")

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def __init__(self, **data: Any):
        super().__init__(**data)

    @field_validator("ZUORA_SANDBOX_URL", "ZUORA_PRODUCTION_URL")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("ZUORA_TIMEOUT")
    @classmethod
    def validate_timeout(cls, v):
        if v <= 0:
            raise ValueError("ZUORA_TIMEOUT must be greater than 0")
        return v

    @computed_field
    @property
    def base_url(self) -> str:
        """Base URL selected by ZUORA_SANDBOX"""
        return self.ZUORA_SANDBOX_URL if self.ZUORA_SANDBOX else self.ZUORA_PRODUCTION_URL

    @computed_field
    @property
    def api_path(self) -> str:
        """SOAP endpoint path for the configured API version"""
        return f"/apps/services/a/{self.ZUORA_API_VERSION}"


# Settings singleton
_settings_instance = None


def get_settings() -> ZuoraSettings:
    """
    Returns a cached settings instance.
    Avoids reading the environment more than once.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = ZuoraSettings()
    return _settings_instance
