"""Environment-driven settings for the Cloudflare adapter."""

from __future__ import annotations

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_BASE_URL = "https://api.cloudflare.com/client/v4"


class CloudflareSettings(BaseSettings):
    """Cloudflare configuration read from ``CLOUDFLARE_*`` variables."""

    model_config = SettingsConfigDict(
        env_prefix="CLOUDFLARE_", env_file=".env", extra="ignore"
    )

    api_token: SecretStr
    api_base_url: str = DEFAULT_API_BASE_URL
    request_timeout: float = 30.0

    @field_validator("api_token")
    @classmethod
    def require_token(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value():
            raise ValueError("CLOUDFLARE_API_TOKEN must not be empty")
        return value


def mask_token(token: str) -> str:
    """Show only the first and last four characters of a token."""
    return f"{token[:4]}...{token[-4:]}"
