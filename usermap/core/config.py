"""Application configuration loaded from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Validated settings from env and optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    APP_ENV: Literal["dev", "prod"] = "dev"
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Asset backend used by the default URL generator (AssetService)
    ASSET_BASE_URL: str = "https://assets.localhost"
    # Optional; appended as ?access_token= when set
    ASSET_ACCESS_TOKEN: SecretStr | None = None

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("ASSET_BASE_URL")
    @classmethod
    def validate_asset_base_url(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("ASSET_BASE_URL must be set and non-empty")
        s = v.strip().rstrip("/").lower()
        if not (s.startswith("http://") or s.startswith("https://")):
            raise ValueError(
                "ASSET_BASE_URL must use http or https (e.g. https://assets.example.com)"
            )
        return v.strip().rstrip("/")

    @field_validator("ASSET_ACCESS_TOKEN")
    @classmethod
    def validate_asset_access_token(cls, v: SecretStr | None) -> SecretStr | None:
        if v is None or not v.get_secret_value().strip():
            return None
        return v


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
