"""Application configuration loaded from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Placeholder admin token used when ADMIN_TOKEN is unset. Accepted in dev only.
ADMIN_TOKEN_PLACEHOLDER = "CHANGE_ME_PLEASE"

# Allowed URL schemes for DATABASE_URL; the store is SQLite only.
VALID_DATABASE_URL_PREFIXES = ("sqlite://", "sqlite+pysqlite://")

VALID_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Validated application settings from env and optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    APP_ENV: Literal["dev", "prod"] = "dev"
    DEBUG: bool = False
    API_PREFIX: str = "/api"

    # Volatile in-memory store by default; nothing survives a restart.
    DATABASE_URL: str = "sqlite://"

    # Shared secret required by POST /api/delete-user (Authorization: Bearer <token>)
    ADMIN_TOKEN: SecretStr = SecretStr(ADMIN_TOKEN_PLACEHOLDER)

    HOST: str = "127.0.0.1"
    PORT: int = 3000

    # Bcrypt cost (rounds) for seeded password hashes.
    BCRYPT_ROUNDS: int = 12
    SEED_USERS: bool = True

    LOG_LEVEL: str = "INFO"

    @field_validator("API_PREFIX")
    @classmethod
    def validate_api_prefix(cls, v: str) -> str:
        v = v.strip()
        if not v.startswith("/"):
            raise ValueError("API_PREFIX must start with '/' (e.g. /api)")
        return v.rstrip("/")

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("DATABASE_URL must be set and non-empty")
        if not any(v.strip().startswith(prefix) for prefix in VALID_DATABASE_URL_PREFIXES):
            raise ValueError("DATABASE_URL must be a SQLite URL (e.g. sqlite:// or sqlite:///users.db)")
        return v.strip()

    @field_validator("ADMIN_TOKEN")
    @classmethod
    def validate_admin_token(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value() or not v.get_secret_value().strip():
            raise ValueError("ADMIN_TOKEN must be set and non-empty")
        return SecretStr(v.get_secret_value().strip())

    @field_validator("PORT")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if v < 1 or v > 65535:
            raise ValueError("PORT must be between 1 and 65535")
        return v

    @field_validator("BCRYPT_ROUNDS")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        if v < 4 or v > 31:
            raise ValueError("BCRYPT_ROUNDS must be between 4 and 31")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}")
        return level

    @model_validator(mode="after")
    def reject_placeholder_token_in_prod(self) -> "Settings":
        if self.APP_ENV == "prod" and self.uses_placeholder_token:
            raise ValueError("ADMIN_TOKEN must be changed from the placeholder when APP_ENV=prod")
        return self

    @property
    def uses_placeholder_token(self) -> bool:
        return self.ADMIN_TOKEN.get_secret_value() == ADMIN_TOKEN_PLACEHOLDER


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance (used by the entrypoints)."""
    return Settings()
