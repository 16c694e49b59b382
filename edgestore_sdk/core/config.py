"""
SDK configuration (pydantic-settings v2).

Values come from ``EDGE_STORE_*`` environment variables or a local ``.env``.
"""
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_API_ENDPOINT = "https://api.edgestore.dev"


class Settings(BaseSettings):
    """EdgeStore client settings"""

    API_ENDPOINT: str = Field(
        default=DEFAULT_API_ENDPOINT,
        description="Base URL every route is appended to",
    )
    ACCESS_KEY: Optional[str] = Field(default=None, description="Default access key")
    SECRET_KEY: Optional[str] = Field(default=None, description="Default secret key")

    # Request/response debug logging (Authorization is never logged)
    DEBUG: bool = Field(default=False)

    model_config = SettingsConfigDict(
        env_prefix="EDGE_STORE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("ACCESS_KEY", "SECRET_KEY", mode="before")
    @classmethod
    def _blank_as_missing(cls, v):
        # An exported-but-empty variable means "not configured".
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("API_ENDPOINT")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


def get_settings() -> Settings:
    """Build settings from the current environment.

    Not cached: credentials exported after import are still picked up.
    """
    return Settings()
