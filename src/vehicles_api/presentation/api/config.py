"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import List, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def split_csv(value: str) -> List[str]:
    """Split a comma-separated string into trimmed, non-empty items."""
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
    )

    # Database; unset means cars are kept in memory
    database_url: Optional[str] = None
    database_echo: bool = False
    db_pool_pre_ping: bool = True

    # Links
    public_base_url: str = ""

    # Upstream services; unset disables the enrichment
    maps_url: Optional[str] = None
    pricing_url: Optional[str] = None
    upstream_timeout_seconds: float = 5.0

    # Application
    debug: bool = False
    log_level: str = "INFO"
    log_requests: bool = True
    log_request_body: bool = False
    log_max_body_size: int = 1024

    # CORS (comma-separated)
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"
    allowed_methods: str = "GET,POST,PUT,DELETE,OPTIONS"
    allowed_headers: str = "*"

    @field_validator("public_base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        """Normalize base URL so link paths can be appended."""
        return value.rstrip("/")

    @field_validator("upstream_timeout_seconds")
    @classmethod
    def validate_timeout(cls, value: float) -> float:
        """Upstream timeout must be positive."""
        if value <= 0:
            raise ValueError("upstream_timeout_seconds must be positive")
        return value

    @property
    def cors_origins(self) -> List[str]:
        """Allowed CORS origins as a list."""
        return split_csv(self.allowed_origins)

    @property
    def cors_methods(self) -> List[str]:
        """Allowed CORS methods as a list."""
        return split_csv(self.allowed_methods)

    @property
    def cors_headers(self) -> List[str]:
        """Allowed CORS headers as a list."""
        return split_csv(self.allowed_headers)


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
