"""
Application settings and configuration management.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from tubesearch import __version__
from tubesearch.constants import (
    DEFAULT_API_KEY,
    DEFAULT_CACHE_CAPACITY,
    DEFAULT_CACHE_MAX_AGE_SECONDS,
    DEFAULT_CACHE_NAMESPACE,
    DEFAULT_CLIENT_CONTEXT,
    DEFAULT_SEARCH_LIMIT,
    MAX_CONTINUATION_ATTEMPTS,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = Field(default="tubesearch")
    app_version: str = Field(default=__version__)
    log_level: str = Field(default="INFO")

    # InnerTube client
    api_key: str = Field(default=DEFAULT_API_KEY)
    client_name: str = Field(default=DEFAULT_CLIENT_CONTEXT["clientName"])
    client_version: str = Field(default=DEFAULT_CLIENT_CONTEXT["clientVersion"])
    hl: str = Field(default=DEFAULT_CLIENT_CONTEXT["hl"])
    gl: str = Field(default=DEFAULT_CLIENT_CONTEXT["gl"])
    utc_offset_minutes: int = Field(default=DEFAULT_CLIENT_CONTEXT["utcOffsetMinutes"])

    # Transport
    proxy_url: str = Field(default="")
    request_timeout: float = Field(default=30.0)

    # Search
    default_limit: int = Field(default=DEFAULT_SEARCH_LIMIT)
    max_continuation_attempts: int = Field(default=MAX_CONTINUATION_ATTEMPTS)

    # Cache
    use_cache: bool = Field(default=True)
    cache_backend: str = Field(default="file")
    cache_dir: Path = Field(default=Path("./cache"))
    cache_namespace: str = Field(default=DEFAULT_CACHE_NAMESPACE)
    cache_max_age_seconds: float = Field(default=DEFAULT_CACHE_MAX_AGE_SECONDS)
    cache_capacity: int = Field(default=DEFAULT_CACHE_CAPACITY)

    @field_validator("cache_dir", mode="before")
    @classmethod
    def ensure_path(cls, v: str | Path) -> Path:
        """Ensure directory paths are Path objects."""
        if isinstance(v, str):
            return Path(v)
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()

    @field_validator("cache_backend")
    @classmethod
    def validate_cache_backend(cls, v: str) -> str:
        """Validate cache backend."""
        valid_backends = ["memory", "file"]
        if v.lower() not in valid_backends:
            raise ValueError(f"Invalid cache backend: {v}")
        return v.lower()

    @field_validator("default_limit", "max_continuation_attempts")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        """Validate that search bounds are not negative."""
        if v < 0:
            raise ValueError(f"Value must be non-negative, got {v}")
        return v

    @property
    def client_context(self) -> dict[str, Any]:
        """Build the InnerTube client context, overriding the WEB defaults."""
        return {
            **DEFAULT_CLIENT_CONTEXT,
            "clientName": self.client_name,
            "clientVersion": self.client_version,
            "hl": self.hl,
            "gl": self.gl,
            "utcOffsetMinutes": self.utc_offset_minutes,
        }

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "TUBESEARCH_",
        "case_sensitive": False,
    }


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()


# Global settings instance
settings = get_settings()
