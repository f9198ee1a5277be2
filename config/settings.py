"""
Configuration settings for the crypto price dashboard.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    # Environment
    ENV: str = Field(default="development", description="Environment name")
    DEBUG: bool = Field(default=False, description="Debug mode")

    # Backend API
    BACKEND_SCHEME: Literal["http", "https"] = Field(default="http")
    BACKEND_HOST: str = Field(default="localhost")
    BACKEND_PORT: int = Field(default=8000, ge=1, le=65535)
    API_BASE_URL: Optional[str] = Field(default=None, description="Overrides scheme/host/port when set")
    REQUEST_TIMEOUT_S: float = Field(default=30.0, gt=0.0, description="Per-request timeout (seconds)")

    # Dashboard defaults
    DEFAULT_COIN: str = Field(default="bitcoin")
    DEFAULT_TIME_RANGE_MINUTES: int = Field(default=60, ge=1, le=1440)

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FORMAT: Literal["text", "json"] = Field(default="text")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("API_BASE_URL")
    @classmethod
    def strip_trailing_slash(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return v.strip().rstrip("/")

    @property
    def base_url(self) -> str:
        """Effective backend base URL"""
        if self.API_BASE_URL:
            return self.API_BASE_URL
        return f"{self.BACKEND_SCHEME}://{self.BACKEND_HOST}:{self.BACKEND_PORT}"


@lru_cache()
def get_settings() -> Settings:
    """Return the process-wide settings instance"""
    return Settings()


# Global settings instance
settings = get_settings()
