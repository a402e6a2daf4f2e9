"""
Configuration settings for casebook
"""
import logging
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SUPPORTED_STORE_BACKENDS = ("memory",)


class Settings(BaseSettings):
    """Application settings"""

    # Project Info
    PROJECT_NAME: str = "casebook"
    VERSION: str = "0.1.0"
    APP_ENV: str = Field(default="development")
    DEBUG: bool = Field(default=False)

    # Storage
    STORE_BACKEND: str = Field(default="memory")
    REQUEST_TIMEOUT_SECONDS: Optional[float] = Field(default=None)

    @field_validator('STORE_BACKEND')
    @classmethod
    def validate_store_backend(cls, v: str) -> str:
        """Only backends with a shipped implementation are accepted"""
        backend = v.strip().lower()
        if backend not in SUPPORTED_STORE_BACKENDS:
            raise ValueError(
                f"Unsupported STORE_BACKEND '{v}'. "
                f"Expected one of: {', '.join(SUPPORTED_STORE_BACKENDS)}"
            )
        return backend

    @field_validator('REQUEST_TIMEOUT_SECONDS')
    @classmethod
    def validate_request_timeout(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and v <= 0:
            raise ValueError("REQUEST_TIMEOUT_SECONDS must be positive")
        return v

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_JSON: bool = Field(default=True)

    @field_validator('LOG_LEVEL')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown LOG_LEVEL '{v}'")
        return level

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create settings instance
settings = Settings()
