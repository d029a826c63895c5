"""
Application configuration.

Settings are read from environment variables (or a .env file) and
validated on load.
"""

from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache

VALID_ENVIRONMENTS = ("development", "staging", "production", "test")
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    app_name: str = "feedback-forms"

    # Environment Settings
    environment: str = "development"
    debug: bool = True
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_file: Optional[str] = None

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Validate environment setting"""
        v = v.lower()
        if v not in VALID_ENVIRONMENTS:
            raise ValueError(f"ENVIRONMENT must be one of {list(VALID_ENVIRONMENTS)}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Normalize and validate the log level name"""
        v = v.upper()
        if v not in VALID_LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {list(VALID_LOG_LEVELS)}")
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Returns:
        Settings instance with environment variables loaded
    """
    return Settings()


# Export settings instance for easy import
settings = get_settings()
