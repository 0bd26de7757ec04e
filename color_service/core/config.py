"""
Color Service application configuration.
Manages all configurations through environment variables.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import List


class Settings(BaseSettings):
    """Application settings using Pydantic Settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    # Application Settings
    APP_NAME: str = "Color Service"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Logging Configuration
    LOG_DIR: str = "logs"
    LOG_TO_FILE: bool = True

    # API Settings
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # CORS Configuration
    CORS_ORIGINS: str = "http://localhost:3000"

    # Color Configuration
    RECENT_COLORS_CAPACITY: int = Field(default=5, ge=1, description="Maximum entries kept in the recent colors list")
    MAX_INTERPOLATION_STEPS: int = Field(default=1000, ge=1, description="Largest steps value accepted by dealers-choice")

    @property
    def cors_origins_list(self) -> List[str]:
        """Convert CORS_ORIGINS string to list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


# Global settings instance
_settings = None


def get_settings() -> Settings:
    """Returns the settings instance with lazy initialization.

    Configuration precedence:
    1) Environment variables (highest priority)
    2) Local .env file
    3) Defaults declared on Settings
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
