"""
Environment configuration for the RotorWash theme settings service.
Uses Pydantic's settings management to handle environment variables
with proper type validation and default values.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file if it exists
env_path = Path('.') / '.env'
load_dotenv(dotenv_path=env_path)


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )

    # Application configuration
    APP_NAME: str = Field(default="RotorWash Settings", alias="PROJECT_NAME")
    API_VERSION: str = Field(default="1.0.1", alias="PROJECT_VERSION")
    THEME_NAME: str = "RotorWash"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    # Persistence
    DATABASE_URL: str = "sqlite:///./rotorwash.db"
    DATABASE_ECHO: bool = False
    OPTION_BACKEND: str = "sql"
    OPTION_NAME: str = "rw_theme_settings"

    # Site information used by the theme output helpers
    SITE_NAME: str = "RotorWash"
    SITE_DESCRIPTION: str = ""
    SITE_URL: str = "http://localhost:8000"
    LOCALE: str = "en_US"
    DEFAULT_OG_IMAGE: str = "/assets/images/rotorwash-default-image.jpg"

    # Monitoring and logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"
    LOG_FILE: Optional[str] = None
    ENABLE_STRUCTURED_LOGGING: bool = False

    @field_validator('OPTION_BACKEND')
    @classmethod
    def validate_option_backend(cls, v: str) -> str:
        """Only the SQL and in-memory backends are available"""
        v = v.strip().lower()
        if v not in ("sql", "memory"):
            raise ValueError("OPTION_BACKEND must be 'sql' or 'memory'")
        return v

    @field_validator('LOG_LEVEL')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.strip().upper()

    @field_validator('LOG_FORMAT')
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in ("text", "json"):
            raise ValueError("LOG_FORMAT must be 'text' or 'json'")
        return v

    def settings_page_title(self) -> str:
        """Title shown at the top of the settings page"""
        return f"Settings for {self.THEME_NAME}"

    def settings_menu_label(self) -> str:
        return f"{self.THEME_NAME} Settings"

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.ENVIRONMENT == "development"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
